"""
Experience entry field extraction.

The first line of an entry carries the title and company (and often the
dates). Every later line goes through an ordered rule table:

1. bullet -> achievement
2. date range (until dates are known) -> start/end dates
3. short, non-date, non-location line (until company is known) -> company
4. short "City, Region" line (until location is known) -> location
5. any line over 10 chars once dates are known -> achievement
6. any line over 20 chars before dates are known -> achievement

Unresolved fields get placeholders; nothing here raises.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from resumate.contexts.intake.defaults import (
    EXPERIENCE_ACHIEVEMENT_PLACEHOLDER,
    EXPERIENCE_PLACEHOLDERS,
)
from resumate.contexts.intake.line_rules import LineRule, classify_line
from resumate.contexts.intake.patterns import (
    DateRange,
    find_date_range,
    has_company_suffix,
    is_bullet,
    is_known_location,
    is_location_line,
    looks_like_date,
    strip_bullet,
    strip_date_range,
)
from resumate.contexts.intake.resume_data_structure import ExperienceEntry

# Title/company separators in priority order
TITLE_SEPARATORS = (
    ("dash", re.compile(r"\s+-+\s+|\s*[–—]\s*")),
    ("pipe", re.compile(r"\s*\|\s*")),
    ("at", re.compile(r"\s+at\s+", re.IGNORECASE)),
    ("comma", re.compile(r",\s*")),
)


@dataclass
class ExperienceDraft:
    """Fields resolved so far for one entry."""

    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    achievements: List[str] = field(default_factory=list)

    @property
    def has_dates(self) -> bool:
        return bool(self.start_date)

    def set_dates(self, date_range: DateRange) -> None:
        self.start_date = date_range.start
        self.end_date = date_range.end
        self.is_current = date_range.is_current

    def set_company(self, company: str) -> None:
        """Set company, moving a trailing ", City, Region" into location."""
        company, location = split_company_location(company)
        self.company = company
        if location and not self.location:
            self.location = location


# =============================================================================
# FIRST LINE
# =============================================================================


def split_title_company(text: str) -> Tuple[str, List[str]]:
    """
    Split "Title <sep> Company [<sep> Rest]" on the first separator that works.

    Returns:
        (separator name, parts); parts has one element when nothing split
    """
    for name, pattern in TITLE_SEPARATORS:
        parts = [part.strip() for part in pattern.split(text) if part.strip()]
        if len(parts) >= 2:
            return name, parts
    return "", [text.strip()] if text.strip() else []


def split_company_location(company: str) -> Tuple[str, str]:
    """
    Split "Acme Corp, Boston, MA" into ("Acme Corp", "Boston, MA").

    Only a location-shaped remainder is split off, so legal suffixes stay
    with the name: "Acme, Inc." is kept whole and "Acme, Inc., Austin, TX"
    becomes ("Acme, Inc.", "Austin, TX").

    Returns:
        (company, location); location is "" when no trailing location is found
    """
    text = company.strip()
    for index, char in enumerate(text):
        if char != ",":
            continue
        head, rest = text[:index].strip(), text[index + 1 :].strip()
        if not head or not rest or has_company_suffix(rest):
            continue
        if is_location_line(rest) or is_known_location(rest):
            return head, rest
    return text, ""


def parse_first_line(line: str, draft: ExperienceDraft) -> None:
    """Resolve title, company, dates and possibly location from line 0."""
    text = strip_bullet(line) if is_bullet(line) else line

    date_range = find_date_range(text)
    if date_range:
        draft.set_dates(date_range)
        text = strip_date_range(text, date_range)

    _, parts = split_title_company(text)
    if not parts:
        return

    draft.title = parts[0]
    if len(parts) >= 2:
        draft.set_company(parts[1])
    if len(parts) >= 3 and not draft.location:
        rest = ", ".join(parts[2:])
        if is_location_line(rest):
            draft.location = rest


# =============================================================================
# LATER LINES
# =============================================================================


def _add_bullet(line, draft):
    achievement = strip_bullet(line)
    if achievement:
        draft.achievements.append(achievement)


def _accepts_dates(line, draft):
    return not draft.has_dates and find_date_range(line) is not None


def _add_dates(line, draft):
    date_range = find_date_range(line)
    draft.set_dates(date_range)
    # "Boston, MA | Jan 2020 - Present"
    rest = strip_date_range(line, date_range)
    if rest and not draft.location and is_location_line(rest):
        draft.location = rest


def _accepts_company(line, draft):
    return (
        not draft.company
        and not looks_like_date(line)
        and len(line) < 80
        and not line.endswith(".")
        and not is_known_location(line)
    )


def _accepts_location(line, draft):
    return not draft.location and len(line) < 50 and is_location_line(line)


def _set_location(line, draft):
    draft.location = line.rstrip(",.").strip()


def _accepts_dated_continuation(line, draft):
    return draft.has_dates and len(line) > 10 and not is_location_line(line)


def _accepts_undated_continuation(line, draft):
    return not draft.has_dates and len(line) > 20 and not is_location_line(line)


def _add_achievement(line, draft):
    draft.achievements.append(line)


EXPERIENCE_RULES = (
    LineRule("bullet", lambda line, draft: is_bullet(line), _add_bullet),
    LineRule("dates", _accepts_dates, _add_dates),
    LineRule("company", _accepts_company, lambda line, draft: draft.set_company(line)),
    LineRule("location", _accepts_location, _set_location),
    LineRule("dated_continuation", _accepts_dated_continuation, _add_achievement),
    LineRule("undated_continuation", _accepts_undated_continuation, _add_achievement),
)

# =============================================================================
# ENTRY
# =============================================================================


def finalize_experience(draft: ExperienceDraft) -> ExperienceEntry:
    """Fill placeholders for anything still unresolved."""
    return ExperienceEntry(
        title=draft.title or EXPERIENCE_PLACEHOLDERS["title"],
        company=draft.company or EXPERIENCE_PLACEHOLDERS["company"],
        location=draft.location or EXPERIENCE_PLACEHOLDERS["location"],
        start_date=draft.start_date or EXPERIENCE_PLACEHOLDERS["start_date"],
        end_date=draft.end_date or EXPERIENCE_PLACEHOLDERS["end_date"],
        is_current=draft.is_current,
        achievements=draft.achievements or [EXPERIENCE_ACHIEVEMENT_PLACEHOLDER],
    )


def extract_experience_entry(entry_text: str) -> Optional[ExperienceEntry]:
    """
    Turn one entry's text into an ExperienceEntry.

    Args:
        entry_text: Text of a single job, as produced by split_entries()

    Returns:
        ExperienceEntry, or None if the entry has no non-blank lines
    """
    lines = [line.strip() for line in entry_text.splitlines() if line.strip()]
    if not lines:
        return None

    draft = ExperienceDraft()
    parse_first_line(lines[0], draft)
    for line in lines[1:]:
        classify_line(line, draft, EXPERIENCE_RULES)

    return finalize_experience(draft)


def extract_experience(entries: List[str]) -> List[ExperienceEntry]:
    """Extract every entry, keeping document order."""
    results = []
    for entry_text in entries:
        entry = extract_experience_entry(entry_text)
        if entry is not None:
            results.append(entry)
    return results
