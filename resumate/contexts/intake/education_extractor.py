"""
Education entry field extraction.

Line 0 is disambiguated into degree and institution, tried in order:
"Degree - Institution", "Degree, Institution", "Degree at Institution",
pipe-delimited segments, and finally a bare line classified by keyword.

The institution side of any line may carry location and date details
("State University, Springfield, IL, 2020" or "MIT | Cambridge, MA | 2020").
Those segments are classified by pattern, not by position.

Later lines go through an ordered rule table, one field per line, each
field filled only once:
institution -> degree -> GPA -> honors -> graduation date -> location ->
major -> minor.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from resumate.contexts.intake.defaults import EDUCATION_PLACEHOLDERS
from resumate.contexts.intake.line_rules import LineRule, classify_line
from resumate.contexts.intake.patterns import (
    DatePatterns,
    find_date_range,
    find_gpa,
    find_graduation_date,
    find_honors,
    is_bullet,
    is_degree,
    is_institution,
    is_known_location,
    is_location_line,
    strip_bullet,
    strip_date_range,
)
from resumate.contexts.intake.resume_data_structure import EducationEntry

# First spaced hyphen or any en/em dash
_DEGREE_DASH = re.compile(r"\s+-+\s+|\s*[–—]\s*")
_DEGREE_AT = re.compile(r"\s+at\s+", re.IGNORECASE)

_LEADING_FRAGMENT = re.compile(r"^[^()]*\)\s*")
_PARENTHETICAL = re.compile(r"\s*\([^)]*\)")
_TRAILING_DATE = re.compile(
    rf"[\s,\-]*(?:{DatePatterns.GRADUATION_DATE.pattern})\s*$", re.IGNORECASE
)

_MAJOR_IN_DEGREE = re.compile(r"\b(?:in|of)\s+([^,|(]+)", re.IGNORECASE)
_MAJOR_LABEL = re.compile(r"^(?:Major|Concentration|Field of Study)\s*[:\-]?\s*(?P<value>.+)$", re.IGNORECASE)
_MINOR_LABEL = re.compile(r"^Minor\s*[:\-]?\s*(?P<value>.+)$", re.IGNORECASE)

# Longest line still considered a standalone graduation date line
_MAX_DATE_LINE = 60


@dataclass
class EducationDraft:
    """Fields resolved so far for one entry."""

    degree: str = ""
    institution: str = ""
    location: str = ""
    graduation_date: str = ""
    gpa: str = ""
    honors: List[str] = field(default_factory=list)
    major: str = ""
    minor: str = ""

    def absorb_details(self, raw: str) -> None:
        """Fill institution, location and date from an institution-bearing string."""
        institution, location, date = split_institution_details(raw)
        if institution and not self.institution:
            self.institution = institution
        if location and not self.location:
            self.location = location
        if date and not self.graduation_date:
            self.graduation_date = date


# =============================================================================
# INSTITUTION HELPERS
# =============================================================================


def _is_date_segment(segment: str) -> bool:
    segment = segment.strip()
    return bool(find_date_range(segment) or DatePatterns.GRADUATION_DATE.fullmatch(segment))


def _segment_date(segment: str) -> str:
    return find_graduation_date(segment) or segment.strip()


def _join_city_region(segments: List[str]) -> List[str]:
    """Re-join ["Springfield", "IL"] into ["Springfield, IL"] after a comma split."""
    joined = []
    i = 0
    while i < len(segments):
        if i + 1 < len(segments) and is_known_location(f"{segments[i]}, {segments[i + 1]}"):
            joined.append(f"{segments[i]}, {segments[i + 1]}")
            i += 2
        else:
            joined.append(segments[i])
            i += 1
    return joined


def split_institution_details(raw: str) -> Tuple[str, str, str]:
    """
    Classify the segments of an institution-bearing string.

    Segments are split on pipes, or on commas when there are none. Each
    segment is classified independently as date, location or institution;
    GPA and honors segments are skipped.

    Args:
        raw: e.g. "State University, Springfield, IL, 2020"

    Returns:
        (institution, location, graduation date), "" for anything not found
    """
    raw = raw.strip()
    if not raw:
        return "", "", ""

    if "|" in raw:
        segments = [seg.strip() for seg in raw.split("|") if seg.strip()]
    else:
        segments = _join_city_region([seg.strip() for seg in raw.split(",") if seg.strip()])

    institution, location, date = "", "", ""
    leftovers = []
    for segment in segments:
        if find_gpa(segment) or find_honors(segment):
            continue
        if not date and _is_date_segment(segment):
            date = _segment_date(segment)
        elif not location and (is_known_location(segment) or is_location_line(segment)):
            location = segment.rstrip(".")
        elif not institution and is_institution(segment):
            institution = segment
        else:
            leftovers.append(segment)

    if not institution and leftovers:
        institution = leftovers[0]

    return normalize_institution_name(institution), location, date


def normalize_institution_name(raw: str) -> str:
    """
    Clean an institution name.

    Strips parenthetical fragments (including a dangling "ML) " left over
    from a split degree), trailing ", City, Region" clauses and trailing date
    clauses.

    Args:
        raw: Raw institution-bearing text

    Returns:
        Institution name, or "" if nothing is left
    """
    text = raw.strip()
    if not text:
        return ""

    text = _LEADING_FRAGMENT.sub("", text)
    text = _PARENTHETICAL.sub("", text)

    date_range = find_date_range(text)
    if date_range:
        text = strip_date_range(text, date_range)
    text = _TRAILING_DATE.sub("", text)

    parts = [part.strip() for part in text.split(",")]
    for k in range(1, len(parts)):
        tail = ", ".join(parts[k:])
        if is_known_location(tail) or is_location_line(tail):
            text = ", ".join(parts[:k])
            break

    return text.strip().strip(",|-:;").strip()


def derive_major(degree: str) -> str:
    """Major implied by "... in X" / "... of X" in a degree, or ""."""
    match = _MAJOR_IN_DEGREE.search(degree)
    return match.group(1).strip() if match else ""


# =============================================================================
# FIRST LINE
# =============================================================================


def _assign_pair(left: str, right: str, draft: EducationDraft) -> None:
    """Decide which side is the degree; default is left."""
    swap = (is_institution(left) and not is_institution(right)) or (
        is_degree(right) and not is_degree(left)
    )
    degree, institution_side = (right, left) if swap else (left, right)
    draft.degree = degree.strip()
    draft.absorb_details(institution_side)


def parse_first_line(line: str, draft: EducationDraft) -> None:
    """Resolve degree, institution and possibly location/date from line 0."""
    text = strip_bullet(line) if is_bullet(line) else line

    date_range = find_date_range(text)
    if date_range:
        draft.graduation_date = date_range.text
        text = strip_date_range(text, date_range)

    gpa = find_gpa(text)
    if gpa:
        draft.gpa = gpa
    draft.honors = find_honors(text)

    parts = _DEGREE_DASH.split(text, maxsplit=1)
    if len(parts) == 2 and parts[0].strip() and parts[1].strip():
        _assign_pair(parts[0], parts[1], draft)
        return

    if "|" not in text:
        left, sep, right = text.partition(",")
        if sep and left.strip() and right.strip() and (is_degree(left) or is_degree(right)):
            _assign_pair(left, right, draft)
            return

    parts = _DEGREE_AT.split(text, maxsplit=1)
    if len(parts) == 2 and parts[0].strip() and parts[1].strip():
        _assign_pair(parts[0], parts[1], draft)
        return

    if "|" in text:
        segments = [seg.strip() for seg in text.split("|") if seg.strip()]
        degree_segment = next((seg for seg in segments if is_degree(seg)), "")
        if degree_segment:
            draft.degree = degree_segment
            segments = [seg for seg in segments if seg is not degree_segment]
        draft.absorb_details(" | ".join(segments))
        return

    if is_degree(text) or not is_institution(text):
        draft.degree = text.strip()
    else:
        draft.absorb_details(text)


# =============================================================================
# LATER LINES
# =============================================================================


def _set_degree(line, draft):
    text = strip_bullet(line) if is_bullet(line) else line
    date_range = find_date_range(text)
    if date_range:
        if not draft.graduation_date:
            draft.graduation_date = date_range.text
        text = strip_date_range(text, date_range)
    else:
        # "Bachelor of Arts in Economics, May 2019"
        match = _TRAILING_DATE.search(text)
        if match and match.start() > 0:
            if not draft.graduation_date:
                draft.graduation_date = match.group("date").strip()
            text = text[: match.start()]
    draft.degree = text.strip().rstrip(",;|-").strip()


def _label_value(pattern: re.Pattern, line: str) -> Optional[str]:
    match = pattern.match(strip_bullet(line))
    return match.group("value").strip() if match else None


EDUCATION_RULES = (
    LineRule(
        "institution",
        lambda line, d: not d.institution and is_institution(line) and not is_bullet(line),
        lambda line, d: d.absorb_details(line),
    ),
    LineRule(
        "degree",
        lambda line, d: not d.degree and is_degree(strip_bullet(line)),
        _set_degree,
    ),
    LineRule(
        "gpa",
        lambda line, d: not d.gpa and find_gpa(line) is not None,
        lambda line, d: setattr(d, "gpa", find_gpa(line)),
    ),
    LineRule(
        "honors",
        lambda line, d: not d.honors and bool(find_honors(line)),
        lambda line, d: setattr(d, "honors", find_honors(line)),
    ),
    LineRule(
        "graduation_date",
        lambda line, d: (
            not d.graduation_date
            and len(line) < _MAX_DATE_LINE
            and find_graduation_date(line) is not None
        ),
        lambda line, d: setattr(d, "graduation_date", find_graduation_date(line)),
    ),
    LineRule(
        "location",
        lambda line, d: not d.location and len(line) < 50 and is_location_line(line),
        lambda line, d: setattr(d, "location", line.rstrip(",.").strip()),
    ),
    LineRule(
        "major",
        lambda line, d: not d.major and _label_value(_MAJOR_LABEL, line) is not None,
        lambda line, d: setattr(d, "major", _label_value(_MAJOR_LABEL, line)),
    ),
    LineRule(
        "minor",
        lambda line, d: not d.minor and _label_value(_MINOR_LABEL, line) is not None,
        lambda line, d: setattr(d, "minor", _label_value(_MINOR_LABEL, line)),
    ),
)

# =============================================================================
# ENTRY
# =============================================================================


def finalize_education(draft: EducationDraft) -> EducationEntry:
    """Apply fallbacks; the major is kept only when the degree doesn't already name it."""
    major = draft.major or derive_major(draft.degree)
    if draft.degree:
        degree = draft.degree
    elif major:
        degree = f"Degree in {major}"
    else:
        degree = EDUCATION_PLACEHOLDERS["degree"]

    return EducationEntry(
        degree=degree,
        institution=draft.institution or EDUCATION_PLACEHOLDERS["institution"],
        location=draft.location,
        graduation_date=draft.graduation_date,
        gpa=draft.gpa or None,
        honors=list(draft.honors) or None,
        # A major already spelled out in the degree text is not repeated
        major=major if major and major.lower() not in degree.lower() else None,
        minor=draft.minor or None,
    )


def extract_education_entry(entry_text: str) -> Optional[EducationEntry]:
    """
    Turn one entry's text into an EducationEntry.

    Returns:
        EducationEntry, or None if the entry has no non-blank lines
    """
    lines = [line.strip() for line in entry_text.splitlines() if line.strip()]
    if not lines:
        return None

    draft = EducationDraft()
    parse_first_line(lines[0], draft)
    for line in lines[1:]:
        classify_line(line, draft, EDUCATION_RULES)

    return finalize_education(draft)


def extract_education(entries: List[str]) -> List[EducationEntry]:
    """Extract every entry, keeping document order."""
    results = []
    for entry_text in entries:
        entry = extract_education_entry(entry_text)
        if entry is not None:
            results.append(entry)
    return results
