"""
Reusable patterns and recognizers for résumé text parsing.

This module provides the low-level line recognizers shared by every field
extractor in the intake context: date ranges, "City, Region" locations,
bullet glyphs, contact details, and the keyword vocabularies used to tell a
degree from an institution or a job title from a company.

Pattern classes follow the convention from section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns

All helpers are pure functions of a single string.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

# Sentinel end date for ongoing positions
PRESENT = "Present"

# =============================================================================
# GEOGRAPHIC CONSTANTS
# =============================================================================

US_STATES = (
    "Alabama",
    "Alaska",
    "Arizona",
    "Arkansas",
    "California",
    "Colorado",
    "Connecticut",
    "Delaware",
    "Florida",
    "Georgia",
    "Hawaii",
    "Idaho",
    "Illinois",
    "Indiana",
    "Iowa",
    "Kansas",
    "Kentucky",
    "Louisiana",
    "Maine",
    "Maryland",
    "Massachusetts",
    "Michigan",
    "Minnesota",
    "Mississippi",
    "Missouri",
    "Montana",
    "Nebraska",
    "Nevada",
    "New Hampshire",
    "New Jersey",
    "New Mexico",
    "New York",
    "North Carolina",
    "North Dakota",
    "Ohio",
    "Oklahoma",
    "Oregon",
    "Pennsylvania",
    "Rhode Island",
    "South Carolina",
    "South Dakota",
    "Tennessee",
    "Texas",
    "Utah",
    "Vermont",
    "Virginia",
    "Washington",
    "West Virginia",
    "Wisconsin",
    "Wyoming",
)

# Countries that show up as the region half of "City, Country"
COUNTRIES = (
    "Australia",
    "Brazil",
    "Canada",
    "China",
    "France",
    "Germany",
    "India",
    "Ireland",
    "Israel",
    "Italy",
    "Japan",
    "Mexico",
    "Netherlands",
    "Nigeria",
    "Pakistan",
    "Poland",
    "Singapore",
    "Spain",
    "Sweden",
    "Switzerland",
    "United Kingdom",
    "United States",
    "USA",
    "UK",
)

_KNOWN_REGION_PATTERN = "|".join(re.escape(s) for s in US_STATES + COUNTRIES)

# =============================================================================
# DATE PATTERNS
# =============================================================================

_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\.?"
)
_SEASON = r"(?:Spring|Summer|Fall|Autumn|Winter)"
_YEAR = r"(?:19|20)\d{2}"

# One point in time: "Jan 2021", "January 2021", "Fall 2019", "05/2021", "2021"
_DATE_POINT = rf"(?:(?:{_MONTH}|{_SEASON}),?\s+{_YEAR}|\d{{1,2}}/(?:\d{{4}}|\d{{2}})|{_YEAR})"

# Open-ended markers, normalized to PRESENT
_ONGOING = r"(?:Present|Current|Now|Ongoing|Today)"

# Dash-like range separator (the normalizer already folds en/em dashes to "-")
_RANGE_SEPARATOR = r"\s*(?:-+|–|—|\bto\b|\buntil\b)\s*"


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for dates in experience and education lines.

    Supports:
    - Ranges: "Jan 2021 - Present", "2019-2021", "05/2018 to 06/2020"
    - Single points: "May 2020", "Expected 2025", "Class of 2019"
    """

    # Full range with named start/end groups
    DATE_RANGE: re.Pattern = re.compile(
        rf"(?<![\w/])(?P<start>{_DATE_POINT}){_RANGE_SEPARATOR}(?P<end>{_DATE_POINT}|{_ONGOING})\b",
        re.IGNORECASE,
    )

    # Line begins with something date-shaped
    DATE_PREFIX: re.Pattern = re.compile(rf"^\s*(?:{_DATE_POINT}|{_ONGOING}\b)", re.IGNORECASE)

    # Single graduation-style date, optional "Graduated:" label dropped
    GRADUATION_DATE: re.Pattern = re.compile(
        rf"(?:Graduat(?:ed|ion|ing)(?:\s+Date)?\s*:?\s*)?"
        rf"(?P<date>(?:Expected|Anticipated)\s+{_DATE_POINT}|Class\s+of\s+{_YEAR}|{_DATE_POINT})",
        re.IGNORECASE,
    )

    ONGOING: re.Pattern = re.compile(rf"^{_ONGOING}$", re.IGNORECASE)


# =============================================================================
# LOCATION PATTERNS
# =============================================================================

# Word counts and lengths are bounded so unanchored searches stay linear
_CITY = r"[A-Z][A-Za-z.'\-]{0,30}(?:[ \t]+[A-Z][A-Za-z.'\-]{0,30}){0,4}"
_REGION = r"(?:[A-Z]{2,30}|[A-Z][a-z]{1,30}(?:[ \t]+[A-Z][a-z]{1,30}){0,3})"


@dataclass(frozen=True)
class LocationPatterns:
    """
    Regex patterns for "City, Region" locations.

    CITY_REGION is the generic recognizer: capitalized word(s), a comma, then
    a token of two or more letters ("Boston, MA", "Hyderabad, India").
    CITY_STATE_ABBREV and CITY_STATE_FULL are stricter and only accept a
    two/three-letter code or a known state/country name as the region.
    """

    CITY_REGION: re.Pattern = re.compile(rf"(?<![\w.])(?P<city>{_CITY}),\s*(?P<region>{_REGION})\b")

    # Whole line is a location, optional trailing country
    LOCATION_LINE: re.Pattern = re.compile(rf"^{_CITY},\s*{_REGION}(?:,\s*{_REGION})?\.?$")

    # City, State (2-3 letter abbreviation) - e.g., "Baltimore, MD"
    CITY_STATE_ABBREV: re.Pattern = re.compile(rf"^{_CITY},\s*[A-Z]{{2,3}}(?:,\s*{_REGION})?$")

    # City, State/Country (full name) - e.g., "Baltimore, Maryland"
    CITY_STATE_FULL: re.Pattern = re.compile(
        rf"^{_CITY},\s*(?:{_KNOWN_REGION_PATTERN})(?:,\s*{_REGION})?$"
    )


# =============================================================================
# BULLET AND LINK PATTERNS
# =============================================================================


@dataclass(frozen=True)
class MarkerPatterns:
    """
    Regex patterns for list markers and links.
    """

    # Glyph bullets may hug the text; ASCII dash/star bullets need a space
    BULLET: re.Pattern = re.compile(r"^\s*(?:[•·▪▸►‣◦●○■□➢➤✓✔]\s*|[-*–—>]\s+)")

    # "1. Title" / "2) Title"
    NUMBERING: re.Pattern = re.compile(r"^\s*\d{1,2}[.)]\s+")

    URL_SCHEME: re.Pattern = re.compile(r"https?://", re.IGNORECASE)

    URL: re.Pattern = re.compile(r"https?://[^\s,;|)\]>]+", re.IGNORECASE)


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact details in the résumé header.
    """

    EMAIL: re.Pattern = re.compile(r"(?<![\w.+-])[\w.+-]+@[\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,}")

    # Generic international shape; digit count is checked separately
    PHONE: re.Pattern = re.compile(
        r"(?<![\w/])(?:\+\d{1,3}[\s.-]?)?(?:\(\d{1,4}\)[\s.-]?)?\d{2,5}(?:[\s.-]?\d{2,5}){1,4}(?![\w/])"
    )

    LINKEDIN: re.Pattern = re.compile(r"(?:www\.)?linkedin\.com/in/[\w%-]+", re.IGNORECASE)

    GITHUB: re.Pattern = re.compile(r"(?:www\.)?github\.com/[\w-]+", re.IGNORECASE)

    WEBSITE: re.Pattern = re.compile(r"https?://[\w.-]+\.[A-Za-z]{2,}(?:/[^\s,;|)]*)?", re.IGNORECASE)


PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15

# =============================================================================
# KEYWORD VOCABULARIES
# =============================================================================

_DEGREE_WORDS = (
    r"Bachelor(?:'?s)?|Master(?:'?s)?|Doctorate|Doctor\s+of|Associate(?:'?s)?\s+(?:of|in|degree)"
    r"|Diploma|Certificate|Ph\.?\s?D\.?|M\.?B\.A\.?|MBA|B\.\s?Sc\.?|M\.\s?Sc\.?|BSc|MSc"
    r"|B\.?\s?Tech|M\.?\s?Tech|B\.?\s?Eng|M\.?\s?Eng|B\.[AS]\.?|M\.[AS]\.?|B\.E\.|BBA|BFA|MFA"
    r"|Ed\.?D|J\.D\.|M\.D\."
)


@dataclass(frozen=True)
class KeywordPatterns:
    """
    Keyword vocabularies used to classify lines.

    These aren't meant to be exhaustive. The degree vocabulary only accepts
    bare two-letter abbreviations (BS, MS, MD, ...) at the start of a line,
    since anywhere else they collide with state codes and product names.
    """

    DEGREE: re.Pattern = re.compile(rf"\b(?:{_DEGREE_WORDS})(?![A-Za-z])", re.IGNORECASE)

    DEGREE_PREFIX: re.Pattern = re.compile(
        rf"^\s*(?:(?:{_DEGREE_WORDS})(?![A-Za-z])"
        rf"|(?-i:BA|BS|MA|MS|MD|JD|BE|ME|AA|AS)(?![A-Za-z'])|Associate\b)",
        re.IGNORECASE,
    )

    INSTITUTION: re.Pattern = re.compile(
        r"\b(?:University|College|Institute|School|Academy|Polytechnic|Conservatory|Universidad)\b",
        re.IGNORECASE,
    )

    ROLE: re.Pattern = re.compile(
        r"\b(?:Manager|Developer|Engineer|Analyst|Specialist|Coordinator|Director|Lead|Senior"
        r"|Junior|Associate|Intern|Consultant|Designer|Architect|Administrator|Scientist"
        r"|Officer|Assistant|Programmer|Technician|Founder|President)\b",
        re.IGNORECASE,
    )

    COMPANY_SUFFIX: re.Pattern = re.compile(
        r"\b(?:Inc\.?|LLC|Corp\.?|Corporation|Ltd\.?|Limited|Company|Co\.|Group|Associates"
        r"|GmbH|LLP|PLC)(?!\w)"
    )

    HONORS: re.Pattern = re.compile(
        r"Summa Cum Laude|Magna Cum Laude|Cum Laude|With (?:Highest |High )?Honou?rs"
        r"|With Distinction|First Class Honou?rs|Dean'?s List|Honou?r Roll|Academic Excellence",
        re.IGNORECASE,
    )


@dataclass(frozen=True)
class GpaPatterns:
    """
    GPA variants, tried in order.
    """

    # "GPA: 3.8/4.0", "Cumulative GPA 3.8", "CGPA - 9.1 / 10"
    LABELED: re.Pattern = re.compile(
        r"\b(?:C?GPA|Grade Point Average)\b\s*[:\-]?\s*(?P<value>\d+(?:\.\d+)?)"
        r"(?:\s*/\s*(?P<scale>\d+(?:\.\d+)?))?",
        re.IGNORECASE,
    )

    # "3.8/4.0 GPA"
    TRAILING: re.Pattern = re.compile(
        r"(?P<value>\d+(?:\.\d+)?)\s*/\s*(?P<scale>\d+(?:\.\d+)?)\s*C?GPA\b", re.IGNORECASE
    )


GPA_PATTERNS = [GpaPatterns.LABELED, GpaPatterns.TRAILING]

# =============================================================================
# DATE HELPERS
# =============================================================================


@dataclass(frozen=True)
class DateRange:
    """
    A recognized date range within a line.

    Attributes:
        start: Start date text as written (e.g., "Jan 2021")
        end: End date text, or PRESENT for ongoing ranges
        is_current: True when the range is open-ended
        span: (start, end) character offsets of the whole range in the line
    """

    start: str
    end: str
    is_current: bool
    span: tuple

    @property
    def text(self) -> str:
        return f"{self.start} - {self.end}"


def find_date_range(line: str) -> Optional[DateRange]:
    """
    Find the first date range in a line.

    "Present"/"Current" (any case) end markers are normalized to PRESENT
    and flagged as current.

    Args:
        line: Single line of résumé text

    Returns:
        DateRange, or None if the line holds no range
    """
    match = DatePatterns.DATE_RANGE.search(line)
    if not match:
        return None

    start = match.group("start").strip()
    end = match.group("end").strip()
    is_current = bool(DatePatterns.ONGOING.match(end))
    if is_current:
        end = PRESENT

    return DateRange(start=start, end=end, is_current=is_current, span=match.span())


def strip_date_range(line: str, date_range: DateRange) -> str:
    """
    Remove a date range from a line and tidy the separators it leaves behind.

    Args:
        line: Line the range was found in
        date_range: Result of find_date_range() on the same line

    Returns:
        Remaining text with dangling separators and empty brackets removed
    """
    start, end = date_range.span
    remainder = line[:start] + " " + line[end:]
    remainder = re.sub(r"\(\s*\)|\[\s*\]", " ", remainder)
    remainder = re.sub(r"\s{2,}", " ", remainder)
    return remainder.strip().strip(",|-–—:;·•").strip()


def looks_like_date(line: str) -> bool:
    """Check if a line starts with a date or an open-ended marker."""
    return bool(DatePatterns.DATE_PREFIX.match(line))


def find_graduation_date(line: str) -> Optional[str]:
    """
    Find a graduation date in a line.

    Ranges win over single dates ("2016 - 2020" stays a range, ongoing
    ranges end in PRESENT).

    Returns:
        Date text, or None if nothing date-shaped is found
    """
    date_range = find_date_range(line)
    if date_range:
        return date_range.text

    match = DatePatterns.GRADUATION_DATE.search(line)
    if match:
        return match.group("date").strip()
    return None


# =============================================================================
# LOCATION HELPERS
# =============================================================================


def find_location(text: str) -> Optional[str]:
    """Find the first "City, Region" token in text."""
    match = LocationPatterns.CITY_REGION.search(text)
    if match:
        return f"{match.group('city')}, {match.group('region')}"
    return None


def is_location_line(line: str) -> bool:
    """Check if an entire line is a "City, Region" location (generic shape)."""
    return bool(LocationPatterns.LOCATION_LINE.match(line.strip()))


def is_known_location(line: str) -> bool:
    """
    Check if an entire line is a location with a recognizable region.

    Stricter than is_location_line(): the region must be a short uppercase
    code or a known state/country name, so "Acme Corp, Boston" is rejected.
    """
    stripped = line.strip().rstrip(".")
    return bool(
        LocationPatterns.CITY_STATE_ABBREV.match(stripped)
        or LocationPatterns.CITY_STATE_FULL.match(stripped)
    )


# =============================================================================
# MARKER HELPERS
# =============================================================================


def is_bullet(line: str) -> bool:
    """Check if a line starts with a bullet glyph."""
    return bool(MarkerPatterns.BULLET.match(line))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet glyph and surrounding whitespace."""
    return MarkerPatterns.BULLET.sub("", line, count=1).strip()


def has_url(line: str) -> bool:
    """Check if a line contains an http(s) URL scheme."""
    return bool(MarkerPatterns.URL_SCHEME.search(line))


def find_url(line: str) -> Optional[str]:
    """Return the first http(s) URL token in a line."""
    match = MarkerPatterns.URL.search(line)
    return match.group(0).rstrip(".") if match else None


# =============================================================================
# KEYWORD HELPERS
# =============================================================================


def is_degree(text: str) -> bool:
    """Check if text names a degree (full words anywhere, bare abbreviations at start)."""
    return bool(KeywordPatterns.DEGREE.search(text) or KeywordPatterns.DEGREE_PREFIX.match(text))


def starts_with_degree(line: str) -> bool:
    """Check if a line opens with a degree keyword."""
    return bool(KeywordPatterns.DEGREE_PREFIX.match(line))


def is_institution(text: str) -> bool:
    """Check if text contains an institution keyword."""
    return bool(KeywordPatterns.INSTITUTION.search(text))


def has_role_keyword(text: str) -> bool:
    """Check if text contains a job-title keyword."""
    return bool(KeywordPatterns.ROLE.search(text))


def has_company_suffix(text: str) -> bool:
    """Check if text contains a legal company suffix (Inc, LLC, Corp, ...)."""
    return bool(KeywordPatterns.COMPANY_SUFFIX.search(text))


def find_honors(text: str) -> List[str]:
    """Return every honors phrase in text, in order of appearance."""
    return [match.group(0) for match in KeywordPatterns.HONORS.finditer(text)]


def find_gpa(text: str) -> Optional[str]:
    """
    Find a GPA value in text.

    Returns:
        "3.8" or "3.8/4.0" style string, or None
    """
    for pattern in GPA_PATTERNS:
        match = pattern.search(text)
        if match:
            gpa = match.group("value")
            if match.group("scale"):
                gpa += f"/{match.group('scale')}"
            return gpa
    return None


def split_items(text: str, delimiters: str = ",;|") -> List[str]:
    """
    Split a delimited list and drop empty items.

    Args:
        text: Delimited text (e.g., "Python, Go; Rust")
        delimiters: Characters to split on

    Returns:
        Stripped, non-empty items in original order
    """
    parts = re.split(f"[{re.escape(delimiters)}]", text)
    return [part.strip() for part in parts if part.strip()]
