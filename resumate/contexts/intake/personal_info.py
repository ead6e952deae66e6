"""
Personal info extraction from the résumé header.

The name, phone and location come from the first few lines only; email and
profile links are searched across the whole text, since they often sit in a
footer.
"""

import re
from typing import List, Optional

from resumate.contexts.intake.defaults import NAME_PLACEHOLDER
from resumate.contexts.intake.logger import _log_debug
from resumate.contexts.intake.parse_config import ParseConfig, get_parse_config
from resumate.contexts.intake.patterns import (
    PHONE_MAX_DIGITS,
    PHONE_MIN_DIGITS,
    ContactPatterns,
    find_date_range,
    find_location,
    has_url,
    is_known_location,
)
from resumate.contexts.intake.resume_data_structure import PersonalInfo
from resumate.contexts.intake.section_patterns import normalize_heading

# Header lines are often "Boston, MA | jane@x.com | 555-123-4567"
_HEADER_SEPARATORS = re.compile(r"\s*[|•·]\s*")

_PROFILE_DOMAINS = ("linkedin.com", "github.com")


def _header_lines(text: str, scan_lines: int) -> List[str]:
    return [line.strip() for line in text.splitlines()[:scan_lines]]


def find_name(lines: List[str], config: ParseConfig) -> Optional[str]:
    """
    Pick the first header line that can be a person's name.

    Skips lines holding an email, a URL or profile domain, section headings,
    and lines without letters.
    """
    for line in lines:
        if not line or len(line) >= config.max_name_length:
            continue
        lowered = line.lower()
        if "@" in line or has_url(line) or any(domain in lowered for domain in _PROFILE_DOMAINS):
            continue
        if normalize_heading(line) in config.all_aliases:
            continue
        if not any(c.isalpha() for c in line):
            continue
        return line
    return None


def find_phone(lines: List[str]) -> str:
    """First phone-shaped token with a plausible digit count, or ""."""
    for line in lines:
        for match in ContactPatterns.PHONE.finditer(line):
            candidate = match.group(0).strip()
            digits = sum(c.isdigit() for c in candidate)
            if not PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS:
                continue
            if find_date_range(candidate):
                continue
            return candidate
    return ""


def find_header_location(lines: List[str], name: Optional[str]) -> str:
    """
    Find "City, Region" in the header.

    Prefers a header segment with a recognizable region ("Boston, MA",
    "Austin, Texas") and falls back to the first generic City, Region token.
    """
    candidates = [line for line in lines if line and line != name]

    for line in candidates:
        for segment in _HEADER_SEPARATORS.split(line):
            if is_known_location(segment):
                return segment.strip().rstrip(".")

    for line in candidates:
        if "@" in line or has_url(line):
            continue
        location = find_location(line)
        if location:
            return location
    return ""


def _profile_url(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    return f"https://{match.group(0)}" if match else None


def find_portfolio(text: str) -> Optional[str]:
    """First http(s) URL that isn't a LinkedIn or GitHub profile."""
    for match in ContactPatterns.WEBSITE.finditer(text):
        url = match.group(0).rstrip(".")
        if not any(domain in url.lower() for domain in _PROFILE_DOMAINS):
            return url
    return None


def extract_personal_info(text: str, config: ParseConfig = None) -> PersonalInfo:
    """
    Extract contact details.

    Args:
        text: Normalized résumé text
        config: Parser settings (default: process-wide config)

    Returns:
        PersonalInfo; unrecognized fields are empty, the name falls back to
        a placeholder
    """
    config = config or get_parse_config()
    lines = _header_lines(text, config.header_scan_lines)

    name = find_name(lines, config)
    email_match = ContactPatterns.EMAIL.search(text)

    info = PersonalInfo(
        full_name=name or NAME_PLACEHOLDER,
        email=email_match.group(0) if email_match else "",
        phone=find_phone(lines),
        location=find_header_location(lines, name),
        linkedin=_profile_url(ContactPatterns.LINKEDIN, text),
        github=_profile_url(ContactPatterns.GITHUB, text),
        portfolio=find_portfolio(text),
    )
    _log_debug(f"Personal info: name={info.full_name!r}, email={info.email!r}")
    return info
