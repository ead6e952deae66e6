"""
One-line-per-item sections: certifications, awards and languages.

Each function returns None when the section yields nothing, so optional
sections stay absent in the record instead of holding an empty list.
"""

import re
from typing import List, Optional, Tuple

from resumate.contexts.intake.defaults import (
    DATE_PLACEHOLDER,
    DEFAULT_PROFICIENCY,
    ISSUER_PLACEHOLDER,
    LANGUAGE_PROFICIENCIES,
)
from resumate.contexts.intake.patterns import (
    DatePatterns,
    find_date_range,
    is_bullet,
    strip_bullet,
    strip_date_range,
)
from resumate.contexts.intake.resume_data_structure import Award, Certification, LanguageSkill

# "(2021)", ", May 2021", " - 2021" at the end of a line
_TRAILING_DATE = re.compile(
    rf"[\s,\-]*\(?(?:{DatePatterns.GRADUATION_DATE.pattern})\)?\s*$", re.IGNORECASE
)

# "Name - Issuer", "Name | Issuer", "Name, Issuer"
_ISSUER_SEPARATORS = (
    re.compile(r"\s+-+\s+|\s*[–—]\s*"),
    re.compile(r"\s*\|\s*"),
    re.compile(r",\s*"),
)

_CREDENTIAL_ID = re.compile(r"[\s,|\-]*\(?Credential\s+ID\s*[:#]?\s*(?P<id>[\w-]+)\)?", re.IGNORECASE)
_EXPIRATION = re.compile(
    r"[\s,|\-]*\(?\b(?:Expires|Expiration|Exp\.|Valid\s+until)(?![A-Za-z])\s*:?\s*(?P<date>[A-Za-z]*\.?\s*\d{4})\)?",
    re.IGNORECASE,
)

# "English (Native)", "English - Native", "English: Native"
_LANGUAGE_LEVEL = re.compile(
    r"^(?P<language>[^(:\-–—]+?)\s*(?:\((?P<paren>[^)]*)\)|[:\-–—]\s*(?P<label>.+))?$"
)

_PROFICIENCY_SYNONYMS = {
    "native": "Native",
    "native speaker": "Native",
    "mother tongue": "Native",
    "bilingual": "Native",
    "fluent": "Fluent",
    "full professional": "Professional",
    "professional": "Professional",
    "professional working": "Professional",
    "intermediate": "Intermediate",
    "conversational": "Intermediate",
    "limited working": "Intermediate",
    "basic": "Basic",
    "elementary": "Basic",
    "beginner": "Basic",
}


def _item_lines(block: str) -> List[str]:
    lines = []
    for raw_line in (block or "").splitlines():
        line = strip_bullet(raw_line) if is_bullet(raw_line) else raw_line.strip()
        if line:
            lines.append(line)
    return lines


def split_dated_item(line: str) -> Tuple[str, str, str]:
    """
    Split "Name - Issuer, 2021" style lines.

    Returns:
        (name, issuer, date); issuer and date are "" when absent
    """
    text = line
    date = ""

    date_range = find_date_range(text)
    if date_range:
        date = date_range.text
        text = strip_date_range(text, date_range)
    else:
        match = _TRAILING_DATE.search(text)
        if match and match.start() > 0:
            date = match.group("date").strip()
            text = text[: match.start()]

    text = text.strip()
    for separator in _ISSUER_SEPARATORS:
        parts = [part.strip() for part in separator.split(text, maxsplit=1) if part.strip()]
        if len(parts) == 2:
            return parts[0], parts[1], date
    return text, "", date


def extract_certifications(block: str) -> Optional[List[Certification]]:
    """
    One certification per line.

    Credential IDs and expiration dates are pulled out before the
    name/issuer split.
    """
    certifications = []
    for line in _item_lines(block):
        credential_id = None
        expiration_date = None

        match = _CREDENTIAL_ID.search(line)
        if match:
            credential_id = match.group("id")
            line = (line[: match.start()] + line[match.end() :]).strip()

        match = _EXPIRATION.search(line)
        if match:
            expiration_date = match.group("date").strip()
            line = (line[: match.start()] + line[match.end() :]).strip()

        name, issuer, date = split_dated_item(line)
        if not name:
            continue
        certifications.append(
            Certification(
                name=name,
                issuer=issuer or ISSUER_PLACEHOLDER,
                date=date or DATE_PLACEHOLDER,
                expiration_date=expiration_date,
                credential_id=credential_id,
            )
        )
    return certifications or None


def extract_awards(block: str) -> Optional[List[Award]]:
    """One award per line: "Title - Issuer, Date"."""
    awards = []
    for line in _item_lines(block):
        title, issuer, date = split_dated_item(line)
        if title:
            awards.append(
                Award(title=title, issuer=issuer or ISSUER_PLACEHOLDER, date=date or DATE_PLACEHOLDER)
            )
    return awards or None


def canonical_proficiency(level: str) -> str:
    """
    Map a written proficiency onto the known levels.

    Unknown levels are kept as written; an empty level becomes the default.
    """
    level = (level or "").strip()
    if not level:
        return DEFAULT_PROFICIENCY
    key = re.sub(r"\s+proficiency$", "", level.lower()).strip()
    if key in _PROFICIENCY_SYNONYMS:
        return _PROFICIENCY_SYNONYMS[key]
    for known in LANGUAGE_PROFICIENCIES:
        if known.lower() == key:
            return known
    return level


def extract_languages(block: str) -> Optional[List[LanguageSkill]]:
    """
    Languages split on commas, semicolons and newlines.

    Returns:
        LanguageSkill list, or None when nothing was found
    """
    languages = []
    for line in _item_lines(block):
        for item in re.split(r"[,;]", line):
            item = item.strip()
            if not item:
                continue
            match = _LANGUAGE_LEVEL.match(item)
            if match:
                language = match.group("language").strip()
                level = match.group("paren") or match.group("label") or ""
            else:
                language, level = item, ""
            if language:
                languages.append(
                    LanguageSkill(language=language, proficiency=canonical_proficiency(level))
                )
    return languages or None
