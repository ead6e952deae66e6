"""
Split a section block into entries (one job, one degree, one project).

Blank-line runs are the primary boundary. When a block has lost its
paragraph structure, a line-scanning state machine takes over and uses an
ordered table of boundary rules for the entity kind to decide where a new
entry starts.

Content is never discarded: every non-blank line of the block ends up in
exactly one entry, in document order.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence

from resumate.contexts.intake.logger import _log_debug
from resumate.contexts.intake.patterns import (
    find_date_range,
    has_company_suffix,
    has_role_keyword,
    has_url,
    is_bullet,
    is_degree,
    is_institution,
    looks_like_date,
    starts_with_degree,
)

BLANK_LINE_RUN = re.compile(r"\n\s*\n")

# =============================================================================
# LINE SHAPES
# =============================================================================

# "Title - Company" with a spaced hyphen or any en/em dash
_TITLE_DASH_COMPANY = re.compile(r"^[A-Z][^-–—]*?(?:\s-\s|\s*[–—]\s*)[A-Z0-9]")

# "Title at Company"
_TITLE_AT_COMPANY = re.compile(r"^[A-Z][\w&.,'/ -]*?\s+at\s+[A-Z0-9]")

_PROJECT_PREFIX = re.compile(r"^\s*Project\s*:", re.IGNORECASE)
_NUMBERED = re.compile(r"^\s*\d{1,2}[.)]\s+")


def _is_heading_candidate(line: str, max_length: int = 80) -> bool:
    """Short, capitalized, un-bulleted line that doesn't read as a sentence."""
    return (
        bool(line)
        and line[0].isupper()
        and len(line) < max_length
        and not line.endswith(".")
        and not is_bullet(line)
        and not looks_like_date(line)
    )


def _is_title_case(line: str) -> bool:
    """Every word longer than three letters is capitalized ("Weather App", "Chat for Teams")."""
    return all(not word[0].isalpha() or word[0].isupper() or len(word) <= 3 for word in line.split())


def _has_entry_body(entry: Sequence[str]) -> bool:
    """An entry has a body once it holds a date range or a bullet."""
    return any(is_bullet(line) or find_date_range(line) for line in entry)


# =============================================================================
# BOUNDARY RULES
# =============================================================================


@dataclass(frozen=True)
class BoundaryRule:
    """
    One way of recognizing the first line of a new entry.

    Attributes:
        name: Rule identifier used in logs and tests
        starts_entry: (lines, index, current_entry) -> True if lines[index]
            opens a new entry
    """

    name: str
    starts_entry: Callable[[List[str], int, List[str]], bool]


def _role_title(lines, i, entry):
    line = lines[i]
    return _has_entry_body(entry) and _is_heading_candidate(line) and has_role_keyword(line)


def _title_dash_company(lines, i, entry):
    line = lines[i]
    return (
        _has_entry_body(entry)
        and _is_heading_candidate(line, max_length=120)
        and bool(_TITLE_DASH_COMPANY.match(line))
    )


def _title_at_company(lines, i, entry):
    line = lines[i]
    return _has_entry_body(entry) and _is_heading_candidate(line) and bool(_TITLE_AT_COMPANY.match(line))


def _company_then_title(lines, i, entry):
    line = lines[i]
    if not (_has_entry_body(entry) and _is_heading_candidate(line) and has_company_suffix(line)):
        return False
    following = lines[i + 1] if i + 1 < len(lines) else ""
    return _is_heading_candidate(following) and has_role_keyword(following)


EXPERIENCE_BOUNDARIES = (
    BoundaryRule("role_title", _role_title),
    BoundaryRule("title_dash_company", _title_dash_company),
    BoundaryRule("title_at_company", _title_at_company),
    BoundaryRule("company_then_title", _company_then_title),
)


def _repeated_degree(lines, i, entry):
    return starts_with_degree(lines[i]) and any(is_degree(line) for line in entry)


def _repeated_institution(lines, i, entry):
    line = lines[i]
    return (
        not is_bullet(line)
        and len(line) < 100
        and is_institution(line)
        and any(is_institution(prev) for prev in entry)
    )


EDUCATION_BOUNDARIES = (
    BoundaryRule("degree_prefix", _repeated_degree),
    BoundaryRule("institution", _repeated_institution),
)


def _explicit_project(lines, i, entry):
    return bool(_PROJECT_PREFIX.match(lines[i]) or _NUMBERED.match(lines[i]))


def _project_title(lines, i, entry):
    line = lines[i]
    return (
        len(entry) >= 2
        and 5 < len(line) < 80
        and ":" not in line
        and not has_url(line)
        and _is_heading_candidate(line)
        and _is_title_case(line)
    )


PROJECT_BOUNDARIES = (
    BoundaryRule("explicit_project", _explicit_project),
    BoundaryRule("project_title", _project_title),
)

BOUNDARY_RULES = {
    "experience": EXPERIENCE_BOUNDARIES,
    "education": EDUCATION_BOUNDARIES,
    "projects": PROJECT_BOUNDARIES,
}

# =============================================================================
# STATE MACHINE
# =============================================================================


class SplitterState(Enum):
    IDLE = "idle"
    COLLECTING = "collecting"


def find_boundary(lines: List[str], index: int, entry: List[str], rules) -> str:
    """
    Return the name of the first boundary rule that fires, or "".

    Args:
        lines: Non-blank, stripped lines of the block
        index: Line under test
        entry: Lines already collected for the current entry
        rules: Ordered BoundaryRule table
    """
    for rule in rules:
        if rule.starts_entry(lines, index, entry):
            return rule.name
    return ""


def scan_entries(lines: List[str], rules) -> List[str]:
    """
    Group lines into entries with the IDLE/COLLECTING state machine.

    IDLE: the first line always opens an entry.
    COLLECTING: a line joins the current entry unless a boundary rule fires,
    in which case the current entry is flushed and the line opens the next.
    """
    entries: List[str] = []
    current: List[str] = []
    state = SplitterState.IDLE

    for i, line in enumerate(lines):
        if state is SplitterState.IDLE:
            current = [line]
            state = SplitterState.COLLECTING
            continue

        rule_name = find_boundary(lines, i, current, rules)
        if rule_name:
            _log_debug(f"New entry at line {i} ({rule_name}): {line[:60]}")
            entries.append("\n".join(current))
            current = [line]
        else:
            current.append(line)

    if current:
        entries.append("\n".join(current))
    return entries


def split_entries(block: str, kind: str) -> List[str]:
    """
    Divide a section block into entry texts.

    Args:
        block: Section text (as returned by extract_section)
        kind: "experience", "education" or "projects"

    Returns:
        Entry texts in document order; [] for an empty block, otherwise at
        least one entry
    """
    if not block or not block.strip():
        return []

    chunks = [chunk.strip() for chunk in BLANK_LINE_RUN.split(block) if chunk.strip()]
    if len(chunks) >= 2:
        _log_debug(f"{kind}: {len(chunks)} entries from blank lines")
        return chunks

    lines = [line.strip() for line in block.splitlines() if line.strip()]
    rules = BOUNDARY_RULES.get(kind, ())
    entries = scan_entries(lines, rules)
    _log_debug(f"{kind}: {len(entries)} entries from line scan")
    return entries
