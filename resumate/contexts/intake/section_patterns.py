"""
Pattern matching for résumé section headings.

This module provides the heading grammars used to locate a named section
(Experience, Education, ...) and the generic "does this line look like a
heading" heuristic that ends a section block.

Pattern classes follow the convention from patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

# =============================================================================
# HEADING SHAPE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class HeadingPatterns:
    """
    Regex patterns for heading-shaped lines.

    Headings in extracted résumé text are short lines of words, optionally
    decorated with markdown (## Experience, **EXPERIENCE**) or underlines.
    """

    # Leading/trailing markdown and underline decoration
    DECORATION: re.Pattern = re.compile(r"^[#*_=~\s]+|[*_=~\s]+$")

    # Words only (letters, spaces, &, /, ', -), optional trailing colon
    HEADING_SHAPE: re.Pattern = re.compile(r"^[A-Za-z][A-Za-z &/'\-]*:?$")


# Title-case labels that sit inside an entry and must not end a section
IN_ENTRY_LABELS = {
    "responsibilities",
    "key responsibilities",
    "key achievements",
    "highlights",
    "duties",
    "tasks",
    "technologies",
    "tech stack",
    "tools",
    "environment",
    "coursework",
    "relevant coursework",
}

# =============================================================================
# HEADING GRAMMARS
# =============================================================================


@dataclass(frozen=True)
class HeadingGrammar:
    """
    One way of writing a section heading.

    Attributes:
        name: Grammar identifier used in logs
        template: Regex template; {aliases} is replaced by the alias alternation
        decorated: Strip markdown decoration from the line before matching
    """

    name: str
    template: str
    decorated: bool = True

    def compile(self, aliases: Iterable[str]) -> Optional[re.Pattern]:
        alternation = build_alias_alternation(aliases)
        if not alternation:
            return None
        return re.compile(self.template.format(aliases=alternation), re.IGNORECASE)


# Tried in order; the first grammar that yields a non-empty block wins
HEADING_GRAMMARS = (
    # "EXPERIENCE:" alone on its line
    HeadingGrammar("colon_heading", r"^(?:{aliases})\s*:$"),
    # "EXPERIENCE" alone on its line
    HeadingGrammar("bare_heading", r"^(?:{aliases})$"),
    # "Skills: Python, Go" with inline content
    HeadingGrammar("inline_heading", r"^\s*(?:{aliases})\s*:\s*(?P<inline>\S.*)$", decorated=False),
)

# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def build_alias_alternation(aliases: Iterable[str]) -> str:
    """
    Build a regex alternation from heading aliases.

    Longer aliases come first and internal spaces match any whitespace run.

    Args:
        aliases: Lowercase alias strings (e.g., ["work experience", "experience"])

    Returns:
        Alternation string, or "" if there are no aliases
    """
    unique = sorted({a.strip() for a in aliases if a and a.strip()}, key=len, reverse=True)
    return "|".join(r"\s+".join(re.escape(word) for word in alias.split()) for alias in unique)


def strip_heading_decoration(line: str) -> str:
    """
    Remove markdown/underline decoration around a heading.

    Args:
        line: Raw line (e.g., "## Experience" or "**SKILLS:**")

    Returns:
        Bare heading text (e.g., "Experience" or "SKILLS:")
    """
    return HeadingPatterns.DECORATION.sub("", line).strip()


def normalize_heading(line: str) -> str:
    """
    Normalize a heading line for alias lookup.

    Returns:
        Lowercase text without decoration, trailing colon, or extra whitespace
    """
    normalized = strip_heading_decoration(line).rstrip(":").strip().lower()
    return re.sub(r"\s+", " ", normalized)


def is_header_like(line: str, known_aliases: Iterable[str] = (), max_length: int = 40) -> bool:
    """
    Check if a line looks like a section heading.

    Used to find where a section block ends, so it must also recognize
    headings no alias list knows about. A line qualifies when it is short
    and made only of words, and it is a known alias of any section, an
    ALL CAPS line of at most four words, or a Title Case label ending in a
    colon.

    Args:
        line: Line to check
        known_aliases: Lowercase heading aliases of every section
        max_length: Longest line still treated as a heading

    Returns:
        True if the line looks like a heading
    """
    text = strip_heading_decoration(line)
    if not text or len(text) > max_length:
        return False
    if not HeadingPatterns.HEADING_SHAPE.match(text):
        return False

    normalized = normalize_heading(text)
    if normalized in known_aliases:
        return True

    words = text.rstrip(":").split()
    letters = [c for c in text if c.isalpha()]

    # ALL CAPS, but not an all-caps "BS CS - MIT" entry line
    if len(letters) >= 3 and all(c.isupper() for c in letters):
        return " - " not in text and len(words) <= 4

    if text.endswith(":") and normalized not in IN_ENTRY_LABELS:
        return all(word[0].isupper() for word in words if word[0].isalpha() and len(word) > 3)

    return False
