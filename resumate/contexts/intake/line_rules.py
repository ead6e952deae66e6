"""
Ordered line-classification rules shared by the field extractors.

Each extractor keeps a mutable draft of the entry it is building and a
tuple of LineRule objects. For every line after the first, the rules are
tried in order and the first one whose guard accepts the line handles it.
Lines no rule accepts are ignored.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence


@dataclass(frozen=True)
class LineRule:
    """
    One (guard, handler) pair.

    Attributes:
        name: Rule identifier, returned by classify_line() for logs and tests
        accepts: (line, draft) -> True if this rule handles the line
        handle: (line, draft) -> None, records the line in the draft
    """

    name: str
    accepts: Callable[[str, Any], bool]
    handle: Callable[[str, Any], None]


def classify_line(line: str, draft: Any, rules: Sequence[LineRule]) -> Optional[str]:
    """
    Apply the first matching rule to a line.

    Args:
        line: Stripped, non-blank line
        draft: Mutable entry draft owned by the caller
        rules: Ordered rule table

    Returns:
        Name of the rule that handled the line, or None if none matched
    """
    for rule in rules:
        if rule.accepts(line, draft):
            rule.handle(line, draft)
            return rule.name
    return None
