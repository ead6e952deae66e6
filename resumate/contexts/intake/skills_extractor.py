"""
Skills block categorization.

"Category: a, b, c" lines become named groups. Lines without a category are
pooled into one "Skills" group, placed where the first such line appears.
Skills are never silently dropped: a non-empty block that yields no group
falls back to a single "Technical Skills" group.
"""

import re
from typing import List

from resumate.contexts.intake.defaults import FALLBACK_SKILLS_CATEGORY, UNGROUPED_SKILLS_CATEGORY
from resumate.contexts.intake.logger import _log_debug
from resumate.contexts.intake.patterns import is_bullet, split_items, strip_bullet
from resumate.contexts.intake.resume_data_structure import SkillGroup

CATEGORY_LINE = re.compile(r"^(?P<category>[^:]+):\s*(?P<items>.*)$")

ITEM_DELIMITERS = ",;|•·"


def categorize_skills(block: str) -> List[SkillGroup]:
    """
    Turn a Skills block into skill groups.

    Args:
        block: Skills section text

    Returns:
        Skill groups in document order; [] for an empty block
    """
    if not block or not block.strip():
        return []

    groups: List[SkillGroup] = []
    ungrouped = None

    for raw_line in block.splitlines():
        line = strip_bullet(raw_line) if is_bullet(raw_line) else raw_line.strip()
        if not line:
            continue

        match = CATEGORY_LINE.match(line)
        if match:
            items = split_items(match.group("items"), ITEM_DELIMITERS)
            if items:
                groups.append(SkillGroup(category=match.group("category").strip(), items=items))
            continue

        items = split_items(line, ITEM_DELIMITERS)
        if not items:
            continue
        if ungrouped is None:
            ungrouped = SkillGroup(category=UNGROUPED_SKILLS_CATEGORY)
            groups.append(ungrouped)
        ungrouped.items.extend(items)

    if not groups:
        items = split_items(block.replace("\n", ","), ITEM_DELIMITERS)
        if items:
            _log_debug(f"Skills: no groups found, using '{FALLBACK_SKILLS_CATEGORY}'")
            groups.append(SkillGroup(category=FALLBACK_SKILLS_CATEGORY, items=items))

    return groups
