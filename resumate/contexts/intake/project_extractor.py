"""
Project entry field extraction.

Line 0 is the project name. Later lines, first match wins:
URL -> link, labeled list -> technologies, bracketed list -> technologies,
bullet -> achievement, first long line -> description, later long lines ->
achievements.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from resumate.contexts.intake.defaults import (
    PROJECT_ACHIEVEMENT_PLACEHOLDER,
    PROJECT_PLACEHOLDERS,
)
from resumate.contexts.intake.line_rules import LineRule, classify_line
from resumate.contexts.intake.patterns import (
    MarkerPatterns,
    find_url,
    has_url,
    is_bullet,
    split_items,
    strip_bullet,
)
from resumate.contexts.intake.resume_data_structure import ProjectEntry

_PROJECT_PREFIX = re.compile(r"^Project\s*:\s*", re.IGNORECASE)

TECH_LABEL = re.compile(
    r"^(?:Technolog(?:y|ies)|Tech(?:nical)?\s+Stack|Built\s+with|Tools?|Stack)\s*:\s*(?P<items>.*)$",
    re.IGNORECASE,
)

# Whole line is "(React, Node.js)" or "[Go | gRPC]" with a short body
TECH_LIST = re.compile(r"^[(\[](?P<items>[^()\[\]]{1,49})[)\]]$")

# "Role: ..." style labels are not descriptions
_LABEL = re.compile(r"^[A-Z][a-z]+:")

_MIN_DESCRIPTION = 20
_MIN_ACHIEVEMENT = 15


@dataclass
class ProjectDraft:
    """Fields resolved so far for one project."""

    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    link: str = ""
    achievements: List[str] = field(default_factory=list)


def clean_project_name(line: str) -> str:
    """Strip bullet, numbering and "Project:" prefix from a title line."""
    name = strip_bullet(line) if is_bullet(line) else line
    name = MarkerPatterns.NUMBERING.sub("", name, count=1)
    return _PROJECT_PREFIX.sub("", name.strip(), count=1).strip()


def _set_link(line, draft):
    if not draft.link:
        draft.link = find_url(line) or ""


def _add_labeled_tech(line, draft):
    draft.technologies.extend(split_items(TECH_LABEL.match(line).group("items")))


def _add_listed_tech(line, draft):
    draft.technologies.extend(split_items(TECH_LIST.match(line).group("items")))


def _add_bullet(line, draft):
    achievement = strip_bullet(line)
    if achievement:
        draft.achievements.append(achievement)


PROJECT_RULES = (
    LineRule("link", lambda line, d: has_url(line), _set_link),
    LineRule("tech_label", lambda line, d: bool(TECH_LABEL.match(line)), _add_labeled_tech),
    LineRule("tech_list", lambda line, d: bool(TECH_LIST.match(line)), _add_listed_tech),
    LineRule("bullet", lambda line, d: is_bullet(line), _add_bullet),
    LineRule(
        "description",
        lambda line, d: not d.description and len(line) > _MIN_DESCRIPTION and not _LABEL.match(line),
        lambda line, d: setattr(d, "description", line),
    ),
    LineRule(
        "continuation",
        lambda line, d: bool(d.description) and len(line) > _MIN_ACHIEVEMENT,
        lambda line, d: d.achievements.append(line),
    ),
)


def extract_project_entry(entry_text: str) -> Optional[ProjectEntry]:
    """
    Turn one entry's text into a ProjectEntry.

    Returns:
        ProjectEntry, or None if the entry has no non-blank lines
    """
    lines = [line.strip() for line in entry_text.splitlines() if line.strip()]
    if not lines:
        return None

    draft = ProjectDraft(name=clean_project_name(lines[0]))
    for line in lines[1:]:
        classify_line(line, draft, PROJECT_RULES)

    return ProjectEntry(
        name=draft.name or PROJECT_PLACEHOLDERS["name"],
        description=draft.description or PROJECT_PLACEHOLDERS["description"],
        technologies=draft.technologies,
        link=draft.link or None,
        achievements=draft.achievements or [PROJECT_ACHIEVEMENT_PLACEHOLDER],
    )


def extract_projects(entries: List[str]) -> List[ProjectEntry]:
    """Extract every entry, keeping document order."""
    results = []
    for entry_text in entries:
        entry = extract_project_entry(entry_text)
        if entry is not None:
            results.append(entry)
    return results
