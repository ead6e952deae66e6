"""
Résumé text to ResumeRecord.

Pipeline:
1. Normalize unicode and line endings
2. Extract personal info from the header
3. Locate each named section by its heading
4. Split entry sections into entries
5. Extract fields per entry and assemble the record

parse_resume_text() never raises on string input: unrecognized content
degrades to placeholders, it never turns into an error.

Usage:
    from resumate.contexts.intake import parse

    record = parse(text)
    print(record.to_yaml())
"""

import time
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set

from resumate.contexts.intake.education_extractor import extract_education
from resumate.contexts.intake.entry_splitter import split_entries
from resumate.contexts.intake.experience_extractor import extract_experience
from resumate.contexts.intake.list_extractors import (
    extract_awards,
    extract_certifications,
    extract_languages,
)
from resumate.contexts.intake.logger import _log_debug
from resumate.contexts.intake.normalizer import normalize_resume_text
from resumate.contexts.intake.parse_config import SECTION_NAMES, ParseConfig, get_parse_config
from resumate.contexts.intake.personal_info import extract_personal_info
from resumate.contexts.intake.project_extractor import extract_projects
from resumate.contexts.intake.resume_data_structure import ResumeRecord
from resumate.contexts.intake.section_patterns import (
    HEADING_GRAMMARS,
    HeadingGrammar,
    is_header_like,
    strip_heading_decoration,
)
from resumate.contexts.intake.skills_extractor import categorize_skills

# =============================================================================
# SECTION SEGMENTER
# =============================================================================


@dataclass(frozen=True)
class SectionMatch:
    """
    A located section.

    Attributes:
        grammar: Name of the heading grammar that matched
        heading_line: Index of the heading line
        end_line: Index one past the last line of the block
        content: Trimmed block text (blank lines inside preserved)
    """

    grammar: str
    heading_line: int
    end_line: int
    content: str

    def covers(self, line_index: int) -> bool:
        return self.heading_line <= line_index < self.end_line


def _block_end(lines: List[str], start: int, config: ParseConfig) -> int:
    """Index of the first header-looking line at or after start (or len(lines))."""
    for i in range(start, len(lines)):
        line = lines[i]
        if line.strip() and is_header_like(line, config.all_aliases, config.max_heading_length):
            return i
    return len(lines)


def _match_grammar(
    lines: List[str],
    grammar: HeadingGrammar,
    aliases: Iterable[str],
    config: ParseConfig,
    excluded: Set[int] = frozenset(),
) -> Optional[SectionMatch]:
    pattern = grammar.compile(aliases)
    if pattern is None:
        return None

    for i, line in enumerate(lines):
        if i in excluded:
            continue
        candidate = strip_heading_decoration(line) if grammar.decorated else line
        match = pattern.match(candidate)
        if not match:
            continue

        end = _block_end(lines, i + 1, config)
        body = lines[i + 1 : end]
        if "inline" in pattern.groupindex:
            body = [match.group("inline")] + body

        content = "\n".join(body).strip()
        if content:
            return SectionMatch(grammar=grammar.name, heading_line=i, end_line=end, content=content)
    return None


def locate_section(
    text: str,
    aliases: Iterable[str],
    config: ParseConfig = None,
    excluded: Set[int] = frozenset(),
) -> Optional[SectionMatch]:
    """
    Find a section by trying each heading grammar in order.

    Args:
        text: Normalized résumé text
        aliases: Heading aliases of one section
        config: Parser settings (default: process-wide config)
        excluded: Line indexes that may not serve as the heading

    Returns:
        First SectionMatch with non-empty content, or None
    """
    config = config or get_parse_config()
    lines = text.split("\n")
    aliases = tuple(aliases)
    for grammar in HEADING_GRAMMARS:
        match = _match_grammar(lines, grammar, aliases, config, excluded)
        if match:
            return match
    return None


def extract_section(text: str, aliases: Iterable[str], config: ParseConfig = None) -> str:
    """
    Return the content block of a section, or "" if it isn't there.

    Tries "HEADER:" alone on a line, then "HEADER" alone on a line, then
    "HEADER: inline content". A block runs until the next header-looking
    line. A missing section is not an error.

    Args:
        text: Résumé text
        aliases: Heading aliases (e.g., ["experience", "work experience"])
        config: Parser settings (default: process-wide config)

    Returns:
        Trimmed block text
    """
    match = locate_section(text, aliases, config)
    return match.content if match else ""


def extract_sections(text: str, config: ParseConfig = None) -> Dict[str, str]:
    """
    Locate every canonical section.

    Headed sections (grammars a and b) are located first. Inline
    "Label: content" matches are only accepted on lines outside every
    headed block, so a "Languages: Python, Go" line inside Skills does not
    become a Languages section.

    Returns:
        Section name -> block text ("" when absent), for every section name
    """
    config = config or get_parse_config()
    lines = text.split("\n")
    headed_grammars = [g for g in HEADING_GRAMMARS if g.decorated]
    inline_grammars = [g for g in HEADING_GRAMMARS if not g.decorated]

    found: Dict[str, SectionMatch] = {}
    for section in SECTION_NAMES:
        for grammar in headed_grammars:
            match = _match_grammar(lines, grammar, config.aliases_for(section), config)
            if match:
                found[section] = match
                break

    occupied = {i for match in found.values() for i in range(match.heading_line, match.end_line)}
    for section in SECTION_NAMES:
        if section in found:
            continue
        for grammar in inline_grammars:
            match = _match_grammar(lines, grammar, config.aliases_for(section), config, occupied)
            if match:
                found[section] = match
                break

    for section, match in found.items():
        _log_debug(
            f"Section '{section}' via {match.grammar} at line {match.heading_line} "
            f"({len(match.content)} chars)"
        )
    return {section: found[section].content if section in found else "" for section in SECTION_NAMES}


# =============================================================================
# RECORD ASSEMBLER
# =============================================================================


def _capped(items: Optional[list], section: str, config: ParseConfig) -> Optional[list]:
    cap = config.cap(section)
    if items is None or cap is None or len(items) <= cap:
        return items
    _log_debug(f"Capping {section}: {len(items)} -> {cap}")
    return items[:cap]


def parse_resume_text(text: str, config: ParseConfig = None) -> ResumeRecord:
    """
    Parse freeform résumé text into a ResumeRecord.

    Deterministic and stateless: the same text always yields an equal
    record, and the record shares nothing with other calls.

    Args:
        text: Plain résumé text (None is treated as "")
        config: Parser settings (default: process-wide config)

    Returns:
        Complete ResumeRecord
    """
    start_time = time.time()
    config = config or get_parse_config()
    text = normalize_resume_text(text)

    personal_info = extract_personal_info(text, config)
    sections = extract_sections(text, config)

    experience = extract_experience(split_entries(sections["experience"], "experience"))
    education = extract_education(split_entries(sections["education"], "education"))
    projects = extract_projects(split_entries(sections["projects"], "projects"))

    record = ResumeRecord(
        personal_info=personal_info,
        summary=sections["summary"],
        skills=_capped(categorize_skills(sections["skills"]), "skills", config),
        experience=_capped(experience, "experience", config),
        education=_capped(education, "education", config),
        projects=_capped(projects or None, "projects", config),
        certifications=_capped(extract_certifications(sections["certifications"]), "certifications", config),
        awards=_capped(extract_awards(sections["awards"]), "awards", config),
        languages=_capped(extract_languages(sections["languages"]), "languages", config),
    )

    if not record.experience:
        _log_debug("No experience section found")
    _log_debug(f"Parsed {len(text)} chars in {time.time() - start_time:.3f}s")
    return record


def default_resume_record() -> ResumeRecord:
    """
    Fully-placeholder record for bootstrapping an empty editor.

    Returns:
        New ResumeRecord (a fresh copy on every call)
    """
    return ResumeRecord.default()


# Short entry-point names
parse = parse_resume_text
default_record = default_resume_record
