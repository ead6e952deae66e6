"""
Intake Context

Responsibilities:
- Normalizes résumé plain text handed over by the file-to-text extractor
- Locates named sections and splits them into entries
- Extracts typed fields with deterministic placeholders
- Assembles a complete ResumeRecord for every input

Owns: Text-to-record parsing, the ResumeRecord data model, parser config
Never: Reads documents, renders templates, or calls language models
"""

from resumate.contexts.intake.parse_config import (
    ParseConfig,
    ParseConfigError,
    get_parse_config,
    load_parse_config,
)
from resumate.contexts.intake.resume_data_structure import (
    Award,
    Certification,
    EducationEntry,
    ExperienceEntry,
    LanguageSkill,
    PersonalInfo,
    ProjectEntry,
    ResumeRecord,
    SkillGroup,
)
from resumate.contexts.intake.resume_parser import (
    default_record,
    default_resume_record,
    extract_section,
    extract_sections,
    parse,
    parse_resume_text,
)

__all__ = [
    # Entry points
    "parse",
    "parse_resume_text",
    "default_record",
    "default_resume_record",
    "extract_section",
    "extract_sections",
    # Configuration
    "ParseConfig",
    "ParseConfigError",
    "get_parse_config",
    "load_parse_config",
    # Data structure classes
    "ResumeRecord",
    "PersonalInfo",
    "SkillGroup",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "Certification",
    "Award",
    "LanguageSkill",
]
