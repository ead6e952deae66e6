"""
Résumé record data structures for the Intake context.

Defines the ResumeRecord aggregate and its component entries. Optional
values are modeled as Optional fields set to None, never as missing keys.

A ResumeRecord has no link back to the text it came from; the caller owns
it and may mutate it freely (e.g., through an editor).
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from resumate.contexts.intake.defaults import (
    DATE_PLACEHOLDER,
    DEFAULT_PROFICIENCY,
    EDUCATION_PLACEHOLDERS,
    EXPERIENCE_ACHIEVEMENT_PLACEHOLDER,
    EXPERIENCE_PLACEHOLDERS,
    ISSUER_PLACEHOLDER,
    NAME_PLACEHOLDER,
    PROJECT_ACHIEVEMENT_PLACEHOLDER,
    PROJECT_PLACEHOLDERS,
    UNGROUPED_SKILLS_CATEGORY,
    get_default_record_data,
)
from resumate.contexts.intake.patterns import PRESENT, DatePatterns


@dataclass
class PersonalInfo:
    """
    Contact details from the résumé header.

    Attributes:
        full_name: Candidate name (placeholder when unrecognized)
        email: Email address ("" when absent)
        phone: Phone number as written ("" when absent)
        location: "City, Region" ("" when absent)
        linkedin: Full LinkedIn profile URL
        github: Full GitHub profile URL
        portfolio: Any other personal website URL
    """

    full_name: str = NAME_PLACEHOLDER
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    github: Optional[str] = None
    portfolio: Optional[str] = None


@dataclass
class SkillGroup:
    """
    Named bucket of skills (e.g., "Languages": ["Python", "Go"]).
    """

    category: str
    items: List[str] = field(default_factory=list)


@dataclass
class ExperienceEntry:
    """
    One job.

    Required string fields are never empty; unresolved ones hold the
    placeholders from defaults.EXPERIENCE_PLACEHOLDERS.

    The end date and the current flag are kept consistent on construction:
    an ongoing end marker ("present", "Current", ...) becomes PRESENT and
    sets is_current, and is_current=True forces the PRESENT end date.
    """

    title: str = EXPERIENCE_PLACEHOLDERS["title"]
    company: str = EXPERIENCE_PLACEHOLDERS["company"]
    location: str = EXPERIENCE_PLACEHOLDERS["location"]
    start_date: str = EXPERIENCE_PLACEHOLDERS["start_date"]
    end_date: str = EXPERIENCE_PLACEHOLDERS["end_date"]
    is_current: bool = False
    achievements: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.end_date and DatePatterns.ONGOING.match(self.end_date.strip()):
            self.end_date = PRESENT
            self.is_current = True
        elif self.is_current:
            self.end_date = PRESENT


@dataclass
class EducationEntry:
    """
    One degree.

    Attributes:
        degree: Degree text (placeholder when unresolved)
        institution: Institution name (placeholder when unresolved)
        location: "City, Region" or ""
        graduation_date: Date or range text, or ""
        gpa: "3.8" or "3.8/4.0"
        honors: Honors phrases in order of appearance
        major: Major, only when not already part of the degree text
        minor: Minor
    """

    degree: str = EDUCATION_PLACEHOLDERS["degree"]
    institution: str = EDUCATION_PLACEHOLDERS["institution"]
    location: str = ""
    graduation_date: str = ""
    gpa: Optional[str] = None
    honors: Optional[List[str]] = None
    major: Optional[str] = None
    minor: Optional[str] = None


@dataclass
class ProjectEntry:
    """
    One project. Achievements are never empty.
    """

    name: str = PROJECT_PLACEHOLDERS["name"]
    description: str = PROJECT_PLACEHOLDERS["description"]
    technologies: List[str] = field(default_factory=list)
    link: Optional[str] = None
    achievements: List[str] = field(default_factory=list)


@dataclass
class Certification:
    name: str
    issuer: str = ISSUER_PLACEHOLDER
    date: str = DATE_PLACEHOLDER
    expiration_date: Optional[str] = None
    credential_id: Optional[str] = None


@dataclass
class Award:
    title: str
    issuer: str = ISSUER_PLACEHOLDER
    date: str = DATE_PLACEHOLDER
    description: Optional[str] = None


@dataclass
class LanguageSkill:
    language: str
    proficiency: str = DEFAULT_PROFICIENCY


@dataclass
class ResumeRecord:
    """
    Structured résumé produced from freeform text.

    Every list preserves document order. Optional sections (projects,
    certifications, awards, languages) are None when the résumé has none.

    Factory methods:
        from_text(text) - Parse raw résumé text
        from_dict(data) - Coerce external (e.g., AI-produced) data
        default() - Fully-placeholder record for an empty editor
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    skills: List[SkillGroup] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    projects: Optional[List[ProjectEntry]] = None
    certifications: Optional[List[Certification]] = None
    awards: Optional[List[Award]] = None
    languages: Optional[List[LanguageSkill]] = None

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(cls, text: str) -> "ResumeRecord":
        """
        Parse résumé text and create a ResumeRecord.

        Args:
            text: Plain résumé text

        Returns:
            Freshly built ResumeRecord (never raises on string input)
        """
        # Imported here: the parser module builds on these data classes
        from resumate.contexts.intake.resume_parser import parse_resume_text

        return parse_resume_text(text)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ResumeRecord":
        """
        Build a well-formed record from external, possibly partial data.

        Accepts snake_case or camelCase keys (the AI fill path returns
        camelCase JSON). Missing required fields get the same placeholders
        the heuristic parser uses, and malformed items are skipped.

        Args:
            data: Dict in to_dict() shape (any subset of keys)

        Returns:
            ResumeRecord
        """
        data = data if isinstance(data, dict) else {}

        info = _get(data, "personal_info")
        info = info if isinstance(info, dict) else {}
        personal_info = PersonalInfo(
            full_name=_text(_get(info, "full_name")) or NAME_PLACEHOLDER,
            email=_text(_get(info, "email")),
            phone=_text(_get(info, "phone")),
            location=_text(_get(info, "location")),
            linkedin=_text(_get(info, "linkedin")) or None,
            github=_text(_get(info, "github")) or None,
            portfolio=_text(_get(info, "portfolio")) or _text(_get(info, "website")) or None,
        )

        skills = [
            SkillGroup(
                category=_text(_get(item, "category")) or UNGROUPED_SKILLS_CATEGORY,
                items=_text_list(_get(item, "items")),
            )
            for item in _dicts(_get(data, "skills"))
        ]

        experience = [
            ExperienceEntry(
                title=_text(_get(item, "title")) or EXPERIENCE_PLACEHOLDERS["title"],
                company=_text(_get(item, "company")) or EXPERIENCE_PLACEHOLDERS["company"],
                location=_text(_get(item, "location")) or EXPERIENCE_PLACEHOLDERS["location"],
                start_date=_text(_get(item, "start_date")) or EXPERIENCE_PLACEHOLDERS["start_date"],
                end_date=_text(_get(item, "end_date")) or EXPERIENCE_PLACEHOLDERS["end_date"],
                is_current=bool(_get(item, "is_current") or _get(item, "current")),
                achievements=_text_list(_get(item, "achievements"))
                or [EXPERIENCE_ACHIEVEMENT_PLACEHOLDER],
            )
            for item in _dicts(_get(data, "experience"))
        ]

        education = [
            EducationEntry(
                degree=_text(_get(item, "degree")) or EDUCATION_PLACEHOLDERS["degree"],
                institution=_text(_get(item, "institution"))
                or EDUCATION_PLACEHOLDERS["institution"],
                location=_text(_get(item, "location")),
                graduation_date=_text(_get(item, "graduation_date")),
                gpa=_text(_get(item, "gpa")) or None,
                honors=_text_list(_get(item, "honors")) or None,
                major=_text(_get(item, "major")) or None,
                minor=_text(_get(item, "minor")) or None,
            )
            for item in _dicts(_get(data, "education"))
        ]

        projects = [
            ProjectEntry(
                name=_text(_get(item, "name")) or PROJECT_PLACEHOLDERS["name"],
                description=_text(_get(item, "description")) or PROJECT_PLACEHOLDERS["description"],
                technologies=_text_list(_get(item, "technologies")),
                link=_text(_get(item, "link")) or None,
                achievements=_text_list(_get(item, "achievements"))
                or [PROJECT_ACHIEVEMENT_PLACEHOLDER],
            )
            for item in _dicts(_get(data, "projects"))
        ]

        certifications = [
            Certification(
                name=_text(_get(item, "name")),
                issuer=_text(_get(item, "issuer")) or ISSUER_PLACEHOLDER,
                date=_text(_get(item, "date")) or DATE_PLACEHOLDER,
                expiration_date=_text(_get(item, "expiration_date")) or None,
                credential_id=_text(_get(item, "credential_id")) or None,
            )
            for item in _dicts(_get(data, "certifications"))
            if _text(_get(item, "name"))
        ]

        awards = [
            Award(
                title=_text(_get(item, "title")),
                issuer=_text(_get(item, "issuer")) or ISSUER_PLACEHOLDER,
                date=_text(_get(item, "date")) or DATE_PLACEHOLDER,
                description=_text(_get(item, "description")) or None,
            )
            for item in _dicts(_get(data, "awards"))
            if _text(_get(item, "title"))
        ]

        languages = [
            LanguageSkill(
                language=_text(_get(item, "language")),
                proficiency=_text(_get(item, "proficiency")) or DEFAULT_PROFICIENCY,
            )
            for item in _dicts(_get(data, "languages"))
            if _text(_get(item, "language"))
        ]

        return cls(
            personal_info=personal_info,
            summary=_text(_get(data, "summary")),
            skills=skills,
            experience=experience,
            education=education,
            projects=projects or None,
            certifications=certifications or None,
            awards=awards or None,
            languages=languages or None,
        )

    @classmethod
    def default(cls) -> "ResumeRecord":
        """Fully-placeholder record used to bootstrap an empty editor."""
        return cls.from_dict(get_default_record_data())

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_dict(self, camel_case: bool = False) -> Dict[str, Any]:
        """
        Convert to plain containers.

        Optional values that are None are left out, matching the shape of an
        absent optional key in JSON consumers.

        Args:
            camel_case: Emit camelCase keys (fullName, startDate, ...) for
                JavaScript front ends

        Returns:
            Nested dict of str/bool/list values
        """
        data = _drop_none(asdict(self))
        return _camelize(data) if camel_case else data

    def to_yaml(self) -> str:
        """Render the record as YAML."""
        return OmegaConf.to_yaml(OmegaConf.create(self.to_dict()))

    def save(self, output_path: Path) -> None:
        """Save the record as a YAML file."""
        OmegaConf.save(OmegaConf.create(self.to_dict()), Path(output_path))


# =============================================================================
# COERCION HELPERS
# =============================================================================


def _camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(word.capitalize() for word in rest)


def _get(data: Dict[str, Any], key: str) -> Any:
    """Look up a snake_case key, falling back to its camelCase spelling."""
    if key in data:
        return data[key]
    return data.get(_camel(key))


def _text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def _text_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [_text(item) for item in value if _text(item)]


def _dicts(value: Any) -> List[Dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value]
    return value


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {_camel(k): _camelize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_camelize(v) for v in value]
    return value


__all__ = [
    "Award",
    "Certification",
    "EducationEntry",
    "ExperienceEntry",
    "LanguageSkill",
    "PersonalInfo",
    "ProjectEntry",
    "ResumeRecord",
    "SkillGroup",
]
