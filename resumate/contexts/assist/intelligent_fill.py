"""
AI-assisted résumé fill with heuristic fallback.

The language-model call lives outside this package. A provider is either
a callable taking the prompt and returning a reply, or an object with a
generate(system_prompt, user_prompt) method whose result has a .content
string. A reply may be JSON text (optionally in a markdown code fence), a
dict, or a ResumeRecord.

Whenever the provider is missing, raises, or replies with something that
isn't a résumé, the Intake engine parses the text instead.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

from resumate.contexts.assist.logger import _log_debug, _log_info, _log_warning
from resumate.contexts.intake.resume_data_structure import ResumeRecord
from resumate.contexts.intake.resume_parser import parse_resume_text

SOURCE_AI = "ai"
SOURCE_HEURISTIC = "heuristic"

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

_SYSTEM_PROMPT = """\
You are an expert resume parser. Extract the resume into structured data.
Return ONLY a JSON object matching the requested schema. Use null or omit optional fields you cannot find.
Standardize dates (e.g., "Jan 2020", "2020", "Present") and keep achievements specific."""

_USER_PROMPT_TEMPLATE = """\
Parse this resume into a JSON object with this shape:

{schema_json}

---
Resume:
{content}"""

_RECORD_SCHEMA = {
    "personalInfo": {
        "fullName": "string",
        "email": "string",
        "phone": "string",
        "location": "City, State/Country",
        "linkedin": "URL (optional)",
        "github": "URL (optional)",
        "portfolio": "URL (optional)",
    },
    "summary": "string",
    "skills": [{"category": "string", "items": ["string"]}],
    "experience": [
        {
            "title": "string",
            "company": "string",
            "location": "string",
            "startDate": "string",
            "endDate": "string or Present",
            "current": "boolean",
            "achievements": ["string"],
        }
    ],
    "education": [
        {
            "degree": "string",
            "institution": "string",
            "location": "string",
            "graduationDate": "string",
            "gpa": "string (optional)",
            "honors": ["string (optional)"],
            "major": "string (optional)",
            "minor": "string (optional)",
        }
    ],
    "projects": [
        {
            "name": "string",
            "description": "string",
            "technologies": ["string"],
            "link": "URL (optional)",
            "achievements": ["string"],
        }
    ],
    "certifications": [
        {
            "name": "string",
            "issuer": "string",
            "date": "string",
            "expirationDate": "string (optional)",
            "credentialId": "string (optional)",
        }
    ],
    "awards": [{"title": "string", "issuer": "string", "date": "string", "description": "string (optional)"}],
    "languages": [{"language": "string", "proficiency": "Native|Fluent|Professional|Intermediate|Basic"}],
}

# Any of these at the top level marks a reply as a résumé
_RECORD_KEYS = {
    "personalInfo",
    "personal_info",
    "summary",
    "skills",
    "experience",
    "education",
    "projects",
}

# Prompt content cap, in characters
_MAX_CONTENT = 16000


@dataclass
class FillResult:
    """
    Outcome of intelligent_fill().

    Attributes:
        record: The filled record
        source: "ai" when the provider's reply was used, "heuristic" otherwise
    """

    record: ResumeRecord
    source: str


def build_fill_prompt(text: str) -> str:
    """
    Build the user prompt for a résumé fill.

    Args:
        text: Raw résumé text

    Returns:
        User prompt string for the LLM
    """
    return _USER_PROMPT_TEMPLATE.format(
        schema_json=json.dumps(_RECORD_SCHEMA, indent=2),
        content=(text or "")[:_MAX_CONTENT],
    )


# =============================================================================
# RESPONSE PARSING
# =============================================================================


def _parse_json_response(text: str) -> dict:
    """Parse a JSON object from an LLM reply, handling markdown code blocks."""
    text = text.strip()

    # Try direct parse first
    try:
        result = json.loads(text)
        return result if isinstance(result, dict) else {}
    except json.JSONDecodeError:
        pass

    # Strip markdown code blocks
    stripped = re.sub(r"^```(?:json)?\s*", "", text)
    stripped = re.sub(r"\s*```$", "", stripped)
    try:
        result = json.loads(stripped)
        return result if isinstance(result, dict) else {}
    except json.JSONDecodeError:
        pass

    # Outermost {...} in surrounding prose
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        try:
            result = json.loads(text[start : end + 1])
            return result if isinstance(result, dict) else {}
        except json.JSONDecodeError:
            pass

    return {}


def coerce_reply(reply: Any) -> Optional[ResumeRecord]:
    """
    Turn a provider reply into a ResumeRecord.

    Returns:
        ResumeRecord, or None if the reply doesn't hold a résumé
    """
    if isinstance(reply, ResumeRecord):
        return reply
    if hasattr(reply, "content") and isinstance(reply.content, str):
        reply = reply.content
    if isinstance(reply, str):
        reply = _parse_json_response(reply)
    if isinstance(reply, dict) and _RECORD_KEYS & set(reply):
        return ResumeRecord.from_dict(reply)
    return None


def _call_provider(provider: Any, text: str) -> Any:
    prompt = build_fill_prompt(text)
    if hasattr(provider, "generate"):
        return provider.generate(system_prompt=_SYSTEM_PROMPT, user_prompt=prompt)
    return provider(prompt)


# =============================================================================
# FILL
# =============================================================================


def intelligent_fill(text: str, provider: Any = None) -> FillResult:
    """
    Fill a résumé record with an AI provider, falling back to the parser.

    Provider failures are logged as warnings and never propagate.

    Args:
        text: Raw résumé text
        provider: Callable (prompt -> reply) or object with generate();
            None skips straight to the parser

    Returns:
        FillResult with the record and where it came from
    """
    if provider is None:
        _log_debug("No provider configured, using heuristic parser")
        return FillResult(record=parse_resume_text(text), source=SOURCE_HEURISTIC)

    try:
        reply = _call_provider(provider, text)
    except Exception as e:
        _log_warning(f"Provider failed ({type(e).__name__}: {e}), falling back to heuristic parser")
        return FillResult(record=parse_resume_text(text), source=SOURCE_HEURISTIC)

    record = coerce_reply(reply)
    if record is None:
        _log_warning("Provider reply is not a resume, falling back to heuristic parser")
        return FillResult(record=parse_resume_text(text), source=SOURCE_HEURISTIC)

    _log_info(f"Filled resume from provider ({len(record.experience)} experience entries)")
    return FillResult(record=record, source=SOURCE_AI)
