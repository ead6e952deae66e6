"""
Assist Context

Responsibilities:
- Asks an injected AI provider to fill a ResumeRecord from résumé text
- Coerces the provider's reply into a well-formed record
- Falls back to the Intake parser when the provider is missing or fails

Owns: The AI-fill boundary and its fallback policy
Never: Makes network calls itself or parses résumé text heuristically
"""

from resumate.contexts.assist.intelligent_fill import (
    FillResult,
    build_fill_prompt,
    coerce_reply,
    intelligent_fill,
)

__all__ = [
    "FillResult",
    "build_fill_prompt",
    "coerce_reply",
    "intelligent_fill",
]
