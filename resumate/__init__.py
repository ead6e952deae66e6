"""
resumate - heuristic résumé text normalizer

Turns freeform résumé plain text into a structured, always-renderable record.

Architecture:
- Intake Context: Text normalization, section segmentation, entry splitting,
  and field extraction into a ResumeRecord
- Assist Context: AI-assisted fill with fallback to the Intake engine
"""

__version__ = "0.1.0"
