"""
Résumé text normalizer for the Intake context.

Cleans up text handed over by the file-to-text extractor before any section
or field matching runs. PDF and DOCX extraction leave behind non-breaking
spaces, zero-width characters, smart quotes and a zoo of dash characters
that would otherwise defeat the line patterns.

Design principle: Normalize BEFORE parsing. Bullet glyphs are left alone,
the bullet stripper in patterns.py recognizes all of them.
"""

import re
import unicodedata

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space → space
    "\u202f": " ",  # narrow no-break space
    "\u2009": " ",  # thin space
    "\t": " ",
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    # Dashes
    "\u2010": "-",  # hyphen
    "\u2011": "-",  # non-breaking hyphen
    "\u2012": "-",  # figure dash
    "\u2013": "-",  # en dash
    "\u2014": "-",  # em dash
    "\u2212": "-",  # minus sign
    # Misc
    "\u2026": "...",  # ellipsis
}


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause parsing issues.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode
    """
    # NFKC normalization handles many compatibility characters
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and bare CR line endings to LF and drop trailing spaces."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return re.sub(r"[ ]+\n", "\n", text)


def normalize_resume_text(text: str) -> str:
    """
    Preprocess résumé text before section extraction.

    This is the main entry point for text normalization.

    Args:
        text: Raw résumé text (None is treated as empty)

    Returns:
        Normalized text ready for section extraction
    """
    if not text:
        return ""

    text = normalize_unicode(text)
    text = normalize_line_endings(text)

    return text
