"""
Repair helpers for text pulled out of PDF text streams.

PDF fonts often encode "fi"/"fl" style ligatures as a single glyph. Depending
on the font, the extracted text carries either the Unicode ligature code point
or a placeholder character ('#' for fi, '!' for fl) in its place.
"""

import logging
import re
from typing import List, Optional, Set

logger = logging.getLogger(__name__)

# Unicode ligature code points and their expansions
LIGATURES = [
    ('ﬁ', 'fi'),
    ('ﬂ', 'fl'),
    ('ﬀ', 'ff'),
    ('ﬃ', 'ffi'),
    ('ﬄ', 'ffl'),
    ('ﬅ', 'st'),
    ('ﬆ', 'st'),
]

# Words whose ligature collapsed to a placeholder, longest first
PLACEHOLDER_WORDS = [
    (re.compile(r'# ?exible', re.IGNORECASE), 'flexible'),
    (re.compile(r'# ?cient', re.IGNORECASE), 'ficient'),
    (re.compile(r'# ?nal', re.IGNORECASE), 'final'),
    (re.compile(r'# ?rst', re.IGNORECASE), 'first'),
    (re.compile(r'# ?eld', re.IGNORECASE), 'field'),
    (re.compile(r'# ?ne'), 'fine'),
    (re.compile(r'# ?ll'), 'fill'),
    (re.compile(r'# ?t'), 'fit'),
    (re.compile(r'# ?n'), 'fin'),
    (re.compile(r'!aw', re.IGNORECASE), 'flaw'),
]

# Last resort for placeholders still sitting inside a word; a run of
# placeholders counts as part of the word
LEFTOVER_FI = re.compile(r'#(?=[#!]*[A-Za-z])')
LEFTOVER_FL = re.compile(r'!(?=[#!]*[a-z])')

SUSPICIOUS_GLYPH = re.compile(r'[^ -~\n\r\t]')


def fix_ligatures(text: str) -> str:
    """Recover ligatures that were corrupted during PDF text extraction.

    Replacements never introduce a placeholder character, so running the
    repair twice gives the same result as running it once.

    Args:
        text (str): Raw extracted text

    Returns:
        str: Text with ligatures expanded to plain letters
    """
    if not text:
        return text

    for glyph, replacement in LIGATURES:
        text = text.replace(glyph, replacement)

    for pattern, replacement in PLACEHOLDER_WORDS:
        text = pattern.sub(replacement, text)

    text = LEFTOVER_FI.sub('fi', text)
    text = LEFTOVER_FL.sub('fl', text)
    return text


def log_suspicious_glyphs(text: str, seen: Optional[Set[str]] = None) -> List[str]:
    """Report characters outside printable ASCII that survived repair.

    Each distinct character is reported once per ``seen`` set, so passing the
    same set across calls keeps repeats out of the log.

    Args:
        text (str): Text to scan
        seen (Set[str]): Characters already reported; updated in place

    Returns:
        List[str]: Characters reported by this call, in order of appearance
    """
    if seen is None:
        seen = set()

    reported = []
    for char in SUSPICIOUS_GLYPH.findall(text or ''):
        if char in seen:
            continue
        seen.add(char)
        reported.append(char)
        logger.warning(f"Unrecognized character: {char!r} (code {ord(char)})")
    return reported
