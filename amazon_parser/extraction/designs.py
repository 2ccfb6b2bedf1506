"""
Print Name Segmentation

Splits a listing's design text into individual print names.

Forward slashes separate designs. Commas separate designs too, except
on reversible paper, where "Skiing Santa, zebras and penguins" is the
two faces of one sheet. Quoted text is never split. When the listing
states how many designs it has ("SIX CUTE DESIGNS"), reversible
segments are broken at commas that start a new capitalised or quoted
name until the count matches.
"""

import logging
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

REVERSIBLE_PHRASES = ('reversible', 'both sides')

_NUMBER_WORDS = {
    'one': 1, 'two': 2, 'three': 3, 'four': 4, 'five': 5, 'six': 6,
    'seven': 7, 'eight': 8, 'nine': 9, 'ten': 10, 'eleven': 11, 'twelve': 12,
}

_DESIGN_COUNT_RE = re.compile(
    r'\b(\d+|' + '|'.join(_NUMBER_WORDS) + r')\b(?:\s+[a-z-]+){0,2}?\s+(?:designs|prints|patterns)\b',
    re.IGNORECASE,
)
_DESIGN_LABEL_RE = re.compile(r'\b(?:designs?|prints?|patterns?)\s*:', re.IGNORECASE)

# Quoted runs: opening quote not glued to a preceding word (so "Santa's" is left alone)
_QUOTED_RE = re.compile(
    '(?<!\\w)["\'\u201c\u2018](?=\\S)(.+?)(?<=\\S)["\'\u201d\u2019](?!\\w)'
)

# Placeholders for separators hidden inside quotes, and for quote boundaries
_COMMA = '\x00'
_SLASH = '\x01'
_QUOTE = '\x02'


def is_reversible(text: Optional[str]) -> bool:
    """True if the text describes reversible (two-sided) paper."""
    if not text:
        return False
    lowered = text.lower()
    return any(phrase in lowered for phrase in REVERSIBLE_PHRASES)


def find_design_count(text: Optional[str]) -> Optional[int]:
    """
    Find an explicitly stated number of designs.

    Examples:
        "SIX CUTE DESIGNS" -> 6
        "features 6 adorable designs" -> 6
    """
    if not text:
        return None
    match = _DESIGN_COUNT_RE.search(text)
    if not match:
        return None
    token = match.group(1).lower()
    return int(token) if token.isdigit() else _NUMBER_WORDS[token]


def find_design_list(text: Optional[str]) -> Optional[str]:
    """Return the text after the last "designs:" / "prints:" / "patterns:" label."""
    if not text:
        return None
    labels = list(_DESIGN_LABEL_RE.finditer(text))
    if not labels:
        return None
    rest = text[labels[-1].end():].split('\n', 1)[0]
    return rest.strip() or None


def segment_print_names(
    design_text: Optional[str],
    description: Optional[str] = None,
    expected_count: Optional[int] = None,
) -> List[str]:
    """
    Split design text into print names.

    Args:
        design_text: The list of designs, e.g. "Bold plaid, stripes, dots"
        description: Full listing text, checked for reversible wording and
            a stated design count (defaults to design_text)
        expected_count: Stated number of designs, overrides the one found
            in the description

    Returns:
        Print names in listing order; empty if nothing is stated
    """
    if not design_text or not design_text.strip():
        return []

    context = description if description is not None else design_text
    reversible = is_reversible(context)
    if expected_count is None:
        expected_count = find_design_count(context)

    masked = _QUOTED_RE.sub(_mask_quoted, design_text)
    segments = [_split_pieces(segment) for segment in masked.split('/')]
    segments = [pieces for pieces in segments if pieces]

    if not reversible:
        names = [piece for pieces in segments for piece in pieces]
    else:
        splits = set()
        if expected_count is not None and len(segments) < expected_count:
            splits = _pick_splits(segments, expected_count - len(segments))
        names = []
        for seg_idx, pieces in enumerate(segments):
            run = [pieces[0]]
            for piece_idx in range(1, len(pieces)):
                if (seg_idx, piece_idx) in splits:
                    names.append(', '.join(run))
                    run = []
                run.append(pieces[piece_idx])
            names.append(', '.join(run))

    names = [_finish_name(name) for name in names]
    names = [name for name in names if name]

    if expected_count is not None and len(names) != expected_count:
        logger.warning(
            "Listing states %d designs but %d print names were found",
            expected_count, len(names),
        )

    return names


def _mask_quoted(match: re.Match) -> str:
    inner = match.group(1).replace(',', _COMMA).replace('/', _SLASH)
    return f"{_QUOTE}{inner}{_QUOTE}"


def _split_pieces(segment: str) -> List[str]:
    """Split a slash segment on commas, keeping "X on Y" together."""
    pieces: List[str] = []
    for raw in segment.split(','):
        piece = ' '.join(raw.split())
        if not piece:
            continue
        if pieces and re.match(r'on\s', piece):
            pieces[-1] = f"{pieces[-1]} {piece}"
        else:
            pieces.append(piece)
    return pieces


def _pick_splits(segments: List[List[str]], needed: int) -> set:
    """Choose comma boundaries that start a capitalised or quoted name, left to right."""
    splits = set()
    for seg_idx, pieces in enumerate(segments):
        for piece_idx in range(1, len(pieces)):
            if len(splits) == needed:
                return splits
            first = pieces[piece_idx][0]
            if first == _QUOTE or first.isupper():
                splits.add((seg_idx, piece_idx))
    return splits


def _finish_name(name: str) -> str:
    name = name.replace(_COMMA, ',').replace(_SLASH, '/').replace(_QUOTE, '')
    name = ' '.join(name.split()).strip(' .;:')
    name = re.sub(r'^and\s+', '', name, flags=re.IGNORECASE)
    if not name:
        return ""
    return name[0].upper() + name[1:]
