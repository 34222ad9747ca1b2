"""Small utility functions."""

from typing import Dict, Sequence

import numpy as np

ZERO_WIDTH_SPACE = "\u200b"

# Space separators, tab, line breaks and the byte order mark. Unlike str.strip,
# U+001C..U+001F and U+0085 are not blank.
TRIMMABLE_WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

def is_blank(text: str) -> bool:
    """True for empty text or text made only of trimmable whitespace."""
    return all(ch in TRIMMABLE_WHITESPACE for ch in text)

def strip_zero_width(text: str) -> str:
    """Remove every zero-width space; other characters keep their order."""
    return text.replace(ZERO_WIDTH_SPACE, "")

def summarize_lengths(tokens: Sequence[str]) -> Dict[str, float]:
    """Token length statistics (count/mean/min/max). Empty input gives zeros."""
    if not tokens:
        return {"count": 0, "mean": 0.0, "min": 0.0, "max": 0.0}
    lengths = np.fromiter((len(t) for t in tokens), dtype=np.int64, count=len(tokens))
    return {
        "count": int(lengths.size),
        "mean": float(lengths.mean()),
        "min": float(lengths.min()),
        "max": float(lengths.max()),
    }
