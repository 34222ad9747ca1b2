"""
laosplit - heuristic word segmentation for unspaced Lao text.

A single-pass, rule-based scanner. No dictionary, no model, no I/O:
the grammar is a handful of static character sets.
"""

from typing import List

from .segmenters.lao import LaoWordSegmenter

__version__ = "0.1.0"

_default_segmenter = LaoWordSegmenter()


def segment(text: str) -> List[str]:
    """Segment Lao text into words using the built-in grammar."""
    return _default_segmenter.segment(text)


# Historical entry-point name
split_lao = segment

__all__ = ["LaoWordSegmenter", "segment", "split_lao", "__version__"]
