"""Data types and result structures for segmentation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict

class CharClass(Enum):
    """Context-free class of a single code point."""
    NON_LAO = "non_lao"
    CONSONANT = "consonant"
    LEADING_VOWEL = "leading_vowel"
    MIDDLE_MARK = "middle_mark"
    REPETITION_MARK = "repetition_mark"
    OTHER_LAO = "other_lao"          # Lao block, but in none of the grammar sets
    
    @property
    def is_lao(self) -> bool:
        return self is not CharClass.NON_LAO

@dataclass(frozen=True)
class ScanContext:
    """Neighbourhood of the character being scanned."""
    char: str
    char_class: CharClass
    accumulator: str
    last: str                            # "" when accumulator is empty
    last_class: Optional[CharClass]      # None when accumulator is empty
    second_last: str                     # "" when accumulator has < 2 chars
    next_char: Optional[str]             # None at end of input
    next_class: Optional[CharClass]
    
    @property
    def last_is_lao(self) -> bool:
        return self.last_class is not None and self.last_class.is_lao

@dataclass(frozen=True)
class Transition:
    """Outcome of one guard: an optional finished word and the new accumulator."""
    emitted: Optional[str]
    accumulator: str

@dataclass
class SegmentationResult:
    """Tokens plus per-call diagnostics."""
    tokens: List[str]
    guard_hits: Dict[str, int] = field(default_factory=dict)   # guard name -> chars handled
    length_summary: Dict[str, float] = field(default_factory=dict)  # count/mean/min/max
    
    @property
    def token_count(self) -> int:
        return len(self.tokens)
