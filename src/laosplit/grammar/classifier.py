"""Context-free character classification against a grammar."""

from typing import Optional
from ..core.types import CharClass
from .schema import LaoGrammar, DEFAULT_GRAMMAR, is_lao_code_point

class CharClassifier:
    """Maps a single character to its CharClass. Holds no mutable state."""
    
    def __init__(self, grammar: Optional[LaoGrammar] = None):
        self.grammar = grammar if grammar is not None else DEFAULT_GRAMMAR
        
    def classify(self, char: str) -> CharClass:
        """
        Classify one character.
        
        Anything outside U+0E80..U+0EFF is NON_LAO. Lao characters are matched
        against the grammar sets; a Lao character in none of them is OTHER_LAO.
        """
        if not is_lao_code_point(char):
            return CharClass.NON_LAO
        g = self.grammar
        if char in g.repetition_marks:
            return CharClass.REPETITION_MARK
        if char in g.leading_vowels:
            return CharClass.LEADING_VOWEL
        if char in g.middle_marks:
            return CharClass.MIDDLE_MARK
        if char in g.consonants:
            return CharClass.CONSONANT
        return CharClass.OTHER_LAO

_default_classifier = CharClassifier()

def classify(char: str) -> CharClass:
    """Classify with the built-in grammar."""
    return _default_classifier.classify(char)
