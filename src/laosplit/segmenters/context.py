"""Per-step context derived from the input and the current accumulator."""

from ..core.types import ScanContext
from ..grammar.classifier import CharClassifier

def build_context(text: str, index: int, accumulator: str,
                  classifier: CharClassifier) -> ScanContext:
    """
    Describe the neighbourhood of text[index].
    
    Args:
        text: Cleaned input text
        index: Position of the character being scanned
        accumulator: Word built so far
        classifier: Classifier bound to the active grammar
        
    Returns:
        ScanContext: Current char, last two accumulator chars, one-char lookahead
    """
    char = text[index]
    last = accumulator[-1] if accumulator else ""
    second_last = accumulator[-2] if len(accumulator) > 1 else ""
    next_char = text[index + 1] if index + 1 < len(text) else None
    
    return ScanContext(
        char=char,
        char_class=classifier.classify(char),
        accumulator=accumulator,
        last=last,
        last_class=classifier.classify(last) if last else None,
        second_last=second_last,
        next_char=next_char,
        next_class=classifier.classify(next_char) if next_char is not None else None,
    )
