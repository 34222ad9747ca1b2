"""Heuristic Lao word segmenter: one pass, no dictionary."""

from typing import Dict, List, Optional, Tuple
from ..core.abc import Logger, Meter
from ..core.types import SegmentationResult
from ..core.util import is_blank, strip_zero_width, summarize_lengths
from ..grammar.classifier import CharClassifier
from ..grammar.schema import LaoGrammar, DEFAULT_GRAMMAR
from .context import build_context
from .guards import decide

class LaoWordSegmenter:
    """
    Splits unspaced Lao text into orthographic words.

    Scans the input once, keeping the word in progress in an accumulator.
    For every character the guard chain decides whether to append it, flush
    the accumulator as a finished word, or move the last one or two letters
    into a new word. Text in other scripts passes through as opaque runs.
    """

    def __init__(self, *, grammar: Optional[LaoGrammar] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            grammar: Character sets to segment with (built-in grammar if None)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.grammar = grammar if grammar is not None else DEFAULT_GRAMMAR
        self.classifier = CharClassifier(self.grammar)
        self.log = logger
        self.meter = meter

    def segment(self, text: str) -> List[str]:
        """
        Segment text into words.

        Args:
            text: Input text; may be empty, mixed-script or contain zero-width spaces

        Returns:
            List[str]: Non-empty tokens in input order. Empty or whitespace-only
            input gives an empty list.
        """
        words, _ = self._scan(text)
        return words

    def analyze(self, text: str) -> SegmentationResult:
        """
        Segment text and report which guards fired and token length statistics.

        Args:
            text: Input text

        Returns:
            SegmentationResult: Tokens with guard hit counts and length summary
        """
        words, hits = self._scan(text)
        return SegmentationResult(
            tokens=words,
            guard_hits=hits,
            length_summary=summarize_lengths(words)
        )

    def _scan(self, text: str) -> Tuple[List[str], Dict[str, int]]:
        """Run the guard chain over the cleaned text."""
        if not text or is_blank(text):
            text = ""
        else:
            text = strip_zero_width(text)

        words: List[str] = []
        hits: Dict[str, int] = {}
        accumulator = ""

        for i in range(len(text)):
            ctx = build_context(text, i, accumulator, self.classifier)
            guard, step = decide(ctx, self.grammar)
            hits[guard.name] = hits.get(guard.name, 0) + 1
            if step.emitted:
                words.append(step.emitted)
            accumulator = step.accumulator

        # Final flush
        if accumulator:
            words.append(accumulator)
        words = [w for w in words if w]

        if self.meter:
            self.meter.inc("laosplit.segment_calls")
            for name, count in hits.items():
                self.meter.inc("laosplit.guard_hits", count, guard=name)
            self.meter.observe("laosplit.tokens", len(words))

        if self.log:
            self.log.info("segmented", chars=len(text), tokens=len(words))

        return words, hits
