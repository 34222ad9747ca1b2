"""
laosplit Segmenters Package

The Lao word segmenter and the guard chain it runs. Segmenters satisfy the
Segmenter protocol in laosplit.core.abc and can be injected anywhere one is
expected.
"""

from .lao import LaoWordSegmenter
from .guards import GUARD_CHAIN, Guard, decide

__all__ = ['LaoWordSegmenter', 'GUARD_CHAIN', 'Guard', 'decide']
