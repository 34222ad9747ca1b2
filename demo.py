#!/usr/bin/env python3
"""
laosplit Demo - Segments a few Lao sentences and shows which guards fired.
"""

import sys
from pathlib import Path

# Add src to path so we can import laosplit
sys.path.insert(0, str(Path(__file__).parent / "src"))

from laosplit.segmenters.lao import LaoWordSegmenter

class SimpleLogger:
    """Simple console logger for demo."""
    
    def info(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"INFO: {msg} {details}")
        
    def warn(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"WARN: {msg} {details}")
        
    def error(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"ERROR: {msg} {details}")

def run_demo():
    """Run the laosplit demo."""
    print("🇱🇦  laosplit Demo - Lao word segmentation")
    print("=" * 50)
    
    segmenter = LaoWordSegmenter(logger=SimpleLogger())
    
    sentences = [
        "ປະເທດລາວເປັນສິ່ງສວຍງາມ",
        "ຂ້ອຍມັກກິນເຂົ້າໜຽວໝູປີ້ງແຊບຫລາຍ",
        "ພາສາລາວ version 1.0 ເປັນພາສາທີ່ສວຍງາມ.",
        "ວຽກບ້ານພາສາອັງກິດຍາກຫລາຍແທ້ໆ.",
        "ສະ\u200bບາຍ\u200bດີ",  # zero-width spaces are stripped
    ]
    
    for i, sentence in enumerate(sentences, 1):
        print(f"\n{i}. Text: \"{sentence}\"")
        result = segmenter.analyze(sentence)
        print(f"   ✂️  {' | '.join(result.tokens)}")
        hits = ", ".join(f"{name}={count}" for name, count in sorted(result.guard_hits.items()))
        print(f"   📊 {result.token_count} tokens, guards: {hits}")
    
    print("\n🎉 Demo completed successfully!")
    return 0

if __name__ == "__main__":
    sys.exit(run_demo())
