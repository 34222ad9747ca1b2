"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from laosplit.segmenters.lao import LaoWordSegmenter


@pytest.fixture
def segmenter():
    """Provide a segmenter on the built-in grammar."""
    return LaoWordSegmenter()


@pytest.fixture
def sample_grammar_yaml():
    """Provide a partial grammar YAML that drops ທ from the liquid onsets."""
    return """
liquid_onsets: ["ປ", "ກ", "ບ", "ຟ"]
"""


@pytest.fixture
def temp_grammar_file(sample_grammar_yaml):
    """Provide a temporary grammar file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False,
                                     encoding='utf-8') as f:
        f.write(sample_grammar_yaml)
        temp_path = Path(f.name)
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class CountingMeter:
    """Meter that keeps counters and observations in memory."""
    
    def __init__(self):
        self.counters = {}
        self.observations = []
    
    def inc(self, name: str, amount: int = 1, **tags):
        key = (name, tuple(sorted(tags.items())))
        self.counters[key] = self.counters.get(key, 0) + amount
    
    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value, tags))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a meter that records metrics."""
    return CountingMeter()
