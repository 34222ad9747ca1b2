"""YAML grammar loading and validation."""

import yaml
from pathlib import Path
from typing import Union, Any
from .schema import LaoGrammar

class GrammarLoadError(Exception):
    """Exception raised when grammar loading or validation fails."""
    pass

def load_grammar(path: Union[str, Path]) -> LaoGrammar:
    """
    Load and validate a segmentation grammar from a YAML file.
    
    Fields missing from the file keep their built-in defaults.
    
    Args:
        path: Path to YAML grammar file
        
    Returns:
        LaoGrammar: Validated, frozen grammar
        
    Raises:
        GrammarLoadError: If file cannot be read or grammar is invalid
    """
    path = Path(path)
    
    if not path.exists():
        raise GrammarLoadError(f"Grammar file not found: {path}")
        
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise GrammarLoadError(f"Invalid YAML in {path}: {e}")
    except Exception as e:
        raise GrammarLoadError(f"Cannot read grammar file {path}: {e}")
        
    return _build_grammar(data, source=str(path))

def load_grammar_from_string(yaml_content: str) -> LaoGrammar:
    """
    Load and validate a segmentation grammar from a YAML string.
    
    Args:
        yaml_content: YAML content as string
        
    Returns:
        LaoGrammar: Validated, frozen grammar
        
    Raises:
        GrammarLoadError: If YAML is invalid or grammar validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise GrammarLoadError(f"Invalid YAML content: {e}")
        
    return _build_grammar(data, source="<string>")

def grammar_to_yaml(grammar: LaoGrammar) -> str:
    """Dump a grammar as YAML, with sets written as sorted lists."""
    data = {}
    for name, value in grammar.model_dump().items():
        data[name] = sorted(value) if isinstance(value, (set, frozenset, list, tuple)) else value
    return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)

def _build_grammar(data: Any, source: str) -> LaoGrammar:
    if not isinstance(data, dict):
        raise GrammarLoadError(f"Grammar in {source} must be a YAML mapping, got {type(data)}")
        
    try:
        grammar = LaoGrammar.model_validate(data)
    except Exception as e:
        raise GrammarLoadError(f"Grammar validation failed: {e}")
        
    # Run consistency checks across sets
    issues = grammar.validate_sets()
    if issues:
        raise GrammarLoadError(f"Grammar validation issues: {'; '.join(issues)}")
        
    return grammar
