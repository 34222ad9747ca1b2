"""Command-line interface for laosplit segmentation and grammar management."""

import argparse
import sys
import json
from pathlib import Path

from laosplit.grammar.loader import load_grammar, grammar_to_yaml, GrammarLoadError
from laosplit.grammar.schema import DEFAULT_GRAMMAR
from laosplit.segmenters.lao import LaoWordSegmenter
from laosplit.core.util import summarize_lengths


def _read_input(args):
    """Text from the positional argument, else --file, else stdin."""
    if args.text is not None:
        return args.text
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def split_command(args):
    """Segment text line by line and print one line of tokens per input line."""
    try:
        grammar = load_grammar(args.grammar) if args.grammar else DEFAULT_GRAMMAR
        segmenter = LaoWordSegmenter(grammar=grammar)

        text = _read_input(args)
        all_tokens = []
        guard_hits = {}

        for line in text.splitlines():
            result = segmenter.analyze(line)
            all_tokens.extend(result.tokens)
            for name, count in result.guard_hits.items():
                guard_hits[name] = guard_hits.get(name, 0) + count

            if args.json:
                print(json.dumps(result.tokens, ensure_ascii=False))
            else:
                print(args.sep.join(result.tokens))

        if args.stats:
            print(json.dumps({
                "guard_hits": guard_hits,
                "length_summary": summarize_lengths(all_tokens),
            }, indent=2, ensure_ascii=False))

        return 0

    except GrammarLoadError as e:
        print(f"❌ Grammar load failed: {e}")
        return 1
    except Exception as e:
        print(f"❌ Error: {e}")
        return 1


def validate_grammar_command(args):
    """Validate a grammar YAML file."""
    try:
        grammar_path = Path(args.grammar_file)
        if not grammar_path.exists():
            print(f"Error: Grammar file not found: {grammar_path}")
            return 1

        print(f"Validating grammar: {grammar_path}")
        grammar = load_grammar(grammar_path)

        print("✅ Grammar validation successful!")
        print(f"   Consonants: {len(grammar.consonants)}")
        print(f"   Leading vowels: {len(grammar.leading_vowels)}")
        print(f"   Middle marks: {len(grammar.middle_marks)}")
        print(f"   Digraph followers: {len(grammar.digraph_followers)}")
        print(f"   Repetition marks: {len(grammar.repetition_marks)}")

        if args.verbose:
            print("\nSets:")
            print(f"   leading_vowels: {' '.join(sorted(grammar.leading_vowels))}")
            print(f"   digraph_followers: {' '.join(sorted(grammar.digraph_followers))}")
            print(f"   glide_onsets: {' '.join(sorted(grammar.glide_onsets))} + {grammar.glide}")
            print(f"   liquid_onsets: {' '.join(sorted(grammar.liquid_onsets))} + {grammar.liquid}")

        return 0

    except GrammarLoadError as e:
        print(f"❌ Grammar validation failed: {e}")
        return 1
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        return 1


def grammar_command(args):
    """Print the built-in grammar as YAML."""
    print(grammar_to_yaml(DEFAULT_GRAMMAR), end="")
    return 0


def info_command(args):
    """Display laosplit version and system information."""
    print("laosplit CLI")
    print("=" * 50)

    # Try to get version from package
    try:
        import importlib.metadata
        version = importlib.metadata.version("lao-wordsplit")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    # Check for optional dependencies
    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="laosplit",
        description="Heuristic Lao word segmentation CLI"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Segment Lao text into words"
    )
    split_parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment (default: read --file or stdin)"
    )
    split_parser.add_argument(
        "-f", "--file",
        help="Read text from a UTF-8 file"
    )
    split_parser.add_argument(
        "-g", "--grammar",
        help="Path to a grammar YAML file (default: built-in grammar)"
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print each line's tokens as a JSON array"
    )
    split_parser.add_argument(
        "--stats",
        action="store_true",
        help="Also print guard hit counts and token length summary"
    )
    split_parser.add_argument(
        "--sep",
        default="|",
        help="Separator placed between tokens (default: '|')"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a grammar YAML file"
    )
    validate_parser.add_argument(
        "grammar_file",
        help="Path to the grammar YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show the validated sets"
    )

    # Grammar command
    subparsers.add_parser(
        "grammar",
        help="Print the built-in grammar as YAML"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "split":
        return split_command(args)
    elif args.command == "validate":
        return validate_grammar_command(args)
    elif args.command == "grammar":
        return grammar_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
