"""
Command-line interface for vlasisku.

- Look up gismu, cmavo, rafsi, glosses and selmaho
- Analyze lujvo into their rafsi
- Interactive lookup loop
"""
import sys
import argparse
import logging

from vlasisku.formatting import format_results, results_to_json
from vlasisku.lexicon import LexiconIndex, MissingOwnerError
from vlasisku.logging_config import setup_logging
from vlasisku.resolver import Resolver, normalize_word

logger = logging.getLogger(__name__)

PROMPT = "vlasisku> "


def load_lexicon(args) -> LexiconIndex:
    """Load the lexicon or exit with an error message."""
    try:
        return LexiconIndex.from_directory(args.data_dir, progress=args.progress)
    except MissingOwnerError as e:
        print(f"ERROR: corrupt lexicon: {e}", file=sys.stderr)
        sys.exit(1)
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print("Use --data-dir to point at gismu.dat, cmavo.dat and rafsi.dat", file=sys.stderr)
        sys.exit(1)


def print_results(query, results, output_format):
    if output_format == 'json':
        print(results_to_json(results))
    else:
        print(format_results(query, results))


def cmd_query(args):
    """Look up one query."""
    resolver = Resolver(load_lexicon(args))
    text = " ".join(args.text)
    print_results(text, resolver.query(text), args.format)


def cmd_lujvo(args):
    """Analyze a word as a lujvo, skipping the dictionary tables."""
    resolver = Resolver(load_lexicon(args))
    word = normalize_word(args.word.strip())
    result = resolver.query_lujvo(word)
    results = [result] if result is not None else []
    print_results(word, results, args.format)
    if result is None:
        sys.exit(1)


def cmd_repl(args):
    """Read queries from stdin until EOF or an empty line."""
    resolver = Resolver(load_lexicon(args))
    interactive = sys.stdin.isatty()

    while True:
        if interactive:
            print(PROMPT, end='', flush=True)
        line = sys.stdin.readline()
        if not line or not line.strip():
            break
        text = line.strip()
        print_results(text, resolver.query(text), args.format)
        if interactive:
            print()


def cmd_info(args):
    """Display lexicon statistics."""
    lexicon = load_lexicon(args)

    print("=== vlasisku lexicon ===\n")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Data directory: {args.data_dir or 'default'}\n")
    for table, count in lexicon.stats().items():
        print(f"  {table + ':':<9} {count:>6,}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vlasisku',
        description='vlasisku: Lojban dictionary lookup and lujvo analysis',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Look up a gismu, cmavo, rafsi or gloss
  vlasisku query klama
  vlasisku query dog --format json

  # Look up a selmaho, or the selmaho of a cmavo
  vlasisku query KOhA
  vlasisku query MI

  # Analyze a lujvo
  vlasisku lujvo lojbangu

  # Interactive lookup
  vlasisku repl
        """
    )
    parser.add_argument('--data-dir', help='Directory with gismu.dat, cmavo.dat, rafsi.dat')
    parser.add_argument('--progress', action='store_true', help='Show progress while loading tables')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    parser.add_argument('--log-file', help='Append log output to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- query command ---
    parser_query = subparsers.add_parser('query', help='Look up a word, gloss or selmaho')
    parser_query.add_argument('text', nargs='+', help='Query (words are joined with spaces)')
    parser_query.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    parser_query.set_defaults(func=cmd_query)

    # --- lujvo command ---
    parser_lujvo = subparsers.add_parser('lujvo', help='Split a lujvo into rafsi')
    parser_lujvo.add_argument('word', help='Word to analyze')
    parser_lujvo.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    parser_lujvo.set_defaults(func=cmd_lujvo)

    # --- repl command ---
    parser_repl = subparsers.add_parser('repl', help='Interactive lookup loop')
    parser_repl.add_argument('--format', choices=['text', 'json'], default='text',
                             help='Output format (default: text)')
    parser_repl.set_defaults(func=cmd_repl)

    # --- info command ---
    parser_info = subparsers.add_parser('info', help='Display lexicon statistics')
    parser_info.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(log_file=args.log_file, debug=args.debug)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == '__main__':
    main()
