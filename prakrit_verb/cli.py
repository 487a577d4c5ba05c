"""
Command line interface for prakrit-verb.

Usage:
    python -m prakrit_verb.cli gam                          # present indicative table
    python -m prakrit_verb.cli gam -t past -f json          # past tense as JSON
    python -m prakrit_verb.cli bhU -t imperative -d magadhi --voice passive
    python -m prakrit_verb.cli batch -i roots.txt -o out.json --all
    python -m prakrit_verb.cli interactive
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from prakrit_verb import __version__
from prakrit_verb.batch import BatchProcessor, TenseMood
from prakrit_verb.conjugations import conjugate
from prakrit_verb.encoding import encode_report, encode_result, normalize_input
from prakrit_verb.errors import ConjugationError
from prakrit_verb.models import BatchReport, Dialect, Encoding, Mood, Tense, Voice
from prakrit_verb.output import format_table, report_to_json, result_to_json, write_csv
from prakrit_verb.settings import (
    DEBUG, DEFAULT_DIALECT, DEFAULT_ENCODING, DEFAULT_SEED, DEFAULT_WORKERS,
)

TENSE_CHOICES = ["present", "past", "future", "imperative"]
VOICE_CHOICES = [v.value for v in Voice]
DIALECT_CHOICES = [d.value for d in Dialect]
ENCODING_CHOICES = [e.value for e in Encoding]

INTERACTIVE_HELP = """Commands:
  <verb> [tense] [dialect] [voice]  - Conjugate a verb
  tenses: present (default), past, future, imperative
  dialects: maharastri (default), shauraseni, magadhi
  voices: active (default), passive
  help - Show this help
  quit - Exit"""


def parse_tense(name: str) -> Tuple[Tense, Mood]:
    """Map a tense choice to (tense, mood); 'imperative' is present imperative."""
    name = name.lower()
    if name == "imperative":
        return Tense.PRESENT, Mood.IMPERATIVE
    return Tense(name), Mood.INDICATIVE


def _default_choice(value: str, choices: List[str]) -> str:
    return value if value in choices else choices[0]


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if DEBUG else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')


def _write_text(text: str, output: Optional[str]) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


# ============================================================================
# Conjugate
# ============================================================================

def conjugate_command(args) -> int:
    """Conjugate a single verb and print or write the result."""
    tense, mood = parse_tense(args.tense)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        result = conjugate(
            normalize_input(args.verb), tense, mood,
            Voice(args.voice), Dialect(args.dialect), rng=rng,
        )
    except ConjugationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = encode_result(result, Encoding(args.encoding))

    try:
        if args.format == "json":
            if args.output:
                text = report_to_json(BatchReport(results=[result]))
            else:
                text = result_to_json(result)
            _write_text(text + "\n", args.output)
        elif args.format == "csv":
            if args.output:
                with open(args.output, "w", encoding="utf-8", newline="") as f:
                    write_csv(result, f)
            else:
                write_csv(result, sys.stdout)
        else:
            _write_text(format_table(result), args.output)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0


# ============================================================================
# Batch
# ============================================================================

def batch_command(args) -> int:
    """Conjugate every root in a file and write a JSON or CSV report."""
    processor = BatchProcessor(
        tense_moods=[TenseMood(*parse_tense(t)) for t in args.tenses or []],
        voices=[Voice(v) for v in args.voices or []],
        dialects=[Dialect(d) for d in args.dialects or []],
        seed=args.seed,
        workers=args.workers,
    )
    if args.all or args.all_tenses:
        processor.with_all_tenses()
    if args.all or args.all_dialects:
        processor.with_all_dialects()
    if args.all or args.all_voices:
        processor.with_all_voices()

    try:
        report = processor.process_file(args.input)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    report = encode_report(report, Encoding(args.encoding))

    try:
        if args.format == "csv":
            with open(args.output, "w", encoding="utf-8", newline="") as f:
                write_csv(report, f)
        else:
            Path(args.output).write_text(report_to_json(report) + "\n", encoding="utf-8")
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    print(f"Output written to: {args.output}")
    print(f"Processed {len(report.results)} conjugations, {len(report.errors)} errors")

    if report.errors:
        print("\nErrors:", file=sys.stderr)
        for error in report.errors:
            print(f"  Line {error.line_number}: {error.verb_root} - {error.error_message}",
                  file=sys.stderr)

    return 0


def main_batch(args: list) -> int:
    """CLI entry point for the batch subcommand."""
    parser = argparse.ArgumentParser(
        description='Conjugate a file of verb roots (one per line)',
        prog='prakrit-verb batch',
    )

    parser.add_argument(
        '--input', '-i',
        required=True,
        metavar='PATH',
        help='Input file containing verb roots, one per line',
    )

    parser.add_argument(
        '--output', '-o',
        required=True,
        metavar='PATH',
        help='Output file path',
    )

    parser.add_argument(
        '--format', '-f',
        choices=['json', 'csv'],
        default='json',
        help='Output format (default: json)',
    )

    parser.add_argument(
        '--encoding',
        choices=ENCODING_CHOICES,
        default=_default_choice(DEFAULT_ENCODING, ENCODING_CHOICES),
        help='Output encoding (default: %(default)s)',
    )

    parser.add_argument(
        '--tenses',
        action='append',
        choices=TENSE_CHOICES,
        help='Tense to generate (repeatable)',
    )

    parser.add_argument(
        '--voices',
        action='append',
        choices=VOICE_CHOICES,
        help='Voice to generate (repeatable)',
    )

    parser.add_argument(
        '--dialects',
        action='append',
        choices=DIALECT_CHOICES,
        help='Dialect to generate (repeatable)',
    )

    parser.add_argument('--all-tenses', action='store_true',
                        help='Generate present, past, future and imperative')
    parser.add_argument('--all-dialects', action='store_true',
                        help='Generate maharastri, shauraseni and magadhi')
    parser.add_argument('--all-voices', action='store_true',
                        help='Generate active and passive')
    parser.add_argument('--all', action='store_true',
                        help='Generate all tenses x dialects x voices')

    parser.add_argument(
        '--workers', '-w',
        type=int,
        default=DEFAULT_WORKERS,
        metavar='N',
        help='Worker threads (default: %(default)s)',
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=DEFAULT_SEED,
        metavar='N',
        help='Seed for reproducible output',
    )

    parser.add_argument('--verbose', action='store_true', help='Log progress')

    parsed = parser.parse_args(args)
    setup_logging(parsed.verbose)
    return batch_command(parsed)


# ============================================================================
# Interactive
# ============================================================================

def run_interactive(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                    stderr: Optional[TextIO] = None, seed: Optional[int] = None) -> int:
    """
    Read '<verb> [tense] [dialect] [voice]' lines until quit or end of input.

    Args:
        seed: Seeds one random stream shared by the whole session.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    rng = random.Random(seed) if seed is not None else None

    print("Prakrit Verb Conjugation - Interactive Mode", file=stdout)
    print("============================================", file=stdout)
    print(INTERACTIVE_HELP, file=stdout)
    print(file=stdout)

    while True:
        stdout.write("> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            break

        line = line.strip()
        if not line:
            continue

        command = line.lower()
        if command in ("quit", "exit", "q"):
            print("Goodbye!", file=stdout)
            break
        if command in ("help", "h", "?"):
            print(INTERACTIVE_HELP, file=stdout)
            continue

        parts = line.split()
        try:
            tense, mood = parse_tense(parts[1]) if len(parts) > 1 else (Tense.PRESENT, Mood.INDICATIVE)
            dialect = Dialect(parts[2].lower()) if len(parts) > 2 else Dialect.MAHARASTRI
            voice = Voice(parts[3].lower()) if len(parts) > 3 else Voice.ACTIVE
        except ValueError as e:
            print(f"Error: {e}", file=stderr)
            continue

        try:
            result = conjugate(normalize_input(parts[0]), tense, mood, voice, dialect, rng=rng)
        except ConjugationError as e:
            print(f"Error: {e}", file=stderr)
            continue

        print(file=stdout)
        stdout.write(format_table(result))
        print(file=stdout)

    return 0


# ============================================================================
# Main
# ============================================================================

def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'batch':
        return main_batch(args_list[1:])
    if args_list and args_list[0] == 'interactive':
        setup_logging()
        return run_interactive(seed=DEFAULT_SEED)
    if args_list and args_list[0] == 'conjugate':
        args_list = args_list[1:]

    parser = argparse.ArgumentParser(
        description='Prakrit verb conjugation generator (Maharastri, Shauraseni, Magadhi)',
        prog='prakrit-verb',
        epilog='Subcommands:\n  prakrit-verb batch        Conjugate a file of roots\n  prakrit-verb interactive  Start interactive mode',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'verb',
        nargs='?',
        help='Verb root in SLP1 or Harvard-Kyoto (e.g. gam, bhU)',
    )

    parser.add_argument(
        '-t', '--tense',
        choices=TENSE_CHOICES,
        default='present',
        help='Tense to conjugate (default: present)',
    )

    parser.add_argument(
        '--voice',
        choices=VOICE_CHOICES,
        default='active',
        help='Grammatical voice (default: active)',
    )

    parser.add_argument(
        '-d', '--dialect',
        choices=DIALECT_CHOICES,
        default=_default_choice(DEFAULT_DIALECT, DIALECT_CHOICES),
        help='Prakrit dialect (default: %(default)s)',
    )

    parser.add_argument(
        '-f', '--format',
        choices=['table', 'json', 'csv'],
        default='table',
        help='Output format (default: table)',
    )

    parser.add_argument(
        '-e', '--encoding',
        choices=ENCODING_CHOICES,
        default=_default_choice(DEFAULT_ENCODING, ENCODING_CHOICES),
        help='Output encoding (default: %(default)s)',
    )

    parser.add_argument(
        '-o', '--output',
        metavar='PATH',
        help='Output file path (stdout if not given)',
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=DEFAULT_SEED,
        metavar='N',
        help='Seed for the optional vowel substitution',
    )

    parser.add_argument('--verbose', action='store_true', help='Log conjugation steps')

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args_list)

    if parsed.version:
        print(f'prakrit-verb {__version__}')
        return 0

    if parsed.verb is None:
        parser.print_help()
        return 1

    setup_logging(parsed.verbose)
    return conjugate_command(parsed)


if __name__ == '__main__':
    sys.exit(main())
