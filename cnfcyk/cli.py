"""Command-line runner for the CYK recognizer.

    python -m cnfcyk --word aabbc
    echo "abc" | cnfcyk --table

Exit status is 0 when the word is accepted, 1 when it is rejected, 2 when the grammar cannot be loaded
and 3 when the CYK_* environment settings or the log file are unusable.
"""

import argparse
import sys

from .config import GRAMMAR_FORMATS, load_settings
from .cyk import accepts, build_table, recognize
from .grammar import Grammar, InvalidGrammar, reference_grammar
from .logging_config import setup_logger
from .words import read_word, split_word

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_BAD_GRAMMAR = 2
EXIT_BAD_CONFIG = 3


def build_parser(settings):
    parser = argparse.ArgumentParser(
        prog="cnfcyk",
        description="Check whether a word belongs to a CNF grammar using the CYK algorithm.",
    )
    parser.add_argument(
        "--word",
        type=str,
        default=None,
        help="word to check; read from stdin when omitted",
    )
    parser.add_argument(
        "--grammar",
        type=str,
        default=settings.grammar_file,
        help="grammar file; the built-in grammar is used when omitted",
    )
    parser.add_argument(
        "--format",
        choices=GRAMMAR_FORMATS,
        default=settings.grammar_format,
        help="grammar file notation: 'arrow' (A -> B C, A -> a | b) or 'nltk' (nltk.CFG.fromstring)",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        default=settings.tokens,
        help="split the word on whitespace instead of reading one symbol per character",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="print the filled parse table",
    )
    parser.add_argument(
        "--show-grammar",
        action="store_true",
        help="print the grammar before checking the word",
    )
    return parser


def load_grammar(path, grammar_format):
    if path is None:
        return reference_grammar()

    with open(path, encoding="utf-8") as f:
        text = f.read()

    if grammar_format == "nltk":
        return Grammar.from_nltk_string(text)
    return Grammar.from_string(text)


def main(argv=None):
    try:
        settings = load_settings()
        logger = setup_logger("cnfcyk", log_file=settings.log_file, level=settings.log_level,
                              json_lines=settings.log_json)
    except (ValueError, OSError) as e:
        print("Invalid configuration: %s" % e, file=sys.stderr)
        return EXIT_BAD_CONFIG

    args = build_parser(settings).parse_args(argv)

    try:
        grammar = load_grammar(args.grammar, args.format)
    except (InvalidGrammar, OSError) as e:
        logger.error("could not load grammar %s: %s", args.grammar, e)
        print("Invalid grammar: %s" % e, file=sys.stderr)
        return EXIT_BAD_GRAMMAR

    if args.show_grammar:
        print(grammar.display())
        print()

    if args.word is None:
        print("Please enter the word: ", end="", flush=True)
        text = read_word(sys.stdin)
    else:
        text = args.word

    word = split_word(text, tokens=args.tokens)
    print('You entered "%s" with a length of %d!' % (text, len(word)))

    if args.table:
        table = build_table(grammar, word)
        print("\nParsing Table:")
        print(table.format())
        result = accepts(grammar, table)
    else:
        result = recognize(grammar, word)

    print("Word is valid: %s" % ("true" if result else "false"))

    return EXIT_ACCEPTED if result else EXIT_REJECTED
