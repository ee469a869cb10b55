from .grammar import BinaryRule, Grammar, InvalidGrammar, TerminalRule, reference_grammar
from .cyk import CykTable, accepts, build_table, recognize

__all__ = [
    "BinaryRule",
    "CykTable",
    "Grammar",
    "InvalidGrammar",
    "TerminalRule",
    "accepts",
    "build_table",
    "recognize",
    "reference_grammar",
]
