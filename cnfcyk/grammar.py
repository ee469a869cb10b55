"""grammar.py
Chomsky Normal Form grammars: rule shapes, an immutable Grammar and the readers that build one.
A rule is either A -> a (one terminal) or A -> B C (two non-terminals).
"""
import logging
from typing import NamedTuple

import nltk

logger = logging.getLogger(__name__)


class InvalidGrammar(ValueError):
    pass


class TerminalRule(NamedTuple):
    non_terminal: str
    terminal: str


class BinaryRule(NamedTuple):
    non_terminal: str
    left: str
    right: str


REFERENCE_GRAMMAR = '''\
S -> A B
A -> C D
A -> C F
B -> c
B -> E B
C -> a
D -> b
E -> c
F -> A D\
'''


class Grammar:
    """
    An ordered, read-only collection of CNF rules.

    The start symbol is the left-hand side of the first rule unless given explicitly.
    Rules are checked once here; the recognizer trusts them afterwards.
    """

    def __init__(self, rules, start=None):
        rules = tuple(rules)
        if not rules:
            raise InvalidGrammar("a grammar needs at least one rule")

        for rule in rules:
            if not isinstance(rule, (TerminalRule, BinaryRule)):
                raise InvalidGrammar("not a CNF rule: %r" % (rule,))

        non_terminals = {rule.non_terminal for rule in rules}
        for rule in rules:
            if isinstance(rule, BinaryRule):
                for operand in (rule.left, rule.right):
                    if operand not in non_terminals:
                        raise InvalidGrammar(
                            "%s -> %s %s: %r is not a non-terminal of this grammar"
                            % (rule.non_terminal, rule.left, rule.right, operand))

        self._rules = rules
        self._start = rules[0].non_terminal if start is None else start
        if self._start not in non_terminals:
            raise InvalidGrammar("start symbol %r has no rules" % (self._start,))

        # Reverse lookup for lexical rules, like a reverse rules dictionary keyed by terminal.
        lexical = dict()
        binary = dict()
        for rule in rules:
            if isinstance(rule, TerminalRule):
                producers = lexical.setdefault(rule.terminal, [])
                if rule.non_terminal not in producers:
                    producers.append(rule.non_terminal)
            else:
                binary.setdefault(tuple(rule), None)

        self._lexical = {terminal: tuple(producers) for terminal, producers in lexical.items()}
        self._binary = tuple(binary)
        self._non_terminals = frozenset(non_terminals)

        logger.debug("grammar built: %d rules, %d lexical terminals, %d binary rules, start %s",
                     len(rules), len(self._lexical), len(self._binary), self._start)

    @property
    def start_symbol(self):
        return self._start

    @property
    def rules(self):
        return self._rules

    @property
    def non_terminals(self):
        return self._non_terminals

    @property
    def terminals(self):
        return frozenset(self._lexical)

    def terminal_rules_producing(self, symbol):
        """Iterate over every non-terminal A with a rule A -> symbol."""
        return iter(self._lexical.get(symbol, ()))

    def binary_rules(self):
        """Iterate over (A, B, C) for every distinct rule A -> B C."""
        return iter(self._binary)

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __repr__(self):
        return "Grammar(%d rules, start=%r)" % (len(self._rules), self._start)

    def display(self):
        """
        Return the grammar in arrow notation, binary rules first and then one lexical line per non-terminal.
        With string symbols the output can be read back with Grammar.from_string; other symbols are shown with str().
        """
        lines = []
        lexical = dict()
        for rule in self._rules:
            if isinstance(rule, BinaryRule):
                lines.append("%s -> %s %s" % (rule.non_terminal, rule.left, rule.right))
            else:
                lexical.setdefault(rule.non_terminal, []).append(str(rule.terminal))

        for left, right in lexical.items():
            lines.append("%s -> %s" % (left, " | ".join(right)))

        return "\n".join(lines)

    @classmethod
    def from_string(cls, text, start=None):
        """
        Given a string of rules in arrow notation, build the grammar.

        Example:
        S -> A B
        C -> a | b

        A right-hand side with two symbols is a binary rule, a single symbol or '|' alternatives are lexical.
        Blank lines and lines starting with '#' are skipped.
        """
        rules = list()

        for number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "->" not in line:
                raise InvalidGrammar("line %d: expected 'A -> ...', got %r" % (number, line))

            left, right = line.split("->", 1)
            left = left.strip()
            if not left or len(left.split()) != 1:
                raise InvalidGrammar("line %d: bad left-hand side %r" % (number, left))

            if "|" in right:
                alternatives = [r.strip() for r in right.split("|")]
                for terminal in alternatives:
                    if len(terminal.split()) != 1:
                        raise InvalidGrammar("line %d: lexical alternative %r must be one symbol" % (number, terminal))
                    rules.append(TerminalRule(left, terminal))
                continue

            right = right.split()
            if len(right) == 1:
                rules.append(TerminalRule(left, right[0]))
            elif len(right) == 2:
                rules.append(BinaryRule(left, right[0], right[1]))
            else:
                raise InvalidGrammar("line %d: right-hand side must have 1 or 2 symbols, got %d"
                                     % (number, len(right)))

        return cls(rules, start=start)

    @classmethod
    def from_nltk(cls, cfg):
        """Convert an nltk.CFG that is already in Chomsky Normal Form."""
        if not cfg.is_chomsky_normal_form():
            raise InvalidGrammar("nltk grammar is not in Chomsky Normal Form")

        rules = list()
        for production in cfg.productions():
            left = production.lhs().symbol()
            right = production.rhs()
            if len(right) == 1:
                rules.append(TerminalRule(left, right[0]))
            else:
                rules.append(BinaryRule(left, right[0].symbol(), right[1].symbol()))

        return cls(rules, start=cfg.start().symbol())

    @classmethod
    def from_nltk_string(cls, text):
        try:
            cfg = nltk.CFG.fromstring(text)
        except ValueError as e:
            raise InvalidGrammar(str(e)) from e
        return cls.from_nltk(cfg)


def reference_grammar():
    """The built-in grammar: S -> A B with A deriving a^n b^n and B deriving c^m."""
    return Grammar.from_string(REFERENCE_GRAMMAR)
