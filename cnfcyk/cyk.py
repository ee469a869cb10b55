"""cyk.py
CYK membership test for grammars in Chomsky Normal Form.
The table is indexed by (span, start), both 1-based: cell (j, i) holds every non-terminal deriving word[i .. i+j-1].
"""
import logging

logger = logging.getLogger(__name__)


class CykTable:
    """
    Triangular parse table for a word of the given length.

    Only cells with 1 <= span <= length and 1 <= start <= length - span + 1 exist.
    Addressing anything else raises IndexError.
    """

    def __init__(self, length):
        if length < 0:
            raise ValueError("word length must be >= 0, got %d" % length)
        self.length = length

        self._cells = dict()
        for span in range(1, length + 1):
            for start in range(1, length - span + 2):
                self._cells[span, start] = set()

    def _key(self, span, start):
        if not (1 <= span <= self.length and 1 <= start <= self.length - span + 1):
            raise IndexError("no cell (span=%d, start=%d) for a word of length %d" % (span, start, self.length))
        return span, start

    def cell(self, span, start):
        return frozenset(self._cells[self._key(span, start)])

    def add(self, span, start, symbol):
        self._cells[self._key(span, start)].add(symbol)

    def cells(self):
        """Yield ((span, start), symbols) in fill order: shorter spans first, then left to right."""
        for key, symbols in self._cells.items():
            yield key, frozenset(symbols)

    def __len__(self):
        return len(self._cells)

    def format(self):
        lines = []
        for (span, start), symbols in self.cells():
            if symbols:
                lines.append("[%d,%d]: %s" % (span, start, ", ".join(map(str, sorted(symbols)))))
        return "\n".join(lines)


def build_table(grammar, word):
    """
    Fill a fresh CykTable for word.

    word is any sequence of terminal symbols; a str is read one character per symbol.
    Every span is complete before the next longer span starts, since a cell only reads shorter spans.
    """
    word = list(word)
    n = len(word)
    table = CykTable(n)

    # Step 1: span 1 gets every A with A -> word[i].
    for i in range(1, n + 1):
        for non_terminal in grammar.terminal_rules_producing(word[i - 1]):
            table.add(1, i, non_terminal)

    # Step 2: span j at start i combines span k at i with span j-k at i+k, for every split k and every A -> B C.
    for j in range(2, n + 1):
        for i in range(1, n - j + 2):
            for k in range(1, j):
                left = table.cell(k, i)
                right = table.cell(j - k, i + k)
                if not left or not right:
                    continue

                for A, B, C in grammar.binary_rules():
                    if B in left and C in right:
                        table.add(j, i, A)

    logger.debug("filled %d cells for a word of length %d", len(table), n)
    return table


def accepts(grammar, table):
    """Read the verdict off a filled table: the start symbol must cover the whole word."""
    n = table.length
    accepted = n > 0 and grammar.start_symbol in table.cell(n, 1)

    logger.debug("word of length %d %s", n, "accepted" if accepted else "rejected",
                 extra={"word_length": n, "accepted": accepted})
    return accepted


def recognize(grammar, word):
    """Return True if the start symbol of grammar derives the whole word. The empty word is always rejected."""
    word = list(word)
    if not word:
        logger.debug("empty word rejected", extra={"word_length": 0, "accepted": False})
        return False

    return accepts(grammar, build_table(grammar, word))
