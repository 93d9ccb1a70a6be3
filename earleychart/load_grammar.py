"Parses the textual grammar format into a Grammar"

from string import ascii_lowercase, ascii_uppercase

from .exceptions import GrammarSyntaxError, UnknownCharacter
from .grammar import Grammar, SymbolAllocator
from .utils import logger

EPSILON = '-'


class SymbolTable:
    """Maps characters to symbols.

    Lowercase letters are terminals, uppercase letters are nonterminals.
    The same character always maps to the same symbol.
    """

    def __init__(self, allocator=None):
        self.allocator = allocator if allocator is not None else SymbolAllocator()
        self._symbols = {}
        for c in ascii_lowercase:
            self._symbols[c] = self.allocator.terminal(c)
        for c in ascii_uppercase:
            self._symbols[c] = self.allocator.nonterminal(c)

    def symbol(self, char):
        try:
            return self._symbols[char]
        except KeyError:
            raise UnknownCharacter(char)

    def word(self, text, epsilon=EPSILON):
        if text == epsilon:
            return ()
        return tuple(self.symbol(c) for c in text)

    def __contains__(self, char):
        return char in self._symbols


def tokenize(text):
    "Yields (line number, token) for each whitespace separated token"
    for line_no, line in enumerate(text.splitlines(), 1):
        for token in line.split():
            yield line_no, token


def _next(tokens, what, line_no):
    try:
        return next(tokens)
    except StopIteration:
        raise GrammarSyntaxError("Unexpected end of grammar, expected %s" % what, line_no)


def _nonterminal(table, char, line_no):
    if char not in table or table.symbol(char).is_term:
        raise GrammarSyntaxError("Expected an uppercase nonterminal, got %r" % char, line_no)
    return table.symbol(char)


def read_grammar(tokens, table=None, epsilon=EPSILON):
    """Reads a grammar from an iterator of (line number, token) pairs.

    Consumes exactly the tokens of the grammar, so the caller may keep
    reading from the same iterator afterwards.
    """
    if table is None:
        table = SymbolTable()

    line_no, count = _next(tokens, "the rule count", None)
    if not count.isdigit():
        raise GrammarSyntaxError("Expected the rule count, got %r" % count, line_no)
    line_no, start = _next(tokens, "the start nonterminal", line_no)

    grammar = Grammar(_nonterminal(table, start, line_no), table.allocator)
    grammar.table = table

    for i in range(int(count)):
        line_no, head = _next(tokens, "rule %d of %s" % (i + 1, count), line_no)
        head = _nonterminal(table, head, line_no)
        line_no, body = _next(tokens, "a body for %s" % head.name, line_no)
        try:
            body = table.word(body, epsilon)
        except UnknownCharacter as e:
            raise GrammarSyntaxError("Unknown character %r in rule body" % e.char, line_no)
        grammar.add_rule(head, body)

    logger.debug("Loaded %d rules, start=%s", len(grammar.rules), grammar.start.name)
    return grammar


def load_grammar(text, table=None, epsilon=EPSILON):
    """Builds a Grammar from text of the form::

        2 S
        S aSbS
        S -

    The header holds the rule count and the start nonterminal, followed by
    that many rules, each a head and a body. ``epsilon`` stands for an empty
    body. Tokens are separated by any whitespace, newlines included.

    The symbol table is kept on the grammar as ``grammar.table``.
    """
    tokens = tokenize(text)
    grammar = read_grammar(tokens, table, epsilon)
    for line_no, token in tokens:
        raise GrammarSyntaxError("Unexpected text after the last rule: %r" % token, line_no)
    return grammar
