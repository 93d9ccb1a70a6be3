import logging

from .exceptions import ConfigurationError, UnknownCharacter, assert_config
from .grammar import Grammar
from .load_grammar import SymbolTable, load_grammar
from .parsers.earley import Recognizer
from .utils import logger


class SolverOptions:
    """Specifies the options for Solver

    """
    OPTIONS_DOC = """
    epsilon
            The word (and rule body) that stands for the empty string (Default: "-")
    debug
            Log the work of the recognizer at DEBUG level (default: False)
    strict
            Raise ``UnknownCharacter`` for words with characters that have no symbol,
            instead of rejecting them (default: False)
    """
    if __doc__:
        __doc__ += OPTIONS_DOC

    _defaults = {
        'epsilon': '-',
        'debug': False,
        'strict': False,
    }

    def __init__(self, options_dict):
        o = dict(options_dict)

        options = {}
        for name, default in self._defaults.items():
            if name in o:
                value = o.pop(name)
                if isinstance(default, bool):
                    value = bool(value)
            else:
                value = default

            options[name] = value

        if o:
            raise ConfigurationError("Unknown options: %s" % list(o.keys()))

        epsilon = options['epsilon']
        if not isinstance(epsilon, str) or len(epsilon) != 1 or epsilon.isalpha():
            raise ConfigurationError("epsilon must be a single non-letter character, got %r" % (epsilon,))

        self.__dict__['options'] = options

    def __getattr__(self, name):
        try:
            return self.options[name]
        except KeyError as e:
            raise AttributeError(e)

    def __setattr__(self, name, value):
        assert_config(name, self.options.keys(), "%r isn't a valid option. Expected one of: %s")
        self.options[name] = value


class Solver:
    """Answers membership queries for words over a grammar.

    Parameters:
        grammar: grammar text, a file-like object containing it, or a Grammar
        table: the SymbolTable words are mapped with. Required when passing a
            Grammar whose symbols come from a table; otherwise a new one is used.
        options: see ``SolverOptions``

    Example:
        >>> Solver("2 S  S aSbS  S -").accepts("aabb")
        True
    """

    def __init__(self, grammar, table=None, **options):
        self.options = SolverOptions(options)
        if self.options.debug:
            logger.setLevel(logging.DEBUG)

        # Drain file-like objects to get their contents
        try:
            read = grammar.read
        except AttributeError:
            pass
        else:
            grammar = read()

        if isinstance(grammar, str):
            self.grammar = load_grammar(grammar, table, self.options.epsilon)
            self.table = self.grammar.table
        else:
            assert isinstance(grammar, Grammar), grammar
            self.grammar = grammar
            self.table = table if table is not None else getattr(grammar, 'table', None) or SymbolTable(grammar.allocator)

        self.recognizer = Recognizer(self.grammar)

    def accepts(self, word):
        try:
            tokens = self.table.word(word, self.options.epsilon)
        except UnknownCharacter:
            if self.options.strict:
                raise
            logger.debug("Rejecting %r: unknown character", word)
            return False

        result = self.recognizer.accept(tokens)
        logger.debug("%r: %s", word, "accepted" if result else "rejected")
        return result

    def __repr__(self):
        return 'Solver(%r)' % (self.grammar,)
