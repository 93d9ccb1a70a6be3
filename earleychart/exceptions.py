class EarleyError(Exception):
    pass


class ConfigurationError(EarleyError, ValueError):
    pass


def assert_config(value, options, msg='Got %r, expected one of %s'):
    if value not in options:
        raise ConfigurationError(msg % (value, options))


class GrammarError(EarleyError):
    pass


class UndefinedSymbol(GrammarError, KeyError):
    """Raised when a nonterminal is expanded but no rule was ever added for it.

    Reachable nonterminals must have at least one rule, even an empty one.
    """
    def __init__(self, symbol):
        self.symbol = symbol
        message = 'No rules defined for %r' % (symbol,)
        super(UndefinedSymbol, self).__init__(message)

    def __str__(self):
        # KeyError would quote the message otherwise
        return self.args[0]


class InvalidOperation(EarleyError):
    "Raised when asking a completed item for the symbol after its dot."

    def __init__(self, item):
        self.item = item
        super(InvalidOperation, self).__init__('Item is complete, nothing after the dot: %r' % (item,))


class GrammarSyntaxError(GrammarError):
    def __init__(self, message, line=None):
        self.line = line
        if line is not None:
            message = '%s (line %d)' % (message, line)
        super(GrammarSyntaxError, self).__init__(message)


class UnknownCharacter(GrammarError, KeyError):
    def __init__(self, char):
        self.char = char
        super(UnknownCharacter, self).__init__('No symbol for character %r' % (char,))

    def __str__(self):
        return self.args[0]
