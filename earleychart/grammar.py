from .exceptions import GrammarError, UndefinedSymbol


class Symbol(object):
    """A grammar symbol.

    Symbols compare by identity: two symbols are equal only if they are the
    same object. Create them through a ``SymbolAllocator``, never directly.
    """
    __slots__ = ('index', 'name')
    is_term = NotImplemented
    _prefix = '?'

    def __init__(self, index, name=None):
        self.index = index
        self.name = name if name is not None else '%s%d' % (self._prefix, index)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.name)


class Terminal(Symbol):
    __slots__ = ()
    is_term = True
    _prefix = 't'


class NonTerminal(Symbol):
    __slots__ = ()
    is_term = False
    _prefix = 'N'


class SymbolAllocator(object):
    "Issues symbols with increasing indexes. One allocator per session."

    def __init__(self):
        self._symbols = []

    def _new(self, cls, name):
        symbol = cls(len(self._symbols), name)
        self._symbols.append(symbol)
        return symbol

    def terminal(self, name=None):
        return self._new(Terminal, name)

    def nonterminal(self, name=None):
        return self._new(NonTerminal, name)

    def __len__(self):
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __contains__(self, symbol):
        index = getattr(symbol, 'index', None)
        return index is not None and index < len(self._symbols) and self._symbols[index] is symbol


class Rule(object):
    """
        origin : a nonterminal
        expansion : a tuple of symbols, empty for an epsilon rule
    """
    __slots__ = ('origin', 'expansion', '_hash')

    def __init__(self, origin, expansion):
        self.origin = origin
        self.expansion = tuple(expansion)
        self._hash = hash((self.origin, self.expansion))

    def __str__(self):
        return '<%s : %s>' % (self.origin.name, ' '.join(x.name for x in self.expansion))

    def __repr__(self):
        return 'Rule(%r, %r)' % (self.origin, self.expansion)

    def __hash__(self):
        return self._hash

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return False
        return self.origin == other.origin and self.expansion == other.expansion


class Grammar(object):
    """A context-free grammar: a registry of rules plus a start symbol.

    Parameters:
        start: the start nonterminal (may be set later with ``set_start``)
        allocator: the ``SymbolAllocator`` that fresh symbols are drawn from.
            A new one is created if not given.
    """

    def __init__(self, start=None, allocator=None):
        self.allocator = allocator if allocator is not None else SymbolAllocator()
        self.symbols = set()
        self._rules = {}
        self.start = None
        if start is not None:
            self.set_start(start)

    def add_rule(self, origin, expansion):
        if origin.is_term:
            raise GrammarError("Rule head must be a nonterminal, got %r" % (origin,))
        rule = Rule(origin, expansion)
        # dicts keep insertion order, and give us set semantics on the bodies
        self._rules.setdefault(origin, {}).setdefault(rule.expansion, rule)
        self.symbols.add(origin)
        self.symbols.update(rule.expansion)

    def rules_for(self, symbol):
        try:
            return tuple(self._rules[symbol].values())
        except KeyError:
            raise UndefinedSymbol(symbol)

    def right_sides(self, symbol):
        return tuple(rule.expansion for rule in self.rules_for(symbol))

    @property
    def rules(self):
        return [rule for alternatives in self._rules.values() for rule in alternatives.values()]

    def set_start(self, symbol):
        self.start = symbol
        self.symbols.add(symbol)

    def get_start(self):
        return self.start

    def copy(self):
        "Returns an independent grammar with the same rules, symbols and allocator"
        new = Grammar(allocator=self.allocator)
        new.symbols = set(self.symbols)
        new._rules = {origin: dict(alternatives) for origin, alternatives in self._rules.items()}
        new.start = self.start
        return new

    def __repr__(self):
        return 'Grammar(start=%r, rules=%d)' % (self.start, len(self.rules))
