"Items and item sets, the building blocks of the Earley chart"

from ..exceptions import InvalidOperation


class Item(object):
    "An Earley Item, the atom of the algorithm."

    __slots__ = ('rule', 'ptr', 'start', 'is_complete', '_hash')
    def __init__(self, rule, ptr, start):
        assert 0 <= ptr <= len(rule.expansion), (rule, ptr)
        self.rule = rule    # rule
        self.ptr = ptr      # dot
        self.start = start  # j
        self.is_complete = len(rule.expansion) == ptr
        self._hash = hash((self.rule, self.ptr, self.start))

    @property
    def expect(self):
        "The symbol right after the dot"
        if self.is_complete:
            raise InvalidOperation(self)
        return self.rule.expansion[self.ptr]

    def advance(self):
        if self.is_complete:
            raise InvalidOperation(self)
        return Item(self.rule, self.ptr + 1, self.start)

    def __eq__(self, other):
        if not isinstance(other, Item):
            return False
        return self is other or (self.ptr == other.ptr and self.start == other.start and self.rule == other.rule)

    def __hash__(self):
        return self._hash

    def __repr__(self):
        before = ( expansion.name for expansion in self.rule.expansion[:self.ptr] )
        after = ( expansion.name for expansion in self.rule.expansion[self.ptr:] )
        symbol = "{} ::= {}* {}".format(self.rule.origin.name, ' '.join(before), ' '.join(after))
        return '%s (%d)' % (symbol, self.start)


class ItemSet(object):
    """All the items valid at one input position, aka an Earley set.

    Items are sorted by what follows the dot:

    - ``to_scan``: a terminal
    - ``to_predict``: a nonterminal
    - ``to_reduce``: nothing, the item is complete
    """

    def __init__(self, items=()):
        self.to_scan = set()
        self.to_predict = set()
        self.to_reduce = set()
        self.add_all(items)

    def _group(self, item):
        if item.is_complete:
            return self.to_reduce
        elif item.expect.is_term:
            return self.to_scan
        else:
            return self.to_predict

    def add(self, item):
        self._group(item).add(item)

    def add_all(self, items):
        for item in items:
            self.add(item)

    def __contains__(self, item):
        return item in self._group(item)

    def __len__(self):
        return len(self.to_scan) + len(self.to_predict) + len(self.to_reduce)

    def __iter__(self):
        yield from self.to_scan
        yield from self.to_predict
        yield from self.to_reduce

    def __repr__(self):
        return 'ItemSet(scan=%d, predict=%d, reduce=%d)' % (len(self.to_scan), len(self.to_predict), len(self.to_reduce))
