"""This module implements an Earley recognizer.

The recognizer answers one question: does a sequence of terminals belong to
the language of a context-free grammar? It handles every grammar shape
(epsilon rules, left and right recursion, ambiguity) with the same
predict / complete fixpoint, and never builds a parse tree.

The chart is a list of ItemSet instances, one for each input position.
Each ItemSet keeps its items sorted by what follows the dot, so that every
step of the algorithm only looks at the items it can act on.
"""

from ..exceptions import GrammarError
from ..utils import logger
from .earley_common import Item, ItemSet


class Recognizer:
    """Earley recognizer for a grammar.

    The given grammar is copied and augmented with a fresh start rule
    ``S' -> S``, so that the caller's grammar is never modified, and so that
    acceptance is always checked against a single non-recursive rule.
    """

    def __init__(self, grammar):
        if grammar.start is None:
            raise GrammarError("Grammar has no start symbol")

        self.grammar = grammar.copy()
        start = self.grammar.allocator.nonterminal(grammar.start.name + "'")
        self.grammar.add_rule(start, [grammar.start])
        self.grammar.set_start(start)

        # The augmented start has exactly one rule, which makes it the acceptance target
        self.start_rule, = self.grammar.rules_for(start)
        logger.debug("Augmented start rule: %s", self.start_rule)

    @property
    def start(self):
        return self.grammar.start

    def predict(self, item_set, i):
        """Adds ``N -> * body`` at position i for each nonterminal N awaited in item_set.

        Returns True if the set grew.
        """
        to_add = []
        for item in list(item_set.to_predict):
            for rule in self.grammar.rules_for(item.expect):
                to_add.append(Item(rule, 0, i))

        old_size = len(item_set)
        item_set.add_all(to_add)
        return old_size != len(item_set)

    def complete(self, chart, i):
        """Advances the items waiting for each rule completed at position i.

        Returns True if chart[i] grew.
        """
        item_set = chart[i]
        to_add = []
        for completed in list(item_set.to_reduce):
            origin = completed.rule.origin
            # completed.start may be i itself, for rules that matched nothing
            for item in list(chart[completed.start].to_predict):
                if item.expect == origin:
                    to_add.append(item.advance())

        old_size = len(item_set)
        item_set.add_all(to_add)
        return old_size != len(item_set)

    def closure(self, chart, i):
        "Runs predict and complete at position i until neither adds anything"
        while True:
            changed = self.predict(chart[i], i)
            changed |= self.complete(chart, i)
            if not changed:
                break

    def scan(self, item_set, next_set, token):
        for item in item_set.to_scan:
            if item.expect == token:
                next_set.add(item.advance())

    def build_chart(self, tokens):
        "Returns the list of item sets built while reading tokens"
        tokens = list(tokens)
        chart = [ItemSet() for _ in range(len(tokens) + 1)]

        chart[0].add(Item(self.start_rule, 0, 0))
        self.closure(chart, 0)

        for i, token in enumerate(tokens):
            self.scan(chart[i], chart[i+1], token)
            self.closure(chart, i+1)
            logger.debug("Column %d: %r", i+1, chart[i+1])

        return chart

    def accept(self, tokens):
        chart = self.build_chart(tokens)
        return Item(self.start_rule, 1, 0) in chart[-1].to_reduce
