#
# This example builds the grammar of balanced brackets by hand,
# and checks a few words with the Earley recognizer.
#

from earleychart import Grammar, SymbolAllocator, Recognizer

symbols = SymbolAllocator()
S = symbols.nonterminal('S')
open_, close = symbols.terminal('('), symbols.terminal(')')

grammar = Grammar(S, symbols)
grammar.add_rule(S, [open_, S, close, S])
grammar.add_rule(S, [])

recognizer = Recognizer(grammar)

tokens = {'(': open_, ')': close}

if __name__ == '__main__':
    for text in ['', '()', '(()())', '())(', '((']:
        result = recognizer.accept([tokens[c] for c in text])
        print('%-8r %s' % (text, 'Accept' if result else 'Discard'))

# Output:
#
# ''       Accept
# '()'     Accept
# '(()())' Accept
# '())('   Discard
# '(('     Discard
