#
# This example uses the text format, with a left-recursive and ambiguous grammar:
#
#   E -> E p E | E m E | n
#
# where p is plus, m is times and n is a number.
#

from earleychart import Solver

grammar = """
    3 E
    E EpE
    E EmE
    E n
"""

solver = Solver(grammar)

if __name__ == '__main__':
    for word in ['n', 'npn', 'npnmn', 'np', 'nn', '-']:
        print(word, 'Accept' if solver.accepts(word) else 'Discard')

# Output:
#
# n Accept
# npn Accept
# npnmn Accept
# np Discard
# nn Discard
# - Discard
