import sys
import logging
from argparse import ArgumentParser, FileType

from ..exceptions import EarleyError
from ..load_grammar import read_grammar, tokenize
from ..solver import Solver
from ..utils import logger

argparser = ArgumentParser(prog='earleychart', description="Reads a grammar, then prints Accept or Discard for each word",
                           epilog='Without a grammar file, the grammar is read from stdin, followed by the words')

argparser.add_argument('-g', '--grammar', type=FileType('r', encoding='utf-8'), default=None,
                       help='the grammar file (default=read from stdin)')
argparser.add_argument('-o', '--out', type=FileType('w', encoding='utf-8'), default=None, help='the output file (default=stdout)')
argparser.add_argument('-e', '--epsilon', default='-', help='the symbol for the empty word and empty rule bodies (default=-)')
argparser.add_argument('-d', '--debug', action='store_true')
argparser.add_argument('words', nargs='*', help='the words to check (default=read from the input)')


def run(grammar_file, stream, words, out, epsilon='-', debug=False):
    """Checks each word against the grammar, writing one line per word.

    When ``grammar_file`` is None, the grammar is read from ``stream``,
    and the words follow it in the same stream.
    """
    if grammar_file is not None:
        grammar = grammar_file.read()
        tokens = None
    else:
        tokens = tokenize(stream.read())
        grammar = read_grammar(tokens, epsilon=epsilon)

    solver = Solver(grammar, epsilon=epsilon, debug=debug)

    if not words:
        if tokens is None:
            tokens = tokenize(stream.read())
        words = [token for _line_no, token in tokens]

    for word in words:
        out.write('Accept\n' if solver.accepts(word) else 'Discard\n')


def main(argv=None, stdin=None):
    args = argparser.parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)
    try:
        run(args.grammar, stdin or sys.stdin, args.words, args.out or sys.stdout, args.epsilon, args.debug)
    except EarleyError as e:
        sys.stderr.write('error: %s\n' % e)
        return 1
    finally:
        if args.grammar is not None:
            args.grammar.close()
        if args.out is not None:
            args.out.close()
    return 0
