from __future__ import absolute_import

from unittest import TestCase, main

from earleychart.load_grammar import SymbolTable, load_grammar, read_grammar, tokenize
from earleychart.exceptions import GrammarError, GrammarSyntaxError, UnknownCharacter


class TestSymbolTable(TestCase):
    def setUp(self):
        self.table = SymbolTable()

    def test_letters(self):
        self.assertTrue(self.table.symbol('a').is_term)
        self.assertTrue(self.table.symbol('z').is_term)
        self.assertFalse(self.table.symbol('A').is_term)
        self.assertFalse(self.table.symbol('Z').is_term)
        self.assertIs(self.table.symbol('q'), self.table.symbol('q'))
        self.assertEqual(len(self.table.allocator), 52)

    def test_unknown(self):
        with self.assertRaises(UnknownCharacter) as cm:
            self.table.symbol('1')
        self.assertEqual(cm.exception.char, '1')
        self.assertRaises(KeyError, self.table.symbol, '-')
        self.assertNotIn('?', self.table)

    def test_word(self):
        a, b = self.table.symbol('a'), self.table.symbol('b')
        self.assertEqual(self.table.word('abba'), (a, b, b, a))
        self.assertEqual(self.table.word('-'), ())
        self.assertEqual(self.table.word('#', epsilon='#'), ())
        self.assertRaises(UnknownCharacter, self.table.word, 'ab-')

    def test_separate_tables(self):
        self.assertNotEqual(SymbolTable().symbol('a'), self.table.symbol('a'))


class TestLoadGrammar(TestCase):
    def test_basic(self):
        g = load_grammar("""
            2 S
            S aSbS
            S -
        """)
        t = g.table
        S, a, b = t.symbol('S'), t.symbol('a'), t.symbol('b')
        self.assertIs(g.start, S)
        self.assertEqual(g.right_sides(S), ((a, S, b, S), ()))
        self.assertIs(g.allocator, t.allocator)

    def test_whitespace_separated(self):
        g = load_grammar("2 S\n S\n aSbS\n S -\n")
        self.assertEqual(len(g.rules), 2)

    def test_given_table(self):
        table = SymbolTable()
        g = load_grammar("1 S S a", table)
        self.assertIs(g.table, table)
        self.assertEqual(g.right_sides(table.symbol('S')), ((table.symbol('a'),),))

    def test_epsilon(self):
        g = load_grammar("1 S S #", epsilon='#')
        self.assertEqual(g.right_sides(g.start), ((),))

    def test_errors(self):
        examples = [
            ("", "end of grammar", None),
            ("x S", "rule count", 1),
            ("1 a\na b", "uppercase nonterminal", 1),
            ("1 S\n\na b", "uppercase nonterminal", 3),
            ("1 S\nS a1", "Unknown character '1'", 2),
            ("2 S\nS a", "end of grammar", 2),
            ("1 S\nS", "end of grammar", 2),
            ("1 S\nS a\nS b", "after the last rule", 3),
        ]
        for text, msg, line in examples:
            with self.assertRaises(GrammarSyntaxError) as cm:
                load_grammar(text)
            self.assertIn(msg, str(cm.exception))
            self.assertEqual(cm.exception.line, line, text)
            self.assertIsInstance(cm.exception, GrammarError)

    def test_read_grammar_leaves_the_rest(self):
        tokens = tokenize("1 S\nS ab\nab\nba -")
        g = read_grammar(tokens)
        self.assertEqual(len(g.rules), 1)
        self.assertEqual([token for _, token in tokens], ['ab', 'ba', '-'])

    def test_tokenize(self):
        self.assertEqual(list(tokenize("1 S\n\n  S  a ")), [(1, '1'), (1, 'S'), (3, 'S'), (3, 'a')])


if __name__ == '__main__':
    main()
