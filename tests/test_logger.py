import logging
from contextlib import contextmanager
from earleychart import Solver, logger
from unittest import TestCase, main

from io import StringIO

PSP = "2 S\n S\n aSbS\n S -\n"


@contextmanager
def capture_log():
    stream = StringIO()
    orig_handler = logger.handlers[0]
    orig_level = logger.level
    del logger.handlers[:]
    logger.addHandler(logging.StreamHandler(stream))
    yield stream
    del logger.handlers[:]
    logger.addHandler(orig_handler)
    logger.setLevel(orig_level)


class Testlogger(TestCase):

    def test_debug(self):
        with capture_log() as log:
            Solver(PSP, debug=True).accepts('ab')

        log = log.getvalue()
        self.assertIn("S'", log)
        self.assertIn("Column 2", log)
        self.assertIn("accepted", log)

    def test_non_debug(self):
        with capture_log() as log:
            logger.setLevel(logging.WARNING)
            Solver(PSP).accepts('ab')
        log = log.getvalue()
        self.assertEqual(log, "")

    def test_loglevel_higher(self):
        with capture_log() as log:
            logger.setLevel(logging.ERROR)
            Solver(PSP).accepts('abc')
        self.assertEqual(len(log.getvalue()), 0)


if __name__ == '__main__':
    main()
