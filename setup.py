import re
from setuptools import setup

__version__ ,= re.findall('__version__: str = "(.*)"', open('earleychart/__init__.py').read())

setup(
    name = "earleychart",
    version = __version__,
    packages = ['earleychart', 'earleychart.parsers', 'earleychart.tools'],

    requires = [],
    install_requires = [],

    extras_require = {
        "test": ["pytest"],
    },

    test_suite = 'tests.__main__',

    description = "Earley recognizer for arbitrary context-free grammars",
    license = "MIT",
    keywords = "Earley chart parser recognizer context-free grammar",
    long_description='''
earleychart decides whether a word belongs to the language of a context-free grammar.

Main Features:
 - Earley recognizer
    - Handles all context-free grammars, including ambiguous and left-recursive ones
    - Epsilon rules need no special handling
 - A small text format for grammars over single-letter symbols
 - A command line tool that reports Accept / Discard for each word

Only Python versions 3.6 and up are supported.
''',

    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
    ],
    entry_points = {
        'console_scripts': [
            'earleychart = earleychart.tools:main'
        ]
    },
)
