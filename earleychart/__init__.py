from .utils import logger
from .grammar import Symbol, Terminal, NonTerminal, SymbolAllocator, Rule, Grammar
from .exceptions import (EarleyError, ConfigurationError, GrammarError, GrammarSyntaxError,
                         UndefinedSymbol, InvalidOperation, UnknownCharacter)
from .parsers.earley import Recognizer
from .load_grammar import SymbolTable, load_grammar
from .solver import Solver

__version__: str = "1.0.0"
