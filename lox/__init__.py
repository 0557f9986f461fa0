"""
Lox Front End Package

Lexer, expression parser and AST tooling for the Lox scripting language.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical diagnostics
    ├── parser/          # Expression AST, parsing and syntax recovery
    └── tools/           # AST printers and the dev-time node generator

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, scan
from .parser import Parser, parse, parse_string
from .errors import LoxInternalError

__all__ = [
    "Lexer",
    "Parser",
    "scan",
    "parse",
    "parse_string",
    "LoxInternalError",

    # Version info
    "__version__",
    "__license__",
]
