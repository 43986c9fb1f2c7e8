from .utils import logger
from .enums import TokenType
from .store import Store
from .exceptions import (ScribeConfError, ConfigurationError, SerializeError, ParseError, LexError,
                         UnexpectedInput, UnexpectedToken, MismatchedTagError, UnexpectedEOF)
from .lexer import Token, Lexer, lex
from .parser import Parser, parse
from .reconstruct import dumps, dump, save

__version__: str = "1.0.0"
