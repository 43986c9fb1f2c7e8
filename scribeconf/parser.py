"""Recursive-descent parser that builds a tree of stores out of the lexer's tokens."""

from typing import Any, Dict, Iterable, Optional

from .enums import TokenType
from .exceptions import (ConfigurationError, LexError, ParseError, UnexpectedToken,
                         MismatchedTagError, UnexpectedEOF, describe_store, assert_config)
from .lexer import Lexer, Token
from .store import Store
from .utils import logger


def _check_max_depth(value):
    if value is not None and (not isinstance(value, int) or value < 0):
        raise ConfigurationError("max_depth must be a non-negative integer or None, got %r" % (value,))


class ParserOptions:
    """Specifies the options for the parser

    """
    OPTIONS_DOC = """
    debug
            Log every token at DEBUG level on the ``scribeconf`` logger (default: False)
    max_depth
            Maximum nesting depth of blocks. Deeper input is rejected with a ``ParseError``.
            (default: None, meaning no limit)
    store_class
            The parser will produce stores comprised of instances of this class instead of the default
            ``scribeconf.Store``. It is called with the store name, and must provide ``fields`` and ``children``.
    """
    if __doc__:
        __doc__ += OPTIONS_DOC

    _defaults: Dict[str, Any] = {
        'debug': False,
        'max_depth': None,
        'store_class': None,
    }

    def __init__(self, options_dict):
        o = dict(options_dict)

        options = {}
        for name, default in self._defaults.items():
            if name in o:
                value = o.pop(name)
                if isinstance(default, bool):
                    value = bool(value)
            else:
                value = default

            options[name] = value

        if options['store_class'] is None:
            options['store_class'] = Store

        self.__dict__['options'] = options

        _check_max_depth(self.max_depth)

        if o:
            raise ConfigurationError("Unknown options: %s" % list(o.keys()))

    def __getattr__(self, name):
        try:
            return self.options[name]
        except KeyError as e:
            raise AttributeError(e)

    def __setattr__(self, name, value):
        assert_config(name, self.options.keys(), "%r isn't a valid option. Expected one of: %s")
        if name == 'max_depth':
            _check_max_depth(value)
        self.options[name] = value


class _ParseState:
    __slots__ = 'tokens', 'options', 'depth', 'unclosed'

    def __init__(self, tokens, options):
        self.tokens = tokens
        self.options = options
        self.depth = 0
        self.unclosed = None

    def next_token(self) -> Optional[Token]:
        token = next(self.tokens, None)
        if token is not None and self.options.debug:
            logger.debug("Token %r at line %s, column %s", token, token.line, token.column)
        return token


class Parser:
    """Parses configuration text into a ``Store`` tree.

    Parameters:
        options: see ``ParserOptions``

    Example:
        >>> Parser().parse('port=1463').fields
        {'port': '1463'}
    """

    def __init__(self, **options) -> None:
        self.options = ParserOptions(options)

    def parse(self, text: str) -> Store:
        """Parse the given text as a top-level store, with possibly multiple sub-stores.

        Raises:
            LexError: the text contains something the lexer can't tokenize
            ParseError: the tokens don't form a valid tree of stores
        """
        return self.parse_tokens(Lexer(text).lex())

    def parse_tokens(self, tokens: Iterable[Token]) -> Store:
        """Builds the tree from an already tokenized text.

        The iterable is consumed lazily and is normally ended by an EOF token;
        running out of tokens inside a block raises ``UnexpectedEOF``.
        """
        state = _ParseState(iter(tokens), self.options)
        root = self.options.store_class('')
        try:
            try:
                self._parse_into(root, state)
            except RecursionError:
                raise ParseError("Blocks nested too deeply to parse (depth %d); set max_depth to reject such input"
                                 % state.depth) from None
        except (LexError, ParseError) as e:
            logger.debug("Parsing failed: %s", e)
            raise
        return root

    def _parse_into(self, store, state: _ParseState) -> None:
        while True:
            token = state.next_token()
            if token is None:
                raise UnexpectedEOF(store, state.unclosed)

            if token.type is TokenType.ERROR:
                raise LexError.from_token(token)
            elif token.type is TokenType.KEY:
                value = self._expect_field(store, token, state)
                store.fields[token.strip()] = value.strip()
            elif token.type is TokenType.BLOCK_OPEN:
                child = self.options.store_class(token[1:-1])
                self._enter(child, token, state)
                self._parse_into(child, state)
                state.depth -= 1
                store.children.append(child)
            elif token.type is TokenType.BLOCK_CLOSE:
                close_name = token[2:-1]
                if close_name != store.name:
                    raise MismatchedTagError(store, close_name, token)
                logger.debug("Closed %s with %d fields and %d sub-stores",
                             describe_store(store), len(store.fields), len(store.children))
                return
            elif token.type is TokenType.EOF:
                # Only the top-level store may legitimately end here; for an open block,
                # the parent finds the tokens exhausted on its next read.
                if state.depth:
                    state.unclosed = store
                return
            else:
                assert False, token

    def _enter(self, child, token: Token, state: _ParseState) -> None:
        state.depth += 1
        max_depth = self.options.max_depth
        if max_depth is not None and state.depth > max_depth:
            raise ParseError("Maximum nesting depth of %d exceeded by store <%s> at line %s"
                             % (max_depth, child.name, token.line))
        logger.debug("Entering store <%s> at line %s, depth %d", child.name, token.line, state.depth)

    def _expect_field(self, store, key: Token, state: _ParseState) -> Token:
        "Reads the '=' and the value that must follow a key"
        for expected in (TokenType.EQUAL, TokenType.VALUE):
            token = state.next_token()
            if token is None:
                raise UnexpectedEOF(store, state.unclosed)
            if token.type is TokenType.ERROR:
                raise LexError.from_token(token)
            if token.type is not expected:
                raise UnexpectedToken(token, expected.name, key)
        return token


def parse(text: str, **options) -> Store:
    """Parses a configuration text into a ``Store``. Shortcut for ``Parser(**options).parse(text)``."""
    return Parser(**options).parse(text)
