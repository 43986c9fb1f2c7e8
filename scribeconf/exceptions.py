class ScribeConfError(Exception):
    pass


class ConfigurationError(ScribeConfError, ValueError):
    pass


def assert_config(value, options, msg='Got %r, expected one of %s'):
    if value not in options:
        raise ConfigurationError(msg % (value, options))


class SerializeError(ScribeConfError, ValueError):
    pass


class ParseError(ScribeConfError):
    pass


class UnexpectedInput(ScribeConfError):
    """UnexpectedInput Error.

    Used as a mixin for the errors that point at a place in the text:

    - ``LexError``: The lexer encountered a character it can't handle
    - ``UnexpectedToken``: The parser received a token out of order

    After catching one of these exceptions, you may call ``get_context`` to create a nicer error message.
    """
    pos_in_stream = None
    line = None
    column = None

    def get_context(self, text, span=40):
        """Returns a pretty string pinpointing the error in the text,
        with span amount of context characters around it.

        Note:
            The parser doesn't hold a copy of the text it has to parse,
            so you have to provide it again
        """
        assert self.pos_in_stream is not None, self
        pos = self.pos_in_stream
        start = max(pos - span, 0)
        end = pos + span
        before = text[start:pos].rsplit('\n', 1)[-1]
        after = text[pos:end].split('\n', 1)[0]
        return before + after + '\n' + ' ' * len(before.expandtabs()) + '^\n'


class LexError(UnexpectedInput):
    """Raised when the text can't be split into tokens: an illegal character,
    an unclosed or empty block tag, or a key without exactly one ``=``.
    """

    def __init__(self, message, pos_in_stream=None, line=None, column=None):
        self.pos_in_stream = pos_in_stream
        self.line = line
        self.column = column
        super(LexError, self).__init__(message)

    @classmethod
    def from_token(cls, token):
        return cls(token.value, token.pos_in_stream, token.line, token.column)


class UnexpectedToken(ParseError, UnexpectedInput):
    """Raised when a key isn't followed by exactly one ``=`` and a value."""

    def __init__(self, token, expected, previous=None):
        self.token = token
        self.expected = expected
        self.previous = previous
        self.line = getattr(token, 'line', None)
        self.column = getattr(token, 'column', None)
        self.pos_in_stream = getattr(token, 'pos_in_stream', None)

        super(UnexpectedToken, self).__init__()

    def __str__(self):
        message = "Expected %s" % self.expected
        if self.previous is not None:
            message += " after %r" % self.previous
        message += ", got %r" % self.token
        if self.line is not None:
            message += " at line %s, column %s" % (self.line, self.column)
        return message


class MismatchedTagError(ParseError):
    def __init__(self, store, close_name, token=None):
        self.store = store
        self.close_name = close_name
        self.token = token
        super(MismatchedTagError, self).__init__()

    def __str__(self):
        if self.store.name:
            message = "Store <%s> closed with mismatched tag </%s>" % (self.store.name, self.close_name)
        else:
            message = "Closing tag </%s> has no matching open tag" % self.close_name
        line = getattr(self.token, 'line', None)
        if line is not None:
            message += " at line %s" % line
        return message


class UnexpectedEOF(ParseError):
    """Raised when the input ends while a block is still open.

    ``store`` is the store that was reading when the tokens ran out, ``unclosed``
    the innermost store that reached the end of input without its closing tag.
    """

    def __init__(self, store, unclosed=None):
        self.store = store
        self.unclosed = unclosed
        super(UnexpectedEOF, self).__init__()

    def __str__(self):
        message = "Unexpected end of input in %s" % describe_store(self.store)
        if self.unclosed is not None and self.unclosed is not self.store:
            message += ": <%s> was never closed" % self.unclosed.name
        return message


def describe_store(store):
    return "store <%s>" % store.name if store.name else "the top-level store"
