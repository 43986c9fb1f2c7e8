## Lexer Implementation

from collections import deque
from typing import Callable, Deque, Iterator, Optional

from .enums import TokenType
from .utils import is_letter, is_id_char, format_rune


class Token(str):
    """A string with meta-information, produced by the lexer.

    The string value is the matched text: the tag including its delimiters for
    ``BLOCK_OPEN`` and ``BLOCK_CLOSE``, the message for ``ERROR``, and empty for ``EOF``.

    Attributes:
        type: The ``TokenType`` of the token
        value: The matched text (same as the string value)
        pos_in_stream: The index of the token in the text (0-based)
        line: The line of the token in the text (1-based)
        column: The column of the token in the text (1-based)
    """
    __slots__ = ('type', 'value', 'pos_in_stream', 'line', 'column')

    type: TokenType
    value: str
    pos_in_stream: Optional[int]
    line: Optional[int]
    column: Optional[int]

    def __new__(cls, type_, value, pos_in_stream=None, line=None, column=None):
        self = super(Token, cls).__new__(cls, value)
        self.type = type_
        self.value = value
        self.pos_in_stream = pos_in_stream
        self.line = line
        self.column = column
        return self

    def __reduce__(self):
        return (self.__class__, (self.type, self.value, self.pos_in_stream, self.line, self.column))

    def __repr__(self):
        return 'Token(%s, %r)' % (self.type.name, self.value)

    def __deepcopy__(self, memo):
        return Token(self.type, self.value, self.pos_in_stream, self.line, self.column)

    def __eq__(self, other):
        if isinstance(other, Token) and self.type != other.type:
            return False

        return str.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = str.__hash__


class LineCounter:
    def __init__(self):
        self.newline_char = '\n'
        self.char_pos = 0
        self.line = 1
        self.column = 1
        self.line_start_pos = 0

    def feed(self, text):
        """Consume a chunk of text and calculate the new line & column."""
        newlines = text.count(self.newline_char)
        if newlines:
            self.line += newlines
            self.line_start_pos = self.char_pos + text.rindex(self.newline_char) + 1

        self.char_pos += len(text)
        self.column = self.char_pos - self.line_start_pos + 1


EOF_CHAR = ''

def is_space(c):
    return c == ' ' or c == '\t'

def is_end_of_line(c):
    return c == '\r' or c == '\n'


StateFn = Callable[[], Optional['StateFn']]


class Lexer:
    """Splits a configuration text into tokens.

    The scanner is a state machine: each state is a method that consumes some input,
    possibly emits tokens, and returns the next state, or None to stop.
    Tokens are handed out lazily by ``lex()`` as soon as the state that emitted them returns.

    Example:
        >>> [t.type.name for t in Lexer('port=1463').lex()]
        ['KEY', 'EQUAL', 'VALUE', 'EOF']
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.start = 0      # start position of the pending token
        self.pos = 0        # current position in the text
        self.width = 0      # width of the last character read
        self.line_ctr = LineCounter()
        self._pending: Deque[Token] = deque()

    def lex(self) -> Iterator[Token]:
        state: Optional[StateFn] = self.lex_block
        while state is not None:
            state = state()
            while self._pending:
                yield self._pending.popleft()

    # Scanning primitives

    def next(self) -> str:
        if self.pos >= len(self.text):
            self.width = 0
            return EOF_CHAR
        c = self.text[self.pos]
        self.width = 1
        self.pos += 1
        return c

    def backup(self) -> None:
        "Steps back one character. Can be called only once per call of next."
        self.pos -= self.width

    def accept(self, valid: str) -> bool:
        c = self.next()
        if c and c in valid:
            return True
        self.backup()
        return False

    def emit(self, type_: TokenType) -> None:
        value = self.text[self.start:self.pos]
        ctr = self.line_ctr
        self._pending.append(Token(type_, value, ctr.char_pos, ctr.line, ctr.column))
        self.ignore()

    def ignore(self) -> None:
        "Skips over the pending input before this point."
        self.line_ctr.feed(self.text[self.start:self.pos])
        self.start = self.pos

    def error(self, message: str, pos: Optional[int] = None) -> None:
        """Emits an error token, which ends the scan.

        The token is positioned at ``pos``, by default the last character read.
        States return the result of this call, so the machine stops after the error.
        """
        if pos is None:
            pos = self.pos - self.width
        self.line_ctr.feed(self.text[self.start:pos])
        self.start = self.pos
        ctr = self.line_ctr
        self._pending.append(Token(TokenType.ERROR, message, ctr.char_pos, ctr.line, ctr.column))
        return None

    # States

    def lex_block(self) -> Optional[StateFn]:
        c = self.next()
        if c == EOF_CHAR:
            self.emit(TokenType.EOF)
            return None
        elif is_space(c) or is_end_of_line(c):
            self.ignore()
        elif c == '<':
            return self.lex_meta
        elif c == '#':
            return self.lex_comment
        elif is_letter(c):
            self.backup()
            return self.lex_key
        else:
            return self.error("unrecognized character in action: %s" % format_rune(c))
        return self.lex_block

    def lex_meta(self) -> Optional[StateFn]:
        closing = self.accept('/')
        name_start = self.pos
        while True:
            c = self.next()
            if not is_id_char(c):
                if c != '>':
                    return self.error("unclosed meta tag %s" % format_rune(c))
                break

        if self.pos - 1 == name_start:
            return self.error("empty meta tag")

        self.emit(TokenType.BLOCK_CLOSE if closing else TokenType.BLOCK_OPEN)
        return self.lex_block

    def lex_comment(self) -> Optional[StateFn]:
        while True:
            c = self.next()
            if c == EOF_CHAR or is_end_of_line(c):
                break
        self.ignore()
        return self.lex_block

    def lex_key(self) -> Optional[StateFn]:
        while is_id_char(self.next()):
            pass
        self.backup()
        self.emit(TokenType.KEY)
        return self.lex_equal

    def lex_equal(self) -> Optional[StateFn]:
        count = 0
        while True:
            c = self.next()
            if c == '=':
                count += 1
            elif not is_space(c):
                self.backup()
                break
        if count != 1:
            return self.error("error equal symbol occurrence: %d" % count, self.pos)

        self.emit(TokenType.EQUAL)
        return self.lex_value

    def lex_value(self) -> Optional[StateFn]:
        while True:
            c = self.next()
            if c == EOF_CHAR or is_end_of_line(c):
                break
        self.emit(TokenType.VALUE)
        return self.lex_block


def lex(text: str) -> Iterator[Token]:
    """Returns an iterator over the tokens of ``text``. The last token is EOF or ERROR."""
    return Lexer(text).lex()
