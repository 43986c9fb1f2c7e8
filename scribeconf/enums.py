import enum


@enum.unique
class TokenType(enum.Enum):
  ERROR = enum.auto()
  EOF = enum.auto()
  KEY = enum.auto()
  EQUAL = enum.auto()
  VALUE = enum.auto()
  BLOCK_OPEN = enum.auto()
  BLOCK_CLOSE = enum.auto()
