import logging
import unittest

from scribeconf import logger

from .test_lexer import TestLexer, TestLexerErrors
from .test_parser import TestParser, TestParserErrors, TestParserOptions
from .test_store import TestStore
from .test_reconstruct import TestReconstruct, TestSave
from .test_logger import Testlogger

logger.setLevel(logging.INFO)

if __name__ == "__main__":
    unittest.main()
