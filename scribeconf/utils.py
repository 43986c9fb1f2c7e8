import unicodedata
import logging

logger: logging.Logger = logging.getLogger("scribeconf")
logger.addHandler(logging.StreamHandler())
# Silent by default; applications lower the level to see debug output
logger.setLevel(logging.CRITICAL)


_LETTER = 'Lu', 'Ll', 'Lt', 'Lm', 'Lo'
_ID_CHAR = _LETTER + ('Nd',)

def _test_unicode_category(s, categories):
    if len(s) != 1:
        return bool(s) and all(_test_unicode_category(char, categories) for char in s)
    return unicodedata.category(s) in categories

def is_letter(s):
    """
    Checks if all characters in `s` are letters (Unicode standard, so non-latin
    scripts pass as well). Returns False for the empty string.
    """
    return _test_unicode_category(s, _LETTER)

def is_id_char(s):
    """
    Checks if all characters in `s` may appear in a key or store name:
    an underscore, a Unicode letter or a Unicode decimal digit.
    Returns False for the empty string.
    """
    if len(s) != 1:
        return bool(s) and all(is_id_char(char) for char in s)
    return s == '_' or _test_unicode_category(s, _ID_CHAR)


def format_rune(c):
    """Renders a character as ``U+0023 '#'``, leaving out the quoted form for unprintable ones."""
    if not c:
        return 'at end of input'
    if c.isprintable():
        return "U+%04X '%s'" % (ord(c), c)
    return 'U+%04X' % ord(c)


try:
    import atomicwrites
except ImportError:
    atomicwrites = None  # type: ignore[assignment]

class FS:
    @staticmethod
    def open(name, mode="r", **kwargs):
        if atomicwrites and "w" in mode:
            return atomicwrites.atomic_write(name, mode=mode, overwrite=True, **kwargs)
        else:
            return open(name, mode, **kwargs)
