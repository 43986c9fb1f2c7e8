"""Write a store tree back as configuration text"""

from typing import IO, List

from .exceptions import SerializeError
from .store import Store
from .utils import FS, is_id_char, is_letter


def _check_name(name, what):
    if not is_id_char(name):
        raise SerializeError("Invalid %s %r: expected letters, digits and underscores" % (what, name))


def _check_field(key, value):
    _check_name(key, 'field key')
    if not is_letter(key[0]):
        raise SerializeError("Invalid field key %r: must start with a letter" % key)
    if '\n' in value or '\r' in value:
        raise SerializeError("Value of field %r spans multiple lines" % key)
    if value.strip().startswith('='):
        # would be read back as a second '=' after the key
        raise SerializeError("Value of field %r starts with '='" % key)


def _write_store(store, level, indent_str, out: List[str]) -> None:
    indent = indent_str * level
    for key, value in store.fields.items():
        _check_field(key, value)
        out.append('%s%s=%s\n' % (indent, key, value.strip()))
    for child in store.children:
        _check_name(child.name, 'store name')
        out.append('%s<%s>\n' % (indent, child.name))
        _write_store(child, level + 1, indent_str, out)
        out.append('%s</%s>\n' % (indent, child.name))


def dumps(store: Store, indent_str: str='') -> str:
    """Serializes a store and its sub-stores to configuration text.

    Fields are written before sub-stores. The name of the given store itself is not
    written: it becomes the top-level store of the text.

    Example:
        >>> print(dumps(Store('', {'port': '1463'}, [Store('store', {'type': 'null'})])), end='')
        port=1463
        <store>
        type=null
        </store>

    Raises:
        SerializeError: a key or store name isn't an identifier, or a value can't be read back as written
    """
    out: List[str] = []
    _write_store(store, 0, indent_str, out)
    return ''.join(out)


def dump(store: Store, fp: IO[str], indent_str: str='') -> None:
    """Like ``dumps``, but writes to a file object."""
    fp.write(dumps(store, indent_str))


def save(store: Store, path: str, indent_str: str='', encoding: str='utf8') -> None:
    """Writes a store to the file at ``path``.

    The text is serialized before the file is opened, so an invalid tree leaves the file untouched.
    When ``atomicwrites`` is installed, the file is replaced atomically.
    """
    text = dumps(store, indent_str)
    with FS.open(path, 'w', encoding=encoding) as f:
        f.write(text)
