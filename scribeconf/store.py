from copy import deepcopy
from typing import Callable, Dict, Iterator, List, Optional


class Store:
    """A node of the configuration tree.

    Creates a new store, and keeps its "name", "fields" and "children" in attributes of the same name.
    Stores can be compared, copied and pickled.

    Parameters:
        name: The name of the block that introduced the store (``<name>``). Empty for the top-level store.
        fields: Mapping of field keys to their (unparsed) text values
        children: List of sub-stores, in the order they appear in the text
    """

    name: str
    fields: Dict[str, str]
    children: 'List[Store]'

    def __init__(self, name: str='', fields: Optional[Dict[str, str]]=None, children: 'Optional[List[Store]]'=None) -> None:
        self.name = name
        self.fields = {} if fields is None else fields
        self.children = [] if children is None else children

    def __repr__(self):
        return 'Store(%r, %r, %r)' % (self.name, self.fields, self.children)

    def _pretty(self, level, indent_str):
        l = [indent_str*level, '<%s>' % self.name if self.name else '<top-level>', '\n']
        for key, value in self.fields.items():
            l += [indent_str*(level+1), key, '\t', value, '\n']
        for child in self.children:
            l += child._pretty(level+1, indent_str)
        return l

    def pretty(self, indent_str: str='  ') -> str:
        """Returns an indented string representation of the store and its sub-stores.

        Great for debugging.
        """
        return ''.join(self._pretty(0, indent_str))

    def __eq__(self, other):
        try:
            return self.name == other.name and self.fields == other.fields and self.children == other.children
        except AttributeError:
            return False

    def __ne__(self, other):
        return not (self == other)

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    def __contains__(self, key: str) -> bool:
        return key in self.fields

    def get(self, key: str, default: Optional[str]=None) -> Optional[str]:
        return self.fields.get(key, default)

    def iter_stores(self) -> 'Iterator[Store]':
        """Depth-first iteration, starting with this store.

        Stores are returned in the order their blocks open in the text.
        """
        stack = [self]
        while stack:
            store = stack.pop()
            yield store
            stack += reversed(store.children)

    def find_pred(self, pred: 'Callable[[Store], bool]') -> 'Iterator[Store]':
        """Returns all stores of the tree that evaluate pred(store) as true."""
        return filter(pred, self.iter_stores())

    def find_name(self, name: str) -> 'Iterator[Store]':
        """Returns all stores of the tree whose name equals the given name."""
        return self.find_pred(lambda s: s.name == name)

    def __deepcopy__(self, memo):
        return type(self)(self.name, dict(self.fields), [deepcopy(c, memo) for c in self.children])

    def copy(self) -> 'Store':
        return type(self)(self.name, self.fields, self.children)

