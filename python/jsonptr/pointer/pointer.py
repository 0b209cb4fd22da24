from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Optional, Tuple, Union

from . import resolver
from .codec import from_uri_fragment, join_tokens, split_pointer, to_uri_fragment
from .errors import JSONPointerIndexError, RootParentError

if TYPE_CHECKING:
    from .reference import JSONReference


class JSONPointer:
    """
    JSON pointer, an immutable sequence of unescaped tokens.

    Instances are created from a pointer string (parsed) or from a sequence of already
    unescaped tokens, or derived from another pointer with child() and parent().
    """

    __slots__ = ("_tokens",)

    root: ClassVar["JSONPointer"]

    def __init__(self, pointer: Union[str, Iterable[str]] = ()) -> None:
        if isinstance(pointer, str):
            self._tokens: Tuple[str, ...] = split_pointer(pointer)
        else:
            self._tokens = tuple(pointer)

    @staticmethod
    def _of(tokens: Tuple[str, ...]) -> "JSONPointer":
        if not tokens:
            return JSONPointer.root
        ptr = JSONPointer.__new__(JSONPointer)
        ptr._tokens = tokens
        return ptr

    @staticmethod
    def parse(pointer: str) -> "JSONPointer":
        return JSONPointer._of(split_pointer(pointer))

    @staticmethod
    def from_uri_fragment(fragment: str) -> "JSONPointer":
        return JSONPointer._of(from_uri_fragment(fragment))

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    @property
    def depth(self) -> int:
        return len(self._tokens)

    @property
    def is_root(self) -> bool:
        return not self._tokens

    @property
    def current(self) -> Optional[str]:
        return self._tokens[-1] if self._tokens else None

    def child(self, token: Union[str, int]) -> "JSONPointer":
        if isinstance(token, bool):
            raise TypeError("JSON pointer token must be a string or an integer index, not bool")
        if isinstance(token, int):
            if token < 0:
                raise JSONPointerIndexError("JSON pointer index must not be negative", str(token), self)
            token = str(token)
        return JSONPointer._of(self._tokens + (token,))

    def parent(self) -> "JSONPointer":
        if not self._tokens:
            raise RootParentError(self)
        return JSONPointer._of(self._tokens[:-1])

    def truncate(self, depth: int) -> "JSONPointer":
        if depth >= len(self._tokens):
            return self
        return JSONPointer._of(self._tokens[:depth])

    def to_uri_fragment(self) -> str:
        return to_uri_fragment(self._tokens)

    def find(self, root: Any) -> Any:
        return resolver.find(root, self)

    def find_or_none(self, root: Any, default: Any = None) -> Any:
        return resolver.find_or_none(root, self, default)

    def exists_in(self, root: Any) -> bool:
        return resolver.exists_in(root, self)

    def locate_child(self, base: Any, target: Any) -> Optional["JSONPointer"]:
        """Find the target node by identity below base, which is the node this pointer references."""
        return resolver.locate(base, target, self)

    def ref_at(self, root: Any) -> "JSONReference":
        from .reference import JSONReference  # pylint: disable=import-outside-toplevel

        return JSONReference.at(root, self)

    def __eq__(self, o: object) -> bool:
        return self is o or (isinstance(o, JSONPointer) and o._tokens == self._tokens)

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __str__(self) -> str:
        return join_tokens(self._tokens)

    def __repr__(self) -> str:
        return f'JSONPointer("{self}")'


JSONPointer.root = JSONPointer()


def as_pointer(pointer: Union[str, JSONPointer]) -> JSONPointer:
    if isinstance(pointer, JSONPointer):
        return pointer
    return JSONPointer.parse(pointer)
