from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from jsonptr.errors import BaseJsonPtrError

from .nodes import display_value

if TYPE_CHECKING:
    from .pointer import JSONPointer


class JSONPointerError(BaseJsonPtrError):
    """
    Base exception class for all JSON pointer errors.

    The pointer is the location of the failure, for resolution errors it is truncated
    to the node that was being looked into. Errors raised while parsing carry no pointer.
    """

    def __init__(self, msg: str, pointer: Optional[JSONPointer] = None) -> None:
        super().__init__(msg)
        self._text = msg
        self._pointer = pointer
        location = str(pointer) if pointer is not None else ""
        self._msg = f"[{location}] {msg}" if location else msg

    @property
    def text(self) -> str:
        return self._text

    @property
    def pointer(self) -> Optional[JSONPointer]:
        return self._pointer

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def __str__(self) -> str:
        return self._msg


class JSONPointerSyntaxError(JSONPointerError):
    """Exception class for malformed pointer strings and URI fragments."""

    def __init__(self, msg: str, source: str) -> None:
        super().__init__(f"syntax error: {msg}")
        self._source = source

    @property
    def source(self) -> str:
        return self._source


class JSONPointerNotFoundError(JSONPointerError):
    """Exception class for pointers that do not resolve to a node."""


class JSONPointerIndexError(JSONPointerError):
    """Exception class for tokens that are not usable as an array index."""

    def __init__(self, msg: str, token: str, pointer: Optional[JSONPointer] = None) -> None:
        super().__init__(msg, pointer)
        self._token = token

    @property
    def token(self) -> str:
        return self._token


class JSONPointerTypeError(JSONPointerError):
    """Exception class for nodes that are not of the expected type."""

    def __init__(self, expected: str, value: Any, pointer: JSONPointer, node_name: str = "Node") -> None:
        super().__init__(f"{node_name} not correct type ({expected}), was {display_value(value)}", pointer)
        self._expected = expected
        self._value = value
        self._node_name = node_name

    @property
    def expected(self) -> str:
        return self._expected

    @property
    def value(self) -> Any:
        return self._value

    @property
    def node_name(self) -> str:
        return self._node_name


class RootParentError(JSONPointerError):
    """Exception class for asking the root pointer or reference for its parent."""

    def __init__(self, pointer: Optional[JSONPointer] = None) -> None:
        super().__init__("root has no parent", pointer)
