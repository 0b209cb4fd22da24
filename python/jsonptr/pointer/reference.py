import json
from typing import Any, Optional, TypeVar, Union

from jsonptr.logging import get_logger

from . import resolver
from .errors import JSONPointerNotFoundError, RootParentError
from .nodes import ANY, NodeType
from .pointer import JSONPointer, as_pointer
from .ref import JSONRef

C = TypeVar("C")

logger = get_logger(__name__)


class JSONReference:
    """
    Untyped reference, a JSON pointer bound to a base node.

    Unlike JSONRef, the reference may point to a location that does not exist in the
    base, it is then not valid and has no value. Children and parents of an invalid
    reference are invalid as well, nothing is raised for them.
    """

    __slots__ = ("_base", "_pointer", "_valid", "_value")

    def __init__(self, base: Any) -> None:
        self._base = base
        self._pointer = JSONPointer.root
        self._valid = base is not None
        self._value = base

    @staticmethod
    def _create(base: Any, pointer: JSONPointer, valid: bool, value: Any) -> "JSONReference":
        ref = JSONReference.__new__(JSONReference)
        ref._base = base
        ref._pointer = pointer
        ref._valid = valid
        ref._value = value
        return ref

    @staticmethod
    def at(base: Any, pointer: Union[str, JSONPointer]) -> "JSONReference":
        pointer = as_pointer(pointer)
        if resolver.exists_in(base, pointer):
            return JSONReference._create(base, pointer, True, resolver.find_or_none(base, pointer))
        logger.debug(f"pointer '{pointer}' does not reference a node, creating invalid reference")
        return JSONReference._create(base, pointer, False, None)

    @property
    def base(self) -> Any:
        return self._base

    @property
    def pointer(self) -> JSONPointer:
        return self._pointer

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def value(self) -> Any:
        return self._value

    def has_child(self, key: Union[str, int]) -> bool:
        if not self._valid:
            return False
        if isinstance(key, bool):
            return False
        if isinstance(key, int):
            if key < 0:
                return False
            key = str(key)
        if isinstance(self._value, dict):
            return key in self._value
        if isinstance(self._value, list):
            return resolver.is_valid_index(key) and int(key) < len(self._value)
        return False

    def child(self, key: Union[str, int]) -> "JSONReference":
        pointer = self._pointer.child(key)
        token = pointer.tokens[-1]
        if self.has_child(token):
            if isinstance(self._value, dict):
                return JSONReference._create(self._base, pointer, True, self._value[token])
            return JSONReference._create(self._base, pointer, True, self._value[int(token)])
        return JSONReference._create(self._base, pointer, False, None)

    def parent(self) -> "JSONReference":
        if self._pointer.is_root:
            raise RootParentError(self._pointer)
        return JSONReference.at(self._base, self._pointer.parent())

    def locate_child(self, target: Any) -> Optional["JSONReference"]:
        """Depth-first search for the target node (by identity), see jsonptr.pointer.resolver.locate()."""

        if not self._valid:
            return None
        if self._value is target:
            return self
        if isinstance(self._value, dict):
            for key in self._value:
                found = self.child(key).locate_child(target)
                if found is not None:
                    return found
        elif isinstance(self._value, list):
            for index in range(len(self._value)):
                found = self.child(index).locate_child(target)
                if found is not None:
                    return found
        return None

    def to_ref(self, node_type: "NodeType[C]" = ANY) -> "JSONRef[C]":
        if not self._valid:
            raise JSONPointerNotFoundError("reference is not valid", self._pointer)
        return JSONRef.of(self._base, self._pointer, node_type)

    def __eq__(self, o: object) -> bool:
        return self is o or (
            isinstance(o, JSONReference)
            and o._base is self._base
            and o._valid == self._valid
            and o._value is self._value
            and o._pointer == self._pointer
        )

    def __hash__(self) -> int:
        return id(self._base) ^ hash(self._valid) ^ id(self._value) ^ hash(self._pointer)

    def __str__(self) -> str:
        if not self._valid:
            return "invalid"
        return json.dumps(self._value, default=str)

    def __repr__(self) -> str:
        return f'JSONReference(pointer="{self._pointer}", valid={self._valid})'
