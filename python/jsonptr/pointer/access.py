"""Getters combining strict pointer resolution with a check of the type of the node found."""

from typing import Any, Dict, List, TypeVar, Union

from . import resolver
from .errors import JSONPointerTypeError
from .nodes import ARRAY, BOOLEAN, INTEGER, NUMBER, OBJECT, STRING, Number, NodeType
from .pointer import JSONPointer, as_pointer

T = TypeVar("T")

PointerLike = Union[str, JSONPointer]


def get_value(root: Any, pointer: PointerLike, node_type: "NodeType[T]") -> T:
    pointer = as_pointer(pointer)
    node = resolver.find(root, pointer)
    if not node_type.accepts(node):
        raise JSONPointerTypeError(node_type.name, node, pointer)
    return node


def get_string(root: Any, pointer: PointerLike) -> str:
    return get_value(root, pointer, STRING)


def get_int(root: Any, pointer: PointerLike) -> int:
    return get_value(root, pointer, INTEGER)


def get_number(root: Any, pointer: PointerLike) -> Number:
    return get_value(root, pointer, NUMBER)


def get_bool(root: Any, pointer: PointerLike) -> bool:
    return get_value(root, pointer, BOOLEAN)


def get_object(root: Any, pointer: PointerLike) -> Dict[str, Any]:
    return get_value(root, pointer, OBJECT)


def get_array(root: Any, pointer: PointerLike) -> List[Any]:
    return get_value(root, pointer, ARRAY)
