"""
Node kinds of the JSON tree value model and the node types used by typed references.

A tree node is one of the plain Python values produced by a JSON or YAML parser:
dict (object), list (array), str, int, float or Decimal (number), bool and None (null).
"""

import json
from decimal import Decimal
from enum import Enum
from typing import Any, FrozenSet, Generic, Iterable, Optional, TypeVar, Union

from typing_extensions import TypeGuard

T = TypeVar("T")


class NodeKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"


def _kind_of(value: Any) -> Optional[NodeKind]:
    if value is None:
        return NodeKind.NULL
    # bool is a subclass of int, it has to be tested first
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, int):
        return NodeKind.INTEGER
    if isinstance(value, (float, Decimal)):
        return NodeKind.FLOAT
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        return NodeKind.ARRAY
    return None


def node_kind(value: Any) -> NodeKind:
    kind = _kind_of(value)
    if kind is None:
        raise TypeError(f"value of type '{type(value).__name__}' is not a JSON tree node")
    return kind


class NodeType(Generic[T]):
    """
    Named set of node kinds a typed reference may point to.

    The type is nullable when NodeKind.NULL is one of its kinds.
    """

    __slots__ = ("_name", "_kinds")

    def __init__(self, name: str, kinds: Iterable[NodeKind]) -> None:
        self._name = name
        self._kinds: FrozenSet[NodeKind] = frozenset(kinds)

    @property
    def name(self) -> str:
        return self._name

    @property
    def kinds(self) -> FrozenSet[NodeKind]:
        return self._kinds

    @property
    def nullable(self) -> bool:
        return NodeKind.NULL in self._kinds

    def accepts(self, value: Any) -> TypeGuard[T]:
        return _kind_of(value) in self._kinds

    def or_null(self) -> "NodeType[Optional[T]]":
        if self.nullable:
            return self  # type: ignore[return-value]
        return NodeType(f"Optional[{self._name}]", self._kinds | {NodeKind.NULL})

    def __eq__(self, o: object) -> bool:
        return isinstance(o, NodeType) and o._name == self._name and o._kinds == self._kinds

    def __hash__(self) -> int:
        return hash((self._name, self._kinds))

    def __repr__(self) -> str:
        return f"NodeType({self._name})"

    def __str__(self) -> str:
        return self._name


def nullable(node_type: "NodeType[T]") -> "NodeType[Optional[T]]":
    return node_type.or_null()


Number = Union[int, float, Decimal]

OBJECT: "NodeType[dict]" = NodeType("Object", [NodeKind.OBJECT])
ARRAY: "NodeType[list]" = NodeType("Array", [NodeKind.ARRAY])
STRUCTURE: "NodeType[Union[dict, list]]" = NodeType("Structure", [NodeKind.OBJECT, NodeKind.ARRAY])
STRING: "NodeType[str]" = NodeType("String", [NodeKind.STRING])
INTEGER: "NodeType[int]" = NodeType("Integer", [NodeKind.INTEGER])
NUMBER: "NodeType[Number]" = NodeType("Number", [NodeKind.INTEGER, NodeKind.FLOAT])
BOOLEAN: "NodeType[bool]" = NodeType("Boolean", [NodeKind.BOOLEAN])
PRIMITIVE: "NodeType[Union[str, Number, bool]]" = NodeType(
    "Primitive", [NodeKind.STRING, NodeKind.INTEGER, NodeKind.FLOAT, NodeKind.BOOLEAN]
)
NULL: "NodeType[None]" = NodeType("Null", [NodeKind.NULL])
VALUE: "NodeType[Any]" = NodeType("Value", [kind for kind in NodeKind if kind is not NodeKind.NULL])
ANY: "NodeType[Any]" = NodeType("Any", list(NodeKind))


def display_value(value: Any) -> str:
    """Short rendering of a node for error messages, containers are not expanded."""

    if isinstance(value, dict):
        return "{ ... }" if value else "{}"
    if isinstance(value, list):
        return "[ ... ]" if value else "[]"
    if isinstance(value, Decimal):
        return str(value)
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


__all__ = [
    "NodeKind",
    "NodeType",
    "node_kind",
    "nullable",
    "display_value",
    "OBJECT",
    "ARRAY",
    "STRUCTURE",
    "STRING",
    "INTEGER",
    "NUMBER",
    "BOOLEAN",
    "PRIMITIVE",
    "NULL",
    "VALUE",
    "ANY",
]
