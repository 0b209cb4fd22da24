from typing import Any, Generic, Iterator, Optional, Tuple, TypeVar, Union

from jsonptr.logging import get_logger

from .errors import JSONPointerTypeError, RootParentError
from .nodes import ANY, NULL, STRUCTURE, NodeType, display_value
from .pointer import JSONPointer, as_pointer
from .resolver import is_valid_index, resolve_token

T = TypeVar("T")
C = TypeVar("C")

logger = get_logger(__name__)


class JSONRef(Generic[T]):
    """
    Typed reference, a JSON pointer bound to a base node and to the node it references.

    Every node on the way from the base to the referenced node is cached, index 'i'
    holds the node reached after the first 'i + 1' tokens of the pointer. The referenced
    node is always of the node type the reference was created with, a reference to
    a location that does not exist cannot be created.
    """

    __slots__ = ("_base", "_pointer", "_nodes", "_node", "_node_type")

    def __init__(self, base: T) -> None:
        self._base: Any = base
        self._pointer = JSONPointer.root
        self._nodes: Tuple[Any, ...] = ()
        self._node: T = base
        self._node_type: NodeType[Any] = ANY

    @staticmethod
    def _create(
        base: Any, pointer: JSONPointer, nodes: Tuple[Any, ...], node: Any, node_type: "NodeType[C]"
    ) -> "JSONRef[C]":
        ref: JSONRef[C] = JSONRef.__new__(JSONRef)
        ref._base = base
        ref._pointer = pointer
        ref._nodes = nodes
        ref._node = node
        ref._node_type = node_type
        return ref

    @staticmethod
    def of(base: Any, pointer: Union[str, JSONPointer], node_type: "NodeType[C]" = ANY) -> "JSONRef[C]":
        pointer = as_pointer(pointer)

        node = base
        nodes = []
        for depth, token in enumerate(pointer.tokens):
            node = resolve_token(node, token, pointer, depth)
            nodes.append(node)

        if not node_type.accepts(node):
            logger.debug(f"node at '{pointer}' rejected, expected type {node_type}")
            raise JSONPointerTypeError(node_type.name, node, pointer)
        return JSONRef._create(base, pointer, tuple(nodes), node, node_type)

    @property
    def base(self) -> Any:
        return self._base

    @property
    def pointer(self) -> JSONPointer:
        return self._pointer

    @property
    def node(self) -> T:
        return self._node

    @property
    def value(self) -> T:
        return self._node

    @property
    def node_type(self) -> NodeType[Any]:
        return self._node_type

    @property
    def depth(self) -> int:
        return self._pointer.depth

    def _new_child(self, token: str, node: Any, node_type: "NodeType[C]") -> "JSONRef[C]":
        pointer = self._pointer.child(token)
        if not node_type.accepts(node):
            raise JSONPointerTypeError(node_type.name, node, pointer, node_name="Child")
        return JSONRef._create(self._base, pointer, self._nodes + (node,), node, node_type)

    def _token(self, key: Union[str, int]) -> str:
        return self._pointer.child(key).tokens[-1]

    def child(self, key: Union[str, int], node_type: "NodeType[C]" = ANY) -> "JSONRef[C]":
        token = self._token(key)
        node = resolve_token(self._node, token, self._pointer, self.depth)
        return self._new_child(token, node, node_type)

    def optional_child(self, key: Union[str, int], node_type: "NodeType[C]" = ANY) -> "Optional[JSONRef[C]]":
        """Same as child(), except that a missing member or index is not an error."""

        token = self._token(key)
        current: Any = self._node
        if isinstance(current, dict) and token not in current:
            return None
        if isinstance(current, list) and (not is_valid_index(token) or int(token) >= len(current)):
            return None
        return self.child(token, node_type)

    def has_child(self, key: Union[str, int], node_type: "NodeType[Any]" = ANY) -> bool:
        if isinstance(key, bool):
            return False
        if isinstance(key, int):
            if key < 0:
                return False
            key = str(key)

        current: Any = self._node
        if isinstance(current, dict):
            return key in current and node_type.accepts(current[key])
        if isinstance(current, list):
            return is_valid_index(key) and int(key) < len(current) and node_type.accepts(current[int(key)])
        return False

    def child_value(self, key: Union[str, int], node_type: "NodeType[C]") -> C:
        return self.child(key, node_type).node

    def optional_value(self, key: Union[str, int], node_type: "NodeType[C]") -> Optional[C]:
        """Same as child_value(), except that a missing member or index, or a null member, gives None."""

        if self.has_child(key, NULL):
            return None
        ref = self.optional_child(key, node_type)
        return ref.node if ref is not None else None

    def children(self, node_type: "NodeType[C]" = ANY) -> Iterator["JSONRef[C]"]:
        current: Any = self._node
        if isinstance(current, dict):
            for key, value in current.items():
                yield self._new_child(key, value, node_type)
        elif isinstance(current, list):
            for index, value in enumerate(current):
                yield self._new_child(str(index), value, node_type)
        else:
            raise JSONPointerTypeError(STRUCTURE.name, current, self._pointer)

    def parent(self, node_type: "NodeType[C]" = STRUCTURE) -> "JSONRef[C]":
        depth = self.depth
        if depth == 0:
            raise RootParentError(self._pointer)

        node = self._nodes[depth - 2] if depth > 1 else self._base
        pointer = self._pointer.parent()
        if not node_type.accepts(node):
            raise JSONPointerTypeError(node_type.name, node, pointer, node_name="Parent")
        return JSONRef._create(self._base, pointer, self._nodes[:-1], node, node_type)

    def as_ref(self, node_type: "NodeType[C]") -> "JSONRef[C]":
        if not node_type.accepts(self._node):
            raise JSONPointerTypeError(node_type.name, self._node, self._pointer)
        return JSONRef._create(self._base, self._pointer, self._nodes, self._node, node_type)

    def is_ref(self, node_type: "NodeType[Any]") -> bool:
        return node_type.accepts(self._node)

    def rebase(self) -> "JSONRef[T]":
        """Make the referenced node the base of a new reference, as if it was a document of its own."""
        return JSONRef._create(self._node, JSONPointer.root, (), self._node, self._node_type)

    def locate_child(self, target: Any) -> "Optional[JSONRef[Any]]":
        """
        Depth-first search for the target node (by identity) below the referenced node.

        Only containers are reliably found, see jsonptr.pointer.resolver.locate().
        """

        if self._node is target:
            return self
        current: Any = self._node
        if isinstance(current, dict):
            for key, value in current.items():
                found = self._new_child(key, value, ANY).locate_child(target)
                if found is not None:
                    return found
        elif isinstance(current, list):
            for index, value in enumerate(current):
                found = self._new_child(str(index), value, ANY).locate_child(target)
                if found is not None:
                    return found
        return None

    def __eq__(self, o: object) -> bool:
        return self is o or (
            isinstance(o, JSONRef) and o._base is self._base and o._node is self._node and o._pointer == self._pointer
        )

    def __hash__(self) -> int:
        return id(self._base) ^ id(self._node) ^ hash(self._pointer)

    def __repr__(self) -> str:
        return f'JSONRef<{self._node_type}>(pointer="{self._pointer}", node={display_value(self._node)})'
