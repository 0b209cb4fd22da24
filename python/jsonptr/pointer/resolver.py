"""
Implements JSON pointer resolution based on RFC 6901: https://www.rfc-editor.org/rfc/rfc6901.

There are three walks over the pointer tokens, one for each kind of result: find() returns
the node or raises, find_or_none() returns the node or a default and exists_in() a boolean.
"""

from typing import TYPE_CHECKING, Any, Optional

from jsonptr.constants import END_OF_ARRAY_TOKEN, MAX_INDEX_DIGITS

from .errors import JSONPointerIndexError, JSONPointerNotFoundError

if TYPE_CHECKING:
    from .pointer import JSONPointer


def is_valid_index(token: str) -> bool:
    """Test whether the token is usable as an array index: 1 to 8 ASCII digits, no leading zero."""

    length = len(token)
    if length < 1 or length > MAX_INDEX_DIGITS:
        return False
    if token[0] == "0":
        return length == 1
    # str.isdigit() accepts other unicode digits too
    return all("0" <= ch <= "9" for ch in token)


def resolve_token(node: Any, token: str, pointer: "JSONPointer", depth: int) -> Any:
    """
    Strictly resolve a single token against a node.

    The node is the one reached after the first 'depth' tokens of the pointer,
    errors are reported with the pointer truncated to that node.
    """

    if isinstance(node, dict):
        if token not in node:
            raise JSONPointerNotFoundError(f"cannot locate property '{token}'", pointer.truncate(depth))
        return node[token]

    if isinstance(node, list):
        if token == END_OF_ARRAY_TOKEN:
            raise JSONPointerIndexError("cannot dereference end-of-array JSON pointer", token, pointer.truncate(depth))
        if not is_valid_index(token):
            raise JSONPointerIndexError(
                f"illegal array index '{token}' in JSON pointer", token, pointer.truncate(depth)
            )
        index = int(token)
        if index >= len(node):
            raise JSONPointerNotFoundError(f"array index {index} out of range in JSON pointer", pointer.truncate(depth))
        return node[index]

    if node is None:
        raise JSONPointerNotFoundError("intermediate node is null", pointer.truncate(depth))
    raise JSONPointerNotFoundError("intermediate node is not a container", pointer.truncate(depth))


def find(root: Any, pointer: "JSONPointer") -> Any:
    current = root
    for depth, token in enumerate(pointer.tokens):
        current = resolve_token(current, token, pointer, depth)
    return current


def find_or_none(root: Any, pointer: "JSONPointer", default: Any = None) -> Any:
    if root is None:
        return default

    current = root
    for token in pointer.tokens:
        if isinstance(current, dict):
            if token not in current:
                return default
            current = current[token]
        elif isinstance(current, list):
            if not is_valid_index(token):
                return default
            index = int(token)
            if index >= len(current):
                return default
            current = current[index]
        else:
            return default
    return current


def exists_in(root: Any, pointer: "JSONPointer") -> bool:
    if root is None:
        return False

    current = root
    for token in pointer.tokens:
        if isinstance(current, dict):
            if token not in current:
                return False
            current = current[token]
        elif isinstance(current, list):
            if not is_valid_index(token):
                return False
            index = int(token)
            if index >= len(current):
                return False
            current = current[index]
        else:
            return False
    return True


def locate(base: Any, target: Any, pointer: "JSONPointer") -> Optional["JSONPointer"]:
    """
    Depth-first search for the node that is the target (by identity) below base.

    Objects are searched in the order of their members, arrays by index. Only containers
    have a reliable identity, a primitive target may match an equal primitive elsewhere
    in the tree if the runtime shares the instance.
    """

    if base is target:
        return pointer
    if isinstance(base, dict):
        for key, value in base.items():
            found = locate(value, target, pointer.child(key))
            if found is not None:
                return found
    elif isinstance(base, list):
        for index, value in enumerate(base):
            found = locate(value, target, pointer.child(index))
            if found is not None:
                return found
    return None
