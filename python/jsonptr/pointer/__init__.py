from .access import get_array, get_bool, get_int, get_number, get_object, get_string, get_value
from .codec import escape, unescape
from .errors import (
    JSONPointerError,
    JSONPointerIndexError,
    JSONPointerNotFoundError,
    JSONPointerSyntaxError,
    JSONPointerTypeError,
    RootParentError,
)
from .nodes import (
    ANY,
    ARRAY,
    BOOLEAN,
    INTEGER,
    NULL,
    NUMBER,
    OBJECT,
    PRIMITIVE,
    STRING,
    STRUCTURE,
    VALUE,
    NodeKind,
    NodeType,
    node_kind,
    nullable,
)
from .pointer import JSONPointer
from .ref import JSONRef
from .reference import JSONReference
from .resolver import exists_in, find, find_or_none, is_valid_index

__all__ = [
    "JSONPointer",
    "JSONRef",
    "JSONReference",
    "escape",
    "unescape",
    "find",
    "find_or_none",
    "exists_in",
    "is_valid_index",
    "get_value",
    "get_string",
    "get_int",
    "get_number",
    "get_bool",
    "get_object",
    "get_array",
    "NodeKind",
    "NodeType",
    "node_kind",
    "nullable",
    "ANY",
    "ARRAY",
    "BOOLEAN",
    "INTEGER",
    "NULL",
    "NUMBER",
    "OBJECT",
    "PRIMITIVE",
    "STRING",
    "STRUCTURE",
    "VALUE",
    "JSONPointerError",
    "JSONPointerSyntaxError",
    "JSONPointerNotFoundError",
    "JSONPointerIndexError",
    "JSONPointerTypeError",
    "RootParentError",
]
