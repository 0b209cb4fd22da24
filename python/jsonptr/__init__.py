from .constants import VERSION
from .errors import BaseJsonPtrError
from .pointer import JSONPointer, JSONRef, JSONReference

__version__ = VERSION

__all__ = ["JSONPointer", "JSONRef", "JSONReference", "BaseJsonPtrError"]
