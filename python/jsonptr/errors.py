class BaseJsonPtrError(Exception):
    """Base class for all errors raised by jsonptr."""


class DataParsingError(BaseJsonPtrError):
    """Exception class for errors while parsing JSON or YAML documents."""

    def __init__(self, msg: str) -> None:
        super().__init__()
        self._msg = f"parsing error: {msg}"

    def __str__(self) -> str:
        return self._msg
