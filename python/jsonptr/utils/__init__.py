from .parsing import DataFormat, parse_json, parse_yaml, try_to_parse

__all__ = [
    "DataFormat",
    "parse_json",
    "parse_yaml",
    "try_to_parse",
]
