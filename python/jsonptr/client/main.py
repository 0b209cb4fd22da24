import argparse
import importlib
import os
from typing import List, Optional

from jsonptr.constants import DEFAULT_LOGLEVEL, VERSION
from jsonptr.logging import LOG_LEVELS, LogTarget, start_logging

from .client import JSONPTR_CLIENT_NAME, JsonPtrClient
from .command import install_commands_parsers


def auto_import_commands() -> None:
    prefix = f"{'.'.join(__name__.split('.')[:-1])}.commands."
    for module_name in os.listdir(os.path.dirname(__file__) + "/commands"):
        if module_name[-3:] != ".py" or module_name == "__init__.py":
            continue
        importlib.import_module(f"{prefix}{module_name[:-3]}")


def create_main_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        JSONPTR_CLIENT_NAME,
        description="Command-line utility to address values in JSON and YAML documents with JSON pointers (RFC 6901).",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=VERSION,
        help="Get version",
    )
    parser.add_argument(
        "--loglevel",
        action="store",
        type=str,
        help=f"Optional, logging level. Defaults to JSONPTR_LOGLEVEL or '{DEFAULT_LOGLEVEL}'.",
        choices=list(LOG_LEVELS.keys()),
        default=DEFAULT_LOGLEVEL,
    )
    parser.add_argument(
        "--logtarget",
        action="store",
        type=str,
        help="Optional, where to write log messages.",
        choices=[target.value for target in LogTarget],
        default=LogTarget.STDERR.value,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    auto_import_commands()
    parser = create_main_argument_parser()
    install_commands_parsers(parser)

    namespace = parser.parse_args(argv)
    start_logging(JSONPTR_CLIENT_NAME, namespace.loglevel, namespace.logtarget)

    client = JsonPtrClient(namespace, parser)
    client.execute()
