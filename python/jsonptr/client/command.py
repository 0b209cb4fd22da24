import argparse
import sys
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple, Type, TypeVar

from jsonptr.errors import DataParsingError
from jsonptr.logging import get_logger
from jsonptr.utils.parsing import DataFormat, try_to_parse

T = TypeVar("T", bound=Type["Command"])

STDIN = "-"

_registered_commands: List[Type["Command"]] = []

logger = get_logger(__name__)


def register_command(cls: T) -> T:
    _registered_commands.append(cls)
    return cls


def install_commands_parsers(parser: argparse.ArgumentParser) -> None:
    subparsers = parser.add_subparsers(help="command type")
    for command in _registered_commands:
        subparser, typ = command.register_args_subparser(subparsers)
        subparser.set_defaults(command=typ, subparser=subparser)


def add_document_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "input_file",
        type=str,
        nargs="?",
        help="Optional, file with the document in JSON or YAML format. If not specified, the standard input is read.",
        default=STDIN,
    )


def add_format_arguments(parser: argparse.ArgumentParser) -> None:
    formats = parser.add_mutually_exclusive_group()
    formats.add_argument(
        "--json",
        help="Print the result in JSON format (default).",
        const=DataFormat.JSON,
        action="store_const",
        dest="format",
    )
    formats.add_argument(
        "--yaml",
        help="Print the result in YAML format.",
        const=DataFormat.YAML,
        action="store_const",
        dest="format",
    )
    parser.set_defaults(format=DataFormat.JSON)


def read_document(input_file: str) -> Any:
    try:
        if input_file == STDIN:
            logger.debug("reading document from the standard input")
            raw = sys.stdin.read()
        else:
            logger.debug(f"reading document from '{input_file}'")
            with open(input_file, "r", encoding="utf8") as f:
                raw = f.read()
    except UnicodeDecodeError as e:
        raise DataParsingError(f"document is not valid UTF-8: {e}") from e
    return try_to_parse(raw)


class CommandArgs:
    def __init__(self, namespace: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
        self.namespace = namespace
        self.parser = parser
        self.subparser: Optional[argparse.ArgumentParser] = getattr(namespace, "subparser", None)
        self.command: Optional[Type["Command"]] = getattr(namespace, "command", None)


class Command(ABC):
    @staticmethod
    @abstractmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        raise NotImplementedError()

    @abstractmethod
    def __init__(self, namespace: argparse.Namespace) -> None:  # pylint: disable=[unused-argument]
        super().__init__()

    @abstractmethod
    def run(self, args: CommandArgs) -> None:
        raise NotImplementedError()
