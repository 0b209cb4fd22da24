import argparse
import sys
from typing import Tuple, Type

from jsonptr.client.command import Command, CommandArgs, add_document_argument, read_document, register_command
from jsonptr.errors import DataParsingError
from jsonptr.pointer import JSONPointer, JSONPointerError


@register_command
class ExistsCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.pointer: str = namespace.pointer
        self.input_file: str = namespace.input_file
        self.quiet: bool = namespace.quiet

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        exists = subparser.add_parser(
            "exists", help="Tests whether a JSON pointer references a value in a document, exits with 1 if not."
        )
        exists.set_defaults(quiet=False)
        exists.add_argument(
            "-q",
            "--quiet",
            help="Do not print the result, only set the exit code.",
            action="store_true",
            dest="quiet",
        )
        exists.add_argument("pointer", type=str, help="JSON pointer, e.g. '/clients/0/name'. Empty string is the root.")
        add_document_argument(exists)
        return exists, ExistsCommand

    def run(self, args: CommandArgs) -> None:
        try:
            document = read_document(self.input_file)
            found = JSONPointer.parse(self.pointer).exists_in(document)
        except (DataParsingError, JSONPointerError, OSError) as e:
            print(e, file=sys.stderr)
            sys.exit(2)

        if not self.quiet:
            print("true" if found else "false")
        if not found:
            sys.exit(1)
