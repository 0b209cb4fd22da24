import argparse
import sys
from typing import Tuple, Type

from jsonptr.client.command import (
    Command,
    CommandArgs,
    add_document_argument,
    add_format_arguments,
    read_document,
    register_command,
)
from jsonptr.errors import DataParsingError
from jsonptr.pointer import JSONPointer, JSONPointerError
from jsonptr.utils.parsing import DataFormat


@register_command
class GetCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.pointer: str = namespace.pointer
        self.input_file: str = namespace.input_file
        self.format: DataFormat = namespace.format
        self.or_null: bool = namespace.or_null

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        get = subparser.add_parser("get", help="Prints the value referenced by a JSON pointer in a document.")
        get.set_defaults(or_null=False)
        get.add_argument(
            "--or-null",
            help="Print 'null' instead of failing when the pointer does not reference any value.",
            action="store_true",
            dest="or_null",
        )
        add_format_arguments(get)
        get.add_argument("pointer", type=str, help="JSON pointer, e.g. '/clients/0/name'. Empty string is the root.")
        add_document_argument(get)
        return get, GetCommand

    def run(self, args: CommandArgs) -> None:
        try:
            document = read_document(self.input_file)
            pointer = JSONPointer.parse(self.pointer)
            if self.or_null:
                value = pointer.find_or_none(document)
            else:
                value = pointer.find(document)
        except (DataParsingError, JSONPointerError, OSError) as e:
            print(e, file=sys.stderr)
            sys.exit(1)

        print(self.format.dict_dump(value, indent=4))
