import argparse
import sys
from typing import Tuple, Type

from jsonptr.client.command import Command, CommandArgs, register_command
from jsonptr.pointer import JSONPointer, JSONPointerError


@register_command
class FragmentCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.operation: str = namespace.operation
        self.value: str = namespace.value

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        fragment = subparser.add_parser(
            "fragment", help="Converts a JSON pointer to URI fragment representation and back."
        )
        fragment.add_argument(
            "operation",
            type=str,
            choices=["encode", "decode"],
            help="'encode' converts a pointer to a URI fragment, 'decode' converts a URI fragment to a pointer.",
        )
        fragment.add_argument("value", type=str, help="JSON pointer or URI fragment (without the leading '#').")
        return fragment, FragmentCommand

    def run(self, args: CommandArgs) -> None:
        try:
            if self.operation == "encode":
                result = JSONPointer.parse(self.value).to_uri_fragment()
            else:
                result = str(JSONPointer.from_uri_fragment(self.value))
        except JSONPointerError as e:
            print(e, file=sys.stderr)
            sys.exit(1)
        print(result)
