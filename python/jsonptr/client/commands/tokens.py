import argparse
import sys
from typing import Tuple, Type

from jsonptr.client.command import Command, CommandArgs, register_command
from jsonptr.pointer import JSONPointer, JSONPointerError


@register_command
class TokensCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.pointer: str = namespace.pointer

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        tokens = subparser.add_parser("tokens", help="Checks syntax of a JSON pointer and prints its unescaped tokens.")
        tokens.add_argument("pointer", type=str, help="JSON pointer, e.g. '/a~1b/0'.")
        return tokens, TokensCommand

    def run(self, args: CommandArgs) -> None:
        try:
            pointer = JSONPointer.parse(self.pointer)
        except JSONPointerError as e:
            print(e, file=sys.stderr)
            sys.exit(1)

        for token in pointer.tokens:
            print(token)
