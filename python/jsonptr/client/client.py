import argparse

from .command import CommandArgs

JSONPTR_CLIENT_NAME = "jsonptr"


class JsonPtrClient:
    def __init__(self, namespace: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
        self.namespace = namespace
        self.parser = parser

    def execute(self) -> None:
        args = CommandArgs(self.namespace, self.parser)
        if args.command is None:
            self.parser.print_help()
            return
        command = args.command(self.namespace)
        command.run(args)
