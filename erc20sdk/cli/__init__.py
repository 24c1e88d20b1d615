from erc20sdk.cli import handlers, types
from erc20sdk.cli.parser import get_parser

__all__ = ["get_parser", "handlers", "types"]
