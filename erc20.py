#!/usr/bin/env python
import logging
import sys
from collections.abc import Callable
from typing import Any, TypeVar

import dotenv
import requests

from erc20sdk import errno
from erc20sdk.cli import get_parser, handlers
from erc20sdk.cli import types as ct


def not_implemented(args: Any) -> int | None:
    print(args)
    print("error: not implemented")
    return 2


T = TypeVar("T", bound=ct.NamespaceSerializer)
ResolverFn = tuple[type[T], Callable[[T], int | None]]
Resolver = dict[str, ResolverFn]


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def erc20() -> None:
    args = get_parser().parse_args()
    configure_logging(args.verbose)

    resolver: dict[str, Resolver | ResolverFn] = {
        "query": {
            "name": (ct.QueryName, handlers.query_name),
            "symbol": (ct.QuerySymbol, handlers.query_symbol),
            "decimals": (ct.QueryDecimals, handlers.query_decimals),
            "total-supply": (ct.QueryTotalSupply, handlers.query_total_supply),
            "balance-of": (ct.QueryBalanceOf, handlers.query_balance_of),
            "allowance": (ct.QueryAllowance, handlers.query_allowance),
        },
        "tx": {
            "transfer": (ct.TxTransfer, handlers.tx_transfer),
            "transfer-from": (ct.TxTransferFrom, handlers.tx_transfer_from),
            "approve": (ct.TxApprove, handlers.tx_approve),
            "mint": (ct.TxMint, handlers.tx_mint),
            "burn": (ct.TxBurn, handlers.tx_burn),
            "deploy": (ct.TxDeploy, handlers.tx_deploy),
        },
    }

    r = resolver.get(args.command, {})
    if isinstance(r, dict):
        r = r.get(args.subcommand)

    if r is None:
        exit(not_implemented(args))

    serializer, resolver_fn = r
    try:
        exit_code = resolver_fn(serializer.from_namespace(args))
    except requests.HTTPError as e:
        response = e.response
        err = errno.REMOTE_CALL_FAILED.add(str(e))
        if response is not None:
            err = err.set_code(response.status_code, response.text)
        print(f"error: {err} (http {err.http_code})", file=sys.stderr)
        exit(1)
    except (errno.Errno, errno.ResponseErrno, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        exit(1)

    if exit_code is not None:
        exit(exit_code)


def main() -> None:
    dotenv.load_dotenv()
    return erc20()


if __name__ == "__main__":
    main()
