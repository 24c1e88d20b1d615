import argparse


def _add_client_options(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--chain",
        type=str,
        required=False,
        default=None,
        help="chain type: eth, bsc or okex (default from ERC20_CHAIN_TYPE)",
        metavar="",
    )
    p.add_argument(
        "-c",
        "--contract",
        type=str,
        required=False,
        default=None,
        help="token contract address (default from ERC20_CONTRACT_ADDRESS)",
        metavar="",
    )


def _add_tx_options(p: argparse.ArgumentParser) -> None:
    _add_client_options(p)
    p.add_argument(
        "--account",
        type=str,
        required=False,
        default=None,
        help="sender account (default from ERC20_ACCOUNT or ERC20_PRIVATE_KEY)",
        metavar="",
    )
    p.add_argument(
        "-s",
        "--send",
        action="store_true",
        default=False,
        required=False,
        help="sign with ERC20_PRIVATE_KEY, send and wait for the receipt",
    )


def get_parser() -> argparse.ArgumentParser:
    cli = argparse.ArgumentParser(prog="erc20")
    cli.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log more, can be repeated",
    )

    subcli = cli.add_subparsers(title="command", required=True, dest="command")

    q_cli = subcli.add_parser("query", help="read token state")
    q_subcli = q_cli.add_subparsers(required=True, dest="subcommand")

    for name, help_ in (
        ("name", "token name"),
        ("symbol", "token symbol"),
        ("decimals", "token decimals"),
        ("total-supply", "total token supply"),
    ):
        _add_client_options(q_subcli.add_parser(name, help=help_))

    q_balance_of = q_subcli.add_parser("balance-of", help="token balance of address")
    _add_client_options(q_balance_of)
    q_balance_of.add_argument("address", type=str, help="account to check")

    q_allowance = q_subcli.add_parser(
        "allowance", help="amount spender may still move for owner"
    )
    _add_client_options(q_allowance)
    q_allowance.add_argument("owner", type=str, help="token owner")
    q_allowance.add_argument("spender", type=str, help="allowed spender")

    t_cli = subcli.add_parser(
        "tx", help="build (and optionally send) a token transaction"
    )
    t_subcli = t_cli.add_subparsers(required=True, dest="subcommand")

    t_transfer = t_subcli.add_parser("transfer", help="transfer tokens")
    _add_tx_options(t_transfer)
    t_transfer.add_argument("to", type=str, help="receiver")
    t_transfer.add_argument("value", type=str, help="amount in base units")

    t_transfer_from = t_subcli.add_parser(
        "transfer-from", help="transfer tokens using an allowance"
    )
    _add_tx_options(t_transfer_from)
    t_transfer_from.add_argument(
        "from_", type=str, help="owner that granted the allowance", metavar="from"
    )
    t_transfer_from.add_argument("to", type=str, help="receiver")
    t_transfer_from.add_argument("value", type=str, help="amount in base units")

    t_approve = t_subcli.add_parser("approve", help="set allowance of spender")
    _add_tx_options(t_approve)
    t_approve.add_argument("spender", type=str, help="allowed spender")
    t_approve.add_argument("value", type=str, help="amount in base units")

    t_mint = t_subcli.add_parser("mint", help="mint new tokens (admin only)")
    _add_tx_options(t_mint)
    t_mint.add_argument("address", type=str, help="receiver of new tokens")
    t_mint.add_argument("amount", type=str, help="amount in base units")

    t_burn = t_subcli.add_parser("burn", help="burn tokens")
    _add_tx_options(t_burn)
    t_burn.add_argument("address", type=str, help="account to burn from")
    t_burn.add_argument("amount", type=str, help="amount in base units")

    t_deploy = t_subcli.add_parser("deploy", help="deploy a new token contract")
    _add_tx_options(t_deploy)
    t_deploy.add_argument("token_name", type=str, help="token name", metavar="name")
    t_deploy.add_argument(
        "token_symbol", type=str, help="token symbol", metavar="symbol"
    )
    t_deploy.add_argument(
        "token_decimals", type=int, help="token decimals", metavar="decimals"
    )
    t_deploy.add_argument(
        "initial_supply", type=str, help="initial supply in base units"
    )
    t_deploy.add_argument(
        "--not-mintable",
        action="store_true",
        default=False,
        required=False,
        help="disable minting after deployment",
    )
    t_deploy.add_argument(
        "--artifact",
        type=str,
        required=False,
        default=None,
        help="compiled contract json with abi and bytecode to deploy instead",
        metavar="",
    )

    return cli
