import json
import sys

from eth_account import Account

import erc20sdk
from erc20sdk import errno
from erc20sdk.artifacts import Artifact
from erc20sdk.cli import types as ct
from erc20sdk.configuration.settings import settings
from erc20sdk.evm import ChainType, MultiChainClient, Provider, Tx


def _chain_type(args: ct.ClientArgs) -> ChainType:
    return ChainType.parse(args.chain or settings.chain_type)


def get_client(args: ct.ClientArgs, provider: Provider) -> erc20sdk.Client:
    client = erc20sdk.new_client(_chain_type(args), provider)

    contract = args.contract or settings.contract_address
    if contract:
        client.set_contract_address(contract)

    return client


def sender_account(args: ct.TxArgs) -> str:
    if args.account:
        return args.account
    if settings.account:
        return settings.account
    if settings.private_key:
        return Account.from_key(settings.private_key).address

    raise errno.INVALID_TX.add(
        "no sender, pass --account or set ERC20_ACCOUNT or ERC20_PRIVATE_KEY"
    )


def _tx_client(args: ct.TxArgs) -> tuple[erc20sdk.Client, MultiChainClient]:
    client = get_client(args, Provider.default())
    sender = sender_account(args)
    client.set_account(sender)

    if args.send:
        if not settings.private_key:
            raise errno.INVALID_TX.add("--send needs ERC20_PRIVATE_KEY")

        signer = Account.from_key(settings.private_key).address
        if sender.lower() != signer.lower():
            raise errno.INVALID_TX.add(
                f"--send signs as {signer}, which is not the sender {sender}"
            )
        client.set_private(settings.private_key)  # type: ignore[attr-defined]

    return client, client.multichain  # type: ignore[attr-defined]


def _finish(mc: MultiChainClient, tx: Tx, send: bool) -> bytes | None:
    if not send:
        print(json.dumps(tx.to_dict()))
        return None

    tx_hash = mc.send_tx(tx)
    print(f"sent tx: {tx_hash.to_0x_hex()}", file=sys.stderr)

    receipt = mc.wait_for_receipt(tx_hash)
    if receipt["status"] != 1:
        raise errno.INVALID_TX.add(f"{tx_hash.to_0x_hex()} reverted")

    print(tx_hash.to_0x_hex())
    return tx_hash


# queries


def query_name(args: ct.QueryName):
    print(get_client(args, Provider.default()).name())


def query_symbol(args: ct.QuerySymbol):
    print(get_client(args, Provider.default()).symbol())


def query_decimals(args: ct.QueryDecimals):
    print(get_client(args, Provider.default()).decimals())


def query_total_supply(args: ct.QueryTotalSupply):
    print(get_client(args, Provider.default()).total_supply())


def query_balance_of(args: ct.QueryBalanceOf):
    print(get_client(args, Provider.default()).balance_of(args.address))


def query_allowance(args: ct.QueryAllowance):
    client = get_client(args, Provider.default())
    print(client.allowance(args.owner, args.spender))


# transactions


def tx_transfer(args: ct.TxTransfer):
    client, mc = _tx_client(args)
    _finish(mc, client.transfer(args.to, args.value), args.send)


def tx_transfer_from(args: ct.TxTransferFrom):
    client, mc = _tx_client(args)
    _finish(mc, client.transfer_from(args.from_, args.to, args.value), args.send)


def tx_approve(args: ct.TxApprove):
    client, mc = _tx_client(args)
    _finish(mc, client.approve(args.spender, args.value), args.send)


def tx_mint(args: ct.TxMint):
    client, mc = _tx_client(args)
    _finish(mc, client.mint(args.address, args.amount), args.send)


def tx_burn(args: ct.TxBurn):
    client, mc = _tx_client(args)
    _finish(mc, client.burn(args.address, args.amount), args.send)


def deploy_param(args: ct.TxDeploy) -> erc20sdk.DeployERC20Param:
    params = [
        args.token_name,
        args.token_symbol,
        args.token_decimals,
        args.initial_supply,
        not args.not_mintable,
    ]

    if args.artifact is None:
        return erc20sdk.DeployERC20Param(params=params)

    artifact = Artifact.from_file(args.artifact)
    return erc20sdk.DeployERC20Param(
        abi=artifact.abi,
        bytecode=artifact.bytecode,
        params=params,
    )


def tx_deploy(args: ct.TxDeploy):
    client, mc = _tx_client(args)
    tx_hash = _finish(mc, client.deploy_contract(deploy_param(args)), args.send)

    if tx_hash is not None:
        address = mc.get_contract_address(tx_hash)
        print(f"deployed contract: {address}", file=sys.stderr)
