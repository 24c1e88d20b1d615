"""Chain agnostic ERC20 client.

    import erc20sdk
    provider = erc20sdk.Provider.from_rpc_url("https://bsc-dataseed.bnbchain.org")
    client = erc20sdk.new_client(erc20sdk.TYPE_BSC, provider)
    client.set_contract_address("0x...")
    client.symbol()
"""

import logging
from collections.abc import Callable

from erc20sdk import errno
from erc20sdk.api.erc20client import Client, CrossChainOption, DeployERC20Param
from erc20sdk.chain import binance, ethereum, okex
from erc20sdk.evm import ChainType, Provider

logger = logging.getLogger(__name__)

TYPE_ETH = ChainType.ETHEREUM
TYPE_BSC = ChainType.BINANCE
TYPE_OKEX = ChainType.OKEX

ClientFactory = Callable[[Provider], Client | None]

CONSTRUCTORS: dict[ChainType, ClientFactory] = {
    TYPE_ETH: ethereum.Client,
    TYPE_BSC: binance.Client,
    TYPE_OKEX: okex.Client,
}


def new_client(chain_type: int, provider: Provider) -> Client:
    # True == 1 would otherwise hit the ethereum entry
    if isinstance(chain_type, bool):
        raise errno.NOT_SUPPORT_CHAIN_TYPE.add(f"{chain_type=}")

    constructor = CONSTRUCTORS.get(chain_type)  # type: ignore[call-overload]
    if constructor is None:
        raise errno.NOT_SUPPORT_CHAIN_TYPE.add(f"{chain_type=}")

    cli = constructor(provider)
    if cli is None:
        raise errno.NOT_SUPPORT_CHAIN_TYPE.add(f"no client built for {chain_type=}")

    logger.debug("built %s for chain type %s", type(cli).__qualname__, chain_type)
    return cli


__all__ = [
    "CONSTRUCTORS",
    "ChainType",
    "Client",
    "CrossChainOption",
    "DeployERC20Param",
    "Provider",
    "TYPE_BSC",
    "TYPE_ETH",
    "TYPE_OKEX",
    "errno",
    "new_client",
]
