from erc20sdk.chain.binance import Client as BinanceClient
from erc20sdk.chain.ethereum import Client as EthereumClient
from erc20sdk.chain.okex import Client as OkexClient

__all__ = [
    "BinanceClient",
    "EthereumClient",
    "OkexClient",
]
