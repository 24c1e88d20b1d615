from typing import Self

import web3
from web3 import middleware

from erc20sdk.configuration.settings import settings


class Provider:
    """Connection to an Ethereum compatible node.

    `chain_id` is optional, when it is not given the node is asked once and
    the answer is kept for the lifetime of the provider.
    """

    def __init__(self, w3: web3.Web3, chain_id: int | None = None) -> None:
        self._w3 = w3
        self._chain_id = chain_id

    @classmethod
    def from_rpc_url(cls, rpc_url: str, chain_id: int | None = None) -> Self:
        w3 = web3.Web3(web3.Web3.HTTPProvider(rpc_url))
        # bsc and okex produce poa style blocks with long extra data
        w3.middleware_onion.inject(
            middleware.ExtraDataToPOAMiddleware,
            layer=0,
        )
        return cls(w3, chain_id)

    @classmethod
    def default(cls) -> Self:
        if not settings.rpc_url:
            raise ValueError("ERC20_RPC_URL is not set")
        return cls.from_rpc_url(settings.rpc_url, settings.chain_id)

    @property
    def w3(self) -> web3.Web3:
        return self._w3

    @property
    def chain_id(self) -> int:
        if self._chain_id is None:
            self._chain_id = self._w3.eth.chain_id
        return self._chain_id
