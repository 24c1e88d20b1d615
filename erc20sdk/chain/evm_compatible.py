from typing import Self

from erc20sdk.api import erc20client
from erc20sdk.chain import ethereum
from erc20sdk.evm import ChainType, MultiChainClient, Provider, Tx


class Client(erc20client.Client):
    """ERC20 client for a chain that runs the ethereum virtual machine.

    Every call is forwarded to an ethereum client; only the chain type and the
    provider (endpoint, chain id) differ.
    """

    CHAIN_TYPE: ChainType

    def __init__(self, provider: Provider) -> None:
        self._eth = ethereum.Client(provider, chain_type=self.CHAIN_TYPE)

    @classmethod
    def default(cls) -> Self:
        return cls(Provider.default())

    @property
    def multichain(self) -> MultiChainClient:
        return self._eth.multichain

    def set_provider(self, provider: Provider) -> None:
        self._eth.set_provider(provider)

    def set_private(self, private_hex: str) -> None:
        self._eth.set_private(private_hex)

    def set_contract_address(self, addr: str) -> None:
        self._eth.set_contract_address(addr)

    def get_account(self) -> str:
        return self._eth.get_account()

    def set_account(self, account: str) -> None:
        self._eth.set_account(account)

    def name(self) -> str:
        return self._eth.name()

    def symbol(self) -> str:
        return self._eth.symbol()

    def decimals(self) -> int:
        return self._eth.decimals()

    def total_supply(self) -> int:
        return self._eth.total_supply()

    def balance_of(self, addr: str) -> int:
        return self._eth.balance_of(addr)

    def allowance(self, owner: str, spender: str) -> int:
        return self._eth.allowance(owner, spender)

    def transfer(
        self,
        to: str,
        value: int,
        option: erc20client.CrossChainOption | None = None,
    ) -> Tx:
        return self._eth.transfer(to, value, option)

    def transfer_from(self, from_: str, to: str, value: int) -> Tx:
        return self._eth.transfer_from(from_, to, value)

    def approve(self, spender: str, value: int) -> Tx:
        return self._eth.approve(spender, value)

    def mint(self, address: str, amount: int) -> Tx:
        return self._eth.mint(address, amount)

    def burn(self, address: str, amount: int) -> Tx:
        return self._eth.burn(address, amount)

    def deploy_contract(self, param: erc20client.DeployERC20Param) -> Tx:
        return self._eth.deploy_contract(param)
