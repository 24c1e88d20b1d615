import abc
from typing import Any

import attrs

from erc20sdk.evm import Provider, Tx


@attrs.frozen(kw_only=True)
class CrossChainOption:
    """Bridge target for `Client.transfer`.

    Only ethereum to the destination chain is planned. The option is accepted
    but no client acts on it yet.
    """

    gravity_contract: str
    destination_chain_type: str
    destination_chain_id: str


@attrs.frozen(kw_only=True)
class DeployERC20Param:
    """Parameters of `Client.deploy_contract`.

    When `abi` or `bytecode` is empty the built-in ERC20 abi and bytecode are
    used together. `params` must match the constructor of the abi in effect;
    the built-in constructor takes name (string), symbol (string),
    decimals (uint8), initial supply (uint256) and mintable (bool).
    """

    abi: str = ""
    bytecode: str = ""
    params: list[Any] = attrs.field(factory=list, converter=list)


class Client(abc.ABC):
    """Chain agnostic ERC20 client.

    The interface has four parts:

    1. client configuration;
    2. the ERC20 standard, see https://eips.ethereum.org/EIPS/eip-20;
    3. extensions (`decimals`, `total_supply`, `mint`, `burn`), the deployed
       contract has to implement them, the built-in contract does;
    4. contract deployment.

    Methods changing chain state only build the transaction. They use the
    account set with `set_account` as sender and return an unsigned `Tx`,
    which is then signed and broadcast through `evm.MultiChainClient`, either
    with a locally held key (`set_private` + `send_tx`) or by signing it
    elsewhere and calling `send_signed_tx`.
    """

    # configuration

    @abc.abstractmethod
    def set_provider(self, provider: Provider) -> None: ...

    @abc.abstractmethod
    def set_contract_address(self, addr: str) -> None: ...

    @abc.abstractmethod
    def get_account(self) -> str: ...

    @abc.abstractmethod
    def set_account(self, account: str) -> None:
        """Sender of built transactions, not needed for queries."""

    # ERC20 standard

    @abc.abstractmethod
    def name(self) -> str: ...

    @abc.abstractmethod
    def symbol(self) -> str: ...

    @abc.abstractmethod
    def balance_of(self, addr: str) -> int: ...

    @abc.abstractmethod
    def transfer(
        self, to: str, value: int, option: CrossChainOption | None = None
    ) -> Tx:
        """Move `value` tokens from the configured account to `to`."""

    @abc.abstractmethod
    def transfer_from(self, from_: str, to: str, value: int) -> Tx:
        """Move `value` tokens from `from_` to `to`.

        `from_` is not the sender, it is the owner that granted the sender an
        allowance of at least `value`.
        """

    @abc.abstractmethod
    def approve(self, spender: str, value: int) -> Tx: ...

    @abc.abstractmethod
    def allowance(self, owner: str, spender: str) -> int: ...

    # extensions

    @abc.abstractmethod
    def decimals(self) -> int: ...

    @abc.abstractmethod
    def total_supply(self) -> int: ...

    @abc.abstractmethod
    def mint(self, address: str, amount: int) -> Tx:
        """Create `amount` new tokens for `address`, sender must be the admin."""

    @abc.abstractmethod
    def burn(self, address: str, amount: int) -> Tx:
        """Destroy `amount` tokens of `address`.

        `address` has to be the sender or have granted the sender an allowance
        of at least `amount`.
        """

    # deployment

    @abc.abstractmethod
    def deploy_contract(self, param: DeployERC20Param) -> Tx:
        """Build the deployment of an ERC20 contract.

        The deployer becomes the minting admin of the built-in contract. The
        new address is read from the receipt, see
        `evm.MultiChainClient.get_contract_address`.
        """
