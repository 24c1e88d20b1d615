import logging
from collections.abc import Callable
from typing import Any, Self

from erc20sdk import artifacts, errno, tools
from erc20sdk.api import erc20client
from erc20sdk.evm import (
    AddressEncoder,
    BuildDeployTxReq,
    BuildInvokeTxReq,
    CallContractParam,
    ChainType,
    ContractTxBuilder,
    MultiChainClient,
    Provider,
    QueryResult,
    Tx,
)

logger = logging.getLogger(__name__)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_uint8(value: Any) -> bool:
    return _is_uint(value) and value < 256


def _first_output(query_res: QueryResult, check: Callable[[Any], bool]) -> Any:
    res = query_res.decode_res.get("0")
    if not check(res):
        raise errno.INVALID_TYPE_ASSERT.add(
            "raw query result: " + tools.fast_marshal(query_res)
        )
    return res


class Client(erc20client.Client):
    def __init__(
        self, provider: Provider, chain_type: ChainType = ChainType.ETHEREUM
    ) -> None:
        self._default_account = ""
        self._contract_address = ""
        self._abi = artifacts.DEFAULT_ABI
        self._provider = provider

        self._mc = MultiChainClient(chain_type, provider)
        self._ctb = ContractTxBuilder(provider)
        self._ae = AddressEncoder()

        self.set_provider(provider)

    @classmethod
    def default(cls) -> Self:
        return cls(Provider.default())

    @property
    def multichain(self) -> MultiChainClient:
        return self._mc

    def set_provider(self, provider: Provider) -> None:
        self._provider = provider
        self._mc.set_provider(provider)
        self._ctb.set_provider(provider)

    def set_private(self, private_hex: str) -> None:
        self._mc.set_private(private_hex)

    def get_account(self) -> str:
        return self._default_account

    def set_account(self, account: str) -> None:
        self._default_account = account

    def set_contract_address(self, addr: str) -> None:
        self._contract_address = addr

    def _query(self, func: str, params: list[Any] | None = None) -> QueryResult:
        return self._mc.query_contract(
            CallContractParam(
                contract_address=self._contract_address,
                abi=self._abi,
                called_func=func,
                params=params or [],
            )
        )

    def _invoke(self, method: str, params: list[Any]) -> Tx:
        return self._ctb.build_invoke_tx(
            BuildInvokeTxReq(
                from_=self.get_account(),
                abi=self._abi,
                method=method,
                contract_address=self._contract_address,
                params=params,
            )
        )

    # ERC20 reads

    def name(self) -> str:
        return _first_output(self._query(artifacts.FUNC_NAME), _is_str)

    def symbol(self) -> str:
        return _first_output(self._query(artifacts.FUNC_SYMBOL), _is_str)

    def decimals(self) -> int:
        return _first_output(self._query(artifacts.FUNC_DECIMALS), _is_uint8)

    def total_supply(self) -> int:
        return _first_output(self._query(artifacts.FUNC_TOTAL_SUPPLY), _is_uint)

    def balance_of(self, addr: str) -> int:
        query_res = self._query(
            artifacts.FUNC_BALANCE_OF,
            [self._ae.hex_to_address(addr)],
        )
        return _first_output(query_res, _is_uint)

    def allowance(self, owner: str, spender: str) -> int:
        query_res = self._query(
            artifacts.FUNC_ALLOWANCE,
            [self._ae.hex_to_address(owner), self._ae.hex_to_address(spender)],
        )
        return _first_output(query_res, _is_uint)

    # ERC20 writes

    def transfer(
        self,
        to: str,
        value: int,
        option: erc20client.CrossChainOption | None = None,
    ) -> Tx:
        if option is not None:
            logger.warning(
                "cross chain transfer to %s is not supported, option ignored",
                option.destination_chain_type,
            )

        return self._invoke(
            artifacts.FUNC_TRANSFER,
            [self._ae.hex_to_address(to), value],
        )

    def transfer_from(self, from_: str, to: str, value: int) -> Tx:
        return self._invoke(
            artifacts.FUNC_TRANSFER_FROM,
            [self._ae.hex_to_address(from_), self._ae.hex_to_address(to), value],
        )

    def approve(self, spender: str, value: int) -> Tx:
        return self._invoke(
            artifacts.FUNC_APPROVE,
            [self._ae.hex_to_address(spender), value],
        )

    def mint(self, address: str, amount: int) -> Tx:
        return self._invoke(
            artifacts.FUNC_MINT,
            [self._ae.hex_to_address(address), amount],
        )

    def burn(self, address: str, amount: int) -> Tx:
        return self._invoke(
            artifacts.FUNC_BURN,
            [self._ae.hex_to_address(address), amount],
        )

    def deploy_contract(self, param: erc20client.DeployERC20Param) -> Tx:
        abi = param.abi
        bytecode = param.bytecode

        # a custom abi only makes sense with its own bytecode
        if not abi or not bytecode:
            abi = artifacts.DEFAULT_ABI
            bytecode = artifacts.DEFAULT_BYTECODE

        return self._ctb.build_deploy_tx(
            BuildDeployTxReq(
                from_=self.get_account(),
                abi=abi,
                bytecode=bytecode,
                params=param.params,
            )
        )
