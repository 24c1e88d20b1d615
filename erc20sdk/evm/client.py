import logging

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_typing import ChecksumAddress
from eth_utils.abi import collapse_if_tuple
from hexbytes import HexBytes
from web3.types import TxParams, TxReceipt

from erc20sdk import errno
from erc20sdk.evm.address import AddressEncoder
from erc20sdk.evm.chains import ChainType
from erc20sdk.evm.provider import Provider
from erc20sdk.evm.types import (
    CallContractParam,
    QueryResult,
    Tx,
    find_function,
    load_abi,
)

logger = logging.getLogger(__name__)


class MultiChainClient:
    """Query contracts and broadcast transactions on one chain.

    Transactions are signed locally when a private key was set with
    `set_private`, otherwise they have to be signed elsewhere and handed to
    `send_signed_tx`.
    """

    def __init__(self, chain_type: ChainType, provider: Provider) -> None:
        self._chain_type = chain_type
        self._provider = provider
        self._ae = AddressEncoder()
        self._account: LocalAccount | None = None

    @property
    def chain_type(self) -> ChainType:
        return self._chain_type

    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def account(self) -> LocalAccount | None:
        return self._account

    def set_provider(self, provider: Provider) -> None:
        self._provider = provider

    def set_private(self, private_hex: str) -> None:
        self._account = Account.from_key(private_hex)

    def query_contract(self, param: CallContractParam) -> QueryResult:
        w3 = self._provider.w3
        abi = load_abi(param.abi)

        fn_abi = find_function(abi, param.called_func)
        if fn_abi is None:
            raise errno.INVALID_TYPE_ASSERT.add(
                f"function {param.called_func} is not in the contract abi"
            )

        contract = w3.eth.contract(
            address=self._ae.hex_to_address(param.contract_address),
            abi=abi,
        )
        data = contract.encode_abi(
            abi_element_identifier=param.called_func,
            args=param.params,
        )

        call: TxParams = {"to": contract.address, "data": data}
        if param.from_:
            call["from"] = self._ae.hex_to_address(param.from_)

        logger.debug("call %s on %s", param.called_func, contract.address)
        raw = w3.eth.call(call)

        output_types = [collapse_if_tuple(o) for o in fn_abi.get("outputs", [])]
        decoded = w3.codec.decode(output_types, raw)

        return QueryResult(
            decode_res={str(i): v for i, v in enumerate(decoded)},
            raw=raw,
        )

    def send_tx(self, tx: Tx) -> HexBytes:
        if self._account is None:
            raise errno.INVALID_TX.add("private key is not set")

        return self.send_signed_tx(tx.sign(self._account.key))

    def send_signed_tx(self, raw: bytes) -> HexBytes:
        tx_hash = self._provider.w3.eth.send_raw_transaction(raw)
        logger.info("sent tx %s", tx_hash.to_0x_hex())
        return tx_hash

    def wait_for_receipt(self, tx_hash: bytes, timeout: float = 120) -> TxReceipt:
        return self._provider.w3.eth.wait_for_transaction_receipt(
            HexBytes(tx_hash), timeout=timeout
        )

    def get_contract_address(self, tx_hash: bytes) -> ChecksumAddress:
        receipt = self.wait_for_receipt(tx_hash)
        address = receipt.get("contractAddress")
        if address is None:
            raise errno.INVALID_TX.add(
                f"{HexBytes(tx_hash).to_0x_hex()} did not create a contract"
            )
        return self._ae.hex_to_address(address)
