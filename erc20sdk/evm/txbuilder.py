import logging

from eth_typing import HexStr
from web3.types import Nonce, TxParams, Wei

from erc20sdk import errno
from erc20sdk.evm.address import AddressEncoder
from erc20sdk.evm.provider import Provider
from erc20sdk.evm.types import BuildDeployTxReq, BuildInvokeTxReq, Tx, load_abi

logger = logging.getLogger(__name__)

GAS_LIMIT_MULTIPLIER = 1.5


class TxBuilder:
    def __init__(self, provider: Provider) -> None:
        self._provider = provider
        self._ae = AddressEncoder()

    def set_provider(self, provider: Provider) -> None:
        self._provider = provider

    def build_tx(
        self,
        from_: str,
        to: str | None,
        data: HexStr | None = None,
        value: int = 0,
    ) -> Tx:
        if not from_:
            raise errno.INVALID_TX.add("sender account is not set")

        tx_params: TxParams = {
            "from": self._ae.hex_to_address(from_),
            "value": Wei(value),
        }
        if to is not None:
            tx_params["to"] = self._ae.hex_to_address(to)
        if data is not None:
            tx_params["data"] = data

        return Tx(self._fill(tx_params))

    def _fill(self, tx_params: TxParams) -> TxParams:
        w3 = self._provider.w3

        assert "from" in tx_params
        nonce = w3.eth.get_transaction_count(tx_params["from"], "pending")
        gas_limit = int(w3.eth.estimate_gas(tx_params) * GAS_LIMIT_MULTIPLIER)

        tx: TxParams = {
            **tx_params,
            "nonce": Nonce(nonce),
            "chainId": self._provider.chain_id,
            "gas": gas_limit,
        }

        block = w3.eth.get_block("latest")
        base_fee = block.get("baseFeePerGas")
        if base_fee is None:
            # pre london chains only understand legacy pricing
            tx["gasPrice"] = w3.eth.gas_price
        else:
            max_priority_fee = w3.eth.max_priority_fee
            tx["type"] = 2
            tx["maxFeePerGas"] = Wei(base_fee * 2 + max_priority_fee)
            tx["maxPriorityFeePerGas"] = max_priority_fee

        logger.debug("filled tx %s", tx)
        return tx


class ContractTxBuilder(TxBuilder):
    def build_invoke_tx(self, req: BuildInvokeTxReq) -> Tx:
        contract = self._provider.w3.eth.contract(
            address=self._ae.hex_to_address(req.contract_address),
            abi=load_abi(req.abi),
        )
        data = contract.encode_abi(
            abi_element_identifier=req.method,
            args=req.params,
        )
        logger.debug("invoke %s on %s", req.method, contract.address)

        return self.build_tx(req.from_, req.contract_address, data)

    def build_deploy_tx(self, req: BuildDeployTxReq) -> Tx:
        if not req.bytecode:
            raise errno.INVALID_TX.add("contract bytecode is empty")

        contract = self._provider.w3.eth.contract(
            abi=load_abi(req.abi),
            bytecode=req.bytecode,
        )
        data = contract.constructor(*req.params).data_in_transaction
        logger.debug("deploy contract with %d constructor params", len(req.params))

        return self.build_tx(req.from_, None, data)
