from erc20sdk.evm.address import AddressEncoder
from erc20sdk.evm.chains import ChainType
from erc20sdk.evm.client import MultiChainClient
from erc20sdk.evm.provider import Provider
from erc20sdk.evm.txbuilder import ContractTxBuilder, TxBuilder
from erc20sdk.evm.types import (
    BuildDeployTxReq,
    BuildInvokeTxReq,
    CallContractParam,
    QueryResult,
    Tx,
)

__all__ = [
    "AddressEncoder",
    "BuildDeployTxReq",
    "BuildInvokeTxReq",
    "CallContractParam",
    "ChainType",
    "ContractTxBuilder",
    "MultiChainClient",
    "Provider",
    "QueryResult",
    "Tx",
    "TxBuilder",
]
