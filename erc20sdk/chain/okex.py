from erc20sdk.chain import evm_compatible
from erc20sdk.evm import ChainType


class Client(evm_compatible.Client):
    CHAIN_TYPE = ChainType.OKEX
