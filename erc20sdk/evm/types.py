import json
from typing import Any

import attrs
from eth_account import Account
from eth_typing import ABI, ABIFunction
from hexbytes import HexBytes
from web3.types import TxParams


def load_abi(abi: str | ABI) -> ABI:
    if isinstance(abi, str):
        return json.loads(abi)
    return abi


def find_function(abi: ABI, name: str) -> ABIFunction | None:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == name:
            return entry  # type: ignore
    return None


@attrs.frozen(kw_only=True)
class CallContractParam:
    contract_address: str
    abi: str | ABI
    called_func: str
    params: list[Any] = attrs.field(factory=list, converter=list)
    from_: str = ""


@attrs.frozen
class QueryResult:
    # decoded outputs keyed by their position, "0", "1", ...
    decode_res: dict[str, Any]
    raw: HexBytes = attrs.field(default=b"", converter=HexBytes)


@attrs.frozen(kw_only=True)
class BuildInvokeTxReq:
    from_: str
    abi: str | ABI
    method: str
    contract_address: str
    params: list[Any] = attrs.field(factory=list, converter=list)


@attrs.frozen(kw_only=True)
class BuildDeployTxReq:
    from_: str
    abi: str | ABI
    bytecode: str
    params: list[Any] = attrs.field(factory=list, converter=list)


@attrs.define
class Tx:
    params: TxParams

    @property
    def sender(self) -> str:
        return str(self.params.get("from", ""))

    def sign(self, private_key: str | bytes) -> HexBytes:
        signed = Account.sign_transaction(self.params, private_key)
        return HexBytes(signed.raw_transaction)

    def to_dict(self) -> dict[str, Any]:
        return {
            k: HexBytes(v).to_0x_hex() if isinstance(v, bytes) else v
            for k, v in self.params.items()
        }
