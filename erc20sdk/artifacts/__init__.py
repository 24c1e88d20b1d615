import json
from pathlib import Path
from typing import Self

import attrs


PACKAGED_ARTIFACT = Path(__file__).parent / "ERC20.json"

FUNC_NAME = "name"
FUNC_SYMBOL = "symbol"
FUNC_DECIMALS = "decimals"
FUNC_TOTAL_SUPPLY = "totalSupply"
FUNC_BALANCE_OF = "balanceOf"
FUNC_ALLOWANCE = "allowance"
FUNC_TRANSFER = "transfer"
FUNC_TRANSFER_FROM = "transferFrom"
FUNC_APPROVE = "approve"
FUNC_MINT = "mint"
FUNC_BURN = "burn"


@attrs.frozen
class Artifact:
    abi: str
    bytecode: str

    @classmethod
    def from_file(cls, file_location: str | Path) -> Self:
        with open(file_location) as f:
            data = json.load(f)

        # hardhat/foundry artifacts nest the bytecode under "object"
        bytecode = data.get("bytecode", "")
        if isinstance(bytecode, dict):
            bytecode = bytecode.get("object", "")

        return cls(abi=json.dumps(data["abi"]), bytecode=bytecode)


DEFAULT_ARTIFACT = Artifact.from_file(PACKAGED_ARTIFACT)

DEFAULT_ABI = DEFAULT_ARTIFACT.abi
DEFAULT_BYTECODE = DEFAULT_ARTIFACT.bytecode

__all__ = [
    "Artifact",
    "DEFAULT_ABI",
    "DEFAULT_ARTIFACT",
    "DEFAULT_BYTECODE",
    "FUNC_ALLOWANCE",
    "FUNC_APPROVE",
    "FUNC_BALANCE_OF",
    "FUNC_BURN",
    "FUNC_DECIMALS",
    "FUNC_MINT",
    "FUNC_NAME",
    "FUNC_SYMBOL",
    "FUNC_TOTAL_SUPPLY",
    "FUNC_TRANSFER",
    "FUNC_TRANSFER_FROM",
]
