from enum import IntEnum
from typing import Self

from erc20sdk import errno


class ChainType(IntEnum):
    ETHEREUM = 1
    BINANCE = 2
    OKEX = 3

    @classmethod
    def parse(cls, value: str | int) -> Self:
        match str(value).strip().lower():
            case "1" | "eth" | "ethereum":
                return cls.ETHEREUM
            case "2" | "bsc" | "binance":
                return cls.BINANCE
            case "3" | "okex" | "okc":
                return cls.OKEX

        raise errno.NOT_SUPPORT_CHAIN_TYPE.add(f"{value=}")
