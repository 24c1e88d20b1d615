import os
from collections.abc import Callable
from typing import Any, Self, cast

import attrs


def _optional_int(value: str | None) -> int | None:
    if value is None or value == "":
        return None
    return int(value, 0)


@attrs.frozen(kw_only=True)
class Settings:
    rpc_url: str | None
    chain_type: str
    chain_id: int | None

    private_key: str | None
    account: str | None
    contract_address: str | None

    @classmethod
    def default(cls) -> Self:
        return cls(
            rpc_url=os.getenv("ERC20_RPC_URL"),
            chain_type=os.getenv("ERC20_CHAIN_TYPE", "eth"),
            chain_id=_optional_int(os.getenv("ERC20_CHAIN_ID")),
            private_key=os.getenv("ERC20_PRIVATE_KEY"),
            account=os.getenv("ERC20_ACCOUNT"),
            contract_address=os.getenv("ERC20_CONTRACT_ADDRESS"),
        )


class LazySettings:
    """Reads the environment on first use, so `.env` files loaded by the
    entry point are seen no matter when this module was imported."""

    def __init__(self, factory: Callable[[], Settings]) -> None:
        self._factory = factory
        self._loaded: Settings | None = None

    def __getattr__(self, name: str) -> Any:
        if self._loaded is None:
            self._loaded = self._factory()
        return getattr(self._loaded, name)

    def reset(self) -> None:
        self._loaded = None


settings = cast(Settings, LazySettings(Settings.default))
