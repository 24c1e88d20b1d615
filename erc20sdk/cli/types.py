import argparse
from typing import Any, Self

import attrs
from eth_utils.address import is_address


def amount_parser(value: str | int) -> int:
    if isinstance(value, int):
        return value

    cleaned = value.strip().replace("_", "").lower()
    try:
        if cleaned.startswith("0x"):
            return int(cleaned, 16)
        return int(cleaned)
    except ValueError:
        pass

    # scientific notation such as 15e18
    mantissa, sep, exponent = cleaned.partition("e")
    if sep:
        try:
            return int(mantissa) * 10 ** int(exponent)
        except ValueError:
            pass

    raise ValueError(
        f"invalid {value=} for amount: should be an integer like 1000 or 15e18"
    )


def address_validator(instance: Any, attribute: attrs.Attribute, value: str) -> None:
    if not is_address(value):
        raise ValueError(f"{attribute.name} must be a valid address, got {value!r}")


def optional_address_validator(
    instance: Any, attribute: attrs.Attribute, value: str | None
) -> None:
    if value is not None:
        address_validator(instance, attribute, value)


def non_negative(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f"{attribute.name} must not be negative")


class NamespaceSerializer:
    @classmethod
    def from_namespace(cls, namespace: argparse.Namespace) -> Self:
        return cls(
            **{
                a.name: getattr(namespace, a.name)
                for a in cls.__attrs_attrs__  # type: ignore
                if a.init
            }
        )


@attrs.frozen(kw_only=True)
class ClientArgs:
    chain: str | None
    contract: str | None = attrs.field(validator=optional_address_validator)


@attrs.frozen(kw_only=True)
class TxArgs(ClientArgs):
    account: str | None = attrs.field(validator=optional_address_validator)
    send: bool


@attrs.frozen(kw_only=True)
class QueryName(ClientArgs, NamespaceSerializer):
    pass


@attrs.frozen(kw_only=True)
class QuerySymbol(ClientArgs, NamespaceSerializer):
    pass


@attrs.frozen(kw_only=True)
class QueryDecimals(ClientArgs, NamespaceSerializer):
    pass


@attrs.frozen(kw_only=True)
class QueryTotalSupply(ClientArgs, NamespaceSerializer):
    pass


@attrs.frozen(kw_only=True)
class QueryBalanceOf(ClientArgs, NamespaceSerializer):
    address: str = attrs.field(validator=address_validator)


@attrs.frozen(kw_only=True)
class QueryAllowance(ClientArgs, NamespaceSerializer):
    owner: str = attrs.field(validator=address_validator)
    spender: str = attrs.field(validator=address_validator)


@attrs.frozen(kw_only=True)
class TxTransfer(TxArgs, NamespaceSerializer):
    to: str = attrs.field(validator=address_validator)
    value: int = attrs.field(converter=amount_parser, validator=non_negative)


@attrs.frozen(kw_only=True)
class TxTransferFrom(TxArgs, NamespaceSerializer):
    from_: str = attrs.field(validator=address_validator)
    to: str = attrs.field(validator=address_validator)
    value: int = attrs.field(converter=amount_parser, validator=non_negative)


@attrs.frozen(kw_only=True)
class TxApprove(TxArgs, NamespaceSerializer):
    spender: str = attrs.field(validator=address_validator)
    value: int = attrs.field(converter=amount_parser, validator=non_negative)


@attrs.frozen(kw_only=True)
class TxMint(TxArgs, NamespaceSerializer):
    address: str = attrs.field(validator=address_validator)
    amount: int = attrs.field(converter=amount_parser, validator=non_negative)


@attrs.frozen(kw_only=True)
class TxBurn(TxArgs, NamespaceSerializer):
    address: str = attrs.field(validator=address_validator)
    amount: int = attrs.field(converter=amount_parser, validator=non_negative)


@attrs.frozen(kw_only=True)
class TxDeploy(TxArgs, NamespaceSerializer):
    token_name: str
    token_symbol: str
    token_decimals: int = attrs.field(
        validator=[non_negative, attrs.validators.lt(256)]
    )
    initial_supply: int = attrs.field(converter=amount_parser, validator=non_negative)
    not_mintable: bool
    artifact: str | None
