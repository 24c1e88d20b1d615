import logging

import pytest
from eth_utils.address import to_checksum_address
from hypothesis import given
from hypothesis import strategies as st
from web3 import Web3

from erc20sdk import artifacts, errno
from erc20sdk.api.erc20client import CrossChainOption, DeployERC20Param
from erc20sdk.chain import ethereum
from erc20sdk.evm import BuildInvokeTxReq, CallContractParam, Provider, QueryResult
from tests.fixtures import CONTRACT, OWNER, RECEIVER, SPENDER, Recorder

addresses = st.binary(min_size=20, max_size=20).map(to_checksum_address)
uint256 = st.integers(min_value=0, max_value=2**256 - 1)


def test_account_round_trip(client: ethereum.Client):
    assert client.get_account() == ""

    client.set_account(OWNER)

    assert client.get_account() == OWNER


def test_set_account_feeds_sender_of_writes(client: ethereum.Client, invoke):
    client.set_account(OWNER)

    client.transfer(RECEIVER, 1)
    client.approve(SPENDER, 2)

    assert [r.from_ for r in invoke.requests] == [OWNER, OWNER]


def test_approve_scenario(client: ethereum.Client, invoke):
    client.set_account(OWNER)

    tx = client.approve(SPENDER, 100)

    assert tx is invoke.result
    assert invoke.last == BuildInvokeTxReq(
        from_=OWNER,
        abi=artifacts.DEFAULT_ABI,
        method="approve",
        contract_address=CONTRACT,
        params=[SPENDER, 100],
    )


@pytest.mark.parametrize(
    ("call", "method", "params"),
    [
        (lambda c: c.transfer(RECEIVER, 10), "transfer", [RECEIVER, 10]),
        (
            lambda c: c.transfer_from(OWNER, RECEIVER, 10),
            "transferFrom",
            [OWNER, RECEIVER, 10],
        ),
        (lambda c: c.approve(SPENDER, 10), "approve", [SPENDER, 10]),
        (lambda c: c.mint(RECEIVER, 10), "mint", [RECEIVER, 10]),
        (lambda c: c.burn(OWNER, 10), "burn", [OWNER, 10]),
    ],
)
def test_write_methods_build_invoke_requests(
    client: ethereum.Client, invoke, call, method, params
):
    client.set_account(OWNER)

    call(client)

    assert invoke.last.method == method
    assert invoke.last.params == params
    assert invoke.last.contract_address == CONTRACT


@given(from_=addresses, to=addresses, value=uint256)
def test_transfer_from_keeps_argument_order(from_, to, value):
    client = ethereum.Client(Provider(Web3(), chain_id=1))
    recorder = Recorder()
    client._ctb.build_invoke_tx = recorder  # type: ignore[method-assign]

    client.transfer_from(from_.lower(), to.lower(), value)

    assert recorder.last.params == [from_, to, value]


def test_write_methods_encode_addresses(client: ethereum.Client, invoke):
    mixed = "0x52908400098527886e0f7030069857d2e4169ee7"

    client.approve(mixed, 1)

    assert invoke.last.params[0] == "0x52908400098527886E0F7030069857D2E4169EE7"


def test_malformed_address_propagates_encoder_error(client: ethereum.Client, invoke):
    with pytest.raises(ValueError):
        client.approve("0xSpender", 100)

    assert invoke.requests == []


def test_transfer_ignores_cross_chain_option(
    client: ethereum.Client, invoke, caplog: pytest.LogCaptureFixture
):
    option = CrossChainOption(
        gravity_contract=SPENDER,
        destination_chain_type="weelink",
        destination_chain_id="1",
    )

    with caplog.at_level(logging.WARNING):
        client.transfer(RECEIVER, 5, option)

    assert invoke.last.method == "transfer"
    assert invoke.last.params == [RECEIVER, 5]
    assert "not supported" in caplog.text


def test_write_methods_return_builder_tx_unmodified(client: ethereum.Client, invoke):
    assert client.mint(RECEIVER, 1) is invoke.result
    assert client.burn(RECEIVER, 1) is invoke.result


# reads


@pytest.mark.parametrize(
    ("call", "func", "value"),
    [
        (lambda c: c.name(), "name", "Token"),
        (lambda c: c.symbol(), "symbol", "TKN"),
        (lambda c: c.decimals(), "decimals", 18),
        (lambda c: c.total_supply(), "totalSupply", 10**27),
        (lambda c: c.balance_of(OWNER), "balanceOf", 42),
        (lambda c: c.allowance(OWNER, SPENDER), "allowance", 0),
    ],
)
def test_read_methods_decode_first_output(
    client: ethereum.Client, query, call, func, value
):
    query.result = QueryResult({"0": value})

    assert call(client) == value
    assert query.last.called_func == func
    assert query.last.contract_address == CONTRACT
    assert query.last.abi == artifacts.DEFAULT_ABI


def test_read_params(client: ethereum.Client, query):
    query.result = QueryResult({"0": 1})

    client.allowance(OWNER, SPENDER)
    assert query.last == CallContractParam(
        contract_address=CONTRACT,
        abi=artifacts.DEFAULT_ABI,
        called_func="allowance",
        params=[OWNER, SPENDER],
    )

    client.balance_of(RECEIVER)
    assert query.last.params == [RECEIVER]

    client.total_supply()
    assert query.last.params == []


@pytest.mark.parametrize(
    ("call", "decoded"),
    [
        (lambda c: c.name(), {"0": 5}),
        (lambda c: c.name(), {}),
        (lambda c: c.symbol(), {"0": b"TKN"}),
        (lambda c: c.decimals(), {"0": "18"}),
        (lambda c: c.decimals(), {"0": 256}),
        (lambda c: c.total_supply(), {"0": "1000"}),
        (lambda c: c.balance_of(OWNER), {"0": True}),
        (lambda c: c.balance_of(OWNER), {"0": None}),
        (lambda c: c.allowance(OWNER, SPENDER), {"0": -1}),
        (lambda c: c.allowance(OWNER, SPENDER), {"1": 5}),
    ],
)
def test_read_methods_reject_wrong_types(
    client: ethereum.Client, query, call, decoded
):
    query.result = QueryResult(decoded)

    with pytest.raises(errno.Errno) as excinfo:
        call(client)

    err = excinfo.value
    assert err.matches(errno.INVALID_TYPE_ASSERT)
    assert "raw query result: " in str(err)
    assert '"decode_res"' in str(err)


def test_read_errors_pass_through(
    client: ethereum.Client, monkeypatch: pytest.MonkeyPatch
):
    def failing(param):
        raise TimeoutError("rpc timeout")

    monkeypatch.setattr(client._mc, "query_contract", failing)

    with pytest.raises(TimeoutError):
        client.name()


# deployment


def test_deploy_uses_defaults_when_both_empty(client: ethereum.Client, deploy):
    client.set_account(OWNER)
    params = ["Token", "TKN", 18, 10**24, True]

    client.deploy_contract(DeployERC20Param(params=params))

    assert deploy.last.abi == artifacts.DEFAULT_ABI
    assert deploy.last.bytecode == artifacts.DEFAULT_BYTECODE
    assert deploy.last.params == params
    assert deploy.last.from_ == OWNER


def test_default_deploy_builds_creation_tx(
    client: ethereum.Client, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setattr(client._ctb, "_fill", lambda tx_params: tx_params)
    client.set_account(OWNER)
    params = ["Token", "TKN", 18, 10**24, True]

    tx = client.deploy_contract(DeployERC20Param(params=params))

    assert tx.params["from"] == OWNER
    assert "to" not in tx.params
    assert tx.params["data"].startswith(artifacts.DEFAULT_BYTECODE)
    assert len(tx.params["data"]) > len(artifacts.DEFAULT_BYTECODE)


def test_deploy_uses_supplied_pair(client: ethereum.Client, deploy):
    client.deploy_contract(DeployERC20Param(abi="[]", bytecode="0x6080", params=[]))

    assert (deploy.last.abi, deploy.last.bytecode) == ("[]", "0x6080")


@pytest.mark.parametrize(
    "param",
    [
        DeployERC20Param(abi="[]"),
        DeployERC20Param(bytecode="0x6080"),
    ],
)
def test_deploy_partial_override_falls_back_to_defaults(
    client: ethereum.Client, deploy, param
):
    client.deploy_contract(param)

    assert deploy.last.abi == artifacts.DEFAULT_ABI
    assert deploy.last.bytecode == artifacts.DEFAULT_BYTECODE


def test_set_provider_reaches_collaborators(client: ethereum.Client):
    other = Provider(Web3(), chain_id=56)

    client.set_provider(other)

    assert client.multichain.provider is other
    assert client._ctb._provider is other
