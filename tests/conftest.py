import pytest
from web3 import Web3

from erc20sdk.chain import ethereum
from erc20sdk.configuration.settings import settings
from erc20sdk.evm import Provider, QueryResult, Tx
from tests.fixtures import CONTRACT, OWNER, Recorder


@pytest.fixture
def provider() -> Provider:
    return Provider(Web3(), chain_id=1337)


@pytest.fixture
def client(provider: Provider) -> ethereum.Client:
    c = ethereum.Client(provider)
    c.set_contract_address(CONTRACT)
    return c


@pytest.fixture
def invoke(client: ethereum.Client, monkeypatch: pytest.MonkeyPatch) -> Recorder:
    recorder = Recorder(Tx({"from": OWNER}))
    monkeypatch.setattr(client._ctb, "build_invoke_tx", recorder)
    return recorder


@pytest.fixture
def deploy(client: ethereum.Client, monkeypatch: pytest.MonkeyPatch) -> Recorder:
    recorder = Recorder(Tx({"from": OWNER}))
    monkeypatch.setattr(client._ctb, "build_deploy_tx", recorder)
    return recorder


@pytest.fixture
def query(client: ethereum.Client, monkeypatch: pytest.MonkeyPatch) -> Recorder:
    recorder = Recorder(QueryResult({}))
    monkeypatch.setattr(client._mc, "query_contract", recorder)
    return recorder


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    for var in (
        "ERC20_RPC_URL",
        "ERC20_CHAIN_TYPE",
        "ERC20_CHAIN_ID",
        "ERC20_PRIVATE_KEY",
        "ERC20_ACCOUNT",
        "ERC20_CONTRACT_ADDRESS",
    ):
        monkeypatch.delenv(var, raising=False)

    settings.reset()  # type: ignore[attr-defined]
    yield settings
    settings.reset()  # type: ignore[attr-defined]
