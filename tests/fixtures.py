from typing import Any

OWNER = "0x1111111111111111111111111111111111111111"
SPENDER = "0x2222222222222222222222222222222222222222"
RECEIVER = "0x3333333333333333333333333333333333333333"
CONTRACT = "0x4444444444444444444444444444444444444444"

# well known hardhat test key, never funded on a real network
PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
PRIVATE_KEY_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class Recorder:
    def __init__(self, result: Any = None) -> None:
        self.requests: list[Any] = []
        self.result = result

    def __call__(self, req: Any) -> Any:
        self.requests.append(req)
        return self.result

    @property
    def last(self) -> Any:
        return self.requests[-1]
