from typing import Self

import attrs


@attrs.define(auto_exc=True)
class Errno(Exception):
    state: int
    msg: str

    def __str__(self) -> str:
        return self.msg

    def add(self, s: str) -> Self:
        return attrs.evolve(self, msg=f"{self.msg}: {s}")

    def matches(self, other: "Errno | ResponseErrno") -> bool:
        return self.state == other.state


@attrs.define(auto_exc=True)
class ResponseErrno(Exception):
    state: int
    msg: str
    http_code: int = 0
    origin_body: str = ""

    def __str__(self) -> str:
        return self.msg

    def set_code(self, code: int, s: str) -> Self:
        return attrs.evolve(self, http_code=code, origin_body=s)

    def add(self, s: str) -> Self:
        return attrs.evolve(self, msg=f"{self.msg}: {s}")

    def matches(self, other: "Errno | ResponseErrno") -> bool:
        return self.state == other.state


NOT_SUPPORT_CHAIN_TYPE = Errno(10001, "Not support this chain")
INVALID_TX = Errno(10002, "Invalid Tx")
INVALID_TYPE_ASSERT = Errno(20001, "Invalid type asset")
REMOTE_CALL_FAILED = ResponseErrno(30001, "Remote call failed")
