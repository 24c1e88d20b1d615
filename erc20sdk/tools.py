import json
from typing import Any

import attrs
from hexbytes import HexBytes


def _default(o: Any) -> Any:
    if attrs.has(type(o)):
        return attrs.asdict(o, recurse=False)
    if isinstance(o, (bytes, bytearray)):
        return HexBytes(o).to_0x_hex()
    if isinstance(o, (set, frozenset, tuple)):
        return list(o)
    return repr(o)


def fast_marshal(value: Any) -> str:
    """Compact JSON dump that never raises, for error messages and logs."""
    return json.dumps(value, default=_default, separators=(",", ":"))
