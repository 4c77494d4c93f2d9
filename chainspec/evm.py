import re
from typing import Dict

from chainspec.errors import MalformedAddress

MAX_U256 = (1 << 256) - 1

_ADDRESS = re.compile(r"(0[xX])?(?P<body>[0-9a-fA-F]{40})")


def parse_address(address_hex: str) -> bytes:
    """Decode a 40-character hex address (optional 0x prefix) to 20 bytes."""
    match = _ADDRESS.fullmatch(address_hex) if isinstance(address_hex, str) else None
    if match is None:
        raise MalformedAddress(f"Malformed EVM address: {address_hex!r}")
    return bytes.fromhex(match.group("body"))


class EvmAccount:
    """
    Externally-owned account pre-funded at genesis.

    Storage and code are always empty; accounts carrying contract code are
    not created here.
    """

    def __init__(self, address: bytes, balance: int, nonce: int = 0):
        self._address = bytes(address)
        self._balance = balance
        self._nonce = nonce

    @property
    def address(self) -> bytes:
        return self._address

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def nonce(self) -> int:
        return self._nonce

    @property
    def storage(self) -> Dict[bytes, bytes]:
        return {}

    @property
    def code(self) -> bytes:
        return b""

    @property
    def address_hex(self) -> str:
        return self._address.hex()

    def to_dict(self):
        return {
            "nonce": hex(self._nonce),
            "balance": hex(self._balance),
            "storage": {},
            "code": "0x",
        }

    def __eq__(self, other):
        if not isinstance(other, EvmAccount):
            return NotImplemented
        return (self._address, self._balance, self._nonce) == (other._address, other._balance, other._nonce)

    def __hash__(self):
        return hash((self._address, self._balance, self._nonce))

    def __repr__(self):
        return f"EvmAccount(0x{self.address_hex}, balance={self._balance}, nonce={self._nonce})"


def build(address_hex: str, balance: int, nonce: int = 0) -> EvmAccount:
    """
    Build a genesis EVM account.

    Raises:
        MalformedAddress: the address is not exactly 20 hex-encoded bytes.
        ValueError: balance outside the u256 range or negative nonce.
    """
    address = parse_address(address_hex)

    if not isinstance(balance, int) or not 0 <= balance <= MAX_U256:
        raise ValueError(f"Balance out of u256 range: {balance}")
    if not isinstance(nonce, int) or nonce < 0:
        raise ValueError(f"Nonce must be a non-negative integer: {nonce}")

    return EvmAccount(address, balance, nonce)
