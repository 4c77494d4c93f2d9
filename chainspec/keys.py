import hashlib
import logging
import re
import struct

import ecdsa
from mnemonic import Mnemonic
from nacl.encoding import HexEncoder, RawEncoder
from nacl.hash import blake2b
from nacl.signing import SigningKey

from chainspec.config import DEV_PHRASE
from chainspec.errors import InvalidLabel

logger = logging.getLogger(__name__)

ED25519 = "ed25519"
ECDSA = "ecdsa"

SCHEMES = (ED25519, ECDSA)

# Domain tags hashed into every hard derivation step
_HDKD_TAGS = {
    ED25519: "Ed25519HDKD",
    ECDSA: "Secp256k1HDKD",
}

# "//hard" and "/soft" junctions, optionally followed by "///password"
_SECRET_URI = re.compile(r"^(?P<path>(//?[^/]+)*)(///(?P<password>.*))?$")
_JUNCTION = re.compile(r"/(/?[^/]+)")
_NUMERIC = re.compile(r"\+?[0-9]+")

PBKDF2_ROUNDS = 2048


def _blake2_256(data: bytes) -> bytes:
    return blake2b(data, digest_size=32, encoder=RawEncoder)


def _compact_len(length: int) -> bytes:
    """SCALE compact encoding of a length prefix."""
    if length < 1 << 6:
        return bytes([length << 2])
    if length < 1 << 14:
        return struct.pack("<H", (length << 2) | 0b01)
    if length < 1 << 30:
        return struct.pack("<I", (length << 2) | 0b10)
    raise InvalidLabel(f"Junction too long: {length} bytes")


def _encode_str(value: str) -> bytes:
    raw = value.encode("utf-8")
    return _compact_len(len(raw)) + raw


def _chain_code(junction: str) -> bytes:
    """
    32-byte chain code for one junction.

    Numeric junctions (ASCII digits with an optional leading "+", up to
    u64::MAX) encode as little-endian u64, everything else as a
    length-prefixed string. Encodings longer than 32 bytes are hashed.
    """
    if _NUMERIC.fullmatch(junction) and int(junction) < 1 << 64:
        encoded = struct.pack("<Q", int(junction))
    else:
        encoded = _encode_str(junction)

    if len(encoded) > 32:
        return _blake2_256(encoded)
    return encoded.ljust(32, b"\x00")


def derivation_phrase(label: str) -> str:
    return f"//{label}"


def _parse_phrase(phrase: str):
    """Split a derivation phrase into hard junctions and a password."""
    match = _SECRET_URI.match(phrase)
    if match is None or not match.group("path"):
        raise InvalidLabel(f"Invalid derivation phrase: {phrase!r}")

    junctions = []
    for junction in _JUNCTION.findall(match.group("path")):
        if not junction.startswith("/"):
            raise InvalidLabel(f"Soft junction {junction!r} not supported in {phrase!r}")
        junctions.append(junction[1:])

    return junctions, match.group("password")


def _mini_secret(password=None) -> bytes:
    """First 32 bytes of the PBKDF2 seed over the development mnemonic's entropy."""
    entropy = bytes(Mnemonic("english").to_entropy(DEV_PHRASE))
    salt = ("mnemonic" + (password or "")).encode("utf-8")
    return hashlib.pbkdf2_hmac("sha512", entropy, salt, PBKDF2_ROUNDS)[:32]


class KeyPair:
    """A derived (secret, public) pair of one scheme."""

    def __init__(self, scheme: str, secret: bytes, public: bytes):
        self.scheme = scheme
        self.secret = secret
        self.public = public

    @property
    def public_hex(self) -> str:
        return self.public.hex()

    def __eq__(self, other):
        if not isinstance(other, KeyPair):
            return NotImplemented
        return (self.scheme, self.secret, self.public) == (other.scheme, other.secret, other.public)

    def __hash__(self):
        return hash((self.scheme, self.public))

    def __repr__(self):
        return f"KeyPair({self.scheme}, {self.public_hex[:16]}...)"


def _pair_from_seed(scheme: str, seed: bytes) -> KeyPair:
    if scheme == ED25519:
        signing_key = SigningKey(seed)
        return KeyPair(scheme, seed, signing_key.verify_key.encode())

    secexp = int.from_bytes(seed, "big")
    if not 0 < secexp < ecdsa.SECP256k1.order:
        raise InvalidLabel("Derived seed is not a valid secp256k1 secret")
    signing_key = ecdsa.SigningKey.from_secret_exponent(secexp, curve=ecdsa.SECP256k1)
    return KeyPair(scheme, seed, signing_key.get_verifying_key().to_string("compressed"))


def derive_keypair(scheme: str, label: str) -> KeyPair:
    """
    Derive the keypair for `label` under `scheme`.

    The label is turned into the phrase "//label" and every hard junction in it
    is applied, in order, to the seed of the development mnemonic. Identical
    (scheme, label) arguments always produce the identical pair.

    Raises:
        ValueError: unknown scheme.
        InvalidLabel: the phrase is empty, has an empty or soft junction.
    """
    if scheme not in SCHEMES:
        raise ValueError(f"Unknown key scheme: {scheme}")

    junctions, password = _parse_phrase(derivation_phrase(label))

    tag = _encode_str(_HDKD_TAGS[scheme])
    seed = _mini_secret(password)
    for junction in junctions:
        seed = _blake2_256(tag + seed + _chain_code(junction))

    pair = _pair_from_seed(scheme, seed)
    logger.debug("Derived %s key for %r: %s", scheme, label, pair.public_hex)
    return pair


def get_from_seed(label: str, scheme: str = ED25519) -> str:
    """Public key (hex) derived from a label."""
    return derive_keypair(scheme, label).public_hex


def account_id(public_key) -> str:
    """
    Account identifier (hex) of a public key.

    32-byte ed25519 keys are their own account id; 33-byte compressed
    secp256k1 keys are hashed with blake2b-256.
    """
    if isinstance(public_key, str):
        public_key = HexEncoder.decode(public_key.encode())

    if len(public_key) == 32:
        return public_key.hex()
    if len(public_key) == 33:
        return _blake2_256(public_key).hex()
    raise ValueError(f"Unsupported public key length: {len(public_key)}")


def get_account_id_from_seed(label: str, scheme: str = ED25519) -> str:
    """Account id derived from a label."""
    return account_id(derive_keypair(scheme, label).public)
