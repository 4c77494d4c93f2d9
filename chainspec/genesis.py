import logging
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from chainspec.config import AUTHORITY_WEIGHT, ENDOWMENT
from chainspec.errors import MalformedAddress, MissingRuntimePayload
from chainspec.evm import build as build_evm_account

logger = logging.getLogger(__name__)

SECTIONS = (
    "system",
    "balances",
    "aura",
    "grandpa",
    "sudo",
    "evm",
    "ethereum",
    "council",
    "session",
    "staking",
)


def _hex(data: bytes) -> str:
    return "0x" + data.hex()


def _freeze(value):
    """Read-only copy of nested dicts and lists."""
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


class GenesisState:
    """
    Storage of the ledger at block zero, one section per runtime module.

    A section set to None is absent: that module starts uninitialized and is
    configured later through normal ledger operations. An empty dict is a
    present section with default values. Sections are frozen on construction,
    so a built state can be shared.
    """

    def __init__(
        self,
        system: dict,
        balances: Optional[dict] = None,
        aura: Optional[dict] = None,
        grandpa: Optional[dict] = None,
        sudo: Optional[dict] = None,
        evm: Optional[dict] = None,
        ethereum: Optional[dict] = None,
        council: Optional[dict] = None,
        session: Optional[dict] = None,
        staking: Optional[dict] = None,
    ):
        sections = {
            "system": system,
            "balances": balances,
            "aura": aura,
            "grandpa": grandpa,
            "sudo": sudo,
            "evm": evm,
            "ethereum": ethereum,
            "council": council,
            "session": session,
            "staking": staking,
        }
        for name, section in sections.items():
            object.__setattr__(self, name, None if section is None else _freeze(section))

        if aura is not None and grandpa is not None:
            if len(aura["authorities"]) != len(grandpa["authorities"]):
                raise ValueError(
                    f"Authority count mismatch: {len(aura['authorities'])} block vs "
                    f"{len(grandpa['authorities'])} finality"
                )

    def __setattr__(self, name, value):
        raise AttributeError(f"GenesisState is read-only: cannot set {name}")

    @property
    def block_authorities(self) -> List[str]:
        return list(self.aura["authorities"]) if self.aura is not None else []

    @property
    def finality_authorities(self) -> List[Tuple[str, int]]:
        return list(self.grandpa["authorities"]) if self.grandpa is not None else []

    def is_present(self, section: str) -> bool:
        if section not in SECTIONS:
            raise KeyError(f"Unknown genesis section: {section}")
        return getattr(self, section) is not None

    def to_dict(self) -> dict:
        """JSON-ready rendering; bytes become 0x-hex and absent sections null."""
        out = {}
        for name in SECTIONS:
            out[name] = None if getattr(self, name) is None else {}

        out["system"] = {
            "code": _hex(self.system["code"]),
            "changesTrieConfig": self.system.get("changes_trie_config"),
        }
        if self.balances is not None:
            out["balances"] = {
                "balances": [["0x" + account, amount] for account, amount in self.balances["balances"].items()]
            }
        if self.aura is not None:
            out["aura"] = {"authorities": ["0x" + key for key in self.aura["authorities"]]}
        if self.grandpa is not None:
            out["grandpa"] = {
                "authorities": [["0x" + key, weight] for key, weight in self.grandpa["authorities"]]
            }
        if self.sudo is not None:
            out["sudo"] = {"key": "0x" + self.sudo["key"]}
        if self.evm is not None:
            out["evm"] = {
                "accounts": {"0x" + address: account.to_dict() for address, account in self.evm["accounts"].items()}
            }
        if self.council is not None:
            out["council"] = {
                "members": list(self.council.get("members", [])),
                "phantom": self.council.get("phantom"),
            }
        return out

    def __repr__(self):
        present = [name for name in SECTIONS if getattr(self, name) is not None]
        return f"GenesisState(sections={present}, authorities={len(self.block_authorities)})"


def assemble(
    runtime_payload: bytes,
    validators,
    root: str,
    endowed,
    evm_seed_accounts: Dict[str, Tuple[int, int]],
    enable_println: bool = False,
) -> GenesisState:
    """
    Configure initial storage state for every runtime module.

    Args:
        runtime_payload: executable runtime blob, stored verbatim in `system`.
        validators: (block authority key, finality authority key) pairs; the
            order is the initial authoring rotation.
        root: account granted sudo.
        endowed: accounts credited with ENDOWMENT each. Duplicates keep their
            first position and the last write wins.
        evm_seed_accounts: address hex -> (balance, nonce). Each address may
            appear once, in any spelling.

    Raises:
        MissingRuntimePayload: runtime_payload is empty.
        MalformedAddress: an EVM seed address is not 20 hex bytes, or two
            seeds name the same address.
    """
    if not runtime_payload:
        raise MissingRuntimePayload("Runtime payload is empty; cannot build genesis without runtime code")

    # Everything fallible runs before the state object exists
    evm_accounts = {}
    for address_hex, (balance, nonce) in evm_seed_accounts.items():
        account = build_evm_account(address_hex, balance, nonce)
        if account.address_hex in evm_accounts:
            raise MalformedAddress(f"Duplicate EVM address: {address_hex!r}")
        evm_accounts[account.address_hex] = account

    validators = list(validators)
    balances = {account: ENDOWMENT for account in endowed}
    block_authorities = [block_key for block_key, _ in validators]
    finality_authorities = [(finality_key, AUTHORITY_WEIGHT) for _, finality_key in validators]

    logger.debug("Runtime println enabled: %s", enable_println)

    state = GenesisState(
        system={"code": bytes(runtime_payload), "changes_trie_config": None},
        balances={"balances": balances},
        aura={"authorities": block_authorities},
        grandpa={"authorities": finality_authorities},
        sudo={"key": root},
        evm={"accounts": evm_accounts},
        ethereum={},
        council={"members": [], "phantom": None},
        session=None,
        staking=None,
    )

    logger.info(
        "Assembled genesis: %d authorities, %d endowed accounts, %d EVM accounts",
        len(block_authorities),
        len(balances),
        len(evm_accounts),
    )
    return state


# Name used by node chain specs
testnet_genesis = assemble
