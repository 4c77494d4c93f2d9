# Keys
from .keys import KeyPair, derive_keypair, derivation_phrase, account_id, get_account_id_from_seed, ED25519, ECDSA
from .authority import derive_validator, authority_keys_from_seed

# EVM
from .evm import EvmAccount, build as build_evm_account

# Genesis
from .genesis import GenesisState, assemble, testnet_genesis

# Presets
from .chain_spec import ChainSpec, ChainType, development_config, local_testnet_config, load_spec

# Errors
from .errors import (
    ChainSpecError,
    MissingRuntimePayload,
    RuntimePayloadUnavailable,
    MalformedAddress,
    InvalidLabel,
)

__all__ = [
    # Keys
    "KeyPair",
    "derive_keypair",
    "derivation_phrase",
    "account_id",
    "get_account_id_from_seed",
    "ED25519",
    "ECDSA",
    "derive_validator",
    "authority_keys_from_seed",
    # EVM
    "EvmAccount",
    "build_evm_account",
    # Genesis
    "GenesisState",
    "assemble",
    "testnet_genesis",
    # Presets
    "ChainSpec",
    "ChainType",
    "development_config",
    "local_testnet_config",
    "load_spec",
    # Errors
    "ChainSpecError",
    "MissingRuntimePayload",
    "RuntimePayloadUnavailable",
    "MalformedAddress",
    "InvalidLabel",
]
