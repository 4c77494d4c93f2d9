"""
config.py - chainspec configuration constants.
Well-known development values shared by every preset.
"""

# Development mnemonic every "//Label" phrase is derived from
DEV_PHRASE = "bottom drive obey lake curtain smoke basket hold race lonely fit walk"

# Initial balance of every endowed account (1 << 60)
ENDOWMENT = 1 << 60

# Weight of every initial finality authority
AUTHORITY_WEIGHT = 1

# Pre-funded EVM account (no prefix, mixed case as published)
DEV_EVM_ADDRESS = "6Be02d1d3665660d22FF9624b7BE0551ee1Ac91b"
DEV_EVM_BALANCE = 123456_123_000_000_000_000_000

# Well-known test labels
DEV_VALIDATORS = ("Alice",)
DEV_ENDOWED = ("Alice", "Bob", "Alice//stash", "Bob//stash")

LOCAL_VALIDATORS = ("Alice", "Bob", "Charlie", "Dave", "Eve", "Ferdie")
LOCAL_ENDOWED = LOCAL_VALIDATORS + tuple(f"{name}//stash" for name in LOCAL_VALIDATORS)

ROOT_LABEL = "Alice"

# Environment variable holding the path of the runtime blob
WASM_PATH_ENV = "CHAINSPEC_WASM_PATH"
