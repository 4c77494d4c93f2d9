import logging
from typing import List, Tuple

from chainspec.keys import ECDSA, ED25519, get_from_seed

logger = logging.getLogger(__name__)

# Block production keys use secp256k1, finality keys use ed25519
BLOCK_AUTHORITY_SCHEME = ECDSA
FINALITY_AUTHORITY_SCHEME = ED25519


def derive_validator(label: str) -> Tuple[str, str]:
    """
    Derive a validator's (block authority, finality authority) public keys.

    Both keys come from the same label, so the pair always belongs to one
    validator.
    """
    block_key = get_from_seed(label, BLOCK_AUTHORITY_SCHEME)
    finality_key = get_from_seed(label, FINALITY_AUTHORITY_SCHEME)
    return block_key, finality_key


# Name used by node chain specs
authority_keys_from_seed = derive_validator


def derive_validators(labels) -> List[Tuple[str, str]]:
    """Validator identities for `labels`, in the same order."""
    validators = [derive_validator(label) for label in labels]
    logger.debug("Derived %d validator identities", len(validators))
    return validators
