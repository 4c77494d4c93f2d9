import unittest

from chainspec import (
    ECDSA,
    ED25519,
    InvalidLabel,
    account_id,
    derive_keypair,
    derivation_phrase,
    derive_validator,
    get_account_id_from_seed,
)
from chainspec.config import LOCAL_ENDOWED, LOCAL_VALIDATORS

# Well-known development keys
ALICE_ED25519 = "88dc3417d5058ec4b4503e0c12ea1a0a89be200fe98922423d4334014fa6b0ee"
ALICE_ECDSA = "020a1091341fe5664bfa1782d5e04779689068c916b04cb365ec3153755684d9a1"


class TestSeedDerivation(unittest.TestCase):

    def test_phrase(self):
        self.assertEqual(derivation_phrase("Alice"), "//Alice")
        self.assertEqual(derivation_phrase("Bob//stash"), "//Bob//stash")

    def test_deterministic(self):
        """Same scheme and label always give the same pair."""
        for scheme in (ED25519, ECDSA):
            first = derive_keypair(scheme, "Alice")
            second = derive_keypair(scheme, "Alice")
            self.assertEqual(first, second)
            self.assertEqual(first.public, second.public)
            self.assertEqual(first.secret, second.secret)

    def test_known_alice_keys(self):
        self.assertEqual(derive_keypair(ED25519, "Alice").public_hex, ALICE_ED25519)
        self.assertEqual(derive_keypair(ECDSA, "Alice").public_hex, ALICE_ECDSA)

    def test_key_sizes(self):
        self.assertEqual(len(derive_keypair(ED25519, "Bob").public), 32)
        self.assertEqual(len(derive_keypair(ECDSA, "Bob").public), 33)

    def test_stash_is_distinct_label(self):
        self.assertNotEqual(
            derive_keypair(ED25519, "Alice").public,
            derive_keypair(ED25519, "Alice//stash").public,
        )

    def test_schemes_differ(self):
        self.assertNotEqual(
            derive_keypair(ED25519, "Alice").secret,
            derive_keypair(ECDSA, "Alice").secret,
        )

    def test_numeric_junction(self):
        pair = derive_keypair(ED25519, "0")
        self.assertEqual(len(pair.public), 32)
        self.assertNotEqual(pair.public, derive_keypair(ED25519, "1").public)
        # Numeric junctions are encoded as integers
        self.assertEqual(pair.public, derive_keypair(ED25519, "00").public)
        self.assertEqual(pair.public, derive_keypair(ED25519, "+0").public)
        self.assertEqual(derive_keypair(ED25519, "+1").public, derive_keypair(ED25519, "1").public)
        self.assertNotEqual(derive_keypair(ED25519, "+").public, derive_keypair(ED25519, "0").public)

    def test_long_junction(self):
        label = "x" * 100
        self.assertEqual(derive_keypair(ED25519, label), derive_keypair(ED25519, label))

    def test_password_changes_keys(self):
        self.assertNotEqual(
            derive_keypair(ED25519, "Alice").public,
            derive_keypair(ED25519, "Alice///secret").public,
        )

    def test_invalid_labels(self):
        for label in ("", "/", "Alice//", "Alice/soft", "a//"):
            with self.subTest(label=label):
                with self.assertRaises(InvalidLabel):
                    derive_keypair(ED25519, label)

    def test_unknown_scheme(self):
        with self.assertRaises(ValueError):
            derive_keypair("sr25519", "Alice")


class TestIdentityExtraction(unittest.TestCase):

    def test_ed25519_account_is_public_key(self):
        pair = derive_keypair(ED25519, "Alice")
        self.assertEqual(account_id(pair.public), ALICE_ED25519)
        self.assertEqual(get_account_id_from_seed("Alice"), ALICE_ED25519)

    def test_hex_input(self):
        self.assertEqual(account_id(ALICE_ED25519), ALICE_ED25519)

    def test_ecdsa_account_is_hashed(self):
        pair = derive_keypair(ECDSA, "Alice")
        account = account_id(pair.public)
        self.assertEqual(len(bytes.fromhex(account)), 32)
        self.assertEqual(account, get_account_id_from_seed("Alice", ECDSA))

    def test_bad_length(self):
        with self.assertRaises(ValueError):
            account_id(b"\x01" * 20)

    def test_preset_accounts_distinct(self):
        accounts = [get_account_id_from_seed(label) for label in LOCAL_ENDOWED]
        self.assertEqual(len(set(accounts)), len(LOCAL_ENDOWED))

    def test_preset_block_keys_distinct(self):
        block_keys = [derive_keypair(ECDSA, label).public for label in LOCAL_VALIDATORS]
        self.assertEqual(len(set(block_keys)), len(LOCAL_VALIDATORS))
        accounts = [get_account_id_from_seed(label, ECDSA) for label in LOCAL_ENDOWED]
        self.assertEqual(len(set(accounts)), len(LOCAL_ENDOWED))


class TestValidatorIdentity(unittest.TestCase):

    def test_pair_is_stable(self):
        self.assertEqual(derive_validator("Charlie"), derive_validator("Charlie"))

    def test_pair_from_one_label(self):
        block_key, finality_key = derive_validator("Alice")
        self.assertEqual(block_key, ALICE_ECDSA)
        self.assertEqual(finality_key, ALICE_ED25519)

    def test_validators_differ(self):
        self.assertNotEqual(derive_validator("Alice"), derive_validator("Bob"))


if __name__ == "__main__":
    unittest.main()
