from account.infrastructure.adapters.argon2_credential_hasher import Argon2CredentialHasher
from shared.config import Settings

SALT = b"0123456789abcdef"


def test_hash_is_deterministic_for_same_inputs(hasher):
    assert hasher.hash("Abcdef12", SALT) == hasher.hash("Abcdef12", SALT)


def test_hash_depends_on_password_and_salt(hasher):
    digest = hasher.hash("Abcdef12", SALT)
    assert digest != hasher.hash("Abcdef13", SALT)
    assert digest != hasher.hash("Abcdef12", b"fedcba9876543210")


def test_digest_length_follows_configuration():
    hasher = Argon2CredentialHasher(time_cost=1, memory_cost=8, parallelism=1, hash_len=24)
    assert len(hasher.hash("Abcdef12", SALT)) == 24


def test_from_settings_copies_argon2_parameters():
    settings = Settings(argon2_time_cost=2, argon2_memory_cost=1024, argon2_parallelism=2, argon2_hash_len=16)
    hasher = Argon2CredentialHasher.from_settings(settings)
    assert (hasher.time_cost, hasher.memory_cost, hasher.parallelism, hasher.hash_len) == (2, 1024, 2, 16)
