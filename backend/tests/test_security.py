"""
Tests for password hashing.
"""

from services.security import BCRYPT_MAX_BYTES, hash_password, verify_password


class TestPasswordHashing:

    def test_hash_verifies(self):
        hashed = hash_password("secret123")

        assert hashed.startswith("$2b$")
        assert verify_password("secret123", hashed)
        assert not verify_password("secret124", hashed)

    def test_long_password_is_truncated_to_72_bytes(self):
        password = "p" * (BCRYPT_MAX_BYTES + 1)
        hashed = hash_password(password)

        assert verify_password(password[:BCRYPT_MAX_BYTES], hashed)
        assert verify_password(password, hash_password(password[:BCRYPT_MAX_BYTES]))
        assert not verify_password(password[:BCRYPT_MAX_BYTES - 1], hashed)

    def test_truncation_counts_bytes_not_characters(self):
        # 36 two-byte characters fill the 72-byte limit
        password = "é" * 36
        hashed = hash_password(password + "tail")

        assert verify_password(password, hashed)

    def test_missing_or_malformed_hash_never_matches(self):
        assert not verify_password("secret123", None)
        assert not verify_password("secret123", "not-a-bcrypt-hash")
