"""Tests for password hashing."""
from mflix.core.security import build_pwd_context, default_pwd_context, hash_password, verify_password

CONTEXT = build_pwd_context(4)


class TestPasswordHashing:
    def test_hash_is_not_plaintext(self):
        hashed = hash_password("s3cret-pass", CONTEXT)
        assert hashed != "s3cret-pass"
        assert hashed.startswith("$2")

    def test_hashes_are_salted(self):
        assert hash_password("s3cret-pass", CONTEXT) != hash_password("s3cret-pass", CONTEXT)

    def test_verify_roundtrip(self):
        hashed = hash_password("s3cret-pass", CONTEXT)
        assert verify_password("s3cret-pass", hashed, CONTEXT)
        assert not verify_password("wrong-pass", hashed, CONTEXT)

    def test_malformed_hash_is_a_mismatch(self):
        assert verify_password("s3cret-pass", "not-a-hash", CONTEXT) is False

    def test_missing_hash_is_a_mismatch(self):
        assert verify_password("s3cret-pass", None, CONTEXT) is False
        assert verify_password("s3cret-pass", "", CONTEXT) is False


    def test_default_context_uses_settings(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "5")
        default_pwd_context.cache_clear()
        try:
            hashed = hash_password("s3cret-pass")
            assert "$05$" in hashed
            assert verify_password("s3cret-pass", hashed)
        finally:
            default_pwd_context.cache_clear()
