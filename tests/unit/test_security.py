"""
Unit tests for todo_api.core.security
"""
import bcrypt

from todo_api.core.security import hash_password, verify_password


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self, mock_settings):
        result = hash_password("mypassword")
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self, mock_settings):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same")
        h2 = hash_password("same")
        assert h1 != h2

    def test_hash_not_equal_to_plain(self, mock_settings):
        result = hash_password("secret123")
        assert result != "secret123"

    def test_uses_configured_cost_factor(self, mock_settings):
        mock_settings.bcrypt_rounds = 5
        result = hash_password("secret123")
        assert result.startswith("$2b$05$")


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self, mock_settings):
        hashed = hash_password("correct")
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self, mock_settings):
        hashed = hash_password("correct")
        assert verify_password("wrong", hashed) is False

    def test_accepts_default_cost_hash(self):
        hashed = bcrypt.hashpw(b"secret", bcrypt.gensalt(rounds=10)).decode("utf-8")
        assert verify_password("secret", hashed) is True

    def test_malformed_hash_returns_false(self):
        assert verify_password("secret", "not-a-bcrypt-hash") is False


class TestPasswordByteLimit:
    """Passwords longer than bcrypt's 72-byte input"""

    def test_multibyte_password_hashes_and_verifies(self, mock_settings):
        password = "\U0001F600" * 20  # 80 bytes in UTF-8
        hashed = hash_password(password)
        assert verify_password(password, hashed) is True
        assert verify_password("x" * 20, hashed) is False

    def test_only_first_72_bytes_are_significant(self, mock_settings):
        hashed = hash_password("a" * 72 + "tail")
        assert verify_password("a" * 72 + "other", hashed) is True
