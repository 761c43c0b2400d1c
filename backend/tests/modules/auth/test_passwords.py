import pytest

from modules.auth.passwords import PasswordHasher


class TestPasswordHasher:
    def test_hash_is_not_plaintext(self, hasher):
        digest = hasher.hash("Test123!@#Strong")
        assert digest != "Test123!@#Strong"
        assert digest.startswith("$2")

    def test_hash_is_salted(self, hasher):
        """Two hashes of the same password differ."""
        assert hasher.hash("Test123!@#Strong") != hasher.hash("Test123!@#Strong")

    def test_verify_correct_password(self, hasher):
        digest = hasher.hash("Test123!@#Strong")
        assert hasher.verify("Test123!@#Strong", digest) is True

    def test_verify_wrong_password(self, hasher):
        digest = hasher.hash("Test123!@#Strong")
        assert hasher.verify("WrongPassword123!@#", digest) is False

    def test_verify_garbage_digest(self, hasher):
        """A corrupt digest fails verification instead of raising."""
        assert hasher.verify("Test123!@#Strong", "not-a-bcrypt-hash") is False

    def test_cost_is_embedded(self):
        hasher = PasswordHasher(rounds=5)
        assert hasher.rounds == 5
        assert hasher.hash("Test123!@#Strong").split("$")[2] == "05"

    def test_verify_dummy_is_false(self, hasher):
        assert hasher.verify_dummy("dummy-password") is False
