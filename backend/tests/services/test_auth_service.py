import bcrypt
import pytest

from finance_tracker.exceptions import AuthenticationError, DuplicateEmailError
from finance_tracker.services.auth_service import AuthService, hash_password, verify_password


class TestPasswordHashing:
    def test_round_trip(self):
        stored = hash_password("hunter2hunter2")

        assert verify_password("hunter2hunter2", stored)
        assert not verify_password("wrong", stored)

    def test_stored_as_bcrypt_hash(self):
        stored = hash_password("hunter2hunter2")

        assert stored.startswith("$2b$")
        assert bcrypt.checkpw(b"hunter2hunter2", stored.encode("utf-8"))

    def test_salted(self):
        assert hash_password("same-password") != hash_password("same-password")

    def test_malformed_hash(self):
        assert not verify_password("anything", "not-a-hash")


class TestAuthService:
    """Tests for AuthService."""

    def test_register_issues_token(self, db):
        user = AuthService(db).register("dana@example.com", "long enough")

        assert user.api_token
        assert user.password_hash != "long enough"

    def test_duplicate_email(self, db, alice):
        with pytest.raises(DuplicateEmailError):
            AuthService(db).register("alice@example.com", "another password")

    def test_login_rotates_token(self, db, alice):
        old_token = alice.api_token

        user = AuthService(db).login("alice@example.com", "correct horse")

        assert user.id == alice.id
        assert user.api_token != old_token

    def test_login_wrong_password(self, db, alice):
        with pytest.raises(AuthenticationError):
            AuthService(db).login("alice@example.com", "wrong horse")

    def test_login_unknown_email(self, db):
        with pytest.raises(AuthenticationError):
            AuthService(db).login("nobody@example.com", "whatever")

    def test_user_for_token(self, db, alice):
        assert AuthService(db).user_for_token(alice.api_token).id == alice.id

    @pytest.mark.parametrize("token", [None, "", "bogus"])
    def test_user_for_bad_token(self, db, alice, token):
        with pytest.raises(AuthenticationError):
            AuthService(db).user_for_token(token)
