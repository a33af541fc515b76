"""Tests for sign-in, sign-up and the current user."""

import pytest

from hoopcamp.auth import session
from hoopcamp.errors import AuthenticationError


def sign_up_coach(fake_db):
    return session.sign_up("coach@example.com", "secret123", "Coach Kim", "coach")


class TestSignUp:

    def test_creates_profile_with_role(self, fake_db):
        result = sign_up_coach(fake_db)

        assert result.role == "coach"
        assert result.needs_confirmation is False
        profile = session.load_profile(result.user_id)
        assert profile.name == "Coach Kim"
        assert profile.is_coach

    def test_needs_confirmation_without_session(self, fake_db):
        fake_db.auth.require_confirmation = True

        result = session.sign_up("ana@example.com", "secret123", "Ana Lopez", "student")

        assert result.needs_confirmation is True
        assert session.get_current_user() is None

    def test_unknown_role_rejected(self, fake_db):
        with pytest.raises(AuthenticationError):
            session.sign_up("x@example.com", "secret123", "X", "admin")
        assert fake_db.rows("profiles") == []

    def test_duplicate_email_rejected(self, fake_db):
        sign_up_coach(fake_db)

        with pytest.raises(AuthenticationError, match="already registered"):
            sign_up_coach(fake_db)


class TestSignIn:

    def test_returns_profile(self, fake_db):
        sign_up_coach(fake_db)
        session.sign_out()

        profile = session.sign_in("coach@example.com", "secret123")

        assert profile.role == "coach"
        assert session.get_current_profile() == profile

    def test_bad_password(self, fake_db):
        sign_up_coach(fake_db)
        session.sign_out()

        with pytest.raises(AuthenticationError, match="Invalid login credentials"):
            session.sign_in("coach@example.com", "wrong")
        assert session.get_current_user() is None


class TestCurrentUser:

    def test_signed_out(self, fake_db):
        assert session.get_current_user() is None
        assert session.get_current_profile() is None

    def test_sign_out_clears_user(self, fake_db):
        sign_up_coach(fake_db)
        assert session.get_current_user() is not None

        session.sign_out()

        assert session.get_current_user() is None

    def test_rejected_session_is_signed_out(self, fake_db, monkeypatch):
        def reject():
            raise session.AuthError("JWT expired", "session_expired")

        monkeypatch.setattr(fake_db.auth, "get_user", reject)

        assert session.get_current_user() is None

    def test_error_message_fallback(self):
        assert session._error_message(session.AuthError("", None)) == "An error occurred"
