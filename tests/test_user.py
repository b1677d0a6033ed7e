#!/usr/bin/env python3
"""Tests for User, Role, email validation and AuthUser."""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from fleet import AuthUser, Role, User, errors, validate_email
from fleet import config


class TestValidateEmail:
    """Tests for validate_email."""

    @pytest.mark.parametrize(
        "email", ["driver@example.com", "a.b+tag@fleet.co.uk", "ops_team%1@x-y.io"]
    )
    def test_accepts_well_formed(self, email):
        assert validate_email(email) == email

    @pytest.mark.parametrize("email", [None, ""])
    def test_empty(self, email):
        with pytest.raises(errors.EmailEmpty):
            validate_email(email)

    @pytest.mark.parametrize(
        "email",
        ["plainaddress", "no-at.example.com", "user@host", "user@host.c", "a b@example.com", "user@example.com\n"],
    )
    def test_malformed(self, email):
        with pytest.raises(errors.InvalidEmail):
            validate_email(email)


class TestRole:
    """Tests for Role.validate."""

    def test_accepts_documented_roles(self):
        assert Role.validate("admin") is Role.ADMIN
        assert Role.validate("user") is Role.USER
        assert Role.validate(Role.ADMIN) is Role.ADMIN

    def test_empty(self):
        with pytest.raises(errors.RoleEmpty):
            Role.validate("")

    @pytest.mark.parametrize("role", ["Admin", "root", "users", " admin"])
    def test_rejects_others(self, role):
        with pytest.raises(errors.InvalidRole):
            Role.validate(role)


@pytest.fixture
def user():
    return User(email="driver@example.com", password="$argon2id$stub", role="user")


class TestUserValidate:
    """Tests for User.validate field order and errors."""

    def test_valid(self, user):
        user.validate()

    def test_empty_email(self, user):
        user.email = ""
        with pytest.raises(errors.EmailEmpty):
            user.validate()

    def test_invalid_email(self, user):
        user.email = "not-an-email"
        with pytest.raises(errors.InvalidEmail):
            user.validate()

    def test_empty_password(self, user):
        user.password = ""
        with pytest.raises(errors.PasswordEmpty):
            user.validate()

    def test_empty_role(self, user):
        user.role = ""
        with pytest.raises(errors.RoleEmpty):
            user.validate()

    def test_invalid_role(self, user):
        user.role = "superuser"
        with pytest.raises(errors.InvalidRole):
            user.validate()

    def test_email_checked_first(self):
        """With everything empty, the email error wins."""
        with pytest.raises(errors.EmailEmpty):
            User().validate()


class TestUserSetters:
    """Tests for the chainable User setters."""

    def test_chain(self):
        user = User().set_email("ops@example.com").set_password("s3cret").set_role(Role.ADMIN)
        assert user.email == "ops@example.com"
        assert user.role == "admin"
        user.validate()

    def test_set_email_rejects_invalid(self):
        user = User()
        with pytest.raises(errors.InvalidEmail):
            user.set_email("nope")
        assert user.email == ""

    def test_set_role_rejects_invalid(self):
        with pytest.raises(errors.InvalidRole):
            User().set_role("owner")

    def test_set_password_hashes(self):
        user = User().set_password("s3cret")
        assert user.password != "s3cret"
        assert user.password.startswith("$argon2")

    def test_set_password_empty(self):
        with pytest.raises(errors.PasswordEmpty):
            User().set_password("")

    def test_verify_password(self):
        user = User().set_password("s3cret")
        assert user.verify_password("s3cret")
        assert not user.verify_password("wrong")
        assert not user.verify_password("")

    def test_hasher_is_shared(self):
        from fleet import passwords

        assert passwords.check_password("s3cret", passwords.password_hasher.hash("s3cret"))

    def test_verify_password_without_hash(self, user):
        """A stored value that is not an Argon2 hash never verifies."""
        assert not user.verify_password("anything")
        assert not User().verify_password("anything")


class TestClaims:
    """Tests for User.claims."""

    def test_claims(self, user, monkeypatch):
        now = datetime(2025, 1, 15, 8, 0, tzinfo=timezone.utc)
        monkeypatch.setattr("fleet.user.utcnow", lambda: now)
        user.id = ObjectId()

        claims = user.claims()

        assert claims["jti"] == str(user.id)
        assert claims["sub"] == "driver@example.com"
        assert claims["aud"] == "user"
        assert claims["iss"] == config.TOKEN_ISSUER
        assert claims["iat"] == int(now.timestamp())
        assert claims["nbf"] == claims["iat"]
        assert claims["exp"] - claims["iat"] == config.TOKEN_TTL_HOURS * 3600

    def test_claims_issuer_from_config(self, user, monkeypatch):
        monkeypatch.setattr(config, "TOKEN_ISSUER", "fleet-auth")
        assert user.claims()["iss"] == "fleet-auth"


class TestAuthUser:
    """Tests for AuthUser.from_dict."""

    def test_from_dict(self):
        auth = AuthUser.from_dict(
            {
                "data": {
                    "id": "64b7f0c2e4b0a1a2b3c4d5e6",
                    "email": "ops@example.com",
                    "role": "admin",
                    "created_at": "2025-01-15T08:00:00Z",
                    "updated_at": "2025-01-16T08:00:00Z",
                }
            }
        )
        assert auth.id == "64b7f0c2e4b0a1a2b3c4d5e6"
        assert auth.email == "ops@example.com"
        assert auth.is_admin
        assert auth.created_at == datetime(2025, 1, 15, 8, 0, tzinfo=timezone.utc)

    def test_missing_data(self):
        auth = AuthUser.from_dict({})
        assert auth.id == ""
        assert not auth.is_admin
        assert auth.created_at is None
