"""
Unit tests for AuthService sign-in and sign-out.
"""

from unittest.mock import Mock

import pytest

from files_manager.application.auth_service import AuthService
from files_manager.domain.errors import StoreUnavailableError, UnauthorizedError


class TestSignIn:
    def test_returns_token_bound_to_user(self, auth_service, session_store, alice):
        token = auth_service.sign_in("alice@example.com", "alice-pw")

        assert session_store.get(f"auth_{token}") == alice.id

    def test_session_lasts_24_hours(self, auth_service, session_store, alice, clock):
        token = auth_service.sign_in("alice@example.com", "alice-pw")

        assert session_store.ttl_of(f"auth_{token}") == 86400
        clock.advance(86399)
        assert session_store.get(f"auth_{token}") == alice.id
        clock.advance(1)
        assert session_store.get(f"auth_{token}") is None

    def test_each_sign_in_issues_a_fresh_token(self, auth_service, alice):
        first = auth_service.sign_in("alice@example.com", "alice-pw")
        second = auth_service.sign_in("alice@example.com", "alice-pw")

        assert first != second

    @pytest.mark.parametrize(
        "email, password",
        [
            ("alice@example.com", "wrong"),
            ("nobody@example.com", "alice-pw"),
            ("alice@example.com", ""),
            ("", "alice-pw"),
            (None, None),
        ],
    )
    def test_bad_credentials(self, auth_service, session_store, alice, email, password):
        with pytest.raises(UnauthorizedError):
            auth_service.sign_in(email, password)

        assert session_store.keys() == []

    def test_custom_ttl(self, session_store, user_repository, alice):
        service = AuthService(session_store, user_repository, session_ttl=60)

        token = service.sign_in("alice@example.com", "alice-pw")

        assert session_store.ttl_of(f"auth_{token}") == 60

    def test_store_failure_propagates(self, user_repository, alice):
        session_store = Mock()
        session_store.put.side_effect = StoreUnavailableError("redis down")
        service = AuthService(session_store, user_repository)

        with pytest.raises(StoreUnavailableError):
            service.sign_in("alice@example.com", "alice-pw")


class TestSignOut:
    def test_revokes_session(self, auth_service, identity_resolver, alice_token):
        auth_service.sign_out(alice_token)

        assert identity_resolver.resolve_from_token(alice_token) is None

    def test_second_sign_out_is_unauthorized(self, auth_service, alice_token):
        auth_service.sign_out(alice_token)

        with pytest.raises(UnauthorizedError):
            auth_service.sign_out(alice_token)

    @pytest.mark.parametrize("token", [None, "", "unknown"])
    def test_unknown_token(self, auth_service, token):
        with pytest.raises(UnauthorizedError):
            auth_service.sign_out(token)

    def test_only_named_session_is_revoked(self, auth_service, identity_resolver, alice, alice_token):
        other = auth_service.sign_in("alice@example.com", "alice-pw")

        auth_service.sign_out(alice_token)

        assert identity_resolver.resolve_from_token(other) == alice

    def test_single_delete_call(self):
        session_store = Mock()
        session_store.get.return_value = "1"
        service = AuthService(session_store, Mock())

        service.sign_out("tok")

        session_store.delete.assert_called_once_with("auth_tok")
