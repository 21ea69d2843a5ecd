"""Identity - verifies credential checks, display names and call-taker secrets.

Tests:
    - credentials_match is exact and refuses inactive or missing accounts
    - display_name falls back from 'First Last' to username
    - secret_matches never matches an unset secret
"""

from beavernet.core.identity import (
    build_identity, credentials_match, display_name, new_call_session_id,
    secret_matches,
)


def _user(**overrides):
    user = {
        "id": 7, "username": "jdoe", "password": "s3cret",
        "first_name": "Jane", "last_name": "Doe", "email": "jane@beaver.net",
        "department": "911", "position": "Dispatcher",
        "access_level": "911 Dispatcher", "is_active": True,
    }
    user.update(overrides)
    return user


def test_credentials_match_exact_password():
    assert credentials_match(_user(), "s3cret")


def test_credentials_reject_wrong_case():
    assert not credentials_match(_user(), "S3cret")


def test_credentials_reject_missing_user():
    assert not credentials_match(None, "anything")


def test_inactive_user_never_authenticates():
    assert not credentials_match(_user(is_active=False), "s3cret")


def test_active_flag_unset_counts_as_active():
    assert credentials_match(_user(is_active=None), "s3cret")


def test_display_name_prefers_full_name():
    assert display_name(_user()) == "Jane Doe"


def test_display_name_falls_back_to_single_name_then_username():
    assert display_name(_user(last_name=None)) == "Jane"
    assert display_name(_user(first_name=None)) == "Doe"
    assert display_name(_user(first_name=None, last_name="")) == "jdoe"


def test_build_identity_carries_profile_fields():
    identity = build_identity(_user())
    assert identity.id == 7
    assert identity.name == "Jane Doe"
    assert identity.access_level == "911 Dispatcher"
    body = identity.to_response()
    assert body["accessLevel"] == "911 Dispatcher"
    assert "password" not in body


def test_secret_matches_requires_stored_value():
    assert secret_matches("1234", "1234")
    assert not secret_matches("1234", "4321")
    assert not secret_matches(None, "")
    assert not secret_matches("", "")


def test_call_session_ids_are_unique():
    first, second = new_call_session_id(), new_call_session_id()
    assert first.startswith("call_")
    assert first != second
