"""Tests for PATCH body parsing and the Name/Email merge."""
import pytest

from app.profiles.models import ClientProfile
from app.profiles.utils import merge_profile, parse_profile_payload


class TestParseProfilePayload:
    def test_lowercase_keys(self):
        p, err = parse_profile_payload(b'{"name": "N", "email": "e@example.com"}')
        assert err is None
        assert p.Name == "N"
        assert p.Email == "e@example.com"

    def test_exact_key_wins_over_case_insensitive(self):
        p, err = parse_profile_payload('{"name": "lower", "Name": "exact"}')
        assert err is None
        assert p.Name == "exact"

    def test_id_and_token_are_parsed_but_typed(self):
        p, err = parse_profile_payload('{"id": "x", "token": "y"}')
        assert err is None
        assert (p.Id, p.Token) == ("x", "y")
        _, err = parse_profile_payload('{"token": 123}')
        assert err is not None

    def test_null_fields_are_skipped(self):
        p, err = parse_profile_payload('{"name": null}')
        assert err is None
        assert p.Name == ""

    def test_null_body_is_empty_candidate(self):
        p, err = parse_profile_payload("null")
        assert err is None
        assert p.is_empty()

    @pytest.mark.parametrize("raw", [None, b"", "invalid json", "[1, 2]", '"str"', "{", b"\xff\xfe"])
    def test_invalid_bodies(self, raw):
        p, err = parse_profile_payload(raw)
        assert p is None
        assert err.startswith("Invalid JSON")


class TestMergeProfile:
    def _current(self):
        return ClientProfile(Email="old@example.com", Id="user1", Name="Old", Token="123")

    def test_non_empty_fields_overwrite(self):
        merged = merge_profile(self._current(), ClientProfile(Email="new@example.com", Name="New"))
        assert merged == ClientProfile(Email="new@example.com", Id="user1", Name="New", Token="123")

    def test_empty_fields_leave_values(self):
        merged = merge_profile(self._current(), ClientProfile(Name="New"))
        assert merged.Email == "old@example.com"

    def test_id_and_token_never_applied(self):
        merged = merge_profile(self._current(), ClientProfile(Id="other", Token="rotated"))
        assert merged == self._current()


class TestProjection:
    def test_public_dict_omits_token(self):
        p = ClientProfile(Email="e", Id="i", Name="n", Token="secret")
        assert p.public_dict() == {"Email": "e", "Id": "i", "Name": "n"}
        assert p.to_dict() == {"Email": "e", "Id": "i", "Name": "n", "Token": "secret"}
