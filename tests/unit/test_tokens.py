# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Aeroliths Contributors

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from aeroliths.auth.tokens import create_access_token, decode_access_token, parse_duration
from aeroliths.errors import ServerConfigurationError, Unauthorized
from aeroliths.schemas.auth import TokenClaims

SECRET = "unit-test-secret-with-enough-bytes-for-hs256"


def _claims() -> TokenClaims:
    return TokenClaims(
        user_id="0b5a4f0e-5a7e-4f57-9a43-0f3f4ad1c2b1",
        email="ada@aeroliths.test",
        username="ada",
        role="admin",
    )


class TestParseDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("7d", timedelta(days=7)),
            ("12h", timedelta(hours=12)),
            ("30m", timedelta(minutes=30)),
            ("45s", timedelta(seconds=45)),
            ("2w", timedelta(weeks=2)),
            ("3600", timedelta(seconds=3600)),
            (" 1D ", timedelta(days=1)),
        ],
    )
    def test_parses_compact_durations(self, value: str, expected: timedelta) -> None:
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "seven days", "7y", "-1d"])
    def test_rejects_malformed_durations(self, value: str) -> None:
        with pytest.raises(ServerConfigurationError):
            parse_duration(value)


class TestAccessTokens:
    def test_token_carries_claims_in_camel_case(self) -> None:
        token = create_access_token(_claims(), SECRET, timedelta(hours=1))
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["userId"] == _claims().user_id
        assert payload["role"] == "admin"
        assert payload["exp"] > payload["iat"]

    def test_decode_returns_claims(self) -> None:
        token = create_access_token(_claims(), SECRET, timedelta(hours=1))
        assert decode_access_token(token, SECRET) == _claims()

    def test_expired_token_is_unauthorized(self) -> None:
        token = create_access_token(_claims(), SECRET, timedelta(seconds=-10))
        with pytest.raises(Unauthorized, match="Invalid or expired token"):
            decode_access_token(token, SECRET)

    def test_wrong_secret_is_unauthorized(self) -> None:
        token = create_access_token(_claims(), SECRET, timedelta(hours=1))
        with pytest.raises(Unauthorized):
            decode_access_token(token, "another-secret-with-enough-bytes-for-hs256")

    def test_garbage_token_is_unauthorized(self) -> None:
        with pytest.raises(Unauthorized):
            decode_access_token("not.a.token", SECRET)

    def test_token_missing_claims_is_unauthorized(self) -> None:
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"userId": "abc", "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256"
        )
        with pytest.raises(Unauthorized):
            decode_access_token(token, SECRET)

    def test_empty_secret_is_a_configuration_error(self) -> None:
        with pytest.raises(ServerConfigurationError, match="Server configuration error"):
            create_access_token(_claims(), "", timedelta(hours=1))
        with pytest.raises(ServerConfigurationError):
            decode_access_token("anything", "")
