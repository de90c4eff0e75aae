from __future__ import annotations

import pytest

from propelauth_sdk.utils.guid import is_valid_id


@pytest.mark.parametrize(
    "value",
    [
        "9b2d0c1e-8f0a-4c2b-9f3e-1a2b3c4d5e6f",
        "9B2D0C1E-8F0A-4C2B-9F3E-1A2B3C4D5E6F",
        "00000000-0000-0000-0000-000000000000",
    ],
)
def test_is_valid_id_accepts_canonical_uuids(value: str) -> None:
    assert is_valid_id(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "",
        "not-a-uuid",
        "9b2d0c1e8f0a4c2b9f3e1a2b3c4d5e6f",
        "{9b2d0c1e-8f0a-4c2b-9f3e-1a2b3c4d5e6f}",
        " 9b2d0c1e-8f0a-4c2b-9f3e-1a2b3c4d5e6f",
        "9b2d0c1e-8f0a-4c2b-9f3e-1a2b3c4d5e6g",
        "9b2d0c1e8-f0a-4c2b-9f3e-1a2b3c4d5e6f",
        "{9b2d0c1e-8f0a4c2b-9f3e1a2b3c4d5e6f}",
    ],
)
def test_is_valid_id_rejects_malformed_values(value: str) -> None:
    assert is_valid_id(value) is False
