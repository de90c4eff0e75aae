from __future__ import annotations

import sys
from pathlib import Path

import pytest
import respx

# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def config():
    from propelauth_sdk.config import Configuration

    return Configuration(auth_url="https://auth.example.com", api_key="test-api-key")


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as respx_mgr:
        yield respx_mgr
