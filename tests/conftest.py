"""
Pytest configuration and shared fixtures for signer key tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Resets process-wide configuration between tests
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

make_ed25519_key = _common.make_ed25519_key
make_pre_auth_tx_key = _common.make_pre_auth_tx_key
make_hash_x_key = _common.make_hash_x_key
make_signed_payload_key = _common.make_signed_payload_key
make_all_signer_keys = _common.make_all_signer_keys

from signerkeys.config.runtime import SignerKeyConfig, set_config


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test against default bounds, regardless of the caller's env."""
    monkeypatch.delenv("SIGNERKEYS_MAX_PAYLOAD_LENGTH", raising=False)
    monkeypatch.delenv("SIGNERKEYS_MIN_PAYLOAD_LENGTH", raising=False)
    set_config(SignerKeyConfig())
    yield
    set_config(None)


@pytest.fixture
def ed25519_key():
    """Provide the GA7Q... Ed25519 signer key."""
    return make_ed25519_key()


@pytest.fixture
def hash_x_key():
    return make_hash_x_key()


@pytest.fixture
def pre_auth_tx_key():
    return make_pre_auth_tx_key()


@pytest.fixture
def signed_payload_key():
    """Provide a signed-payload key over GA7Q... with payload 01 02 03."""
    return make_signed_payload_key()


@pytest.fixture(params=["ed25519", "pre_auth_tx", "hash_x", "ed25519_signed_payload"])
def any_signer_key(request):
    """Parametrized over one key of every type."""
    factories = {
        "ed25519": make_ed25519_key,
        "pre_auth_tx": make_pre_auth_tx_key,
        "hash_x": make_hash_x_key,
        "ed25519_signed_payload": make_signed_payload_key,
    }
    return factories[request.param]()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
