"""Access tokens kept in the OS keychain, one per repository source."""

from __future__ import annotations

import logging

from ArcTree.models import SourceType

logger = logging.getLogger(__name__)

_SERVICE_NAME = "ArcTree"
_AVAILABLE = False

try:
    import keyring
    from keyring.backends import fail

    # The fail backend is what keyring selects when no real keychain exists
    _AVAILABLE = not isinstance(keyring.get_keyring(), fail.Keyring)
except Exception:
    logger.warning("keyring not available; token persistence disabled")


def is_available() -> bool:
    """Return True if the OS keychain is usable."""
    return _AVAILABLE


def _key(source: SourceType) -> str:
    return f"{source.value}_token"


def load_token(source: SourceType) -> str | None:
    """Return the stored token for *source*, or None."""
    if not _AVAILABLE:
        return None
    try:
        return keyring.get_password(_SERVICE_NAME, _key(source))
    except Exception:
        logger.warning("Failed to read %s token from keyring", source.value)
        return None


def save_token(source: SourceType, value: str) -> bool:
    """Store *value* as the token for *source*. Returns True on success."""
    if not _AVAILABLE or not value:
        return False
    try:
        keyring.set_password(_SERVICE_NAME, _key(source), value)
        return True
    except Exception:
        logger.warning("Failed to save %s token to keyring", source.value)
        return False


def delete_token(source: SourceType) -> bool:
    """Remove the stored token for *source*. Returns True on success."""
    if not _AVAILABLE:
        return False
    try:
        keyring.delete_password(_SERVICE_NAME, _key(source))
        return True
    except Exception:
        return False
