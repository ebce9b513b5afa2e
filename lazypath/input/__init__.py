"""Input-layer public API for key decoding and session key handling.

Low-level terminal decoding (``read_key``) is kept separate from key
interpretation (``interpret``) used by the session manager.
"""

from .dispatch import EditResult, build_key_registry, interpret
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "EditResult",
    "KeyComboBinding",
    "KeyComboRegistry",
    "build_key_registry",
    "interpret",
    "read_key",
]
