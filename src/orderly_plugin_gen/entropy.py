"""Randomness and clock providers used to mint plugin identifiers."""

from __future__ import annotations

import hashlib
import logging
import secrets
import time
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "DIGEST_LENGTH",
    "EntropySource",
    "PLUGIN_ID_PREFIX",
    "RANDOM_BYTES",
    "SystemEntropy",
    "generate_plugin_id",
    "plugin_id_seed",
]

LOGGER = logging.getLogger(__name__)

PLUGIN_ID_PREFIX = "orderly-plugin"
DIGEST_LENGTH = 8
RANDOM_BYTES = 8


@runtime_checkable
class EntropySource(Protocol):
    """Capability supplying the random and time components of a plugin ID."""

    def token_bytes(self, nbytes: int) -> bytes:
        """Return ``nbytes`` random bytes."""

    def timestamp_ms(self) -> int:
        """Return the current time in milliseconds since the epoch."""


@dataclass(frozen=True, slots=True)
class SystemEntropy:
    """Entropy backed by :mod:`secrets` and the system clock."""

    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)

    def timestamp_ms(self) -> int:
        return time.time_ns() // 1_000_000


def plugin_id_seed(name: str, entropy: EntropySource) -> str:
    """Build the digest seed from ``name``, a timestamp and random bytes."""

    random_hex = entropy.token_bytes(RANDOM_BYTES).hex()
    return f"{name}-{entropy.timestamp_ms()}-{random_hex}"


def generate_plugin_id(name: str, entropy: EntropySource | None = None) -> str:
    """Return a unique runtime ID of the form ``orderly-plugin-<name>-<digest>``.

    The digest is the first eight hex characters of the SHA-256 of the seed.
    Eight characters keep the ID short; there is no collision detection.
    """

    source = entropy if entropy is not None else SystemEntropy()
    seed = plugin_id_seed(name, source)
    digest = hashlib.sha256(seed.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]
    plugin_id = f"{PLUGIN_ID_PREFIX}-{name}-{digest}"
    LOGGER.debug("generated plugin id %s", plugin_id)
    return plugin_id
