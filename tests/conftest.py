from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@dataclass
class FakeEntropy:
    """Deterministic entropy: counting bytes and a fixed clock."""

    timestamp: int = 1_700_000_000_000
    calls: list[int] = field(default_factory=list)

    def token_bytes(self, nbytes: int) -> bytes:
        self.calls.append(nbytes)
        return bytes(range(nbytes))

    def timestamp_ms(self) -> int:
        return self.timestamp


@pytest.fixture()
def fake_entropy() -> FakeEntropy:
    return FakeEntropy()
