from __future__ import annotations

import re

from orderly_plugin_gen.entropy import (
    EntropySource,
    SystemEntropy,
    generate_plugin_id,
    plugin_id_seed,
)

PLUGIN_ID = re.compile(r"^orderly-plugin-pnl-card-[0-9a-f]{8}$")


def test_seed_combines_name_timestamp_and_random_hex(fake_entropy):
    seed = plugin_id_seed("pnl-card", fake_entropy)
    assert seed == "pnl-card-1700000000000-0001020304050607"
    assert fake_entropy.calls == [8]


def test_digest_is_truncated_sha256_of_seed(fake_entropy):
    assert generate_plugin_id("pnl-card", fake_entropy) == "orderly-plugin-pnl-card-fb82d80d"


def test_digest_changes_with_clock(fake_entropy):
    first = generate_plugin_id("pnl-card", fake_entropy)
    fake_entropy.timestamp += 1
    assert generate_plugin_id("pnl-card", fake_entropy) != first


def test_system_entropy_ids_are_well_formed_and_distinct():
    ids = {generate_plugin_id("pnl-card") for _ in range(20)}
    assert len(ids) == 20
    assert all(PLUGIN_ID.match(plugin_id) for plugin_id in ids)


def test_system_entropy_satisfies_protocol():
    source = SystemEntropy()
    assert isinstance(source, EntropySource)
    assert len(source.token_bytes(8)) == 8
    assert source.timestamp_ms() > 1_600_000_000_000
