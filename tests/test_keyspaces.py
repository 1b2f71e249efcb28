from __future__ import annotations

import re

import pytest

from rfguard.keyspaces import (
    LOCAL_SYSTEM_KEYSPACES,
    REPLICATED_SYSTEM_KEYSPACES,
    VIRTUAL_SYSTEM_KEYSPACES,
    KeyspaceExemptions,
    is_system_keyspace,
)


class TestIsSystemKeyspace:
    @pytest.mark.parametrize(
        "keyspace",
        sorted(LOCAL_SYSTEM_KEYSPACES | REPLICATED_SYSTEM_KEYSPACES | VIRTUAL_SYSTEM_KEYSPACES),
    )
    def test_system_keyspaces(self, keyspace: str) -> None:
        assert is_system_keyspace(keyspace)

    def test_case_insensitive(self) -> None:
        assert is_system_keyspace("SYSTEM_AUTH")

    @pytest.mark.parametrize("keyspace", ["somekeyspace", "systems", "my_system", ""])
    def test_user_keyspaces(self, keyspace: str) -> None:
        assert not is_system_keyspace(keyspace)


class TestKeyspaceExemptions:
    def test_no_patterns_exempts_system_only(self) -> None:
        exempt = KeyspaceExemptions()
        assert exempt("system")
        assert not exempt("orders")

    def test_plain_name_is_exact_match(self) -> None:
        exempt = KeyspaceExemptions(["scratch"])
        assert exempt("scratch")
        assert exempt("SCRATCH")
        assert not exempt("scratchpad")
        assert not exempt("my_scratch")

    def test_regex_must_match_whole_name(self) -> None:
        exempt = KeyspaceExemptions([r"tenant_\d+"])
        assert exempt("tenant_1")
        assert not exempt("tenant_1_archive")

    def test_compiled_pattern_is_used_as_is(self) -> None:
        pattern = re.compile(r"Audit.*")
        exempt = KeyspaceExemptions([pattern])
        assert exempt.patterns == (pattern,)
        assert exempt("Audit_log")
        assert not exempt("audit_log")

    def test_repr(self) -> None:
        assert repr(KeyspaceExemptions(["scratch"])) == "KeyspaceExemptions(['scratch'])"
