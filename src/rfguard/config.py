"""TOML-based configuration for the replication factor guardrail.

Provides ``load_config`` / ``discover_config`` for loading ``rfguard.toml``
into a frozen ``GuardrailConfig``, which in turn builds the enable switch,
the exemption classifier and a ready-to-use ``ReplicationTuner``.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rfguard.keyspaces import KeyspaceExemptions
from rfguard.tuner import ReplicationTuner, UptuningSwitch

__all__ = [
    "CONFIG_FILE_NAME",
    "GuardrailConfig",
    "discover_config",
    "load_config",
]


CONFIG_FILE_NAME = "rfguard.toml"


@dataclass(frozen=True)
class GuardrailConfig:
    """Top-level guardrail configuration.

    Parameters
    ----------
    enabled : bool
        Initial state of the enable switch.
    exempt_keyspaces : tuple[str, ...]
        Keyspace names or regular expressions exempt from tune-up, on top
        of the store's system keyspaces.

    Examples
    --------
    >>> GuardrailConfig(exempt_keyspaces=("audit_.*",))
    GuardrailConfig(enabled=True, exempt_keyspaces=('audit_.*',))
    """

    enabled: bool = True
    exempt_keyspaces: tuple[str, ...] = ()

    def switch(self) -> UptuningSwitch:
        return UptuningSwitch(self.enabled)

    def exemptions(self) -> KeyspaceExemptions:
        return KeyspaceExemptions(self.exempt_keyspaces)

    def tuner(self, logger: logging.Logger | None = None) -> ReplicationTuner:
        """Build a ``ReplicationTuner`` wired to this configuration.

        Each call gets its own switch, so toggling one tuner does not
        affect another.

        Examples
        --------
        >>> tuner = GuardrailConfig(enabled=False).tuner()
        >>> tuner.enabled()
        False
        """
        return ReplicationTuner(
            enabled=self.switch(),
            is_exempt=self.exemptions(),
            logger=logger,
        )


def discover_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ``rfguard.toml``.

    Parameters
    ----------
    start : Path | None
        Directory to start searching from.

    Returns
    -------
    Path | None
        Path to the discovered config file, or ``None`` if not found.
    """
    current = start or Path.cwd()
    current = current.resolve()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(path: Path | None = None) -> GuardrailConfig:
    """Load a ``GuardrailConfig`` from a TOML file.

    If *path* is ``None``, auto-discovers ``rfguard.toml`` by walking up from
    the current working directory.  Returns the default config if no file is
    found.

    Parameters
    ----------
    path : Path | None
        Explicit path to a TOML config file.

    Returns
    -------
    GuardrailConfig

    Raises
    ------
    FileNotFoundError
        If an explicit *path* is given but does not exist.
    TypeError
        If ``[guardrail]`` holds a key that is not a config field, or a
        value of the wrong type.

    Examples
    --------
    >>> config = load_config(Path("rfguard.toml"))
    >>> config.enabled
    True
    """
    if path is None:
        discovered = discover_config()
        if discovered is None:
            return GuardrailConfig()
        path = discovered

    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        raw = tomllib.load(f)

    guardrail_raw = dict(raw.get("guardrail", {}))

    enabled = guardrail_raw.pop("enabled", True)
    if not isinstance(enabled, bool):
        msg = f"guardrail.enabled must be a boolean, found {enabled!r}"
        raise TypeError(msg)

    exempt_raw = guardrail_raw.pop("exempt_keyspaces", [])
    if not isinstance(exempt_raw, list) or not all(isinstance(k, str) for k in exempt_raw):
        msg = f"guardrail.exempt_keyspaces must be a list of strings, found {exempt_raw!r}"
        raise TypeError(msg)

    return GuardrailConfig(enabled=enabled, exempt_keyspaces=tuple(exempt_raw), **guardrail_raw)
