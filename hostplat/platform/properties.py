"""Defensive access to host properties.

Platform detection reads a handful of named properties (OS name, CPU
architecture, pointer width, runtime name, OS version). ``PropertyStore``
resolves each name from, in order:

1. corrections recorded with ``set_property``
2. explicit values supplied at construction (config file, tests)
3. probes into the ``platform``/``sys``/``struct`` modules

Probes may be denied in sandboxed interpreters or fail on unusual builds;
that surfaces as ``PropertyAccessError`` from ``get_property`` and is
absorbed by ``safe_get_property``.
"""

from __future__ import annotations

import platform as _platform
import struct as _struct
import threading
from collections.abc import Callable, Mapping

__all__ = [
    "OS_NAME",
    "OS_ARCH",
    "ARCH_DATA_MODEL",
    "RUNTIME_NAME",
    "OS_VERSION",
    "PROPERTY_NAMES",
    "PropertyAccessError",
    "PropertyStore",
    "safe_get_property",
    "reset_system_properties",
    "system_properties",
]

OS_NAME = "os.name"
OS_ARCH = "os.arch"
ARCH_DATA_MODEL = "arch.data.model"
RUNTIME_NAME = "runtime.name"
OS_VERSION = "os.version"

PROPERTY_NAMES = (OS_NAME, OS_ARCH, ARCH_DATA_MODEL, RUNTIME_NAME, OS_VERSION)

Probe = Callable[[], str]


class PropertyAccessError(Exception):
    """Reading a property was denied by the hosting environment."""

    def __init__(self, name: str, cause: BaseException | None = None) -> None:
        super().__init__(f"access to property {name!r} denied")
        self.name = name
        self.cause = cause


def _data_model() -> str:
    return str(_struct.calcsize("P") * 8)


DEFAULT_PROBES: dict[str, Probe] = {
    OS_NAME: _platform.system,
    OS_ARCH: _platform.machine,
    ARCH_DATA_MODEL: _data_model,
    RUNTIME_NAME: _platform.python_implementation,
    OS_VERSION: _platform.release,
}


class PropertyStore:
    """Named host properties with an in-process correction layer."""

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        *,
        probes: Mapping[str, Probe] | None = None,
    ) -> None:
        self._values = dict(values or {})
        self._probes = dict(DEFAULT_PROBES if probes is None else probes)
        self._overrides: dict[str, str] = {}

    def get_property(self, name: str) -> str | None:
        """Return the property value, or None when it is not available.

        Raises:
            PropertyAccessError: the underlying probe was denied or failed.
        """
        if name in self._overrides:
            return self._overrides[name]
        if name in self._values:
            return self._values[name]
        probe = self._probes.get(name)
        if probe is None:
            return None
        try:
            value = probe()
        except Exception as e:  # noqa: BLE001
            # e.g. python_implementation() cannot parse an embedded sys.version
            raise PropertyAccessError(name, e) from e
        # platform.* return "" when a value cannot be determined
        return value or None

    def set_property(self, name: str, value: str) -> None:
        """Record a corrected value; later reads of ``name`` observe it."""
        self._overrides[name] = value

    def names(self) -> list[str]:
        known = [*PROPERTY_NAMES, *self._values, *self._overrides]
        return list(dict.fromkeys(known))

    def snapshot(self) -> dict[str, str | None]:
        """Current value of every known property (denied entries are None)."""
        return {name: safe_get_property(name, None, self) for name in self.names()}


_system_lock = threading.Lock()
_system_store: PropertyStore | None = None


def system_properties() -> PropertyStore:
    """Process-wide store backed by the running interpreter.

    Created once under a lock: concurrent first callers share one store, so a
    correction written by detection is seen by every reader.
    """
    global _system_store
    with _system_lock:
        if _system_store is None:
            _system_store = PropertyStore()
        return _system_store


def reset_system_properties() -> None:
    """Drop the process-wide store; the next call builds a fresh one."""
    global _system_store
    with _system_lock:
        _system_store = None


def safe_get_property(
    name: str,
    default: str | None,
    properties: PropertyStore | None = None,
) -> str | None:
    """Read a property, returning ``default`` when absent or denied.

    Never raises: platform detection must not be the reason a host fails to
    start.
    """
    store = system_properties() if properties is None else properties
    try:
        value = store.get_property(name)
    except PropertyAccessError:
        return default
    return default if value is None else value
