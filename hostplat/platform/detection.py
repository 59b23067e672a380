"""Normalized description of the host platform.

Raw host properties are collected once into ``RawPlatformInfo`` and turned
into an immutable ``PlatformDescriptor``:

    raw strings -> OS / arch tokens -> flags -> descriptor

Unrecognized OS and architecture names are never an error; they pass through
lowercased. ``detect()`` computes the descriptor for the running process once
and caches it; ``reset_detection()`` forgets the cached value.
"""

from __future__ import annotations

import sys as _sys
import threading
from dataclasses import dataclass, fields
from enum import IntEnum, StrEnum

from .properties import (
    ARCH_DATA_MODEL,
    OS_ARCH,
    OS_NAME,
    OS_VERSION,
    RUNTIME_NAME,
    PropertyStore,
    safe_get_property,
    system_properties,
)

__all__ = [
    "OS",
    "ByteOrder",
    "PACKAGE_PREFIX",
    "UNKNOWN",
    "RawPlatformInfo",
    "PlatformFlags",
    "PlatformDescriptor",
    "resolve_os",
    "resolve_arch",
    "derive_flags",
    "detect_byte_order",
    "describe",
    "detect",
    "detect_from",
    "reset_detection",
    "get_package_name",
    "get_os_package_name",
    "is_windows",
    "is_mac",
    "is_linux",
    "is_bsd",
    "is_wsl",
]

UNKNOWN = "unknown"

# Namespace for OS/arch specific extension lookups, e.g. "hostplat.platform.linux"
PACKAGE_PREFIX = __name__.rpartition(".")[0]

GCJ = "GNU libgcj"
IBM = "IBM J9 VM"
OPENJ9 = "Eclipse OpenJ9 VM"


class OS(StrEnum):
    """Known operating system tokens."""

    DARWIN = "darwin"
    WINDOWS = "windows"
    LINUX = "linux"
    FREEBSD = "freebsd"
    DRAGONFLYBSD = "dragonflybsd"
    OPENBSD = "openbsd"
    SOLARIS = "solaris"
    OPENVMS = "openvms"


class ByteOrder(IntEnum):
    """Native byte order, numbered like the C ``BYTE_ORDER`` macros."""

    BIG_ENDIAN = 4321
    LITTLE_ENDIAN = 1234

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")


@dataclass(frozen=True, slots=True)
class RawPlatformInfo:
    """Unprocessed host properties.

    ``data_model`` is the pointer width in bits ("32"/"64"); it is only used
    to disambiguate a "universal" architecture and stays None when unknown.
    """

    os_name: str = UNKNOWN
    arch: str = UNKNOWN
    runtime_name: str = UNKNOWN
    os_version: str = UNKNOWN
    data_model: str | None = None

    @classmethod
    def collect(cls, properties: PropertyStore | None = None) -> RawPlatformInfo:
        """Read every raw property in one pass, defensively."""

        def read(name: str) -> str:
            return safe_get_property(name, UNKNOWN, properties) or UNKNOWN

        return cls(
            os_name=read(OS_NAME),
            arch=read(OS_ARCH),
            runtime_name=read(RUNTIME_NAME),
            os_version=read(OS_VERSION),
            data_model=safe_get_property(ARCH_DATA_MODEL, None, properties),
        )


@dataclass(frozen=True, slots=True)
class PlatformFlags:
    """Boolean conveniences derived from the OS token and runtime name."""

    is_windows: bool = False
    is_mac: bool = False
    is_freebsd: bool = False
    is_dragonflybsd: bool = False
    is_openbsd: bool = False
    is_linux: bool = False
    is_wsl: bool = False
    is_solaris: bool = False
    is_bsd: bool = False
    is_openvms: bool = False
    is_gcj: bool = False
    is_j9: bool = False

    @property
    def is_ibm(self) -> bool:
        return self.is_j9


@dataclass(frozen=True, slots=True)
class PlatformDescriptor:
    """Complete, immutable platform description.

    Use ``detect()`` for the running process or ``describe()`` for synthetic
    input.
    """

    os: str
    arch: str
    runtime_name: str
    os_version: str
    flags: PlatformFlags
    byte_order: ByteOrder

    @property
    def name(self) -> str:
        """Composite identifier, e.g. "x86_64-linux"."""
        return f"{self.arch}-{self.os}"

    def package_name(self) -> str:
        return f"{PACKAGE_PREFIX}.{self.os}.{self.arch}"

    def os_package_name(self) -> str:
        return f"{PACKAGE_PREFIX}.{self.os}"

    def as_dict(self) -> dict[str, object]:
        """Flat mapping for rendering (JSON, tables)."""
        data: dict[str, object] = {
            "name": self.name,
            "os": self.os,
            "arch": self.arch,
            "runtime_name": self.runtime_name,
            "os_version": self.os_version,
            "byte_order": int(self.byte_order),
        }
        for f in fields(self.flags):
            data[f.name] = getattr(self.flags, f.name)
        data["is_ibm"] = self.flags.is_ibm
        return data

    def __str__(self) -> str:
        return self.name


def resolve_os(raw: str) -> str:
    """Normalize a host OS name to its canonical token."""
    osname = raw.lower()
    if osname == "mac os x":
        return OS.DARWIN.value
    if osname.startswith("windows"):
        return OS.WINDOWS.value
    if osname.startswith("sunos"):
        return OS.SOLARIS.value
    return osname


def resolve_arch(raw: str, data_model: str | None = None) -> str:
    """Normalize a host architecture name.

    "universal" (reported by some fat macOS builds) is resolved from the
    pointer width when it is exactly "32" or "64"; otherwise it is kept as is.
    """
    arch = raw.lower()
    if arch == "x86":
        return "i386"
    if arch == "universal":
        if data_model == "32":
            return "i386"
        if data_model == "64":
            return "x86_64"
    return arch


def derive_flags(os: str, runtime_name: str, os_version: str) -> PlatformFlags:
    """Compute the flag set for an OS token and runtime."""
    is_mac = os == OS.DARWIN
    is_freebsd = os == OS.FREEBSD
    is_openbsd = os == OS.OPENBSD
    is_dragonflybsd = os == OS.DRAGONFLYBSD
    is_linux = os == OS.LINUX
    return PlatformFlags(
        is_windows=os == OS.WINDOWS,
        is_mac=is_mac,
        is_freebsd=is_freebsd,
        is_dragonflybsd=is_dragonflybsd,
        is_openbsd=is_openbsd,
        is_linux=is_linux,
        # WSL1 kernels report e.g. "4.4.0-19041-Microsoft"
        is_wsl=is_linux and "Microsoft" in os_version,
        is_solaris=os == OS.SOLARIS,
        is_bsd=is_mac or is_freebsd or is_openbsd or is_dragonflybsd,
        is_openvms=os == OS.OPENVMS,
        is_gcj=runtime_name == GCJ,
        is_j9=runtime_name in (OPENJ9, IBM),
    )


def detect_byte_order() -> ByteOrder:
    """Native byte order of the running interpreter."""
    return ByteOrder.BIG_ENDIAN if _sys.byteorder == "big" else ByteOrder.LITTLE_ENDIAN


def describe(raw: RawPlatformInfo, byte_order: ByteOrder | None = None) -> PlatformDescriptor:
    """Build a descriptor from raw properties (pure)."""
    os = resolve_os(raw.os_name)
    return PlatformDescriptor(
        os=os,
        arch=resolve_arch(raw.arch, raw.data_model),
        runtime_name=raw.runtime_name,
        os_version=raw.os_version,
        flags=derive_flags(os, raw.runtime_name, raw.os_version),
        byte_order=detect_byte_order() if byte_order is None else byte_order,
    )


def detect_from(properties: PropertyStore) -> PlatformDescriptor:
    """Describe the platform seen through ``properties`` (uncached).

    When the raw architecture is "universal" and gets disambiguated, the
    corrected value is written back to ``properties``.
    """
    raw = RawPlatformInfo.collect(properties)
    descriptor = describe(raw)
    if raw.arch.lower() == "universal" and descriptor.arch != "universal":
        properties.set_property(OS_ARCH, descriptor.arch)
    return descriptor


_detect_lock = threading.Lock()
_current: PlatformDescriptor | None = None


def detect() -> PlatformDescriptor:
    """Describe the running process.

    Computed once under a lock, so a "universal" write-back always lands in
    the store every later reader uses.
    """
    global _current
    with _detect_lock:
        if _current is None:
            _current = detect_from(system_properties())
        return _current


def reset_detection() -> None:
    """Forget the cached descriptor; the next ``detect()`` recomputes it."""
    global _current
    with _detect_lock:
        _current = None


def get_package_name() -> str:
    """Extension lookup key for the current OS and architecture."""
    return detect().package_name()


def get_os_package_name() -> str:
    """Extension lookup key for the current OS."""
    return detect().os_package_name()


def is_windows() -> bool:
    return detect().flags.is_windows


def is_mac() -> bool:
    return detect().flags.is_mac


def is_linux() -> bool:
    return detect().flags.is_linux


def is_bsd() -> bool:
    return detect().flags.is_bsd


def is_wsl() -> bool:
    return detect().flags.is_wsl
