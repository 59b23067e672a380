"""Host platform detection."""

from .detection import (
    OS,
    PACKAGE_PREFIX,
    ByteOrder,
    PlatformDescriptor,
    PlatformFlags,
    RawPlatformInfo,
    derive_flags,
    describe,
    detect,
    detect_byte_order,
    detect_from,
    reset_detection,
    get_os_package_name,
    get_package_name,
    is_bsd,
    is_linux,
    is_mac,
    is_windows,
    is_wsl,
    resolve_arch,
    resolve_os,
)
from .properties import (
    PropertyAccessError,
    PropertyStore,
    reset_system_properties,
    safe_get_property,
    system_properties,
)

__all__ = [
    # detection
    "OS",
    "PACKAGE_PREFIX",
    "ByteOrder",
    "PlatformDescriptor",
    "PlatformFlags",
    "RawPlatformInfo",
    "derive_flags",
    "describe",
    "detect",
    "detect_byte_order",
    "detect_from",
    "reset_detection",
    "get_os_package_name",
    "get_package_name",
    "is_bsd",
    "is_linux",
    "is_mac",
    "is_windows",
    "is_wsl",
    "resolve_arch",
    "resolve_os",
    # properties
    "PropertyAccessError",
    "PropertyStore",
    "reset_system_properties",
    "safe_get_property",
    "system_properties",
]
