"""Minimal Result type for failures the caller is expected to handle.

Config loading returns ``Ok(config)`` or ``Err(ConfigError)`` instead of
raising, so the CLI can map each failure to an exit code in one place:

    result = load_config(path)
    if isinstance(result, Err):
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result."""

    error: E


Result: TypeAlias = Union[Ok[T], Err[E]]
