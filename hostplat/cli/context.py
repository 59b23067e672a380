from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from hostplat.core.config import CONFIG_ENV_VAR, load_config
from hostplat.core.errors import ErrorCode
from hostplat.core.result import Err
from hostplat.output.console import ConsoleProtocol, RichConsole
from hostplat.platform.detection import PlatformDescriptor, detect, detect_from
from hostplat.platform.properties import PropertyStore, system_properties


@dataclass(frozen=True, slots=True)
class CLIContext:
    properties: PropertyStore
    platform: PlatformDescriptor
    console: ConsoleProtocol
    err_console: ConsoleProtocol


def _config_path(option: Path | None) -> Path | None:
    if option is not None:
        return option
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return None


def build_context(config: Path | None = None) -> CLIContext:
    console = RichConsole()
    err_console = RichConsole(stderr=True)

    path = _config_path(config)
    if path is None:
        return CLIContext(
            properties=system_properties(),
            platform=detect(),
            console=console,
            err_console=err_console,
        )

    result = load_config(path)
    if isinstance(result, Err):
        err_console.error(result.error.message)
        code = ErrorCode.IO_ERROR if result.error.not_found else ErrorCode.ENV_ERROR
        raise typer.Exit(code=int(code))

    # Only the config describes the target; names it omits read as "unknown".
    properties = PropertyStore(result.value.properties, probes={})
    return CLIContext(
        properties=properties,
        platform=detect_from(properties),
        console=console,
        err_console=err_console,
    )
