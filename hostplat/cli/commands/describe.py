"""Commands printing the platform descriptor."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from hostplat.cli.context import CLIContext, build_context
from hostplat.platform.detection import PlatformDescriptor

_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="TOML file supplying host properties (default: $HOSTPLAT_CONFIG)",
)


def _rows(descriptor: PlatformDescriptor) -> list[tuple[str, str]]:
    rows: list[tuple[str, str]] = []
    for key, value in descriptor.as_dict().items():
        if isinstance(value, bool):
            if value:
                rows.append((key, "yes"))
            continue
        rows.append((key, str(value)))
    return rows


def _warn_unresolved(ctx: CLIContext) -> None:
    if ctx.platform.arch == "universal":
        ctx.err_console.warning(
            "architecture reported as 'universal' and pointer width is unknown; left unresolved"
        )


def show(
    json_output: bool = typer.Option(False, "--json", help="Print as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Also print raw host properties"),
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Show the normalized platform description."""
    ctx = build_context(config)
    _warn_unresolved(ctx)

    if json_output:
        data = ctx.platform.as_dict()
        data["package_name"] = ctx.platform.package_name()
        data["os_package_name"] = ctx.platform.os_package_name()
        if raw:
            data["properties"] = ctx.properties.snapshot()
        typer.echo(json.dumps(data, indent=2))
        return

    ctx.console.table("platform", _rows(ctx.platform))
    if raw:
        snapshot = ctx.properties.snapshot()
        ctx.console.table(
            "properties",
            [(name, "-" if value is None else value) for name, value in snapshot.items()],
        )


def name(config: Path | None = _CONFIG_OPTION) -> None:
    """Print the "{arch}-{os}" identifier."""
    ctx = build_context(config)
    _warn_unresolved(ctx)
    typer.echo(ctx.platform.name)


def package(
    os_only: bool = typer.Option(False, "--os-only", help="Omit the architecture"),
    config: Path | None = _CONFIG_OPTION,
) -> None:
    """Print the extension package key for this platform."""
    ctx = build_context(config)
    if os_only:
        typer.echo(ctx.platform.os_package_name())
    else:
        typer.echo(ctx.platform.package_name())
