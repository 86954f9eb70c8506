"""
Command-line interface for x410ctl.

Provides commands for querying and changing USRP X410 power state over
its serial management console.
"""

import sys
from pathlib import Path

import click

from x410ctl import __version__
from x410ctl.core.config import Config, dump_config, load_config
from x410ctl.core.exceptions import X410Error
from x410ctl.core.logging import setup_logging
from x410ctl.power.x410 import X410Controller
from x410ctl.serial.discovery import discover_device, list_candidates


def _fail(error: X410Error) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _get_controller(ctx: click.Context) -> X410Controller:
    """Resolve the device address and build a controller for it."""
    config: Config = ctx.obj["config"]
    address = config.address or discover_device(config.serial)
    return X410Controller(address, config.serial, verbose=config.verbose)


@click.group()
@click.version_option(version=__version__, prog_name="x410ctl")
@click.option("-a", "--addr", help="Serial device address (skips discovery)")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "-c", "--config", "config_path", type=click.Path(exists=True, path_type=Path),
    help="Path to config file"
)
@click.pass_context
def main(
    ctx: click.Context,
    addr: str | None,
    verbose: bool,
    config_path: Path | None,
) -> None:
    """X410 Control - CLI for controlling a USRP X410 device."""
    ctx.ensure_object(dict)
    config = load_config(config_path)
    if addr:
        config.address = addr
    if verbose:
        config.verbose = True
    setup_logging(config)
    ctx.obj["config"] = config


@main.command("power-status")
@click.pass_context
def power_status_cmd(ctx: click.Context) -> None:
    """Check power status."""
    try:
        state = _get_controller(ctx).get_state()
    except X410Error as e:
        _fail(e)

    click.echo(state.label)


@main.command("start")
@click.pass_context
def start_cmd(ctx: click.Context) -> None:
    """Turn on device."""
    try:
        sent = _get_controller(ctx).ensure_on()
    except X410Error as e:
        _fail(e)

    if not sent:
        click.echo("Device is already on...")


@main.command("shutdown")
@click.pass_context
def shutdown_cmd(ctx: click.Context) -> None:
    """Turn off device."""
    try:
        sent = _get_controller(ctx).ensure_off()
    except X410Error as e:
        _fail(e)

    if not sent:
        click.echo("Device is already off...")


@main.command("ports")
@click.pass_context
def ports_cmd(ctx: click.Context) -> None:
    """List serial devices that match the discovery rule."""
    config: Config = ctx.obj["config"]
    serial = config.serial

    try:
        candidates = list_candidates(
            serial.by_id_dir, serial.device_prefix, serial.interface_marker
        )
    except X410Error as e:
        _fail(e)

    if config.verbose:
        click.echo(
            f"Matching {serial.by_id_dir}/{serial.device_prefix}*{serial.interface_marker}*"
        )

    if not candidates:
        click.echo(f"No matching devices in {serial.by_id_dir}/")
        return

    for path in candidates:
        click.echo(path)


@main.command("config")
@click.pass_context
def config_cmd(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config: Config = ctx.obj["config"]
    click.echo(dump_config(config), nl=False)


if __name__ == "__main__":
    main()
