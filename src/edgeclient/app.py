"""Typer application and CLI entry point for edgeclient.

The command line is a thin shell over the resource clients: each command
resolves a :class:`~edgeclient.models.ClientConfig`, builds one client,
calls one method and prints the response through
:mod:`edgeclient.output`. Any :class:`~edgeclient.exceptions.EdgeClientError`
is printed to stderr and turned into the error's exit code.

Example::

    edgeclient --base-url http://localhost:59860 transmission by-status FAILED --limit 5
    edgeclient --json device-profile resource Thermostat Temperature
"""

from __future__ import annotations

import logging
import signal
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, TypeVar

import typer

from edgeclient import __version__
from edgeclient.clients import (
    CommonClient,
    DeviceProfileClient,
    EventClient,
    ResourceClient,
    TransmissionClient,
)
from edgeclient.config import load_config
from edgeclient.exceptions import EdgeClientError
from edgeclient.models import to_wire
from edgeclient.output import (
    OutputFormat,
    OutputManager,
    debug,
    error,
    format_response,
    info,
    set_output,
    warning,
)
from edgeclient.routes import DEFAULT_LIMIT, DEFAULT_OFFSET

C = TypeVar("C", bound=ResourceClient)

app = typer.Typer(
    name="edgeclient",
    help="Query the IoT platform's core and support services.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)
transmission_app = typer.Typer(no_args_is_help=True)
profile_app = typer.Typer(no_args_is_help=True)
event_app = typer.Typer(no_args_is_help=True)

app.add_typer(transmission_app, name="transmission", help="Notification transmissions.")
app.add_typer(profile_app, name="device-profile", help="Device profiles and resources.")
app.add_typer(event_app, name="event", help="Core-data events.")

OffsetOption = typer.Option(DEFAULT_OFFSET, "--offset", help="Number of items to skip.")
LimitOption = typer.Option(DEFAULT_LIMIT, "--limit", help="Maximum items to return (-1 for all).")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"edgeclient {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", "-u", help="Service root URL."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a JSON config file."
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Install the output manager and stash connection options in ``ctx.obj``."""
    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))

    if verbose:
        logging.basicConfig(
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
        logging.getLogger("edgeclient").setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url
    ctx.obj["config_path"] = config_path


@contextmanager
def _client(ctx: typer.Context, client_cls: type[C]) -> Iterator[C]:
    """Yield a configured client, mapping EdgeClientError to a clean exit."""
    try:
        config = load_config(ctx.obj.get("config_path"), base_url=ctx.obj.get("base_url"))
        debug(f"Using {config.base_url} (timeout {config.timeout}s)")
        if not config.verify_ssl:
            warning("TLS certificate verification is disabled")
        with client_cls.from_config(config) as client:
            yield client
    except EdgeClientError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code)


def _emit(result: Any) -> None:
    if isinstance(result, list):
        format_response([to_wire(item) for item in result])
    else:
        format_response(to_wire(result))


# ------------------------------------------------------------------ #
# Common
# ------------------------------------------------------------------ #


@app.command("ping")
def ping_command(ctx: typer.Context) -> None:
    """Check that the service is reachable."""
    with _client(ctx, CommonClient) as client:
        _emit(client.ping())


@app.command("version")
def version_command(ctx: typer.Context) -> None:
    """Show the service's version."""
    with _client(ctx, CommonClient) as client:
        _emit(client.version())


# ------------------------------------------------------------------ #
# Transmissions
# ------------------------------------------------------------------ #


@transmission_app.command("get")
def transmission_get(
    ctx: typer.Context,
    id: str = typer.Argument(help="Transmission id."),
) -> None:
    """Show one transmission."""
    with _client(ctx, TransmissionClient) as client:
        _emit(client.transmission_by_id(id))


@transmission_app.command("list")
def transmission_list(
    ctx: typer.Context,
    offset: int = OffsetOption,
    limit: int = LimitOption,
) -> None:
    """List transmissions."""
    with _client(ctx, TransmissionClient) as client:
        _emit(client.all_transmissions(offset, limit))


@transmission_app.command("by-status")
def transmission_by_status(
    ctx: typer.Context,
    status: str = typer.Argument(help="SENT, FAILED, ACKNOWLEDGED, RESENDING, ..."),
    offset: int = OffsetOption,
    limit: int = LimitOption,
) -> None:
    """List transmissions in a given status."""
    with _client(ctx, TransmissionClient) as client:
        _emit(client.transmissions_by_status(status, offset, limit))


@transmission_app.command("by-subscription")
def transmission_by_subscription(
    ctx: typer.Context,
    name: str = typer.Argument(help="Subscription name."),
    offset: int = OffsetOption,
    limit: int = LimitOption,
) -> None:
    """List transmissions sent for a subscription."""
    with _client(ctx, TransmissionClient) as client:
        _emit(client.transmissions_by_subscription_name(name, offset, limit))


@transmission_app.command("purge")
def transmission_purge(
    ctx: typer.Context,
    age: int = typer.Argument(help="Minimum age in milliseconds."),
) -> None:
    """Delete processed transmissions older than AGE."""
    with _client(ctx, TransmissionClient) as client:
        _emit(client.delete_processed_transmissions_by_age(age))
    info(f"Purged processed transmissions older than {age} ms")


# ------------------------------------------------------------------ #
# Device profiles
# ------------------------------------------------------------------ #


@profile_app.command("get")
def profile_get(
    ctx: typer.Context,
    name: str = typer.Argument(help="Device profile name."),
) -> None:
    """Show one device profile."""
    with _client(ctx, DeviceProfileClient) as client:
        _emit(client.device_profile_by_name(name))


@profile_app.command("list")
def profile_list(
    ctx: typer.Context,
    label: Optional[list[str]] = typer.Option(
        None, "--label", "-l", help="Only profiles with this label (repeatable)."
    ),
    offset: int = OffsetOption,
    limit: int = LimitOption,
) -> None:
    """List device profiles."""
    with _client(ctx, DeviceProfileClient) as client:
        _emit(client.all_device_profiles(label, offset, limit))


@profile_app.command("resource")
def profile_resource(
    ctx: typer.Context,
    profile_name: str = typer.Argument(help="Device profile name."),
    resource_name: str = typer.Argument(help="Device resource name."),
) -> None:
    """Show one device resource of a profile."""
    with _client(ctx, DeviceProfileClient) as client:
        _emit(client.device_resource_by_profile_name_and_resource_name(profile_name, resource_name))


@profile_app.command("upload")
def profile_upload(
    ctx: typer.Context,
    file: Path = typer.Argument(help="Device profile YAML file."),
    update: bool = typer.Option(
        False, "--update", help="Replace the existing profile instead of adding."
    ),
) -> None:
    """Create (or with --update, replace) a device profile from YAML."""
    with _client(ctx, DeviceProfileClient) as client:
        if update:
            _emit(client.update_by_yaml(file))
        else:
            _emit(client.add_by_yaml(file))
    info(f"Uploaded device profile from {file}")


# ------------------------------------------------------------------ #
# Events
# ------------------------------------------------------------------ #


@event_app.command("list")
def event_list(
    ctx: typer.Context,
    device: Optional[str] = typer.Option(None, "--device", "-d", help="Device name."),
    offset: int = OffsetOption,
    limit: int = LimitOption,
) -> None:
    """List events, optionally of one device."""
    with _client(ctx, EventClient) as client:
        if device:
            _emit(client.events_by_device_name(device, offset, limit))
        else:
            _emit(client.all_events(offset, limit))


@event_app.command("count")
def event_count(
    ctx: typer.Context,
    device: Optional[str] = typer.Option(None, "--device", "-d", help="Device name."),
) -> None:
    """Count events, optionally of one device."""
    with _client(ctx, EventClient) as client:
        if device:
            _emit(client.event_count_by_device_name(device))
        else:
            _emit(client.event_count())


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """Console-script entry point."""
    _setup_signal_handlers()
    app()
