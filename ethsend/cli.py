"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import typer

from ethsend.api import Client
from ethsend.core.errors import EthsendError, UsageError
from ethsend.core.settings import load_settings
from ethsend.render import describe_request, render_event
from ethsend.transports.inet import InetTransport

USAGE = (
    "Usage:  ethsend <ip address> <port> <tcp|udp|udp-broadcast|wol> [--ignore-response] <payload>\n"
    "        Use \\x## to represent a hex byte"
)

app = typer.Typer(
    help="Send a single raw TCP/UDP/broadcast/Wake-on-LAN message and print any response",
    add_completion=False,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
def send(
    args: list[str] | None = typer.Argument(
        None,
        metavar="IP PORT PROTOCOL [--ignore-response] PAYLOAD...",
        help="Target address, port, tcp|udp|udp-broadcast|wol, then the payload words",
        show_default=False,
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.001, help="Stop waiting for responses after this many seconds"
    ),
    buffer_size: int | None = typer.Option(
        None, "--buffer-size", min=1, max=65535, help="Receive buffer size in bytes"
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to a YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """Send one message, then print responses until the remote closes.

    Payload words are joined with single spaces; \\x## inserts a raw byte.
    For wol the payload must decode to a 6-byte hardware address.
    """
    try:
        settings = load_settings(config)
        _configure_logging("DEBUG" if verbose else settings.log_level)
        if timeout is not None:
            settings = replace(settings, receive_timeout_s=timeout)
        if buffer_size is not None:
            settings = replace(settings, receive_buffer_size=buffer_size)

        client = Client(transport=InetTransport(), settings=settings)
        request = client.resolve_argv(args or [])

        for line in describe_request(request):
            typer.echo(line)
        for event in client.send(request):
            typer.echo(render_event(event, suppress_response=request.suppress_response))
    except UsageError:
        typer.echo(USAGE)
        raise typer.Exit(code=1) from None
    except EthsendError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


def run() -> None:
    app()


if __name__ == "__main__":
    run()
