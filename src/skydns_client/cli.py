"""Command-line interface for a SkyDNS directory.

Connection settings come from global options or their SKYDNS_* environment
variables. Results are printed as JSON on stdout; directory errors are
printed as ``code: message`` on stderr with exit status 1, transport and
decode failures with exit status 2.

Example:
    >>> # From terminal:
    >>> # export SKYDNS_BASE_URL=http://10.0.0.1:8080 SKYDNS_SECRET=s3cr3t
    >>> # skydns add 1234 --name web --host 10.0.0.5 --port 80 --ttl 30
    >>> # skydns get 1234
    >>> # skydns update 1234 60
    >>> # skydns regions --dns
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Optional

import httpx
import typer
from pydantic import ValidationError

from skydns_client import __version__
from skydns_client.client import SkyDNSClient
from skydns_client.config import ENV_BASE_URL, ENV_DNS_PORT, ENV_DOMAIN, ENV_SECRET
from skydns_client.errors import SkyDNSError
from skydns_client.models.constants import DEFAULT_DOMAIN, MAX_PORT, MAX_TTL
from skydns_client.models.entities import Callback, Service
from skydns_client.observability import configure_logging

app = typer.Typer(help="SkyDNS directory client.")


@dataclass(frozen=True)
class ConnectionOptions:
    """Global options shared by every command."""

    base: str
    secret: Optional[str]
    domain: str
    dns_port: int


def _open_client(options: ConnectionOptions) -> SkyDNSClient:
    return SkyDNSClient(
        options.base,
        secret=options.secret,
        domain=options.domain,
        dns_port=options.dns_port,
    )


@contextmanager
def _client(ctx: typer.Context) -> Iterator[SkyDNSClient]:
    """Open a client for one command and map failures to exit codes."""
    try:
        with _open_client(ctx.obj) as client:
            yield client
    except SkyDNSError as e:
        typer.echo(f"{e.code}: {e.message}", err=True)
        raise typer.Exit(1) from e
    except (httpx.HTTPError, OSError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2) from e


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, sort_keys=True))


def _dump(record: Service | Callback) -> dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True, exclude_none=True)


def _version_callback(value: bool) -> None:
    """Print the version and exit when requested."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    help="Show skydns-client version and exit.",
    callback=_version_callback,
    is_eager=True,
)


@app.callback()
def cli(
    ctx: typer.Context,
    base: str = typer.Option(
        "", "--base", "-b", envvar=ENV_BASE_URL, help="Control-plane base URL."
    ),
    secret: Optional[str] = typer.Option(
        None, "--secret", "-s", envvar=ENV_SECRET, help="Shared secret for Authorization."
    ),
    domain: str = typer.Option(
        DEFAULT_DOMAIN, "--domain", "-d", envvar=ENV_DOMAIN, help="Directory domain."
    ),
    dns_port: int = typer.Option(0, "--dns-port", envvar=ENV_DNS_PORT, help="DNS port (0 = 53)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and replies."),
    version: bool = VERSION_OPTION,
) -> None:
    """SkyDNS directory client entrypoint."""
    configure_logging(log_level="DEBUG" if verbose else None, force=True)
    ctx.obj = ConnectionOptions(base=base, secret=secret, domain=domain, dns_port=dns_port)


@app.command("add")
def add(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="UUID to register the service under."),
    name: str = typer.Option(..., "--name", help="Service name."),
    host: str = typer.Option(..., "--host", help="Service host."),
    port: int = typer.Option(..., "--port", min=0, max=MAX_PORT, help="Service port."),
    ttl: int = typer.Option(..., "--ttl", min=0, max=MAX_TTL, help="Time-to-live in seconds."),
    service_version: str = typer.Option("", "--service-version", help="Service version."),
    environment: str = typer.Option("", "--environment", help="Deployment environment."),
    region: str = typer.Option("", "--region", help="Region."),
) -> None:
    """Register a service."""
    service = Service(
        name=name,
        version=service_version,
        environment=environment,
        region=region,
        host=host,
        port=port,
        ttl=ttl,
    )
    with _client(ctx) as client:
        client.add(uuid, service)
    typer.echo(f"Registered service: {uuid}")


@app.command("get")
def get(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="UUID of the service."),
) -> None:
    """Show one service."""
    with _client(ctx) as client:
        service = client.get(uuid)
    _echo_json(_dump(service))


@app.command("delete")
def delete(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="UUID of the service."),
) -> None:
    """Remove a service."""
    with _client(ctx) as client:
        client.delete(uuid)
    typer.echo(f"Deleted service: {uuid}")


@app.command("update")
def update(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="UUID of the service."),
    ttl: int = typer.Argument(..., min=0, max=MAX_TTL, help="New time-to-live in seconds."),
) -> None:
    """Refresh the time-to-live of a service."""
    with _client(ctx) as client:
        client.update(uuid, ttl)
    typer.echo(f"Updated service: {uuid} (ttl {ttl})")


@app.command("list")
def list_services(ctx: typer.Context) -> None:
    """List every registered service."""
    with _client(ctx) as client:
        services = client.get_all_services()
    _echo_json([_dump(s) for s in services])


@app.command("regions")
def regions(
    ctx: typer.Context,
    dns: bool = typer.Option(False, "--dns", help="Query the DNS data plane instead of HTTP."),
) -> None:
    """Show the number of services per region."""
    with _client(ctx) as client:
        counts = client.get_regions_dns() if dns else client.get_regions()
    _echo_json(counts)


@app.command("environments")
def environments(ctx: typer.Context) -> None:
    """Show the number of services per environment."""
    with _client(ctx) as client:
        counts = client.get_environments()
    _echo_json(counts)


@app.command("callback")
def callback(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="UUID of the service to watch."),
    host: str = typer.Option(..., "--host", help="Host to notify."),
    port: int = typer.Option(..., "--port", min=0, max=MAX_PORT, help="Port to notify."),
    reply: str = typer.Option("", "--reply", help="Reply payload sent on notification."),
    name: str = typer.Option("", "--name", help="Service name filter."),
    service_version: str = typer.Option("", "--service-version", help="Service version filter."),
    environment: str = typer.Option("", "--environment", help="Environment filter."),
    region: str = typer.Option("", "--region", help="Region filter."),
) -> None:
    """Attach a callback to a service."""
    cb = Callback(
        name=name,
        version=service_version,
        environment=environment,
        region=region,
        host=host,
        reply=reply,
        port=port,
    )
    with _client(ctx) as client:
        client.add_callback(uuid, cb)
    typer.echo(f"Registered callback on service: {uuid}")


def main() -> None:
    """Run the SkyDNS CLI."""
    app()


if __name__ == "__main__":
    main()
