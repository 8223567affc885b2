"""BizBuz CLI -- run the card service or export a vCard.

Thin wrapper around the server factory and the profile resolver using click.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import click
import uvicorn

from bizbuz.cards.vcard import generate_profile_vcard, vcard_filename
from bizbuz.errors import BizBuzError
from bizbuz.profiles import Profile, ProfileResolver, create_profile_client
from bizbuz.server.app import create_app
from bizbuz.server.config import Settings


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str) -> None:
    """Print an error message to stderr and exit 1."""
    click.echo(msg, err=True)
    raise SystemExit(1)


async def _resolve_profile(prof_base_url: str, timeout: float, identifier: str) -> Profile | None:
    """Resolve one profile with a short-lived client."""
    async with create_profile_client(prof_base_url, timeout=timeout) as client:
        return await ProfileResolver(client).resolve(identifier)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="bizbuz")
@click.option(
    "--prof-url",
    default=None,
    help="Profile service base URL (default: $PROF_BASE_URL).",
)
@click.pass_context
def cli(ctx: click.Context, prof_url: str | None) -> None:
    """BizBuz -- digital business cards from profile service records."""
    settings = Settings()
    if prof_url:
        settings.prof_base_url = prof_url.rstrip("/")
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# bizbuz serve
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--host", default=None, help="Bind address (default: $BIZBUZ_HOST).")
@click.option("--port", "-p", type=int, default=None, help="Listen port (default: $PORT).")
@click.option("--reload", is_flag=True, help="Reload on source changes (development).")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool) -> None:
    """Run the card service."""
    settings: Settings = ctx.obj["settings"]
    settings.host = host = host or settings.host
    settings.port = port = port or settings.port

    click.echo(f"BizBuz running on http://{host}:{port}")
    click.echo(f"Profile service: {settings.prof_base_url}")
    click.echo(f"Try: http://localhost:{port}/card/demo")

    if not reload:
        uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.log_level.lower())
        return

    # The reloader imports the factory in a child process that rebuilds Settings from the environment
    os.environ["PROF_BASE_URL"] = settings.prof_base_url
    os.environ["BIZBUZ_HOST"] = host
    os.environ["PORT"] = str(port)
    uvicorn.run(
        "bizbuz.server.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


# ---------------------------------------------------------------------------
# bizbuz vcard
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("identifier")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the vCard to this file ('-' for stdout; default: stdout).",
)
@click.option("--save", is_flag=True, help="Write to <name>.vcf in the current directory.")
@click.pass_context
def vcard(ctx: click.Context, identifier: str, output: Path | None, save: bool) -> None:
    """Export the vCard for IDENTIFIER."""
    settings: Settings = ctx.obj["settings"]

    try:
        profile = asyncio.run(
            _resolve_profile(settings.prof_base_url, settings.profile_timeout, identifier)
        )
    except BizBuzError as exc:
        _error(f"Error: {exc}")
        return

    if profile is None:
        _error(f"Profile not found: {identifier}")
        return

    content = generate_profile_vcard(profile)

    if save and output is None:
        output = Path(vcard_filename(profile))

    if output is None or str(output) == "-":
        click.echo(content, nl=False)
        return

    output.write_bytes(content.encode("utf-8"))
    click.echo(f"vCard saved: {output}")
