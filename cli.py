"""CLI commands for wedding invitation management."""

import asyncio
import json
from pathlib import Path
from uuid import UUID

import typer
import uvicorn

from src.config.database import upgrade_db
from src.config.settings import settings
from src.dependencies import get_invitation_service, get_rsvp_service
from src.errors import InvitationAppError, ValidationError
from src.invitations.dtos import InvitationDTO, SlugAvailabilityDTO
from src.rsvps.dtos import RSVPSummaryDTO
from src.rsvps.service import invitation_url

app = typer.Typer(help="CLI commands for wedding invitation management")

DEMO_CONFIG = {
    "template": "classic",
    "couple": {
        "bride": {"name": "Jane", "parents": "Mr. & Mrs. Doe"},
        "groom": {"name": "John", "parents": "Mr. & Mrs. Smith"},
    },
    "events": [
        {
            "name": "Holy Matrimony",
            "date": "2026-08-15",
            "time": "10:00",
            "venue": "St. Mary Chapel",
            "address": "1 Chapel Road",
        },
        {
            "name": "Reception",
            "date": "2026-08-15",
            "time": "18:00",
            "venue": "Garden Hall",
            "address": "2 Garden Lane",
        },
    ],
    "language": "en",
}


def _fail(exc: InvitationAppError) -> None:
    typer.secho(exc.message, fg=typer.colors.RED)
    if isinstance(exc, ValidationError):
        for error in exc.errors:
            typer.secho(f"  {error.field}: {error.message}", fg=typer.colors.RED)
    raise typer.Exit(1)


async def _check_slug(slug: str) -> SlugAvailabilityDTO:
    return await get_invitation_service().check_slug(slug)


@app.command()
def check_slug(slug: str = typer.Argument(..., help="Slug to check")):
    """Check whether a slug is well formed and still free."""
    result = asyncio.run(_check_slug(slug))

    if result.available:
        typer.secho(f"'{slug}' is available", fg=typer.colors.GREEN)
    else:
        typer.secho(f"'{slug}' is not available: {result.error}", fg=typer.colors.YELLOW)
        raise typer.Exit(1)


@app.command()
def suggest_slug(
    bride: str = typer.Argument(..., help="Bride's name"),
    groom: str = typer.Argument(..., help="Groom's name"),
):
    """Suggest a free slug built from the couple's names."""
    slug = asyncio.run(get_invitation_service().suggest_slug(bride, groom))
    typer.secho(slug, fg=typer.colors.CYAN)


async def _create_demo(
    owner_id: str, slug: str, config: dict, owner_email: str | None
) -> InvitationDTO:
    service = get_invitation_service()
    invitation = await service.create(
        owner_id=owner_id, slug=slug, config=config, owner_email=owner_email
    )
    return await service.publish(invitation.id, owner_id)


@app.command()
def create_demo(
    owner_id: str = typer.Argument(..., help="Owner identity to create the invitation for"),
    slug: str = typer.Argument(..., help="Public slug of the invitation"),
    config_file: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="JSON configuration to use instead of the built-in classic demo",
    ),
    owner_email: str = typer.Option(None, "--owner-email", help="Address notified of new RSVPs"),
):
    """Create and publish a demo invitation."""
    config = json.loads(config_file.read_text()) if config_file else DEMO_CONFIG
    try:
        invitation = asyncio.run(_create_demo(owner_id, slug, config, owner_email))
    except InvitationAppError as e:
        _fail(e)

    typer.secho("Invitation created and published!", fg=typer.colors.GREEN)
    typer.secho(f"  ID: {invitation.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Template: {invitation.template}", fg=typer.colors.BLUE)
    typer.secho(f"  URL: {invitation_url(invitation)}", fg=typer.colors.CYAN)


async def _rsvp_summary(invitation_id: UUID) -> RSVPSummaryDTO:
    return await get_rsvp_service().summary(invitation_id)


@app.command()
def rsvp_summary(invitation_id: str = typer.Argument(..., help="Invitation UUID")):
    """Show the RSVP counts for an invitation."""
    try:
        parsed_id = UUID(invitation_id)
    except ValueError:
        typer.secho(f"Not a valid invitation id: {invitation_id}", fg=typer.colors.RED)
        raise typer.Exit(1)
    summary = asyncio.run(_rsvp_summary(parsed_id))

    typer.secho("RSVP summary", fg=typer.colors.GREEN)
    typer.secho(f"  Responses: {summary.total_responses}", fg=typer.colors.BLUE)
    typer.secho(f"  Attending: {summary.attending}", fg=typer.colors.GREEN)
    typer.secho(f"  Declined: {summary.declined}", fg=typer.colors.YELLOW)
    typer.secho(f"  Total guests: {summary.total_guests}", fg=typer.colors.MAGENTA)


@app.command()
def migrate():
    """Upgrade the database to the latest migration."""
    asyncio.run(upgrade_db())
    typer.secho("Database is up to date", fg=typer.colors.GREEN)


@app.command()
def serve(reload: bool = typer.Option(False, "--reload", help="Reload on code changes")):
    """Run the API server."""
    uvicorn.run("src.main:app", host=settings.app_host, port=settings.app_port, reload=reload)


if __name__ == "__main__":
    app()
