"""terminal rendering for accounts and biodata listings."""

from typing import Iterable, List, Optional
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..domain.models import PROFILE_FIELDS, Profile, ProfileListing, User

FIELD_LABELS = {
    "name": "Name",
    "gender": "Gender",
    "dob": "Date of birth",
    "contact": "Contact",
    "email": "Email",
    "height": "Height",
    "education": "Education",
    "occupation": "Occupation",
    "location": "Location",
    "religion": "Religion",
}


def greeting(user: Optional[User]) -> str:
    return f"Hi, {escape(user.name)}" if user else "Hi"


def toast(console: Console, message: str):
    """print a short success message."""
    console.print(f"[green]✓[/green] {message}")


def render_errors(console: Console, messages: Iterable[str]):
    for message in messages:
        console.print(f"[red]Error:[/red] {escape(message)}")


def render_profiles(console: Console, listings: List[ProfileListing]):
    """render a table of profiles, or the empty state."""
    if not listings:
        console.print("[dim]No profiles saved yet.[/dim]")
        return

    table = Table(title="Profiles")
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Name", style="bold cyan")
    table.add_column("Occupation • Location", style="white")
    table.add_column("Email", style="white")
    table.add_column("Posted by", style="green")

    for listing in listings:
        p = listing.profile
        posted_by = "you" if listing.is_owner else listing.posted_by
        table.add_row(
            p.id,
            escape(p.name),
            escape(f"{p.occupation} • {p.location}"),
            escape(p.email),
            escape(posted_by),
        )

    console.print(table)


def render_profile(console: Console, profile: Profile, posted_by: Optional[str] = None):
    """render every field of one profile."""
    grid = Table.grid(expand=True)
    grid.add_column(style="bold cyan", justify="right")
    grid.add_column(style="white")

    for field in PROFILE_FIELDS:
        grid.add_row(f"{FIELD_LABELS[field]}:", escape(getattr(profile, field) or "-"))
    if posted_by:
        grid.add_row("Posted by:", escape(posted_by))

    console.print(Panel(grid, title=f"Biodata: {escape(profile.name)}", subtitle=profile.id, border_style="cyan"))
