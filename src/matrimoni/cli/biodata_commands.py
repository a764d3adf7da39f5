from typing import Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from ..domain.errors import MatrimoniError, ValidationFailedError
from ..domain.models import PROFILE_FIELDS, Profile
from ..ui.render import FIELD_LABELS, render_errors, render_profile, render_profiles, toast
from .context import get_biodata_service

app = typer.Typer()
console = Console()


def _collect_form(values: Dict[str, Optional[str]], interactive: bool, current: Optional[Profile] = None) -> Dict[str, str]:
    """fill in the form from options, prompting for anything not given."""
    form = {}
    for field in PROFILE_FIELDS:
        value = values.get(field)
        default = getattr(current, field) if current else ""
        if value is None and interactive:
            value = Prompt.ask(FIELD_LABELS[field], default=default, show_default=bool(default))
        form[field] = default if value is None else value
    return form


def _save(ctx: typer.Context, form: Dict[str, str], profile_id: Optional[str] = None):
    service = get_biodata_service(ctx)
    try:
        profile, created = service.save(form, profile_id)
    except ValidationFailedError as e:
        render_errors(console, e.messages)
        raise typer.Exit(1)
    except MatrimoniError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    toast(console, "Profile added." if created else "Profile updated.")
    console.print(f"[dim]id: {profile.id}[/dim]")


@app.command("add")
def add_profile(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, help="Full name"),
    gender: Optional[str] = typer.Option(None),
    dob: Optional[str] = typer.Option(None, help="Date of birth (YYYY-MM-DD)"),
    contact: Optional[str] = typer.Option(None, help="10-digit phone number"),
    email: Optional[str] = typer.Option(None),
    height: Optional[str] = typer.Option(None),
    education: Optional[str] = typer.Option(None),
    occupation: Optional[str] = typer.Option(None),
    location: Optional[str] = typer.Option(None),
    religion: Optional[str] = typer.Option(None),
    interactive: bool = typer.Option(True, help="Prompt for fields not given as options"),
):
    """add a new biodata owned by the logged-in user."""
    values = dict(
        name=name, gender=gender, dob=dob, contact=contact, email=email, height=height,
        education=education, occupation=occupation, location=location, religion=religion,
    )
    _save(ctx, _collect_form(values, interactive))


@app.command("edit")
def edit_profile(
    ctx: typer.Context,
    profile_id: str,
    name: Optional[str] = typer.Option(None),
    gender: Optional[str] = typer.Option(None),
    dob: Optional[str] = typer.Option(None),
    contact: Optional[str] = typer.Option(None),
    email: Optional[str] = typer.Option(None),
    height: Optional[str] = typer.Option(None),
    education: Optional[str] = typer.Option(None),
    occupation: Optional[str] = typer.Option(None),
    location: Optional[str] = typer.Option(None),
    religion: Optional[str] = typer.Option(None),
    interactive: bool = typer.Option(True, help="Prompt for each field, defaulting to the current value"),
):
    """
    edit one of your biodata.

    fields not given as options keep their current values.
    """
    service = get_biodata_service(ctx)
    try:
        current = service.editable(profile_id)
    except MatrimoniError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    values = dict(
        name=name, gender=gender, dob=dob, contact=contact, email=email, height=height,
        education=education, occupation=occupation, location=location, religion=religion,
    )
    _save(ctx, _collect_form(values, interactive, current), profile_id)


@app.command("delete")
def delete_profile(
    ctx: typer.Context,
    profile_id: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """delete one of your biodata."""
    if not yes and not Confirm.ask("Delete this profile?"):
        console.print("[dim]Delete cancelled.[/dim]")
        return

    service = get_biodata_service(ctx)
    try:
        service.delete(profile_id)
    except MatrimoniError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    toast(console, "Profile deleted.")


@app.command("list")
def list_profiles(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Match name, location or education"),
    mine: bool = typer.Option(False, "--mine", help="Only show profiles you posted"),
):
    """list saved biodata."""
    service = get_biodata_service(ctx)
    render_profiles(console, service.browse(search, mine=mine))


@app.command("show")
def show_profile(ctx: typer.Context, profile_id: str):
    """show every field of a biodata."""
    service = get_biodata_service(ctx)
    try:
        profile = service.view(profile_id)
    except MatrimoniError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    owner = service.accounts.find_by_email(profile.owner_email)
    render_profile(console, profile, posted_by=owner.name if owner else profile.owner_email)


if __name__ == "__main__":
    app()
