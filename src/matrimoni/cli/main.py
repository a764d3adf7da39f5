import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Confirm

from ..config import get_data_dir, set_data_dir
from ..domain.errors import MatrimoniError
from ..storage.store import KeyValueStore
from ..ui.render import greeting, toast
from .biodata_commands import app as biodata_app
from .context import get_account_service, get_biodata_service, get_store

app = typer.Typer()
console = Console()

# add biodata subcommand
app.add_typer(biodata_app, name="biodata", help="Manage matrimonial biodata listings")


@app.callback()
def main_callback(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None, "--data-dir", envvar="MATRIMONI_DATA_DIR", help="Directory holding stored data"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """register, log in and manage matrimonial biodata stored on this machine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    ctx.obj = KeyValueStore(data_dir or get_data_dir())


@app.command()
def register(
    ctx: typer.Context,
    name: str = typer.Option(..., prompt=True),
    email: str = typer.Option(..., prompt=True),
    password: str = typer.Option(..., prompt=True, hide_input=True),
):
    """create an account and log in to it."""
    service = get_account_service(ctx)
    try:
        user = service.register(name, email, password)
    except MatrimoniError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    toast(console, f"Registered {user.email}")
    console.print(greeting(user))


@app.command()
def login(
    ctx: typer.Context,
    email: str = typer.Option(..., prompt=True),
    password: str = typer.Option(..., prompt=True, hide_input=True),
):
    """log in with email and password."""
    service = get_account_service(ctx)
    try:
        user = service.login(email, password)
    except MatrimoniError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(greeting(user))


@app.command()
def logout(ctx: typer.Context):
    """end the current session."""
    get_account_service(ctx).logout()
    toast(console, "Logged out.")


@app.command()
def whoami(ctx: typer.Context):
    """show the logged-in user."""
    user = get_account_service(ctx).whoami()
    if user is None:
        console.print("[yellow]Not logged in.[/yellow]")
        console.print("\nLog in with: [cyan]matrimoni login[/cyan]")
        raise typer.Exit(1)

    owned = get_biodata_service(ctx).profiles.owned_by(user.email)
    console.print(Panel.fit(
        f"[bold]{greeting(user)}[/bold]\n"
        f"Email: {escape(user.email)}\n"
        f"Profiles posted: {len(owned)}",
        border_style="green"
    ))


@app.command()
def storage(
    ctx: typer.Context,
    action: str = typer.Argument(..., help="Action to perform: 'path' or 'reset'"),
    set_dir: Optional[Path] = typer.Option(None, "--set", help="With 'path': remember a new data directory"),
    yes: bool = typer.Option(False, "--yes", "-y", help="With 'reset': skip the confirmation prompt"),
):
    """
    inspect or reset local storage.

    actions:
      path  - show (or with --set, change) the data directory
      reset - delete all users, the session and every biodata
    """
    store = get_store(ctx)

    if action == "path":
        if set_dir is not None:
            try:
                set_data_dir(set_dir)
            except RuntimeError as e:
                console.print(f"[red]Error:[/red] {escape(str(e))}")
                raise typer.Exit(code=1)
            toast(console, f"Data directory set to {escape(str(set_dir))}")
            return
        console.print(escape(str(store.root)))

    elif action == "reset":
        if not yes and not Confirm.ask("[yellow]Delete all stored users and biodata?[/yellow]"):
            console.print("[dim]Reset cancelled.[/dim]")
            return
        store.clear()
        toast(console, "Storage cleared.")

    else:
        console.print(f"[red]Invalid action '{escape(action)}'. Use 'path' or 'reset'.[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
