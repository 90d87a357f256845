"""CLI interface for the Suno CLI using Typer."""

import logging
from dataclasses import replace
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from suno_cli.exceptions import AuthError, CookieError, RequestError, StateError, SunoError
from suno_cli.models import AudioRecord
from suno_cli.session import SessionManager
from suno_cli.storage import Storage

app = typer.Typer(help="Generate songs and lyrics with Suno from your terminal")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    logger = logging.getLogger("suno_cli")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _handle_error(e: Exception) -> None:
    """Handle common exceptions with user-friendly messages."""
    if isinstance(e, AuthError):
        console.print(f"[red]{e.message}[/red]")
        console.print("Log in to suno.com again and update your cookie.")
    elif isinstance(e, RequestError):
        console.print(f"[red]Request failed: {e.message}[/red]")
    elif isinstance(e, (CookieError, StateError)):
        console.print(f"[red]{e.message}[/red]")
    else:
        console.print(f"[red]Error: {e}[/red]")
    raise typer.Exit(1)


def _print_records(records: list[AudioRecord], waited: bool = False) -> None:
    """Render clips as a table; exit 1 if a wait ended before every clip finished."""
    if not records:
        console.print("[yellow]No clips returned.[/yellow]")
    else:
        _print_table(records)

    if waited and (not records or not all(record.is_finished for record in records)):
        console.print("[yellow]Timed out before every clip finished; run 'suno get' later.[/yellow]")
        raise typer.Exit(1)


def _print_table(records: list[AudioRecord]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Duration")
    table.add_column("Audio")

    for record in records:
        status_color = "green" if record.is_finished else "yellow"
        table.add_row(
            record.id,
            record.title or "",
            f"[{status_color}]{record.status}[/{status_color}]",
            record.duration or "",
            record.audio_url or "",
        )
    console.print(table)


@app.command()
def generate(
    prompt: str = typer.Argument(..., help="Description of the song to generate"),
    instrumental: bool = typer.Option(False, "--instrumental", "-i", help="Generate without vocals"),
    wait: bool = typer.Option(False, "--wait", "-w", help="Wait until the audio is ready"),
) -> None:
    """Generate songs from a description."""
    session = SessionManager(Storage())

    try:
        client = session.get_client()
        console.print("Submitting generation job...")
        records = client.generate(prompt, make_instrumental=instrumental, wait_audio=wait)
        _print_records(records, waited=wait)
    except SunoError as e:
        _handle_error(e)
    finally:
        session.close()


@app.command()
def custom(
    prompt: str = typer.Argument(..., help="Full lyrics, with markers like [Verse] and [Chorus]"),
    tags: str = typer.Option(..., "--tags", "-t", help="Style tags, e.g. 'pop, upbeat'"),
    title: str = typer.Option(..., "--title", help="Song title"),
    instrumental: bool = typer.Option(False, "--instrumental", "-i", help="Generate without vocals"),
    wait: bool = typer.Option(False, "--wait", "-w", help="Wait until the audio is ready"),
) -> None:
    """Generate songs from your own lyrics, tags and title."""
    session = SessionManager(Storage())

    try:
        client = session.get_client()
        console.print(f"Submitting '[bold]{title}[/bold]'...")
        records = client.custom_generate(
            prompt, tags, title, make_instrumental=instrumental, wait_audio=wait
        )
        _print_records(records, waited=wait)
    except SunoError as e:
        _handle_error(e)
    finally:
        session.close()


@app.command()
def lyrics(
    prompt: str = typer.Argument(..., help="Description of the lyrics to write"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Seconds to wait for completion"),
) -> None:
    """Generate lyrics from a description."""
    session = SessionManager(Storage())

    try:
        client = session.get_client()
        console.print("Writing lyrics...")
        result = client.generate_lyrics(prompt, timeout=timeout)

        if not result.is_complete:
            console.print(f"[yellow]Lyrics job {result.id} is still '{result.status}'.[/yellow]")
            raise typer.Exit(1)

        console.print(f"\n[bold]{result.title}[/bold]\n")
        console.print(result.text, markup=False)
    except SunoError as e:
        _handle_error(e)
    finally:
        session.close()


@app.command()
def get(
    ids: Optional[List[str]] = typer.Argument(None, help="Clip ids (omit for recent clips)"),
) -> None:
    """Show status of clips."""
    session = SessionManager(Storage())

    try:
        client = session.get_client()
        _print_records(client.fetch(ids or None))
    except SunoError as e:
        _handle_error(e)
    finally:
        session.close()


@app.command()
def credits() -> None:
    """Show remaining credits."""
    session = SessionManager(Storage())

    try:
        client = session.get_client()
        info = client.get_billing_info()

        console.print(f"Credits left: [bold]{info.credits_left}[/bold]")
        if info.monthly_limit is not None:
            console.print(f"  Monthly usage: {info.monthly_usage or 0}/{info.monthly_limit}")
        if info.period:
            console.print(f"  Period: {info.period}")
    except SunoError as e:
        _handle_error(e)
    finally:
        session.close()


@app.command("config")
def configure(
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model used for generation"),
    poll_timeout: Optional[float] = typer.Option(None, "--poll-timeout", help="Seconds to wait for audio"),
    lyrics_timeout: Optional[float] = typer.Option(None, "--lyrics-timeout", help="Seconds to wait for lyrics"),
) -> None:
    """Show or update configuration."""
    storage = Storage()
    config = storage.get_config()

    changes = {
        key: value
        for key, value in (
            ("model", model),
            ("poll_timeout", poll_timeout),
            ("lyrics_timeout", lyrics_timeout),
        )
        if value is not None
    }
    if changes:
        config = replace(config, **changes)
        storage.save_config(config)
        console.print(f"[green]Saved:[/green] {storage.config_path}")

    console.print(f"  model: {config.model}")
    console.print(f"  poll_timeout: {config.poll_timeout:g}s")
    console.print(f"  lyrics_timeout: {config.lyrics_timeout:g}s")


if __name__ == "__main__":
    app()
