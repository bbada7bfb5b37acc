# -*- coding: utf-8 -*-
"""Maintenance commands for the catalog and the local session flag."""

from __future__ import annotations

from pathlib import Path

import typer

from sneakerheart.config import load_config
from sneakerheart.core.catalog import CatalogError, load_catalog
from sneakerheart.core.session_store import SessionStore

app = typer.Typer(help="Sneaker Heart maintenance commands")


def _store(settings_path: Path | None) -> SessionStore:
    settings = load_config(settings_path)
    return SessionStore(settings["session"]["flag_file"])


@app.command()
def check_catalog(
    data_file: Path = typer.Argument(None, help="Catalog JSON (default: packaged catalog)"),
    expected_count: int = typer.Option(4, help="Required number of sneakers"),
) -> None:
    """Validate a catalog file and list its sneakers."""
    try:
        sneakers = load_catalog(data_file, expected_count=expected_count)
    except CatalogError as exc:
        typer.echo(f"Catalog invalid: {exc}", err=True)
        raise typer.Exit(code=1)

    for index, sneaker in enumerate(sneakers):
        color = sneaker.info_box_bg or "-"
        typer.echo(f"{index}: {sneaker.name} | {sneaker.purchase_type} | {sneaker.availability_type} | "
                   f"{len(sneaker.images)} image(s) | color {color}")
    typer.echo(f"\nCatalog OK: {len(sneakers)} sneakers")


@app.command()
def show_session(
    settings_path: Path = typer.Option(None, "--settings", help="Path to settings.json"),
) -> None:
    """Print the stored email gate flag."""
    store = _store(settings_path)
    session = store.read()
    if session is None:
        typer.echo(f"No session flag in {store.path}")
        return
    typer.echo(f"hasSubmittedEmail={session.has_submitted_email} at {session.submission_timestamp or '-'}")


@app.command()
def reset_session(
    settings_path: Path = typer.Option(None, "--settings", help="Path to settings.json"),
) -> None:
    """Forget the email gate flag so the form shows on next start."""
    store = _store(settings_path)
    if store.clear():
        typer.echo(f"Session flag removed from {store.path}")
    else:
        typer.echo("Nothing to reset")


if __name__ == "__main__":
    app()
