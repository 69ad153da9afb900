"""Application CLI principale paiero."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

import paiero

app = typer.Typer(
    name="paiero",
    help="paiero - Calculateur de salaire roumain et jours ouvrables",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"paiero version {paiero.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Afficher la version de paiero",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """paiero - Salaire brut/net roumain et calendrier des jours ouvrables."""


# Import et enregistrement des sous-commandes
from paiero.cli.calendrier import calendrier  # noqa: E402
from paiero.cli.paie import app as paie_app  # noqa: E402

app.add_typer(paie_app, name="paie", help="Calcul de paie brut/net et fiche de paie")
app.command(name="calendrier", help="Jours ouvrables par mois")(calendrier)
