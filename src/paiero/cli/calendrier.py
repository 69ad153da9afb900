"""Commande CLI du calendrier des jours ouvrables.

Usage:
    paiero calendrier 2025
    paiero calendrier 2026 --details
"""

from __future__ import annotations

import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from paiero.calendrier.feries import dates_feriees, feries_par_mois, jours_feries
from paiero.calendrier.jours_ouvrables import (
    HEURES_JOURNEE_COMPLETE,
    HEURES_JOURNEE_REDUITE,
    jours_ouvrables_par_mois,
    sommaire_annuel,
)
from paiero.calendrier.paques import (
    ANNEE_MAX_VALIDE,
    ANNEE_MIN_VALIDE,
    annee_valide_paques,
)

console = Console()

NOMS_MOIS = (
    "Janvier", "Fevrier", "Mars", "Avril", "Mai", "Juin",
    "Juillet", "Aout", "Septembre", "Octobre", "Novembre", "Decembre",
)


def calendrier(
    annee: Optional[int] = typer.Argument(
        None, help="Annee civile (defaut: annee courante)",
    ),
    details: bool = typer.Option(
        False, "--details", "-d", help="Lister les jours feries de chaque mois",
    ),
) -> None:
    """Afficher les jours ouvrables par mois avec les feries roumains."""
    if annee is None:
        annee = datetime.date.today().year

    if not annee_valide_paques(annee):
        console.print(
            f"[yellow]Attention: Paques n'est garanti qu'entre "
            f"{ANNEE_MIN_VALIDE} et {ANNEE_MAX_VALIDE}[/yellow]"
        )

    feries = jours_feries(annee)
    mois = jours_ouvrables_par_mois(annee, dates_feriees(feries))
    sommaire = sommaire_annuel(mois)
    par_mois = feries_par_mois(feries)

    table = Table(
        title=f"Jours ouvrables {annee}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Mois", style="cyan")
    table.add_column("Jours calendaires", justify="right")
    table.add_column("Jours ouvrables", justify="right")
    table.add_column(f"Heures ({HEURES_JOURNEE_COMPLETE}h)", justify="right")
    table.add_column(f"Heures ({HEURES_JOURNEE_REDUITE}h)", justify="right")

    for m in mois:
        table.add_row(
            NOMS_MOIS[m.mois],
            str(m.total),
            str(m.ouvrables),
            str(m.ouvrables * HEURES_JOURNEE_COMPLETE),
            str(m.ouvrables * HEURES_JOURNEE_REDUITE),
        )

    table.add_section()
    table.add_row(
        "[bold]Total[/bold]",
        str(sommaire.total_jours),
        f"[bold]{sommaire.total_ouvrables}[/bold]",
        str(sommaire.heures_8h),
        str(sommaire.heures_7h),
    )
    console.print(table)

    if details:
        for numero, feries_mois in par_mois.items():
            if not feries_mois:
                continue
            console.print(f"\n[bold]Jours feries en {NOMS_MOIS[numero]}:[/bold]")
            for ferie in feries_mois:
                console.print(f"  {ferie.date}  {ferie.nom}")
