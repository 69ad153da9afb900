"""Commandes CLI pour le calcul de paie.

Usage:
    paiero paie brut 7000 --personnes 1
    paiero paie net 4095 --annee 2025
    paiero paie fiche 7000 --sortie fiches/ --format pdf
"""

from __future__ import annotations

import dataclasses
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from paiero.change import TauxChange, convertir_en_eur, obtenir_taux_change
from paiero.roumanie.paie.fiche import FichePaie, formater_lei
from paiero.roumanie.paie.moteur import ResultatPaie, calculer_depuis_brut
from paiero.roumanie.paie.solveur import resoudre_brut_pour_net
from paiero.roumanie.parametres import (
    ParametresFiscaux,
    charger_parametres,
    obtenir_parametres,
)

app = typer.Typer()
console = Console()

OPTION_PERSONNES = typer.Option(
    0, "--personnes", "-p", min=0, help="Nombre de personnes a charge",
)
OPTION_ANNEE = typer.Option(2025, "--annee", "-a", help="Annee fiscale")
OPTION_SANS_ARRONDI = typer.Option(
    False, "--sans-arrondi", help="Garder les montants exacts (pas d'arrondi au leu)",
)
OPTION_CONFIG = typer.Option(
    None, "--config", "-c", help="Fichier YAML de parametres fiscaux",
)
OPTION_EUR = typer.Option(
    False, "--eur", help="Afficher aussi les montants en EUR (taux BCE)",
)
OPTION_TAUX_EUR = typer.Option(
    None, "--taux-eur", help="Taux EUR pour 1 RON (evite l'appel reseau)",
)


def _lire_montant(texte: str) -> Decimal:
    try:
        montant = Decimal(texte)
    except InvalidOperation:
        montant = None
    if montant is None or not montant.is_finite():
        console.print(f"[red]Montant invalide: {texte}[/red]")
        raise typer.Exit(code=1)
    return montant


def _charger_parametres(
    annee: int,
    config: Optional[Path],
    sans_arrondi: bool,
) -> ParametresFiscaux:
    """Parametres de l'annee (ou du fichier YAML), avec la politique d'arrondi demandee."""
    try:
        if config is not None:
            parametres = charger_parametres(config)
        else:
            parametres = obtenir_parametres(annee)
    except (ValueError, FileNotFoundError, ValidationError) as e:
        console.print(f"[red]Erreur de parametres: {e}[/red]")
        raise typer.Exit(code=1)

    if sans_arrondi:
        parametres = dataclasses.replace(parametres, arrondi=False)
    return parametres


def _taux_change(eur: bool, taux_eur: Optional[str]) -> TauxChange | None:
    if taux_eur is not None:
        taux = _lire_montant(taux_eur)
        if taux <= 0:
            console.print(f"[red]Taux EUR invalide: {taux_eur} (doit etre positif)[/red]")
            raise typer.Exit(code=1)
        return TauxChange(taux=taux, source="manuel")
    if eur:
        return obtenir_taux_change()
    return None


@app.command("brut")
def brut(
    montant_brut: str = typer.Argument(..., help="Salaire brut mensuel en lei"),
    personnes: int = OPTION_PERSONNES,
    annee: int = OPTION_ANNEE,
    sans_arrondi: bool = OPTION_SANS_ARRONDI,
    config: Optional[Path] = OPTION_CONFIG,
    eur: bool = OPTION_EUR,
    taux_eur: Optional[str] = OPTION_TAUX_EUR,
) -> None:
    """Calculer le salaire net a partir du brut."""
    parametres = _charger_parametres(annee, config, sans_arrondi)
    resultat = calculer_depuis_brut(_lire_montant(montant_brut), personnes, parametres)
    _afficher_ventilation(resultat, parametres, _taux_change(eur, taux_eur))


@app.command("net")
def net(
    montant_net: str = typer.Argument(..., help="Salaire net desire en lei"),
    personnes: int = OPTION_PERSONNES,
    annee: int = OPTION_ANNEE,
    sans_arrondi: bool = OPTION_SANS_ARRONDI,
    config: Optional[Path] = OPTION_CONFIG,
    eur: bool = OPTION_EUR,
    taux_eur: Optional[str] = OPTION_TAUX_EUR,
) -> None:
    """Trouver le salaire brut qui donne le net desire."""
    parametres = _charger_parametres(annee, config, sans_arrondi)
    brut_trouve = resoudre_brut_pour_net(_lire_montant(montant_net), personnes, parametres)
    resultat = calculer_depuis_brut(brut_trouve, personnes, parametres)
    console.print(
        f"Brut necessaire: [bold]{formater_lei(brut_trouve, parametres.arrondi)}[/bold]"
    )
    _afficher_ventilation(resultat, parametres, _taux_change(eur, taux_eur))


@app.command("fiche")
def fiche(
    montant_brut: str = typer.Argument(..., help="Salaire brut mensuel en lei"),
    personnes: int = OPTION_PERSONNES,
    annee: int = OPTION_ANNEE,
    config: Optional[Path] = OPTION_CONFIG,
    sortie: Path = typer.Option(
        Path("fiches"), "--sortie", "-o", help="Repertoire de sortie",
    ),
    format_sortie: str = typer.Option(
        "pdf", "--format", "-f", help="Format de la fiche: pdf, html ou csv",
    ),
) -> None:
    """Generer la fiche de paie d'un salaire brut."""
    if format_sortie not in ("pdf", "html", "csv"):
        console.print(f"[red]Format inconnu: {format_sortie} (pdf, html ou csv)[/red]")
        raise typer.Exit(code=1)

    parametres = _charger_parametres(annee, config, sans_arrondi=False)
    resultat = calculer_depuis_brut(_lire_montant(montant_brut), personnes, parametres)
    chemin = FichePaie(resultat, parametres).generer(sortie, format=format_sortie)
    console.print(f"[green]Fiche de paie enregistree dans {chemin}[/green]")


def _afficher_ventilation(
    resultat: ResultatPaie,
    parametres: ParametresFiscaux,
    taux: TauxChange | None = None,
) -> None:
    """Affiche la ventilation complete de la paie avec Rich."""
    arrondi = parametres.arrondi
    table = Table(
        title=f"Paie {parametres.annee} - Brut: {formater_lei(resultat.brut, arrondi)}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Element", style="cyan")
    table.add_column("RON", justify="right")
    if taux is not None:
        table.add_column("EUR", justify="right")

    def ligne(libelle: str, montant) -> None:
        cellules = [libelle, formater_lei(montant, arrondi)]
        if taux is not None:
            cellules.append(f"{convertir_en_eur(montant, taux)} EUR")
        table.add_row(*cellules)

    t = parametres.taux

    # Retenues employe
    table.add_section()
    table.add_row("[bold]Employe[/bold]", "")
    ligne(f"  CAS ({t.cas}%)", resultat.cas)
    ligne(f"  CASS ({t.cass}%)", resultat.cass)
    ligne("  Base imposable", resultat.base_imposable)
    ligne(f"  Impot ({t.impot}%)", resultat.impot)

    # Deductions
    if resultat.deduction_personnelle > 0 or resultat.allocation_300 > 0:
        table.add_section()
        table.add_row("[bold]Deductions appliquees[/bold]", "")
        if resultat.deduction_personnelle > 0:
            ligne("  Deduction personnelle", resultat.deduction_personnelle)
        if resultat.allocation_300 > 0:
            ligne("  Allocation non imposable", resultat.allocation_300)

    # Employeur
    table.add_section()
    table.add_row("[bold]Employeur[/bold]", "")
    ligne(f"  CAM ({t.cam}%)", resultat.cam)
    ligne("  Cout total employeur", resultat.cout_employeur)

    # Net
    table.add_section()
    ligne("[bold green]Salaire net[/bold green]", resultat.net)

    console.print(table)

    if taux is not None:
        source = "BCE" if taux.source == "frankfurter" else taux.source
        date = f" du {taux.date}" if taux.date else ""
        console.print(f"[dim]1 EUR = {taux.inverse:.4f} RON ({source}{date})[/dim]")
