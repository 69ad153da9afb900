"""Jours feries legaux roumains pour une annee.

Douze feries a date fixe, puis cinq feries mobiles derives de Paques
orthodoxe. L'ordre retourne est l'ordre d'insertion (fixes puis mobiles), pas
l'ordre chronologique: trier par date au besoin.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from paiero.calendrier.dates import decaler_jours, formater_iso
from paiero.calendrier.paques import paques_orthodoxe


class TypeFerie(str, Enum):
    """Origine d'un jour ferie."""

    FIXE = "fixe"
    MOBILE = "mobile"


class JourFerie(BaseModel):
    """Un jour ferie avec sa date ISO et son nom."""

    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    nom: str
    type: TypeFerie = TypeFerie.FIXE

    @property
    def mois(self) -> int:
        """Mois 0-11."""
        return int(self.date[5:7]) - 1


FERIES_FIXES: tuple[tuple[int, int, str], ...] = (
    (1, 1, "Anul Nou"),
    (1, 2, "A doua zi de Anul Nou"),
    (1, 6, "Boboteaza"),
    (1, 7, "Sf. Ion"),
    (1, 24, "Unirea Principatelor"),
    (5, 1, "Ziua Muncii"),
    (6, 1, "Ziua Copilului"),
    (8, 15, "Adormirea Maicii Domnului"),
    (11, 30, "Sf. Andrei"),
    (12, 1, "Ziua Nationala"),
    (12, 25, "Craciunul"),
    (12, 26, "A doua zi de Craciun"),
)

# Decalage en jours par rapport au dimanche de Paques
FERIES_MOBILES: tuple[tuple[int, str], ...] = (
    (-2, "Vinerea Mare"),
    (0, "Pastele (duminica)"),
    (1, "A doua zi de Paste (luni)"),
    (49, "Rusaliile (duminica)"),
    (50, "A doua zi de Rusalii (luni)"),
)


def jours_feries(annee: int) -> list[JourFerie]:
    """Retourne les 17 jours feries de l'annee (12 fixes puis 5 mobiles)."""
    feries = [
        JourFerie(
            date=f"{annee:04d}-{mois:02d}-{jour:02d}",
            nom=nom,
            type=TypeFerie.FIXE,
        )
        for mois, jour, nom in FERIES_FIXES
    ]

    paques = paques_orthodoxe(annee)
    for decalage, nom in FERIES_MOBILES:
        feries.append(
            JourFerie(
                date=formater_iso(decaler_jours(paques, decalage)),
                nom=nom,
                type=TypeFerie.MOBILE,
            )
        )
    return feries


def dates_feriees(feries: list[JourFerie]) -> set[str]:
    """Ensemble des dates ISO; un ferie mobile qui tombe sur un fixe ne compte qu'une fois."""
    return {f.date for f in feries}


def feries_par_mois(feries: list[JourFerie]) -> dict[int, list[JourFerie]]:
    """Regroupe les feries par mois (0-11), tries par date dans chaque mois."""
    resultat: dict[int, list[JourFerie]] = {mois: [] for mois in range(12)}
    for ferie in feries:
        resultat[ferie.mois].append(ferie)
    for mois in resultat:
        resultat[mois].sort(key=lambda f: f.date)
    return resultat
