"""Jours calendaires et ouvrables par mois.

Un jour est ouvrable s'il n'est ni samedi ni dimanche et que sa date ISO
n'est pas dans l'ensemble des feries. Le nombre de jours du mois vient de
l'arithmetique de dates (29 fevrier inclus), jamais d'une table.
"""

from __future__ import annotations

import datetime

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, Field

from paiero.calendrier.dates import decaler_jours, formater_iso

HEURES_JOURNEE_COMPLETE = 8
HEURES_JOURNEE_REDUITE = 7


class JoursOuvrablesMois(BaseModel):
    """Decompte d'un mois; mois de 0 (janvier) a 11 (decembre)."""

    mois: int = Field(ge=0, le=11)
    total: int
    ouvrables: int


class SommaireAnnuel(BaseModel):
    """Totaux annuels du calendrier."""

    total_jours: int
    total_ouvrables: int
    heures_8h: int
    heures_7h: int


def _est_fin_de_semaine(d: datetime.date) -> bool:
    return d.weekday() >= 5  # samedi, dimanche


def jours_ouvrables_par_mois(
    annee: int,
    dates_feriees: set[str],
) -> list[JoursOuvrablesMois]:
    """Calcule les jours calendaires et ouvrables pour chacun des 12 mois.

    Args:
        annee: Annee civile.
        dates_feriees: Dates ISO (YYYY-MM-DD) des jours feries.

    Returns:
        Douze JoursOuvrablesMois, dans l'ordre des mois.
    """
    resultat: list[JoursOuvrablesMois] = []
    for mois in range(1, 13):
        debut = datetime.date(annee, mois, 1)
        fin = debut + relativedelta(months=1)

        total = 0
        ouvrables = 0
        jour = debut
        while jour < fin:
            total += 1
            if not _est_fin_de_semaine(jour) and formater_iso(jour) not in dates_feriees:
                ouvrables += 1
            jour = decaler_jours(jour, 1)

        resultat.append(
            JoursOuvrablesMois(mois=mois - 1, total=total, ouvrables=ouvrables)
        )
    return resultat


def sommaire_annuel(mois: list[JoursOuvrablesMois]) -> SommaireAnnuel:
    total_ouvrables = sum(m.ouvrables for m in mois)
    return SommaireAnnuel(
        total_jours=sum(m.total for m in mois),
        total_ouvrables=total_ouvrables,
        heures_8h=total_ouvrables * HEURES_JOURNEE_COMPLETE,
        heures_7h=total_ouvrables * HEURES_JOURNEE_REDUITE,
    )
