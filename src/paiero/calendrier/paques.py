"""Date de Paques orthodoxe (exprimee dans le calendrier gregorien).

Formule de Meeus sur le calendrier julien, puis decalage fixe de 13 jours vers
le gregorien. Le decalage n'est exact qu'entre 1900 et 2099; hors de cette
plage, le resultat n'est pas garanti et un avertissement est journalise.
"""

from __future__ import annotations

import datetime
import logging

from paiero.calendrier.dates import decaler_jours

logger = logging.getLogger(__name__)

ANNEE_MIN_VALIDE = 1900
ANNEE_MAX_VALIDE = 2099
DECALAGE_JULIEN_GREGORIEN = 13


def annee_valide_paques(annee: int) -> bool:
    return ANNEE_MIN_VALIDE <= annee <= ANNEE_MAX_VALIDE


def paques_orthodoxe(annee: int) -> datetime.date:
    """Calcule le dimanche de Paques orthodoxe pour une annee.

    Args:
        annee: Annee civile (precision garantie pour 1900-2099).

    Returns:
        Date gregorienne du dimanche de Paques.
    """
    if not annee_valide_paques(annee):
        logger.warning(
            "Annee %d hors de la plage %d-%d: date de Paques non garantie",
            annee, ANNEE_MIN_VALIDE, ANNEE_MAX_VALIDE,
        )

    a = annee % 4
    b = annee % 7
    c = annee % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    mois = (d + e + 114) // 31
    jour = ((d + e + 114) % 31) + 1

    julien = datetime.date(annee, mois, jour)
    return decaler_jours(julien, DECALAGE_JULIEN_GREGORIEN)
