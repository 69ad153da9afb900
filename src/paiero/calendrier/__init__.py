"""Module calendrier: Paques orthodoxe, jours feries et jours ouvrables.

Fournit la date de Paques orthodoxe, les 17 jours feries legaux roumains
d'une annee et le decompte des jours ouvrables par mois.
"""

from paiero.calendrier.feries import (
    JourFerie,
    TypeFerie,
    dates_feriees,
    feries_par_mois,
    jours_feries,
)
from paiero.calendrier.jours_ouvrables import (
    JoursOuvrablesMois,
    SommaireAnnuel,
    jours_ouvrables_par_mois,
    sommaire_annuel,
)
from paiero.calendrier.paques import annee_valide_paques, paques_orthodoxe

__all__ = [
    "JourFerie",
    "JoursOuvrablesMois",
    "SommaireAnnuel",
    "TypeFerie",
    "annee_valide_paques",
    "dates_feriees",
    "feries_par_mois",
    "jours_feries",
    "jours_ouvrables_par_mois",
    "paques_orthodoxe",
    "sommaire_annuel",
]
