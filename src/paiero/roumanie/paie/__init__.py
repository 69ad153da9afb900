"""Module de paie: calcul brut -> net, inversion net -> brut et fiche de paie."""

from paiero.roumanie.paie.moteur import ResultatPaie, calculer_depuis_brut
from paiero.roumanie.paie.solveur import resoudre_brut_pour_net

__all__ = [
    "ResultatPaie",
    "calculer_depuis_brut",
    "resoudre_brut_pour_net",
]
