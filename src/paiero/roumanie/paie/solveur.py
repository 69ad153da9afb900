"""Inversion net -> brut par bissection sur le moteur de paie.

Le net est suppose croissant avec le brut (CAS, CASS et impot augmentent avec
le brut). Exception connue: au salaire minimum, l'allocation de 300 lei fait
sauter le net vers le haut. Selon le chemin de la bissection, certaines cibles
dans ce saut aboutissent au bord du saut (net ~2574,5 lei sans personne a
charge) au lieu de la cible; d'autres sont resolues au-dela du saut.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from paiero.roumanie.paie.moteur import calculer_depuis_brut
from paiero.roumanie.parametres import ParametresFiscaux

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
DEUX = Decimal("2")
ITERATIONS_DEFAUT = 50


def borne_superieure(net_cible: Decimal) -> Decimal:
    """Borne haute heuristique de la recherche: 3 * net + 10000 (au moins 1)."""
    return max(Decimal("1"), net_cible * 3 + Decimal("10000"))


def resoudre_brut_pour_net(
    net_cible: Decimal,
    personnes_a_charge: int,
    parametres: ParametresFiscaux,
    iterations: int = ITERATIONS_DEFAUT,
) -> Decimal:
    """Trouve le salaire brut qui produit le net cible.

    Nombre fixe d'iterations, sans test de convergence: 50 divisions par deux
    d'un intervalle de quelques dizaines de milliers de lei donnent une
    resolution bien plus fine que le leu.

    Args:
        net_cible: Salaire net desire (un montant negatif est ramene a 0).
        personnes_a_charge: Nombre de personnes a charge.
        parametres: Parametres fiscaux de l'annee.
        iterations: Nombre de bissections.

    Returns:
        Borne haute de l'intervalle final (brut non arrondi).
    """
    net_cible = Decimal(net_cible)
    if not net_cible.is_finite():
        raise ValueError(f"Net cible invalide: {net_cible}")
    if net_cible < ZERO:
        logger.warning("Net cible negatif (%s) ramene a 0", net_cible)
        net_cible = ZERO

    bas = ZERO
    haut = borne_superieure(net_cible)
    for _ in range(iterations):
        milieu = (bas + haut) / DEUX
        resultat = calculer_depuis_brut(milieu, personnes_a_charge, parametres)
        if resultat.net < net_cible:
            bas = milieu
        else:
            haut = milieu

    logger.debug("Net cible %s -> brut %s", net_cible, haut)
    return haut
