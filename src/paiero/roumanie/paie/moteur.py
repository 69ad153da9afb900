"""Moteur de paie: calcul brut -> net pour un mois de paie.

L'ordre des etapes compte: chaque base soustrait les resultats precedents.
Quand l'arrondi est actif, chaque montant (CAS, CASS, impot, CAM) est arrondi
au leu pres AVANT d'etre utilise a l'etape suivante.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from paiero.roumanie.paie.deductions import (
    allocation_applicable,
    calculer_deduction_personnelle,
)
from paiero.roumanie.parametres import CENT, ParametresFiscaux

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
UNITE = Decimal("1")


def _arrondir(montant: Decimal, actif: bool) -> Decimal:
    """Arrondit au leu pres (ROUND_HALF_UP) si la politique d'arrondi est active."""
    if not actif:
        return montant
    with localcontext() as ctx:
        # quantize exige assez de chiffres pour la partie entiere
        ctx.prec = max(ctx.prec, montant.adjusted() + 2)
        return montant.quantize(UNITE, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ResultatPaie:
    """Ventilation complete d'un salaire brut."""

    brut: Decimal
    personnes_a_charge: int

    # Allegements
    allocation_300: Decimal
    deduction_personnelle: Decimal

    # Bases
    base_cotisations: Decimal
    base_imposable: Decimal

    # Retenues employe
    cas: Decimal
    cass: Decimal
    impot: Decimal

    # Employeur
    cam: Decimal
    cout_employeur: Decimal

    net: Decimal
    arrondi: bool = True

    @property
    def total_retenues(self) -> Decimal:
        return self.cas + self.cass + self.impot


def calculer_depuis_brut(
    brut: Decimal,
    personnes_a_charge: int,
    parametres: ParametresFiscaux,
) -> ResultatPaie:
    """Calcule la paie complete a partir du salaire brut.

    Args:
        brut: Salaire brut mensuel (un montant negatif est ramene a 0).
        personnes_a_charge: Nombre de personnes a charge (0, 1, 2, 3, 4+).
        parametres: Taux, salaire minimum et politique d'arrondi de l'annee.

    Returns:
        ResultatPaie avec toutes les retenues et cotisations calculees.
    """
    brut = Decimal(brut)
    if not brut.is_finite():
        raise ValueError(f"Salaire brut invalide: {brut}")
    if brut < ZERO:
        logger.warning("Salaire brut negatif (%s) ramene a 0", brut)
        brut = ZERO

    taux = parametres.taux
    arrondi = parametres.arrondi

    # 1. 300 lei non imposables, au salaire minimum seulement
    if allocation_applicable(
        brut, parametres.salaire_minimum, parametres.tolerance_salaire_minimum,
    ):
        allocation = parametres.allocation_non_imposable
    else:
        allocation = ZERO

    # 2. Deduction personnelle
    dp = calculer_deduction_personnelle(
        brut,
        personnes_a_charge,
        parametres.salaire_minimum,
        parametres.largeur_bande_deduction,
    )

    # 3-4. CAS / CASS sur la base sans l'allocation
    base_cotisations = max(ZERO, brut - allocation)
    cas = _arrondir(taux.cas / CENT * base_cotisations, arrondi)
    cass = _arrondir(taux.cass / CENT * base_cotisations, arrondi)

    # 5-6. Impot
    base_imposable = max(ZERO, brut - cas - cass - dp - allocation)
    impot = _arrondir(taux.impot / CENT * base_imposable, arrondi)

    # 7. Net (allocation et DP deja dans les bases)
    net = brut - cas - cass - impot

    # 8-9. Employeur: CAM sur le brut integral
    cam = _arrondir(taux.cam / CENT * brut, arrondi)
    cout_employeur = brut + cam

    logger.debug(
        "Paie brut=%s personnes=%d -> net=%s (cas=%s cass=%s impot=%s)",
        brut, personnes_a_charge, net, cas, cass, impot,
    )

    return ResultatPaie(
        brut=brut,
        personnes_a_charge=personnes_a_charge,
        allocation_300=allocation,
        deduction_personnelle=dp,
        base_cotisations=base_cotisations,
        base_imposable=base_imposable,
        cas=cas,
        cass=cass,
        impot=impot,
        cam=cam,
        cout_employeur=cout_employeur,
        net=net,
        arrondi=arrondi,
    )
