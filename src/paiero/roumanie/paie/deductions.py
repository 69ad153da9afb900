"""Allocation non imposable et deduction personnelle (DP).

Fonctions pures sur des Decimal. Les bornes (salaire minimum, largeur de la
bande degressive) viennent des ParametresFiscaux de l'annee.
"""

from decimal import Decimal

ZERO = Decimal("0")

# Pourcentage du salaire minimum selon le nombre de personnes a charge
POURCENTAGES_DEDUCTION = (
    Decimal("0.20"),
    Decimal("0.25"),
    Decimal("0.30"),
    Decimal("0.35"),
)
POURCENTAGE_DEDUCTION_4_ET_PLUS = Decimal("0.45")


def allocation_applicable(
    brut: Decimal,
    salaire_minimum: Decimal,
    tolerance: Decimal = Decimal("0.5"),
) -> bool:
    """Indique si les 300 lei non imposables s'appliquent.

    Seulement au salaire minimum; la tolerance protege l'egalite contre le
    bruit de representation, ce n'est pas une plage.
    """
    return abs(brut - salaire_minimum) < tolerance


def pourcentage_deduction_max(personnes_a_charge: int) -> Decimal:
    """0: 20%, 1: 25%, 2: 30%, 3: 35%, 4 et plus: 45%."""
    if personnes_a_charge >= 4:
        return POURCENTAGE_DEDUCTION_4_ET_PLUS
    return POURCENTAGES_DEDUCTION[max(0, min(3, personnes_a_charge))]


def deduction_personnelle_max(
    personnes_a_charge: int,
    salaire_minimum: Decimal,
) -> Decimal:
    return pourcentage_deduction_max(personnes_a_charge) * salaire_minimum


def calculer_deduction_personnelle(
    brut: Decimal,
    personnes_a_charge: int,
    salaire_minimum: Decimal,
    largeur_bande: Decimal = Decimal("2000"),
) -> Decimal:
    """Calcule la deduction personnelle (DP).

    DP = DPmax jusqu'au salaire minimum, puis decroit lineairement jusqu'a 0
    sur la bande [minimum, minimum + largeur_bande].

    Args:
        brut: Salaire brut mensuel.
        personnes_a_charge: Nombre de personnes a charge.
        salaire_minimum: Salaire minimum brut de l'annee.
        largeur_bande: Largeur de la bande degressive (2000 lei).

    Returns:
        Montant de la deduction, non arrondi (>= 0).
    """
    dp_max = deduction_personnelle_max(personnes_a_charge, salaire_minimum)
    if brut <= salaire_minimum:
        return dp_max
    plafond = salaire_minimum + largeur_bande
    if brut >= plafond:
        return ZERO
    return dp_max * (plafond - brut) / largeur_bande
