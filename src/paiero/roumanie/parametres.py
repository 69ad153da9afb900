"""Taux et parametres annuels de la paie roumaine.

Toutes les valeurs sont en Decimal -- jamais de float.
Les taux sont exprimes en pourcentage (echelle 0-100) et appliques comme
taux / 100 * base.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

CENT = Decimal("100")


@dataclass(frozen=True)
class Taux:
    """Taux de cotisations et d'impot pour une annee donnee."""

    cas: Decimal  # 25% pension (employe)
    cass: Decimal  # 10% sante (employe)
    impot: Decimal  # 10% impot sur le revenu
    cam: Decimal  # 2.25% assurance travail (employeur)


@dataclass(frozen=True)
class ParametresFiscaux:
    """Ensemble complet des parametres pour une annee fiscale."""

    annee: int
    taux: Taux
    salaire_minimum: Decimal  # 4050 lei en 2025
    allocation_non_imposable: Decimal = Decimal("300")
    tolerance_salaire_minimum: Decimal = Decimal("0.5")
    largeur_bande_deduction: Decimal = Decimal("2000")
    arrondi: bool = True


TAUX_2025 = Taux(
    cas=Decimal("25"),
    cass=Decimal("10"),
    impot=Decimal("10"),
    cam=Decimal("2.25"),
)

PARAMETRES_2025 = ParametresFiscaux(
    annee=2025,
    taux=TAUX_2025,
    salaire_minimum=Decimal("4050"),
)

# Registre multi-annee
PARAMETRES: dict[int, ParametresFiscaux] = {2025: PARAMETRES_2025}


def obtenir_parametres(annee: int) -> ParametresFiscaux:
    """Retourne les parametres pour une annee donnee.

    Raises:
        ValueError: Si les parametres ne sont pas disponibles pour l'annee demandee.
    """
    if annee not in PARAMETRES:
        raise ValueError(
            f"Parametres non disponibles pour l'annee {annee}. "
            f"Annees disponibles: {sorted(PARAMETRES.keys())}"
        )
    return PARAMETRES[annee]


# ---------------------------------------------------------------------------
# Fichier de parametres YAML
# ---------------------------------------------------------------------------


class TauxFichier(BaseModel):
    """Taux en pourcentage tels que lus dans le YAML."""

    cas: Decimal = Field(ge=0, le=100)
    cass: Decimal = Field(ge=0, le=100)
    impot: Decimal = Field(ge=0, le=100)
    cam: Decimal = Field(ge=0, le=100)


class FichierParametres(BaseModel):
    """Modele Pydantic pour la validation d'un fichier de parametres."""

    annee: int
    taux: TauxFichier
    salaire_minimum: Decimal = Field(gt=0)
    allocation_non_imposable: Decimal = Field(default=Decimal("300"), ge=0)
    tolerance_salaire_minimum: Decimal = Field(default=Decimal("0.5"), ge=0)
    largeur_bande_deduction: Decimal = Field(default=Decimal("2000"), gt=0)
    arrondi: bool = True

    def vers_parametres(self) -> ParametresFiscaux:
        return ParametresFiscaux(
            annee=self.annee,
            taux=Taux(
                cas=self.taux.cas,
                cass=self.taux.cass,
                impot=self.taux.impot,
                cam=self.taux.cam,
            ),
            salaire_minimum=self.salaire_minimum,
            allocation_non_imposable=self.allocation_non_imposable,
            tolerance_salaire_minimum=self.tolerance_salaire_minimum,
            largeur_bande_deduction=self.largeur_bande_deduction,
            arrondi=self.arrondi,
        )


def charger_parametres(chemin: str | Path) -> ParametresFiscaux:
    """Charge et valide des parametres fiscaux depuis un fichier YAML.

    Exemple de fichier::

        annee: 2025
        salaire_minimum: "4050"
        taux: {cas: "25", cass: "10", impot: "10", cam: "2.25"}

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        pydantic.ValidationError: Si le contenu est invalide.
    """
    path = Path(chemin)
    if not path.exists():
        raise FileNotFoundError(f"Fichier de parametres introuvable: {chemin}")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return FichierParametres.model_validate(raw).vers_parametres()
