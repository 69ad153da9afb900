"""Taux de change RON -> EUR (API Frankfurter / BCE).

Le moteur de paie ne depend jamais de ce module: le taux sert seulement a
l'affichage en EUR. Toute erreur reseau ou de format retombe sur le taux de
repli fourni par l'appelant.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

import requests
from dotenv import load_dotenv
from requests.exceptions import RequestException

logger = logging.getLogger(__name__)

# Charger .env au niveau du module
load_dotenv()

URL_FRANKFURTER = "https://api.frankfurter.app/latest?from=RON&to=EUR"
TAUX_REPLI_DEFAUT = Decimal("0.20")  # 1 RON ~ 0.20 EUR
DELAI_DEFAUT = 5  # secondes


@dataclass(frozen=True)
class TauxChange:
    """EUR pour 1 RON, avec la date de publication et la source."""

    taux: Decimal
    date: str = ""
    source: str = "repli"

    @property
    def inverse(self) -> Decimal:
        """RON pour 1 EUR (0 si le taux est nul)."""
        if self.taux == 0:
            return Decimal("0")
        return Decimal("1") / self.taux


def taux_repli_configure() -> Decimal:
    """Taux de repli lu dans PAIERO_TAUX_EUR_REPLI, sinon 0.20."""
    valeur = os.environ.get("PAIERO_TAUX_EUR_REPLI")
    if not valeur:
        return TAUX_REPLI_DEFAUT
    try:
        return Decimal(valeur)
    except InvalidOperation:
        logger.warning("PAIERO_TAUX_EUR_REPLI invalide (%r), repli sur %s", valeur, TAUX_REPLI_DEFAUT)
        return TAUX_REPLI_DEFAUT


def obtenir_taux_change(
    repli: Decimal | None = None,
    timeout: float = DELAI_DEFAUT,
    session: requests.Session | None = None,
) -> TauxChange:
    """Interroge l'API Frankfurter pour le taux RON -> EUR.

    Args:
        repli: Taux a utiliser si l'API est indisponible (defaut: configure).
        timeout: Delai maximal de la requete en secondes.
        session: Session requests a reutiliser (utile pour les tests).

    Returns:
        TauxChange avec source="frankfurter", ou source="repli" en cas d'echec.
    """
    if repli is None:
        repli = taux_repli_configure()
    url = os.environ.get("PAIERO_URL_CHANGE", URL_FRANKFURTER)
    client = session or requests

    try:
        reponse = client.get(url, timeout=timeout)
        reponse.raise_for_status()
        donnees = reponse.json()
        brut = donnees["rates"]["EUR"]
        if isinstance(brut, bool) or not isinstance(brut, (int, float)):
            raise ValueError(f"Taux EUR non numerique: {brut!r}")
        taux = Decimal(str(brut))
        if taux <= 0:
            raise ValueError(f"Taux EUR non positif: {taux}")
    except (RequestException, ValueError, KeyError, TypeError) as e:
        logger.warning("Taux de change indisponible (%s), repli sur %s", e, repli)
        return TauxChange(taux=repli)

    return TauxChange(taux=taux, date=str(donnees.get("date", "")), source="frankfurter")


def convertir_en_eur(montant_ron: Decimal, taux: TauxChange) -> Decimal:
    """Convertit un montant en lei vers l'euro, arrondi au centime."""
    return (montant_ron * taux.taux).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
