"""paiero - Calculateur de salaire roumain et calendrier des jours ouvrables."""

__version__ = "0.1.0"
