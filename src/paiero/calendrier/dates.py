"""Utilitaires de dates."""

import datetime


def formater_iso(d: datetime.date) -> str:
    """Retourne la date au format YYYY-MM-DD."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def decaler_jours(d: datetime.date, jours: int) -> datetime.date:
    return d + datetime.timedelta(days=jours)
