"""Tests pour la fiche de paie (HTML, CSV, PDF)."""

from __future__ import annotations

import csv
import datetime
import os
from decimal import Decimal
from pathlib import Path

import pytest
from freezegun import freeze_time

from paiero.roumanie.paie.fiche import FichePaie, formater_lei
from paiero.roumanie.paie.moteur import calculer_depuis_brut
from paiero.roumanie.parametres import obtenir_parametres

DATE_FICHE = datetime.date(2025, 3, 15)


@pytest.fixture
def parametres():
    return obtenir_parametres(2025)


@pytest.fixture
def fiche_7000(parametres):
    resultat = calculer_depuis_brut(Decimal("7000"), 0, parametres)
    return FichePaie(resultat, parametres, date_generation=DATE_FICHE)


@pytest.fixture
def fiche_4050(parametres):
    resultat = calculer_depuis_brut(Decimal("4050"), 0, parametres)
    return FichePaie(resultat, parametres, date_generation=DATE_FICHE)


@pytest.fixture
def weasyprint_available():
    """Skip test if WeasyPrint system libs not available."""
    try:
        if "DYLD_FALLBACK_LIBRARY_PATH" not in os.environ:
            homebrew_lib = "/opt/homebrew/lib"
            if Path(homebrew_lib).exists():
                os.environ["DYLD_FALLBACK_LIBRARY_PATH"] = homebrew_lib
        from weasyprint import HTML  # noqa: F401
    except (ImportError, OSError):
        pytest.skip("WeasyPrint system libraries (pango/gobject) not available")


# ===========================================================================
# Tests: formater_lei
# ===========================================================================


class TestFormaterLei:

    @pytest.mark.parametrize(
        ("montant", "attendu"),
        [
            (Decimal("0"), "0 lei"),
            (Decimal("300"), "300 lei"),
            (Decimal("4095"), "4.095 lei"),
            (Decimal("7158"), "7.158 lei"),
            (Decimal("1234567"), "1.234.567 lei"),
            (Decimal("157.5"), "158 lei"),
        ],
    )
    def test_arrondi(self, montant, attendu) -> None:
        assert formater_lei(montant) == attendu

    def test_sans_arrondi(self) -> None:
        assert formater_lei(Decimal("7158.25"), arrondi=False) == "7.158,25 lei"
        assert formater_lei(Decimal("2574.75"), arrondi=False) == "2.574,75 lei"

    def test_montant_au_dela_de_la_precision(self) -> None:
        assert formater_lei(Decimal("1E+30")) == "1" + ".000" * 10 + " lei"
        assert formater_lei(Decimal("1E+30"), arrondi=False) == "1" + ".000" * 10 + ",00 lei"


# ===========================================================================
# Tests: lignes et HTML
# ===========================================================================


class TestLignes:

    def test_lignes_employe(self, fiche_7000) -> None:
        assert fiche_7000.lignes_employe() == [
            ("CAS (25%)", Decimal("1750")),
            ("CASS (10%)", Decimal("700")),
            ("Base imposable", Decimal("4550")),
            ("Impot sur le revenu (10%)", Decimal("455")),
        ]

    def test_lignes_employeur(self, fiche_7000) -> None:
        assert fiche_7000.lignes_employeur() == [
            ("CAM (2.25%)", Decimal("158")),
            ("Cout total employeur", Decimal("7158")),
        ]

    def test_aucune_deduction_a_7000(self, fiche_7000) -> None:
        assert fiche_7000.lignes_deductions() == []

    def test_deductions_au_salaire_minimum(self, fiche_4050) -> None:
        assert fiche_4050.lignes_deductions() == [
            ("Deduction personnelle", Decimal("810")),
            ("300 lei non imposables", Decimal("300")),
        ]


class TestHtml:

    def test_contenu(self, fiche_7000) -> None:
        html = fiche_7000.to_html()
        assert "Fiche de paie" in html
        assert "Salaire brut: 7.000 lei" in html
        assert "Salaire net: 4.095 lei" in html
        assert "CAS (25%)" in html
        assert "CAM (2.25%)" in html
        assert "7.158 lei" in html
        assert "Fiche generee le 2025-03-15" in html

    def test_section_deductions_absente(self, fiche_7000) -> None:
        assert "Deductions appliquees" not in fiche_7000.to_html()

    def test_section_deductions_presente(self, fiche_4050) -> None:
        html = fiche_4050.to_html()
        assert "Deductions appliquees" in html
        assert "300 lei non imposables" in html
        assert "Salaire net: 2.574 lei" in html

    def test_css_integre(self, fiche_7000) -> None:
        assert "<style>" in fiche_7000.to_html()

    @freeze_time("2025-03-15")
    def test_date_par_defaut(self, parametres) -> None:
        resultat = calculer_depuis_brut(Decimal("7000"), 0, parametres)
        fiche = FichePaie(resultat, parametres)
        assert fiche.date_generation == DATE_FICHE
        assert "2025-03-15" in fiche.to_html()


# ===========================================================================
# Tests: CSV et generer
# ===========================================================================


class TestCsv:

    def test_lignes_csv(self, fiche_7000, tmp_path) -> None:
        chemin = fiche_7000.to_csv(tmp_path / "fiche.csv")
        with open(chemin, newline="", encoding="utf-8") as f:
            lignes = list(csv.reader(f))
        assert lignes[0] == ["section", "categorie", "montant_ron"]
        assert lignes[1] == ["Salarie", "Salaire brut", "7000"]
        assert ["Employe", "CAS (25%)", "1750"] in lignes
        assert ["Employeur", "Cout total employeur", "7158"] in lignes
        assert lignes[-1] == ["Salarie", "Salaire net", "4095"]

    def test_deductions_dans_csv(self, fiche_4050, tmp_path) -> None:
        chemin = fiche_4050.to_csv(tmp_path / "fiche.csv")
        contenu = chemin.read_text(encoding="utf-8")
        assert "Deductions appliquees,Deduction personnelle,810" in contenu


class TestGenerer:

    def test_csv(self, fiche_7000, tmp_path) -> None:
        chemin = fiche_7000.generer(tmp_path / "fiches", format="csv")
        assert chemin == tmp_path / "fiches" / "fiche-paie-2025-03-15.csv"
        assert chemin.exists()

    def test_html(self, fiche_7000, tmp_path) -> None:
        chemin = fiche_7000.generer(tmp_path, format="html")
        assert chemin.suffix == ".html"
        assert "Salaire net: 4.095 lei" in chemin.read_text(encoding="utf-8")

    def test_format_inconnu(self, fiche_7000, tmp_path) -> None:
        with pytest.raises(ValueError, match="Format de fiche inconnu"):
            fiche_7000.generer(tmp_path, format="docx")

    def test_pdf(self, fiche_7000, tmp_path, weasyprint_available) -> None:
        chemin = fiche_7000.generer(tmp_path, format="pdf")
        assert chemin.exists()
        assert chemin.read_bytes()[:4] == b"%PDF"
