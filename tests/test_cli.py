"""Tests CLI pour paiero (commandes paie et calendrier)."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

import paiero
from paiero.change import TauxChange
from paiero.cli.app import app

runner = CliRunner()


@pytest.fixture
def config_2026(tmp_path):
    """Fichier YAML de parametres pour une annee hors registre."""
    chemin = tmp_path / "parametres-2026.yaml"
    chemin.write_text(
        'annee: 2026\n'
        'salaire_minimum: "4325"\n'
        'taux:\n'
        '  cas: "25"\n'
        '  cass: "10"\n'
        '  impot: "10"\n'
        '  cam: "2.25"\n',
        encoding="utf-8",
    )
    return chemin


class TestApp:

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"paiero version {paiero.__version__}" in result.output

    def test_aide(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "paie" in result.output
        assert "calendrier" in result.output


class TestPaieBrut:

    def test_cas_de_reference(self) -> None:
        result = runner.invoke(app, ["paie", "brut", "7000"])
        assert result.exit_code == 0, result.output
        assert "Paie 2025" in result.output
        assert "1.750 lei" in result.output
        assert "4.095 lei" in result.output
        assert "7.158 lei" in result.output
        assert "Deductions appliquees" not in result.output

    def test_salaire_minimum(self) -> None:
        result = runner.invoke(app, ["paie", "brut", "4050"])
        assert result.exit_code == 0, result.output
        assert "Allocation non imposable" in result.output
        assert "Deduction personnelle" in result.output
        assert "2.574 lei" in result.output

    def test_personnes_a_charge(self) -> None:
        result = runner.invoke(app, ["paie", "brut", "3000", "--personnes", "4"])
        assert result.exit_code == 0, result.output
        assert "1.937 lei" in result.output

    def test_sans_arrondi(self) -> None:
        result = runner.invoke(app, ["paie", "brut", "7000", "--sans-arrondi"])
        assert result.exit_code == 0, result.output
        assert "4.095,00 lei" in result.output

    def test_montant_invalide(self) -> None:
        result = runner.invoke(app, ["paie", "brut", "abc"])
        assert result.exit_code == 1
        assert "Montant invalide" in result.output

    @pytest.mark.parametrize("valeur", ["NaN", "sNaN", "Infinity"])
    def test_montant_non_fini(self, valeur) -> None:
        result = runner.invoke(app, ["paie", "brut", valeur])
        assert result.exit_code == 1
        assert "Montant invalide" in result.output

    @pytest.mark.parametrize("taux", ["0", "-0.2"])
    def test_taux_eur_non_positif(self, taux) -> None:
        result = runner.invoke(app, ["paie", "brut", "7000", f"--taux-eur={taux}"])
        assert result.exit_code == 1
        assert "Taux EUR invalide" in result.output
        assert "EUR =" not in result.output

    def test_personnes_negatif_rejete(self) -> None:
        result = runner.invoke(app, ["paie", "brut", "7000", "--personnes", "-1"])
        assert result.exit_code != 0

    def test_annee_inconnue(self) -> None:
        result = runner.invoke(app, ["paie", "brut", "7000", "--annee", "2024"])
        assert result.exit_code == 1
        assert "Erreur de parametres" in result.output

    def test_config_yaml(self, config_2026) -> None:
        result = runner.invoke(app, ["paie", "brut", "7000", "--config", str(config_2026)])
        assert result.exit_code == 0, result.output
        assert "Paie 2026" in result.output
        assert "4.095 lei" in result.output

    def test_config_absente(self, tmp_path) -> None:
        result = runner.invoke(
            app, ["paie", "brut", "7000", "--config", str(tmp_path / "absent.yaml")],
        )
        assert result.exit_code == 1
        assert "Erreur de parametres" in result.output

    def test_taux_eur_manuel(self) -> None:
        result = runner.invoke(app, ["paie", "brut", "7000", "--taux-eur", "0.2"])
        assert result.exit_code == 0, result.output
        assert "819.00 EUR" in result.output
        assert "1 EUR = 5.0000 RON (manuel)" in result.output

    def test_eur_via_api(self) -> None:
        taux = TauxChange(taux=Decimal("0.2"), date="2025-03-14", source="frankfurter")
        with patch("paiero.cli.paie.obtenir_taux_change", return_value=taux) as mock_taux:
            result = runner.invoke(app, ["paie", "brut", "7000", "--eur"])
        assert result.exit_code == 0, result.output
        mock_taux.assert_called_once()
        assert "1400.00 EUR" in result.output
        assert "BCE du 2025-03-14" in result.output


class TestPaieNet:

    def test_cas_de_reference(self) -> None:
        result = runner.invoke(app, ["paie", "net", "4095"])
        assert result.exit_code == 0, result.output
        assert "Brut necessaire" in result.output
        assert "7.000 lei" in result.output

    def test_montant_invalide(self) -> None:
        result = runner.invoke(app, ["paie", "net", "quatre mille"])
        assert result.exit_code == 1

    def test_net_infini(self) -> None:
        result = runner.invoke(app, ["paie", "net", "Infinity"])
        assert result.exit_code == 1
        assert "Montant invalide" in result.output


class TestPaieFiche:

    def test_csv(self, tmp_path) -> None:
        sortie = tmp_path / "fiches"
        result = runner.invoke(
            app, ["paie", "fiche", "7000", "--sortie", str(sortie), "--format", "csv"],
        )
        assert result.exit_code == 0, result.output
        assert "Fiche de paie enregistree" in result.output
        fichiers = list(sortie.glob("fiche-paie-*.csv"))
        assert len(fichiers) == 1
        assert "Salaire net,4095" in fichiers[0].read_text(encoding="utf-8")

    def test_html(self, tmp_path) -> None:
        result = runner.invoke(
            app, ["paie", "fiche", "4050", "-o", str(tmp_path), "-f", "html"],
        )
        assert result.exit_code == 0, result.output
        fichiers = list(tmp_path.glob("fiche-paie-*.html"))
        assert len(fichiers) == 1
        assert "Deductions appliquees" in fichiers[0].read_text(encoding="utf-8")

    def test_format_inconnu(self, tmp_path) -> None:
        result = runner.invoke(
            app, ["paie", "fiche", "7000", "-o", str(tmp_path), "-f", "docx"],
        )
        assert result.exit_code == 1
        assert "Format inconnu" in result.output
        assert list(tmp_path.iterdir()) == []


class TestCalendrier:

    def test_annee_2025(self) -> None:
        result = runner.invoke(app, ["calendrier", "2025"])
        assert result.exit_code == 0, result.output
        assert "Jours ouvrables 2025" in result.output
        assert "Janvier" in result.output
        assert "248" in result.output
        assert "1984" in result.output
        assert "1736" in result.output

    def test_details(self) -> None:
        result = runner.invoke(app, ["calendrier", "2025", "--details"])
        assert result.exit_code == 0, result.output
        assert "Jours feries en Janvier" in result.output
        assert "2025-01-24  Unirea Principatelor" in result.output
        assert "2025-04-18  Vinerea Mare" in result.output
        assert "Jours feries en Mars" not in result.output

    def test_hors_plage_avertit(self) -> None:
        result = runner.invoke(app, ["calendrier", "2150"])
        assert result.exit_code == 0, result.output
        assert "Attention" in result.output
