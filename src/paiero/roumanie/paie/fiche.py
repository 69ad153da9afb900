"""Fiche de paie (HTML, PDF, CSV) a partir d'un ResultatPaie.

Utilise Jinja2 pour le template HTML et WeasyPrint pour la conversion en PDF.
La fiche ne recalcule rien: elle met en forme les champs du resultat.
"""

from __future__ import annotations

import csv
import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path

from jinja2 import Environment, PackageLoader

from paiero.roumanie.paie.moteur import ResultatPaie
from paiero.roumanie.parametres import ParametresFiscaux

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _quantifier(montant: Decimal, arrondi: bool) -> Decimal:
    quantum = Decimal("1") if arrondi else Decimal("0.01")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, montant.adjusted() + 4)
        return montant.quantize(quantum, rounding=ROUND_HALF_UP)


def formater_lei(montant: Decimal, arrondi: bool = True) -> str:
    """Formate un montant a la roumaine: 7.158 lei ou 7.158,25 lei."""
    valeur = _quantifier(montant, arrondi)
    texte = f"{valeur:,.{0 if arrondi else 2}f}"
    texte = texte.replace(",", " ").replace(".", ",").replace(" ", ".")
    return f"{texte} lei"


def _pourcentage(taux: Decimal) -> str:
    return f"{taux.normalize():f}%"


class FichePaie:
    """Fiche de paie d'un mois pour un salarie."""

    nom_fichier: str = "fiche-paie"
    template_name: str = "fiche_paie.html"

    def __init__(
        self,
        resultat: ResultatPaie,
        parametres: ParametresFiscaux,
        date_generation: datetime.date | None = None,
    ) -> None:
        self.resultat = resultat
        self.parametres = parametres
        self.date_generation = date_generation or datetime.date.today()
        self._env = Environment(
            loader=PackageLoader("paiero.roumanie.paie", "templates"),
            autoescape=True,
        )

    def lignes_employe(self) -> list[tuple[str, Decimal]]:
        taux = self.parametres.taux
        return [
            (f"CAS ({_pourcentage(taux.cas)})", self.resultat.cas),
            (f"CASS ({_pourcentage(taux.cass)})", self.resultat.cass),
            ("Base imposable", self.resultat.base_imposable),
            (f"Impot sur le revenu ({_pourcentage(taux.impot)})", self.resultat.impot),
        ]

    def lignes_employeur(self) -> list[tuple[str, Decimal]]:
        return [
            (f"CAM ({_pourcentage(self.parametres.taux.cam)})", self.resultat.cam),
            ("Cout total employeur", self.resultat.cout_employeur),
        ]

    def lignes_deductions(self) -> list[tuple[str, Decimal]]:
        """Deductions appliquees; vide si aucune."""
        lignes: list[tuple[str, Decimal]] = []
        if self.resultat.deduction_personnelle > 0:
            lignes.append(("Deduction personnelle", self.resultat.deduction_personnelle))
        if self.resultat.allocation_300 > 0:
            lignes.append(
                (f"{self.resultat.allocation_300.normalize():f} lei non imposables",
                 self.resultat.allocation_300)
            )
        return lignes

    def contexte(self) -> dict:
        sections = [
            ("Employe", self.lignes_employe()),
            ("Employeur", self.lignes_employeur()),
        ]
        deductions = self.lignes_deductions()
        if deductions:
            sections.append(("Deductions appliquees", deductions))
        arrondi = self.resultat.arrondi
        return {
            "personnes_a_charge": self.resultat.personnes_a_charge,
            "brut": formater_lei(self.resultat.brut, arrondi),
            "net": formater_lei(self.resultat.net, arrondi),
            "annee": self.parametres.annee,
            "date_generation": self.date_generation.isoformat(),
            "sections": [
                (titre, [(libelle, formater_lei(montant, arrondi)) for libelle, montant in lignes])
                for titre, lignes in sections
            ],
        }

    def to_html(self) -> str:
        template = self._env.get_template(self.template_name)
        css_path = TEMPLATES_DIR / "css" / "fiche_paie.css"
        css = css_path.read_text(encoding="utf-8") if css_path.exists() else ""
        return template.render(css=css, **self.contexte())

    def to_pdf(self, output_path: Path) -> Path:
        """Genere la fiche en PDF via WeasyPrint."""
        from weasyprint import HTML

        output_path.parent.mkdir(parents=True, exist_ok=True)
        HTML(string=self.to_html()).write_pdf(str(output_path))
        return output_path

    def to_csv(self, output_path: Path) -> Path:
        """Genere la fiche en CSV (section, categorie, montant RON)."""
        arrondi = self.resultat.arrondi
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["section", "categorie", "montant_ron"])
            writer.writerow(["Salarie", "Salaire brut", _quantifier(self.resultat.brut, arrondi)])
            for libelle, montant in self.lignes_employe():
                writer.writerow(["Employe", libelle, _quantifier(montant, arrondi)])
            for libelle, montant in self.lignes_employeur():
                writer.writerow(["Employeur", libelle, _quantifier(montant, arrondi)])
            for libelle, montant in self.lignes_deductions():
                writer.writerow(["Deductions appliquees", libelle, _quantifier(montant, arrondi)])
            writer.writerow(["Salarie", "Salaire net", _quantifier(self.resultat.net, arrondi)])
        return output_path

    def generer(self, output_dir: Path, format: str = "pdf") -> Path:
        """Ecrit la fiche dans output_dir au format pdf, html ou csv."""
        output_dir.mkdir(parents=True, exist_ok=True)
        chemin = output_dir / f"{self.nom_fichier}-{self.date_generation.isoformat()}.{format}"
        if format == "pdf":
            return self.to_pdf(chemin)
        if format == "csv":
            return self.to_csv(chemin)
        if format == "html":
            chemin.write_text(self.to_html(), encoding="utf-8")
            return chemin
        raise ValueError(f"Format de fiche inconnu: {format}")
