"""Valeur Address embarquée dans les dossiers médecin et patient.

Address n'a pas de table propre: ses colonnes vivent dans la table de
l'entité propriétaire et sont regroupées par ``composite()``.
"""

from dataclasses import dataclass

from sqlalchemy import String
from sqlalchemy.orm import composite, mapped_column


@dataclass(frozen=True)
class Address:
    """Adresse postale brésilienne (logradouro, bairro, UF, CEP).

    L'ordre des champs suit l'ordre des colonnes du composite.
    """

    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    postal_code: str
    complement: str | None = None


def address_composite():
    """Construit le mapping composite des colonnes d'adresse pour un modèle."""
    return composite(
        Address,
        mapped_column("street", String(100), nullable=False, comment="Logradouro"),
        mapped_column("number", String(20), nullable=False, comment="Numéro"),
        mapped_column("neighborhood", String(100), nullable=False, comment="Bairro"),
        mapped_column("city", String(100), nullable=False, comment="Ville"),
        mapped_column("state", String(2), nullable=False, comment="UF (deux lettres)"),
        mapped_column("postal_code", String(8), nullable=False, comment="CEP (8 chiffres)"),
        mapped_column("complement", String(100), nullable=True, comment="Complément"),
    )
