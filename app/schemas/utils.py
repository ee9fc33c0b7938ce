"""Annotations Pydantic réutilisables pour validation.

Ce module centralise les types annotés pour assurer la cohérence
de la validation à travers tous les schémas Pydantic du service.
"""

from typing import Annotated

from pydantic import AfterValidator, EmailStr, Field, StringConstraints

# Chaînes avec contraintes
NonEmptyStr = Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]

# Identifiants
EntityId = Annotated[int, Field(gt=0, description="Identifiant attribué par le store")]

Email = Annotated[EmailStr, Field(description="Adresse email valide")]

# Numéro d'inscription au Conseil régional de médecine (CRM)
RegistrationNumber = Annotated[
    str,
    StringConstraints(pattern=r"^\d{4,6}$", strip_whitespace=True),
    Field(description="Numéro CRM (4 à 6 chiffres)", examples=["12345"]),
]

def digits_only(value: str) -> str:
    """Retire la ponctuation: "123.456.789-09" -> "12345678909"."""
    return "".join(char for char in value if char.isdigit())


# CPF, saisi avec ou sans ponctuation, stocké sur ses 11 chiffres
NationalId = Annotated[
    str,
    StringConstraints(pattern=r"^\d{3}\.?\d{3}\.?\d{3}-?\d{2}$", strip_whitespace=True),
    AfterValidator(digits_only),
    Field(description="Numéro CPF", examples=["123.456.789-09", "12345678909"]),
]

# CEP brésilien (8 chiffres)
PostalCode = Annotated[
    str,
    StringConstraints(pattern=r"^\d{8}$", strip_whitespace=True),
    Field(description="CEP (8 chiffres)", examples=["01310100"]),
]

# Unité fédérative (UF)
StateCode = Annotated[
    str,
    StringConstraints(pattern=r"^[A-Za-z]{2}$", strip_whitespace=True, to_upper=True),
    Field(description="UF sur deux lettres", examples=["SP"]),
]
