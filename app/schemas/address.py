"""Schéma Pydantic pour l'adresse embarquée."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.address import Address
from app.schemas.utils import NonEmptyStr, PostalCode, StateCode


class AddressData(BaseModel):
    """Adresse complète; seul le complément est optionnel."""

    street: NonEmptyStr = Field(..., description="Logradouro", examples=["Rua das Flores"])
    number: NonEmptyStr = Field(..., description="Numéro", examples=["100"])
    complement: str | None = Field(None, max_length=100, description="Complément")
    neighborhood: NonEmptyStr = Field(..., description="Bairro", examples=["Centro"])
    city: NonEmptyStr = Field(..., description="Ville", examples=["São Paulo"])
    state: StateCode
    postal_code: PostalCode

    model_config = ConfigDict(from_attributes=True)

    def to_value(self) -> Address:
        """Convertit le schéma en valeur immuable persistable."""
        return Address(
            street=self.street,
            number=self.number,
            neighborhood=self.neighborhood,
            city=self.city,
            state=self.state,
            postal_code=self.postal_code,
            complement=self.complement or None,
        )
