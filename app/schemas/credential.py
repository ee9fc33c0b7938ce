"""Schéma du principal retourné à l'authentificateur externe."""

from pydantic import BaseModel, Field, SecretStr


class Principal(BaseModel):
    """Identité authentifiable.

    Le secret reste opaque: ``SecretStr`` le masque dans ``repr`` et dans
    les sérialisations, la comparaison se fait hors de ce service.
    """

    login: str = Field(..., description="Identifiant de connexion")
    secret: SecretStr = Field(..., description="Secret haché stocké")
    role: str = Field(..., description="Rôle / permission")
