"""Resolution d'un identifiant de connexion vers un principal.

Appele par l'authentificateur externe a chaque tentative de connexion.
Lecture seule, sans effet de bord. La comparaison du secret et la
distinction "mauvais mot de passe" / "utilisateur inconnu" appartiennent
a l'authentificateur.
"""

import logging

from opentelemetry import trace

from app.core.exceptions import NotFoundError
from app.models.user import User
from app.repositories.entity_store import EntityStore
from app.schemas.credential import Principal

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class CredentialService:
    """Lookup des principaux par login."""

    def __init__(self, store: EntityStore[User]):
        self.store = store

    async def lookup(self, login: str) -> Principal:
        """
        Retourne le principal correspondant au login.

        Args:
            login: Identifiant de connexion saisi

        Returns:
            Principal (login, secret opaque, role)

        Raises:
            NotFoundError: Si aucun principal ne porte ce login
        """
        with tracer.start_as_current_span("lookup_principal") as span:
            user = await self.store.find_one_by("login", login) if login else None

            if user is None:
                span.add_event("Principal non trouve")
                logger.debug("Credential lookup returned no principal")
                raise NotFoundError(detail="Principal not found", resource_type="principal")

            span.add_event("Principal trouve")
            return Principal(login=user.login, secret=user.password, role=user.role)
