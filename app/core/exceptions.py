"""
RFC 9457 Problem Details pour HTTP APIs - Exceptions de la clinique.

Ce module réexporte les exceptions du module fastapi-errors-rfc9457 et
ajoute les erreurs propres à la couche de persistance.
"""

from fastapi_errors_rfc9457 import (
    ConflictError,
    NotFoundError,
    ProblemDetail,
    RFC9457Exception,
    ServiceUnavailableError,
    ValidationError,
)


class StoreUnavailableError(ServiceUnavailableError):
    """
    Exception levée lorsque la base de données est indisponible ou qu'une
    transaction échoue pour une raison autre qu'une contrainte d'unicité.

    La transaction en cours est annulée avant la levée de l'exception:
    aucune écriture partielle ne subsiste. L'appelant peut rejouer
    l'opération complète.

    Attributes:
        status_code: Code HTTP 503 (Service Unavailable)
        problem_detail: Détails de l'erreur au format RFC 9457

    Example:
        ```python
        try:
            await session.flush()
        except OperationalError as e:
            raise StoreUnavailableError(detail="Database timeout") from e
        ```
    """

    def __init__(
        self,
        detail: str = "Entity store is unavailable",
        instance: str | None = None,
        retry_after: int | None = None,
    ):
        """
        Initialise une exception de store avec détails RFC 9457.

        Args:
            detail: Description détaillée de l'erreur
            instance: URI identifiant l'occurrence spécifique de l'erreur
            retry_after: Nombre de secondes avant de réessayer (optionnel)
        """
        super().__init__(
            detail=detail,
            retry_after=retry_after,
            instance=instance,
        )


__all__ = [
    "ConflictError",
    "NotFoundError",
    "ProblemDetail",
    "RFC9457Exception",
    "ServiceUnavailableError",
    "StoreUnavailableError",
    "ValidationError",
]
