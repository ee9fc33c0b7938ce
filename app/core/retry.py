"""Module de retry avec backoff exponentiel pour opérations asynchrones.

Ce module fournit un décorateur de retry automatique avec backoff
exponentiel, utile pour gérer les erreurs transitoires du store
(timeouts DB, connexions perdues). Il n'est appliqué qu'aux lectures:
une écriture échouée est rejouée par l'appelant, jamais automatiquement.
"""

import logging
from collections.abc import Callable
from typing import Any

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


def async_retry_with_backoff(
    max_attempts: int = 3,
    min_wait_seconds: int = 1,
    max_wait_seconds: int = 10,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Décorateur pour retry automatique avec backoff exponentiel (async).

    Args:
        max_attempts: Nombre maximum de tentatives (défaut: 3)
        min_wait_seconds: Attente minimale entre tentatives en secondes (défaut: 1)
        max_wait_seconds: Attente maximale entre tentatives en secondes (défaut: 10)
        exceptions: Tuple des exceptions qui déclenchent un retry

    Returns:
        Décorateur de fonction

    Example:
        ```python
        @async_retry_with_backoff(max_attempts=3, exceptions=(StoreUnavailableError,))
        async def get_by_id(self, entity_id: int):
            return await self.session.get(self.model, entity_id)
        ```
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        return retry(
            retry=retry_if_exception_type(exceptions),
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential(
                min=min_wait_seconds,
                max=max_wait_seconds,
            ),
            before_sleep=_log_retry_attempt,
            reraise=True,
        )(func)

    return decorator


def _log_retry_attempt(retry_state: Any) -> None:
    """
    Logger les tentatives de retry pour observabilité.

    Args:
        retry_state: État de la tentative de retry
    """
    exception = retry_state.outcome.exception()
    logger.warning(
        f"Retry attempt {retry_state.attempt_number} after {retry_state.seconds_since_start:.2f}s "
        f"for {retry_state.fn.__name__} - Exception: {exception}"
    )
