"""Validation explicite des entrées avant toute mutation du store.

Les schémas Pydantic décrivent les contraintes; ce module les applique à
une charge utile brute et traduit les échecs en paires (champ, message)
puis en ``ValidationError`` RFC 9457.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

FieldError = tuple[str, str]


def _field_name(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def collect_field_errors(schema: type[BaseModel], payload: Mapping[str, Any]) -> list[FieldError]:
    """
    Valide une charge utile contre un schéma sans lever d'exception.

    Args:
        schema: Schéma Pydantic décrivant l'entrée
        payload: Données brutes (dict issu du transport)

    Returns:
        Liste de paires (champ, message); vide si l'entrée est valide
    """
    try:
        schema.model_validate(payload)
    except PydanticValidationError as exc:
        return [(_field_name(err["loc"]), err["msg"]) for err in exc.errors()]
    return []


def validate_input(schema: type[SchemaT], payload: SchemaT | Mapping[str, Any]) -> SchemaT:
    """
    Retourne l'entrée validée ou lève ``ValidationError`` avec le détail par champ.

    Une instance déjà construite du schéma a été validée à sa création et
    est retournée telle quelle.

    Raises:
        ValidationError: Si au moins une contrainte est violée
    """
    if isinstance(payload, schema):
        return payload

    field_errors = collect_field_errors(schema, payload)
    if field_errors:
        fields = ", ".join(sorted({field for field, _ in field_errors}))
        raise ValidationError(
            detail=f"Invalid {schema.__name__}: {fields}",
            errors=[
                {"loc": field.split("."), "msg": message, "type": "value_error"}
                for field, message in field_errors
            ],
        )

    return schema.model_validate(payload)
