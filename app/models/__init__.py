# Modèles SQLAlchemy pour clinic-api
#
# - Doctor / Patient: dossiers avec soft delete (is_active)
# - Address: valeur embarquée (composite), pas de table propre
# - User: identifiants de connexion, en lecture seule pour ce service

from .address import Address
from .doctor import Doctor, Specialty
from .patient import Patient
from .user import User

__all__ = [
    "Address",
    "Doctor",
    "Patient",
    "Specialty",
    "User",
]
