#!/usr/bin/env python3
"""
Magasin de credentials pour l'API Smite.

Le fichier de credentials (par défaut resources/token.json) ne contient
que deux champs :

    {"dev_id": "1234", "token": "ABCDEF0123456789"}

Les credentials sont chargés une seule fois au démarrage puis passés
explicitement à chaque composant qui en a besoin. Ce module ne les écrit
jamais.
"""

import json
from dataclasses import dataclass, field
from typing import Optional

from exceptions import CredentialReadError
from file_utils import read_file_to_string

from .constants import (
    CREDENTIAL_FIELD_DEV_ID,
    CREDENTIAL_FIELD_TOKEN,
    DEFAULT_CREDENTIALS_PATH,
)


@dataclass(frozen=True)
class Credentials:
    """
    Identifiant développeur et clé d'authentification.

    Attributes:
        dev_id: Identifiant développeur attribué par Hi-Rez
        auth_token: Clé d'authentification (secret partagé)
    """

    dev_id: str
    auth_token: str = field(repr=False)

    def __repr__(self) -> str:
        return f"Credentials(dev_id={self.dev_id!r}, auth_token='***')"


def _read_field(payload: dict, key: str, path: str) -> str:
    """Extrait un champ obligatoire non vide du fichier de credentials."""
    value = payload.get(key)
    # Les identifiants développeur sont parfois stockés en nombre
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise CredentialReadError(
            f"Champ '{key}' manquant ou vide dans le fichier de credentials {path}"
        )
    return value.strip()


def _strip_env_value(value) -> Optional[str]:
    """Nettoie une valeur d'environnement ; vide ou blanche devient None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def load_credentials(path: str = DEFAULT_CREDENTIALS_PATH) -> Credentials:
    """
    Lit et valide le fichier de credentials.

    Args:
        path: Chemin du fichier JSON

    Returns:
        Credentials: Credentials immuables

    Raises:
        CredentialReadError: Fichier absent, illisible, JSON invalide
            ou champ manquant
    """
    try:
        contents = read_file_to_string(path)
    except OSError as e:
        raise CredentialReadError(
            f"Impossible de lire le fichier de credentials {path}: {e}"
        ) from e

    try:
        payload = json.loads(contents)
    except json.JSONDecodeError as e:
        raise CredentialReadError(
            f"Fichier de credentials {path} invalide (JSON): {e.msg}"
        ) from e

    if not isinstance(payload, dict):
        raise CredentialReadError(
            f"Fichier de credentials {path} invalide : objet JSON attendu"
        )

    return Credentials(
        dev_id=_read_field(payload, CREDENTIAL_FIELD_DEV_ID, path),
        auth_token=_read_field(payload, CREDENTIAL_FIELD_TOKEN, path),
    )


def resolve_credentials(settings: dict, path: Optional[str] = None) -> Credentials:
    """
    Résout les credentials à partir des settings.

    Un chemin explicite est toujours lu. Sinon SMITE_DEV_ID et
    SMITE_AUTH_TOKEN sont prioritaires lorsqu'ils sont tous les deux
    non vides (espaces retirés), et à défaut le fichier
    settings["credentials_path"] est lu.

    Args:
        settings: Dictionnaire retourné par get_settings()
        path: Chemin explicite du fichier de credentials

    Returns:
        Credentials: Credentials immuables

    Raises:
        CredentialReadError: Si aucune source valide n'est disponible
    """
    if path:
        return load_credentials(path)

    dev_id = _strip_env_value(settings.get("dev_id"))
    auth_token = _strip_env_value(settings.get("auth_token"))
    if dev_id and auth_token:
        return Credentials(dev_id=dev_id, auth_token=auth_token)

    return load_credentials(settings.get("credentials_path") or DEFAULT_CREDENTIALS_PATH)
