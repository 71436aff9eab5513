#!/usr/bin/env python3
"""
Signature MD5 et horodatage pour l'API Smite.

Ce module gère :
- Génération de l'horodatage UTC au format YYYYMMDDHHMMSS
- Génération des signatures MD5 exigées par chaque appel
- Correction calendaire de l'horodatage des sessions

Format de la signature :
    md5(dev_id + method_name + auth_token + timestamp) en hexadécimal minuscule

Exemple :
    dev_id = "1004"
    method_name = "createsession"
    auth_token = "23DF3C7E9BD14D84BF892AD206B6755C"
    timestamp = "20120927183145"
    → payload = "1004createsession23DF3C7E9BD14D84BF892AD206B6755C20120927183145"
    → signature = "8f53249be0922c94720834771ad43f0f"
"""

import hashlib
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from config.constants import (
    SESSION_TIMESTAMP_OFFSET_SECONDS,
    TIMESTAMP_FORMAT,
    TIMESTAMP_LENGTH,
)
from config.credentials import Credentials
from exceptions import CredentialReadError


def _utcnow() -> datetime:
    """Lit l'horloge système en UTC."""
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """
    Formate un instant au format YYYYMMDDHHMMSS (UTC).

    Un datetime naïf est considéré comme déjà exprimé en UTC.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """
    Convertit un horodatage YYYYMMDDHHMMSS en datetime UTC.

    Raises:
        ValueError: Si la valeur n'est pas un horodatage valide de 14 chiffres
    """
    if not isinstance(value, str) or len(value) != TIMESTAMP_LENGTH or not value.isdigit():
        raise ValueError(f"Horodatage invalide (YYYYMMDDHHMMSS attendu): {value!r}")
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def current_timestamp() -> str:
    """Retourne l'heure UTC courante au format YYYYMMDDHHMMSS."""
    return format_timestamp(_utcnow())


def corrected_session_timestamp(now: Optional[datetime] = None) -> str:
    """
    Horodatage local d'une session : instant courant moins 15 secondes.

    La soustraction est faite sur l'instant et non sur l'entier
    YYYYMMDDHHMMSS, pour que la retenue se propage correctement
    (12:00:05 → 11:59:50 et non 11:99:90).

    Args:
        now: Instant de référence (horloge système par défaut)

    Returns:
        str: Horodatage corrigé au format YYYYMMDDHHMMSS
    """
    if now is None:
        now = _utcnow()
    return format_timestamp(now - timedelta(seconds=SESSION_TIMESTAMP_OFFSET_SECONDS))


def make_signature(dev_id: str, method_name: str, auth_token: str, timestamp: str) -> str:
    """
    Génère la signature MD5 d'un appel.

    L'ordre de concaténation, la casse et l'algorithme font partie du
    contrat avec le serveur, qui recalcule la signature de son côté.

    Args:
        dev_id: Identifiant développeur
        method_name: Nom de la méthode appelée (ex: "createsession")
        auth_token: Clé d'authentification
        timestamp: Horodatage UTC YYYYMMDDHHMMSS

    Returns:
        str: Signature MD5 en hexadécimal minuscule (32 caractères)
    """
    payload = f"{dev_id}{method_name}{auth_token}{timestamp}"
    return hashlib.md5(payload.encode("utf-8")).hexdigest()


class SmiteAuthenticator:
    """
    Signe les appels à l'API Smite avec les credentials fournis.

    Chaque appel à sign() lit l'horloge : une signature n'est jamais
    réutilisée d'un appel à l'autre.
    """

    PLACEHOLDER_VALUES = {"your_dev_id_here", "your_auth_token_here"}

    def __init__(self, credentials: Credentials):
        """
        Initialise l'authenticator.

        Raises:
            CredentialReadError: Si les credentials sont vides ou placeholder
        """
        self.validate_credentials(credentials)
        self.credentials = credentials

    @classmethod
    def validate_credentials(cls, credentials: Credentials):
        """
        Valide les credentials (ni vides, ni valeurs placeholder).

        Raises:
            CredentialReadError: Si les credentials sont inutilisables
        """
        if credentials is None or not credentials.dev_id or not credentials.auth_token:
            raise CredentialReadError(
                "🔐 Credentials manquants : renseignez dev_id et token dans "
                "resources/token.json (ou SMITE_DEV_ID / SMITE_AUTH_TOKEN)."
            )
        if (
            credentials.dev_id in cls.PLACEHOLDER_VALUES
            or credentials.auth_token in cls.PLACEHOLDER_VALUES
        ):
            raise CredentialReadError(
                "🔐 Les credentials utilisent les valeurs placeholder par défaut."
            )

    def sign(self, method_name: str) -> Tuple[str, str]:
        """
        Signe un appel avec l'horodatage courant.

        Args:
            method_name: Nom de la méthode appelée

        Returns:
            tuple[str, str]: (signature, horodatage utilisé pour la signature)
        """
        timestamp = current_timestamp()
        signature = make_signature(
            self.credentials.dev_id,
            method_name,
            self.credentials.auth_token,
            timestamp,
        )
        return signature, timestamp
