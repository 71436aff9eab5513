#!/usr/bin/env python3
"""
Construction des liens signés vers l'API Smite.

Formats :
    Session : {base}/createsessionjson/{dev_id}/{signature}/{timestamp}
    Méthode : {base}/{method}json/{dev_id}/{signature}/{session_id}/{query_timestamp}

Le query_timestamp désigne l'instantané de données demandé ; il est
transmis tel quel et n'a aucun rapport avec l'horodatage de la signature.
"""

from typing import Optional

from config.credentials import Credentials
from config.urls import URLConfig

from .auth import SmiteAuthenticator


class LinkBuilder:
    """
    Compose les URLs signées pour un jeu de credentials.

    Le nom de méthode n'est pas validé : un nom inconnu produit un lien
    que le serveur rejettera.

    Attributes:
        credentials (Credentials): Credentials utilisés pour signer
        base_url (str): URL de base de l'API, sans slash final
    """

    def __init__(self, credentials: Credentials, base_url: Optional[str] = None):
        self._authenticator = SmiteAuthenticator(credentials)
        self.credentials = credentials
        self.base_url = URLConfig.get_api_url(base_url)

    def build_session_link(self) -> str:
        """Retourne le lien de création de session, signé maintenant."""
        method = URLConfig.METHOD_CREATE_SESSION
        signature, timestamp = self._authenticator.sign(method)
        return (
            f"{self.base_url}/{URLConfig.method_segment(method)}/"
            f"{self.credentials.dev_id}/{signature}/{timestamp}"
        )

    def build_method_link(self, method_name: str, session_id: str, query_timestamp: str) -> str:
        """
        Retourne le lien d'appel d'une méthode authentifiée.

        Args:
            method_name: Nom de la méthode (ex: "getgods")
            session_id: Identifiant de session obtenu via createsession
            query_timestamp: Instantané de données demandé (YYYYMMDDHHMMSS)

        Returns:
            str: URL complète
        """
        signature, _ = self._authenticator.sign(method_name)
        return (
            f"{self.base_url}/{URLConfig.method_segment(method_name)}/"
            f"{self.credentials.dev_id}/{signature}/{session_id}/{query_timestamp}"
        )


def build_session_link(credentials: Credentials, base_url: Optional[str] = None) -> str:
    """Raccourci fonctionnel de LinkBuilder.build_session_link()."""
    return LinkBuilder(credentials, base_url).build_session_link()


def build_method_link(
    method_name: str,
    credentials: Credentials,
    session_id: str,
    query_timestamp: str,
    base_url: Optional[str] = None,
) -> str:
    """Raccourci fonctionnel de LinkBuilder.build_method_link()."""
    return LinkBuilder(credentials, base_url).build_method_link(
        method_name, session_id, query_timestamp
    )
