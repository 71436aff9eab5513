#!/usr/bin/env python3
"""
Configuration centralisée des URLs pour le client Smite.

Import :
    from config.urls import URLConfig

Utilisation :
    base = URLConfig.get_api_url()
    segment = URLConfig.method_segment("getgods")  # "getgodsjson"
"""

import os
from typing import Optional


class URLConfig:
    """
    Configuration centralisée des URLs.

    L'URL de base peut être surchargée via SMITE_API_URL.
    """

    # ===== URL API SMITE =====

    SMITE_API_URL = os.getenv("SMITE_API_URL", "http://api.smitegame.com/smiteapi.svc")

    # ===== MÉTHODES =====

    # Méthode de handshake qui ouvre une session
    METHOD_CREATE_SESSION = "createsession"

    # Suffixe ajouté au nom de méthode pour obtenir une réponse JSON
    RESPONSE_FORMAT = "json"

    @classmethod
    def get_api_url(cls, override: Optional[str] = None) -> str:
        """
        Retourne l'URL de base de l'API, sans slash final.

        Args:
            override: URL à utiliser à la place de la valeur configurée

        Returns:
            str: URL de base de l'API
        """
        return (override or cls.SMITE_API_URL).rstrip("/")

    @classmethod
    def method_segment(cls, method_name: str) -> str:
        """Retourne le segment de chemin d'une méthode ("{method}json")."""
        return f"{method_name}{cls.RESPONSE_FORMAT}"
