#!/usr/bin/env python3
"""
Exceptions personnalisées pour le client Smite.

Ce module définit les erreurs remontées à l'appelant par le client.
Aucune de ces erreurs n'est loggée ou avalée en interne : elles sont
toujours propagées.
"""

from typing import Optional


class SmiteClientError(Exception):
    """Exception de base pour toutes les erreurs du client."""
    pass


class CredentialReadError(SmiteClientError):
    """Fichier de credentials absent, illisible ou incomplet."""
    pass


class ConfigurationError(SmiteClientError):
    """Fichier de paramètres illisible ou YAML invalide."""
    pass


class TransportError(SmiteClientError):
    """
    Erreur réseau ou statut HTTP non 2xx.

    Attributes:
        status_code: Code HTTP si une réponse a été reçue, sinon None
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(SmiteClientError):
    """Le corps de la réponse ne correspond pas à la forme attendue."""
    pass
