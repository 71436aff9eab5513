#!/usr/bin/env python3
"""
Gestion des erreurs pour le client Smite.

Ce module gère :
- Sanitization des messages d'erreur (masquage signatures et clés)
- Conversion des erreurs httpx et des statuts HTTP en TransportError
- Décodage JSON strict (MalformedResponse)
"""

import json
import re
from typing import Any

import httpx

from exceptions import MalformedResponse, TransportError


def sanitize_error_message(message: str) -> str:
    """
    Nettoie un message d'erreur pour éviter fuite de credentials.

    Filtre :
    - Signatures MD5 et clés d'authentification (hex 32 chars)
    - Clés alphanumériques longues (20-40 chars)

    Args:
        message: Message d'erreur à nettoyer

    Returns:
        str: Message nettoyé
    """
    if not isinstance(message, str):
        return str(message)

    message = re.sub(r'\b[A-Fa-f0-9]{32}\b', '***SIGNATURE***', message)
    message = re.sub(r'\b[A-Za-z0-9]{20,40}\b', '***API_KEY***', message)

    return message


class SmiteErrorHandler:
    """
    Gestionnaire d'erreurs pour le client Smite.

    Aucune erreur n'est retentée ni avalée : chaque méthode lève
    ou retourne l'exception à propager.
    """

    def __init__(self, logger=None):
        self.logger = logger

    def handle_http_response(self, response: httpx.Response):
        """
        Vérifie le statut HTTP d'une réponse.

        Raises:
            TransportError: Pour tout statut hors 2xx
        """
        if 200 <= response.status_code < 300:
            return

        detail = sanitize_error_message((response.text or "")[:100])
        raise TransportError(
            f'Erreur HTTP Smite: status={response.status_code} detail="{detail}"',
            status_code=response.status_code,
        )

    def transport_error_from_exception(self, error: httpx.RequestError) -> TransportError:
        """
        Convertit une erreur httpx (connexion, timeout...) en TransportError.

        Returns:
            TransportError: Exception à lever (avec `from error`)
        """
        if isinstance(error, httpx.TimeoutException):
            kind = "Timeout"
        elif isinstance(error, httpx.ConnectError):
            kind = "Connexion impossible"
        else:
            kind = "Erreur réseau"
        return TransportError(f"{kind} Smite: {sanitize_error_message(str(error))}")

    def parse_json_body(self, body: str) -> Any:
        """
        Décode un corps de réponse JSON.

        Raises:
            MalformedResponse: Si le corps n'est pas du JSON valide
        """
        try:
            return json.loads(body)
        except (TypeError, ValueError) as e:
            preview = sanitize_error_message(str(body)[:100])
            raise MalformedResponse(
                f'Réponse Smite non JSON: {e} body="{preview}"'
            ) from e
