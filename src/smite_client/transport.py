#!/usr/bin/env python3
"""
Transport HTTP générique : GET d'une URL, corps retourné en texte.

Aucune logique propre à l'API ici, ni retry, ni cache : le timeout est
la seule politique appliquée.
"""

from typing import Optional

import httpx

from config.timeouts import TimeoutConfig
from http_client_manager import get_http_client

from .error_handler import SmiteErrorHandler

_error_handler = SmiteErrorHandler()


def fetch_json(link: str, timeout: Optional[float] = None) -> str:
    """
    Effectue un GET et retourne le corps brut de la réponse.

    Args:
        link: URL complète (signée)
        timeout: Timeout en secondes (TimeoutConfig.HTTP_REQUEST par défaut)

    Returns:
        str: Corps de la réponse

    Raises:
        TransportError: Erreur réseau, timeout ou statut non 2xx
    """
    client = get_http_client(timeout or TimeoutConfig.HTTP_REQUEST)
    try:
        response = client.get(link)
    except httpx.RequestError as e:
        raise _error_handler.transport_error_from_exception(e) from e

    _error_handler.handle_http_response(response)
    return response.text
