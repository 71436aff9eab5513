#!/usr/bin/env python3
"""
Gestionnaire de client HTTP persistant avec pattern Singleton.

Ce module maintient un unique httpx.Client réutilisé par tous les appels
à l'API Smite (connexions keep-alive). Le client ne porte aucun état
propre à l'API : pas de credentials, pas de session, pas de cache.

Exemple :
    ```python
    from http_client_manager import get_http_client

    client = get_http_client(timeout=10)
    response = client.get("http://api.smitegame.com/smiteapi.svc/pingjson")
    ```

La fermeture est enregistrée via atexit.
"""

import atexit
import threading
from typing import Optional

import httpx
from loguru import logger

from config.timeouts import TimeoutConfig


class HTTPClientManager:
    """
    Gestionnaire singleton pour le client HTTP synchrone persistant.

    Attributes:
        _instance (HTTPClientManager): Instance unique (niveau classe)
        _initialized (bool): Flag d'initialisation (évite double init)
        _sync_client (httpx.Client): Client HTTP synchrone
    """

    _instance: Optional["HTTPClientManager"] = None
    _initialized: bool = False
    _lock = threading.Lock()

    def __new__(cls) -> "HTTPClientManager":
        """Pattern Singleton thread-safe pour garantir une seule instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:  # Double-check pattern
                    cls._instance = super(HTTPClientManager, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialise le gestionnaire (une seule fois)."""
        if HTTPClientManager._initialized:
            return

        self._sync_client: Optional[httpx.Client] = None
        self._timeout: Optional[float] = None

        atexit.register(self.close_all)

        HTTPClientManager._initialized = True

    def get_sync_client(self, timeout: float = TimeoutConfig.DEFAULT) -> httpx.Client:
        """
        Retourne le client HTTP synchrone persistant.

        Le client est recréé si le timeout demandé diffère de celui
        du client existant.

        Args:
            timeout: Timeout en secondes

        Returns:
            httpx.Client: Client HTTP synchrone réutilisable
        """
        if (
            self._sync_client is None
            or self._sync_client.is_closed
            or self._timeout != timeout
        ):
            self.close_sync_client()
            self._sync_client = httpx.Client(
                timeout=timeout,
                limits=httpx.Limits(
                    max_keepalive_connections=5,
                    max_connections=10,
                    keepalive_expiry=TimeoutConfig.KEEPALIVE_EXPIRY,
                ),
            )
            self._timeout = timeout
            logger.debug(f"🔗 Client HTTP synchrone créé (timeout={timeout}s)")

        return self._sync_client

    def close_sync_client(self):
        """Ferme le client HTTP synchrone."""
        if self._sync_client is not None and not self._sync_client.is_closed:
            self._sync_client.close()
            logger.debug("🔌 Client HTTP synchrone fermé")

    def close_all(self):
        """Ferme tous les clients HTTP (appelé par atexit)."""
        self.close_sync_client()


# Instance lazy du gestionnaire
_http_manager: Optional[HTTPClientManager] = None


def _get_manager() -> HTTPClientManager:
    """Obtient l'instance du gestionnaire HTTP de manière lazy."""
    global _http_manager
    if _http_manager is None:
        _http_manager = HTTPClientManager()
    return _http_manager


def get_http_client(timeout: float = TimeoutConfig.DEFAULT) -> httpx.Client:
    """
    Fonction de convenance pour obtenir le client HTTP synchrone persistant.

    Args:
        timeout: Timeout en secondes

    Returns:
        httpx.Client: Client HTTP synchrone réutilisable
    """
    return _get_manager().get_sync_client(timeout)


def close_all_http_clients():
    """Ferme le client HTTP. Utile pour un nettoyage explicite."""
    global _http_manager
    if _http_manager is not None:
        _http_manager.close_all()
        _http_manager = None
