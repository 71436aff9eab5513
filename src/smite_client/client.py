#!/usr/bin/env python3
"""
Client Smite : point d'entrée pour les appelants.

Ce client assemble les helpers spécialisés :
- smite_client.links.LinkBuilder pour les URLs signées
- smite_client.session.SessionManager pour le handshake createsession
- smite_client.transport.fetch_json pour les GET

Il ne met rien en cache, ne retente rien et ne limite pas le débit.
"""

from functools import partial
from typing import Any, Dict, Optional, Union

from config.credentials import Credentials, resolve_credentials
from config.settings_loader import get_settings

from . import auth
from .error_handler import SmiteErrorHandler
from .links import LinkBuilder
from .session import Session, SessionManager
from .transport import fetch_json


class SmiteClient:
    """
    Client pour l'API Smite.

    Attributes:
        credentials (Credentials): Credentials chargés une fois au démarrage
        base_url (str): URL de base de l'API
        timeout (float | None): Timeout des requêtes HTTP en secondes

    Example:
        ```python
        client = SmiteClient.from_settings()
        session = client.make_session()
        gods = client.call_method_json("getgods", session, "20230101000000")
        ```
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        logger=None,
    ):
        self.credentials = credentials
        self.timeout = timeout
        self.logger = logger
        self._links = LinkBuilder(credentials, base_url)
        self.base_url = self._links.base_url
        self._transport = partial(fetch_json, timeout=timeout)
        self._sessions = SessionManager(
            credentials,
            transport=self._transport,
            base_url=self.base_url,
            logger=logger,
        )
        self._error_handler = SmiteErrorHandler(logger)

    @classmethod
    def from_settings(cls, settings: Optional[Dict] = None, logger=None) -> "SmiteClient":
        """
        Construit un client depuis la configuration (env, .env, parameters.yaml).

        Raises:
            CredentialReadError: Si les credentials sont introuvables
        """
        settings = settings or get_settings()
        return cls(
            resolve_credentials(settings),
            base_url=settings.get("base_url"),
            timeout=settings.get("timeout"),
            logger=logger,
        )

    @staticmethod
    def current_timestamp() -> str:
        """Heure UTC courante au format YYYYMMDDHHMMSS."""
        return auth.current_timestamp()

    def make_session(self) -> Session:
        """
        Crée une session (valable 15 minutes).

        Raises:
            TransportError: Échec réseau ou statut HTTP non 2xx
            MalformedResponse: Réponse createsession invalide
        """
        return self._sessions.create_session()

    def create_link(self, method: str, session_id: str, query_timestamp: str) -> str:
        """Lien signé vers une méthode authentifiée."""
        return self._links.build_method_link(method, session_id, query_timestamp)

    def call_method(
        self,
        method: str,
        session: Union[Session, str],
        query_timestamp: Optional[str] = None,
    ) -> str:
        """
        Appelle une méthode et retourne le corps brut.

        Args:
            method: Nom de la méthode (ex: "getgods")
            session: Session ou identifiant de session
            query_timestamp: Instantané demandé ; par défaut l'horodatage
                de la session lorsque celle-ci est fournie

        Raises:
            ValueError: Sans query_timestamp pour un identifiant brut
            TransportError: Échec réseau ou statut HTTP non 2xx
        """
        if isinstance(session, Session):
            session_id = session.id
            query_timestamp = query_timestamp or session.timestamp
        else:
            session_id = session

        if not query_timestamp:
            raise ValueError("query_timestamp requis lorsque seul l'identifiant de session est fourni")

        link = self.create_link(method, session_id, query_timestamp)
        if self.logger:
            self.logger.debug(f"📡 Appel Smite {method}: {link}")
        return self._transport(link)

    def call_method_json(
        self,
        method: str,
        session: Union[Session, str],
        query_timestamp: Optional[str] = None,
    ) -> Any:
        """
        Appelle une méthode et décode la réponse JSON.

        Raises:
            TransportError: Échec réseau ou statut HTTP non 2xx
            MalformedResponse: Corps non JSON
        """
        return self._error_handler.parse_json_body(
            self.call_method(method, session, query_timestamp)
        )
