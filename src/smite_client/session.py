#!/usr/bin/env python3
"""
Création des sessions Smite.

Cycle de vie d'un appel à create_session() :

    UNINITIALIZED → REQUESTING → ESTABLISHED

Il n'existe pas d'état de renouvellement : une nouvelle session exige
un nouvel appel complet. Une session reste valable 15 minutes au plus ;
cette limite n'est pas contrôlée ici, c'est à l'appelant de ne pas
utiliser une session expirée.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Callable, Optional

from config.constants import SESSION_LIFETIME_SECONDS
from config.credentials import Credentials
from exceptions import MalformedResponse

from .auth import _utcnow, corrected_session_timestamp, parse_timestamp
from .error_handler import SmiteErrorHandler, sanitize_error_message
from .links import LinkBuilder
from .transport import fetch_json


class SessionState(Enum):
    """États du gestionnaire de session."""

    UNINITIALIZED = "uninitialized"
    REQUESTING = "requesting"
    ESTABLISHED = "established"


@dataclass
class Session:
    """
    Session Smite.

    Attributes:
        id: Identifiant opaque de session
        timestamp: Horodatage local (YYYYMMDDHHMMSS) fixé à la création,
            et non la valeur renvoyée par le serveur
    """

    id: str
    timestamp: str

    # Le serveur nomme le champ "session_id"
    ID_FIELDS = ("id", "session_id")

    @classmethod
    def from_payload(cls, payload: Any) -> "Session":
        """
        Construit une session depuis la réponse JSON de createsession.

        Raises:
            MalformedResponse: Si la réponse n'a pas la forme attendue
        """
        if not isinstance(payload, dict):
            raise MalformedResponse(
                f"Réponse createsession invalide : objet JSON attendu, "
                f"{type(payload).__name__} reçu"
            )

        session_id = next(
            (payload[key] for key in cls.ID_FIELDS if payload.get(key)),
            None,
        )
        if not isinstance(session_id, str):
            ret_msg = payload.get("ret_msg")
            detail = f' ret_msg="{sanitize_error_message(ret_msg)}"' if ret_msg else ""
            raise MalformedResponse(
                f"Réponse createsession sans identifiant de session.{detail}"
            )

        timestamp = payload.get("timestamp")
        return cls(id=session_id, timestamp=timestamp if isinstance(timestamp, str) else "")

    def expires_at(self) -> datetime:
        """Instant (UTC) au-delà duquel la session n'est plus valable."""
        return parse_timestamp(self.timestamp) + timedelta(seconds=SESSION_LIFETIME_SECONDS)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Indique si la session a dépassé sa durée de vie (information seulement)."""
        return (now or _utcnow()) >= self.expires_at()


class SessionManager:
    """
    Orchestre la création d'une session.

    Le transport est un callable url → corps texte ; fetch_json par défaut.
    Aucune session n'est conservée : chaque session est retournée à
    l'appelant qui en est seul propriétaire.

    Attributes:
        state (SessionState): État du dernier appel à create_session()
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: Optional[Callable[[str], str]] = None,
        base_url: Optional[str] = None,
        logger=None,
    ):
        self.link_builder = LinkBuilder(credentials, base_url)
        self.transport = transport or fetch_json
        self.logger = logger
        self.state = SessionState.UNINITIALIZED
        self._error_handler = SmiteErrorHandler(logger)

    def create_session(self) -> Session:
        """
        Crée une session et corrige son horodatage.

        Returns:
            Session: Session établie, horodatée à maintenant - 15 s

        Raises:
            TransportError: Échec réseau ou statut HTTP non 2xx
            MalformedResponse: Réponse illisible ou sans identifiant
        """
        self.state = SessionState.REQUESTING
        try:
            link = self.link_builder.build_session_link()
            body = self.transport(link)
            session = Session.from_payload(self._error_handler.parse_json_body(body))
        except BaseException:
            # Toute erreur, y compris celle d'un transport injecté, annule la demande
            self.state = SessionState.UNINITIALIZED
            raise

        session.timestamp = corrected_session_timestamp()
        self.state = SessionState.ESTABLISHED

        if self.logger:
            self.logger.debug(f"🔑 Session Smite établie (timestamp={session.timestamp})")
        return session
