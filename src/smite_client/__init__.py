#!/usr/bin/env python3
"""
Client pour l'API statistiques de Smite (Hi-Rez).

Chaque appel porte une signature MD5 horodatée ; la plupart exigent en
plus une session obtenue via createsession.

Exemple d'utilisation :
    ```python
    from config import load_credentials
    from smite_client import SmiteClient

    client = SmiteClient(load_credentials("resources/token.json"))
    session = client.make_session()
    link = client.create_link("getgods", session.id, session.timestamp)
    ```
"""

from .auth import (
    SmiteAuthenticator,
    corrected_session_timestamp,
    current_timestamp,
    format_timestamp,
    make_signature,
    parse_timestamp,
)
from .client import SmiteClient
from .links import LinkBuilder, build_method_link, build_session_link
from .session import Session, SessionManager, SessionState
from .transport import fetch_json

__all__ = [
    "SmiteClient",
    "SmiteAuthenticator",
    "LinkBuilder",
    "Session",
    "SessionManager",
    "SessionState",
    "build_method_link",
    "build_session_link",
    "corrected_session_timestamp",
    "current_timestamp",
    "fetch_json",
    "format_timestamp",
    "make_signature",
    "parse_timestamp",
]
