#!/usr/bin/env python3
"""
Configuration centralisée des timeouts pour le client Smite.

Le cœur du client n'impose aucun timeout : c'est le transport HTTP
qui les applique.

Import :
    from config.timeouts import TimeoutConfig

Utilisation :
    client = get_http_client(timeout=TimeoutConfig.HTTP_REQUEST)
"""

import os


class TimeoutConfig:
    """
    Configuration centralisée des timeouts.

    Tous les timeouts sont en secondes.
    Les valeurs peuvent être surchargées via les variables d'environnement.
    """

    # Timeout par défaut pour les requêtes HTTP standard
    DEFAULT = int(os.getenv("TIMEOUT_DEFAULT", "10"))

    # Timeout pour les appels à l'API Smite
    HTTP_REQUEST = int(os.getenv("TIMEOUT_HTTP_REQUEST", "15"))

    # Expiration des connexions keep-alive inactives
    KEEPALIVE_EXPIRY = float(os.getenv("TIMEOUT_KEEPALIVE_EXPIRY", "30.0"))
