#!/usr/bin/env python3
"""
Validateur de variables d'environnement pour le client Smite.

Ce module détecte et signale les variables d'environnement inconnues
pour aider à identifier les fautes de frappe.
"""

import os
import sys
from typing import Set


# Variables d'environnement valides pour la configuration
VALID_ENV_VARS = {
    "SMITE_API_URL",
    "SMITE_DEV_ID",
    "SMITE_AUTH_TOKEN",
    "SMITE_CREDENTIALS_PATH",
    "SMITE_PARAMETERS_FILE",
    "TIMEOUT",
    "TIMEOUT_DEFAULT",
    "TIMEOUT_HTTP_REQUEST",
    "TIMEOUT_KEEPALIVE_EXPIRY",
    "LOG_LEVEL",
    "LOG_DIR",
    "LOG_FILE",
    "LOG_ROTATION",
    "LOG_RETENTION",
    "LOG_COMPRESSION",
}

# Préfixes de variables système à ignorer
SYSTEM_PREFIXES = [
    "PATH", "PYTHON", "USER", "HOME", "TEMP", "TMP", "VIRTUAL_ENV",
    "CONDA", "PIP", "GIT", "SSH", "DOCKER", "PYTEST",
]

# Mots-clés liés au client
CLIENT_KEYWORDS = ["SMITE", "HIREZ", "DEV_ID", "AUTH_TOKEN"]


def is_system_variable(var_name: str) -> bool:
    """
    Vérifie si une variable d'environnement est une variable système.

    Args:
        var_name: Nom de la variable

    Returns:
        bool: True si c'est une variable système
    """
    return any(var_name.upper().startswith(prefix) for prefix in SYSTEM_PREFIXES)


def is_client_related(var_name: str) -> bool:
    """Vérifie si une variable d'environnement semble liée au client."""
    return any(keyword in var_name.upper() for keyword in CLIENT_KEYWORDS)


def find_unknown_client_variables() -> Set[str]:
    """
    Trouve toutes les variables d'environnement inconnues liées au client.

    Returns:
        Set[str]: Ensemble des variables inconnues liées au client
    """
    unknown_vars = set(os.environ.keys()) - VALID_ENV_VARS
    return {
        var
        for var in unknown_vars
        if not is_system_variable(var) and is_client_related(var)
    }


def validate_environment_variables() -> None:
    """
    Affiche un avertissement sur stderr pour chaque variable inconnue
    liée au client (fautes de frappe typiques : SMITE_DEVID, SMITE_TOKEN...).
    """
    unknown = find_unknown_client_variables()
    if not unknown:
        return

    for var in sorted(unknown):
        print(
            f"⚠️ Variable d'environnement inconnue ignorée: {var}",
            file=sys.stderr,
        )

    valid_vars_str = ", ".join(sorted(VALID_ENV_VARS))
    print(f"💡 Variables valides: {valid_vars_str}", file=sys.stderr)
