#!/usr/bin/env python3
"""
Chargeur de settings depuis les variables d'environnement.

Ce module récupère et convertit les variables d'environnement en
paramètres de configuration typés. Ordre de priorité :
variable d'environnement > section "smite" de parameters.yaml > défaut.
"""

import os
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv

from exceptions import ConfigurationError

from .constants import (
    DEFAULT_CREDENTIALS_PATH,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PARAMETERS_FILE,
)
from .env_validator import validate_environment_variables
from .urls import URLConfig

# Charger les variables d'environnement depuis le fichier .env
load_dotenv()


def safe_int(value) -> Optional[int]:
    """
    Convertit une valeur en int de manière sécurisée.

    Args:
        value: Valeur à convertir

    Returns:
        int ou None si la conversion échoue
    """
    try:
        return int(value) if value not in (None, "") else None
    except (ValueError, TypeError):
        return None


def load_yaml_parameters(path: Optional[str] = None) -> Dict:
    """
    Charge la section "smite" du fichier de paramètres YAML.

    Un fichier absent n'est pas une erreur : la configuration se rabat
    sur les variables d'environnement et les valeurs par défaut. Un fichier
    illisible ou un YAML invalide est en revanche signalé.

    Args:
        path: Chemin du fichier (SMITE_PARAMETERS_FILE ou défaut)

    Returns:
        dict: Section "smite" ou dictionnaire vide

    Raises:
        ConfigurationError: Fichier illisible ou YAML invalide
    """
    path = path or os.getenv("SMITE_PARAMETERS_FILE", DEFAULT_PARAMETERS_FILE)
    try:
        with open(path, "r", encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Fichier de paramètres {path} invalide (YAML): {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Impossible de lire le fichier de paramètres {path}: {e}") from e

    section = yaml_config.get("smite") if isinstance(yaml_config, dict) else None
    return section if isinstance(section, dict) else {}


def get_settings() -> Dict:
    """
    Retourne un dictionnaire avec les paramètres de configuration.

    Cette fonction :
    1. Valide les noms des variables d'environnement (fautes de frappe)
    2. Charge parameters.yaml pour les valeurs par défaut du projet
    3. Applique les surcharges d'environnement
    4. Retourne un dictionnaire typé

    Les credentials d'environnement (SMITE_DEV_ID, SMITE_AUTH_TOKEN) sont
    renvoyés sans espaces superflus, valeurs vides converties en None.
    La lecture du fichier de credentials relève de config.credentials.

    Returns:
        dict: Dictionnaire contenant les paramètres de configuration
    """
    validate_environment_variables()

    smite_yaml = load_yaml_parameters()

    base_url = os.getenv("SMITE_API_URL") or smite_yaml.get("base_url")

    credentials_path = (
        os.getenv("SMITE_CREDENTIALS_PATH")
        or smite_yaml.get("credentials_path")
        or DEFAULT_CREDENTIALS_PATH
    )

    timeout = safe_int(os.getenv("TIMEOUT"))
    if timeout is None:
        timeout = safe_int(smite_yaml.get("timeout")) or DEFAULT_HTTP_TIMEOUT

    log_level = os.getenv("LOG_LEVEL") or smite_yaml.get("log_level") or DEFAULT_LOG_LEVEL

    return {
        "base_url": URLConfig.get_api_url(base_url),
        "credentials_path": credentials_path,
        "timeout": timeout,
        "log_level": str(log_level).upper(),
        "dev_id": os.getenv("SMITE_DEV_ID", "").strip() or None,
        "auth_token": os.getenv("SMITE_AUTH_TOKEN", "").strip() or None,
    }
