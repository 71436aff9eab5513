#!/usr/bin/env python3
"""
Constantes du client Smite.

Ces valeurs font partie du contrat avec l'API distante : les modifier
casse la compatibilité des signatures ou des sessions.
"""

# ============================================================================
# HORODATAGE
# ============================================================================
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"  # YYYYMMDDHHMMSS, toujours en UTC
TIMESTAMP_LENGTH = 14

# ============================================================================
# SESSIONS
# ============================================================================
SESSION_LIFETIME_SECONDS = 15 * 60  # Une session expire après 15 minutes
SESSION_TIMESTAMP_OFFSET_SECONDS = 15  # Marge contre le décalage d'horloge

# ============================================================================
# SIGNATURE
# ============================================================================
SIGNATURE_LENGTH = 32  # MD5 en hexadécimal

# ============================================================================
# CREDENTIALS
# ============================================================================
DEFAULT_CREDENTIALS_PATH = "resources/token.json"
CREDENTIAL_FIELD_DEV_ID = "dev_id"
CREDENTIAL_FIELD_TOKEN = "token"

# ============================================================================
# PARAMÈTRES PAR DÉFAUT
# ============================================================================
DEFAULT_HTTP_TIMEOUT = 10  # secondes
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PARAMETERS_FILE = "src/parameters.yaml"
