"""Point d'entrée en ligne de commande du client Smite."""

import argparse
import atexit
import sys

try:
    from .config import DEFAULT_LOG_LEVEL, get_settings, resolve_credentials
    from .exceptions import (
        ConfigurationError,
        CredentialReadError,
        MalformedResponse,
        SmiteClientError,
        TransportError,
    )
    from .file_utils import write_string_to_file
    from .http_client_manager import close_all_http_clients
    from .logging_setup import setup_logging
    from .smite_client import SmiteClient
except ImportError:
    from config import DEFAULT_LOG_LEVEL, get_settings, resolve_credentials
    from exceptions import (
        ConfigurationError,
        CredentialReadError,
        MalformedResponse,
        SmiteClientError,
        TransportError,
    )
    from file_utils import write_string_to_file
    from http_client_manager import close_all_http_clients
    from logging_setup import setup_logging
    from smite_client import SmiteClient


def build_parser() -> argparse.ArgumentParser:
    """Construit le parser des sous-commandes."""
    parser = argparse.ArgumentParser(description="Client de l'API Smite")
    parser.add_argument("--credentials", help="Chemin du fichier token.json")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("session", help="Crée une session et l'affiche")

    link = subparsers.add_parser("link", help="Affiche un lien signé")
    link.add_argument("method", help="Nom de la méthode (ex: getgods)")
    link.add_argument("session_id", help="Identifiant de session")
    link.add_argument("query_timestamp", help="Instantané demandé (YYYYMMDDHHMMSS)")

    call = subparsers.add_parser("call", help="Crée une session puis appelle une méthode")
    call.add_argument("method", help="Nom de la méthode (ex: getgods)")
    call.add_argument("--timestamp", help="Instantané demandé (défaut: horodatage de la session)")
    call.add_argument("--output", help="Fichier où écrire la réponse brute")

    return parser


def run(args, client: SmiteClient, logger) -> None:
    """Exécute la sous-commande demandée."""
    if args.command == "link":
        print(client.create_link(args.method, args.session_id, args.query_timestamp))
        return

    logger.info("🔐 Création de la session Smite…")
    session = client.make_session()
    logger.info(f"✅ Session établie (timestamp={session.timestamp})")

    if args.command == "session":
        print(f"{session.id} {session.timestamp}")
        return

    body = client.call_method(args.method, session, args.timestamp)
    if args.output:
        write_string_to_file(args.output, body)
        logger.info(f"💾 Réponse {args.method} écrite dans {args.output}")
    else:
        print(body)


def main(argv=None) -> int:
    """Fonction principale ; retourne le code de sortie."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        logger = setup_logging(DEFAULT_LOG_LEVEL)
        logger.error(f"⛔ Configuration : {e}")
        return 1

    logger = setup_logging(settings["log_level"])

    atexit.register(close_all_http_clients)

    try:
        credentials = resolve_credentials(settings, args.credentials)
        client = SmiteClient(
            credentials,
            base_url=settings["base_url"],
            timeout=settings["timeout"],
            logger=logger,
        )
        run(args, client, logger)
    except CredentialReadError as e:
        logger.error(f"⛔ Credentials : {e}")
        return 1
    except TransportError as e:
        logger.error(f"⛔ Erreur réseau/HTTP Smite : {e}")
        return 1
    except MalformedResponse as e:
        logger.error(f"⛔ Réponse inattendue de l'API : {e}")
        return 1
    except SmiteClientError as e:
        logger.error(f"⛔ {e}")
        return 1
    except OSError as e:
        logger.error(f"⛔ Écriture impossible : {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
