#!/usr/bin/env python3
"""Utilitaires de lecture/écriture de fichiers texte."""

import os


def read_file_to_string(path: str) -> str:
    """
    Lit un fichier texte (UTF-8) et retourne son contenu.

    Raises:
        OSError: Si le fichier est absent ou illisible
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_string_to_file(path: str, data: str) -> None:
    """
    Crée (ou écrase) un fichier avec le contenu donné.

    Les répertoires parents sont créés si nécessaire.

    Raises:
        OSError: Si l'écriture échoue
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(data)
