#!/usr/bin/env python3
"""Script pour exécuter les tests du client Smite."""

import subprocess
import sys
import os
from pathlib import Path


def run_tests():
    """Exécute les tests avec pytest."""
    print("🧪 Exécution des tests du client Smite...")
    print("=" * 50)

    try:
        import pytest
        print(f"✅ pytest version {pytest.__version__} trouvé")
    except ImportError:
        print("❌ pytest non trouvé. Installez-le avec: pip install -e \".[test]\"")
        return False

    project_root = Path(__file__).parent
    os.chdir(project_root)

    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "-v",
        "--tb=short",
        "--color=yes"
    ]

    print(f"📁 Répertoire de travail: {project_root}")
    print(f"🔧 Commande: {' '.join(cmd)}")
    print("=" * 50)

    result = subprocess.run(cmd, check=False)

    if result.returncode == 0:
        print("\n✅ Tous les tests sont passés avec succès!")
        return True
    print(f"\n❌ Certains tests ont échoué (code de retour: {result.returncode})")
    return False


if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
