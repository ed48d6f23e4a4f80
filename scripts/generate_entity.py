"""Generate a TypeORM entity class from a JSON or YAML description.

Usage:
    python scripts/generate_entity.py examples/user_profile.yaml --out generated/entities
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.cli import main

if __name__ == "__main__":
    sys.exit(main())
