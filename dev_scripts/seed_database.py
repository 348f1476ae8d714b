#!/usr/bin/env python3
"""
Seed the reference certificates, then the sample films.
Run after `flask db upgrade`. Not idempotent: each run inserts new rows.
"""
import sys
from pathlib import Path

# Add project root to import path
top = Path(__file__).resolve().parents[1].as_posix()
if top not in sys.path:
    sys.path.insert(0, top)

from app import create_app
from seeders import seed_all


def seed():
    app = create_app()
    with app.app_context():
        certificates, films = seed_all()
        print(f"✅ Seeded {len(certificates)} certificates")
        print(f"✅ Seeded {len(films)} films")
        print("🎉 Film catalogue seed completed successfully.")


if __name__ == "__main__":
    seed()
