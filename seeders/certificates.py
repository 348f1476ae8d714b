# seeders/certificates.py

from flask import current_app
from extensions import db
from models.certificate import Certificate

# (code, description) in display order
CERTIFICATES = [
    ("U",  "Universal – suitable for all"),
    ("PG", "Parental Guidance – general viewing, but some scenes may be unsuitable for young children"),
    ("12", "Suitable for 12 years and over"),
    ("15", "Suitable only for 15 years and over"),
    ("18", "Suitable only for adults"),
]


def seed_certificates():
    """
    Insert the reference certificates.

    Plain inserts: running it twice leaves duplicate rows.
    """
    rows = [Certificate(name=name, description=desc) for name, desc in CERTIFICATES]
    db.session.add_all(rows)
    db.session.flush()
    current_app.logger.info("🌱 Seeded %d certificates", len(rows))
    return rows
