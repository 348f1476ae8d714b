# seeders/__init__.py

from extensions import db
from .certificates import seed_certificates, CERTIFICATES
from .films import seed_films, FILMS


def seed_all():
    """Parents before children: certificates, then films, in one commit."""
    certificates = seed_certificates()
    films = seed_films()
    db.session.commit()
    return certificates, films


__all__ = [
    "seed_all",
    "seed_certificates",
    "seed_films",
    "CERTIFICATES",
    "FILMS",
]
