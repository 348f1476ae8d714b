# seeders/films.py

from flask import current_app
from extensions import db
from models.certificate import Certificate
from models.film import Film

# (title, year, duration, certificate code)
FILMS = [
    ("Jaws",                 1975, 124, "15"),
    ("The Wizard of Oz",     1939, 102, "U"),
    ("Back to the Future",   1985, 116, "PG"),
    ("Jurassic Park",        1993, 127, "PG"),
    ("The Dark Knight",      2008, 152, "12"),
    ("Alien",                1979, 117, "15"),
    ("The Shining",          1980, 146, "18"),
]


def seed_films():
    """
    Insert the sample films, each linked to its certificate by code.

    Certificates must already exist; a missing code raises LookupError
    before anything is added to the session.
    """
    codes = {code for *_, code in FILMS}
    by_name = {
        c.name: c
        for c in Certificate.query.filter(Certificate.name.in_(codes))
    }
    missing = sorted(codes - by_name.keys())
    if missing:
        raise LookupError(
            f"Certificates {', '.join(missing)} not found – seed certificates first"
        )

    rows = [
        Film(title=title, year=year, duration=duration, certificate=by_name[code])
        for title, year, duration, code in FILMS
    ]
    db.session.add_all(rows)
    db.session.flush()
    current_app.logger.info("🌱 Seeded %d films", len(rows))
    return rows
