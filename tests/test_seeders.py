"""Reference data seeding and its ordering constraint."""

import pytest

from models.certificate import Certificate
from models.film import Film
from seeders import CERTIFICATES, FILMS, seed_all, seed_certificates, seed_films


def test_seed_certificates_codes_in_order(db):
    seed_certificates()
    db.session.commit()
    names = [c.name for c in Certificate.query.order_by(Certificate.id)]
    assert names == ["U", "PG", "12", "15", "18"]


def test_seeded_certificate_names_fit_column(db):
    seed_certificates()
    assert all(len(c.name) <= 2 for c in Certificate.query)
    assert all(c.description for c in Certificate.query)


def test_seed_films_before_certificates_fails(db):
    with pytest.raises(LookupError):
        seed_films()
    assert Film.query.count() == 0


def test_seed_all_links_every_film(db):
    certificates, films = seed_all()
    assert len(certificates) == len(CERTIFICATES)
    assert len(films) == len(FILMS)
    expected = {title: code for title, _, _, code in FILMS}
    for film in Film.query:
        assert film.certificate.name == expected[film.title]


def test_seed_is_not_idempotent(db):
    seed_all()
    seed_all()
    assert Certificate.query.count() == 2 * len(CERTIFICATES)
    assert Film.query.count() == 2 * len(FILMS)
