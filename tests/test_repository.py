"""Explicit relationship queries in models.repository."""

from models.certificate import Certificate
from models.film import Film
from models.repository import (
    count_films_by_certificate,
    get_certificate_for_film,
    get_certificates_for_films,
    get_films_by_certificate,
    list_films_with_certificates,
)


def _cert(name):
    return Certificate.query.filter_by(name=name).one()


def test_get_films_by_certificate(db, seeded):
    pg = _cert("PG")
    films = get_films_by_certificate(db.session, pg.id)
    assert [f.title for f in films] == ["Back to the Future", "Jurassic Park"]


def test_get_films_by_certificate_without_films(db, seeded):
    assert get_films_by_certificate(db.session, 12345) == []


def test_get_certificate_for_film(db, seeded):
    jaws = Film.query.filter_by(title="Jaws").one()
    cert = get_certificate_for_film(db.session, jaws)
    assert cert.name == "15"


def test_get_certificate_for_film_unset(db):
    assert get_certificate_for_film(db.session, Film(title="Draft")) is None


def test_get_certificates_for_films_batches(db, seeded):
    films = Film.query.all()
    by_id = get_certificates_for_films(db.session, films)
    assert set(by_id) == {f.certificate_id for f in films}
    for film in films:
        assert by_id[film.certificate_id].id == film.certificate_id


def test_get_certificates_for_films_empty(db):
    assert get_certificates_for_films(db.session, []) == {}


def test_list_films_with_certificates_orders_by_title(db, seeded):
    films = list_films_with_certificates(db.session)
    titles = [f.title for f in films]
    assert titles == sorted(titles)
    assert all(f.certificate is not None for f in films)


def test_count_films_by_certificate(db, seeded):
    counts = count_films_by_certificate(db.session)
    assert counts[_cert("PG").id] == 2
    assert counts[_cert("15").id] == 2
    assert _cert("12").id in counts
