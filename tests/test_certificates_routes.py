"""Certificate pages."""

import pytest

from models.certificate import Certificate
from seeders import seed_certificates


def test_list_certificates_with_counts(client, seeded):
    resp = client.get("/certificates/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    for code in ("U", "PG", "12", "15", "18"):
        assert f">{code}</a>" in html
    assert '<td class="count">2</td>' in html


def test_show_certificate_lists_its_films(client, seeded):
    pg = Certificate.query.filter_by(name="PG").one()
    resp = client.get(f"/certificates/{pg.id}")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Back to the Future" in html
    assert "Jurassic Park" in html
    assert "Jaws" not in html


def test_show_certificate_without_films(client, db):
    seed_certificates()
    db.session.commit()
    resp = client.get("/certificates/1")
    assert resp.status_code == 200
    assert "No films carry this certificate." in resp.get_data(as_text=True)


def test_show_missing_certificate_is_404(client):
    assert client.get("/certificates/77").status_code == 404


def test_change_language(client):
    resp = client.get("/change-language/en")
    assert resp.status_code == 302
    with client.session_transaction() as sess:
        assert sess["lang"] == "en"


@pytest.mark.parametrize("code", ["xx", "pt"])
def test_change_language_without_catalog_is_404(client, code):
    assert client.get(f"/change-language/{code}").status_code == 404


def test_layout_hides_switcher_for_single_language(client, certificates):
    html = client.get("/certificates/").get_data(as_text=True)
    assert "change-language" not in html
