# controllers/certificates.py

from flask import render_template
from extensions import db
from models.certificate import Certificate
from models.film import Film
from models.repository import count_films_by_certificate


def list_certificates():
    """Certificates with the number of films carrying each."""
    certificates = Certificate.query.order_by(Certificate.id).all()
    counts = count_films_by_certificate(db.session)
    return render_template(
        "certificates/index.html",
        certificates=certificates,
        counts=counts,
    )


def show_certificate(certificate_id: int):
    certificate = Certificate.query.get_or_404(certificate_id)
    films = certificate.films.order_by(Film.title).all()
    return render_template(
        "certificates/show.html",
        certificate=certificate,
        films=films,
    )
