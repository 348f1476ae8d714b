"""
controllers/films.py
Film catalogue pages: list, add-film form, save, detail and delete.
"""
from __future__ import annotations

import re

from flask import (
    abort,
    current_app,
    flash,
    redirect,
    render_template,
    url_for,
)
from sqlalchemy.exc import IntegrityError

from extensions import db
from models.certificate import Certificate
from models.film import Film, TITLE_MAX_LENGTH
from models.repository import list_films_with_certificates
from models.types import UNSIGNED_INT_MAX

YEAR_MIN     = 1900
YEAR_MAX     = 2100
DURATION_MIN = 1
DURATION_MAX = 300


# ────────────────────────────────────────────────────────────────────────────────
# Validation
# ────────────────────────────────────────────────────────────────────────────────
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw):
    # ASCII digits only: int() would also take "1_984" or non-Latin numerals
    raw = str(raw).strip()
    if not INTEGER_RE.fullmatch(raw):
        return None
    return int(raw)


def validate_film_form(form) -> tuple[dict, dict]:
    """
    Check the submitted add-film fields.

    Returns ``(data, errors)``: *data* holds the cleaned values, *errors* maps
    field name → message and is empty when the submission is valid.
    """
    data, errors = {}, {}

    title = (form.get("title") or "").strip()
    if not title:
        errors["title"] = "The title field is required."
    elif len(title) > TITLE_MAX_LENGTH:
        errors["title"] = f"The title may not be greater than {TITLE_MAX_LENGTH} characters."
    data["title"] = title

    raw_year = (form.get("year") or "").strip()
    year = _parse_int(raw_year)
    if not raw_year:
        errors["year"] = "The year field is required."
    elif year is None:
        errors["year"] = "The year must be an integer."
    elif year < YEAR_MIN:
        errors["year"] = f"The year must be at least {YEAR_MIN}."
    elif year > YEAR_MAX:
        errors["year"] = f"The year may not be greater than {YEAR_MAX}."
    data["year"] = year

    raw_duration = (form.get("duration") or "").strip()
    duration = _parse_int(raw_duration)
    if not raw_duration:
        errors["duration"] = "The duration field is required."
    elif duration is None:
        errors["duration"] = "The duration must be an integer."
    elif not DURATION_MIN <= duration <= DURATION_MAX:
        errors["duration"] = (
            f"The duration must be between {DURATION_MIN} and {DURATION_MAX} minutes."
        )
    data["duration"] = duration

    raw_cert = (form.get("certificate") or "").strip()
    cert_id = _parse_int(raw_cert)
    if not raw_cert:
        errors["certificate"] = "Please choose a certificate."
    elif cert_id is None or not 0 < cert_id <= UNSIGNED_INT_MAX:
        errors["certificate"] = "The selected certificate is invalid."
    data["certificate"] = cert_id

    return data, errors


# ────────────────────────────────────────────────────────────────────────────────
# Pages
# ────────────────────────────────────────────────────────────────────────────────
def list_films():
    films = list_films_with_certificates(db.session)
    return render_template("films/index.html", films=films)


def _render_form(form=None, errors=None, status=200):
    certificates = Certificate.query.order_by(Certificate.id).all()
    return render_template(
        "films/create.html",
        certificates=certificates,
        old=form or {},
        errors=errors or {},
    ), status


def create_film():
    """Render the add-film form with one radio button per certificate."""
    return _render_form()


def save_film(form):
    """
    Validate *form*, create the Film and attach its Certificate.

    Invalid input re-renders the form (422) without touching the database.
    """
    data, errors = validate_film_form(form)

    certificate = None
    if "certificate" not in errors:
        certificate = db.session.get(Certificate, data["certificate"])
        if certificate is None:
            errors["certificate"] = "The selected certificate does not exist."

    if errors:
        current_app.logger.warning("🎬 Film rejected: %s", errors)
        return _render_form(form, errors, status=422)

    film = Film(title=data["title"], year=data["year"], duration=data["duration"])
    film.certificate = certificate
    db.session.add(film)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        current_app.logger.warning("🎬 Film insert violated a constraint: %s", exc.orig)
        abort(409, "The film references a certificate that no longer exists.")

    current_app.logger.info(
        "🎬 Film created: ID %s, %s (%s)", film.id, film.title, certificate.name
    )
    flash(f"Added {film.title}", "success")
    return redirect(url_for("films.list"))


def show_film(film_id: int):
    film = Film.query.get_or_404(film_id)
    return render_template("films/show.html", film=film)


def delete_film(film_id: int):
    film = Film.query.get_or_404(film_id)
    title = film.title
    db.session.delete(film)
    db.session.commit()
    current_app.logger.info("🎬 Film deleted: ID %s, %s", film_id, title)
    flash(f"Deleted {title}", "success")
    return redirect(url_for("films.list"))
