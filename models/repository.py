"""
models/repository.py
Explicit relationship queries for Film ↔ Certificate.

Every function takes the session it runs on and issues exactly one query,
so callers decide when a round-trip happens instead of relying on lazy
attribute loading.
"""
from __future__ import annotations

from typing import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload

from models.certificate import Certificate
from models.film import Film


def get_films_by_certificate(session: Session, certificate_id: int) -> list[Film]:
    """Films carrying *certificate_id*, ordered by title."""
    stmt = (
        select(Film)
        .where(Film.certificate_id == certificate_id)
        .order_by(Film.title, Film.id)
    )
    return list(session.scalars(stmt))


def get_certificate_for_film(session: Session, film: Film) -> Certificate | None:
    """The certificate referenced by *film*, or None when the reference is unset."""
    if film.certificate_id is None:
        return None
    return session.get(Certificate, film.certificate_id)


def get_certificates_for_films(session: Session, films: Iterable[Film]) -> dict[int, Certificate]:
    """
    Batched variant of :func:`get_certificate_for_film`.

    Returns ``{certificate_id: Certificate}`` for every distinct reference
    in *films* using a single ``IN`` query.
    """
    ids = {f.certificate_id for f in films if f.certificate_id is not None}
    if not ids:
        return {}
    stmt = select(Certificate).where(Certificate.id.in_(ids))
    return {c.id: c for c in session.scalars(stmt)}


def list_films_with_certificates(session: Session) -> list[Film]:
    """All films with their certificate eagerly joined in the same query."""
    stmt = (
        select(Film)
        .options(joinedload(Film.certificate))
        .order_by(Film.title, Film.id)
    )
    return list(session.scalars(stmt))


def count_films_by_certificate(session: Session) -> dict[int, int]:
    stmt = (
        select(Film.certificate_id, func.count(Film.id))
        .group_by(Film.certificate_id)
    )
    return {cert_id: n for cert_id, n in session.execute(stmt)}
