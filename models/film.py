# models/film.py

from datetime import datetime
from extensions import db
from models.types import UnsignedInt

TITLE_MAX_LENGTH = 100

class Film(db.Model):
    __tablename__ = "films"

    id       = db.Column(UnsignedInt, primary_key=True)
    title    = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    year     = db.Column(db.Integer, nullable=False)
    duration = db.Column(db.Integer, nullable=False, comment="Running time in minutes")

    # FK -> certificate (restrict: a certificate in use cannot be deleted)
    certificate_id = db.Column(UnsignedInt,
                               db.ForeignKey("certificates.id", ondelete="RESTRICT"),
                               nullable=False)
    certificate    = db.relationship("Certificate", back_populates="films")

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime,
                           default=datetime.utcnow,
                           onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Film {self.title} ({self.year})>"
