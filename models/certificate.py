# models/certificate.py

from datetime import datetime
from sqlalchemy.orm import validates
from extensions import db
from models.types import UnsignedInt

NAME_MAX_LENGTH = 2

class Certificate(db.Model):
    """
    Age-rating certificate (U, PG, 12, 15, 18).

    Reference data: rows are inserted by the seeder and never edited here.
    """
    __tablename__ = "certificates"

    id          = db.Column(UnsignedInt, primary_key=True)
    name        = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)   # "PG", "12", ...
    description = db.Column(db.String(255), nullable=False)

    created_at  = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at  = db.Column(db.DateTime,
                            default=datetime.utcnow,
                            onupdate=datetime.utcnow)

    # Re-queryable: every access runs a fresh SELECT.
    # passive_deletes="all" leaves the children alone so ON DELETE RESTRICT decides.
    films = db.relationship("Film", back_populates="certificate",
                            lazy="dynamic", passive_deletes="all")

    @validates("name")
    def validate_name(self, key, value):
        if value is None or not 0 < len(value) <= NAME_MAX_LENGTH:
            raise ValueError(
                f"Certificate name must be 1-{NAME_MAX_LENGTH} characters, got {value!r}"
            )
        return value

    def __repr__(self):
        return f"<Certificate {self.name}>"
