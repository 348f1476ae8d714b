# models/types.py

from sqlalchemy.dialects import mysql
from extensions import db

# MySQL foreign keys need both sides to share signedness
UnsignedInt = db.Integer().with_variant(mysql.INTEGER(unsigned=True), "mysql")

# Largest value an unsigned INT key can hold
UNSIGNED_INT_MAX = 2**32 - 1
