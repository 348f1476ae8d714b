# routes/home.py

from flask import Blueprint, redirect, url_for
home_bp = Blueprint('home', __name__)

@home_bp.route("/")
def index():
    # The film table is the landing page
    return redirect(url_for('films.list'))
