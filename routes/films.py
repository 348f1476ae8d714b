# routes/films.py

from flask import Blueprint, request
from controllers.films import (
    list_films, create_film, save_film, show_film, delete_film
)

films_bp = Blueprint('films', __name__, url_prefix='/films')

# Film table
films_bp.add_url_rule(
    '/', 'list', list_films, methods=['GET']
)

# Add-film form
films_bp.add_url_rule(
    '/create', 'create', create_film, methods=['GET']
)

@films_bp.route('/', methods=['POST'], endpoint='save')
def save():
    return save_film(request.form)

# Film detail
films_bp.add_url_rule(
    '/<int:film_id>', 'show', show_film, methods=['GET']
)

# Delete a film
films_bp.add_url_rule(
    '/<int:film_id>/delete', 'delete', delete_film, methods=['POST']
)
