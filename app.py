# app.py

import os
os.environ.setdefault("FLASK_APP", __name__)

# Flask
from flask import Flask
from flask import session, request, current_app

from extensions import db, migrate, babel

from dotenv import load_dotenv
load_dotenv()

# Import Models
from models.certificate import Certificate
from models.film import Film

# Import Blueprints
from routes.home import home_bp
from routes.language import language_bp
from routes.films import films_bp
from routes.certificates import certificates_bp

# Import Seeders
from seeders import seed_all

# Import Configurations
from config.settings import Config

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
MIGRATIONS_DIR = os.path.join(BASE_DIR, "migrations")

def get_locale():
    # 1) if they’ve set it in session, use that
    if 'lang' in session:
        return session['lang']
    # 2) otherwise auto-detect from the Accept-Language header
    return request.accept_languages.best_match(current_app.config['LANGUAGES'])

def create_app(config_object=Config):
    app = Flask(__name__, template_folder="views")
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Bind database
    db.init_app(app)

    # Initialize Flask-Migrate (batch mode so SQLite can ALTER constraints)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR, render_as_batch=True)

    # Initialize Babel *with* your selector
    babel.init_app(app,
                   locale_selector=get_locale,
                   default_locale='en',
                   default_timezone='UTC')
    @app.context_processor
    def inject_locale():
        return {'current_locale': session.get('lang', 'en')}

    # Register template context
    @app.context_processor
    def inject_translation():
        from flask_babel import gettext as t
        return dict(t=t)

    # Register Blueprints
    app.register_blueprint(home_bp)
    app.register_blueprint(language_bp)
    app.register_blueprint(films_bp)
    app.register_blueprint(certificates_bp)

    # ---------- CLI ----------
    @app.cli.command("seed")
    def seed_command():
        """Insert the certificates, then the sample films."""
        certificates, films = seed_all()
        print(f"Seeded {len(certificates)} certificates and {len(films)} films.")

    @app.shell_context_processor
    def shell_context():
        return {"db": db, "Film": Film, "Certificate": Certificate}

    return app

if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=8082)
