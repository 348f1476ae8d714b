# routes/certificates.py

from flask import Blueprint
from controllers.certificates import list_certificates, show_certificate

certificates_bp = Blueprint('certificates', __name__, url_prefix='/certificates')

certificates_bp.add_url_rule(
    '/', 'list', list_certificates, methods=['GET']
)

certificates_bp.add_url_rule(
    '/<int:certificate_id>', 'show', show_certificate, methods=['GET']
)
