"""
API Blueprint - JSON endpoints used by the portfolio builder front end
Handles: Portfolio submissions and lookups, contact messages, projects placeholder
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
