"""
Portfolio Builder - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its configuration, storage
engine and error handlers. All actual route handling is delegated to blueprints.
"""

import os
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import init_storage
from utils.errors import ValidationError

# Import all blueprints
from blueprints.api import api_bp


def create_app(config_name=None, storage=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        storage (MemStorage): Storage engine to use (optional, a fresh one is
            created when omitted)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize storage with app
    init_storage(app, storage)
    app.logger.info("✓ Storage initialized")

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio Builder API is running'}, 200

    return app


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(HTTPException)
    def http_error(e):
        payload = {'message': e.description}
        if isinstance(e, ValidationError):
            payload['errors'] = e.to_list()
        return jsonify(payload), e.code

    @app.errorhandler(Exception)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return jsonify({'message': 'Internal server error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'same-origin'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
