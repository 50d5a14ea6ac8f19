"""
Flask Application Factory
"""

import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import config
from extensions import db, migrate, jwt, bcrypt, cors, limiter
from grievance.errors import GrievanceError


def create_app(config_name=None):
    """Application factory pattern"""

    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    bcrypt.init_app(app)
    cors.init_app(app, resources={
        r"/api/*": {
            "origins": app.config['CORS_ORIGINS'],
            "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"]
        }
    })
    limiter.init_app(app)

    # Complaint lifecycle manager shared by the complaint routes
    from grievance.services import build_complaint_service
    app.extensions['complaint_service'] = build_complaint_service()

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)
    register_jwt_callbacks(app)

    # Create database tables
    with app.app_context():
        from grievance import models  # noqa: F401
        db.create_all()

    return app


def register_blueprints(app):
    """Register Flask blueprints"""
    from grievance.api.auth import auth_bp
    from grievance.api.complaints import complaints_bp
    from grievance.api.categories import categories_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(complaints_bp, url_prefix='/api/complaints')
    app.register_blueprint(categories_bp, url_prefix='/api/complaints/categories')

    # Health check endpoint
    @app.route('/health')
    def health_check():
        return jsonify({'status': 'healthy', 'message': 'API is running'}), 200

    @app.route('/')
    def index():
        return jsonify({
            'message': 'Student Grievance Tracker API',
            'version': '1.0.0',
            'endpoints': {
                'auth': '/api/auth',
                'complaints': '/api/complaints',
                'categories': '/api/complaints/categories'
            }
        }), 200


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(GrievanceError)
    def handle_grievance_error(error):
        if error.status_code >= 500:
            db.session.rollback()
            app.logger.error(f'{error.kind}: {error.detail or error.message}')
        return jsonify(error.to_dict(include_detail=app.debug)), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return jsonify({'error': error.name, 'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_exception(error):
        db.session.rollback()
        app.logger.error(f'Unhandled exception: {str(error)}')
        return jsonify({'error': 'Internal Server Error', 'message': 'An unexpected error occurred'}), 500


def register_jwt_callbacks(app):
    """Resolve token owners and render token failures in the same shape as every other error"""

    @jwt.user_lookup_loader
    def load_user(jwt_header, jwt_data):
        from grievance.models.user import User
        user = db.session.get(User, int(jwt_data['sub']))
        if user is None or not user.is_active:
            return None
        return user

    @jwt.user_lookup_error_loader
    def user_lookup_failed(jwt_header, jwt_data):
        return jsonify({'error': 'authentication_error', 'message': 'Account not found or deactivated'}), 401

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({'error': 'authentication_error', 'message': 'No token provided'}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({'error': 'authentication_error', 'message': 'Invalid token'}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({'error': 'authentication_error', 'message': 'Token has expired'}), 401
