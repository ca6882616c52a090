import os
from flask import Flask, jsonify, request, redirect, url_for
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate

from .config import Config
from .formatting import register_filters
from .models import db
from .routes import register_routes

def _not_signed_in(message):
    if request.path.startswith('/api/'):
        return jsonify({'message': message}), 401
    return redirect(url_for('auth.login_form'))

def create_app(config=Config):
    app = Flask(__name__)
    app.config.from_object(config)

    # Configure CORS with credentials support
    CORS(app,
         resources={r"/api/*": {
             "origins": app.config['CORS_ORIGINS'],
             "methods": app.config['CORS_METHODS'],
             "allow_headers": app.config['CORS_HEADERS'],
             "supports_credentials": app.config['CORS_SUPPORTS_CREDENTIALS'],
         }})

    # Initialize extensions
    jwt = JWTManager(app)
    db.init_app(app)
    Migrate(app, db)

    @jwt.unauthorized_loader
    def missing_token(reason):
        return _not_signed_in(reason)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return _not_signed_in(reason)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return _not_signed_in('Token has expired')

    register_filters(app)
    register_routes(app)

    # Health check endpoint
    @app.route('/api/health')
    def health_check():
        return jsonify({"status": "healthy"}), 200

    os.makedirs(app.instance_path, exist_ok=True)
    with app.app_context():
        db.create_all()

    return app
