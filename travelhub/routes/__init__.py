from travelhub.routes.auth import auth_bp
from travelhub.routes.dashboard import dashboard_bp
from travelhub.routes.records import records_bp

__all__ = ['auth_bp', 'dashboard_bp', 'records_bp']

def register_routes(app):
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(records_bp, url_prefix='/api/dashboard')
