import os
from dotenv import load_dotenv
from datetime import timedelta

load_dotenv()

# Get the absolute path to the instance directory
BASEDIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
INSTANCE_DIR = os.path.join(BASEDIR, 'instance')

class Config:
    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL', f'sqlite:///{os.path.join(INSTANCE_DIR, "travelhub.db")}'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Async views run their event loop on a worker thread
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {
            'check_same_thread': False
        }
    } if SQLALCHEMY_DATABASE_URI.startswith('sqlite') else {}

    # Security
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')

    # JWT
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'jwt-secret-key')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=1)
    JWT_TOKEN_LOCATION = ['headers', 'cookies']
    JWT_COOKIE_CSRF_PROTECT = False
    JWT_COOKIE_SECURE = False  # Set to True in production

    # Dashboard data sources
    SIMULATED_LATENCY = float(os.getenv('SIMULATED_LATENCY', 1.0))
    DASHBOARD_API_URL = os.getenv('DASHBOARD_API_URL')
    DASHBOARD_API_TIMEOUT = float(os.getenv('DASHBOARD_API_TIMEOUT', 5))

    # API
    API_PORT = int(os.getenv('API_PORT', 8000))
    API_HOST = os.getenv('API_HOST', '0.0.0.0')

    # CORS
    CORS_ORIGINS = ['http://localhost:3000']
    CORS_METHODS = ['GET', 'POST', 'OPTIONS']
    CORS_HEADERS = ['Content-Type', 'Authorization']
    CORS_SUPPORTS_CREDENTIALS = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SIMULATED_LATENCY = 0.0
    DASHBOARD_API_URL = None
