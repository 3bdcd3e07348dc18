import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv() # Load variables from the .env file


def _build_database_uri():
    url = os.getenv('DATABASE_URL')
    if url:
        return url

    host = os.getenv('DB_HOST')
    if not host:
        return 'sqlite:///portfolio.db'

    user = os.getenv('DB_USER')
    password = os.getenv('DB_PASSWORD')
    name = os.getenv('DB_NAME')
    # MySQL connection string (PyMySQL driver)
    if not password:
        return f"mysql+pymysql://{user}@{host}/{name}"
    return f"mysql+pymysql://{user}:{password}@{host}/{name}"


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-me')
    DB_HOST = os.getenv('DB_HOST')
    DB_USER = os.getenv('DB_USER')
    DB_PASSWORD = os.getenv('DB_PASSWORD')
    DB_NAME = os.getenv('DB_NAME')

    SQLALCHEMY_DATABASE_URI = _build_database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning
    AUTO_CREATE_TABLES = os.getenv('AUTO_CREATE_TABLES', '1') == '1'

    # sessions expire two hours after login, however active they are
    PERMANENT_SESSION_LIFETIME = timedelta(hours=2)
    SESSION_REFRESH_EACH_REQUEST = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    LOGIN_REDIRECT = os.getenv('LOGIN_REDIRECT', '/dashboard.html')
    REGISTER_REDIRECT = os.getenv('REGISTER_REDIRECT', '/login.html')

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',')

    OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
    OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-3.5-turbo')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # portfolios carry images as data URLs
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    AUTO_CREATE_TABLES = True
    BCRYPT_LOG_ROUNDS = 4
    OPENAI_API_KEY = None
    LOG_LEVEL = 'WARNING'
