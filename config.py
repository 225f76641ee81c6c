import os
from pathlib import Path
from dotenv import find_dotenv, load_dotenv

basedir = Path(__file__).parent.absolute()

# Load .env (local dev) before the config classes read os.environ
load_dotenv(find_dotenv(usecwd=True))


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Content root is the base for every relative path the host resolves,
    # including the client assets directory declared in build metadata
    CONTENT_ROOT = Path(os.environ.get('CONTENT_ROOT') or basedir)
    WEB_ROOT = Path(os.environ.get('WEB_ROOT') or CONTENT_ROOT / 'wwwroot')

    # Written at build/publish time next to the app
    BUILD_METADATA_FILE = Path(os.environ.get('BUILD_METADATA_FILE') or CONTENT_ROOT / 'build_metadata.json')
    CLIENT_ASSETS_ENABLED = _env_flag('CLIENT_ASSETS_ENABLED', True)

    SEND_FILE_MAX_AGE_DEFAULT = 0


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False
    # Cache static files for 12 hours in production
    SEND_FILE_MAX_AGE_DEFAULT = 12 * 60 * 60


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
