from flask import Flask
from config import config
from extensions import init_hosting_environment
from build_metadata import BuildMetadata
from client_assets import use_client_assets, is_client_assets_active
import os

# Import blueprints
from static_routes import static_bp


def create_app(config_name='default'):
    # Static files are served through the hosting environment's provider,
    # so Flask's own static route is disabled
    app = Flask(__name__, static_folder=None)
    if isinstance(config_name, str):
        app.config.from_object(config[config_name])
    else:
        app.config.from_object(config_name)

    environment = init_hosting_environment(app)

    if app.config.get('CLIENT_ASSETS_ENABLED', True):
        metadata = BuildMetadata.from_file(app.config['BUILD_METADATA_FILE'])
        use_client_assets(environment, metadata)
        if not is_client_assets_active(environment):
            app.logger.debug("Client assets not in use, serving web root only")

    # Takes precedence over the static catch-all, static rules match first
    @app.route('/health/assets')
    def assets_health():
        """Report how static files are being served"""
        return {
            'status': 'healthy',
            'client_assets_enabled': is_client_assets_active(environment),
            'content_root': str(environment.content_root_path),
            'web_root': str(environment.web_root_path) if environment.web_root_path else None
        }, 200

    # Register blueprints
    app.register_blueprint(static_bp, url_prefix='/')

    return app


# Create app instance for Gunicorn (production)
# Gunicorn will use: gunicorn app:app
app = create_app(os.environ.get('FLASK_ENV', 'production'))

if __name__ == '__main__':
    # Development server
    app = create_app('development')
    app.run(debug=True, host='0.0.0.0', port=5000)
