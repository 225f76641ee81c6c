from pathlib import Path

from flask import current_app

from file_providers import NullFileProvider, PhysicalFileProvider

EXTENSION_KEY = 'hosting_environment'


class HostingEnvironment:
    """
    Host paths plus the provider used to serve files from the web root.

    ``web_root_file_provider`` is replaced during startup configuration only,
    before the app serves any request.
    """

    def __init__(self, content_root_path, web_root_path=None, web_root_file_provider=None):
        self.content_root_path = Path(content_root_path).absolute()
        self.web_root_path = Path(web_root_path).absolute() if web_root_path else None
        if web_root_file_provider is None:
            web_root_file_provider = make_web_root_provider(self.web_root_path)
        self.web_root_file_provider = web_root_file_provider


def make_web_root_provider(web_root_path):
    """PhysicalFileProvider for the web root, or NullFileProvider if it is missing"""
    if web_root_path and Path(web_root_path).is_dir():
        return PhysicalFileProvider(web_root_path)
    return NullFileProvider()


def init_hosting_environment(app):
    environment = HostingEnvironment(
        app.config['CONTENT_ROOT'],
        app.config.get('WEB_ROOT')
    )
    app.extensions[EXTENSION_KEY] = environment
    return environment


def get_hosting_environment(app=None):
    app = app or current_app
    return app.extensions[EXTENSION_KEY]
