"""
Serve client assets from the directory produced by the front-end build.

The build records that directory in the build metadata under
``ClientAssetsDirectory``. When it exists, it is layered in front of the
web root so generated files shadow same-named files in ``wwwroot``.
"""

import logging
import os

from file_providers import CompositeFileProvider, PhysicalFileProvider

logger = logging.getLogger(__name__)

CLIENT_ASSETS_DIRECTORY_KEY = 'ClientAssetsDirectory'


def resolve_client_assets_directory(content_root_path, metadata):
    """
    Return the absolute client assets directory declared in ``metadata``, or
    None when the entry is missing or does not point at an existing directory.
    """
    value = metadata.get(CLIENT_ASSETS_DIRECTORY_KEY)
    if not isinstance(value, str) or not value.strip():
        return None
    directory = os.path.join(os.fspath(content_root_path), value)
    if not os.path.isdir(directory):
        return None
    return os.path.abspath(directory)


def use_client_assets(environment, metadata):
    """
    Put the client assets directory in front of the environment's web root
    file provider.

    Missing metadata or a missing directory leaves the provider unchanged.
    Returns the provider now active on ``environment``.
    """
    directory = resolve_client_assets_directory(environment.content_root_path, metadata)
    if directory is None:
        logger.debug("Client assets directory not configured or not found, keeping web root provider")
        return environment.web_root_file_provider

    client_assets_provider = PhysicalFileProvider(directory)
    environment.web_root_file_provider = CompositeFileProvider(
        [client_assets_provider, environment.web_root_file_provider]
    )
    logger.info(f"Serving client assets from {directory}")
    return environment.web_root_file_provider


def is_client_assets_active(environment):
    return isinstance(environment.web_root_file_provider, CompositeFileProvider)
