import json
import sys
import pytest
from pathlib import Path

# Add parent directory and the assets scripts to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / 'assets'))

from app import create_app
from config import TestingConfig


CLIENT_ASSETS_DIR = 'obj/ClientAssets'


def write_file(path, content):
    """Helper to create a file with its parent directories"""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return path


def make_test_config(content_root, **overrides):
    """Test configuration rooted at ``content_root``"""
    attrs = {
        'CONTENT_ROOT': content_root,
        'WEB_ROOT': content_root / 'wwwroot',
        'BUILD_METADATA_FILE': content_root / 'build_metadata.json',
    }
    attrs.update(overrides)
    return type('TestConfig', (TestingConfig,), attrs)


@pytest.fixture
def content_root(tmp_path):
    """
    Content root with a web root and a build-generated client assets dir.

    site.css exists in both, so the client assets copy must win.
    """
    root = tmp_path / 'content'
    write_file(root / 'wwwroot' / 'site.css', 'body { color: black; }')
    write_file(root / 'wwwroot' / 'favicon.ico', 'icon')
    write_file(root / 'wwwroot' / 'lib' / 'jquery' / 'dist' / 'jquery.js', 'jquery')
    write_file(root / CLIENT_ASSETS_DIR / 'site.css', 'body { color: red; }')
    write_file(root / CLIENT_ASSETS_DIR / 'app.bundle.js', 'console.log("bundle");')
    return root


@pytest.fixture
def metadata_file(content_root):
    path = content_root / 'build_metadata.json'
    path.write_text(json.dumps({'ClientAssetsDirectory': CLIENT_ASSETS_DIR}), encoding='utf-8')
    return path


@pytest.fixture
def app(content_root, metadata_file):
    """Create application for testing"""
    return create_app(make_test_config(content_root))


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def node_modules(tmp_path):
    """npm project folder with all four libraries installed"""
    project = tmp_path / 'assets'
    for name in ('bootstrap', 'jquery', 'jquery-validation', 'jquery-validation-unobtrusive'):
        dist = project / 'node_modules' / name / 'dist'
        write_file(dist / f'{name}.js', f'/* {name} */')
        write_file(dist / 'min' / f'{name}.min.js', f'/* {name} min */')
    return project
