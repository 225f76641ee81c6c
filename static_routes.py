from flask import Blueprint, abort, send_file

from extensions import get_hosting_environment

static_bp = Blueprint('static_files', __name__)


@static_bp.route('/<path:filename>')
def serve(filename):
    """Serve a file from the web root provider (client assets first)"""
    environment = get_hosting_environment()
    info = environment.web_root_file_provider.get_file_info(filename)
    if not info.exists or info.is_directory:
        abort(404)
    return send_file(info.physical_path, conditional=True)
