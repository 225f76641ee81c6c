"""
Copy front-end libraries from node_modules into the web root.

Run from the assets/ folder (where package.json and node_modules live):

    python copy_client_libs.py [WWWROOT_BASE]

WWWROOT_BASE defaults to ../wwwroot/ next to this script; libraries land in
<WWWROOT_BASE>lib/<name>/dist. Every library is copied independently, a
failure is reported and the next library is still processed.
"""
import logging
import os
import shutil
import sys
from string import Template

logger = logging.getLogger(__name__)

# Default web root, relative to this script
WWWROOT = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'wwwroot', '')

LIBS = {
    'bootstrap': {
        'src': './node_modules/$name/dist',
        'dest': '$output_dir/$name/dist'
    },
    'jquery': {
        'src': './node_modules/$name/dist',
        'dest': '$output_dir/$name/dist'
    },
    'jquery-validation': {
        'src': './node_modules/$name/dist',
        'dest': '$output_dir/$name/dist'
    },
    'jquery-validation-unobtrusive': {
        'src': './node_modules/$name/dist',
        'dest': '$output_dir/$name/dist'
    }
}


class LibraryCopyResult:
    def __init__(self, name, src, dest, error=None):
        self.name = name
        self.src = src
        self.dest = dest
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __repr__(self):
        state = 'ok' if self.ok else f'failed: {self.error}'
        return f'<LibraryCopyResult {self.name} {state}>'


def get_output_dir(argv):
    """Output dir is the first positional argument (or WWWROOT) + 'lib'"""
    base = argv[1] if len(argv) >= 2 else WWWROOT
    return base + 'lib'


def remove_path(path):
    """Delete a file or directory tree, ignoring any failure"""
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except OSError:
        pass


def copy_library(name, lib, output_dir, source_root=None):
    src = Template(lib['src']).substitute(name=name)
    dest = Template(lib['dest']).substitute(name=name, output_dir=output_dir)
    if source_root is not None:
        src = os.path.join(source_root, src)

    try:
        remove_path(dest)
        shutil.copytree(src, dest)
    except (OSError, shutil.Error) as e:
        logger.debug(f"Copying {name} from {src} to {dest} failed: {e}")
        return LibraryCopyResult(name, src, dest, error=e)

    logger.debug(f"Copied {name} from {src} to {dest}")
    return LibraryCopyResult(name, src, dest)


def copy_libraries(output_dir, libs=LIBS, source_root=None):
    """
    Copy every library in ``libs`` to ``output_dir``, in table order.

    Returns one LibraryCopyResult per library. A failed library leaves its
    destination absent and does not stop the remaining copies.
    """
    return [copy_library(name, lib, output_dir, source_root) for name, lib in libs.items()]


def is_strict():
    return os.environ.get('COPY_CLIENT_LIBS_STRICT', '').strip().lower() in ('1', 'true', 'yes', 'on')


def main(argv=None, strict=None):
    """
    Copy all libraries and print one line per library.

    Returns 0 unless running in strict mode (``strict=True`` or
    COPY_CLIENT_LIBS_STRICT=1) and at least one library failed.
    """
    argv = sys.argv if argv is None else argv
    strict = is_strict() if strict is None else strict

    output_dir = get_output_dir(argv)
    print(f"Output dir: {output_dir}")

    results = copy_libraries(output_dir)
    for result in results:
        if result.ok:
            print(f"Library {result.name} copied from {result.src} to {result.dest}")
        else:
            print(f"Library {result.name} could not be copied: {result.error}", file=sys.stderr)

    if strict and any(not result.ok for result in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
