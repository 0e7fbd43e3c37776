# Settings shared by the key generator modules.
# Every value can be overridden through a PGPCHAN_* environment variable.

import os
import logging

script_dir = os.path.dirname(os.path.abspath(__file__))

# name used for exported files, eg. pgpchan-public-key.asc
PRODUCT = os.environ.get('PGPCHAN_PRODUCT', 'pgpchan')

# gpg executable used by python-gnupg
GPG_BINARY = os.environ.get('PGPCHAN_GPG_BINARY', 'gpg')

# throw-away keyrings are created under this folder (None = system temp dir)
TMP_DIR = os.environ.get('PGPCHAN_TMP_DIR') or None

# exported .asc files land here
EXPORT_DIR = os.environ.get('PGPCHAN_EXPORT_DIR', os.curdir)

# defaults for the algorithm picker
DEFAULT_KEY_TYPE = 'ECC'
DEFAULT_CURVE = 'curve25519'
DEFAULT_RSA_BITS = 4096

LOG_LEVEL = os.environ.get('PGPCHAN_LOG_LEVEL', 'WARNING')
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=None):
    """Initialize root logging once.

    Safe to call multiple times; later calls are no-ops if the root logger
    already has handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    level_name = str(level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.WARNING),
                        format=LOG_FORMAT)
