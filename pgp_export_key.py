# Writes a generated key to an .asc file, eg. pgpchan-public-key.asc

import logging
import os

import pgp_config

logger = logging.getLogger(__name__)

KEY_KINDS = ('public', 'private')


def key_filename(kind, product=None):
    if kind not in KEY_KINDS:
        raise ValueError("key kind must be 'public' or 'private', not %r" % (kind,))
    return '%s-%s-key.asc' % (product or pgp_config.PRODUCT, kind)


def copy_message(kind):
    return "%s key copied to clipboard! (｡♥‿♥｡)" % kind.capitalize()


def export_message(kind):
    return "%s key downloaded! ⊂((・▽・))⊃" % kind.capitalize()


def export_key(text, kind, directory=None):
    """Write an armored key and return the file path. OSError is left to the caller."""
    directory = directory or pgp_config.EXPORT_DIR
    path = os.path.join(directory, key_filename(kind))
    os.makedirs(directory, exist_ok=True)
    # the secret key is created readable by its owner only
    mode = 0o600 if kind == 'private' else 0o644
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    if kind == 'private':
        # an existing file keeps its old mode, tighten it before writing
        os.chmod(path, mode)
    with open(fd, 'w') as f:
        f.write(text)
    logger.info("Exported %s key to %s", kind, path)
    return path


def export_key_pair(result, directory=None):
    public_path = export_key(result.public_key_armored, 'public', directory)
    private_path = export_key(result.private_key_armored, 'private', directory)
    return public_path, private_path
