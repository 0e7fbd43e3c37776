#This file creates a PGP key pair using the gnupg library

import logging
import tempfile
import unicodedata

import gnupg

import pgp_config
from pgp_errors import PrimitiveError, PrimitiveFailure
from pgp_keytypes import KeyPairResult, resolve
from pgp_validate import validate

logger = logging.getLogger(__name__)


# gpg reads its unattended input line by line, a newline in a user id
# would add parameters of its own
def _check_user_id_field(field, value):
    if any(unicodedata.category(ch) == 'Cc' for ch in value):
        raise PrimitiveError("%s contains control characters" % field)
    return value


class GnuPGKeyPairPrimitive:
    """Generates a key pair with gpg and returns both keys ASCII armored.

    Every call works in its own temporary keyring which is removed
    afterwards, so no key material is kept once the armored text is returned.
    """

    def __init__(self, gpgbinary=None, tmp_dir=None):
        self.gpgbinary = gpgbinary or pgp_config.GPG_BINARY
        self.tmp_dir = tmp_dir or pgp_config.TMP_DIR

    def generate(self, identity, parameters):
        name = _check_user_id_field('name', identity.name.strip())
        email = _check_user_id_field('email', identity.email.strip())
        with tempfile.TemporaryDirectory(prefix='pgpchan-', dir=self.tmp_dir) as gpg_home:
            gpg = gnupg.GPG(gnupghome=gpg_home, gpgbinary=self.gpgbinary)
            gpg.encoding = 'utf-8'

            #inputs to generate the keys, secret key is left without a passphrase
            input_data = gpg.gen_key_input(
                name_real=name,
                name_email=email,
                no_protection=True,
                **parameters.gen_key_input()
            )

            #generating the key pairs (public and private)
            key = gpg.gen_key(input_data)

            #catch case where key did not generate
            if not key:
                raise PrimitiveError("gpg key generation failed: %s %s" % (key.status, key.stderr))
            logger.debug("Generated key %s", key.fingerprint)

            #export both halves before the keyring is deleted
            public_key = gpg.export_keys(key.fingerprint)
            private_key = gpg.export_keys(key.fingerprint, secret=True, expect_passphrase=False)

        if not public_key or not private_key:
            raise PrimitiveError("gpg returned an empty key export for %s" % key.fingerprint)
        return public_key, private_key


def generate_key_pair(request, primitive=None):
    """Validate, resolve and generate the key pair for one request.

    Raises ValidationError before any key work is done and PrimitiveFailure
    when the backend fails. The backend's own error is logged and chained,
    never shown to the user.
    """
    identity = validate(request.identity)
    parameters = resolve(request.algorithm)
    if primitive is None:
        primitive = GnuPGKeyPairPrimitive()

    logger.info("Generating %s key pair", parameters.key_type)
    try:
        public_key, private_key = primitive.generate(identity, parameters)
        if not public_key or not private_key:
            raise PrimitiveError("key pair backend returned an empty key")
    except Exception as e:
        logger.exception("Key pair generation failed")
        raise PrimitiveFailure() from e

    return KeyPairResult(public_key_armored=public_key, private_key_armored=private_key)
