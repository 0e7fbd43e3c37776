# Checks the identity fields before any key generation is attempted.
# The email check is lenient on purpose: it only has to be present.

from pgp_errors import MissingName, MissingEmail


def validate(identity):
    if not (identity.name or '').strip():
        raise MissingName()
    if not (identity.email or '').strip():
        raise MissingEmail()
    return identity
