# Errors raised while turning a key request into a key pair.
#
# KeyGenError and its subclasses are safe to show to the user.
# PrimitiveError stays inside the key generation backend: the orchestrator
# logs it and replaces it with a PrimitiveFailure.


class KeyGenError(Exception):
    """Base class for errors the user is told about."""

    user_message = "Key generation failed."

    def __init__(self, message=None):
        self.user_message = message or self.user_message
        super().__init__(self.user_message)


class ValidationError(KeyGenError):
    """A required identity field is missing."""

    field = 'field'

    def __init__(self, message=None):
        super().__init__(message or "%s is required" % self.field.capitalize())


class MissingName(ValidationError):
    field = 'name'


class MissingEmail(ValidationError):
    field = 'email'


class GenerationError(KeyGenError):
    pass


class PrimitiveFailure(GenerationError):
    user_message = "Key generation failed. Please try again."


class PrimitiveError(Exception):
    """Raised by a key pair backend when gpg (or a test double) fails."""
