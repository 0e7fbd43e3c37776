# Turns the result of a key generation attempt into the key pair to show
# and the single notification announcing how it went.

from dataclasses import dataclass
from enum import Enum

from pgp_errors import ValidationError, GenerationError
from pgp_keytypes import KeyPairResult

SUCCESS_MESSAGE = "Keys generated successfully! ٩(◕‿◕｡)۶"
MISSING_FIELDS_MESSAGE = "Please fill in all required fields, senpai! >_<"
GENERATION_FAILED_MESSAGE = "Gomen nasai! An error occurred (╥﹏╥)"


class OutcomeKind(Enum):
    SUCCESS = 'success'
    FAILURE = 'failure'


@dataclass(frozen=True)
class OutcomeEvent:
    kind: OutcomeKind
    message: str

    @property
    def ok(self):
        return self.kind is OutcomeKind.SUCCESS


def package(outcome):
    """Split an outcome into (key pair or None, OutcomeEvent)."""
    if isinstance(outcome, KeyPairResult):
        return outcome, OutcomeEvent(OutcomeKind.SUCCESS, SUCCESS_MESSAGE)
    if isinstance(outcome, ValidationError):
        message = "%s (%s)" % (MISSING_FIELDS_MESSAGE, outcome.user_message)
        return None, OutcomeEvent(OutcomeKind.FAILURE, message)
    if isinstance(outcome, GenerationError):
        return None, OutcomeEvent(OutcomeKind.FAILURE, GENERATION_FAILED_MESSAGE)
    raise TypeError("cannot package %r" % (outcome,))


# Function that shows a notification in the terminal client
def console_observer(event):
    prefix = "[OK]" if event.ok else "[ERROR]"
    print(prefix, event.message)
