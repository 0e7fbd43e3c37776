# Key request types and the mapping from a user's algorithm choice
# to the parameters gpg needs for unattended key generation.

from dataclasses import dataclass, asdict
from enum import Enum, IntEnum
from typing import Optional, Union


class Curve(Enum):
    CURVE25519 = 'curve25519'
    P256 = 'p256'
    P384 = 'p384'
    P521 = 'p521'


class RSABits(IntEnum):
    RSA_2048 = 2048
    RSA_3072 = 3072
    RSA_4096 = 4096


@dataclass(frozen=True)
class EllipticCurve:
    curve: Curve = Curve.CURVE25519

    def __post_init__(self):
        # accept 'p256' as well as Curve.P256; anything else is a ValueError
        object.__setattr__(self, 'curve', Curve(self.curve))


@dataclass(frozen=True)
class RSA:
    modulus_bits: RSABits = RSABits.RSA_4096

    def __post_init__(self):
        object.__setattr__(self, 'modulus_bits', RSABits(int(self.modulus_bits)))


AlgorithmChoice = Union[EllipticCurve, RSA]


@dataclass(frozen=True)
class Identity:
    name: str
    email: str


@dataclass(frozen=True)
class KeyGenerationRequest:
    identity: Identity
    algorithm: AlgorithmChoice


@dataclass(frozen=True)
class KeyPairResult:
    public_key_armored: str
    private_key_armored: str

    def __repr__(self):
        # keep secret key material out of logs and tracebacks
        return "KeyPairResult(public_key_armored=<%d chars>, private_key_armored=<redacted>)" % (
            len(self.public_key_armored))


@dataclass(frozen=True)
class GenerationParameters:
    """Unattended key generation parameters, named the way gpg names them.

    ``curve`` / ``modulus_bits`` record the choice the parameters were
    resolved from.
    """
    key_type: str
    subkey_type: str
    key_curve: Optional[str] = None
    subkey_curve: Optional[str] = None
    key_length: Optional[int] = None
    subkey_length: Optional[int] = None
    curve: Optional[Curve] = None
    modulus_bits: Optional[RSABits] = None

    def gen_key_input(self):
        # keyword arguments for gnupg.GPG.gen_key_input
        params = asdict(self)
        del params['curve'], params['modulus_bits']
        return {key: value for key, value in params.items() if value is not None}


# primary key (signing) and subkey (encryption) curves as gpg calls them
_CURVE_PARAMETERS = {
    Curve.CURVE25519: ('EDDSA', 'ed25519', 'ECDH', 'cv25519'),
    Curve.P256: ('ECDSA', 'nistp256', 'ECDH', 'nistp256'),
    Curve.P384: ('ECDSA', 'nistp384', 'ECDH', 'nistp384'),
    Curve.P521: ('ECDSA', 'nistp521', 'ECDH', 'nistp521'),
}


def resolve(choice):
    """Turn an algorithm choice into GenerationParameters.

    Only the two choice types with enumerated values are accepted. Anything
    else means the caller is broken, so the error is raised, not reported.
    """
    if isinstance(choice, EllipticCurve):
        if choice.curve not in _CURVE_PARAMETERS:
            raise ValueError("unsupported curve: %r" % (choice.curve,))
        key_type, key_curve, subkey_type, subkey_curve = _CURVE_PARAMETERS[choice.curve]
        return GenerationParameters(key_type=key_type, key_curve=key_curve,
                                    subkey_type=subkey_type, subkey_curve=subkey_curve,
                                    curve=choice.curve)
    if isinstance(choice, RSA):
        if not isinstance(choice.modulus_bits, RSABits):
            raise ValueError("unsupported RSA key size: %r" % (choice.modulus_bits,))
        bits = int(choice.modulus_bits)
        return GenerationParameters(key_type='RSA', key_length=bits,
                                    subkey_type='RSA', subkey_length=bits,
                                    modulus_bits=choice.modulus_bits)
    raise TypeError("unknown algorithm choice: %r" % (choice,))
