"""Exception hierarchy for the Paillier engine."""


class PaillierError(Exception):
    """Base class for every error raised by securetally."""


class RandomnessError(PaillierError):
    """The random source failed or returned fewer bytes than requested."""


class EncodingError(PaillierError, TypeError):
    """A value could not cross the integer / byte boundary."""


class NoInverseExists(PaillierError, ArithmeticError):
    """Modular inverse requested for a value not coprime to the modulus."""


class KeyGenerationError(PaillierError):
    pass


class EncryptionError(PaillierError):
    pass


class DecryptionError(PaillierError):
    pass
