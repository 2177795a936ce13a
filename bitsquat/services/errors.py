class BitsquatError(ValueError):
    """Base class for every error raised by the bitsquat pipeline."""


class EncodingError(BitsquatError):
    """A label holds a character that does not fit in a single byte."""


class InvalidLength(BitsquatError):
    """A bit sequence does not match the character length it should decode to."""


class SplitError(BitsquatError):
    """A URL cannot be split into a domain label and an extension."""
