"""Exceptions raised by hashgen."""


class HashGenError(Exception):
    """Base class for hashgen errors."""


class DigestError(HashGenError, OSError):
    """Reading a file failed part way through hashing it."""


class ReportFormatError(HashGenError, ValueError):
    """A report line does not have the ``NAME:<tab>DIGEST`` shape."""
