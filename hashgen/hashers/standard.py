import hashlib
from Crypto.Hash import RIPEMD160
from .base import Hasher, HashState


class HashlibHasher(Hasher):
    """Wraps one of the guaranteed hashlib constructors."""
    def __init__(self, name: str, algorithm: str):
        super().__init__(name=name)
        self.algorithm = algorithm

    def new(self) -> HashState:
        return hashlib.new(self.algorithm)


class MD5Hasher(HashlibHasher):
    def __init__(self):
        super().__init__("MD5", "md5")


class SHA1Hasher(HashlibHasher):
    def __init__(self):
        super().__init__("SHA1", "sha1")


class SHA256Hasher(HashlibHasher):
    def __init__(self):
        super().__init__("SHA256", "sha256")


class SHA384Hasher(HashlibHasher):
    def __init__(self):
        super().__init__("SHA384", "sha384")


class SHA512Hasher(HashlibHasher):
    def __init__(self):
        super().__init__("SHA512", "sha512")


class RIPEMD160Hasher(Hasher):
    """
    Computes RIPEMD-160 through pycryptodome.

    OpenSSL 3 moved ripemd160 to the legacy provider, so
    ``hashlib.new("ripemd160")`` is not available everywhere.
    """
    def __init__(self):
        super().__init__(name="RIPEMD160")

    def new(self) -> HashState:
        return RIPEMD160.new()
