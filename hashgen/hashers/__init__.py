import logging
from typing import Dict, List, Sequence, Type
from .base import Hasher
from .standard import (
    MD5Hasher,
    RIPEMD160Hasher,
    SHA1Hasher,
    SHA256Hasher,
    SHA384Hasher,
    SHA512Hasher,
)

logger = logging.getLogger(__name__)

# Report lines are emitted in this order.
DEFAULT_ALGORITHMS = ("MD5", "RIPEMD160", "SHA1", "SHA256", "SHA384", "SHA512")

# The registry maps an algorithm name to the Hasher class
HASHER_REGISTRY: Dict[str, Type[Hasher]] = {
    "MD5": MD5Hasher,
    "RIPEMD160": RIPEMD160Hasher,
    "SHA1": SHA1Hasher,
    "SHA256": SHA256Hasher,
    "SHA384": SHA384Hasher,
    "SHA512": SHA512Hasher,
}


def get_hashers(names: Sequence[str] = DEFAULT_ALGORITHMS) -> List[Hasher]:
    """
    Factory function to get a list of instantiated hasher objects,
    in the order the names are given.
    """
    hashers = []
    for name in names:
        hasher_class = HASHER_REGISTRY.get(name.upper())
        if hasher_class:
            hashers.append(hasher_class())
        else:
            logger.warning(f"Hasher '{name}' not found in registry.")
    return hashers


__all__ = ["DEFAULT_ALGORITHMS", "HASHER_REGISTRY", "Hasher", "get_hashers"]
