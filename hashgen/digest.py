"""
Single-pass multi-digest computation.

The stream is read once in fixed-size chunks and every chunk is fed to
each configured hash state, so a file is never held in memory whole.
"""
import base64
from pathlib import Path
from typing import BinaryIO, Dict, Optional, Sequence
from .errors import DigestError
from .hashers import Hasher, get_hashers

CHUNK_SIZE = 128 * 1024


def encode_digest(raw: bytes) -> str:
    """Standard base64, padded, no line breaks."""
    return base64.b64encode(raw).decode("ascii")


def compute_digests(stream: BinaryIO, hashers: Optional[Sequence[Hasher]] = None,
                    chunk_size: int = CHUNK_SIZE) -> Dict[str, str]:
    """
    Compute every configured digest over the full content of ``stream``.

    Args:
        stream: A binary stream. Seekable streams are rewound to the start.
        hashers: Algorithms to run, in report order. Defaults to all of them.
        chunk_size: Bytes read per iteration.

    Returns:
        Mapping of algorithm name to base64 digest, in ``hashers`` order.

    Raises:
        DigestError: If reading the stream fails.
    """
    if hashers is None:
        hashers = get_hashers()
    states = [(hasher.name, hasher.new()) for hasher in hashers]

    b = bytearray(chunk_size)
    mv = memoryview(b)
    try:
        if stream.seekable():
            stream.seek(0)
        while n := stream.readinto(mv):
            chunk = mv[:n]
            for _, state in states:
                state.update(chunk)
    except OSError as e:
        raise DigestError(f"Failed to read {getattr(stream, 'name', 'stream')}: {e}") from e

    return {name: encode_digest(state.digest()) for name, state in states}


def compute_file_digests(path: Path, hashers: Optional[Sequence[Hasher]] = None,
                         chunk_size: int = CHUNK_SIZE) -> Dict[str, str]:
    """Open ``path`` and compute its digests. Open failures propagate as OSError."""
    with open(path, 'rb', buffering=0) as f:
        return compute_digests(f, hashers, chunk_size)
