"""Float32 blob encoding and cosine distance for embeddings stored in SQLite."""

from collections.abc import Sequence

import numpy as np

VECTOR_DTYPE = np.float32


def encode_vector(vector: Sequence[float]) -> bytes:
    return np.asarray(vector, dtype=VECTOR_DTYPE).tobytes()


def decode_vector(blob: bytes) -> tuple[float, ...]:
    return tuple(float(x) for x in np.frombuffer(blob, dtype=VECTOR_DTYPE))


def cosine_distance(left: bytes | None, right: bytes | None) -> float | None:
    """SQL function body: ``1 - cos(left, right)``.

    Returns NULL for a missing or zero-norm vector. Vectors of different
    lengths raise ``ValueError``, which SQLite reports as ``OperationalError``.
    """
    if left is None or right is None:
        return None
    a = np.frombuffer(left, dtype=VECTOR_DTYPE)
    b = np.frombuffer(right, dtype=VECTOR_DTYPE)
    if a.shape != b.shape:
        raise ValueError(f"vector dimensions differ: {a.size} != {b.size}")
    norm = float(np.linalg.norm(a) * np.linalg.norm(b))
    if norm == 0.0:
        return None
    return 1.0 - float(np.dot(a, b)) / norm
