from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class Embedder(Protocol):
    """Opaque text -> fixed-length vector function.

    Implementations must be deterministic for identical input and raise on
    failure rather than return partial vectors.
    """

    def embed(self, text: str) -> list[float]: ...

    def embed_batch(self, texts: Sequence[str]) -> list[list[float]]: ...
