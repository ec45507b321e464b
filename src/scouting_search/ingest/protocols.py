from typing import Any, Protocol


class DataSource(Protocol):
    @property
    def source_type(self) -> str: ...

    @property
    def source_detail(self) -> str: ...

    def fetch(self) -> list[dict[str, Any]]: ...
