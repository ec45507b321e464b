import csv
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class CsvSource:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def source_type(self) -> str:
        return "csv"

    @property
    def source_detail(self) -> str:
        return str(self._path)

    def fetch(self, *, encoding: str = "utf-8", delimiter: str = ",") -> list[dict[str, Any]]:
        logger.debug("Reading CSV %s", self._path)
        with open(self._path, encoding=encoding, newline="") as f:
            rows: list[dict[str, Any]] = list(csv.DictReader(f, delimiter=delimiter))
        logger.debug("Read %d rows from %s", len(rows), self._path)
        return rows
