"""Read-only access to the static transit data files."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import DataFormatError, DataLoadError, NetworkError
from ..core.models import Fare, Line, LineSchedule, Station, TransitSnapshot

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

STATIONS_FILE = "stations.json"
LINES_FILE = "lines.json"
SCHEDULES_FILE = "schedules.json"
PRICES_FILE = "prices.json"


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class TransitDataStore:
    """Fetches the four static collections from a URL or a local directory."""

    def __init__(
        self,
        source: str | Path = "data",
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        """Initialize the store.

        Args:
            source: Base URL (http/https) or directory holding the JSON files
            timeout: Request timeout in seconds
            session: Optional requests session to reuse
        """
        self.source = str(source)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get_stations(self) -> list[Station]:
        return self._load_collection(STATIONS_FILE, Station)

    def get_lines(self) -> list[Line]:
        return self._load_collection(LINES_FILE, Line)

    def get_schedules(self) -> list[LineSchedule]:
        return self._load_collection(SCHEDULES_FILE, LineSchedule)

    def get_fares(self) -> list[Fare]:
        return self._load_collection(PRICES_FILE, Fare)

    def load_snapshot(self) -> TransitSnapshot:
        """Load every collection, substituting an empty one on failure.

        Returns:
            Snapshot whose ``failed_sources`` lists the files that could not
            be loaded
        """
        loaders = {
            "stations": self.get_stations,
            "lines": self.get_lines,
            "schedules": self.get_schedules,
            "fares": self.get_fares,
        }
        collections: dict[str, list[Any]] = {}
        failed: list[str] = []

        for name, loader in loaders.items():
            try:
                collections[name] = loader()
            except DataLoadError as e:
                logger.warning(f"Failed to load {name}: {e}")
                collections[name] = []
                failed.append(name)

        return TransitSnapshot(**collections, failed_sources=failed)

    def _load_collection(self, filename: str, model: type[ModelT]) -> list[ModelT]:
        """Fetch a JSON array and validate every item against ``model``.

        Raises:
            NetworkError: If the file cannot be fetched
            DataFormatError: If the content is not a valid collection
        """
        payload = self._fetch_json(filename)
        if not isinstance(payload, list):
            raise DataFormatError(f"{filename} must contain a JSON array")

        try:
            items = TypeAdapter(list[model]).validate_python(payload)  # type: ignore[valid-type]
        except PydanticValidationError as e:
            raise DataFormatError(f"Invalid data in {filename}: {e}") from e

        logger.info(f"Loaded {len(items)} records from {filename}")
        return items

    def _fetch_json(self, filename: str) -> Any:
        """Read and decode one data file.

        Raises:
            NetworkError: If the request or the file read fails
            DataFormatError: If the content is not JSON
        """
        if is_url(self.source):
            url = f"{self.source.rstrip('/')}/{filename}"
            try:
                response = self.session.get(url, timeout=self.timeout)
                response.raise_for_status()
            except requests.exceptions.RequestException as e:
                raise NetworkError(f"Failed to fetch {url}: {str(e)}") from e

            try:
                return response.json()
            except ValueError as e:
                raise DataFormatError(f"{url} is not valid JSON") from e

        file_path = Path(self.source) / filename
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise NetworkError(f"Failed to read {file_path}: {str(e)}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DataFormatError(f"{file_path} is not valid JSON") from e
