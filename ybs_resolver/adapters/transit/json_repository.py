"""JSON transit repository adapter.

This adapter reads the stop and route collections from two JSON files
and turns them into an immutable TransitSnapshot:
- Configuration injection (paths from config)
- Asynchronous loading (file I/O runs in a worker thread)
- Typed DataUnavailableError on any read or parse failure
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping

from ...config import DataConfig, get_config
from ...domain.errors import DataUnavailableError
from ...domain.models import Route, Stop, TransitSnapshot


@dataclass
class JsonTransitRepository:
    """Transit repository that loads from JSON files.

    This adapter implements TransitRepositoryPort. It performs no
    caching and no retries: every call reads the files again.

    Attributes:
        config: Data configuration (directory, file names)
    """

    config: DataConfig = field(default_factory=lambda: get_config().data)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def load_snapshot(self) -> TransitSnapshot:
        """Load stops and routes.

        Returns:
            The snapshot of the whole network.

        Raises:
            DataUnavailableError: If a file is missing or malformed.
        """
        self._logger.debug(
            "Loading transit data",
            extra={
                "stops_path": str(self.config.stops_path),
                "routes_path": str(self.config.routes_path),
            },
        )
        snapshot = await asyncio.to_thread(self.load_snapshot_sync)
        self._logger.info(
            "Transit data loaded",
            extra={"stops": len(snapshot.stops), "routes": len(snapshot.routes)},
        )
        return snapshot

    def load_snapshot_sync(self) -> TransitSnapshot:
        """Blocking variant of load_snapshot()."""
        stops = tuple(
            self._parse_stop(row) for row in self._read_list(self.config.stops_path)
        )
        routes = tuple(
            self._parse_route(row) for row in self._read_list(self.config.routes_path)
        )
        return TransitSnapshot(stops=stops, routes=routes)

    def _read_list(self, path: Path) -> List[Mapping[str, Any]]:
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise DataUnavailableError(
                f"Failed to read transit data from {path}",
                path=str(path),
                cause=e,
            )

        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise DataUnavailableError(
                f"Expected a list of objects in {path}",
                path=str(path),
            )
        return data

    def _parse_stop(self, row: Mapping[str, Any]) -> Stop:
        try:
            return Stop(
                id=int(row["id"]),
                lat=float(row["lat"]),
                lng=float(row["lng"]),
                name_mm=str(row["name_mm"]).strip(),
                name_en=str(row.get("name_en") or "").strip(),
                road_mm=str(row.get("road_mm") or "").strip(),
                road_en=str(row.get("road_en") or "").strip(),
                township_mm=str(row.get("township_mm") or "").strip(),
                township_en=str(row.get("township_en") or "").strip(),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DataUnavailableError(
                f"Invalid stop record: {row!r}",
                path=str(self.config.stops_path),
                cause=e,
            )

    def _parse_route(self, row: Mapping[str, Any]) -> Route:
        try:
            stops = row["stops"]
            if not isinstance(stops, list):
                raise TypeError("'stops' must be a list of stop names")
            operator = row.get("operator")
            return Route(
                id=str(row["id"]),
                color=str(row.get("color") or ""),
                stops=tuple(str(name) for name in stops),
                operator=str(operator) if operator else None,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DataUnavailableError(
                f"Invalid route record: {row!r}",
                path=str(self.config.routes_path),
                cause=e,
            )
