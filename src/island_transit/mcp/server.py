"""MCP Server for Island Transit Search.

This module implements a Model Context Protocol (MCP) server that exposes
trip search, station lookup and fare listing over the island network.
"""

import asyncio
import json
import logging
from typing import Any

from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import (
    TextContent,
    Tool,
)

from .. import __version__
from ..catalog.fares import ZONES, FareTable
from ..catalog.stations import StationDirectory
from ..config import Settings
from ..core.models import (
    SERVICE_CLASSES,
    TIME_PREFERENCES,
    SearchCriteria,
    TransitSnapshot,
)
from ..core.search import TripSearchEngine
from ..core.statistics import aggregate
from ..data.store import TransitDataStore
from ..utils.geo import format_distance
from ..utils.labels import format_price, service_class_label

logger = logging.getLogger(__name__)


class TransitMCPServer:
    """MCP Server for Island Transit Search functionality."""

    def __init__(
        self,
        settings: Settings | None = None,
        snapshot: TransitSnapshot | None = None,
    ) -> None:
        """Initialize the Transit MCP Server.

        Args:
            settings: Configuration, read from the environment when omitted
            snapshot: Preloaded data, fetched from the data source when omitted
        """
        self.settings = settings or Settings()
        self.server = Server("island-transit")

        if snapshot is None:
            snapshot = self._load_snapshot()
        self.set_snapshot(snapshot)

        # Register handlers
        self._register_handlers()

    def _load_snapshot(self) -> TransitSnapshot:
        """Load the static collections from the configured source."""
        logger.info(f"Loading transit data from {self.settings.data_source}")
        store = TransitDataStore(
            self.settings.data_source, timeout=self.settings.timeout
        )
        snapshot = store.load_snapshot()
        if snapshot.load_failed:
            logger.warning(
                f"Could not load {', '.join(snapshot.failed_sources)}. "
                "Continuing with empty collections."
            )
        return snapshot

    def set_snapshot(self, snapshot: TransitSnapshot) -> None:
        """Replace the data served by the tools."""
        self.snapshot = snapshot
        self.engine = TripSearchEngine(snapshot)
        self.directory = StationDirectory(snapshot)
        self.fare_table = FareTable(snapshot)

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List available tools."""
            return self.list_tools()

        @self.server.call_tool()
        async def handle_call_tool(
            name: str, arguments: dict[str, Any]
        ) -> list[TextContent]:
            """Handle tool calls."""
            return await self.call_tool(name, arguments)

    def list_tools(self) -> list[Tool]:
        return [
            Tool(
                name="search_trips",
                description="Search scheduled trips between two stations of the island network",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "origin_id": {
                            "type": "string",
                            "description": "Origin station id",
                        },
                        "destination_id": {
                            "type": "string",
                            "description": "Destination station id",
                        },
                        "service_class": {
                            "type": "string",
                            "description": "Class used for the displayed price",
                            "enum": list(SERVICE_CLASSES),
                            "default": self.settings.default_service_class,
                        },
                        "time_preference": {
                            "type": "string",
                            "description": "Departure time of day: morning (6-12h), afternoon (12-18h), evening (18-22h) or any",
                            "enum": list(TIME_PREFERENCES),
                            "default": "any",
                        },
                    },
                    "required": ["origin_id", "destination_id"],
                },
            ),
            Tool(
                name="search_stations",
                description="Search stations by French or English name, or by island",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Part of a station or island name",
                        },
                        "limit": {
                            "type": "integer",
                            "description": "Maximum number of results to return",
                            "default": 10,
                            "minimum": 1,
                            "maximum": 100,
                        },
                    },
                    "required": ["query"],
                },
            ),
            Tool(
                name="get_station_info",
                description="Get lines, trips and suggested destinations of a station",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "station_id": {
                            "type": "string",
                            "description": "Station id",
                        }
                    },
                    "required": ["station_id"],
                },
            ),
            Tool(
                name="list_fares",
                description="List fares of a geographic zone, cheapest first",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "zone": {
                            "type": "string",
                            "enum": list(ZONES),
                            "default": "all",
                        },
                        "service_class": {
                            "type": "string",
                            "enum": list(SERVICE_CLASSES),
                            "default": self.settings.default_service_class,
                        },
                        "limit": {
                            "type": "integer",
                            "default": 50,
                            "minimum": 1,
                            "maximum": 1000,
                        },
                    },
                },
            ),
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Dispatch a tool call, reporting failures as text."""
        try:
            if name == "search_trips":
                return await self._search_trips(arguments)
            elif name == "search_stations":
                return await self._search_stations(arguments)
            elif name == "get_station_info":
                return await self._get_station_info(arguments)
            elif name == "list_fares":
                return await self._list_fares(arguments)
            else:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]

        except Exception as e:
            logger.error(f"Error in tool {name}: {e}")
            return [TextContent(type="text", text=f"Error: {str(e)}")]

    async def _search_trips(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Search trips between two stations."""
        service_class = arguments.get(
            "service_class", self.settings.default_service_class
        )
        criteria = SearchCriteria(
            origin_id=arguments.get("origin_id"),
            destination_id=arguments.get("destination_id"),
            service_class=service_class,
            time_preference=arguments.get("time_preference", "any"),
        )
        results = self.engine.search(criteria)

        if not results:
            return [
                TextContent(
                    type="text",
                    text=f"No trips found from {criteria.origin_id} to {criteria.destination_id}",
                )
            ]

        currency = self.settings.currency
        first = results[0]
        result_text = f"**Found {len(results)} trips from {first.origin} to {first.destination}** ({format_distance(first.distance)}):\n\n"

        for idx, r in enumerate(results, 1):
            result_text += f"{idx}. **{r.schedule.trip_id}** ({r.schedule.direction})\n"
            result_text += f"   • Departure: {r.departure_time or 'N/A'}\n"
            result_text += f"   • Arrival: {r.arrival_time or 'N/A'}\n"
            result_text += f"   • Duration: {r.duration}\n"
            result_text += f"   • {service_class_label(service_class)}: {format_price(r.price_for(service_class), currency)}\n"
            result_text += "\n"

        stats = aggregate(results)
        result_text += (
            f"Average duration: {stats.average_duration} | "
            f"Morning {stats.time_distribution.morning}, "
            f"afternoon {stats.time_distribution.afternoon}, "
            f"evening {stats.time_distribution.evening}\n"
        )

        trips_data = [
            {
                "trip_id": r.schedule.trip_id,
                "direction": r.schedule.direction,
                "origin_id": r.origin.id,
                "destination_id": r.destination.id,
                "departure_time": r.departure_time,
                "arrival_time": r.arrival_time,
                "duration": r.duration,
                "distance_km": r.distance,
                "prices": r.price.model_dump(mode="json"),
            }
            for r in results
        ]

        return [
            TextContent(type="text", text=result_text),
            TextContent(
                type="text",
                text=f"JSON Data:\n```json\n{json.dumps(trips_data, indent=2, ensure_ascii=False)}\n```",
            ),
        ]

    async def _search_stations(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Search stations by name or island."""
        query = arguments["query"]
        limit = arguments.get("limit", 10)

        stations = self.engine.search_stations(query, limit=limit)
        if not stations:
            return [
                TextContent(type="text", text=f"No stations found matching '{query}'")
            ]

        result_text = f"**Found {len(stations)} stations matching '{query}':**\n\n"
        for i, station in enumerate(stations, 1):
            result_text += f"{i}. **{station.name_fr}** (ID: {station.id})"
            result_text += f" - {station.island_fr}"
            if station.name_en != station.name_fr:
                result_text += f"\n   English: {station.name_en}"
            result_text += "\n\n"

        stations_data = [s.model_dump(mode="json") for s in stations]

        return [
            TextContent(type="text", text=result_text),
            TextContent(
                type="text",
                text=f"JSON Data:\n```json\n{json.dumps(stations_data, indent=2, ensure_ascii=False)}\n```",
            ),
        ]

    async def _get_station_info(self, arguments: dict[str, Any]) -> list[TextContent]:
        """Get detailed information about a specific station."""
        station_id = arguments["station_id"]

        summary = self.directory.get(station_id)
        if summary is None:
            return [TextContent(type="text", text=f"Station '{station_id}' not found")]

        station = summary.station
        result_text = f"**{station.name_fr}** ({station.name_en})\n\n"
        result_text += f"• **Island:** {station.island_fr}\n"
        result_text += f"• **Coordinates:** {station.coordinates.lat}, {station.coordinates.lon}\n"
        result_text += f"• **Trips:** {summary.schedule_count}\n"
        result_text += f"• **Connections:** {summary.connections_count}\n"

        if summary.lines_served:
            line_names = ", ".join(line.name for line in summary.lines_served)
            result_text += f"• **Lines:** {line_names}\n"

        destinations = self.engine.popular_destinations(station_id)
        if destinations:
            names = ", ".join(d.name_fr for d in destinations)
            result_text += f"• **Popular destinations:** {names}\n"

        station_data = {
            **station.model_dump(mode="json"),
            "lines": [line.id for line in summary.lines_served],
            "schedule_count": summary.schedule_count,
            "connections_count": summary.connections_count,
            "popular_destinations": [d.id for d in destinations],
        }

        return [
            TextContent(type="text", text=result_text),
            TextContent(
                type="text",
                text=f"\nJSON Data:\n```json\n{json.dumps(station_data, indent=2, ensure_ascii=False)}\n```",
            ),
        ]

    async def _list_fares(self, arguments: dict[str, Any]) -> list[TextContent]:
        """List fares of a zone."""
        zone = arguments.get("zone", "all")
        service_class = arguments.get(
            "service_class", self.settings.default_service_class
        )
        limit = arguments.get("limit", 50)

        fares = self.fare_table.select(zone, service_class)[:limit]
        if not fares:
            return [TextContent(type="text", text=f"No fares found in zone {zone}")]

        currency = self.settings.currency
        result_text = f"**Fares ({len(fares)}, zone: {zone}, {service_class_label(service_class)}):**\n\n"
        for i, display in enumerate(fares, 1):
            result_text += f"{i}. {display.origin.name_fr} → {display.destination.name_fr}: "
            result_text += format_price(display.fare.prices.for_class(service_class), currency)
            if display.distance is not None:
                result_text += f" ({format_distance(display.distance)})"
            result_text += "\n"

        return [TextContent(type="text", text=result_text)]


async def main() -> None:
    """Main entry point for the MCP server."""
    settings = Settings()
    # Configure logging
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting Island Transit MCP Server")

    # Create the server
    server_instance = TransitMCPServer(settings)

    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP Server running with stdio transport")
        await server_instance.server.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name="island-transit",
                server_version=__version__,
                capabilities=server_instance.server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def main_sync() -> None:
    """Synchronous wrapper for the async main function - used as entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    main_sync()
