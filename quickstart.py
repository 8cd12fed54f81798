#!/usr/bin/env python3
"""
Quick Start Script for Island Transit Search

This script checks the installation against the sample data in ``data/``.
Run this after installation to verify everything is working correctly.
"""

import asyncio
import sys
from pathlib import Path

DATA_DIR = Path(__file__).parent / "data"


def print_banner():
    """Print welcome banner."""
    print("⛴️ " * 25)
    print("🌴 Island Transit Search - Quick Start")
    print("⛴️ " * 25)
    print()


def check_data():
    """Load the sample data files."""
    print("📂 Loading sample data...")

    from island_transit.data.store import TransitDataStore

    snapshot = TransitDataStore(DATA_DIR).load_snapshot()
    if snapshot.load_failed:
        print(f"❌ Could not load: {', '.join(snapshot.failed_sources)}")
        return None

    print(
        f"✅ {len(snapshot.stations)} stations, {len(snapshot.lines)} lines, "
        f"{len(snapshot.fares)} fares"
    )
    return snapshot


def check_search(snapshot):
    """Run a trip search and print its statistics."""
    print("\n🔎 Testing trip search...")

    from island_transit.core import TripSearchEngine, aggregate

    results = TripSearchEngine(snapshot).search_trips("NOU", "KON")
    if not results:
        print("❌ No trips found from NOU to KON")
        return False

    for result in results:
        print(f"   • {result}")
    stats = aggregate(results)
    print(f"✅ {stats.total_routes} trips, average {stats.average_duration}")
    return True


async def check_mcp_server(snapshot):
    """Call the MCP tools directly."""
    print("\n📡 Testing MCP Server...")

    from island_transit.config import Settings
    from island_transit.mcp.server import TransitMCPServer

    server = TransitMCPServer(Settings(data_source=str(DATA_DIR)), snapshot=snapshot)
    result = await server.call_tool("search_stations", {"query": "lifou"})
    if result[0].text.startswith("Error"):
        print(f"❌ {result[0].text}")
        return False

    print("✅ Station search working")
    result = await server.call_tool("list_fares", {"zone": "loyaute"})
    print("✅ Fare listing working")
    return not result[0].text.startswith("Error")


def print_next_steps():
    """Print next steps for the user."""
    print("\n📋 What You Can Do Next:")
    print("   1. Search trips: island-transit search NOU KON --stats")
    print("   2. Browse the board: island-transit schedules list --tab islands")
    print("   3. Start the MCP server: island-transit-mcp")
    print("   4. Run the tests: pytest")


async def main():
    """Main quick start routine."""
    print_banner()

    try:
        import island_transit
        print(f"✅ island_transit {island_transit.__version__} imported")
    except ImportError as e:
        print(f"❌ Package import failed: {e}")
        print("💡 Try: pip install -e .")
        sys.exit(1)

    snapshot = check_data()
    if snapshot is None:
        sys.exit(1)

    success_count = 0
    if check_search(snapshot):
        success_count += 1
    if await check_mcp_server(snapshot):
        success_count += 1

    print(f"\n📊 Quick Start Results: {success_count}/2 checks passed")
    if success_count == 2:
        print("🎉 Your installation is working.")
        print_next_steps()
    else:
        print("⚠️  Some checks failed. Check the messages above.")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
