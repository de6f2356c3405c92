#!/usr/bin/env python3
"""Manual check that the configured OSRM service can route a short delivery run."""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from nourishnet.config import settings
from nourishnet.models.domain import Point, Stop
from nourishnet.services.routing.osrm_client import OSRMClient, build_waypoints, check_health
from nourishnet.services.routing.sequencer import compute_route


def main():
    print("=" * 60)
    print("OSRM Connection Test")
    print("=" * 60)
    print()

    print("1. Checking OSRM configuration...")
    if not settings.osrm_base_url:
        print("   [ERROR] OSRM base URL is not configured")
        print("   Please set NOURISHNET_OSRM_BASE_URL in your .env file")
        return 1
    print(f"   [OK] OSRM Base URL: {settings.osrm_base_url}")
    print(f"   [OK] OSRM Profile: {settings.osrm_profile}")
    print()

    print("2. Testing OSRM health check...")
    if not check_health():
        print("   [ERROR] OSRM service is not responding")
        return 1
    print("   [OK] OSRM service is healthy and accessible!")
    print()

    print("3. Routing a sample delivery run...")
    depot = Point(77.5946, 12.9716)
    stops = [
        Stop(id="S1", name="Indiranagar", address="", location=Point(77.6408, 12.9784)),
        Stop(id="S2", name="Koramangala", address="", location=Point(77.6245, 12.9352)),
        Stop(id="S3", name="MG Road", address="", location=Point(77.6066, 12.9756)),
    ]
    result = compute_route(depot, stops)
    print(f"   [OK] Sequenced order: {', '.join(result.ordered_ids)}")
    print(f"   [OK] Straight-line estimate: {result.total_distance_meters / 1000:.1f} km, {result.total_time_minutes:.0f} min")
    try:
        road = OSRMClient().route(build_waypoints(depot, result))["routes"][0]
    except (ConnectionError, ValueError) as e:
        print(f"   [ERROR] Error during route request: {e}")
        return 1
    print(f"   [OK] Road route: {road['distance'] / 1000:.1f} km, {road['duration'] / 60:.0f} min")
    print()

    print("=" * 60)
    print("[SUCCESS] OSRM is connected and working!")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
