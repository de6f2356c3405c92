import csv
import io

import pytest

from nourishnet.models.domain import Point, Stop
from nourishnet.services.export.geojson import route_to_geojson
from nourishnet.services.outputs.routing_formatter import route_result_to_csv, route_result_to_json
from nourishnet.services.routing.sequencer import compute_route

DEPOT = Point(0.0, 0.0)


def _route():
    stops = [
        Stop(id="S2", name="Asha", address="12 Park Street", location=Point(0.0, 0.02)),
        Stop(id="S1", name="Ravi", address="4 Lake View", location=Point(0.0, 0.01)),
    ]
    return compute_route(DEPOT, stops)


def test_route_result_to_json_rounds_for_display():
    result = _route()

    payload = route_result_to_json(result)

    assert payload["stop_count"] == 2
    assert payload["total_distance_km"] == round(result.total_distance_meters / 1000.0, 1)
    assert payload["total_time_minutes"] == round(result.total_time_minutes)
    first = payload["stops"][0]
    assert first["stop_id"] == "S1"
    assert first["name"] == "Ravi"
    assert first["order"] == 1
    assert first["distance_from_previous_km"] == pytest.approx(1.11, abs=0.01)
    assert isinstance(first["eta_minutes"], int)


def test_route_result_to_csv_writes_one_row_per_step():
    rows = list(csv.DictReader(io.StringIO(route_result_to_csv(_route()))))

    assert [row["stop_id"] for row in rows] == ["S1", "S2"]
    assert [row["order"] for row in rows] == ["1", "2"]
    assert rows[1]["address"] == "12 Park Street"
    assert float(rows[0]["latitude"]) == 0.01


def test_route_to_geojson_contains_depot_stops_and_path():
    collection = route_to_geojson(DEPOT, _route())

    kinds = [feature["properties"]["kind"] for feature in collection["features"]]
    assert kinds == ["depot", "stop", "stop", "path"]
    depot_feature = collection["features"][0]
    assert depot_feature["geometry"]["type"] == "Point"
    assert list(depot_feature["geometry"]["coordinates"]) == [0.0, 0.0]
    path = collection["features"][-1]
    assert path["geometry"]["type"] == "LineString"
    assert [list(c) for c in path["geometry"]["coordinates"]] == [[0.0, 0.0], [0.0, 0.01], [0.0, 0.02]]
    assert path["properties"]["source"] == "straight"


def test_route_to_geojson_uses_road_path_in_lon_lat_order():
    road = [(0.0, 0.0), (0.005, 0.001), (0.01, 0.0), (0.02, 0.0)]

    collection = route_to_geojson(DEPOT, _route(), path=road)

    path = collection["features"][-1]
    assert path["properties"]["source"] == "road"
    assert [list(c) for c in path["geometry"]["coordinates"]][1] == [0.001, 0.005]


def test_route_to_geojson_without_stops_has_only_depot():
    collection = route_to_geojson(DEPOT, compute_route(DEPOT, []))

    assert [feature["properties"]["kind"] for feature in collection["features"]] == ["depot"]
