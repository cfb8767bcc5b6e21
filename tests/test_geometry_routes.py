def test_list_geometry_empty(client):
    resp = client.get("/geometry")
    assert resp.status_code == 200
    assert resp.json() == []


def test_post_geometry_created(client, point):
    resp = client.post("/geometry", json=point)
    assert resp.status_code == 201
    assert resp.json() == {"type": "Point", "coordinates": [102.0, 0.5]}


def test_post_invalid_geometry_is_400(client):
    resp = client.post("/geometry", json={"type": "Point", "coordinates": [[1, 2]]})
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["issues"][0]["kind"] == "ShapeMismatch"
    assert detail["issues"][0]["field"] == "coordinates"


def test_post_unknown_type_is_400(client):
    resp = client.post("/geometry", json={"type": "Circle", "radius": 2})
    assert resp.status_code == 400
    assert resp.json()["detail"]["issues"][0]["kind"] == "InvalidType"


def test_post_non_object_is_400(client):
    resp = client.post("/geometry", json=[1, 2])
    assert resp.status_code == 400


def test_open_ring_depends_on_app_mode(client, lenient_client):
    body = {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1]]]}
    assert client.post("/geometry", json=body).status_code == 400
    assert lenient_client.post("/geometry", json=body).status_code == 201


def test_list_groups_single_geometries(client, point, polygon):
    client.post("/geometry", json=point)
    client.post("/geometry", json=polygon)
    collection = {"type": "GeometryCollection", "geometries": [point], "name": "mine"}
    client.post("/geometry", json=collection)

    resp = client.get("/geometry")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 2
    assert body[0]["name"] == "mine"
    assert body[0]["bbox"] == [102.0, 0.5, 102.0, 0.5]
    assert body[1]["type"] == "GeometryCollection"
    assert [g["type"] for g in body[1]["geometries"]] == ["Point", "Polygon"]
    assert body[1]["bbox"] == [0.0, 0.0, 102.0, 1.0]


def test_rejected_geometry_is_not_stored(client):
    client.post("/geometry", json={"type": "Point", "coordinates": []})
    assert client.get("/geometry").json() == []


def test_validate_endpoint_reports_issues(client, point):
    ok = client.post("/geometry/validate", json={"type": "Feature", "geometry": point, "properties": {}})
    assert ok.status_code == 200
    assert ok.json() == {"valid": True, "type": "Feature", "issues": []}

    bad = client.post(
        "/geometry/validate",
        json={"type": "FeatureCollection", "features": [{"type": "Feature", "geometry": None}]},
    )
    assert bad.status_code == 200
    report = bad.json()
    assert report["valid"] is False
    assert report["issues"][0]["index"] == 0
    assert client.get("/geometry").json() == []


def test_post_integer_beyond_float_range_is_400(client):
    body = '{"type": "Point", "coordinates": [1' + "0" * 400 + ", 0]}"
    resp = client.post("/geometry", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    issue = resp.json()["detail"]["issues"][0]
    assert issue["kind"] == "ShapeMismatch"
    assert issue["field"] == "coordinates"
    assert client.get("/geometry").json() == []
