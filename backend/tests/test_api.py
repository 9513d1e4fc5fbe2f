from fastapi.testclient import TestClient

from objects_checker.main import app

client = TestClient(app)

WEAPONS = [
    {
        "class": "Weapons",
        "objects": [
            {"id": 1, "name": "Sword"},
            {"id": 3, "name": "Axe", "tags": "heavy"},
        ],
    }
]


def test_health() -> None:
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root() -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "Objects Checker"


def test_validate_returns_report() -> None:
    response = client.post("/api/v1/validate", json=WEAPONS)

    assert response.status_code == 200
    body = response.json()
    assert body["summary"] == {
        "error_count": 1,
        "warning_count": 0,
        "class_count": 1,
        "object_count": 2,
        "passed": False,
    }
    assert body["findings"] == [
        {
            "code": "ID_SEQUENCE_GAP",
            "severity": "error",
            "message": "There's 2 number gap between Ids '1' and '3'",
            "check": "CheckForIdSequence",
        }
    ]


def test_validate_rejects_malformed_catalog() -> None:
    response = client.post(
        "/api/v1/validate",
        json=[{"class": "Weapons", "objects": [{"id": "first", "name": "Sword"}]}],
    )

    assert response.status_code == 422


def test_list_objects_sorted() -> None:
    response = client.post("/api/v1/objects", params={"sort_by": "name"}, json=WEAPONS)

    assert response.status_code == 200
    assert [row["name"] for row in response.json()] == ["Axe", "Sword"]
    assert response.json()[0]["tags"] == "heavy"


def test_list_objects_rejects_unknown_sort() -> None:
    response = client.post("/api/v1/objects", params={"sort_by": "tags"}, json=WEAPONS)

    assert response.status_code == 422


def test_unknown_sort_is_rejected_by_request_validation() -> None:
    response = client.post("/api/v1/objects", params={"sort_by": "tags"}, json=WEAPONS)

    assert response.status_code == 422
    assert "detail" in response.json()


def test_list_objects_without_tags_uses_empty_string() -> None:
    response = client.post("/api/v1/objects", json=WEAPONS)

    assert [row["tags"] for row in response.json()] == ["", "heavy"]
