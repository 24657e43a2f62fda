# tests/test_api.py
"""
Integration tests for the division endpoint, through FastAPI's TestClient.
"""
from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

STUDENTS = [
    {"first_name": "Mitko", "last_name": "Dimitrov", "id": "1234567"},
    {"first_name": "Sam", "last_name": "Smith", "id": "1234597"},
    {"first_name": "Emilyana", "last_name": "Ilieva", "id": "1232567"},
    {"first_name": "Sam", "last_name": "de Vries", "id": "2309832"},
]


def test_index():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_divide():
    response = client.post("/api/v1/divisions/", json={
        "students": STUDENTS,
        "group_size": 2,
        "deviation": 1,
        "seed": 1,
    })
    assert response.status_code == 200
    data = response.json()

    assert [len(g) for g in data["groups"]] == [2, 2]
    ids = sorted(s["id"] for g in data["groups"] for s in g)
    assert ids == sorted(s["id"] for s in STUDENTS)
    assert data["unique_first_names"] == {"Mitko": True, "Sam": False, "Emilyana": True}

    names = {s["id"]: s["display_name"] for g in data["groups"] for s in g}
    assert names["1234567"] == "Mitko"
    assert names["1234597"] == "Sam S"
    assert names["2309832"] == "Sam V"


def test_divide_same_seed_same_groups():
    body = {"students": STUDENTS, "group_size": 2, "seed": 8}
    assert client.post("/api/v1/divisions/", json=body).json() == client.post("/api/v1/divisions/", json=body).json()


def test_divide_invalid_group_size():
    response = client.post("/api/v1/divisions/", json={"students": STUDENTS, "group_size": 0})
    assert response.status_code == 422


def test_divide_invalid_deviation():
    response = client.post("/api/v1/divisions/", json={"students": STUDENTS, "group_size": 2, "deviation": 2})
    assert response.status_code == 422


def test_divide_infeasible():
    response = client.post("/api/v1/divisions/", json={"students": STUDENTS, "group_size": 10, "deviation": 1})
    assert response.status_code == 409
    assert "Unable to divide a class of 4" in response.json()["detail"]
