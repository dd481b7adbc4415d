import pytest
import redis
from unittest.mock import Mock
from fastapi.testclient import TestClient

from employee_registry.app import create_app
from employee_registry.errors import StoreUnavailableError
from employee_registry.routes.employees import get_repository

ADA = {
    "name": "Ada",
    "email": "ada@x.com",
    "contacts": [{"type": "phone", "value": "555-0100"}]
}

@pytest.fixture
def app(engine, mock_redis):
    return create_app(engine=engine, redis_client=mock_redis)

@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c

def create(client, name, email, contacts=None):
    response = client.post("/employees", json={
        "name": name,
        "email": email,
        "contacts": contacts or []
    })
    assert response.status_code == 201
    return int(response.text.rsplit(" ", 1)[1])

def test_create_employee(client):
    response = client.post("/employees", json=ADA)
    assert response.status_code == 201
    assert response.text == "Created employee with ID 1"

def test_get_employee(client):
    client.post("/employees", json=ADA)
    
    response = client.get("/employees/1")
    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "name": "Ada",
        "email": "ada@x.com",
        "contacts": [{"type": "phone", "value": "555-0100"}]
    }

def test_get_employee_not_found(client):
    response = client.get("/employees/999")
    assert response.status_code == 404
    assert response.text == "Employee with ID 999 not found"

def test_list_employees_empty(client):
    response = client.get("/employees", params={"page": 1, "limit": 10})
    assert response.status_code == 200
    assert response.json() == []

def test_list_employees_paginated(client):
    for i in range(12):
        create(client, f"Employee {i}", f"e{i}@x.com")
    
    first_page = client.get("/employees").json()
    assert len(first_page) == 10
    assert first_page[0] == {"id": 1, "name": "Employee 0", "email": "e0@x.com"}
    
    second_page = client.get("/employees", params={"page": 2, "limit": 10}).json()
    assert [e["id"] for e in second_page] == [11, 12]
    
    assert client.get("/employees", params={"page": 5, "limit": 10}).json() == []

def test_list_excludes_contacts(client):
    client.post("/employees", json=ADA)
    
    employees = client.get("/employees").json()
    assert "contacts" not in employees[0]

@pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "abc"}])
def test_list_rejects_bad_pagination(client, params):
    response = client.get("/employees", params=params)
    assert response.status_code == 422

def test_list_served_from_cache(client, mock_redis):
    client.post("/employees", json=ADA)
    client.get("/employees")
    client.get("/employees")
    
    assert mock_redis.setex.call_count == 1
    assert mock_redis.get.call_count == 2

def test_update_employee(client):
    employee_id = create(client, "Ada", "ada@x.com", ADA["contacts"])
    client.get("/employees")
    
    response = client.put(f"/employees/{employee_id}", json={
        "name": "Ada Lovelace",
        "email": "lovelace@x.com",
        "contacts": [{"type": "email", "value": "ada@x.com"}]
    })
    assert response.status_code == 200
    assert response.text == f"Updated employee with ID {employee_id}"
    
    assert client.get("/employees").json() == [
        {"id": employee_id, "name": "Ada Lovelace", "email": "lovelace@x.com"}
    ]
    detail = client.get(f"/employees/{employee_id}").json()
    assert detail["contacts"] == [{"type": "email", "value": "ada@x.com"}]

def test_update_employee_not_found(client, mock_redis):
    response = client.put("/employees/999", json=ADA)
    assert response.status_code == 404
    mock_redis.delete.assert_not_called()

def test_delete_employee(client):
    employee_id = create(client, "Ada", "ada@x.com", ADA["contacts"])
    client.get("/employees")
    
    response = client.delete(f"/employees/{employee_id}")
    assert response.status_code == 200
    assert response.text == f"Deleted employee with ID {employee_id}"
    
    assert client.get("/employees").json() == []
    assert client.get(f"/employees/{employee_id}").status_code == 404

def test_delete_employee_not_found(client):
    response = client.delete("/employees/999")
    assert response.status_code == 404

@pytest.mark.parametrize("payload", [
    {"email": "ada@x.com"},
    {"name": "   ", "email": "ada@x.com"},
    {"name": "Ada", "email": "not-an-email"},
    {"name": "Ada", "email": "ada@x.com", "contacts": [{"type": " ", "value": "x"}]},
])
def test_create_rejects_invalid_payload(client, mock_redis, payload):
    response = client.post("/employees", json=payload)
    assert response.status_code == 422
    mock_redis.delete.assert_not_called()
    assert client.get("/employees").json() == []

def test_store_failure_returns_500(app, client):
    repository = Mock()
    for operation in ("list_all", "get_by_id", "create", "update", "delete"):
        getattr(repository, operation).side_effect = StoreUnavailableError()
    app.dependency_overrides[get_repository] = lambda: repository
    
    response = client.get("/employees")
    assert response.status_code == 500
    assert response.text == "Error fetching employees"
    
    response = client.post("/employees", json=ADA)
    assert response.status_code == 500
    assert response.text == "Error creating employee"
    
    response = client.get("/employees/1")
    assert response.status_code == 500
    assert response.text == "Error fetching employee with ID 1"
    
    response = client.put("/employees/1", json=ADA)
    assert response.status_code == 500
    assert response.text == "Error updating employee with ID 1"
    
    response = client.delete("/employees/1")
    assert response.status_code == 500
    assert response.text == "Error deleting employee with ID 1"

@pytest.mark.parametrize("employee_id", ["99999999999999999999", str(2**31), "0", "-1"])
def test_out_of_range_id_rejected(client, employee_id):
    """Ids the employees table cannot hold never reach the store"""
    assert client.get(f"/employees/{employee_id}").status_code == 422
    assert client.put(f"/employees/{employee_id}", json=ADA).status_code == 422
    assert client.delete(f"/employees/{employee_id}").status_code == 422

def test_largest_valid_id_not_found(client):
    response = client.get(f"/employees/{2**31 - 1}")
    assert response.status_code == 404

def test_cache_outage_does_not_fail_requests(engine):
    broken_redis = Mock()
    broken_redis.get.side_effect = redis.exceptions.ConnectionError("refused")
    broken_redis.setex.side_effect = redis.exceptions.ConnectionError("refused")
    broken_redis.delete.side_effect = redis.exceptions.ConnectionError("refused")
    
    with TestClient(create_app(engine=engine, redis_client=broken_redis)) as client:
        assert client.post("/employees", json=ADA).status_code == 201
        assert client.get("/employees").json() == [{"id": 1, "name": "Ada", "email": "ada@x.com"}]

def test_runs_without_redis(engine):
    with TestClient(create_app(engine=engine, redis_client=None)) as client:
        assert client.post("/employees", json=ADA).status_code == 201
        assert len(client.get("/employees").json()) == 1
        assert client.get("/health").json()["redis"] == "disabled"

def test_health_check(client, mock_redis):
    mock_redis.get.side_effect = lambda key: "test"
    
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "connected"
    assert data["redis"] == "healthy"

def test_root(client):
    assert client.get("/").json()["message"] == "Employee Registry API"
