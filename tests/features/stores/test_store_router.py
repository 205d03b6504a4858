"""Tests for the store router."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from store_commons.features.cache.adapters.memory_adapter import MemoryAdapter
from store_commons.features.events.adapters.memory_publisher import InMemoryEventPublisher
from store_commons.features.stores.repositories.memory_store_repository import InMemoryStoreRepository
from store_commons.features.stores.routers import get_store_service, store_router
from store_commons.features.stores.services.store_service import StoreService


@pytest.fixture
def app_service(s0, s1):
    return StoreService(
        repository=InMemoryStoreRepository([s0, s1]),
        cache=MemoryAdapter(),
        publisher=InMemoryEventPublisher(),
    )


@pytest.fixture
def client(app_service):
    app = FastAPI()
    app.dependency_overrides[get_store_service] = lambda: app_service
    app.include_router(store_router, prefix="/api/v1")
    with TestClient(app) as test_client:
        yield test_client


class TestStoreRouter:
    """HTTP surface of the store directory."""
    
    def test_list_stores(self, client):
        response = client.get("/api/v1/stores")
        
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [s["id"] for s in body["stores"]] == ["s0", "s1"]
    
    def test_get_store(self, client):
        response = client.get("/api/v1/stores/s0")
        
        assert response.status_code == 200
        assert response.json()["applied_discounts"] == ["d1"]
    
    def test_get_missing_store(self, client):
        response = client.get("/api/v1/stores/missing")
        
        assert response.status_code == 404
        assert response.json()["detail"] == "Store 'missing' not found"
    
    def test_list_by_discount(self, client):
        response = client.get("/api/v1/stores/by-discount/d1")
        
        assert response.status_code == 200
        assert [s["id"] for s in response.json()["stores"]] == ["s0"]
    
    def test_create_store_generates_id(self, client):
        response = client.post("/api/v1/stores", json={"name": "Pop-up", "display_order": 0})
        
        assert response.status_code == 201
        created_id = response.json()["id"]
        assert created_id
        listed = client.get("/api/v1/stores").json()["stores"]
        assert listed[0]["id"] == created_id
    
    def test_create_duplicate_conflicts(self, client):
        response = client.post("/api/v1/stores", json={"id": "s0", "name": "Again"})
        
        assert response.status_code == 409
    
    def test_create_blank_name_rejected(self, client):
        response = client.post("/api/v1/stores", json={"name": "   "})
        
        assert response.status_code == 422
    
    def test_update_store(self, client):
        response = client.put(
            "/api/v1/stores/s1",
            json={"name": "Outlet North", "display_order": 0, "applied_discounts": ["d9"]},
        )
        
        assert response.status_code == 200
        fetched = client.get("/api/v1/stores/s1").json()
        assert fetched["name"] == "Outlet North"
        assert fetched["applied_discounts"] == ["d9"]
    
    def test_update_missing_store(self, client):
        response = client.put("/api/v1/stores/missing", json={"name": "X"})
        
        assert response.status_code == 404
    
    def test_delete_store(self, client):
        assert client.delete("/api/v1/stores/s1").status_code == 204
        
        response = client.delete("/api/v1/stores/s0")
        
        assert response.status_code == 409
        assert response.json()["detail"] == "You cannot delete the only configured store"
        assert client.get("/api/v1/stores").json()["total"] == 1
    
    def test_unconfigured_service_dependency(self):
        app = FastAPI()
        app.include_router(store_router)
        
        with pytest.raises(NotImplementedError):
            TestClient(app).get("/stores")
