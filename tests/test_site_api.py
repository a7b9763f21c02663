"""
Company/founder/intro documents, AI resources, partners, dashboard and the
app-wide error handlers.
"""
from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import png


def test_health(client):
    assert client.get("/api/health").json() == {"status": "OK", "message": "XUELONG AI Server is running"}


def test_company_update_keeps_empty_fields(client, data_dir):
    resp = client.put("/api/company", json={"name": "", "phone": "010-1234"})

    company = resp.json()
    assert company["name"] == "XUELONG AI"
    assert company["phone"] == "010-1234"
    assert '"phone": "010-1234"' in (data_dir / "company.json").read_text(encoding="utf-8")


def test_founder_photo_upload_and_url(client, uploads_dir):
    uploaded = client.put("/api/founder", data={"name": "张雪珑"}, files={"photo": png("me.png")}).json()
    assert uploaded["photo"].startswith("/uploads/photo-")
    assert (uploads_dir / uploaded["photo"].rsplit("/", 1)[1]).exists()

    linked = client.put("/api/founder", data={"photo": "/founder-photo.svg", "title": "CTO"}).json()
    assert linked["photo"] == "/founder-photo.svg"
    assert linked["title"] == "CTO"

    via_json = client.put("/api/founder", json={"description": "bio"}).json()
    assert via_json["description"] == "bio"
    assert via_json["photo"] == "/founder-photo.svg"


def test_intro_paragraphs(client):
    resp = client.put("/api/company-intro", json={"paragraphs": ["one", "two"]})
    assert resp.json()["paragraphs"] == ["one", "two"]
    assert client.put("/api/company-intro", json={}).json()["paragraphs"] == ["one", "two"]


def test_ai_resources_crud(client):
    created = client.post("/api/ai-resources", json={"name": "Gemini", "category": "对话AI", "url": "https://x"})
    assert created.status_code == 201
    resource = created.json()
    assert resource["id"] == 5
    assert resource["isActive"] is True

    updated = client.put(f"/api/ai-resources/{resource['id']}", json={"isActive": False, "name": ""}).json()
    assert updated["isActive"] is False
    assert updated["name"] == "Gemini"

    assert client.get(f"/api/ai-resources/{resource['id']}").json()["category"] == "对话AI"
    assert client.delete(f"/api/ai-resources/{resource['id']}").json() == {
        "message": "AI Resource deleted successfully"
    }
    missing = client.get(f"/api/ai-resources/{resource['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"message": "AI Resource not found"}


def test_partner_requires_name(client):
    assert client.post("/api/partners", json={"website": "https://x"}).status_code == 400

    partner = client.post("/api/partners", json={"name": "华为技术", "website": "https://www.huawei.com"}).json()
    assert partner["id"] == 4
    assert [p["name"] for p in client.get("/api/partners").json()][-1] == "华为技术"


def test_services_crud_and_ordering(client):
    created = client.post("/api/services", json={"title": "AI 咨询", "order": 0, "features": ["评估"]})
    assert created.status_code == 201
    service = created.json()
    assert service["id"] == 4
    assert service["templateType"] == "vertical"
    assert service["posterImages"] == [] and service["posterImage"] is None

    listed = client.get("/api/services").json()
    assert listed[0]["id"] == 4

    client.delete("/api/services/4")
    again = client.post("/api/services", json={"title": "Next"}).json()
    assert again["id"] == 5


def test_service_features_can_be_cleared(client):
    service = client.post("/api/services", json={"title": "Tagged", "features": ["a"]}).json()

    cleared = client.put(f"/api/services/{service['id']}", json={"features": []}).json()
    assert cleared["features"] == []

    kept = client.put(f"/api/services/{service['id']}", json={"title": "Renamed"}).json()
    assert kept["features"] == []
    assert kept["title"] == "Renamed"


def test_service_order_is_numeric(client):
    created = client.post("/api/services", json={"title": "Late", "order": "10"}).json()
    assert created["order"] == 10

    client.put("/api/services/1", json={"order": "0"})
    listed = client.get("/api/services")
    assert listed.status_code == 200
    assert [s["id"] for s in listed.json()][0] == 1
    assert [s["id"] for s in listed.json()][-1] == created["id"]

    assert client.put("/api/services/1", json={"order": "first"}).status_code == 400


def test_service_create_normalizes_initial_poster(client):
    single = client.post(
        "/api/services", json={"title": "Single", "templateType": "banner", "posterImages": ["/uploads/x.png"]}
    ).json()
    assert single["posterImage"] == "/uploads/x.png"
    assert single["posterImages"] == []

    grid = client.post("/api/services", json={"title": "Grid", "templateType": "grid", "posterImage": "/uploads/y.png"}).json()
    assert grid["posterImages"] == ["/uploads/y.png"]
    assert grid["posterImage"] is None


def test_service_validation_and_not_found(client):
    assert client.post("/api/services", json={"description": "no title"}).status_code == 400
    assert client.put("/api/services/99", json={"title": "x"}).status_code == 404
    assert client.delete("/api/services/99").json() == {"message": "Service not found"}


def test_dashboard_stats(client):
    client.put("/api/ai-resources/1", json={"isActive": False})

    stats = client.get("/api/dashboard/stats").json()

    assert stats == {
        "totalPosts": 1,
        "totalPartners": 3,
        "totalAiResources": 4,
        "totalServices": 3,
        "activeAiResources": 3,
        "activeServices": 3,
    }


def test_contact_form(client):
    ok = client.post("/api/contact", json={"name": "Li", "email": "li@example.com", "message": "hello"})
    assert ok.status_code == 200
    assert client.post("/api/contact", json={"email": "li@example.com"}).status_code == 400


def test_unmatched_route_returns_404_message(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Route not found"}


def test_missing_body_is_a_400(client):
    resp = client.post("/api/news")
    assert resp.status_code == 400
    assert resp.json()["errors"]


def test_unhandled_errors_become_500(app, monkeypatch):
    def explode():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(app.state.services.catalog, "list", explode)
    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/api/services")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Something went wrong!"}
