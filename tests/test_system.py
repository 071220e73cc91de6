def test_health(test_client):
    r = test_client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert "version" in data

def test_health_under_prefix_needs_no_key(test_client):
    r = test_client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

def test_version(test_client):
    r = test_client.get("/version")
    assert r.status_code == 200
    data = r.json()
    assert data["env"] == "test"
    assert "name" in data and "version" in data

def test_root_redirects_to_docs(test_client):
    r = test_client.get("/", follow_redirects=False)
    assert r.status_code in (301, 302, 307, 308)
    assert "/docs" in r.headers.get("location", "")

def test_missing_api_key_is_rejected(test_client):
    r = test_client.get("/api/subjects")
    assert r.status_code == 401
    assert "error" in r.json()

def test_wrong_api_key_is_rejected(test_client):
    r = test_client.get("/api/subjects", headers={"Authorization": "Bearer nope"})
    assert r.status_code == 401
    assert "error" in r.json()

def test_unknown_route_uses_error_shape(test_client, auth_headers):
    r = test_client.get("/api/does-not-exist", headers=auth_headers)
    assert r.status_code == 404
    assert "error" in r.json()

def test_subjects_are_seeded(test_client, auth_headers):
    r = test_client.get("/api/subjects", headers=auth_headers)
    assert r.status_code == 200
    subjects = r.json()["subjects"]
    assert len(subjects) == 12
    assert subjects[0] == {
        "id": "design",
        "name": "Design",
        "description": "General design tools and resources",
    }

def test_health_reports_store_backend(test_client):
    assert test_client.get("/health").json()["store"] == "memory"

def test_version_reports_api_prefix(test_client):
    assert test_client.get("/version").json()["api_prefix"] == "/api"

def test_api_key_with_extra_suffix_is_rejected(test_client):
    r = test_client.get("/api/subjects", headers={"Authorization": "Bearer test-key-extra"})
    assert r.status_code == 401
