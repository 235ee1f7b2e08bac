def test_create_company(client):
    resp = client.post("/companies", json={
        "handle": "new",
        "name": "New",
        "numEmployees": 10,
        "description": "DescNew",
        "logoUrl": "http://new.img",
    })
    assert resp.status_code == 201
    assert resp.json() == {
        "handle": "new",
        "name": "New",
        "numEmployees": 10,
        "description": "DescNew",
        "logoUrl": "http://new.img",
    }


def test_create_company_duplicate_is_400(client):
    resp = client.post("/companies", json={"handle": "c1", "name": "C1", "description": "d"})
    assert resp.status_code == 400


def test_list_companies_filtered(client):
    resp = client.get("/companies", params={"nameLike": "c", "minEmployees": 2, "maxEmployees": 3})
    assert resp.status_code == 200
    assert [c["handle"] for c in resp.json()] == ["c2", "c3"]


def test_list_companies_inverted_range_is_400(client):
    resp = client.get("/companies", params={"minEmployees": 3, "maxEmployees": 1})
    assert resp.status_code == 400
    assert resp.json()["error"]["error_code"] == "VALIDATION_ERROR"


def test_get_company_with_jobs(client, job_ids):
    resp = client.get("/companies/c1")
    assert resp.status_code == 200
    body = resp.json()
    assert body["numEmployees"] == 1
    assert [job["id"] for job in body["jobs"]] == [job_ids[0]]


def test_get_company_not_found(client):
    resp = client.get("/companies/nope")
    assert resp.status_code == 404
    assert resp.json()["error"]["error_code"] == "COMPANY_NOT_FOUND"


def test_update_company(client):
    resp = client.patch("/companies/c1", json={"numEmployees": 50, "logoUrl": "http://x.img"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["numEmployees"] == 50
    assert body["logoUrl"] == "http://x.img"
    assert body["name"] == "C1"


def test_update_company_handle_is_422(client):
    assert client.patch("/companies/c1", json={"handle": "c9"}).status_code == 422


def test_delete_company(client):
    resp = client.delete("/companies/c1")
    assert resp.status_code == 200
    assert resp.json() == {"deleted": "c1"}
    assert [job["title"] for job in client.get("/jobs").json()] == ["j2", "j3"]
