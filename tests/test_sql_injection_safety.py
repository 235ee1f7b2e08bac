def test_job_id_path_injection_returns_422(client):
    # Path param expects int; injection-like string should fail validation
    resp = client.get("/jobs/1 OR 1=1")
    assert resp.status_code == 422


def test_delete_job_path_injection_returns_422(client):
    resp = client.delete("/jobs/1; DROP TABLE jobs;--")
    assert resp.status_code == 422


def test_min_salary_query_injection_returns_400(client):
    resp = client.get("/jobs?minSalary=0; DROP TABLE jobs;--")
    assert resp.status_code == 400


def test_title_query_injection_matches_nothing(client):
    resp = client.get("/jobs", params={"title": "' OR '1'='1"})
    assert resp.status_code == 200
    assert resp.json() == []
    assert len(client.get("/jobs").json()) == 3


def test_company_name_query_injection_matches_nothing(client):
    resp = client.get("/companies", params={"nameLike": "%'; DELETE FROM companies; --"})
    assert resp.status_code == 200
    assert resp.json() == []
    assert len(client.get("/companies").json()) == 4


def test_body_injection_is_stored_verbatim(client, job_ids):
    hostile = "x'; UPDATE jobs SET salary = 0; --"
    resp = client.patch(f"/jobs/{job_ids[0]}", json={"title": hostile})
    assert resp.status_code == 200
    assert resp.json()["title"] == hostile
    assert [job["salary"] for job in client.get("/jobs").json()] == [2000, 3000, 1000]


def test_body_type_injection_returns_422(client, job_ids):
    resp = client.patch(f"/jobs/{job_ids[0]}", json={"salary": "1 OR 1=1"})
    assert resp.status_code == 422
