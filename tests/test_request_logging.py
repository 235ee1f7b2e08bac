import logging

from fastapi.testclient import TestClient


def test_correlation_id_header_present_on_404():
    from main import app

    client = TestClient(app)

    resp = client.get("/this-path-does-not-exist")
    assert resp.status_code == 404
    assert "X-Correlation-ID" in resp.headers

    client.close()


def test_incoming_correlation_id_is_echoed_and_used_in_errors(client):
    resp = client.get("/jobs/999", headers={"X-Correlation-ID": "abc-123"})
    assert resp.status_code == 404
    assert resp.headers["X-Correlation-ID"] == "abc-123"
    assert resp.json()["error"]["correlation_id"] == "abc-123"


def test_request_completed_is_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="app.requests"):
        client.get("/jobs", headers={"X-Correlation-ID": "log-me"})

    records = [r for r in caplog.records if r.name == "app.requests"]
    assert records
    record = records[-1]
    assert record.getMessage() == "Request completed"
    assert record.correlation_id == "log-me"
    assert record.method == "GET"
    assert record.raw_path == "/jobs"
    assert record.status_code == 200
