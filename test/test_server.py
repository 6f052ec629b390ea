"""
Tests for the resample HTTP API.
"""

import math

import pytest

import server


@pytest.fixture
def client():
    server.app.config["TESTING"] = True
    with server.app.test_client() as client:
        yield client


SERIES = [["2017-05-05", 22.5], ["2017-05-20", 10.0], ["2017-10-10", 44.5]]


def test_resample(client):
    resp = client.post(
        "/api/resample?resampleFrequency=monthEnd&resampleFunction=sum",
        json=SERIES,
    )
    assert resp.status_code == 200
    assert resp.get_json() == {
        "details": [["2017-05-31", 32.5], ["2017-10-31", 44.5]]
    }


def test_resample_year_end_max(client):
    resp = client.post(
        "/api/resample",
        query_string={"resampleFrequency": "yearEnd", "resampleFunction": "max"},
        json=SERIES,
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"details": [["2017-12-31", 44.5]]}


def test_resample_empty_series(client):
    resp = client.post(
        "/api/resample?resampleFrequency=weekEnd&resampleFunction=min", json=[]
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"details": []}


def test_missing_body(client):
    resp = client.post("/api/resample?resampleFrequency=monthEnd&resampleFunction=sum")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "A timeseries must be provided via POST body"}

    resp = client.post(
        "/api/resample?resampleFrequency=monthEnd&resampleFunction=sum",
        data="[not json",
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "A timeseries must be provided via POST body"}


@pytest.mark.parametrize(
    "body",
    [
        {"data": SERIES},
        "2017-05-05",
        [["2017-05-05"]],
        [["2017-05-05", 1.0, 2.0]],
        SERIES + [{"date": "2017-05-05", "value": 1.0}],
    ],
)
def test_malformed_body(client, body):
    resp = client.post(
        "/api/resample?resampleFrequency=monthEnd&resampleFunction=sum", json=body
    )
    assert resp.status_code == 400
    assert resp.get_json() == {
        "message": "The timeseries must be a list of [date, value] pairs"
    }


@pytest.mark.parametrize(
    "query, body, message",
    [
        (
            "resampleFrequency=dayEnd&resampleFunction=sum",
            SERIES,
            "Invalid resampleFrequency parameter",
        ),
        ("resampleFunction=sum", SERIES, "Invalid resampleFrequency parameter"),
        ("resampleFrequency=monthEnd", SERIES, "Invalid resampleFunction parameter"),
        (
            "resampleFrequency=monthEnd&resampleFunction=sum",
            [["2017-13-40", 5]] + SERIES,
            "Invalid date: 2017-13-40",
        ),
        (
            "resampleFrequency=monthEnd&resampleFunction=sum",
            SERIES + [["2017-05-05", "abc"]],
            "Invalid value: abc",
        ),
    ],
)
def test_resample_errors(client, query: str, body: list, message: str):
    resp = client.post(f"/api/resample?{query}", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"message": message}


def test_options(client):
    resp = client.get("/api/resample/options")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "resampleFrequency": ["monthEnd", "weekEnd", "quarterEnd", "yearEnd"],
        "resampleFunction": ["min", "max", "sum"],
    }


def test_sum_beyond_float_range(client):
    resp = client.post(
        "/api/resample?resampleFrequency=monthEnd&resampleFunction=sum",
        json=[["2017-05-05", 1e308], ["2017-05-06", 1e308]],
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"details": [["2017-05-31", math.inf]]}


@pytest.mark.parametrize(
    "query, body, message",
    [
        (
            "resampleFrequency=monthEnd&resampleFunction=sum",
            [["2017-05-05", 10**400]],
            f"Invalid value: {10**400}",
        ),
        (
            "resampleFrequency=weekEnd&resampleFunction=sum",
            [["9999-12-27", 1.0]],
            "Invalid date: 9999-12-27",
        ),
    ],
)
def test_out_of_range_input(client, query: str, body: list, message: str):
    resp = client.post(f"/api/resample?{query}", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"message": message}
