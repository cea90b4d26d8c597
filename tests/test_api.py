import math

import pytest
from fastapi.testclient import TestClient

from weibull_quantile import __version__
from weibull_quantile.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"ok": True, "version": __version__}


def test_number(client):
    res = client.post("/quantile", json={"data": 0.5})
    assert res.status_code == 200
    body = res.json()
    assert body["kind"] == "number"
    assert body["result"] == pytest.approx(math.log(2), rel=1e-12)


def test_sequence_encodes_non_finite_values(client):
    res = client.post("/quantile", json={"data": [0.5, None, 1.0], "lambda": 2.0, "k": 1.0})
    assert res.status_code == 200
    body = res.json()
    assert body["kind"] == "array"
    assert body["result"][0] == pytest.approx(2 * math.log(2), rel=1e-12)
    assert body["result"][1:] == [None, "Infinity"]
    assert body["shape"] == [3]
    assert body["dtype"] == "generic"


def test_matrix(client):
    payload = {
        "data": {"data": [i / 10 for i in range(10)], "shape": [5, 2], "dtype": "float32"},
        "dtype": "uint8",
    }
    res = client.post("/quantile", json=payload)
    assert res.status_code == 200
    body = res.json()
    assert body["kind"] == "matrix"
    assert body["shape"] == [5, 2]
    assert body["dtype"] == "uint8"
    assert body["result"] == [0, 0, 0, 0, 0, 0, 0, 1, 1, 2]


def test_unknown_dtype_is_rejected(client):
    res = client.post("/quantile", json={"data": [0.5], "dtype": "beep"})
    assert res.status_code == 400
    assert res.json()["detail"]["option"] == "dtype"


def test_matrix_shape_mismatch_is_rejected(client):
    payload = {"data": {"data": [0.1, 0.2, 0.3], "shape": [2, 2]}}
    res = client.post("/quantile", json=payload)
    assert res.status_code == 400
    assert "shape" in res.json()["detail"]["message"]


def test_kinds(client):
    res = client.get("/quantile/kinds")
    assert res.status_code == 200
    assert list(res.json()) == ["number", "matrix", "accessor", "deepset", "typed_array", "array"]
