import pytest

from otpcore_server import create_app

TOTP_BODY = {"secret": "MNSTS5LFGEZDQOLF", "timestamp": 1707146471}


def test_index(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "POST /hotp" in res.get_json()["endpoints"]


def test_hotp(client):
    res = client.post("/hotp", json={"secret": "ORSXG5A", "counter": 1})
    assert res.status_code == 200
    assert res.get_json() == {"code": "431881", "counter": 1, "digits": 6}


def test_hotp_options(client):
    body = {"secret": "74657374", "encoding": "hex", "counter": 1, "digits": 2}
    assert client.post("/hotp", json=body).get_json()["code"] == "81"


def test_totp(client):
    res = client.post("/totp", json=TOTP_BODY)
    assert res.get_json() == {"code": "437617", "remaining": 19, "interval": 30, "digits": 6}


def test_totp_sha256(client):
    body = {
        "secret": "K5KEMIDXNB4SA6LPOUQGIZLDN5SGKZBAORUGS4Z7",
        "algorithm": "SHA256",
        "interval": 75,
        "timestamp": 1707146946,
        "digits": 8,
    }
    data = client.post("/totp", json=body).get_json()
    assert data["code"] == "58273556"
    assert data["remaining"] == 54


def test_totp_defaults_to_current_time(client):
    data = client.post("/totp", json={"secret": "MNSTS5LFGEZDQOLF"}).get_json()
    assert len(data["code"]) == 6
    assert 1 <= data["remaining"] <= 30


def test_verify_hotp(client):
    body = {"secret": "ORSXG5A", "counter": 1}
    assert client.post("/verify_hotp", json=dict(body, code="431881")).get_json() == {"valid": True}
    assert client.post("/verify_hotp", json=dict(body, code="431882")).get_json() == {"valid": False}


def test_verify_totp(client):
    assert client.post("/verify_totp", json=dict(TOTP_BODY, code="437617")).get_json() == {"valid": True}
    assert client.post("/verify_totp", json=dict(TOTP_BODY, code=437617)).get_json() == {"valid": True}
    assert client.post("/verify_totp", json=dict(TOTP_BODY, code="437618")).get_json() == {"valid": False}


@pytest.mark.parametrize(
    "path,body",
    [
        ("/hotp", {"secret": "ORSXG5A"}),
        ("/hotp", {"counter": 1}),
        ("/verify_hotp", {"secret": "ORSXG5A", "counter": 1}),
        ("/verify_totp", {"secret": "ORSXG5A"}),
        ("/totp", {"secret": "ORSXG5A", "interval": 0}),
        ("/totp", {"secret": "ORSXG5A", "algorithm": "MD5"}),
        ("/hotp", {"secret": "!!", "counter": 1}),
        ("/hotp", {"secret": "ORSXG5A", "counter": None}),
        ("/hotp", {"secret": "ORSXG5A", "counter": 1, "digits": None}),
        ("/hotp", {"secret": "ORSXG5A", "counter": 1.9}),
        ("/hotp", {"secret": "ORSXG5A", "counter": True}),
        ("/hotp", {"secret": "ORSXG5A", "counter": 1, "digits": 3000000}),
        ("/hotp", {"secret": "ORSXG5A", "counter": 1, "digits": 11}),
        ("/hotp", {"secret": "ORSXG5A", "counter": 1, "digits": 0}),
        ("/totp", {"secret": "ORSXG5A", "interval": None}),
        ("/totp", {"secret": "ORSXG5A", "timestamp": "soon"}),
        ("/verify_hotp", {"secret": "ORSXG5A", "code": "431881", "counter": None}),
    ],
)
def test_bad_requests(client, path, body):
    res = client.post(path, json=body)
    assert res.status_code == 400
    assert "error" in res.get_json()


def test_missing_body(client):
    assert client.post("/hotp").status_code == 400


def test_config_overrides_defaults():
    client = create_app({"TESTING": True, "DEFAULT_DIGITS": 8}).test_client()
    data = client.post("/hotp", json={"secret": "ORSXG5A", "counter": 1}).get_json()
    assert data["code"] == "65431881"


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("OTPCORE_DEFAULT_DIGITS", "4")
    client = create_app({"TESTING": True}).test_client()
    assert client.post("/hotp", json={"secret": "ORSXG5A", "counter": 1}).get_json()["code"] == "1881"


def test_ten_digit_limit(client):
    body = {"secret": "ORSXG5A", "counter": 1, "digits": 10}
    code = client.post("/hotp", json=body).get_json()["code"]
    assert len(code) == 10
    assert code.endswith("65431881")


def test_numeric_string_fields_accepted(client):
    assert client.post("/hotp", json={"secret": "ORSXG5A", "counter": "1"}).get_json()["code"] == "431881"
