"""End-to-end tests for catalog rendering, purchases and protected downloads."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from store_app.services import catalog_service

FORBIDDEN = b"You need to purchase the image before downloading."


def test_catalog_page_links(client, expected_key):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert f"/?download=free&amp;key={expected_key('download=free')}" in body
    assert "/?purchase=valuable" in body
    assert "Purchase for £9,999" in body
    assert "download=valuable" not in body
    assert "/thumbnails/free.jpg" in body


def test_download_with_catalog_key_returns_asset(client, expected_key):
    resp = client.get(f"/?download=free&key={expected_key('download=free')}")
    assert resp.status_code == 200
    assert resp.mimetype == "image/jpeg"
    assert resp.data == b"full-resolution-free"


def test_catalog_link_is_usable_as_is(client):
    with client.application.app_context():
        link = catalog_service.download_url(catalog_service.get_entry("free"))
    resp = client.get(link)
    assert resp.status_code == 200


def test_link_can_be_replayed(client, expected_key):
    url = f"/?download=free&key={expected_key('download=free')}"
    assert client.get(url).status_code == 200
    assert client.get(url).status_code == 200


@pytest.mark.parametrize(
    "key",
    ["0" * 64, "deadbeef", "", "Z" * 64],
)
def test_download_with_wrong_key_is_forbidden(client, key):
    resp = client.get(f"/?download=free&key={key}")
    assert resp.status_code == 403
    assert resp.data == FORBIDDEN


def test_missing_and_wrong_key_look_identical(client):
    missing = client.get("/?download=free")
    wrong = client.get(f"/?download=free&key={'1' * 64}")
    assert missing.status_code == wrong.status_code == 403
    assert missing.data == wrong.data


def test_valuable_download_is_forbidden_without_real_key(client, expected_key):
    resp = client.get(f"/?download=valuable&key={expected_key('download=free')}")
    assert resp.status_code == 403
    forged = hmac.new(b"guessed", b"download=valuable", hashlib.sha256).hexdigest()
    assert client.get(f"/?download=valuable&key={forged}").status_code == 403


def test_valuable_download_with_independently_computed_key(client, expected_key):
    resp = client.get(f"/?download=valuable&key={expected_key('download=valuable')}")
    assert resp.status_code == 200
    assert resp.data == b"full-resolution-valuable"


@pytest.mark.parametrize(
    "query",
    ["purchase=valuable", "purchase=free", "purchase=valuable&download=free", "purchase="],
)
def test_purchase_always_requires_payment(client, query):
    resp = client.get(f"/?{query}")
    assert resp.status_code == 402
    assert resp.data == b"Unable to take sufficient funds from your account."


def test_double_key_is_rejected(client, expected_key):
    good = expected_key("download=free")
    resp = client.get(f"/?download=free&key={good}&key={good}")
    assert resp.status_code == 403
    assert resp.data == FORBIDDEN
    metrics = client.get("/metrics").data
    assert b'outcome="rejected",reason="duplicate_key"' in metrics


def test_one_correct_one_incorrect_key_is_rejected(client, expected_key):
    good = expected_key("download=free")
    resp = client.get(f"/?download=free&key={'0' * 64}&key={good}")
    assert resp.status_code == 403


def test_appended_parameter_invalidates_key(client, expected_key):
    good = expected_key("download=free")
    assert client.get(f"/?download=free&key={good}&w=1").status_code == 403


def test_key_for_other_asset_with_duplicate_download_field(client, expected_key):
    good = expected_key("download=free")
    resp = client.get(f"/?download=valuable&download=free&key={good}")
    assert resp.status_code == 403


def test_unknown_asset_is_not_found(client, expected_key):
    resp = client.get(f"/?download=missing&key={expected_key('download=missing')}")
    assert resp.status_code == 404
    assert client.get("/?download=missing&key=abc").status_code == 404


def test_path_traversal_identifier_is_not_found(client, expected_key):
    resp = client.get(f"/?download=../private/free&key={expected_key('download=../private/free')}")
    assert resp.status_code == 404


def test_asset_missing_on_disk_is_not_found(app, client, expected_key, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    app.config["PRIVATE_ASSET_DIR"] = str(empty)
    resp = client.get(f"/?download=free&key={expected_key('download=free')}")
    assert resp.status_code == 404


def test_thumbnails_are_public(client):
    resp = client.get("/thumbnails/valuable.jpg")
    assert resp.status_code == 200
    assert resp.data == b"thumb-valuable"
    assert client.get("/thumbnails/unknown.jpg").status_code == 404
