"""Unit tests for pycaststatus.support.http."""

import logging
from unittest.mock import patch

import pytest
import requests
from pytest_httpserver import HTTPServer

from pycaststatus.exceptions import ImageFetchError
from pycaststatus.settings import ImageSettings
from pycaststatus.state import RawImage
from pycaststatus.support.http import HttpImageResolver, download_image

from tests.utils import IMAGE_DATA


@pytest.fixture(name="image_url")
def image_url_fixture(httpserver: HTTPServer):
    httpserver.expect_request("/cover.png").respond_with_data(
        IMAGE_DATA, content_type="image/png"
    )
    yield httpserver.url_for("/cover.png")


def test_download_image(image_url):
    image = download_image(image_url, ImageSettings())
    assert image == RawImage(IMAGE_DATA, "image/png")


def test_download_image_strips_content_type_parameters(httpserver: HTTPServer):
    httpserver.expect_request("/cover.jpg").respond_with_data(
        b"jpeg", headers={"Content-Type": "image/jpeg; charset=binary"}
    )

    image = download_image(httpserver.url_for("/cover.jpg"), ImageSettings())

    assert image.mimetype == "image/jpeg"


def test_download_image_sends_user_agent(httpserver: HTTPServer):
    httpserver.expect_request(
        "/cover.png", headers={"User-Agent": "tester/1.0"}
    ).respond_with_data(IMAGE_DATA, content_type="image/png")

    image = download_image(
        httpserver.url_for("/cover.png"), ImageSettings(user_agent="tester/1.0")
    )

    assert image.data == IMAGE_DATA


def test_download_image_not_found(httpserver: HTTPServer):
    httpserver.expect_request("/missing.png").respond_with_data(
        "not found", status=404
    )

    with pytest.raises(ImageFetchError):
        download_image(httpserver.url_for("/missing.png"), ImageSettings())


def test_download_image_too_large(image_url):
    with pytest.raises(ImageFetchError):
        download_image(image_url, ImageSettings(max_size=len(IMAGE_DATA) - 1))


def test_download_image_exactly_max_size(image_url):
    image = download_image(image_url, ImageSettings(max_size=len(IMAGE_DATA)))
    assert image.data == IMAGE_DATA


def test_download_image_connection_failure():
    with patch(
        "pycaststatus.support.http.requests.get",
        side_effect=requests.ConnectionError("refused"),
    ):
        with pytest.raises(ImageFetchError):
            download_image("http://127.0.0.1/cover.png", ImageSettings())


def test_resolver_returns_image(image_url):
    resolver = HttpImageResolver()
    assert resolver.resolve(image_url) == RawImage(IMAGE_DATA, "image/png")


def test_resolver_returns_none_on_error(httpserver: HTTPServer, caplog):
    caplog.set_level(logging.WARNING)
    httpserver.expect_request("/broken.png").respond_with_data("", status=500)
    url = httpserver.url_for("/broken.png")

    assert HttpImageResolver().resolve(url) is None
    assert f"Failed to download image {url}" in caplog.text


def test_resolver_uses_settings(image_url):
    resolver = HttpImageResolver(ImageSettings(max_size=1))
    assert resolver.resolve(image_url) is None


def test_download_image_in_multiple_chunks(httpserver: HTTPServer):
    data = bytes(range(256)) * 200
    httpserver.expect_request("/large.png").respond_with_data(
        data, content_type="image/png"
    )

    image = download_image(httpserver.url_for("/large.png"), ImageSettings())

    assert isinstance(image.data, bytes)
    assert image.data == data
