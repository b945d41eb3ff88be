"""Tests for response decoding."""

import json
from datetime import date

import pytest
from pydantic import ValidationError

from moviedb import EmptyResponseError, FailedDecodingError, RawResponse, decode
from tests.helpers import Movie, json_response


def test_decodes_movie_with_date():
    movie = decode(json_response({"title": "X", "release_date": "1999-03-12"}), Movie)
    assert movie.title == "X"
    assert movie.release_date == date(1999, 3, 12)


def test_decodes_collections():
    movies = decode(json_response([{"title": "A"}, {"title": "B"}]), list[Movie])
    assert [movie.title for movie in movies] == ["A", "B"]


def test_unknown_fields_are_ignored():
    movie = decode(json_response({"title": "X", "popularity": 9.5}), Movie)
    assert movie == Movie(title="X")


@pytest.mark.parametrize("body", [None, b""])
def test_empty_body(body):
    with pytest.raises(EmptyResponseError):
        decode(RawResponse(status=200, body=body), Movie)


def test_shape_mismatch():
    with pytest.raises(FailedDecodingError) as exc_info:
        decode(json_response({"name": "missing title"}), Movie)
    assert isinstance(exc_info.value.__cause__, ValidationError)


def test_malformed_json():
    with pytest.raises(FailedDecodingError):
        decode(RawResponse(status=200, body=b'{"title": '), Movie)


def test_null_result():
    with pytest.raises(FailedDecodingError):
        decode(RawResponse(status=200, body=b"null"), Movie | None)


@pytest.mark.parametrize(
    "value",
    [
        "12/03/1999",
        "1999-03-12T00:00:00",
        "1999-3-12",
        "1999-02-30",
        921196800,
        "",
    ],
)
def test_other_date_formats_fail(value):
    body = json.dumps({"title": "X", "release_date": value}).encode()
    with pytest.raises(FailedDecodingError):
        decode(RawResponse(status=200, body=body), Movie)


def test_decode_failure_is_logged(caplog):
    with pytest.raises(FailedDecodingError):
        decode(json_response({}, url="https://api.example.com/movie/1"), Movie)
    assert "Failed to decode https://api.example.com/movie/1" in caplog.text
