# tests/test_hal_models.py

import json

import pytest
from pydantic import ValidationError

from hal_greeting.models.greeting import Greeting


def test_links_serialize_under_underscore_links():
    greeting = Greeting(id=1, content="Hello, World!")
    greeting.add_link("self", "http://localhost:8080/greeting")

    assert greeting.to_hal() == {
        "_links": {"self": {"href": "http://localhost:8080/greeting"}},
        "id": 1,
        "content": "Hello, World!",
    }


def test_link_order_is_insertion_order():
    greeting = Greeting(id=1, content="Hi")
    greeting.add_link("self", "http://a/1").add_link("next", "http://a/2").add_link("alt", "http://a/3")
    assert [rel for rel, _ in greeting.link_pairs()] == ["self", "next", "alt"]
    assert list(greeting.to_hal()["_links"]) == ["self", "next", "alt"]


def test_duplicate_relation_rejected():
    greeting = Greeting(id=1, content="Hi")
    greeting.add_link("self", "http://a/1")
    with pytest.raises(ValueError):
        greeting.add_link("self", "http://a/2")
    assert greeting.get_link("self").href == "http://a/1"


def test_empty_content_rejected():
    with pytest.raises(ValidationError):
        Greeting(id=1, content="")


def test_serialize_then_parse_keeps_content_and_links():
    greeting = Greeting(id=7, content="Hello, Bob!")
    greeting.add_link("self", "http://localhost:8080/greeting?name=Bob")

    parsed = Greeting.model_validate(json.loads(json.dumps(greeting.to_hal())))

    assert parsed.content == greeting.content
    assert set(parsed.link_pairs()) == set(greeting.link_pairs())
