"""
Tests for converting stored requests into descriptors.
"""

import dataclasses

import pytest

from request_explorer.codegen import Header, RequestDescriptor, convert_request_item
from request_explorer.models import RequestItem


def test_converts_request_item_headers_in_mapping_order():
    item = RequestItem(
        method="POST",
        url="https://api.test/x",
        headers={"Z-Last": "1", "A-First": "2"},
        body="{}",
        name="create",
    )

    descriptor = convert_request_item(item)

    assert descriptor == RequestDescriptor(
        method="POST",
        url="https://api.test/x",
        headers=(Header("Z-Last", "1"), Header("A-First", "2")),
        body="{}",
    )


def test_converts_plain_mapping():
    descriptor = convert_request_item(
        {
            "id": "abc",
            "method": "GET",
            "url": "https://x",
            "headers": {"Accept": "*/*"},
            "createdAt": "2024-01-01",
        }
    )

    assert descriptor.headers == (Header("Accept", "*/*"),)
    assert descriptor.body is None


def test_empty_mapping_gives_empty_headers():
    assert convert_request_item(RequestItem(method="GET", url="u")).headers == ()
    assert convert_request_item({"method": "GET", "url": "u"}).headers == ()


def test_create_accepts_pair_dicts_and_tuples():
    descriptor = RequestDescriptor.create(
        "GET",
        "u",
        [{"key": "A", "value": "1"}, ("B", "2"), Header("C", "3")],
    )
    assert [h.key for h in descriptor.headers] == ["A", "B", "C"]


def test_duplicate_keys_are_kept():
    descriptor = RequestDescriptor.create("GET", "u", [("X", "1"), ("X", "2")])
    assert len(descriptor.headers) == 2


def test_descriptor_is_immutable():
    descriptor = RequestDescriptor.create("GET", "u")
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.method = "POST"


def test_to_dict():
    descriptor = RequestDescriptor.create("PUT", "u", {"A": "1"}, "b")
    assert descriptor.to_dict() == {
        "method": "PUT",
        "url": "u",
        "headers": [{"key": "A", "value": "1"}],
        "body": "b",
    }
