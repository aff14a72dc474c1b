"""End-to-end tests against a recorded OSM changeset."""

from pathlib import Path

import pytest

from xml_struct import to_python_structure, to_structure
from xml_struct.values import VBool, VFloat, VInteger, VMapping, VSequence, VString

SAMPLE = Path(__file__).parent / "data" / "osm_changeset_sample.xml"


@pytest.fixture(scope="module")
def sample_bytes() -> bytes:
    return SAMPLE.read_bytes()


@pytest.fixture(scope="module")
def osm_change(sample_bytes) -> VMapping:
    result = to_structure(sample_bytes)
    assert list(result.entries) == ["osmChange"]
    return result["osmChange"]


def test_top_level_keys(osm_change):
    assert len(osm_change) == 8
    assert osm_change["attribute::version"] == VString("0.6")
    assert "node::value" not in osm_change


def test_group_counts(osm_change):
    assert isinstance(osm_change["modify"], VSequence)
    assert len(osm_change["modify"]) == 49
    assert len(osm_change["create"]) == 16
    assert len(osm_change["delete"]) == 17


def test_first_created_node(osm_change):
    node = osm_change["create"].items[0]["node"]
    assert node["attribute::uid"] == VString("161619")
    assert node["attribute::id"] == VString("658837513")
    assert node["attribute::timestamp"] == VString("2010-03-01T21:12:22Z")


def test_last_modified_way(osm_change):
    way = osm_change["modify"].items[-1]["way"]
    assert way["tag"] == VMapping({
        "attribute::k": VString("natural"),
        "attribute::v": VString("scrub"),
    })
    assert len(way["nd"]) == 4


def test_each_wrapper_holds_exactly_one_entity(osm_change):
    for group in ("modify", "create", "delete"):
        for item in osm_change[group].items:
            assert len(item) == 1
            assert set(item.entries) <= {"node", "way", "relation"}


def test_delete_kinds_in_document_order(osm_change):
    kinds = [next(iter(item.entries)) for item in osm_change["delete"].items]
    assert kinds[-2:] == ["way", "relation"]
    assert kinds[:-2] == ["node"] * 15


def test_coerced_sample(sample_bytes):
    node = to_structure(sample_bytes, coerce_values=True)["osmChange"]["create"].items[0]["node"]
    assert node["attribute::id"] == VInteger(658837513)
    assert node["attribute::uid"] == VInteger(161619)
    assert node["attribute::visible"] == VBool(True)
    assert node["attribute::lat"] == VFloat(52.12)
    assert node["attribute::timestamp"] == VString("2010-03-01T21:12:22Z")


def test_plain_python_view(sample_bytes):
    data = to_python_structure(sample_bytes)
    assert data["osmChange"]["create"][0]["node"]["attribute::uid"] == "161619"
    assert isinstance(data["osmChange"]["modify"], list)
