"""
Tests for response models and the source filtering directive.
"""

import pytest

from docstore.exceptions import DecodeError
from docstore.models import FetchSourceContext, GetResult, MultiGetResult


class TestFetchSourceContext:
    def test_defaults(self):
        assert FetchSourceContext().to_dict() == {"includes": [], "excludes": []}

    def test_disabled(self):
        fsc = FetchSourceContext(False).include("ignored")
        assert fsc.to_dict() is False
        assert fsc.query_string() == "false"

    def test_includes_and_excludes(self):
        fsc = FetchSourceContext().include("user", "message").include("date").exclude("*.raw")
        assert fsc.to_dict() == {
            "includes": ["user", "message", "date"],
            "excludes": ["*.raw"],
        }
        assert fsc.query_string() == "user,message,date"


class TestGetResult:
    def test_found_document(self):
        doc = GetResult.from_dict({
            "_index": "tweets",
            "_type": "tweet",
            "_id": "1",
            "_version": 3,
            "found": True,
            "_source": {"user": "kimchy"},
        })

        assert doc.index == "tweets"
        assert doc.type == "tweet"
        assert doc.id == "1"
        assert doc.version == 3
        assert doc.found is True
        assert doc.source == {"user": "kimchy"}
        assert doc["id"] == "1"
        assert doc.get("error") is None

    def test_missing_document(self):
        doc = GetResult.from_dict({"_index": "tweets", "_type": "tweet", "_id": "2", "found": False})
        assert doc.found is False
        assert doc.source is None
        assert doc.version is None

    def test_per_document_error(self):
        doc = GetResult.from_dict({"_index": "nope", "_id": "1", "error": "IndexMissingException[[nope] missing]"})
        assert doc.found is False
        assert "IndexMissingException" in doc.error

    def test_extra_keys_are_kept(self):
        doc = GetResult.from_dict({"_id": "1", "found": True, "_seq_no": 5, "_primary_term": 1})
        assert doc.seq_no == 5
        assert doc.get("primary_term") == 1

    def test_extra_key_clashing_with_attribute_is_ignored(self):
        doc = GetResult.from_dict({"_id": "1", "id": "shadow"})
        assert doc.id == "1"

    @pytest.mark.parametrize("key", ["self", "_self", "kwargs", "cls"])
    def test_extra_key_named_like_a_parameter(self, key):
        doc = GetResult.from_dict({"_id": "1", key: 1})
        assert doc.id == "1"
        assert doc.get(key.lstrip("_")) == 1

    def test_extra_key_does_not_shadow_methods(self):
        doc = GetResult.from_dict({"_id": "1", "to_dict": "x", "_get": "y"})
        assert doc.to_dict()["_id"] == "1"
        assert doc.get("id") == "1"

    def test_to_dict(self):
        data = {"_index": "tweets", "_type": "tweet", "_id": "1", "found": True, "_version": 1, "_source": {}}
        assert GetResult.from_dict(data).to_dict() == data

    def test_not_an_object(self):
        with pytest.raises(DecodeError):
            GetResult.from_dict(["_id", "1"])


class TestMultiGetResult:
    def test_docs_in_order(self):
        result = MultiGetResult.from_dict({"docs": [{"_id": "2"}, {"_id": "1"}]})
        assert len(result) == 2
        assert [doc.id for doc in result] == ["2", "1"]
        assert result[1].id == "1"

    @pytest.mark.parametrize("payload", [{}, {"docs": None}, {"docs": []}])
    def test_empty(self, payload):
        assert MultiGetResult.from_dict(payload).docs == []

    @pytest.mark.parametrize("payload", [
        None,
        "docs",
        [],
        {"docs": "1"},
        {"docs": {"_id": "1"}},
        {"docs": [1, 2]},
    ])
    def test_bad_shape(self, payload):
        with pytest.raises(DecodeError):
            MultiGetResult.from_dict(payload)
