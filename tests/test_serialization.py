"""Tests for AST inspection via to_dict / to_json."""

from __future__ import annotations

import json

from wikilink import Markdown, to_dict, to_json


def _doc(source: str):
    return Markdown(plugins=["wikilink"]).parse(source)


class TestToDict:
    def test_wikilink_fields(self) -> None:
        link = _doc("[[Wiki Link:With Some Alias]]").children[0].children[0]
        assert to_dict(link, include_location=False) == {
            "_type": "WikiLink",
            "raw_destination": "Wiki Link",
            "alias": "With Some Alias",
            "destination": "wiki-link",
            "exists": True,
        }

    def test_nested_structure(self) -> None:
        data = to_dict(_doc("a [[B]]"), include_location=False)
        assert data["_type"] == "Document"
        (para,) = data["children"]
        assert para["_type"] == "Paragraph"
        assert [child["_type"] for child in para["children"]] == ["Text", "WikiLink"]

    def test_location(self) -> None:
        link = _doc("a [[B]]").children[0].children[1]
        location = to_dict(link)["location"]
        assert location == {
            "_type": "SourceLocation",
            "lineno": 1,
            "col_offset": 3,
            "offset": 2,
            "end_offset": 7,
            "source_file": None,
        }


class TestToJson:
    def test_matches_to_dict(self) -> None:
        doc = _doc("[[A]] and [[B:b]]\n\nmore")
        assert json.loads(to_json(doc)) == to_dict(doc)

    def test_deterministic(self) -> None:
        assert to_json(_doc("[[A]]")) == to_json(_doc("[[A]]"))

    def test_indent(self) -> None:
        assert "\n" in to_json(_doc("[[A]]"), indent=2)
