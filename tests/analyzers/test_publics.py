"""Tests for public definition classification and projection."""

from __future__ import annotations

from pathlib import Path

import pytest

from cljsmeta.analyzers.publics import (
    MACRO,
    MULTIMETHOD,
    PROTOCOL,
    VAR,
    is_unreferenced_protocol_fn,
    protocol_methods,
    read_definition,
    read_publics,
    var_type,
)
from cljsmeta.models import AnalysisState, NamespaceAnalysis, Symbol

ROOT = Path("/work/src")


def _state(namespace: str, *publics: dict) -> AnalysisState:
    return AnalysisState(
        namespaces={
            namespace: NamespaceAnalysis(
                name=namespace,
                publics={str(public["name"]): public for public in publics},
            )
        }
    )


@pytest.mark.parametrize(
    ("definition", "expected"),
    [
        ({"name": "m", "macro": True, "protocol_symbol": True}, MACRO),
        ({"name": "p", "protocol_symbol": True, "tag": "cljs.core/MultiFn"}, PROTOCOL),
        ({"name": "area", "tag": Symbol.parse("cljs.core/MultiFn")}, MULTIMETHOD),
        ({"name": "area", "tag": "cljs.core/MultiFn"}, MULTIMETHOD),
        ({"name": "x", "tag": "number"}, VAR),
        ({"name": "x"}, VAR),
    ],
)
def test_var_type_precedence(definition: dict, expected: str) -> None:
    assert var_type(definition) == expected


def test_protocol_methods_match_unqualified_protocol_name() -> None:
    protocol = {"name": "my.lib/Shape", "protocol_symbol": True}
    area = {"name": "my.lib/area", "protocol": "my.lib/Shape"}
    other = {"name": "my.lib/color", "protocol": "other.lib/Paint"}
    perimeter = {"name": "my.lib/perimeter", "protocol": Symbol.parse("alias/Shape")}
    plain = {"name": "my.lib/helper"}

    methods = protocol_methods(protocol, [protocol, area, other, perimeter, plain])

    assert methods == [area, perimeter]


def test_read_definition_projects_whitelisted_fields() -> None:
    definition = {
        "name": "my.lib/greet",
        "file": str(ROOT / "my" / "lib.cljs"),
        "line": 12,
        "column": 1,
        "arglists": ["quote", [["name"], ["name", "greeting"]]],
        "doc": "  Greets someone.\n  Politely.",
        "dynamic": False,
        "added": "1.2",
        "private": False,
        "meta": {"arbitrary": "data"},
    }

    record = read_definition(definition, [definition], ROOT)

    assert record.to_dict() == {
        "name": "greet",
        "file": "my/lib.cljs",
        "line": 12,
        "arglists": [["name"], ["name", "greeting"]],
        "doc": "Greets someone.\nPolitely.",
        "type": "var",
        "added": "1.2",
    }


def test_read_definition_keeps_true_flags() -> None:
    definition = {
        "name": "*debug*",
        "file": "my/lib.cljs",
        "line": 3,
        "dynamic": True,
        "no_doc": True,
        "skip_wiki": True,
        "deprecated": "2.0",
    }

    data = read_definition(definition, [definition], ROOT).to_dict()

    assert data["dynamic"] is True
    assert data["no_doc"] is True
    assert data["skip_wiki"] is True
    assert data["deprecated"] == "2.0"


def test_read_definition_groups_protocol_members_without_location() -> None:
    protocol = {
        "name": "my.lib/Shape",
        "file": "my/lib.cljs",
        "line": 5,
        "protocol_symbol": True,
        "doc": "Things with an area.",
    }
    area = {
        "name": "my.lib/area",
        "file": "my/lib.cljs",
        "line": 6,
        "protocol": "my.lib/Shape",
        "arglists": ["quote", [["this"]]],
        "doc": "",
    }
    perimeter = {
        "name": "my.lib/perimeter",
        "file": "my/lib.cljs",
        "line": 7,
        "protocol": "my.lib/Shape",
        "arglists": ["quote", [["this"]]],
    }

    data = read_definition(protocol, [protocol, area, perimeter], ROOT).to_dict()

    assert data == {
        "name": "Shape",
        "file": "my/lib.cljs",
        "line": 5,
        "doc": "Things with an area.",
        "type": "protocol",
        "members": [
            {"name": "area", "arglists": [["this"]], "type": "var"},
            {"name": "perimeter", "arglists": [["this"]], "type": "var"},
        ],
    }


def test_records_compare_by_value() -> None:
    definition = {"name": "f", "file": "a.cljs", "line": 1, "arglists": [["x"]]}

    first = read_definition(definition, [definition], ROOT)
    second = read_definition(dict(definition), [definition], ROOT)

    assert first == second
    assert hash(first) == hash(second)


def test_unreferenced_protocol_fn_only_for_methods_declared_in_current_file() -> None:
    method = {"name": "area", "file": str(ROOT / "my" / "lib.cljs"), "protocol": "my.lib/Shape"}
    plain = {"name": "helper", "file": "my/lib.cljs"}

    assert is_unreferenced_protocol_fn(ROOT, Path("my/lib.cljs"), method) is True
    assert is_unreferenced_protocol_fn(ROOT, Path("my/api.cljs"), method) is False
    assert is_unreferenced_protocol_fn(ROOT, Path("my/lib.cljs"), plain) is False


def test_read_publics_drops_anonymous_and_local_protocol_methods() -> None:
    state = _state(
        "my.lib",
        {"name": "my.lib/Shape", "file": "my/lib.cljs", "line": 1, "protocol_symbol": True},
        {"name": "my.lib/area", "file": "my/lib.cljs", "line": 2, "protocol": "my.lib/Shape"},
        {"name": "my.lib/fn_123", "file": "my/lib.cljs", "line": 9, "anonymous": True},
        {"name": "my.lib/scale", "file": "my/lib.cljs", "line": 10},
    )

    publics = read_publics(state, "my.lib", ROOT, Path("my/lib.cljs"))

    assert [public.name for public in publics] == ["Shape", "scale"]
    assert [member.name for member in publics[0].members] == ["area"]


def test_read_publics_keeps_reexported_protocol_method() -> None:
    state = _state(
        "my.api",
        {"name": "my.api/area", "file": "my/lib.cljs", "line": 2, "protocol": "my.lib/Shape"},
    )

    publics = read_publics(state, "my.api", ROOT, Path("my/api.cljs"))

    assert [public.to_dict() for public in publics] == [
        {"name": "area", "file": "my/lib.cljs", "line": 2, "type": "var"}
    ]


def test_read_publics_for_unknown_namespace_is_empty() -> None:
    assert read_publics(AnalysisState(), "missing.ns", ROOT, Path("x.cljs")) == []


def test_read_definition_keeps_map_destructuring_in_arglists() -> None:
    definition = {
        "name": "my.lib/configure",
        "file": "my/lib.cljs",
        "line": 4,
        "arglists": ["quote", [[{"keys": ["a", "b"]}]]],
    }

    record = read_definition(definition, [definition], ROOT)

    assert record.to_dict()["arglists"] == [[{"keys": ["a", "b"]}]]
