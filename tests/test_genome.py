from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import MTB_ID, MTB_NAME, make_gto, write_gto

from binsample.core.genome import Genome, GenomeParseError, GenomeRecord


def test_genome_from_file_reads_id_name_and_quality(tmp_path: Path) -> None:
    p = write_gto(tmp_path / "bin1.gto", make_gto(MTB_ID, MTB_NAME))

    g = Genome.from_file(p)

    assert g.id == MTB_ID
    assert g.name == MTB_NAME
    assert g.has_quality()
    assert isinstance(g, GenomeRecord)


def test_genome_without_quality_or_with_empty_quality() -> None:
    assert not Genome(make_gto("1.1", "x", quality=False)).has_quality()

    gto = make_gto("1.1", "x", quality=False)
    gto["quality"] = {}
    assert not Genome(gto).has_quality()


def test_genome_name_defaults_to_empty() -> None:
    g = Genome({"id": "83332.12"})
    assert g.name == ""


def test_genome_json_string_is_single_line_and_preserves_unknown_keys() -> None:
    gto = make_gto("1.1", "two\nlines", custom={"nested": [1, 2, "a\nb"]})
    g = Genome(gto)

    text = g.to_json_string()

    assert "\n" not in text
    assert json.loads(text) == gto
    assert Genome.from_json(text) == g


@pytest.mark.parametrize(
    "text, match",
    [
        ("not json at all", r"invalid JSON"),
        ('["a", "list"]', r"expected JSON object"),
        ('{"scientific_name": "no id"}', r"'id' must be a non-empty string"),
        ('{"id": "  "}', r"'id' must be a non-empty string"),
        ('{"id": 17}', r"'id' must be a non-empty string"),
    ],
)
def test_genome_from_json_rejects_malformed(text: str, match: str) -> None:
    with pytest.raises(GenomeParseError, match=match):
        Genome.from_json(text)


def test_genome_from_file_missing_is_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Genome.from_file(tmp_path / "nope.gto")
