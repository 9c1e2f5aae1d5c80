"""CLI tests for the build, search and metadata commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer
from loguru import logger
from typer.testing import CliRunner

from korea_universities.cli.common import merge_overrides, parse_override
from korea_universities.cli.main import app
from korea_universities.cli.query import _flags

runner = CliRunner()

DIRECTORY = [
    {"id": 1, "nameKr": "제주대학교", "level": "대학(4년제)", "type": "대학교", "establishment": "국립", "region": "제주특별자치도"},
    {"id": 2, "nameKr": "제주한라대학교", "level": "전문대학", "type": "전문대학", "establishment": "사립", "region": "제주특별자치도"},
    {"id": 3, "nameKr": "고려대학교", "campus": "본교", "level": "대학(4년제)", "type": "대학교", "establishment": "사립", "region": "서울특별시"},
]

ACCREDITATION = {
    "lastModified": "2025-03-04",
    "scrapedAt": "2025-03-10T02:15:00.000Z",
    "excellent": {"university": [], "college": [], "graduate": []},
    "degree": {"university": ["고려대학교(본교)"], "college": ["서정대학교"], "graduate": []},
    "language": {"university": [], "college": ["제주한라대학교"], "graduate": []},
}


@pytest.fixture()
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("KOREA_UNIVERSITIES_SETTINGS__PATHS__LOGS_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("KOREA_UNIVERSITIES_LOG_LEVEL", "WARNING")
    yield tmp_path
    logger.remove()
    logger.disable("korea_universities")


@pytest.fixture()
def sources(cli_env: Path) -> dict[str, Path]:
    universities = cli_env / "universities.json"
    accreditation = cli_env / "accredited.json"
    universities.write_text(json.dumps(DIRECTORY, ensure_ascii=False), encoding="utf-8")
    accreditation.write_text(json.dumps(ACCREDITATION, ensure_ascii=False), encoding="utf-8")
    return {
        "universities": universities,
        "accreditation": accreditation,
        "records": cli_env / "out" / "universities-final.json",
        "metadata": cli_env / "out" / "metadata.json",
    }


def _build(sources: dict[str, Path], *extra: str):
    return runner.invoke(
        app,
        [
            *extra,
            "build",
            "--universities",
            str(sources["universities"]),
            "--accreditation",
            str(sources["accreditation"]),
            "--output",
            str(sources["records"]),
            "--metadata",
            str(sources["metadata"]),
        ],
    )


def test_parse_override_builds_nested_mapping() -> None:
    assert parse_override("policies.synthesis.id_seed=70000") == {
        "policies": {"synthesis": {"id_seed": 70000}}
    }
    assert parse_override("log_level=DEBUG") == {"log_level": "DEBUG"}


def test_parse_override_rejects_missing_separator() -> None:
    with pytest.raises(typer.BadParameter):
        parse_override("policies.synthesis.id_seed")


def test_merge_overrides_is_deep() -> None:
    merged = merge_overrides(
        [
            parse_override("policies.synthesis.id_seed=5"),
            parse_override("policies.synthesis.unknown_region=미상"),
        ]
    )
    assert merged == {"policies": {"synthesis": {"id_seed": 5, "unknown_region": "미상"}}}


def test_build_writes_snapshot(sources: dict[str, Path]) -> None:
    result = _build(sources)

    assert result.exit_code == 0, result.output
    assert "Build Summary" in result.output
    records = json.loads(sources["records"].read_text(encoding="utf-8"))
    assert [item["id"] for item in records] == [1, 2, 3, 90000]
    metadata = json.loads(sources["metadata"].read_text(encoding="utf-8"))
    assert metadata["stats"]["total"] == 4


def test_build_honours_policy_overrides(sources: dict[str, Path]) -> None:
    result = _build(sources, "--override", "policies.synthesis.id_seed=70000")

    assert result.exit_code == 0, result.output
    records = json.loads(sources["records"].read_text(encoding="utf-8"))
    assert records[-1]["id"] == 70000


def test_build_missing_source_exits_without_output(sources: dict[str, Path]) -> None:
    sources["accreditation"].unlink()

    result = _build(sources)

    assert result.exit_code == 1
    assert "Source data not found" in result.output
    assert not sources["records"].exists()
    assert not sources["metadata"].exists()


def test_search_json_output(sources: dict[str, Path]) -> None:
    assert _build(sources).exit_code == 0

    result = runner.invoke(
        app,
        [
            "search",
            "제주",
            "--level",
            "대학(4년제)",
            "--json",
            "--records",
            str(sources["records"]),
            "--metadata",
            str(sources["metadata"]),
        ],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [item["nameKr"] for item in payload] == ["제주대학교"]


def test_search_table_lists_accredited(sources: dict[str, Path]) -> None:
    assert _build(sources).exit_code == 0

    result = runner.invoke(
        app,
        [
            "search",
            "--accredited",
            "--records",
            str(sources["records"]),
            "--metadata",
            str(sources["metadata"]),
        ],
    )

    assert result.exit_code == 0, result.output
    assert "3 universities" in result.output
    assert "제주대학교" not in result.output


def test_metadata_command(sources: dict[str, Path]) -> None:
    assert _build(sources).exit_code == 0

    result = runner.invoke(
        app,
        ["metadata", "--records", str(sources["records"]), "--metadata", str(sources["metadata"])],
    )

    assert result.exit_code == 0, result.output
    assert "Library Metadata" in result.output
    assert "2025-03-04" in result.output


def test_missing_snapshot_exits_with_error(cli_env: Path) -> None:
    result = runner.invoke(
        app,
        [
            "search",
            "서울",
            "--records",
            str(cli_env / "missing.json"),
            "--metadata",
            str(cli_env / "missing-meta.json"),
        ],
    )

    assert result.exit_code == 1
    assert "Path does not exist" in result.output


def test_accreditation_flags_are_labelled_by_category() -> None:
    assert _flags(degree=True, excellent=False, language=False) == "degree"
    assert _flags(degree=False, excellent=True, language=True) == "language, excellent"
    assert _flags(degree=False, excellent=False, language=False) == "-"
