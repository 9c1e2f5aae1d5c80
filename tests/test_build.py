"""End-to-end tests for the merge build and its file contracts."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from korea_universities.config.settings import Settings
from korea_universities.pipeline.merge import (
    MissingSourceError,
    build_dataset,
    load_directory,
    load_metadata,
    load_records,
)

DIRECTORY = [
    {"id": 12, "nameKr": "제주대학교", "link": "https://www.jejunu.ac.kr", "level": "대학(4년제)", "type": "대학교", "establishment": "국립", "region": "제주특별자치도"},
    {"id": 7, "nameKr": "명지대학교", "campus": "제1캠퍼스", "level": "대학(4년제)", "type": "대학교", "establishment": "사립", "region": "서울특별시"},
    {"id": 8, "nameKr": "명지대학교", "campus": "제2캠퍼스", "level": "대학(4년제)", "type": "대학교", "establishment": "사립", "region": "경기도"},
    {"id": 15, "nameKr": "제주한라대학교", "campus": "", "level": "전문대학", "type": "전문대학", "establishment": "사립", "region": "제주특별자치도"},
]

ACCREDITATION = {
    "lastModified": "2025-03-04",
    "scrapedAt": "2025-03-10T02:15:00.000Z",
    "excellent": {"university": ["제주대학교"], "college": [], "graduate": []},
    "degree": {"university": ["명지대학교(서울캠퍼스)"], "college": ["서정대학교"], "graduate": []},
    "language": {"university": [], "college": ["제주한라대학교"], "graduate": []},
}


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    _write(data_dir / "universities.json", DIRECTORY)
    _write(data_dir / "accredited.json", ACCREDITATION)
    return Settings(
        paths={
            "data_dir": data_dir,
            "output_dir": tmp_path / "out",
            "logs_dir": tmp_path / "logs",
        }
    )


def test_build_writes_sorted_snapshot_and_metadata(settings: Settings) -> None:
    built_at = datetime(2025, 3, 10, 3, 0, tzinfo=timezone.utc)

    outcome = build_dataset(settings=settings, built_at=built_at)

    raw = json.loads(outcome.records_path.read_text(encoding="utf-8"))
    assert [item["id"] for item in raw] == [7, 8, 12, 15, 90000]
    assert list(raw[0]) == [
        "id",
        "nameKr",
        "campus",
        "level",
        "type",
        "establishment",
        "region",
        "accreditation",
    ]
    assert "campus" not in raw[3]
    assert raw[0]["accreditation"] == {"degree": True, "language": False, "excellent": False}
    assert raw[4]["nameKr"] == "서정대학교"
    assert raw[4]["region"] == "기타"

    metadata = json.loads(outcome.metadata_path.read_text(encoding="utf-8"))
    assert metadata["builtAt"] == "2025-03-10T03:00:00+00:00"
    assert metadata["sourceLastModified"] == "2025-03-04"
    assert metadata["sourceScrapedAt"] == "2025-03-10T02:15:00.000Z"
    assert metadata["sources"] == ["커리어넷 (career.go.kr)", "한국유학종합시스템 (studyinkorea.go.kr)"]
    assert metadata["stats"] == {
        "total": 5,
        "university": 3,
        "college": 2,
        "graduate": 0,
        "accredited": 3,
    }


def test_written_snapshot_round_trips_through_loaders(settings: Settings) -> None:
    outcome = build_dataset(settings=settings)

    records = load_records(outcome.records_path)
    metadata = load_metadata(outcome.metadata_path)

    assert [record.to_json_dict() for record in records] == [
        record.to_json_dict() for record in outcome.result.records
    ]
    assert metadata == outcome.metadata


def test_explicit_paths_override_settings(settings: Settings, tmp_path: Path) -> None:
    target = tmp_path / "custom" / "merged.json"
    summary = tmp_path / "custom" / "summary.json"

    outcome = build_dataset(settings=settings, output_path=target, metadata_path=summary)

    assert outcome.records_path == target.resolve()
    assert summary.exists()
    assert not settings.records_file.exists()


@pytest.mark.parametrize("missing", ["universities.json", "accredited.json"])
def test_missing_source_aborts_without_output(settings: Settings, missing: str) -> None:
    (settings.paths.data_dir / missing).unlink()

    with pytest.raises(MissingSourceError) as excinfo:
        build_dataset(settings=settings)

    assert missing in str(excinfo.value)
    assert isinstance(excinfo.value, FileNotFoundError)
    assert not settings.records_file.exists()
    assert not settings.metadata_file.exists()


def test_malformed_accreditation_propagates(settings: Settings) -> None:
    _write(settings.accreditation_file, {"lastModified": "2025-03-04"})

    with pytest.raises(ValidationError):
        build_dataset(settings=settings)
    assert not settings.records_file.exists()


def test_malformed_json_propagates(settings: Settings) -> None:
    settings.universities_file.write_text("[{", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        build_dataset(settings=settings)


def test_directory_names_are_loaded_verbatim(settings: Settings) -> None:
    rows = DIRECTORY + [
        {"id": 20, "nameKr": " ", "level": "대학(4년제)", "type": "대학교", "establishment": "사립", "region": "서울특별시"},
        {"id": 21, "nameKr": "제주대학교 ", "level": "대학(4년제)", "type": "대학교", "establishment": "국립", "region": "제주특별자치도"},
    ]
    _write(settings.universities_file, rows)

    records = load_directory(settings.universities_file)
    assert [record.name_kr for record in records[-2:]] == [" ", "제주대학교 "]

    outcome = build_dataset(settings=settings)
    by_id = {record.id: record for record in outcome.result.records}
    assert 20 in by_id
    assert by_id[12].accreditation.excellent
    assert not by_id[21].accreditation.any()
