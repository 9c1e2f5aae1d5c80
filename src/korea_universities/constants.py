"""Closed vocabularies used by the directory, the build and query filters."""

from __future__ import annotations

from typing import Dict, Tuple

UNKNOWN = "기타"

# 17 administrative regions followed by overseas and unknown.
REGIONS: Tuple[str, ...] = (
    "서울특별시",
    "부산광역시",
    "대구광역시",
    "인천광역시",
    "광주광역시",
    "대전광역시",
    "울산광역시",
    "세종특별자치시",
    "경기도",
    "강원특별자치도",
    "충청북도",
    "충청남도",
    "전북특별자치도",
    "전라남도",
    "경상북도",
    "경상남도",
    "제주특별자치도",
    "해외",
    UNKNOWN,
)

ESTABLISHMENTS: Tuple[str, ...] = ("국립", "공립", "사립", UNKNOWN)

LEVEL_UNIVERSITY = "대학(4년제)"
LEVEL_COLLEGE = "전문대학"
LEVEL_GRADUATE = "대학원대학"

SCHOOL_LEVELS: Tuple[str, ...] = (LEVEL_UNIVERSITY, LEVEL_COLLEGE, LEVEL_GRADUATE)

UNIVERSITY_TYPES: Tuple[str, ...] = (
    "대학교",
    "교육대학",
    "산업대학",
    "사이버대학(대학)",
    "각종대학(대학)",
    "사내대학(대학)",
    "원격대학(대학)",
    "기술대학",
    "방송통신대학교",
)

COLLEGE_TYPES: Tuple[str, ...] = (
    "전문대학",
    "기능대학",
    "사이버대학(전문)",
    "전공대학",
    "사내대학(전문)",
    "원격대학(전문)",
)

GRADUATE_TYPES: Tuple[str, ...] = ("대학원대학",)

ALL_SCHOOL_TYPES: Tuple[str, ...] = UNIVERSITY_TYPES + COLLEGE_TYPES + GRADUATE_TYPES

# Type assigned to institutions created during the merge, keyed by level.
DEFAULT_TYPE_BY_LEVEL: Dict[str, str] = {
    LEVEL_UNIVERSITY: "대학교",
    LEVEL_COLLEGE: "전문대학",
    LEVEL_GRADUATE: "대학원대학",
}

DATA_SOURCES: Tuple[str, ...] = (
    "커리어넷 (career.go.kr)",
    "한국유학종합시스템 (studyinkorea.go.kr)",
)


__all__ = [
    "UNKNOWN",
    "REGIONS",
    "ESTABLISHMENTS",
    "LEVEL_UNIVERSITY",
    "LEVEL_COLLEGE",
    "LEVEL_GRADUATE",
    "SCHOOL_LEVELS",
    "UNIVERSITY_TYPES",
    "COLLEGE_TYPES",
    "GRADUATE_TYPES",
    "ALL_SCHOOL_TYPES",
    "DEFAULT_TYPE_BY_LEVEL",
    "DATA_SOURCES",
]
