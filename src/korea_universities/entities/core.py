"""Core domain entities shared by the merge build and the query catalog."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CamelModel(BaseModel):
    """Base model exposing the camelCase JSON keys of the published snapshot."""

    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        """Return the snapshot representation with absent optionals omitted."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AccreditationStatus(BaseModel):
    """IEQAS certification flags for one institution."""

    degree: bool = Field(default=False, description="Degree-course certification")
    language: bool = Field(default=False, description="Language-course certification")
    excellent: bool = Field(default=False, description="Excellent quality certification")

    def any(self) -> bool:
        return self.degree or self.language or self.excellent


class DirectoryRecord(_CamelModel):
    """One row of the scraped institution directory (``universities.json``)."""

    id: int
    name_kr: str = Field(..., alias="nameKr", description="Name without campus suffix, kept verbatim")
    link: Optional[str] = Field(default=None, description="Homepage URL, when published")
    campus: Optional[str] = Field(default=None, description="Campus label such as 제1캠퍼스 or 본교")
    level: str = Field(..., description="Coarse school level, see SCHOOL_LEVELS")
    type: str = Field(..., description="Fine-grained school type, see ALL_SCHOOL_TYPES")
    establishment: str
    region: str

    @field_validator("link", "campus", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class University(DirectoryRecord):
    """Directory record annotated with its accreditation status."""

    accreditation: AccreditationStatus = Field(default_factory=AccreditationStatus)

    @property
    def is_accredited(self) -> bool:
        return self.accreditation.any()


class AccreditationCategories(BaseModel):
    """Raw institution names listed under one certification category."""

    university: List[str] = Field(default_factory=list)
    college: List[str] = Field(default_factory=list)
    graduate: List[str] = Field(default_factory=list)


class AccreditationSource(_CamelModel):
    """Scraped accreditation directory (``accredited.json``)."""

    last_modified: str = Field(..., alias="lastModified")
    scraped_at: str = Field(..., alias="scrapedAt")
    excellent: AccreditationCategories
    degree: AccreditationCategories
    language: AccreditationCategories


class BuildStats(BaseModel):
    """Record counts computed at the end of a build.

    ``accredited`` counts institutions certified for degree or language
    courses; excellent certification alone does not contribute.
    """

    total: int = Field(default=0, ge=0)
    university: int = Field(default=0, ge=0)
    college: int = Field(default=0, ge=0)
    graduate: int = Field(default=0, ge=0)
    accredited: int = Field(default=0, ge=0)


class LibraryMetadata(_CamelModel):
    """Summary persisted next to the merged snapshot."""

    built_at: str = Field(..., alias="builtAt", description="Build timestamp (ISO 8601, UTC)")
    source_last_modified: Optional[str] = Field(default=None, alias="sourceLastModified")
    source_scraped_at: Optional[str] = Field(default=None, alias="sourceScrapedAt")
    sources: List[str] = Field(default_factory=list)
    stats: BuildStats = Field(default_factory=BuildStats)


class SearchOptions(_CamelModel):
    """Filter options accepted by the query catalog.

    Unset options impose no constraint and unknown values simply match
    nothing.
    """

    region: Optional[str] = None
    level: Optional[str] = None
    establishment: Optional[str] = None
    is_accredited: bool = Field(default=False, alias="isAccredited")
    only_excellent: bool = Field(default=False, alias="onlyExcellent")

    def is_empty(self) -> bool:
        return not (
            self.region
            or self.level
            or self.establishment
            or self.is_accredited
            or self.only_excellent
        )

    @classmethod
    def coerce(cls, options: "SearchOptions | Mapping[str, Any] | None") -> "SearchOptions":
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))


__all__ = [
    "AccreditationStatus",
    "DirectoryRecord",
    "University",
    "AccreditationCategories",
    "AccreditationSource",
    "BuildStats",
    "LibraryMetadata",
    "SearchOptions",
]
