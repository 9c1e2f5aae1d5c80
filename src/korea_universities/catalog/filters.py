"""Filter predicates evaluated by the query catalog."""

from __future__ import annotations

from korea_universities.entities import SearchOptions, University


def apply_filters(university: University, options: SearchOptions) -> bool:
    """Return ``True`` when *university* satisfies every active option."""

    if options.region and university.region != options.region:
        return False

    if options.level and university.level != options.level:
        return False

    if options.establishment and university.establishment != options.establishment:
        return False

    # Any of the three certifications qualifies.
    if options.is_accredited and not university.accreditation.any():
        return False

    return not (options.only_excellent and not university.accreditation.excellent)


__all__ = ["apply_filters"]
