"""Person and staff normalizers."""

from typing import Optional, Sequence

import structlog

from kinometa.config import Settings, get_settings
from kinometa.core.exceptions import NormalizationInputError
from kinometa.models.canonical import CanonicalPerson, PersonType
from kinometa.models.raw import RawPerson, RawStaff
from kinometa.normalization.dates import parse_date
from kinometa.normalization.fallback import first_non_blank, is_blank

logger = structlog.get_logger(__name__)

# Upstream profession codes; both producer codes share one category.
PROFESSION_TYPES: dict[str, PersonType] = {
    "ACTOR": PersonType.ACTOR,
    "DIRECTOR": PersonType.DIRECTOR,
    "WRITER": PersonType.WRITER,
    "COMPOSER": PersonType.COMPOSER,
    "PRODUCER": PersonType.PRODUCER,
    "PRODUCER_USSR": PersonType.PRODUCER,
}


def person_type_for(profession_key: Optional[str]) -> PersonType:
    """Map a profession code to a role category; unknown codes are unclassified."""
    if profession_key is None:
        return PersonType.UNCLASSIFIED
    return PROFESSION_TYPES.get(profession_key, PersonType.UNCLASSIFIED)


class PersonNormalizer:
    """Builds CanonicalPerson records from person and staff payloads."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def _provider_ids(self, upstream_id: Optional[int]) -> dict[str, str]:
        if upstream_id is None:
            return {}
        return {self._settings.provider_id: str(upstream_id)}

    def normalize_person(self, raw: Optional[RawPerson]) -> Optional[CanonicalPerson]:
        """Normalize a person detail payload.

        Args:
            raw: Person payload, may be None.

        Returns:
            CanonicalPerson, or None when the payload is missing. A person
            without a usable name keeps the alternate name as given.
        """
        if raw is None:
            return None

        name = first_non_blank(raw.name_ru, default=raw.name_en)
        if is_blank(name):
            logger.debug("person_without_name", person_id=raw.person_id)

        return CanonicalPerson(
            provider_ids=self._provider_ids(raw.person_id),
            name=name,
            birth_date=parse_date(raw.birthday),
            death_date=parse_date(raw.death),
            production_locations=None if is_blank(raw.birthplace) else [raw.birthplace],
            image_url=raw.poster_url,
        )

    def normalize_staff(self, raw: Optional[RawStaff]) -> Optional[CanonicalPerson]:
        """Normalize one cast or crew entry; sort order is left unset."""
        if raw is None:
            return None

        name = first_non_blank(raw.name_ru, raw.name_en)
        if name is None:
            logger.debug("staff_entry_dropped", staff_id=raw.staff_id)
            return None

        return CanonicalPerson(
            provider_ids=self._provider_ids(raw.staff_id),
            name=name,
            image_url=raw.poster_url,
            role=raw.profession_text or "",
            role_type=person_type_for(raw.profession_key),
        )

    def normalize_staff_list(
        self, raws: Sequence[Optional[RawStaff]]
    ) -> list[CanonicalPerson]:
        """Normalize a staff list, numbering the survivors 1..N in input order.

        Raises:
            NormalizationInputError: If ``raws`` is None.
        """
        if raws is None:
            raise NormalizationInputError("staff", "Staff list is required")

        people = [
            person
            for person in (self.normalize_staff(raw) for raw in raws)
            if person is not None
        ]
        return [
            person.model_copy(update={"sort_order": order})
            for order, person in enumerate(people, start=1)
        ]
