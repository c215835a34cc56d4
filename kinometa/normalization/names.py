"""Local vs. original title selection."""

from typing import Iterable, Optional

from kinometa.config import Settings, get_settings
from kinometa.normalization.fallback import first_non_blank, is_blank


class LocaleNameSelector:
    """Chooses between the local-language and alternate-locale names.

    A title counts as locally originated when its production countries
    include the configured origin-country label.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the selector.

        Args:
            settings: Provider settings; supplies the origin-country label.
        """
        self._settings = settings or get_settings()

    def local_name(self, local: Optional[str], alternate: Optional[str]) -> Optional[str]:
        """Local-language name if present, else the alternate-locale name as given."""
        return first_non_blank(local, default=alternate)

    def is_origin_local(self, countries: Optional[Iterable[str]]) -> bool:
        """True iff the countries contain the origin-country label (exact match)."""
        if countries is None:
            return False
        return self._settings.origin_country in countries

    def original_name(
        self,
        local: Optional[str],
        alternate: Optional[str],
        countries: Optional[Iterable[str]],
    ) -> Optional[str]:
        """Name in the title's own language."""
        return local if self.is_origin_local(countries) else alternate

    def original_name_if_distinct(
        self,
        local: Optional[str],
        alternate: Optional[str],
        countries: Optional[Iterable[str]],
    ) -> str:
        """Original name, or empty string when blank or equal to the local name."""
        original = self.original_name(local, alternate, countries)
        if is_blank(original) or original == self.local_name(local, alternate):
            return ""
        return original
