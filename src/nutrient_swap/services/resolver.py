"""Ingredient name to nutrient profile resolution."""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from nutrient_swap.domain.nutrition import NutrientCatalog, NutrientProfile
from nutrient_swap.services.fallback import FALLBACK_PROFILES, PLACEHOLDER_PROFILE
from nutrient_swap.services.normalizer import ingredient_key

_logger = logging.getLogger(__name__)


class NutrientResolver:
    """Read-only lookup of nutrient profiles by ingredient name.

    Dataset entries and the built-in fallback table are merged once at
    construction; dataset entries win when both define the same key. The
    resolver never mutates after that, so one instance can be shared by any
    number of readers.
    """

    def __init__(
        self,
        catalog: NutrientCatalog | None = None,
        fallback: Mapping[str, NutrientProfile] = FALLBACK_PROFILES,
        placeholder: NutrientProfile = PLACEHOLDER_PROFILE,
    ) -> None:
        self.catalog = catalog or NutrientCatalog()
        self.placeholder = placeholder
        merged = {ingredient_key(name): profile for name, profile in fallback.items()}
        merged.update(self.catalog.profiles_by_name())
        self._profiles = MappingProxyType(merged)
        self._sorted_keys = tuple(sorted(merged))

    @property
    def is_available(self) -> bool:
        """Return True when dataset entries were loaded."""
        return not self.catalog.is_empty

    def lookup(self, name: str) -> NutrientProfile:
        """Return the profile for ``name``; unknown names get the placeholder."""
        key = self.closest_match(name)
        if key is None:
            _logger.debug("No nutrient match for %r; using placeholder", name)
            return self.placeholder
        return self._profiles[key]

    def lookup_many(self, names: Iterable[str]) -> list[NutrientProfile]:
        """Resolve several names in order."""
        return [self.lookup(name) for name in names]

    def exists(self, name: str) -> bool:
        """Return True when ``name`` matches a known key exactly."""
        return ingredient_key(name) in self._profiles

    def closest_match(self, name: str) -> str | None:
        """Return the key ``name`` resolves to, or None.

        Exact keys win. Otherwise a key matches when it is contained in the
        query or contains it. Among several matches, keys contained in the
        query are preferred, longest first; then keys containing the query,
        shortest first; remaining ties are broken alphabetically.
        """
        key = ingredient_key(name)
        if not key:
            return None
        if key in self._profiles:
            return key
        contained = [candidate for candidate in self._sorted_keys if candidate in key]
        if contained:
            return min(contained, key=lambda candidate: (-len(candidate), candidate))
        containing = [candidate for candidate in self._sorted_keys if key in candidate]
        if containing:
            return min(containing, key=lambda candidate: (len(candidate), candidate))
        return None

    def search(self, term: str, limit: int | None = None) -> list[str]:
        """Return keys containing ``term``, prefix matches first."""
        cleaned = " ".join(term.lower().split())
        if not cleaned:
            return []
        matches = sorted(
            (key for key in self._sorted_keys if cleaned in key),
            key=lambda key: (not key.startswith(cleaned), key),
        )
        return matches if limit is None else matches[:limit]

    def all_ingredients(self) -> list[str]:
        """Return every known key alphabetically."""
        return list(self._sorted_keys)

    def food_id(self, name: str) -> int | None:
        """Return the dataset food id for ``name``, if it came from the dataset."""
        key = self.closest_match(name)
        if key is None:
            return None
        return self.catalog.ids_by_name.get(key)

    def food_groups(self) -> list[str]:
        """Return dataset food group names alphabetically."""
        return sorted(self.catalog.groups.values())

    def ingredients_by_group(self, group_name: str) -> list[str]:
        """Return dataset ingredient keys belonging to a food group."""
        wanted = group_name.strip().lower()
        group_ids = {
            group_id
            for group_id, name in self.catalog.groups.items()
            if name.lower() == wanted
        }
        return sorted(
            {
                entry.name
                for entry in self.catalog.entries.values()
                if entry.group_id in group_ids
            }
        )


@dataclass
class ResolverProvider:
    """Builds the shared resolver on first use, exactly once."""

    load_catalog: Callable[[], NutrientCatalog]
    _resolver: NutrientResolver | None = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def get(self) -> NutrientResolver:
        """Return the resolver, loading the dataset on the first call."""
        if self._resolver is not None:
            return self._resolver
        with self._lock:
            if self._resolver is None:
                self._resolver = NutrientResolver(self.load_catalog())
                _logger.info(
                    "Nutrient resolver ready: keys=%s dataset=%s",
                    len(self._resolver.all_ingredients()),
                    self._resolver.is_available,
                )
        return self._resolver
