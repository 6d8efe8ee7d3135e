"""Read-only registry of measurement categories and their units."""

from __future__ import annotations

import math
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping

from unitconv_mcp.logging_config import get_logger
from unitconv_mcp.models.errors import RegistryError, UnknownCategoryError, UnknownUnitError
from unitconv_mcp.models.types import Category, UnitDefinition

logger = get_logger("engine.registry")


class UnitRegistry:
    """Immutable lookup over a fixed set of categories.

    Built once from a literal table and shared by every caller. Lookups are
    scoped to a category, so a code that exists in several categories always
    resolves to the unit of the category that was asked for.
    """

    def __init__(self, categories: Iterable[Category]) -> None:
        by_id: dict[str, Category] = {}
        index: dict[str, Mapping[str, UnitDefinition]] = {}
        for category in categories:
            if category.id in by_id:
                raise RegistryError(
                    f"Duplicate category '{category.id}'",
                    {"category": category.id},
                )
            index[category.id] = MappingProxyType(_index_units(category))
            by_id[category.id] = category

        self._categories: Mapping[str, Category] = MappingProxyType(by_id)
        self._index: Mapping[str, Mapping[str, UnitDefinition]] = MappingProxyType(index)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def list_categories(self) -> tuple[Category, ...]:
        """All categories in declaration order."""
        return tuple(self._categories.values())

    def get_category(self, category_id: str) -> Category:
        """Look up a category by identifier.

        Raises:
            UnknownCategoryError: If the category does not exist.
        """
        try:
            return self._categories[category_id]
        except (KeyError, TypeError):
            raise UnknownCategoryError(
                f"Unknown category: '{category_id}'",
                {"category": category_id, "available": list(self._categories)},
            ) from None

    def list_units(self, category_id: str) -> tuple[UnitDefinition, ...]:
        """Units of a category in curated presentation order."""
        return self.get_category(category_id).units

    def get_unit(self, category_id: str, code: str, side: str | None = None) -> UnitDefinition:
        """Resolve a unit code (or alias) within a category.

        Args:
            category_id: Category identifier, e.g. 'volume'.
            code: Case-sensitive unit code or alias, e.g. 'usGallon'.
            side: Optional 'from'/'to' tag carried by the raised error.

        Raises:
            UnknownCategoryError: If the category does not exist.
            UnknownUnitError: If the code is not a unit of that category.
        """
        self.get_category(category_id)
        try:
            return self._index[category_id][code]
        except (KeyError, TypeError):
            raise UnknownUnitError(
                f"Unknown unit '{code}' in category '{category_id}'",
                side=side,
                details={"category": category_id, "code": code},
            ) from None

    def base_unit(self, category_id: str) -> UnitDefinition:
        category = self.get_category(category_id)
        return self._index[category_id][category.base_unit]


def _index_units(category: Category) -> dict[str, UnitDefinition]:
    """Build the code/alias -> unit map for one category, checking the table."""
    if not category.units:
        raise RegistryError(f"Category '{category.id}' has no units", {"category": category.id})

    index: dict[str, UnitDefinition] = {}
    for unit in category.units:
        if unit.code in index:
            raise RegistryError(
                f"Duplicate unit code '{unit.code}' in category '{category.id}'",
                {"category": category.id, "code": unit.code},
            )
        index[unit.code] = unit

    # Aliases come second so they can never shadow a real code.
    for unit in category.units:
        for alias in unit.aliases:
            existing = index.get(alias)
            if existing is not None and existing is not unit:
                raise RegistryError(
                    f"Alias '{alias}' of '{unit.code}' collides with '{existing.code}' "
                    f"in category '{category.id}'",
                    {"category": category.id, "alias": alias},
                )
            index[alias] = unit

    base = index.get(category.base_unit)
    if base is None or base.code != category.base_unit:
        raise RegistryError(
            f"Base unit '{category.base_unit}' is not defined in category '{category.id}'",
            {"category": category.id, "base_unit": category.base_unit},
        )
    if base.to_base_factor != 1.0 or base.affine_offset != 0.0:
        raise RegistryError(
            f"Base unit '{base.code}' of category '{category.id}' must have factor 1 and no offset",
            {"category": category.id, "factor": base.to_base_factor, "offset": base.affine_offset},
        )

    # model_construct() skips field validation, so check factors again here.
    for unit in category.units:
        if not math.isfinite(unit.to_base_factor) or unit.to_base_factor <= 0:
            raise RegistryError(
                f"Unit '{unit.code}' has invalid factor {unit.to_base_factor}",
                {"category": category.id, "code": unit.code},
            )

    return index


@lru_cache(maxsize=1)
def get_registry() -> UnitRegistry:
    """The process-wide default registry, built on first use."""
    from unitconv_mcp.engine.tables import DEFAULT_CATEGORIES

    registry = UnitRegistry(DEFAULT_CATEGORIES)
    logger.debug(
        "Unit registry built: %d categories, %d units",
        len(registry),
        sum(len(c.units) for c in registry.list_categories()),
    )
    return registry


def get_unit(category_id: str, code: str) -> UnitDefinition:
    """Resolve a unit in the default registry."""
    return get_registry().get_unit(category_id, code)


def list_units(category_id: str) -> tuple[UnitDefinition, ...]:
    """Units of a category in the default registry, in presentation order."""
    return get_registry().list_units(category_id)
