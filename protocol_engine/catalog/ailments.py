"""
Ailment Catalog

Read-only index over the ailment and category tables. Built once at
import; safe to share across sessions without locking.

Version: catalog_v1
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .ailments_data import AILMENT_CATEGORIES, CLIENT_AILMENTS
from .models import Ailment, AilmentCategory, AilmentCategoryInfo

logger = logging.getLogger(__name__)


class AilmentCatalog:
    """
    Immutable ailment knowledge base indexed by id.

    Lookups never raise for unknown ids; they return None or an empty list.
    """

    def __init__(self, ailments: Iterable[Ailment], categories: Iterable[AilmentCategoryInfo]):
        self._ailments: Tuple[Ailment, ...] = tuple(ailments)
        self._categories: Tuple[AilmentCategoryInfo, ...] = tuple(categories)
        self._by_id: Dict[str, Ailment] = {}
        self._category_by_id: Dict[AilmentCategory, AilmentCategoryInfo] = {
            c.id: c for c in self._categories
        }

        for ailment in self._ailments:
            if ailment.id in self._by_id:
                raise ValueError(f"Duplicate ailment id: {ailment.id}")
            if ailment.category not in self._category_by_id:
                raise ValueError(
                    f"Ailment '{ailment.id}' references unknown category '{ailment.category.value}'"
                )
            self._by_id[ailment.id] = ailment

    @classmethod
    def from_tables(cls, ailment_rows: List[dict], category_rows: List[dict]) -> "AilmentCatalog":
        return cls(
            ailments=[Ailment.model_validate(row) for row in ailment_rows],
            categories=[AilmentCategoryInfo.model_validate(row) for row in category_rows],
        )

    def __len__(self) -> int:
        return len(self._ailments)

    def __contains__(self, ailment_id: object) -> bool:
        return ailment_id in self._by_id

    def all(self) -> List[Ailment]:
        return list(self._ailments)

    def lookup(self, ailment_id: str) -> Optional[Ailment]:
        return self._by_id.get(ailment_id)

    def by_category(self, category: AilmentCategory) -> List[Ailment]:
        """Ailments of one category, catalog order."""
        try:
            category = AilmentCategory(category)
        except ValueError:
            return []
        return [a for a in self._ailments if a.category == category]

    def search(self, query: str) -> List[Ailment]:
        """
        Case-insensitive substring search.

        An ailment matches when the query occurs in its name, its
        description, OR any one of its symptoms.
        """
        needle = query.lower()
        return [
            a for a in self._ailments
            if needle in a.name.lower()
            or needle in a.description.lower()
            or any(needle in symptom.lower() for symptom in a.common_symptoms)
        ]

    def category_info(self, category: AilmentCategory) -> Optional[AilmentCategoryInfo]:
        try:
            return self._category_by_id.get(AilmentCategory(category))
        except ValueError:
            return None

    def categories(self) -> List[Tuple[AilmentCategoryInfo, List[Ailment]]]:
        """Every category with its ailments, both in catalog order."""
        return [(c, self.by_category(c.id)) for c in self._categories]


def load_ailment_catalog() -> AilmentCatalog:
    catalog = AilmentCatalog.from_tables(CLIENT_AILMENTS, AILMENT_CATEGORIES)
    logger.debug(f"Loaded ailment catalog: {len(catalog)} ailments, {len(AILMENT_CATEGORIES)} categories")
    return catalog


AILMENT_CATALOG = load_ailment_catalog()
