"""Ordered, append-only property storage with per-element uniqueness."""

from __future__ import annotations

import logging
from typing import Iterator

from vcardgen.errors import DuplicateElementError
from vcardgen.types import REPEATABLE_ELEMENTS, ElementSet, Property

logger = logging.getLogger(__name__)


class PropertyStore:
    """Properties in insertion order plus the set of defined elements.

    Elements outside ``repeatable`` may be set once.  Properties are never
    removed or replaced.
    """

    def __init__(self, repeatable: frozenset[str] = REPEATABLE_ELEMENTS) -> None:
        self.repeatable = repeatable
        self.defined_elements = ElementSet()
        self._properties: list[Property] = []

    def set_property(
        self,
        element: str,
        key: str,
        value: str,
        components: tuple[str, ...] | None = None,
        separator: str = ";",
    ) -> Property:
        """Append a property for *element*.

        Raises:
            DuplicateElementError: If *element* is single-valued and already
                defined.  The store is left unchanged.
        """
        if element not in self.repeatable and element in self.defined_elements:
            logger.warning("Rejecting duplicate element %s (%s)", element, key)
            raise DuplicateElementError(element)

        prop = Property(key=key, value=value, components=components, separator=separator)
        self.defined_elements.add(element)
        self._properties.append(prop)
        logger.debug("Stored %s for element %s", key, element)
        return prop

    def has_property(self, key: str) -> bool:
        """Whether a property with exactly *key* and a non-empty value exists."""
        for prop in self._properties:
            if prop.key == key and prop.value != "":
                return True
        return False

    def has_element(self, element: str) -> bool:
        return element in self.defined_elements

    def get_properties(self) -> list[Property]:
        """Return the stored properties in insertion order (not a copy)."""
        return self._properties

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)
