"""
builders.py

Responsibility: the construction-step contract and its concrete implementation.

Rules:
- `Builder` declares the steps only; it knows nothing about products.
- A concrete builder owns exactly one in-progress `Product` at a time.
- Retrieving the product hands it over to the caller and starts a fresh one.

Retrieval is intentionally NOT part of `Builder`: different concrete builders may
produce unrelated products that don't share an interface.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from builder_pattern.product import Product

logger = logging.getLogger(__name__)


class Builder(ABC):
    """Construction steps every concrete builder must provide."""

    @abstractmethod
    def produce_part_a(self) -> None:
        raise NotImplementedError("produce_part_a() must be implemented")

    @abstractmethod
    def produce_part_b(self) -> None:
        raise NotImplementedError("produce_part_b() must be implemented")

    @abstractmethod
    def produce_part_c(self) -> None:
        raise NotImplementedError("produce_part_c() must be implemented")


class ConcreteBuilder1(Builder):
    """
    Builds `Product` instances whose parts are named `Part<letter><suffix>`.

    Subclasses may override `part_suffix` to produce another product family.
    """

    part_suffix = "1"

    def __init__(self) -> None:
        self.reset()

    @property
    def product(self) -> Product:
        """The in-progress product (inspection only; use `get_product()` to take it)."""
        return self._product

    def reset(self) -> None:
        self._product = Product()
        logger.debug("%s: reset", type(self).__name__)

    def _produce(self, letter: str) -> None:
        name = f"Part{letter}{self.part_suffix}"
        self._product.add_part(name)
        logger.debug("%s: produced %s", type(self).__name__, name)

    def produce_part_a(self) -> None:
        self._produce("A")

    def produce_part_b(self) -> None:
        self._produce("B")

    def produce_part_c(self) -> None:
        self._produce("C")

    def get_product(self) -> Product:
        """
        Return the current product and reset the builder.

        The returned instance is never touched again by this builder; the next
        step call starts a new, empty product.
        """
        result = self._product
        self.reset()
        return result
