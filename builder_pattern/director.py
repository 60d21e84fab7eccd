"""
director.py

Responsibility: run builder steps in a particular order.

The Director works with any builder the caller passes in; it never owns the
builder and never retrieves products. Callers take the result from the builder.
"""

from __future__ import annotations

import logging

from builder_pattern.builders import Builder
from builder_pattern.recipes import Recipe, RecipeError, step_method_name

logger = logging.getLogger(__name__)


class BuilderNotSetError(RuntimeError):
    pass


class Director:
    def __init__(self, builder: Builder | None = None) -> None:
        self._builder = builder

    @property
    def builder(self) -> Builder | None:
        return self._builder

    @builder.setter
    def builder(self, builder: Builder | None) -> None:
        self._builder = builder

    def set_builder(self, builder: Builder) -> None:
        """
        Replace the builder used by subsequent recipe calls.

        The previous builder, and whatever it has built so far, is left untouched.
        """
        self._builder = builder

    def _require_builder(self) -> Builder:
        if self._builder is None:
            raise BuilderNotSetError("A builder must be set before calling recipe methods (use set_builder()).")
        return self._builder

    def build_minimal_viable_product(self) -> None:
        builder = self._require_builder()
        logger.debug("Building minimal viable product with %s", type(builder).__name__)
        builder.produce_part_a()

    def build_full_featured_product(self) -> None:
        builder = self._require_builder()
        logger.debug("Building full featured product with %s", type(builder).__name__)
        builder.produce_part_a()
        builder.produce_part_b()
        builder.produce_part_c()

    def construct(self, recipe: Recipe) -> None:
        """
        Run every step of `recipe` on the current builder, in order.

        All steps are resolved before the first one runs, so an unknown step leaves
        the builder's product unchanged.
        """
        builder = self._require_builder()
        calls = []
        for step in recipe.steps:
            method = getattr(builder, step_method_name(step), None)
            if not callable(method):
                raise RecipeError(
                    f"Recipe {recipe.name!r}: {type(builder).__name__} has no step {step!r} "
                    f"({step_method_name(step)}())"
                )
            calls.append(method)

        logger.debug("Running recipe %r (%s) with %s", recipe.name, ",".join(recipe.steps), type(builder).__name__)
        for call in calls:
            call()
