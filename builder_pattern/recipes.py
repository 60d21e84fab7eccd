"""
recipes.py

Responsibility: Load and parse named build recipes into a deterministic, typed model.

A recipe is an ordered list of step letters; step `A` maps to the builder's
`produce_part_a()`, `B` to `produce_part_b()` and so on.

Accepted input:
- A plain YAML document with a top-level `recipes:` mapping.
- A markdown file that begins with YAML frontmatter carrying the same mapping.

Example:

    recipes:
      minimal: [A]
      custom: A, C, A
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class RecipeError(ValueError):
    pass


@dataclass(frozen=True)
class Recipe:
    """A named, ordered sequence of builder steps."""

    name: str
    steps: tuple[str, ...]


BUILTIN_RECIPES: dict[str, Recipe] = {
    "full": Recipe(name="full", steps=("A", "B", "C")),
    "minimal": Recipe(name="minimal", steps=("A",)),
}


def step_method_name(step: str) -> str:
    return f"produce_part_{step.lower()}"


def parse_steps(raw: Any) -> tuple[str, ...]:
    """
    Normalize a step list into upper-case single letters.

    Accepts a list/tuple of strings or a comma-separated string (`"A, c,A"`).
    """
    if isinstance(raw, str):
        items = [s for s in (part.strip() for part in raw.split(",")) if s]
    elif isinstance(raw, (list, tuple)):
        items = [str(s).strip() for s in raw]
    else:
        raise RecipeError(f"Recipe steps must be a list or a comma-separated string, got {type(raw).__name__}.")

    steps: list[str] = []
    for item in items:
        # Upper-case first: some letters expand (e.g. "ß" -> "SS").
        step = item.upper()
        if len(step) != 1 or not step.isalpha():
            raise RecipeError(f"Invalid step {item!r}: steps are single letters such as A, B or C.")
        steps.append(step)
    return tuple(steps)


def _split_frontmatter(text: str) -> str:
    """
    If the text begins with '---' frontmatter, return only the frontmatter body.
    Otherwise return the text unchanged (treated as a plain YAML document).
    """
    if not text.startswith("---\n"):
        return text

    end = text.find("\n---\n", 4)
    if end == -1:
        # A YAML document may legitimately start with '---' and have no closing marker.
        return text
    return text[4:end]


def parse_recipes_text(text: str) -> dict[str, Recipe]:
    try:
        data = yaml.safe_load(_split_frontmatter(text)) or {}
    except yaml.YAMLError as e:
        raise RecipeError(f"Recipes are not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise RecipeError("Recipes document must be a mapping/object at the top level.")

    raw = data.get("recipes")
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise RecipeError("`recipes` must be an object/mapping of name -> steps.")

    recipes: dict[str, Recipe] = {}
    for key, value in raw.items():
        name = "" if key is None else str(key).strip()
        if not name:
            raise RecipeError("Recipe names must be non-empty.")
        try:
            steps = parse_steps(value)
        except RecipeError as e:
            raise RecipeError(f"Recipe {name!r}: {e}") from e
        recipes[name] = Recipe(name=name, steps=steps)

    # Deterministic ordering at the boundary (listing relies on stable keys).
    return dict(sorted(recipes.items()))


def parse_recipes(path: str | Path) -> dict[str, Recipe]:
    path = Path(path)
    if not path.exists():
        raise RecipeError(f"Recipes file does not exist: {path}")
    recipes = parse_recipes_text(path.read_text(encoding="utf-8"))
    logger.debug("Loaded %d recipe(s) from %s", len(recipes), path)
    return recipes


def load_recipes(path: str | Path | None = None) -> dict[str, Recipe]:
    """
    Return the builtin recipes, overridden/extended by those in `path` when given.
    """
    recipes = dict(BUILTIN_RECIPES)
    if path is not None:
        recipes.update(parse_recipes(path))
    return dict(sorted(recipes.items()))
