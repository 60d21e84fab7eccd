"""
cli.py

Responsibility: CLI entrypoint for builder-pattern.

Commands:
- `demo`: the classic client walkthrough (director recipes, then direct builder use)
- `build`: assemble one product from a named recipe or an explicit step list

This module should orchestrate behavior but keep concerns isolated:
- Construction: `builders.py` / `director.py`
- Recipe configuration: `recipes.py`
- Output formatting: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from builder_pattern.builders import ConcreteBuilder1
from builder_pattern.director import BuilderNotSetError, Director
from builder_pattern.recipes import Recipe, RecipeError, load_recipes, parse_steps
from builder_pattern.renderer import DEFAULT_TEMPLATE, RenderError, render_product

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


def client_code(director: Director, out: TextIO | None = None) -> None:
    """
    Build three products with one builder: two through the director, one by hand.

    Every listing differs because `get_product()` resets the builder.
    """
    out = out or sys.stdout
    builder = ConcreteBuilder1()
    director.set_builder(builder)

    print("Standard basic product:", file=out)
    director.build_minimal_viable_product()
    print(builder.get_product().list_parts(), file=out)

    print("Standard full featured product:", file=out)
    director.build_full_featured_product()
    print(builder.get_product().list_parts(), file=out)

    # The builder works without a director too.
    print("Custom product:", file=out)
    builder.produce_part_a()
    builder.produce_part_c()
    print(builder.get_product().list_parts(), file=out)

    print(
        "Remember that all outputs are different, due to the reset() method is called after each get_product() call.",
        file=out,
    )


def demo_cmd(args: argparse.Namespace) -> int:
    client_code(Director())
    return 0


def _select_recipe(args: argparse.Namespace, recipes: dict[str, Recipe]) -> Recipe:
    if args.steps is not None:
        if args.recipe is not None:
            raise CLIError("--steps and --recipe are mutually exclusive")
        steps = parse_steps(args.steps)
        if not steps:
            raise CLIError("--steps must name at least one step")
        return Recipe(name="custom", steps=steps)

    name = args.recipe or "full"
    if name not in recipes:
        known = ", ".join(recipes) or "(none)"
        raise CLIError(f"Unknown recipe: {name} (available: {known})")
    return recipes[name]


def build_cmd(args: argparse.Namespace) -> int:
    recipes = load_recipes(args.recipes_file)

    if args.list:
        if args.recipe is not None or args.steps is not None:
            raise CLIError("--list cannot be combined with --recipe or --steps")
        for recipe in recipes.values():
            print(f"{recipe.name}: {', '.join(recipe.steps)}")
        return 0

    recipe = _select_recipe(args, recipes)
    builder = ConcreteBuilder1()
    Director(builder).construct(recipe)
    print(render_product(builder.get_product(), args.template))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="builder-pattern", description="Builder pattern - assemble products from parts")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    d = sub.add_parser("demo", help="Run the client walkthrough (director recipes, then a custom product)")
    d.set_defaults(func=demo_cmd)

    b = sub.add_parser("build", help="Build one product from a recipe or explicit steps")
    b.add_argument("--recipe", default=None, help="Recipe name (default: full)")
    b.add_argument("--steps", default=None, help="Comma-separated steps, e.g. A,C,A (instead of --recipe)")
    b.add_argument("--recipes-file", default=None, help="YAML file with additional `recipes:`")
    b.add_argument("--template", default=DEFAULT_TEMPLATE, help="Jinja2 template for the output line")
    b.add_argument("--list", action="store_true", help="List available recipes and exit")
    b.set_defaults(func=build_cmd)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except (CLIError, RecipeError, RenderError, BuilderNotSetError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
