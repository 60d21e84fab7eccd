from typing import Callable

import pytest

from builder_pattern.builders import ConcreteBuilder1
from builder_pattern.director import BuilderNotSetError, Director
from builder_pattern.recipes import BUILTIN_RECIPES, Recipe, RecipeError


@pytest.fixture
def builder() -> ConcreteBuilder1:
    return ConcreteBuilder1()


@pytest.fixture
def director(builder: ConcreteBuilder1) -> Director:
    d = Director()
    d.set_builder(builder)
    return d


def test_minimal_viable_product(director: Director, builder: ConcreteBuilder1) -> None:
    director.build_minimal_viable_product()
    assert builder.get_product().parts == ["PartA1"]


def test_full_featured_product(director: Director, builder: ConcreteBuilder1) -> None:
    director.build_full_featured_product()
    assert builder.get_product().parts == ["PartA1", "PartB1", "PartC1"]


def test_recipes_accumulate_until_retrieval(director: Director, builder: ConcreteBuilder1) -> None:
    director.build_minimal_viable_product()
    director.build_minimal_viable_product()
    assert builder.get_product().parts == ["PartA1", "PartA1"]


@pytest.mark.parametrize(
    "call",
    [
        lambda d: d.build_minimal_viable_product(),
        lambda d: d.build_full_featured_product(),
        lambda d: d.construct(BUILTIN_RECIPES["full"]),
    ],
)
def test_recipe_without_builder_raises(call: Callable[[Director], None]) -> None:
    with pytest.raises(BuilderNotSetError):
        call(Director())


def test_builder_not_set_is_a_runtime_error() -> None:
    assert issubclass(BuilderNotSetError, RuntimeError)


def test_builder_can_be_passed_to_constructor(builder: ConcreteBuilder1) -> None:
    d = Director(builder)
    assert d.builder is builder
    d.build_minimal_viable_product()
    assert builder.get_product().parts == ["PartA1"]


def test_swapping_builders_leaves_old_product_untouched(director: Director, builder: ConcreteBuilder1) -> None:
    director.build_minimal_viable_product()

    other = ConcreteBuilder1()
    director.set_builder(other)
    director.build_full_featured_product()

    assert builder.get_product().parts == ["PartA1"]
    assert other.get_product().parts == ["PartA1", "PartB1", "PartC1"]


def test_builder_property_setter(builder: ConcreteBuilder1) -> None:
    d = Director()
    d.builder = builder
    d.build_full_featured_product()
    assert builder.get_product().parts == ["PartA1", "PartB1", "PartC1"]


@pytest.mark.parametrize("name", sorted(BUILTIN_RECIPES))
def test_builtin_recipes_match_named_methods(name: str) -> None:
    via_method = ConcreteBuilder1()
    method = {"minimal": "build_minimal_viable_product", "full": "build_full_featured_product"}[name]
    getattr(Director(via_method), method)()

    via_recipe = ConcreteBuilder1()
    Director(via_recipe).construct(BUILTIN_RECIPES[name])

    assert via_recipe.get_product().parts == via_method.get_product().parts


def test_construct_runs_steps_in_order(director: Director, builder: ConcreteBuilder1) -> None:
    director.construct(Recipe(name="custom", steps=("C", "A", "C")))
    assert builder.get_product().parts == ["PartC1", "PartA1", "PartC1"]


def test_construct_unknown_step_leaves_product_unchanged(director: Director, builder: ConcreteBuilder1) -> None:
    builder.produce_part_b()
    with pytest.raises(RecipeError, match="produce_part_z"):
        director.construct(Recipe(name="bad", steps=("A", "Z")))
    assert builder.get_product().parts == ["PartB1"]
