"""
builder_pattern package

This package implements the Builder creational pattern as a small, reusable library.

Key responsibilities are split across modules:
- `product.py`: the assembled output, an ordered list of part names
- `builders.py`: the abstract `Builder` step contract and `ConcreteBuilder1`
- `director.py`: sequences builder steps into named recipes
- `recipes.py`: parse named recipes from YAML configuration
- `renderer.py`: render a finished product through a Jinja2 template
- `cli.py`: CLI entrypoint (demo client + ad-hoc builds)
"""

from __future__ import annotations

from builder_pattern.builders import Builder, ConcreteBuilder1
from builder_pattern.director import BuilderNotSetError, Director
from builder_pattern.product import Product

__all__ = [
    "Builder",
    "BuilderNotSetError",
    "ConcreteBuilder1",
    "Director",
    "Product",
    "__version__",
]

__version__ = "0.1.0"
