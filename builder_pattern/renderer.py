"""
renderer.py

Responsibility: Deterministically render a finished product into text.

Rules:
- Templates are Jinja2 strings rendered with StrictUndefined (typos fail loudly).
- The context is always the same three keys: `parts`, `description`, `count`.
- The default template reproduces `Product.list_parts()`.

This module intentionally does NOT know about builders, directors, or CLI parsing.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined

from builder_pattern.product import Product

DEFAULT_TEMPLATE = "Product parts: {{ parts | join(', ') }}"


class RenderError(RuntimeError):
    pass


_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def _build_context(product: Product) -> dict[str, Any]:
    return {
        "parts": list(product.parts),
        "description": product.describe_parts(),
        "count": len(product.parts),
    }


def render_product(product: Product, template: str = DEFAULT_TEMPLATE) -> str:
    try:
        return _env.from_string(template).render(**_build_context(product))
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering product template: {template!r}") from e
