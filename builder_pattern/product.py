"""
product.py

Responsibility: the object under construction.

A `Product` is only a container; builders decide which parts go into it and in
what order.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Product:
    """Ordered, mutable sequence of part names."""

    parts: list[str] = field(default_factory=list)

    def add_part(self, name: str) -> None:
        self.parts.append(name)

    def describe_parts(self) -> str:
        """Human-readable join of all parts, in insertion order."""
        return ", ".join(self.parts)

    def list_parts(self) -> str:
        return f"Product parts: {self.describe_parts()}"
