"""Reference data repositories."""

from app.repositories.reference.datasets import ReferenceRepository

__all__ = [
    "ReferenceRepository",
]
