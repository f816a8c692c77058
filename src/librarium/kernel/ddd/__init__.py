"""DDD building blocks — public re-export surface."""

from librarium.kernel.ddd.entity import Entity
from librarium.kernel.ddd.specification import (
    AndSpecification,
    BaseSpecification,
    LambdaSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
    all_of,
)

__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "Entity",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
    "Specification",
    "all_of",
]
