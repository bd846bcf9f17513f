"""
Domain models and value objects.

Contains the public vocabulary of the best path calculator: Pair, ProviderPair,
PathStep, PricePath.
"""

from src.core.domain.price_path import Pair, PathStep, PricePath, ProviderPair

__all__ = [
    "Pair",
    "ProviderPair",
    "PathStep",
    "PricePath",
]
