from backend.engine.search.annealing import AnnealingSearch
from backend.engine.search.base import Search
from backend.engine.search.canonical import CanonicalSearch
from backend.engine.search.exhaustive import ExhaustiveSearch
from backend.engine.search.greedy import GreedySearch, RandomRestartSearch

__all__ = [
    "AnnealingSearch",
    "CanonicalSearch",
    "ExhaustiveSearch",
    "GreedySearch",
    "RandomRestartSearch",
    "Search",
]
