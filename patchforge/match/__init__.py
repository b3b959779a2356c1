from .disambiguate import DisambiguationPolicy, HintProximityPolicy, disambiguate
from .exact import find_exact
from .relaxed import closest_window, find_relaxed

__all__ = [
    "find_exact",
    "find_relaxed",
    "closest_window",
    "disambiguate",
    "DisambiguationPolicy",
    "HintProximityPolicy",
]
