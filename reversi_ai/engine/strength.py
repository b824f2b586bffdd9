from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass
class DepthProfile:
    by_size: Dict[int, int] = field(default_factory=dict)
    default: int = 3

    def depth_for(self, size: int) -> int:
        return self.by_size.get(size, self.default)


# Pruning buys alpha/beta (and Newton, which shares it) a few more plies for
# the same work.
PROFILES: Dict[str, DepthProfile] = {
    "minimax": DepthProfile({4: 8, 6: 5, 8: 4}, 3),
    "alphabeta": DepthProfile({4: 12, 6: 10, 8: 7}, 5),
}


def get_available_profiles() -> list[str]:
    return list(PROFILES)


def get_depth_profile(name: str, config: Optional[Mapping[str, Any]] = None) -> DepthProfile:
    """Built-in profile `name`, with overrides from config["search"][name].

    Override tables map the board side (as a TOML key, so a string) to a depth,
    plus an optional "default".
    """
    base = PROFILES[name]
    section = ((config or {}).get("search", {}) or {}).get(name, {}) or {}
    by_size = dict(base.by_size)
    default = base.default
    for key, value in section.items():
        if key == "default":
            default = int(value)
        else:
            by_size[int(key)] = int(value)
    return DepthProfile(by_size, default)
