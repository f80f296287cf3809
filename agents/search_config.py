"""
Search configuration for the alpha-beta agent.

Configuration can be provided as a dict, a YAML/JSON file, or through
environment variables.
"""

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class SearchConfig:
    """
    Structured search configuration.

    Attributes:
        depth_divisor: Moves played per extra ply of search depth
        depth_increment: Depth used at the start of the game
        max_depth_cap: Upper bound on the search depth (None = unbounded)
        log_search_stats: Log node counts and timings at INFO after every search
    """

    depth_divisor: int = 19
    depth_increment: int = 1
    max_depth_cap: Optional[int] = None
    log_search_stats: bool = False

    def __post_init__(self):
        if self.depth_divisor < 1:
            raise ValueError(f"depth_divisor must be >= 1, got {self.depth_divisor}")
        if self.depth_increment < 1:
            raise ValueError(f"depth_increment must be >= 1, got {self.depth_increment}")
        if self.max_depth_cap is not None and self.max_depth_cap < 1:
            raise ValueError(f"max_depth_cap must be >= 1, got {self.max_depth_cap}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SearchConfig":
        """Create config from dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "SearchConfig":
        """Load config from YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f) or {}
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    @classmethod
    def from_env(cls, base: Optional["SearchConfig"] = None) -> "SearchConfig":
        """Apply AMAZONS_SEARCH_DEPTH_CAP on top of base (or the defaults)."""
        config = base or cls()
        override = os.environ.get("AMAZONS_SEARCH_DEPTH_CAP")
        if override:
            config = cls.from_dict({**config.to_dict(), "max_depth_cap": int(override)})
        return config

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
