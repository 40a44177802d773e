"""
Puzzle generation configuration.

Settings come from dataclass defaults, an optional YAML file, and keyword
overrides. The random seed is read from the SUDOKU_SEED environment variable
when not given explicitly.
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

import numpy as np
import yaml

from .constants import DIFFICULTY_TIERS, NUM_CELLS


@dataclass
class GeneratorConfig:
    """Configuration for puzzle generation."""

    # Difficulty: tier name, or an explicit number of cells to remove
    difficulty: str = "medium"
    removal_count: Optional[int] = None

    # Reproducibility
    seed: Optional[int] = None

    # Batch settings
    num_puzzles: int = 10
    verify: bool = True

    def __post_init__(self):
        if self.seed is None:
            env_seed = os.getenv("SUDOKU_SEED", "")
            if env_seed:
                self.seed = int(env_seed)

        self.difficulty = self.difficulty.lower()
        if self.difficulty not in DIFFICULTY_TIERS:
            raise ValueError(
                f"Unknown difficulty {self.difficulty!r}; "
                f"expected one of {sorted(DIFFICULTY_TIERS)}"
            )
        if self.removal_count is not None and not 0 <= self.removal_count <= NUM_CELLS:
            raise ValueError(f"removal_count must be 0-{NUM_CELLS}, got {self.removal_count}")
        if self.num_puzzles < 1:
            raise ValueError(f"num_puzzles must be >= 1, got {self.num_puzzles}")

    def make_rng(self, offset: int = 0) -> np.random.RandomState:
        """RandomState for this config; unseeded configs get fresh entropy."""
        if self.seed is None:
            return np.random.RandomState()
        return np.random.RandomState((self.seed * 1000 + offset) % 2**32)

    def resolve_removal_count(self, rng: np.random.RandomState) -> int:
        """Explicit removal count, or a uniform draw from the difficulty tier."""
        if self.removal_count is not None:
            return self.removal_count
        return draw_removal_count(self.difficulty, rng)


def draw_removal_count(difficulty: str, rng: np.random.RandomState) -> int:
    """Uniform draw from a tier's inclusive range."""
    try:
        low, high = DIFFICULTY_TIERS[difficulty.lower()]
    except KeyError:
        raise ValueError(f"Unknown difficulty {difficulty!r}") from None
    return int(rng.randint(low, high + 1))


def load_config(yaml_path: str) -> dict:
    """Load generator settings from a YAML file."""
    with open(yaml_path, "r") as f:
        return yaml.safe_load(f) or {}


def make_generator_config(yaml_path: str = None, **overrides) -> GeneratorConfig:
    """Create GeneratorConfig from an optional YAML file plus keyword overrides."""
    values = load_config(yaml_path) if yaml_path else {}
    if not isinstance(values, dict):
        raise ValueError(f"Config file must hold a mapping, got {type(values).__name__}")
    values.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    return GeneratorConfig(**values)
