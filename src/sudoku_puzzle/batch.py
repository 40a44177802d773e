"""
Batch puzzle generation.

Generates `num_puzzles` puzzles one after another, each from its own
RandomState so any single puzzle can be reproduced from (seed, index).
Every record keeps the search statistics used by the analysis module.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import GeneratorConfig
from .constants import tier_for_count
from .full_grid import FullGridGenerator, GenerationError
from .grid import Grid
from .reducer import PuzzleReducer, ReductionStats
from .solution_counter import SolutionCounter
from .verifier import StrongVerifier


# ============================================================================
# Data classes
# ============================================================================

@dataclass
class PuzzleRecord:
    puzzle_id: int
    seed: Optional[int]
    difficulty: str
    removal_count: int
    grid: Grid
    stats: ReductionStats = field(default_factory=ReductionStats)
    full_grid_nodes: int = 0
    generation_time_seconds: float = 0.0
    unique: Optional[bool] = None

    def to_dict(self) -> Dict:
        """Flat summary (without the grid) for tabular analysis."""
        return {
            "puzzle_id": self.puzzle_id,
            "seed": self.seed,
            "difficulty": self.difficulty,
            "removal_count": self.removal_count,
            "blanked": self.grid.blanked_count,
            "full_grid_nodes": self.full_grid_nodes,
            "generation_time_seconds": self.generation_time_seconds,
            "unique": self.unique,
            **self.stats.to_dict(),
        }


# ============================================================================
# Single-puzzle generation
# ============================================================================

def generate_record(config: GeneratorConfig, puzzle_id: int) -> PuzzleRecord:
    """Generate one puzzle and collect its statistics."""
    start_time = time.time()
    rng = config.make_rng(offset=puzzle_id)

    removal_count = config.resolve_removal_count(rng)
    generator = FullGridGenerator(rng)
    grid = generator.generate()
    stats = PuzzleReducer(rng).reduce(grid, removal_count)

    record = PuzzleRecord(
        puzzle_id=puzzle_id,
        seed=config.seed,
        difficulty=(
            config.difficulty if config.removal_count is None else tier_for_count(removal_count)
        ),
        removal_count=removal_count,
        grid=grid,
        stats=stats,
        full_grid_nodes=generator.nodes_visited,
    )

    if config.verify:
        record.unique = verify_record(record)

    record.generation_time_seconds = time.time() - start_time
    return record


def verify_record(record: PuzzleRecord) -> bool:
    """Re-check a generated puzzle independently of the reducer's counter."""
    ok, message = StrongVerifier.verify_complete_solution(record.grid.solution_values())
    if not ok:
        raise GenerationError(f"Puzzle {record.puzzle_id}: {message}")
    ok, message = StrongVerifier.verify_partial_solution(record.grid.current_values())
    if not ok:
        raise GenerationError(f"Puzzle {record.puzzle_id}: {message}")
    return SolutionCounter().is_unique(record.grid)


# ============================================================================
# Main generation function
# ============================================================================

def generate_batch(config: GeneratorConfig, progress: bool = True) -> List[PuzzleRecord]:
    """
    Generate `config.num_puzzles` puzzles sequentially.

    Args:
        config: Generator settings (difficulty or explicit removal count,
            seed, batch size, verification).
        progress: Print a line per finished puzzle.

    Returns:
        List of PuzzleRecord, in puzzle_id order.
    """
    if progress:
        print(f"\n{'=' * 70}")
        print("PUZZLE GENERATION")
        print(f"{'=' * 70}")
        print(f"  Puzzles: {config.num_puzzles}")
        if config.removal_count is not None:
            print(f"  Removal count: {config.removal_count}")
        else:
            print(f"  Difficulty: {config.difficulty}")
        print(f"  Seed: {config.seed if config.seed is not None else 'random'}")
        print(f"{'=' * 70}\n")

    start_time = time.time()
    results = []
    for puzzle_id in range(config.num_puzzles):
        record = generate_record(config, puzzle_id)
        results.append(record)
        if progress:
            check = "" if record.unique is None else (" ✓ unique" if record.unique else " ✗ NOT unique")
            print(
                f"  Puzzle {puzzle_id} done - {record.removal_count} removed "
                f"({record.stats.attempts} attempts, {record.stats.rejected} rejected), "
                f"{record.generation_time_seconds:.2f}s{check}"
            )

    if progress:
        total_time = time.time() - start_time
        print(f"\n✅ Generated {len(results)} puzzles in {total_time:.1f}s")

    return results
