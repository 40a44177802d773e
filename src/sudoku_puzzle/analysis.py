"""Summary tables and plots for batches of generated puzzles."""

from typing import List, Optional

import matplotlib.pyplot as plt
import pandas as pd

from .batch import PuzzleRecord
from .constants import DIFFICULTY_TIERS

_TIER_COLORS = {
    "easy": "#4daf4a",
    "medium": "#377eb8",
    "hard": "#ff7f00",
    "expert": "#e41a1c",
    "custom": "#7f7f7f",
}


def records_to_frame(records: List[PuzzleRecord]) -> pd.DataFrame:
    """One row per puzzle with its reduction statistics."""
    return pd.DataFrame([r.to_dict() for r in records])


def summarize_by_difficulty(df: pd.DataFrame) -> pd.DataFrame:
    """Mean search cost per difficulty tier, tiers in easy-to-expert order."""
    order = list(DIFFICULTY_TIERS) + ["custom"]
    summary = df.groupby("difficulty").agg(
        puzzles=("puzzle_id", "count"),
        removal_count=("removal_count", "mean"),
        attempts=("attempts", "mean"),
        rejected=("rejected", "mean"),
        counter_nodes=("counter_nodes", "mean"),
        seconds=("generation_time_seconds", "mean"),
    )
    return summary.reindex([d for d in order if d in summary.index])


def print_summary(records: List[PuzzleRecord]) -> pd.DataFrame:
    """Print summary statistics for a batch and return the per-tier table."""
    df = records_to_frame(records)
    summary = summarize_by_difficulty(df)

    print(f"\n{'=' * 70}")
    print("ANALYSIS")
    print(f"{'=' * 70}")
    print(f"Puzzles: {len(df)}")
    if df["unique"].notna().any():
        print(f"Unique: {int(df['unique'].sum())}/{int(df['unique'].notna().sum())}")
    print(f"Rejection rate: {df['rejected'].sum() / max(df['attempts'].sum(), 1):.2%}")
    print(f"\nBy Difficulty:")
    for difficulty, row in summary.iterrows():
        print(
            f"  {difficulty}: n={int(row['puzzles'])}, "
            f"removed={row['removal_count']:.1f}, attempts={row['attempts']:.1f}, "
            f"rejected={row['rejected']:.1f}, nodes={row['counter_nodes']:.0f}, "
            f"time={row['seconds']:.2f}s"
        )
    return summary


def plot_generation_cost(df: pd.DataFrame, save_path: Optional[str] = None):
    """Scatter SolutionCounter work against removal count, coloured by tier."""
    fig, ax = plt.subplots(figsize=(8, 5))
    for difficulty, sub in df.groupby("difficulty"):
        ax.scatter(
            sub["removal_count"], sub["counter_nodes"],
            color=_TIER_COLORS.get(difficulty, "gray"), s=60,
            edgecolors="black", linewidths=0.5, label=difficulty,
        )
    ax.set_xlabel("Cells removed")
    ax.set_ylabel("Counter placements (total)")
    ax.set_yscale("log")
    ax.set_title("Puzzle reduction cost")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
        print(f"✓ Saved plot to {save_path}")
    return fig
