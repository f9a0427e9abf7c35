from __future__ import annotations
import time, statistics, os
from typing import Dict, Any, List, Tuple, Optional, Sequence
from dataclasses import dataclass, asdict
import csv
from .instance import PointSet
from .modes import MODES, build_tour

@dataclass
class ExperimentConfig:
    n_points: int = 50
    square_size: float = 100.0
    n_runs: int = 10
    base_seed: int = 42
    modes: Tuple[str, ...] = MODES

def _summarize(lengths: List[float], times: List[float], mode: str, cfg: ExperimentConfig) -> Dict[str, Any]:
    return {
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mean_time": statistics.mean(times),
        "mode": mode,
        "n_points": cfg.n_points,
        "n_runs": cfg.n_runs,
    }

def run_repeated_trials(cfg: ExperimentConfig):
    """Build one tour per (seed, mode) and summarize the lengths per mode.

    Every mode sees the same point sequence for a given seed.
    """
    if cfg.n_runs < 1:
        raise ValueError("n_runs must be >= 1")
    lengths = {m: [] for m in cfg.modes}
    times = {m: [] for m in cfg.modes}
    details = []
    for r in range(cfg.n_runs):
        seed = cfg.base_seed + r
        inst = PointSet.random_euclidean(cfg.n_points, seed=seed, square_size=cfg.square_size,
                                         name=f"run{r}")
        for mode in cfg.modes:
            start = time.perf_counter()
            tour = build_tour(inst.coords, mode)
            elapsed = time.perf_counter() - start
            L = tour.total_length()
            lengths[mode].append(L)
            times[mode].append(elapsed)
            details.append((seed, mode, L, elapsed))
    stats = {m: _summarize(lengths[m], times[m], m, cfg) for m in cfg.modes}
    return stats, details

def run_size_sweep(sizes: Sequence[int], base_cfg: Optional[ExperimentConfig] = None,
                   csv_path: Optional[str] = None):
    base_cfg = base_cfg or ExperimentConfig()
    rows = []
    for n in sizes:
        cfg = ExperimentConfig(**{**asdict(base_cfg), "n_points": n})
        stats, _ = run_repeated_trials(cfg)
        rows.extend(dict(stats[mode]) for mode in cfg.modes)
    if csv_path is not None and rows:
        write_header = not os.path.exists(csv_path)
        with open(csv_path, "a", newline="") as f:
            w = csv.DictWriter(f, fieldnames=rows[0].keys())
            if write_header:
                w.writeheader()
            w.writerows(rows)
    return rows
