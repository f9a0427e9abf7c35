# run_experiments.py
import os, json, argparse
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from touring import ExperimentConfig, MODES
from touring.experiments import run_repeated_trials, run_size_sweep

OUTDIR = os.path.dirname(os.path.abspath(__file__))


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_scatter(details, modes, save_path):
    plt.figure()
    for i, mode in enumerate(modes, start=1):
        lengths = [L for (_, m, L, _) in details if m == mode]
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks(range(1, len(modes) + 1), modes)
    plt.ylabel("Tour length")
    plt.title("Tour lengths across runs")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_length_vs_n(df_sweep, save_path):
    plt.figure()
    for mode, grp in df_sweep.groupby("mode"):
        grp = grp.sort_values("n_points")
        plt.errorbar(grp["n_points"], grp["mean_length"], yerr=grp["std_length"],
                     marker="o", capsize=3, label=mode)
    plt.xlabel("Number of points")
    plt.ylabel("Mean tour length")
    plt.title("Tour length vs. instance size")
    plt.legend()
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=50)
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--runs", type=int, default=10)
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--sizes", type=int, nargs="+", default=[10, 25, 50, 100, 200],
                    help="instance sizes for the length-vs-n sweep")
    ap.add_argument("--outdir", default=OUTDIR)
    args = ap.parse_args()

    cfg = ExperimentConfig(n_points=args.n, square_size=args.square, n_runs=args.runs,
                           base_seed=args.seed, modes=MODES)

    # repeated trials
    stats, details = run_repeated_trials(cfg)
    for mode in cfg.modes:
        print(mode, json.dumps(stats[mode], indent=2))

    # summary CSV + scatter plot
    df_summary = pd.DataFrame.from_records([stats[m] for m in cfg.modes])
    summary_csv = ensure(os.path.join(args.outdir, "results_summary.csv"))
    df_summary.to_csv(summary_csv, index=False)
    print("Saved:", summary_csv)
    scatter_png = os.path.join(args.outdir, "results_distribution.png")
    plot_scatter(details, cfg.modes, scatter_png)
    print("Saved:", scatter_png)

    # size sweep
    sweep_csv = os.path.join(args.outdir, "size_sweep.csv")
    if os.path.exists(sweep_csv):
        os.remove(sweep_csv)
    rows = run_size_sweep(args.sizes, base_cfg=cfg, csv_path=sweep_csv)
    print("Sweep rows evaluated:", len(rows))
    sweep_png = os.path.join(args.outdir, "length_vs_n.png")
    plot_length_vs_n(pd.DataFrame.from_records(rows), sweep_png)
    print("Saved:", sweep_png)


if __name__ == "__main__":
    main()
