"""
Sample script to write a metrics table with several random experiments.
Each experiment records a few metrics over 100 steps, with rows shuffled
so the viewer has to sort them back by step.
"""

import csv
import math
import random
import sys


def metric_value(metric_name: str, progress: float, base: float, trend: float, noise_level: float, step: int) -> float:
    """
    Generate one value following a trend with noise.

    Args:
        metric_name: Name of the metric (controls clamping)
        progress: Fraction of the run completed
        base: Initial value
        trend: Final change amount
        noise_level: Noise amplitude
        step: Current step

    Returns:
        Generated value
    """
    trend_factor = progress * (1.0 + 0.2 * math.log(1 + 5 * progress))
    noise = noise_level * math.sin(step * 0.2) * 0.3 + noise_level * random.gauss(0, 0.5)
    value = base + trend * trend_factor + noise

    if "accuracy" in metric_name:
        return max(0.0, min(1.0, value))
    if "loss" in metric_name:
        return max(0.01, value)
    return value


def generate_rows(experiment_id: str, run_id: int, total_steps: int) -> list[list[str]]:
    """Generate the rows of one experiment."""
    settings = {
        "accuracy": (0.3 + random.uniform(-0.1, 0.1), 0.5, 0.02 + 0.01 * run_id),
        "loss": (1.0 + random.uniform(-0.2, 0.2), -0.8, 0.05 + 0.02 * run_id),
        "val_loss": (1.1 + random.uniform(-0.2, 0.2), -0.75, 0.07 + 0.02 * run_id),
    }

    rows = []
    for step in range(total_steps):
        progress = step / total_steps
        for metric_name, (base, trend, noise_level) in settings.items():
            value = metric_value(metric_name, progress, base, trend, noise_level, step)
            rows.append([experiment_id, metric_name, str(step), f"{value:.6f}"])
    return rows


def main() -> None:
    """Main function: write the table to the given path (default: metrics.csv)."""
    path = sys.argv[1] if len(sys.argv) > 1 else "metrics.csv"
    experiment_ids = ["AKIRA", "Planetes", "Solaris", "Hyperion", "Arrival"]

    rows = []
    for run_id, experiment_id in enumerate(experiment_ids):
        rows.extend(generate_rows(experiment_id, run_id, total_steps=100))
    random.shuffle(rows)

    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["experiment_id", "metric_name", "step", "value"])
        writer.writerows(rows)

    print(f"Wrote {len(rows)} rows for {len(experiment_ids)} experiments to {path}")
    print(f"   Try: runviz tui {path}")


if __name__ == "__main__":
    main()
