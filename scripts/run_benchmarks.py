#!/usr/bin/env python3
# ABOUTME: Script to run resolver benchmarks with pytest-benchmark reporting
# ABOUTME: Benchmarks are disabled in normal test runs and enabled here

import argparse
import subprocess
import sys
from pathlib import Path

BENCHMARK_PATH = "src/field_versions/tests/benchmark/"


def build_command(save_baseline: bool = False, compare_baseline: str | None = None, output_format: str = "table"):
    """Assemble the pytest command line."""
    cmd = [sys.executable, "-m", "pytest", BENCHMARK_PATH, "-v", "-m", "benchmark", "--benchmark-enable"]

    if save_baseline:
        cmd.append("--benchmark-save=baseline")
    if compare_baseline:
        cmd.append(f"--benchmark-compare={compare_baseline}")

    if output_format == "json":
        cmd.append("--benchmark-json=benchmark_results.json")
    elif output_format == "histogram":
        cmd.append("--benchmark-histogram=benchmark_histogram")

    cmd.extend(
        [
            "--benchmark-min-rounds=5",
            "--benchmark-max-time=2.0",
            "--benchmark-warmup=on",
            "--benchmark-sort=mean",
        ]
    )
    return cmd


def run_benchmarks(save_baseline: bool = False, compare_baseline: str | None = None, output_format: str = "table"):
    """Run the benchmark suite from the project root and return its exit code."""
    cmd = build_command(save_baseline, compare_baseline, output_format)
    print(f"Running: {' '.join(cmd)}")

    result = subprocess.run(cmd, cwd=Path(__file__).parent.parent, text=True)
    if result.returncode != 0:
        print("Benchmark run failed")
    elif output_format == "json":
        print("Results saved to benchmark_results.json")
    elif output_format == "histogram":
        print("Histogram saved to benchmark_histogram.svg")
    return result.returncode


def main():
    """Parse arguments and run the benchmarks."""
    parser = argparse.ArgumentParser(description="Run benchmark tests for field-versions")
    parser.add_argument(
        "--save-baseline",
        action="store_true",
        help="Save benchmark results as baseline for future comparisons",
    )
    parser.add_argument("--compare", type=str, help="Compare against a saved baseline (e.g., 'baseline')")
    parser.add_argument(
        "--format",
        choices=["table", "json", "histogram"],
        default="table",
        help="Output format for benchmark results",
    )
    args = parser.parse_args()

    return run_benchmarks(save_baseline=args.save_baseline, compare_baseline=args.compare, output_format=args.format)


if __name__ == "__main__":
    sys.exit(main())
