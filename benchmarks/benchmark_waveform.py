#!/usr/bin/env python3
"""
Benchmark suite for wavegen waveform sampling.

Times sequential sampling of a four-component waveform for each combination
of output sample type and calculation precision.

Run with: python benchmarks/benchmark_waveform.py

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and wavegen contributors
MIT License
"""

import itertools
import sys
import time
from dataclasses import dataclass
from typing import Any

import numpy as np

# Add src to path for development
sys.path.insert(0, 'src')

from wavegen import Waveform, sine, sawtooth, square, bias


@dataclass
class BenchmarkConfig:
    """Configuration for a single benchmark."""
    name: str
    sample_type: Any
    precision: Any


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""
    name: str
    samples_per_run: int
    num_runs: int
    times_s: list[float]

    @property
    def mean_time_ms(self) -> float:
        return np.mean(self.times_s) * 1000

    @property
    def std_time_ms(self) -> float:
        return np.std(self.times_s) * 1000

    @property
    def realtime_ratio(self) -> float:
        """Ratio vs realtime at 44100 Hz (>1 = faster than realtime)."""
        realtime_s = self.samples_per_run / 44100
        return realtime_s / (self.mean_time_ms / 1000) if self.mean_time_ms > 0 else 0


CONFIGS = [
    BenchmarkConfig(f"{s.__name__} sample @ {p.__name__} precision", s, p)
    for s in (np.float32, np.float64, np.int16)
    for p in (np.float32, np.float64)
]


def make_waveform(config: BenchmarkConfig) -> Waveform:
    return Waveform(
        44100,
        [sine(2048.0), sawtooth(1024.0), square(512.0), bias(0.1)],
        sample_type=config.sample_type,
        precision=config.precision,
    )


def benchmark_waveform(
    config: BenchmarkConfig,
    samples_per_run: int = 25000,
    num_runs: int = 10,
    warmup_runs: int = 2,
) -> BenchmarkResult:
    """
    Benchmark sequential sampling of one waveform configuration.

    Args:
        config: Benchmark configuration
        samples_per_run: Number of samples pulled per run
        num_runs: Number of timed runs
        warmup_runs: Number of warmup runs (not timed)

    Returns:
        BenchmarkResult with timing statistics
    """
    wf = make_waveform(config)

    for _ in range(warmup_runs):
        list(itertools.islice(wf, samples_per_run))

    times = []
    for _ in range(num_runs):
        start = time.perf_counter()
        list(itertools.islice(wf, samples_per_run))
        times.append(time.perf_counter() - start)

    return BenchmarkResult(
        name=config.name,
        samples_per_run=samples_per_run,
        num_runs=num_runs,
        times_s=times,
    )


def print_summary(results: list[BenchmarkResult]) -> None:
    """Print a summary table of all results."""
    print()
    print(f"{'Benchmark':<35} {'Mean (ms)':>10} {'Std (ms)':>10} {'RT Ratio':>10}")
    print("-" * 70)
    for r in results:
        print(f"{r.name:<35} {r.mean_time_ms:>10.3f} {r.std_time_ms:>10.3f} {r.realtime_ratio:>10.2f}x")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark wavegen sampling")
    parser.add_argument("--quick", action="store_true", help="Quick mode (fewer runs)")
    parser.add_argument("--samples", type=int, default=25000, help="Samples per run")
    args = parser.parse_args()

    print("wavegen Sampling Benchmark (44.1 kHz)")
    print("=" * 70)

    num_runs = 3 if args.quick else 10
    results = [
        benchmark_waveform(config, samples_per_run=args.samples, num_runs=num_runs)
        for config in CONFIGS
    ]
    print_summary(results)
