"""
Benchmark fuzzy ranking over a synthetic RFC index.

Compares:
- sequential: every candidate scored in the calling thread
- pooled: ThreadPoolExecutor limited to --pool-size workers

Usage:
    uv run python scripts/benchmark_rank.py
    uv run python scripts/benchmark_rank.py --num-candidates 20000 --pool-size 8
"""

import argparse
import time

import numpy as np
from tqdm import tqdm

from rfc_fuzzy.config import ScoringConfig
from rfc_fuzzy.ranker import FuzzyRanker
from rfc_fuzzy.ranking_utils import sort_and_filter

WORDS = [
    "Transport", "Layer", "Security", "Hypertext", "Protocol", "Version",
    "Internet", "Message", "Format", "Domain", "Names", "Extensions",
    "QUIC", "HTTP/2", "TLS", "Datagram", "Congestion", "Control",
    "Authentication", "Framework", "Registry", "Considerations", "IPv6",
    "Multicast", "Routing", "Key", "Exchange", "Encoding", "JSON", "URI",
]

QUERIES = ["tls", "http2", "quic", "dns ext", "rfc9", "ipv6 routing", "json"]


def make_candidates(num_candidates: int, seed: int) -> list[str]:
    """Generate ``RFCnnnn::Title`` entries like the local index file holds."""
    rng = np.random.default_rng(seed)
    candidates = []
    for number in range(1, num_candidates + 1):
        length = int(rng.integers(2, 8))
        title = " ".join(rng.choice(WORDS, size=length).tolist())
        candidates.append(f"rfc{number}::{title}")
    return candidates


def benchmark_method(
    ranker: FuzzyRanker,
    queries: list[str],
    candidates: list[str],
    num_runs: int = 3,
) -> tuple[float, float, list[list[str]]]:
    """
    Time ranking every query ``num_runs`` times.

    Returns:
        (mean_time, std_time, ranked lists of the last run)
    """
    times = []
    results: list[list[str]] = []

    for _ in tqdm(range(num_runs), desc="Runs", unit="run", leave=False):
        start = time.perf_counter()
        results = [sort_and_filter(ranker.score_all(q, candidates)) for q in queries]
        times.append(time.perf_counter() - start)

    return float(np.mean(times)), float(np.std(times)), results


def main():
    parser = argparse.ArgumentParser(description="Benchmark fuzzy ranking")
    parser.add_argument(
        "--num-candidates",
        type=int,
        default=5000,
        help="Number of synthetic index entries (default: 5000)",
    )
    parser.add_argument(
        "--pool-size",
        type=int,
        default=20,
        help="Workers for the pooled run (default: 20)",
    )
    parser.add_argument(
        "--num-runs",
        type=int,
        default=3,
        help="Number of runs for averaging (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for the synthetic index (default: 42)",
    )
    args = parser.parse_args()

    candidates = make_candidates(args.num_candidates, args.seed)

    sequential = FuzzyRanker(
        ScoringConfig(min_candidates_for_parallel=args.num_candidates + 1)
    )
    pooled = FuzzyRanker(ScoringConfig(pool_size=args.pool_size, min_candidates_for_parallel=0))

    print(f"\n{'='*60}")
    print("Benchmark Configuration:")
    print(f"  Candidates: {len(candidates):,}")
    print(f"  Queries: {len(QUERIES)}")
    print(f"  Pool size: {args.pool_size}")
    print(f"  Runs: {args.num_runs}")
    print(f"{'='*60}\n")

    print("Benchmarking sequential scoring...")
    mean1, std1, results1 = benchmark_method(sequential, QUERIES, candidates, args.num_runs)
    print(f"  Time: {mean1:.3f}s ± {std1:.3f}s")
    print(f"  Throughput: {len(candidates) * len(QUERIES) / mean1:,.0f} candidates/sec")

    print(f"\nBenchmarking pooled scoring ({args.pool_size} workers)...")
    mean2, std2, results2 = benchmark_method(pooled, QUERIES, candidates, args.num_runs)
    print(f"  Time: {mean2:.3f}s ± {std2:.3f}s")
    print(f"  Throughput: {len(candidates) * len(QUERIES) / mean2:,.0f} candidates/sec")

    print("\nVerifying correctness...")
    mismatches = [q for q, a, b in zip(QUERIES, results1, results2) if a != b]
    is_correct = not mismatches
    if is_correct:
        print("  ✓ All rankings match")
    else:
        print(f"  ✗ Rankings differ for: {', '.join(mismatches)}")

    print(f"\n{'='*60}")
    print("Summary:")
    print(f"{'='*60}")
    speedup = mean1 / mean2 if mean2 > 0 else float("inf")
    if speedup > 1:
        print(f"  Speedup: {speedup:.2f}x faster")
    else:
        print(f"  Slowdown: {1/speedup:.2f}x slower")
    print(f"  Correctness: {'PASS' if is_correct else 'FAIL'}")
    print(f"{'='*60}")


if __name__ == "__main__":
    main()
