"""Benchmark for ChaCha20 throughput.

Compares the pure Python core, the segmented thread pool path and the
cryptography backend across payload sizes and worker counts.
"""

import argparse
import json
import os
import statistics
import time
from typing import Any, Callable, Dict

from ccchacha.ciphers import ChaCha20Cipher
from ccchacha.config import get_config
from ccchacha.core.keystream import chacha20_xor
from ccchacha.core.parallel import parallel_chacha20_xor

KEY = bytes(range(32))
NONCE = bytes(12)


class ChaChaBenchmark:
    """Benchmark ChaCha20 encryption paths."""

    def __init__(self, runs: int = 3):
        self.config = get_config()
        self.runs = runs
        self.results: Dict[str, Any] = {}

    def _measure(self, func: Callable[[bytes], bytes], data: bytes) -> Dict[str, float]:
        durations = []
        for _ in range(self.runs):
            start_time = time.perf_counter()
            func(data)
            durations.append(time.perf_counter() - start_time)

        mean = statistics.mean(durations)
        return {
            "mean_seconds": mean,
            "std_seconds": statistics.stdev(durations) if len(durations) > 1 else 0.0,
            "mb_per_second": len(data) / mean / 1024 / 1024 if mean else 0.0,
            "size_kib": len(data) / 1024,
        }

    def benchmark_sequential(self, data: bytes) -> Dict[str, float]:
        """Single-threaded pure Python XOR."""
        rounds = self.config.cipher.rounds
        return self._measure(lambda d: chacha20_xor(KEY, 0, NONCE, d, rounds=rounds), data)

    def benchmark_parallel(self, data: bytes, workers: int) -> Dict[str, float]:
        """Segmented XOR on a thread pool."""
        rounds = self.config.cipher.rounds
        blocks_per_task = self.config.cipher.blocks_per_task

        def run(d: bytes) -> bytes:
            return parallel_chacha20_xor(
                KEY,
                0,
                NONCE,
                d,
                workers=workers,
                blocks_per_task=blocks_per_task,
                rounds=rounds,
            )

        result = self._measure(run, data)
        result["workers"] = workers
        return result

    def benchmark_cryptography(self, data: bytes) -> Dict[str, float]:
        """OpenSSL ChaCha20 through the cipher wrapper."""
        return self._measure(
            lambda d: ChaCha20Cipher(KEY, NONCE, backend="cryptography").encrypt(d), data
        )

    def run_all_benchmarks(self, sizes_kib: list, worker_counts: list) -> None:
        """Run all benchmarks."""
        print("Starting ChaCha20 Benchmarks")
        print("=" * 50)

        for size_kib in sizes_kib:
            data = os.urandom(size_kib * 1024)
            label = f"{size_kib}KiB"
            print(f"Running {label}...")

            size_results = {
                "sequential": self.benchmark_sequential(data),
                "cryptography": self.benchmark_cryptography(data),
            }
            for workers in worker_counts:
                size_results[f"parallel_{workers}"] = self.benchmark_parallel(data, workers)
            self.results[label] = size_results

        print("\n" + "=" * 50)
        print("Benchmark Summary (MB/s):")
        for label, size_results in self.results.items():
            rates = ", ".join(
                f"{name}={result['mb_per_second']:.2f}"
                for name, result in size_results.items()
            )
            print(f"  {label}: {rates}")

    def save_results(self, filename: str) -> None:
        """Save benchmark results to file."""
        with open(filename, "w", encoding="utf-8") as f:
            json.dump(self.results, f, indent=2)

        print(f"Results saved to {filename}")


def main():
    """Main benchmark function."""
    parser = argparse.ArgumentParser(description="ChaCha20 Throughput Benchmark")
    parser.add_argument(
        "--output", "-o", default="chacha_results.json", help="Output file for results"
    )
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[16, 256, 1024], help="Payload sizes in KiB"
    )
    parser.add_argument(
        "--workers", type=int, nargs="+", default=[2, 4], help="Worker counts to try"
    )
    parser.add_argument("--runs", type=int, default=3, help="Repetitions per measurement")
    args = parser.parse_args()

    benchmark = ChaChaBenchmark(runs=args.runs)
    benchmark.run_all_benchmarks(args.sizes, args.workers)
    benchmark.save_results(args.output)


if __name__ == "__main__":
    main()
