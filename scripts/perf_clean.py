#!/usr/bin/env python3
"""Simple performance baseline for textscrub cleaning."""

from __future__ import annotations

import argparse
import json
import random
import time
from typing import Dict, List

from textscrub.catalog import CATALOG
from textscrub.config import CleaningOptions
from textscrub.pipeline import clean_text


_PLAIN_SENTENCES = [
    "This document provides a brief overview of the project.",
    "Installation steps are listed below for your convenience.",
    "Please see the documentation for more details.",
    "The system stores results in the data directory.",
    "Users should review the logs regularly.",
]

_OPTION_PROFILES = {
    "defaults": CleaningOptions(),
    "sentence": CleaningOptions(text_case="sentence", normalize_line_breaks=True),
    "aggressive": CleaningOptions(
        remove_numbers=True,
        remove_punctuation=True,
        remove_non_ascii=True,
        remove_line_breaks=True,
    ),
}


def _build_text(target_chars: int, inject_every: int) -> str:
    chunks: List[str] = []
    size = 0
    i = 0
    while size < target_chars:
        chunk = random.choice(_PLAIN_SENTENCES)
        if inject_every and i % inject_every == 0:
            chunk = chunk.replace(" ", random.choice(CATALOG).char, 1)
        chunks.append(chunk)
        size += len(chunk) + 1
        i += 1
    return " ".join(chunks)


def _run_case(text: str, options: CleaningOptions, runs: int) -> Dict[str, float]:
    durations: List[float] = []
    for _ in range(runs):
        start = time.perf_counter()
        clean_text(text, options)
        durations.append(time.perf_counter() - start)
    durations.sort()
    return {
        "min_ms": durations[0] * 1000.0,
        "p50_ms": durations[len(durations) // 2] * 1000.0,
        "max_ms": durations[-1] * 1000.0,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="textscrub cleaning perf baseline.")
    parser.add_argument("--sizes", nargs="+", type=int, default=[100_000, 500_000, 1_000_000])
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--inject-every", type=int, default=3)
    parser.add_argument(
        "--output",
        type=str,
        default="",
        help="Optional path to write results as JSON.",
    )
    args = parser.parse_args()

    print("textscrub perf baseline")
    print(f"sizes={args.sizes} chars, runs={args.runs}, inject_every={args.inject_every}")

    results: Dict[str, Dict[str, Dict[str, float]]] = {}
    for size in args.sizes:
        text = _build_text(size, args.inject_every)
        print(f"\nsize={size} chars")
        size_key = str(size)
        results[size_key] = {}
        for name, options in _OPTION_PROFILES.items():
            stats = _run_case(text, options, args.runs)
            results[size_key][name] = stats
            print(
                f"  options={name} min={stats['min_ms']:.2f}ms "
                f"p50={stats['p50_ms']:.2f}ms max={stats['max_ms']:.2f}ms"
            )
    if args.output:
        output_path = args.output
        with open(output_path, "w", encoding="utf-8") as handle:
            json.dump(
                {
                    "sizes": args.sizes,
                    "runs": args.runs,
                    "inject_every": args.inject_every,
                    "results": results,
                },
                handle,
                indent=2,
                sort_keys=True,
            )
        print(f"\nWrote results to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
