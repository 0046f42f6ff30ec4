#!/usr/bin/env python3
"""
run_demo.py
~~~~~~~~~~~
Walks the engine end to end from the terminal:

generate → one use case per catalog domain
rank     → full list, then the top three by score
analyse  → portfolio counts and average score
plan     → implementation roadmap for the best-scoring use case
cost     → ROI and payback for the first use case (figures from config.yaml)
export   → JSON dump, optionally written under outputs/
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from bizusecase.config import DEFAULT_CONFIG_PATH, generator_seed, load_config
from bizusecase.engine import UseCaseAnalyzer, UseCaseGenerator
from bizusecase.reporting import (
    banner,
    format_analysis,
    format_domains,
    format_ranking,
    format_roadmap,
    format_roi,
    format_use_case,
)
from bizusecase.utils.io import outputs_dir, write_export


def run_demo(config_path: Path, seed: int | None = None, save: bool = False) -> UseCaseGenerator:
    cfg = load_config(config_path)
    if seed is None:
        seed = generator_seed(cfg)
    generator = UseCaseGenerator(rng=random.Random(seed))

    print(format_domains(generator.domains))

    print("\n" + banner("STEP 1: Generating use cases across all domains"))
    generated = []
    for domain in generator.domains:
        use_case = generator.generate_for_domain(domain.name)
        generated.append(use_case)
        print("\n" + format_use_case(use_case))
    print(f"\nGenerated {len(generated)} use cases.")

    print("\n" + banner("STEP 2: All generated use cases"))
    print(format_ranking(generator.get_all()))

    print("\n" + banner("STEP 3: Top-ranked use cases"))
    print(format_ranking(generator.get_top(3), detailed=True))

    print("\n" + banner("STEP 4: Portfolio analysis"))
    print(format_analysis(generator.analyze()))

    print("\n" + banner("STEP 5: Implementation roadmap"))
    best = generator.get_top(1)[0]
    print(f"Roadmap for: {best.title}\n")
    print(format_roadmap(UseCaseAnalyzer.generate_roadmap(best)))

    print("\n" + banner("STEP 6: ROI example"))
    example = (cfg.get("analysis") or {}).get("roi_example") or {}
    cost = float(example.get("cost", 50000))
    benefit = float(example.get("annual_benefit", 120000))
    first = generated[0]
    print(f"Analysing ROI for: {first.title}\n")
    print(format_roi(UseCaseAnalyzer.calculate_roi(first, cost, benefit), cost, benefit))

    print("\n" + banner("STEP 7: JSON export"))
    if save:
        path = write_export(generator, outputs_dir(cfg.get("paths")), fmt="json")
        print(f"Saved export → {path}")
    else:
        print(generator.export("json"))

    return generator


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the use case engine demo.")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for template selection.")
    parser.add_argument("--save", action="store_true", help="Write the export under outputs/.")
    args = parser.parse_args()

    run_demo(Path(args.config), seed=args.seed, save=args.save)
    print("\nDemo complete.")


if __name__ == "__main__":
    main()
