#!/usr/bin/env python3
"""
retail_example.py
~~~~~~~~~~~~~~~~~
Retail company walkthrough: generate a use case for each scenario listed under
``analysis.retail_scenarios`` in config.yaml, compare their ROI, and print the
roadmap for the strongest one along with a short executive summary.
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Dict, List

from bizusecase.config import DEFAULT_CONFIG_PATH, generator_seed, load_config
from bizusecase.engine import ScenarioComparison, UseCaseAnalyzer, UseCaseGenerator
from bizusecase.reporting import banner, format_roadmap, format_roi


def compare_retail_scenarios(
    scenarios_cfg: List[Dict], generator: UseCaseGenerator
) -> ScenarioComparison:
    scenarios = []
    for entry in scenarios_cfg:
        use_case = generator.generate_for_domain(entry["domain"])
        scenarios.append(
            (entry["name"], use_case, float(entry["cost"]), float(entry["annual_benefit"]))
        )
    return UseCaseAnalyzer.evaluate_scenarios(scenarios)


def main() -> None:
    parser = argparse.ArgumentParser(description="Retail AI opportunity analysis.")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for template selection.")
    args = parser.parse_args()

    cfg = load_config(Path(args.config))
    seed = args.seed if args.seed is not None else generator_seed(cfg)
    scenarios_cfg = (cfg.get("analysis") or {}).get("retail_scenarios") or []
    if not scenarios_cfg:
        raise SystemExit("No analysis.retail_scenarios configured in " + args.config)

    generator = UseCaseGenerator(rng=random.Random(seed))
    comparison = compare_retail_scenarios(scenarios_cfg, generator)

    print(banner("RETAIL COMPANY AI OPPORTUNITIES ANALYSIS"))
    print("\nROI by scenario:\n")
    for item in comparison.scenarios:
        print(f"{item.name} - {item.title}")
        print(format_roi(item.result, item.cost, item.annual_benefit) + "\n")

    print("Implementation priority order:")
    for i, item in enumerate(comparison.scenarios, start=1):
        print(f"{i}. {item.name} (ROI: {item.result.roi})")

    top = comparison.scenarios[0]
    print("\n" + banner(f"Implementation plan: {top.name}"))
    print(format_roadmap(UseCaseAnalyzer.generate_roadmap(generator.get_by_id(top.use_case_id))))

    print("\n" + banner("EXECUTIVE SUMMARY"))
    print(f"Opportunities analysed:   {len(comparison.scenarios)}")
    print(f"Top opportunity:          {top.name}")
    print(f"Expected ROI:             {top.result.roi}")
    print(f"Payback period:           {top.result.payback_period}")
    print(f"Total investment:         ${comparison.total_investment:,.0f}")
    print(f"Total annual benefit:     ${comparison.total_annual_benefit:,.0f}")
    print(f"Combined portfolio ROI:   {comparison.combined.roi} ({comparison.combined.recommendation})")


if __name__ == "__main__":
    main()
