"""Compare the footprint of one scenario across every region of a provider.

Run from the repository root:

    python examples/compare_regions.py --provider gcp

The script loads ``examples/municipal_chatbot.yaml``, swaps the inference
region for each datacenter the provider offers, and prints the total and
label per region. Only the inference phase depends on the region, so the
spread shows how much the choice of datacenter matters.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from ai_footprint.config_loader import load_scenario_file
from ai_footprint.estimation.estimator import FootprintEstimator

SCENARIO = Path(__file__).resolve().parent / "municipal_chatbot.yaml"


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--provider", default="azure", help="Provider code or label.")
    parser.add_argument("--scenario", default=str(SCENARIO), help="Scenario file.")
    args = parser.parse_args()

    estimator = FootprintEstimator()
    scenario = load_scenario_file(args.scenario)
    regions = estimator.available_regions(args.provider)
    if not regions:
        print(f"No datacenters known for provider {args.provider!r}")
        return

    print(f"{'region':<24} {'country':<14} {'total kg':>12} label")
    for row in regions:
        inference = dict(scenario.get("inference") or {})
        inference.update(location="cloud", provider=args.provider, region=row.region_name)
        result = estimator.estimate_from_mapping({**scenario, "inference": inference})
        aggregate = result.aggregate
        print(
            f"{row.region_name:<24} {row.country:<14} "
            f"{aggregate.total_kg:>12,.1f} {aggregate.label.value}"
        )


if __name__ == "__main__":
    main()
