"""CLI for running offline elevator energy scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .config import SimulationConfig
from .report import print_report, report_to_dict
from .simulation import run_simulation


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the final report as JSON",
    )
    parser.add_argument("--hours", type=int, help="Override the number of simulated hours")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="[%(levelname)s] %(asctime)s - %(name)s - %(message)s",
    )

    scenario = json.loads(args.config.read_text())
    config = SimulationConfig.from_dict(scenario)

    print(f"Scenario: {scenario.get('name', args.config.stem)}")
    if scenario.get("description"):
        print(scenario["description"])
    print(f"Dispatcher: {config.dispatcher_name}")
    report = run_simulation(config, reporter=print_report, total_hours=args.hours)

    save_results(
        args.output,
        {
            "scenario": scenario.get("name", args.config.stem),
            "description": scenario.get("description"),
            "dispatcher": config.dispatcher_name,
            "report": report_to_dict(report),
        },
    )
    if args.output:
        print(f"Saved report to {args.output}")


if __name__ == "__main__":
    main()
