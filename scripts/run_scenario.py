"""CLI for running LiftDispatch scenarios and printing every car event."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from dispatch import DispatchConfig, DispatchCore, Event, Person, build_core, event_to_dict, format_event

BUILTIN_SCENARIOS: List[Dict] = [
    {
        "name": "Bob (3->9), then Sue (6->2) | time=13:00",
        "strategy": "fifo",
        "time": "13:00",
        "requests": [
            {"name": "Bob", "origin": 3, "destination": 9},
            {"name": "Sue", "origin": 6, "destination": 2},
        ],
    },
    {
        "name": "A (3->5) | time=11:59 (returns to lobby)",
        "strategy": "fifo",
        "time": "11:59",
        "requests": [{"name": "A", "origin": 3, "destination": 5}],
    },
]


def build_people(requests: List[Dict]) -> List[Person]:
    people: List[Person] = []
    for entry in requests:
        person = Person(entry["name"], entry["origin"])
        person.request_drop_off(entry["destination"])
        people.append(person)
    return people


def run_scenario(scenario: Dict, core: Optional[DispatchCore] = None, strategy: Optional[str] = None) -> Dict:
    core = core or build_core(DispatchConfig.from_dict(scenario.get("config", {})))
    lines: List[str] = []
    events: List[Dict] = []

    def record(event: Event) -> None:
        lines.append(format_event(event))
        events.append(event_to_dict(event))

    core.on_event(record)
    for person in build_people(scenario.get("requests", [])):
        core.enqueue(person)
    core.serve(strategy or scenario.get("strategy"), scenario.get("time"))
    core.on_event(None)

    return {
        "scenario": scenario.get("name"),
        "strategy": strategy or scenario.get("strategy") or core.scheduler_name,
        "lines": lines,
        "events": events,
        "final_floor": core.current_floor,
        "total_stops": core.total_stops,
        "total_distance": core.total_distance,
        "requests_remaining": len(core.pending()),
        "riders_remaining": len(core.aboard()),
    }


def save_results(output_path: Optional[Path], data: object) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def print_result(result: Dict) -> None:
    print("=" * 60)
    print(result["scenario"])
    print("-" * 60)
    for line in result["lines"]:
        print(line)
    print("-" * 60)
    print(f"Final floor: {result['final_floor']}")
    print(f"Total stops: {result['total_stops']}")
    print(f"Total floors traversed: {result['total_distance']}")
    print(f"Requests remaining: {result['requests_remaining']}")
    print(f"Riders remaining: {result['riders_remaining']}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, nargs="?", help="Path to a JSON scenario file")
    parser.add_argument("--strategy", choices=["fifo", "scan"], help="Override the scenario strategy")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write scenario results as JSON",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level for the dispatch core")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.config:
        scenario = json.loads(args.config.read_text())
        scenario.setdefault("name", args.config.stem)
        scenarios = [scenario]
    else:
        scenarios = BUILTIN_SCENARIOS

    results = [run_scenario(scenario, strategy=args.strategy) for scenario in scenarios]
    for result in results:
        print_result(result)

    save_results(args.output, results)
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
