#!/usr/bin/env python3
"""
Gym Routine Planner
Main entry point for the command-line tool.
"""

import argparse
import json
import sys

from dotenv import load_dotenv

from routine_planner.routine_assembler import RoutineGenerator
from routine_planner.routine_formatter import format_routine_text
from routine_planner.routine_validator import (
    RoutineValidationError,
    routine_from_dict,
    validate_routine,
)
from routine_planner.settings import load_config


def print_banner():
    """Print welcome banner."""
    banner = """
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║        GYM ROUTINE PLANNER                                   ║
║        Deterministic routines from your equipment            ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
    """
    print(banner)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build a weekly gym routine from your equipment.")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--equipment", nargs="*", default=[], help="Equipment ids (custom-<category>-[<type>-]<name> allowed)")
    parser.add_argument("--frequency", default=None, help="Training days per week (1-7)")
    parser.add_argument("--split", default=None, help="Split scheme: 0 (full body), 2, 3, 4, 5")
    parser.add_argument("--focus", default=None, choices=["upper", "lower", "glutes"], help="Focus target")
    parser.add_argument("--level", default=None, help="Experience level or goal, depending on profile")
    parser.add_argument("--profile", default=None, choices=["experience", "goal"], help="Parameter profile")
    parser.add_argument("--json", action="store_true", help="Print the routine as JSON")
    parser.add_argument("--validate", default=None, metavar="FILE", help="Validate a JSON candidate routine")
    return parser.parse_args(argv)


def run_validate(path):
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    routine = routine_from_dict(payload)
    validate_routine(routine)
    print(f"✓ {routine['routine_name']}: {len(routine['days'])} day(s) passed validation.")
    return 0


def run_generate(args):
    config = load_config(args.config)
    if args.profile:
        config["generation"]["profile"] = args.profile

    generator = RoutineGenerator(config=config)
    routine = generator.generate(
        args.equipment,
        frequency=args.frequency,
        split=args.split,
        focus=args.focus,
        level=args.level,
    )

    if args.json:
        print(json.dumps(routine, ensure_ascii=False, indent=2))
        return 0

    print_banner()
    if not args.equipment:
        print("⚠ No equipment selected; showing a placeholder routine.\n")
    print(format_routine_text(routine))
    print("✓ Routine generated successfully!")
    return 0


def main(argv=None):
    """Main application flow."""
    load_dotenv()
    args = parse_args(argv)

    try:
        if args.validate:
            return run_validate(args.validate)
        return run_generate(args)
    except RoutineValidationError as e:
        print(f"\n❌ Routine rejected: {e}")
        for violation in e.violations:
            print(f"  - [{violation['code']}] {violation['message']}")
        return 1
    except (OSError, json.JSONDecodeError) as e:
        print(f"\n❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
