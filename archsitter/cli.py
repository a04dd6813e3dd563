"""Command line interface.

Usage:
    archsitter list
    archsitter describe adr-documentation --schemas
    archsitter run api-design-specification --inputs inputs.yaml --auto-approve
    archsitter run tech-stack-evaluation --inputs inputs.json --result result.json
"""

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from archsitter.processes.registry import get_process, list_processes, run_process
from archsitter.runtime.agent_context import AgentProcessContext
from archsitter.runtime.context import BreakpointRequest, BreakpointResponse
from archsitter.runtime.errors import ArchsitterError
from archsitter.telemetry import init_telemetry, shutdown_telemetry

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================


def load_inputs(path: str | Path) -> dict[str, Any]:
    """Read process inputs from a YAML or JSON file."""
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Inputs file {path} must contain a mapping, got {type(data).__name__}")
    return data


def prompt_approver(
    request: BreakpointRequest, input_fn: Callable[[str], str] = input
) -> BreakpointResponse:
    """Ask for approval of a breakpoint on the terminal."""
    print(f"\n=== {request.title} ===")
    print(request.question)
    files = request.context.get("files") or []
    for entry in files:
        print(f"  - {entry.get('path')} ({entry.get('format', 'markdown')})")

    answer = input_fn("Approve? [y/n] ").strip().lower()
    approved = answer in ("y", "yes")
    feedback = input_fn("Feedback (optional): ").strip() or None
    return BreakpointResponse(approved=approved, feedback=feedback)


# =============================================================================
# Commands
# =============================================================================


def cmd_list(args: argparse.Namespace) -> int:
    for spec in list_processes():
        print(f"{spec.slug:34} {spec.title}")
    return 0


def cmd_describe(args: argparse.Namespace) -> int:
    spec = get_process(args.process)
    print(f"{spec.title} ({spec.id})")
    print(spec.description)
    print(f"\nOutputs: {', '.join(spec.outputs)}")
    print(f"\nTasks ({len(spec.tasks)}):")
    for task_def in spec.tasks:
        print(f"  {task_def.name:36} agent={task_def.agent_name} labels={','.join(task_def.labels)}")
        if args.schemas:
            print(json.dumps(task_def.output_schema(), indent=2))
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    inputs = load_inputs(args.inputs)
    if args.output_dir:
        inputs["outputDir"] = args.output_dir

    approver = None if args.auto_approve else prompt_approver
    ctx = AgentProcessContext(approver=approver, output_dir=args.output_dir)
    result = run_process(args.process, inputs, ctx)

    rendered = json.dumps(result, indent=2, default=str)
    if args.result:
        Path(args.result).write_text(rendered, encoding="utf-8")
        print(f"Result written to {args.result}")
    else:
        print(rendered)

    if not result.get("success"):
        reason = result.get("error") or (
            f"halted at '{result['breakpoint']}'" if result.get("halted") else "unsuccessful"
        )
        logger.warning(f"Process {args.process} did not succeed: {reason}")
        return 1
    return 0


# =============================================================================
# CLI Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archsitter",
        description="Run software-architecture processes with LLM agents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List available processes")
    list_parser.set_defaults(handler=cmd_list)

    describe_parser = subparsers.add_parser("describe", help="Show a process and its tasks")
    describe_parser.add_argument("process", help="Process slug or full id")
    describe_parser.add_argument(
        "--schemas",
        action="store_true",
        help="Print the JSON output schema of every task",
    )
    describe_parser.set_defaults(handler=cmd_describe)

    run_parser = subparsers.add_parser("run", help="Run a process")
    run_parser.add_argument("process", help="Process slug or full id")
    run_parser.add_argument(
        "--inputs",
        required=True,
        help="YAML or JSON file with the process inputs",
    )
    run_parser.add_argument(
        "--output-dir",
        help="Directory for task inputs/results (also passed as outputDir)",
    )
    run_parser.add_argument(
        "--auto-approve",
        action="store_true",
        help="Approve every breakpoint without prompting",
    )
    run_parser.add_argument("--result", help="Write the JSON result to this file")
    run_parser.set_defaults(handler=cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    init_telemetry()

    try:
        return args.handler(args)
    except (ArchsitterError, ValidationError, OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        shutdown_telemetry()


if __name__ == "__main__":
    sys.exit(main())
