"""CLI tool for the hostel gate security desk."""

import argparse
import asyncio
import json
import sys
from typing import Any

import aiohttp

from hostel_outpass.adapters.config import AppConfig
from hostel_outpass.adapters.formatters import BoardFormatter
from hostel_outpass.application.services import OutpassGateService
from hostel_outpass.domain.models import OutpassStoreError, TransitionResult
from hostel_outpass.domain.policy import departure_stats, filter_board, return_stats
from hostel_outpass.main import build_gate_service, configure_logging, load_config, run_watch


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _print_result(result: TransitionResult, as_json: bool) -> None:
    if as_json:
        _print_json(
            {
                "success": result.success,
                "message": result.message,
                "error": result.error.kind.value if result.error else None,
                "statusCode": result.store_error.status_code if result.store_error else None,
                "conflict": bool(result.store_error and result.store_error.is_conflict),
            }
        )
        return
    stream = sys.stdout if result.success else sys.stderr
    print(result.message, file=stream)
    if result.store_error is not None and result.store_error.is_conflict:
        print("The outpass was updated by someone else. Refresh and try again.", file=stream)


async def _show_approved(
    service: OutpassGateService, formatter: BoardFormatter, search: str | None, as_json: bool
) -> None:
    board = filter_board(await service.get_departure_board(), search)
    stats = departure_stats(board)
    if as_json:
        _print_json(
            {
                "stats": {
                    "valid": stats.valid,
                    "tooEarly": stats.too_early,
                    "expired": stats.expired,
                    "invalid": stats.invalid,
                },
                "outpasses": [formatter.departure_entry_to_dict(entry) for entry in board],
            }
        )
        return

    print(
        f"Approved outpasses: {len(board)} "
        f"(valid: {stats.valid}, too early: {stats.too_early}, expired: {stats.expired}, "
        f"invalid: {stats.invalid})"
    )
    print("=" * 60)
    if not board:
        print("No approved outpasses awaiting departure.")
    for entry in board:
        print(formatter.format_departure_entry(entry))
        print()


async def _show_active(
    service: OutpassGateService, formatter: BoardFormatter, search: str | None, as_json: bool
) -> None:
    now = service.clock.now()
    board = filter_board(await service.get_return_board(now), search)
    stats = return_stats(board)
    if as_json:
        _print_json(
            {
                "stats": {
                    "onTime": stats.on_time,
                    "overdue": stats.overdue,
                    "expired": stats.expired,
                    "invalid": stats.invalid,
                },
                "outpasses": [formatter.return_entry_to_dict(entry) for entry in board],
            }
        )
        return

    print(
        f"Students out: {len(board)} "
        f"(on time: {stats.on_time}, overdue: {stats.overdue}, expired: {stats.expired}, "
        f"invalid: {stats.invalid})"
    )
    print("=" * 60)
    if not board:
        print("No students currently out.")
    for entry in board:
        print(formatter.format_return_entry(entry, now))
        print()


async def _show_today(service: OutpassGateService, formatter: BoardFormatter, as_json: bool) -> None:
    activity = await service.get_today_activity()
    if as_json:
        _print_json(
            {
                "departuresToday": [formatter.outpass_to_dict(o) for o in activity.departures_today],
                "returnsToday": [formatter.outpass_to_dict(o) for o in activity.returns_today],
                "expectedReturns": [formatter.outpass_to_dict(o) for o in activity.expected_returns],
            }
        )
        return
    print(formatter.format_today_activity(activity))


async def run_command(args: argparse.Namespace, config: AppConfig) -> int:
    """Run a board or transition command and return the exit code."""
    formatter = BoardFormatter(config)
    async with aiohttp.ClientSession() as session:
        service = build_gate_service(session, config)
        try:
            if args.command == "approved":
                await _show_approved(service, formatter, args.search, args.json)
            elif args.command == "active":
                await _show_active(service, formatter, args.search, args.json)
            elif args.command == "today":
                await _show_today(service, formatter, args.json)
            elif args.command == "mark-departure":
                result = await service.mark_departure(args.outpass_id, args.comments)
                _print_result(result, args.json)
                return 0 if result.success else 1
            elif args.command == "mark-return":
                result = await service.mark_return(args.outpass_id, args.comments, args.reason)
                _print_result(result, args.json)
                return 0 if result.success else 1
        except OutpassStoreError as e:
            details = e.details
            print(f"Error: {details.message or details.reason}", file=sys.stderr)
            return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the gate CLI."""
    parser = argparse.ArgumentParser(
        description="Hostel gate outpass desk",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Approved outpasses with departure availability
  outpass-gate approved

  # Students currently out, filtered by name or roll number
  outpass-gate active --search 21CS

  # Mark a departure
  outpass-gate mark-departure 42

  # Mark a late return with a reason
  outpass-gate mark-return 42 --reason "Train delayed"

  # Keep boards refreshed in the background
  outpass-gate watch
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    approved_parser = subparsers.add_parser("approved", help="Show the departure board")
    approved_parser.add_argument("--search", help="Filter by student name or roll number")
    approved_parser.add_argument("--json", action="store_true", help="Output as JSON")

    active_parser = subparsers.add_parser("active", help="Show the return board")
    active_parser.add_argument("--search", help="Filter by student name or roll number")
    active_parser.add_argument("--json", action="store_true", help="Output as JSON")

    today_parser = subparsers.add_parser("today", help="Show today's gate activity")
    today_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departure_parser = subparsers.add_parser("mark-departure", help="Mark a student as departed")
    departure_parser.add_argument("outpass_id", help="Outpass ID")
    departure_parser.add_argument("--comments", help="Comments (default: 'Student departed')")
    departure_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return_parser = subparsers.add_parser("mark-return", help="Mark a student as returned")
    return_parser.add_argument("outpass_id", help="Outpass ID")
    return_parser.add_argument("--comments", help="Comments (default: 'Student returned')")
    return_parser.add_argument(
        "--reason", help="Late return reason (required for overdue or expired returns)"
    )
    return_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("watch", help="Poll the store and keep boards refreshed")

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config()
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "watch":
        configure_logging(config.log_level)
        await run_watch(config)
        return

    # Board output goes to stdout; keep log noise down unless debugging
    configure_logging("DEBUG" if config.log_level == "DEBUG" else "WARNING")

    exit_code = await run_command(args, config)
    if exit_code:
        sys.exit(exit_code)


def cli_main() -> None:
    """Synchronous entry point for CLI."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
