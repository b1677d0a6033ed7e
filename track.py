#!/usr/bin/env python3
"""
CLI for inspecting fleet record files.

Commands:
  check    - Run the post-load checks on every record
  list     - List users, vehicles or tracking data
  vehicle  - Show one vehicle and its tracking history
  stamp    - Run the pre-save build step and write the file back
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from tabulate import tabulate

from fleet import (
    Model,
    RecordSet,
    TrackingData,
    User,
    Vehicle,
    errors,
    load_records,
    save_records,
)
from fleet.logger import configure_logging, get_logger

logger = get_logger(__name__)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_mileage(mileage: Optional[float]) -> str:
    """Format mileage for display."""
    return f"{mileage:,.1f}" if mileage is not None else "-"


def format_timestamp(value: Optional[datetime]) -> str:
    """Format a timestamp for display (UTC, minute precision)."""
    return value.strftime("%Y-%m-%d %H:%M") if value is not None else "-"


def format_id(value) -> str:
    """Identifier as hex, or '-' when unset."""
    return str(value) if value is not None else "-"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if not text:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def describe(section: str, record: Model) -> str:
    """Short label for a record in check output."""
    if isinstance(record, User):
        return record.email or "(no email)"
    if isinstance(record, Vehicle):
        return record.display_name or "(no name)"
    if isinstance(record, TrackingData):
        return f"{format_id(record.vehicle_id)} @ {record.location or '?'}"
    return section


# =============================================================================
# Check command
# =============================================================================


def check_records(record_set: RecordSet) -> List[Tuple[str, Model, Optional[str]]]:
    """Run check() on every record. Returns (section, record, error) triples."""
    results = []
    for section, record in record_set.iter_records():
        try:
            record.check()
            error = None
        except errors.ModelError as e:
            error = str(e)
        results.append((section, record, error))
    return results


def make_check_table(results: List[Tuple[str, Model, Optional[str]]]) -> List[List[str]]:
    """Convert check results to table rows."""
    rows = []
    for section, record, error in results:
        rows.append(
            [
                section,
                format_id(record.id),
                truncate(describe(section, record), 40),
                "FAIL" if error else "OK",
                error or "",
            ]
        )
    return rows


def cmd_check(args):
    """Run the post-load checks on every record."""
    record_set = load_records(args.records_file)
    results = check_records(record_set)
    failures = [r for r in results if r[2] is not None]
    orphans = record_set.get_orphaned_tracking()

    print(f"Records: {len(record_set)}")
    print()

    if results:
        headers = ["Section", "ID", "Record", "Result", "Error"]
        print(tabulate(make_check_table(results), headers=headers, tablefmt="simple"))
        print()

    if orphans:
        print(f"UNKNOWN VEHICLES ({len(orphans)} tracking entries):")
        for entry in orphans:
            print(f"  {format_id(entry.id)} -> vehicle {format_id(entry.vehicle_id)}")
        print()

    if failures or orphans:
        print(f"FAILED: {len(failures)} invalid, {len(orphans)} unknown vehicle references")
        return 1

    print("All records OK.")
    return 0


# =============================================================================
# List command
# =============================================================================


def make_user_table(users: List[User]) -> List[List[str]]:
    return [
        [format_id(u.id), u.email, u.role, format_timestamp(u.created_at), format_timestamp(u.deleted_at)]
        for u in users
    ]


def make_vehicle_table(vehicles: List[Vehicle]) -> List[List[str]]:
    return [
        [
            format_id(v.id),
            v.vehicle_name,
            v.vehicle_model,
            v.vehicle_status,
            format_mileage(v.mileage),
            v.license_number,
            format_timestamp(v.updated_at),
        ]
        for v in vehicles
    ]


def make_tracking_table(entries: List[TrackingData]) -> List[List[str]]:
    return [
        [
            format_timestamp(t.created_at),
            format_id(t.vehicle_id),
            truncate(t.location),
            format_mileage(t.mileage),
            t.status,
            t.fuel_condition,
        ]
        for t in entries
    ]


LIST_HEADERS = {
    "users": ["ID", "Email", "Role", "Created", "Deleted"],
    "vehicles": ["ID", "Name", "Model", "Status", "Mileage", "License", "Updated"],
    "tracking": ["Time", "Vehicle", "Location", "Mileage", "Status", "Fuel"],
}

LIST_TABLES = {
    "users": make_user_table,
    "vehicles": make_vehicle_table,
    "tracking": make_tracking_table,
}


def cmd_list(args):
    """List users, vehicles or tracking data."""
    record_set = load_records(args.records_file)
    kinds = [args.kind] if args.kind else list(LIST_HEADERS)

    for kind in kinds:
        records = record_set.section(kind)
        if not args.include_deleted:
            records = [r for r in records if not r.is_deleted]

        print(f"{kind.upper()} ({len(records)}):")
        if records:
            print(tabulate(LIST_TABLES[kind](records), headers=LIST_HEADERS[kind], tablefmt="simple"))
        else:
            print("  (none)")
        print()

    return 0


# =============================================================================
# Vehicle command
# =============================================================================


def cmd_vehicle(args):
    """Show one vehicle and its tracking history."""
    record_set = load_records(args.records_file)
    vehicle = record_set.get_vehicle(args.vehicle_id)
    if vehicle is None:
        print(f"Error: Unknown vehicle '{args.vehicle_id}'")
        return 1

    entries = record_set.get_tracking_for_vehicle(vehicle.id, include_deleted=args.include_deleted)
    last = entries[0] if entries else None

    print(f"Vehicle: {vehicle.display_name}")
    print(f"Status: {vehicle.vehicle_status}")
    print(f"Mileage: {format_mileage(vehicle.mileage)}")
    if last:
        print(f"Last seen: {last.location} at {format_timestamp(last.created_at)}")
    print(f"Tracking entries: {len(entries)}")
    print()

    if not entries:
        print("No tracking data found.")
        return 0

    print(tabulate(make_tracking_table(entries), headers=LIST_HEADERS["tracking"], tablefmt="simple"))
    return 0


# =============================================================================
# Stamp command
# =============================================================================


def cmd_stamp(args):
    """Run build() on every record and save the file."""
    record_set = load_records(args.records_file)

    failed = 0
    for section, record in record_set.iter_records():
        try:
            record.build()
        except errors.ModelError as e:
            failed += 1
            print(f"FAIL: {section} {describe(section, record)}: {e}")

    if failed:
        print(f"\n{failed} invalid records - no changes made")
        return 1

    print(f"Stamped {len(record_set)} records in {args.records_file}")

    if args.dry_run:
        print("(dry run - no changes made)")
        return 0

    save_records(args.records_file, record_set)
    print("Records saved.")
    return 0


# =============================================================================
# Main
# =============================================================================


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description="Fleet record file tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s records/fleet.yaml check
  %(prog)s records/fleet.yaml list --kind vehicles
  %(prog)s records/fleet.yaml vehicle 64b7f0c2e4b0a1a2b3c4d5e6
  %(prog)s records/fleet.yaml stamp --dry-run
""",
    )
    parser.add_argument(
        "records_file",
        type=Path,
        help="Path to record YAML file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check", help="Run the post-load checks on every record")

    list_parser = subparsers.add_parser("list", help="List records")
    list_parser.add_argument(
        "--kind",
        choices=list(LIST_HEADERS),
        help="Only list one kind of record",
    )
    list_parser.add_argument(
        "--include-deleted",
        action="store_true",
        help="Include soft-deleted records",
    )

    vehicle_parser = subparsers.add_parser("vehicle", help="Show a vehicle and its tracking history")
    vehicle_parser.add_argument("vehicle_id", type=str, help="Vehicle id (24 hex digits)")
    vehicle_parser.add_argument(
        "--include-deleted",
        action="store_true",
        help="Include soft-deleted tracking entries",
    )

    stamp_parser = subparsers.add_parser("stamp", help="Stamp timestamps and save")
    stamp_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be stamped without saving",
    )

    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None)

    # Validate records file exists
    if not args.records_file.exists():
        print(f"Error: File not found: {args.records_file}")
        return 1

    try:
        if args.command == "check":
            return cmd_check(args)
        elif args.command == "list":
            return cmd_list(args)
        elif args.command == "vehicle":
            return cmd_vehicle(args)
        elif args.command == "stamp":
            return cmd_stamp(args)
    except errors.ModelError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
