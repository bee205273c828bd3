"""Seed the 7 predefined emotions into Firestore.

Must complete before any other EmoTodo component runs.  Safe to re-run:
records are upserted with merge, and nothing is written when every emotion
already exists.

Usage
-----
    seed-emotions

    # against the local emulator
    FIRESTORE_EMULATOR_HOST=localhost:8080 seed-emotions

    # report what would be written without writing
    seed-emotions --dry-run
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from emotodo.catalog import REQUIRED_EMOTIONS, format_mood_summary
from emotodo.config import get_settings
from emotodo.services.seeder import SeedReport, seed_emotions

logger = logging.getLogger("seed_emotions")

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"

TROUBLESHOOTING = (
    "Check Firebase configuration in environment variables (FIREBASE_*)",
    "Ensure Firebase emulator is running: firebase emulators:start",
    "Verify Firestore is enabled in the Firebase project",
    "Check network connectivity",
)


def _print_report(report: SeedReport) -> None:
    total = len(REQUIRED_EMOTIONS)
    print(f"\n{'='*60}")
    if report.status == "already_seeded":
        print(f"  All {total} required emotions already exist in '{report.collection}'")
        print(f"  Existing emotions: {', '.join(report.existing_ids)}")
    elif report.status == "dry_run":
        print(f"  [DRY] Would write: {', '.join(report.would_write)}")
    elif report.status == "seeded":
        print(f"  SUCCESS: all {total} required emotions verified in '{report.collection}'")
        print("  Emotion summary:")
        for line in format_mood_summary():
            print(f"    - {line}")
    else:
        print(
            f"  FAILED: missing emotions after creation: {', '.join(report.missing_after)}",
            file=sys.stderr,
        )
    print(f"{'='*60}\n")


def _print_troubleshooting() -> None:
    print("\nTroubleshooting:", file=sys.stderr)
    for idx, hint in enumerate(TROUBLESHOOTING, 1):
        print(f"  {idx}. {hint}", file=sys.stderr)


def run(argv: list[str] | None = None) -> int:
    """Parse *argv*, seed, and return the process exit status."""
    parser = argparse.ArgumentParser(
        description="Create the predefined emotion records in Firestore"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List emotions that would be written without writing them",
    )
    parser.add_argument(
        "--collection",
        default=None,
        help="Target collection (default: FIREBASE_EMOTIONS_COLLECTION or 'emotions')",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
            format=LOG_FORMAT,
        )
        logger.info("Starting emotion seeding for project %s", settings.PROJECT_ID)
        report = asyncio.run(
            seed_emotions(settings, dry_run=args.dry_run, collection=args.collection)
        )
    except Exception as exc:
        # No-op when logging was already configured above
        logging.basicConfig(format=LOG_FORMAT)
        logger.error("Seeding failed: %s", exc)
        logger.debug("Seeding traceback", exc_info=True)
        _print_troubleshooting()
        return 1

    _print_report(report)
    return 0 if report.ok else 1


def main() -> None:
    """Entry point for the seeding script."""
    sys.exit(run())


if __name__ == "__main__":
    main()
