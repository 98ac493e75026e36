"""Cron entry point for sweeping stale temp artifacts."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass

from src.mediacore.core.config import MediaConfig
from src.mediacore.media.temp_artifact_store import TempArtifactStore


@dataclass(slots=True)
class CleanupSummary:
    removed: int
    dry_run: bool


def perform_cleanup(
    *,
    dry_run: bool,
    max_age_seconds: float | None = None,
    reference_time: float | None = None,
) -> CleanupSummary:
    """Sweep the configured temp directory and return summary counters."""
    config = MediaConfig.build_default()
    store = TempArtifactStore(root=config.temp_dir)
    max_age = config.retention_seconds if max_age_seconds is None else max_age_seconds
    now = reference_time if reference_time is not None else time.time()

    if dry_run:
        stale = store.stale_entries(max_age, now)
        return CleanupSummary(removed=len(stale), dry_run=True)

    removed = store.sweep(max_age, now)
    return CleanupSummary(removed=len(removed), dry_run=False)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Remove stale temp artifacts.")
    parser.add_argument("--dry-run", action="store_true", help="Only report counts without deleting files.")
    parser.add_argument(
        "--max-age-seconds",
        type=float,
        default=None,
        help="Override the configured retention window.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or [])
    try:
        summary = perform_cleanup(dry_run=args.dry_run, max_age_seconds=args.max_age_seconds)
    except Exception as exc:
        print(f"cleanup failed: {exc}", file=sys.stderr)
        return 2

    if summary.dry_run:
        print(f"cleanup dry-run, stale={summary.removed}", file=sys.stdout)
    else:
        print(f"cleanup done, removed={summary.removed}", file=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
