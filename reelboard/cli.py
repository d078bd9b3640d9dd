#!/usr/bin/env python
"""
Reelboard CLI - import exports, sync metrics, check deadlines.

Usage:
    reelboard import export.csv          # Preview, then upsert into data.json
    reelboard import export.csv --dry-run
    reelboard template > template.csv    # Print the example import file
    reelboard sync                       # Pull TikTok / Instagram metrics
    reelboard reminders                  # Overdue and upcoming content
    reelboard analytics                  # Engagement stats for posted content
    reelboard generate "summary..."      # Caption + hashtags for an idea
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from reelboard.csv_import import TEMPLATE_CSV
from reelboard.db import AccountStore, ContentStore, StorageError
from reelboard.instagram_client import InstagramClient
from reelboard.logging_utils import configure_safe_logging
from reelboard.services import (
    AnalyticsService,
    CaptionGenerationError,
    CaptionGenerator,
    ImportService,
    InsightGenerator,
    MetricSyncService,
    ReminderService,
)
from reelboard.tiktok_client import TikTokClient

logger = logging.getLogger(__name__)


def _store(args) -> ContentStore:
    return ContentStore(args.data_dir)


def cmd_import(args) -> int:
    """Preview an export, then commit it unless --dry-run."""
    path = Path(args.file)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        print(f"Could not read {path}: {e}", file=sys.stderr)
        return 1

    service = ImportService(_store(args))
    preview = service.preview(text)

    print(f"\nDetected: {preview.platform}\n")
    print(f"{'Field':<15} {'Source column':<30}")
    print("-" * 45)
    for key, column in preview.mapping.items():
        print(f"{key:<15} {column:<30}")

    print(f"\n{preview.importable_count} rows ready to import")
    for record in preview.preview:
        print(f"  - {record.title or '(untitled)'}  views={record.views}  date={record.due_date or '-'}")

    if preview.importable_count == 0:
        print("\nNothing to import.\n")
        return 0
    if args.dry_run:
        print("\n[DRY RUN] No changes saved.\n")
        return 0

    try:
        result = service.import_text(text)
    except StorageError as e:
        print(f"\nImport failed; no changes were saved: {e}\n", file=sys.stderr)
        return 1

    print(f"\nImported {result.total}: {result.created} created, {result.updated} updated\n")
    return 0


def cmd_template(args) -> int:
    sys.stdout.write(TEMPLATE_CSV)
    return 0


def cmd_sync(args) -> int:
    """Pull platform metrics into the content store."""
    service = MetricSyncService(
        _store(args),
        AccountStore(args.data_dir),
        TikTokClient(),
        InstagramClient(),
    )
    try:
        result = service.sync()
    except StorageError as e:
        print(f"Sync failed; metrics were not saved: {e}", file=sys.stderr)
        return 1

    for name, summary in (("TikTok", result.tiktok), ("Instagram", result.instagram)):
        if summary:
            print(f"{name}: {summary.matched}/{summary.items} matched")
    for error in result.errors:
        print(f"  ! {error}")
    print(f"\n{result.updated} records updated\n")
    return 0


def cmd_reminders(args) -> int:
    report = ReminderService(_store(args)).get_reminders()
    if not report.reminders:
        print("\nNo upcoming deadlines this week!\n")
        return 0

    print()
    for reminder in report.reminders:
        status = reminder.status.replace("-", " ")
        print(f"[{reminder.urgency:<8}] {reminder.due_date}  {reminder.title}  ({status})")
    print()
    return 0


def cmd_analytics(args) -> int:
    generator = None if args.no_insights else InsightGenerator()
    report = AnalyticsService(_store(args), generator).get_report()

    print(f"\n{'Title':<40} {'Views':>8} {'Likes':>7} {'Eng %':>7}")
    print("-" * 65)
    for s in sorted(report.stats, key=lambda s: s.engagement_rate, reverse=True):
        print(f"{s.title[:40]:<40} {s.views:>8} {s.likes:>7} {s.engagement_rate:>7.2f}")
    print(f"\nTotal views: {report.totals.views}   Avg engagement: {report.avg_engagement:.2f}%")
    if report.insights:
        print(f"\n{report.insights}")
    print()
    return 0


def cmd_generate(args) -> int:
    try:
        result = CaptionGenerator().generate(args.summary)
    except (ValueError, CaptionGenerationError) as e:
        print(f"Generation failed: {e}", file=sys.stderr)
        return 1

    print(f"\n{result.header}\n\n{result.caption}\n\n{result.hashtag_string}\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reelboard content tracker")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory holding data.json and accounts.json (default: $DATA_DIR or cwd)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("import", help="Import a TikTok / Instagram / template CSV")
    p.add_argument("file", help="Path to the CSV export")
    p.add_argument("--dry-run", action="store_true", help="Preview only, save nothing")
    p.set_defaults(func=cmd_import)

    p = subparsers.add_parser("template", help="Print the example import CSV")
    p.set_defaults(func=cmd_template)

    p = subparsers.add_parser("sync", help="Pull metrics from TikTok and Instagram")
    p.set_defaults(func=cmd_sync)

    p = subparsers.add_parser("reminders", help="Show overdue and upcoming content")
    p.set_defaults(func=cmd_reminders)

    p = subparsers.add_parser("analytics", help="Engagement stats for posted content")
    p.add_argument("--no-insights", action="store_true", help="Skip the LLM insights call")
    p.set_defaults(func=cmd_analytics)

    p = subparsers.add_parser("generate", help="Generate a caption from a summary")
    p.add_argument("summary", help="What the video is about")
    p.set_defaults(func=cmd_generate)

    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_safe_logging(logging.DEBUG if args.verbose else logging.WARNING)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
