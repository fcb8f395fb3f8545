"""
Email Harvester — CLI Entry Point

Usage:
  # Harvest contacts for a company list over the last 30 days
  python main.py harvest --list-name "Acme Partners" --domain acme.com

  # Custom date range
  python main.py harvest --list-name "Acme" --domain acme.com \
      --preset custom --start 2026-01-01 --end 2026-01-31

  # Launch the Streamlit dashboard
  python main.py dashboard
"""

import argparse
import asyncio
import logging
import subprocess
import sys

from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("harvester")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Email Harvester — collect company contacts from email history"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # harvest command
    harvest_parser = subparsers.add_parser("harvest", help="Run one harvest job")
    harvest_parser.add_argument("--list-name", required=True, help="Company list name")
    harvest_parser.add_argument(
        "--domain",
        action="append",
        default=[],
        dest="domains",
        help="Company domain to scan (repeatable)",
    )
    harvest_parser.add_argument(
        "--preset",
        default="30",
        help="Days to look back (30, 60, 90) or 'custom' (default: 30)",
    )
    harvest_parser.add_argument("--start", help="Custom range start (YYYY-MM-DD)")
    harvest_parser.add_argument("--end", help="Custom range end (YYYY-MM-DD)")

    # dashboard command
    subparsers.add_parser("dashboard", help="Launch the Streamlit dashboard")

    return parser.parse_args(argv)


async def run_harvest(list_name: str, domains, preset: str, start, end) -> int:
    from harvester.infrastructure.config import Config
    from harvester.infrastructure.container import Container
    from harvester.use_cases.request_lifecycle import HarvestRequest, LifecycleState

    container = Container(Config.from_env())
    controller = container.lifecycle

    submitted = await controller.submit(
        HarvestRequest(
            list_name=list_name,
            domains=domains,
            preset=preset,
            custom_start=start,
            custom_end=end,
        )
    )

    if controller.state == LifecycleState.FAILED:
        print(f"\n✗ Harvest failed: {controller.message}")
        return 1
    if not submitted:
        print("\n✗ Nothing to do: a list name and at least one domain are required.")
        return 1

    result = controller.result
    print("\n" + "=" * 70)
    print(result.summary())
    print(f"Notion database: {result.notion_database_url}")
    print(
        f"Scanned {result.scan_date_range.start_date} → {result.scan_date_range.end_date}"
    )
    print("=" * 70)
    for contact in result.contacts:
        print(
            f"  • {contact.name:<25} {contact.email:<35} "
            f"{contact.email_count:>4} emails  last: {contact.last_interaction}"
        )
    return 0


def launch_dashboard():
    dashboard_path = "harvester/frontend/app.py"
    logger.info(f"Launching Streamlit dashboard at {dashboard_path}")
    subprocess.run(
        [sys.executable, "-m", "streamlit", "run", dashboard_path],
        check=True,
    )


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.command == "harvest":
        return asyncio.run(
            run_harvest(args.list_name, args.domains, args.preset, args.start, args.end)
        )
    if args.command == "dashboard":
        launch_dashboard()
    return 0


if __name__ == "__main__":
    sys.exit(main())
