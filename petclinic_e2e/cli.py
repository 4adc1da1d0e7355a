"""
Command line entry point: connectivity check, fixture sweep and suite runner
"""

import argparse
import asyncio
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from petclinic_e2e.config import TestConfig, get_config, configure_logging
from petclinic_e2e.core.rest_client import RestClient
from petclinic_e2e.core.sweeper import FixtureSweeper
from petclinic_e2e.ui.browser import frontend_reachable

SUITE_PATHS = {
    "unit": ["tests/unit"],
    "api": ["tests/e2e/api"],
    "ui": ["tests/e2e/ui"],
    "all": ["tests"],
}


async def run_connectivity_check(config: TestConfig) -> int:
    """Probe the backend and the frontend"""
    print("🔍 Testing Connectivity...")
    print(f"   API Base URL: {config.api_base_url}")
    print(f"   UI Base URL:  {config.ui_base_url}")
    auth = f"basic ({config.api_username})" if config.basic_auth else "none"
    print(f"   Auth:         {auth}")
    print(f"   Timeouts:     request {config.request_timeout}s, UI {config.ui_timeout}s, settle {config.ui_settle_delay}s")
    print(f"   Retries:      {config.max_retries} (delay {config.retry_delay}s)")
    print(f"   Browser:      {config.browser} (headless={config.headless})")

    async with RestClient(config) as client:
        api_ok = await client.health_check()

    if api_ok:
        print(f"   ✅ API health check passed ({config.health_endpoint})")
    else:
        print(f"   ❌ API not reachable at {config.api_base_url}")

    if await frontend_reachable(config):
        print("   ✅ Frontend reachable")
    else:
        print("   ⚠️  Frontend not reachable - UI journey will be skipped")

    return 0 if api_ok else 1


async def run_sweep(config: TestConfig, dry_run: bool) -> int:
    """Remove records left behind by earlier UI journeys"""
    print(f"🧹 Sweeping journey fixtures ({'DRY RUN' if dry_run else 'EXECUTE'})...")

    try:
        async with RestClient(config) as client:
            report = await FixtureSweeper(client, dry_run=dry_run).sweep()
    except RuntimeError as e:
        print(f"   ❌ Sweep failed: {e}")
        return 1

    for resource, resource_id in report.matched:
        print(f"   • {resource}/{resource_id}")
    print(f"   Matched: {len(report.matched)}  Deleted: {len(report.deleted)}")
    for error in report.errors:
        print(f"   ❌ {error}")

    return 1 if report.errors else 0


def build_pytest_command(suite: str, fast: bool = False, fail_fast: bool = False,
                         pattern: Optional[str] = None, verbose: bool = False) -> List[str]:
    """Build pytest command line for the requested suite"""
    cmd = [sys.executable, "-m", "pytest"]

    if fast:
        cmd.append("--fast")
    if fail_fast:
        cmd.append("-x")
    if pattern:
        cmd.extend(["-k", pattern])
    cmd.append("-v" if verbose else "-q")

    cmd.extend(SUITE_PATHS[suite])
    return cmd


def run_suite(args: argparse.Namespace) -> int:
    cmd = build_pytest_command(args.suite, args.fast, args.fail_fast, args.pattern, args.verbose)
    missing = [path for path in SUITE_PATHS[args.suite] if not Path(path).exists()]
    if missing:
        print(f"❌ Run from the repository root; missing {', '.join(missing)}")
        return 2

    print(f"🚀 Running {args.suite} suite")
    print(f"   Command: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="petclinic-e2e",
        description="Pet-clinic end-to-end test tooling",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  petclinic-e2e check                 # Probe API and frontend
  petclinic-e2e sweep --dry-run       # List leftover journey fixtures
  petclinic-e2e run api -x            # API suites, stop on first failure
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check", help="Probe API health and frontend reachability")

    sweep = subparsers.add_parser("sweep", help="Delete records left behind by UI journeys")
    sweep.add_argument("--dry-run", action="store_true", help="Only list matching records")

    run = subparsers.add_parser("run", help="Run a test suite through pytest")
    run.add_argument("suite", nargs="?", choices=sorted(SUITE_PATHS), default="all")
    run.add_argument("--fast", action="store_true", help="Run only fast tests")
    run.add_argument("-x", "--fail-fast", action="store_true", help="Stop on first failure")
    run.add_argument("-k", "--pattern", help="Test name pattern to match")
    run.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_argument_parser().parse_args(argv)

    if args.command == "run":
        return run_suite(args)

    try:
        config = get_config()
    except ValueError as e:
        print(f"❌ {e}")
        return 2
    configure_logging(config.log_level)

    if args.command == "check":
        return asyncio.run(run_connectivity_check(config))
    return asyncio.run(run_sweep(config, args.dry_run))


if __name__ == "__main__":
    sys.exit(main())
