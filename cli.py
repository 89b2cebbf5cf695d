import argparse
import asyncio
import logging
import sys
from pathlib import Path

from core.logging_setup import setup_console_logging
from quizrunner.config import DATA_DIR, DEFAULT_HTML_PATH, DEFAULT_TIMEOUT_SECONDS, OUTPUT_DIR, RunConfig
from quizrunner.errors import RunnerError
from quizrunner.services.browser_session import BrowserSession
from quizrunner.services.coordinator import exit_code, run_all
from quizrunner.services.loader import discover_test_cases
from quizrunner.services.reporter import print_banner, print_summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Data-driven browser test runner for the quiz game"
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run tests in headless mode",
    )
    parser.add_argument(
        "--filter",
        type=str,
        default=None,
        help="Filter question sets by name pattern",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output including console logs",
    )
    parser.add_argument(
        "--html-path",
        type=Path,
        default=DEFAULT_HTML_PATH,
        help="Path to the HTML file to test",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=DEFAULT_TIMEOUT_SECONDS,
        help="Timeout for page operations in seconds",
    )
    parser.add_argument(
        "--first-per-mode",
        action="store_true",
        help="Run only the first question set found for each mode",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help="Directory containing questions*.json files",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=OUTPUT_DIR,
        help="Directory for diagnostic screenshots",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        headless=args.headless,
        name_filter=args.filter,
        verbose=args.verbose,
        html_path=args.html_path,
        timeout=args.timeout,
        first_per_mode=args.first_per_mode,
        data_dir=args.data_dir,
        output_dir=args.output_dir,
    )


async def run(config: RunConfig) -> int:
    print_banner()
    try:
        test_cases = discover_test_cases(config.data_dir, config.name_filter)
        session = await BrowserSession.launch(config)
    except RunnerError as exc:
        print(f"❌ {exc}")
        return 1

    try:
        results = await run_all(session, test_cases, config)
    finally:
        await session.close()

    print_summary(results)
    return exit_code(results)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_console_logging(logging.DEBUG if args.verbose else logging.INFO)
    sys.exit(asyncio.run(run(build_config(args))))


if __name__ == "__main__":
    main()
