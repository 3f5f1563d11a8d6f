"""CLI adapter printing grouped totals, income or expenses.

Examples:
    python -m src.adapters.summation_cli --group-by week --period lastmonth
    python -m src.adapters.summation_cli --mode income --json
"""

import argparse
import json
from collections.abc import Sequence

from src.adapters.summation_query import (
    parse_summation_query,
    serialize_summaries,
)
from src.domain.errors import SummationError
from src.infrastructure.container import build_summation_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


MODES = ("total", "income", "expenses")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sum transactions grouped by day, week, month or year.",
    )
    parser.add_argument("--mode", choices=MODES, default="total")
    parser.add_argument("--group-by", dest="group_by", default=None)
    parser.add_argument("--period", default=None)
    parser.add_argument("--start-date", dest="start_date", default=None)
    parser.add_argument("--end-date", dest="end_date", default=None)
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON array.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the summation use case and print the result.

    Returns:
        int: Exit status; 2 on invalid query parameters.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    try:
        query = parse_summation_query(
            group_by=args.group_by,
            period=args.period,
            start_date=args.start_date,
            end_date=args.end_date,
        )
    except SummationError as exc:
        logger.warning(str(exc))
        print(f"Error: {exc}")
        return 2

    get_usage_logger().info(
        f"summation mode={args.mode} group_by={query.group_by.value} "
        f"period={query.period.value if query.period else None}"
    )
    use_case = build_summation_use_case()
    summaries = use_case.execute(query, args.mode)

    if args.json:
        print(json.dumps(serialize_summaries(summaries), indent=2))
        return 0

    print(f"Summation ({args.mode}, grouped by {query.group_by.value})")
    if not summaries:
        print("No transactions in the selected range.")
    for summary in summaries:
        print(
            f"{summary.period}: total={summary.total}, "
            f"count={summary.count}, "
            f"from={summary.start_date.isoformat()}, "
            f"to={summary.end_date.isoformat()}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
