"""CLI for computing an amortization schedule locally.

Usage:
    python -m src.cli 300000 --down 60000 --rate 6 --years 30
    python -m src.cli 300000 --down 60000 --rate 6 --years 30 --extra 500 --rows 24
    python -m src.cli 120000 --rate 0 --years 10 --yearly
"""

import argparse
import sys

from src.config import configure_logging, settings
from src.engine.amortization import calculate, yearly_summary
from src.engine.errors import ValidationError


def print_summary(result) -> None:
    print(f"\n{'=' * 60}")
    print(f"  Loan Summary: {result.inputs.years} years at {result.inputs.annual_rate}%")
    print(f"{'=' * 60}")
    print(f"  Principal:           ${result.principal:,.2f}")
    print(f"  Monthly Payment:     ${result.base_payment:,.2f}")
    print(f"  With Extra:          ${result.scheduled_payment:,.2f}")
    print(f"  Months to Payoff:    {result.months_to_payoff} (planned {result.planned_payments})")
    print(f"  Total Interest:      ${result.total_interest:,.2f}")
    print(f"  Total Paid:          ${result.total_payment:,.2f}")
    if not result.paid_off:
        print("  Warning:             schedule stopped before the balance reached zero")
    print()


def print_schedule(schedule, rows: int | None) -> None:
    shown = schedule if rows is None else schedule[:rows]
    print(f"  {'Month':>5}  {'Payment':>12}  {'Principal':>12}  {'Interest':>12}  {'Balance':>14}")
    for e in shown:
        print(
            f"  {e.month:>5}  {e.payment:>12,.2f}  {e.principal:>12,.2f}"
            f"  {e.interest:>12,.2f}  {e.balance:>14,.2f}"
        )
    if len(shown) < len(schedule):
        print(f"  ... {len(schedule) - len(shown)} more months (use --all)")
    print()


def print_yearly(schedule) -> None:
    print(f"  {'Year':>4}  {'Paid':>12}  {'Principal':>12}  {'Interest':>12}  {'Balance':>14}")
    for y in yearly_summary(schedule):
        print(
            f"  {y['year']:>4}  {y['payment']:>12,.2f}  {y['principal']:>12,.2f}"
            f"  {y['interest']:>12,.2f}  {y['ending_balance']:>14,.2f}"
        )
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fixed-rate amortization schedule")
    parser.add_argument("price", help="Purchase price")
    parser.add_argument("--down", default="0", help="Down payment (default: 0)")
    parser.add_argument("--rate", required=True, help="Annual interest rate in percent, e.g. 6.5")
    parser.add_argument("--years", default="30", help="Loan term in years (default: 30)")
    parser.add_argument("--extra", default="0", help="Extra principal paid every month (default: 0)")
    parser.add_argument("--rows", type=int, default=12, help="Schedule rows to print (default: 12)")
    parser.add_argument("--all", action="store_true", help="Print every schedule row")
    parser.add_argument("--yearly", action="store_true", help="Print a per-year roll-up instead of months")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        result = calculate(
            {
                "price": args.price,
                "downPayment": args.down,
                "annualRate": args.rate,
                "years": args.years,
                "extraMonthly": args.extra,
            },
            safety_months=settings.safety_months,
        )
    except ValidationError as e:
        for detail in e.details:
            print(f"error: {detail}", file=sys.stderr)
        return 2

    print_summary(result)
    if args.yearly:
        print_yearly(result.schedule)
    else:
        print_schedule(result.schedule, None if args.all else args.rows)
    return 0


if __name__ == "__main__":
    sys.exit(main())
