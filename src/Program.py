import sys
import argparse

from calc.report import build_report
from calc.tradeoff_cards import TradeoffCardCatalog
from logging_config import configure_logging
from model.SalaryInput import SalaryInput, InvalidSalaryError, PAY_FREQUENCIES
from profiles import load_profile
from render.renderers import RENDERER_REGISTRY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Paycheck and take-home planning calculator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  Paycheck       Print the per-paycheck tax and benefit breakdown (default)
  Projections    Print month-by-month gross, net and cumulative net pay
  AnnualSummary  Print annualized earnings and tax rate
  Tradeoffs      Print lifestyle scenario comparisons against current pay
  Expenses       Print savings accumulation after monthly expenses
  TradeoffCards  Print two-option lifestyle cards scaled to the salary
  All            Print every section except the cards

Examples:
  python src/Program.py example
  python src/Program.py example --mode Projections --months 6
  python src/Program.py --salary 60000 --frequency monthly --state Texas
  python src/Program.py --salary 52000 --frequency other --periods 13 --mode AnnualSummary
        """
    )
    parser.add_argument('profile_name', nargs='?', help='Name of the profile (folder in input-parameters)')
    parser.add_argument('--mode', '-m',
                        choices=list(RENDERER_REGISTRY.keys()),
                        default='Paycheck',
                        help='Output mode (default: Paycheck)')
    parser.add_argument('--salary', type=float, help='Annual salary (instead of a profile)')
    parser.add_argument('--frequency', choices=PAY_FREQUENCIES, default='monthly',
                        help='Pay frequency when using --salary')
    parser.add_argument('--state', default='', help='Full state name when using --salary')
    parser.add_argument('--periods', type=float, help='Custom pay periods per year')
    parser.add_argument('--months', type=int, help='Months to project (default: profile value or 12)')
    parser.add_argument('--expenses', type=float, help='Recurring monthly expenses')
    parser.add_argument('--start-month', type=int, help='Calendar month (1-12) of the first projected month')
    parser.add_argument('--log-level', help='Diagnostic log level written to stderr (default: WARNING)')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    months = 12
    monthly_expenses = 0.0
    if args.salary is not None:
        salary_input = SalaryInput(
            annual_salary=args.salary,
            pay_frequency=args.frequency,
            state=args.state,
            pay_periods_per_year=args.periods,
        )
    elif args.profile_name:
        try:
            profile = load_profile(args.profile_name)
        except FileNotFoundError as e:
            print(str(e))
            return 1
        except InvalidSalaryError as e:
            print(f"Invalid salary: {e}")
            return 2
        except ValueError as e:
            # Malformed profile.json
            print(f"Invalid profile '{args.profile_name}': {e}")
            return 2
        salary_input = profile.salary_input
        months = profile.months
        monthly_expenses = profile.monthly_expenses
    else:
        parser.error("profile_name is required (or use --salary for an ad-hoc estimate)")

    if args.months is not None:
        months = args.months
    if args.expenses is not None:
        monthly_expenses = args.expenses

    cards = TradeoffCardCatalog.load() if args.mode == 'TradeoffCards' else None
    try:
        report = build_report(salary_input, months, monthly_expenses, args.start_month, cards=cards)
    except InvalidSalaryError as e:
        print(f"Invalid salary: {e}")
        return 2
    except ValueError as e:
        print(f"Invalid option: {e}")
        return 2

    renderer = RENDERER_REGISTRY[args.mode]()
    renderer.render(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
