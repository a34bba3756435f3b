from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import date

from .config import DEFAULT_COUNTRY
from .errors import CalendarInputError
from .formatting import fmt_days, format_date_range, holiday_type_label
from .holiday_calendar import duration_in_days, filter_non_weekend_holidays
from .intervals import DateRange, month_window
from .io_json import dump_status, load_case
from .models import CalendarCase
from .overrides import resolve_day_status, validate_exception
from .parsing import parse_date, parse_month
from .report import build_month_report, with_national_holidays
from .validation import validate_holiday, validate_policy
from .views import holidays_frame, status_frame

log = logging.getLogger("workday_calc")


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Working-day calculator: weekend policy, organization holidays and per-class exceptions."
    )
    ap.add_argument("--input", required=True, help="Path to input JSON (policy, holidays, exceptions).")
    ap.add_argument("--month", help="Month to report, YYYY-MM (default: month of --today).")
    ap.add_argument("--date", help="Resolve a single date (YYYY-MM-DD) instead of a month.")
    ap.add_argument("--class", dest="class_id", help="Class id; omit for organization-wide status.")
    ap.add_argument("--today", help="Reference date for upcoming holidays (default: system date).")
    ap.add_argument(
        "--country",
        default=os.environ.get("WORKDAY_CALC_COUNTRY"),
        help=f"Seed national holidays for this country code (e.g. {DEFAULT_COUNTRY}).",
    )
    ap.add_argument("--validate-exceptions", action="store_true", help="Validate every exception in the input.")
    ap.add_argument("--explain", action="store_true", help="Print explain/evidence JSON.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        case = load_case(args.input)
        today = parse_date(args.today) if args.today else date.today()
        if args.date:
            _print_day(case, parse_date(args.date), args.class_id, args.country)
            return
        year, month = parse_month(args.month) if args.month else (today.year, today.month)
        if args.country:
            case = _with_country(case, month_window(year, month), args.country)
    except CalendarInputError as e:
        log.error("%s", e)
        sys.exit(2)

    _warn_invalid_records(case)
    if args.validate_exceptions:
        _print_validation(case)

    # National holidays are already part of case.holidays here
    report = build_month_report(case, year, month, args.class_id, today)

    print(f"=== Working days {year:04d}-{month:02d} ===")
    print(f"Class: {args.class_id or 'all classes'}")
    print(f"Working days: {report.working_days}")
    print(f"Non-working days: {report.non_working_days}")
    print()
    print(status_frame(report.statuses).to_string(index=False))

    if report.upcoming:
        print("\n=== Upcoming holidays ===")
        for h in report.upcoming:
            span = format_date_range(h.start_date, h.end_date)
            print(f"{span}  {h.description}  [{holiday_type_label(h.type)}]  {fmt_days(duration_in_days(h))}")

    declared = filter_non_weekend_holidays(report.calendar)
    if declared:
        print("\n=== Holidays this month ===")
        print(holidays_frame(declared, today).to_string(index=False))

    if args.explain:
        print("\n=== Explain / Evidence ===")
        print(json.dumps(report.explain, ensure_ascii=False, indent=2))


def _with_country(case: CalendarCase, window: DateRange, country: str) -> CalendarCase:
    """Seed national holidays over the month and every exception date, once for the whole run."""
    dates = [window.start, window.end] + [e.date for e in case.exceptions if e.date is not None]
    holidays = with_national_holidays(case.holidays, min(dates), max(dates), country)
    return CalendarCase(policy=case.policy, holidays=holidays, exceptions=case.exceptions)


def _print_day(case, d: date, class_id, country) -> None:
    calendar = list(case.holidays)
    if country:
        calendar = with_national_holidays(calendar, d, d, country)
    status = resolve_day_status(d, class_id, calendar, case.exceptions, case.policy)
    print(json.dumps(dump_status(status), ensure_ascii=False, indent=2))


def _warn_invalid_records(case) -> None:
    if case.policy is not None:
        error = validate_policy(case.policy)
        if error is not None:
            log.warning("working day policy: %s", error.message)
    for h in case.holidays:
        error = validate_holiday(h)
        if error is not None:
            log.warning("holiday %s: %s", h.id, error.message)


def _print_validation(case) -> None:
    print("=== Exception validation ===")
    for exc in case.exceptions:
        error = validate_exception(exc, case.holidays, case.policy)
        if error is None:
            print(f"{exc.id}: ok")
        else:
            print(f"{exc.id}: {error.code} ({error.field}) {error.message}")
    print()


if __name__ == "__main__":
    main()
