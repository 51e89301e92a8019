"""Command-line CNP validator.

Usage:
    cnpcheck 1800101221144
    cnpcheck --no-future-dates --today 2024-01-31 5300101401232
    cnpcheck --details --json 1800101221144
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from typing import Optional, Sequence

from cnpcheck.clock import FixedClock, SystemClock
from cnpcheck.core.config import AppSettings
from cnpcheck.core.exceptions import InvalidCnpError
from cnpcheck.core.logging import setup_logging
from cnpcheck.core.protocols import IClock
from cnpcheck.services.validator_service import CnpValidatorService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cnpcheck",
        description="Validate Romanian personal numeric codes (CNP)",
    )
    parser.add_argument("cnp", nargs="+", help="One or more 13-digit codes")
    future = parser.add_mutually_exclusive_group()
    future.add_argument(
        "--allow-future-dates",
        dest="allow_future_dates",
        action="store_true",
        default=None,
        help="Accept codes whose birth date is after today",
    )
    future.add_argument(
        "--no-future-dates",
        dest="allow_future_dates",
        action="store_false",
        help="Reject codes whose birth date is after today",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Reference date for the future-date rule (YYYY-MM-DD)",
    )
    parser.add_argument("--details", action="store_true", help="Print decoded fields of valid codes")
    parser.add_argument("--json", action="store_true", help="Emit one JSON object per code")
    return parser


def _report(
    service: CnpValidatorService,
    cnp: str,
    allow_future_dates: Optional[bool],
    details: bool,
    as_json: bool,
) -> bool:
    """Print the result for one code and return whether it was valid."""
    if details:
        try:
            decoded = service.details(cnp, allow_future_dates)
        except InvalidCnpError as exc:
            if as_json:
                print(json.dumps({"cnp": cnp, "valid": False, "reason": str(exc.reason)}))
            else:
                print(f"{cnp}: invalid ({exc.reason})")
            return False
        if as_json:
            print(json.dumps({"valid": True, **decoded.model_dump(mode="json")}, ensure_ascii=False))
        else:
            sex = decoded.sex or "unspecified"
            print(
                f"{cnp}: valid, born {decoded.birth_date.isoformat()}, sex {sex}, "
                f"county {decoded.county_code} ({decoded.county_name}), serial {decoded.serial}"
            )
        return True

    outcome = service.check(cnp, allow_future_dates)
    if as_json:
        print(json.dumps({"cnp": cnp, **outcome.model_dump(mode="json")}))
    elif outcome.valid:
        print(f"{cnp}: valid")
    else:
        print(f"{cnp}: invalid ({outcome.reason})")
    return outcome.valid


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)

    clock: IClock = FixedClock(args.today) if args.today else SystemClock()
    service = CnpValidatorService(settings=settings, clock=clock)

    results = [
        _report(service, cnp, args.allow_future_dates, args.details, args.json)
        for cnp in args.cnp
    ]
    logger.debug("Checked %d code(s), %d valid", len(results), sum(results))
    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
