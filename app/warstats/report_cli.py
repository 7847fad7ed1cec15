import argparse
import json
import logging

from warstats.config import load_api_config, load_config
from warstats.log import configure_logging
from warstats.models.result import ReportFailure
from warstats.services.report_common import REPORT_COLUMNS, build_report_rows, make_table
from warstats.services.report_service import generate_report

log = logging.getLogger("warstats.cli")


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print per-member stats for your faction's current ranked war.",
    )
    parser.add_argument(
        "--api-key",
        required=True,
        help="Torn API key; the report covers the key owner's faction.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print rows as JSON instead of a table.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)

    cfg = load_config()
    configure_logging(cfg)
    result = generate_report(args.api_key, config=load_api_config(cfg))
    if isinstance(result, ReportFailure):
        log.error("%s", result.message)
        return 1

    rows = build_report_rows(result.members)
    if args.json:
        print(json.dumps({"columns": REPORT_COLUMNS, "rows": rows}, indent=2))
    else:
        print(f"Faction {result.faction_id} / war {result.war_id}: {result.attack_count} attacks")
        print(make_table(REPORT_COLUMNS, rows, rank=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
