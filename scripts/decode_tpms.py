#!/usr/bin/env python3
"""Decode a compact tire telemetry string and show what was understood.

Usage
-----
    python scripts/decode_tpms.py "T01=25/30,10 T02=27/30"
    python scripts/decode_tpms.py --tires-per-axle 2 --json "25,27,30"
    python scripts/decode_tpms.py --temp-only "T00=41 T01=43"

Thresholds not given on the command line are read from ``TPMS_*``
environment variables.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pytpms import TpmsConfig, TpmsConfigError  # noqa: E402
from pytpms._tools.decode import decode_report  # noqa: E402


def _print_report(report: dict[str, Any]) -> None:
    print(f"tires per axle: {report['tiresPerAxle']}")
    print(f"records ({len(report['records'])}):")
    for record in report["records"]:
        fields = ", ".join(f"{k}={v}" for k, v in record.items() if k != "tireIndex")
        print(f"  #{record.get('tireIndex')}: {fields}")
    print(f"canonical: {report['canonical'] or '<empty>'}")
    alerts = report["alerts"]
    print(f"low pressure:     {alerts.get('lowPressure') or '-'}")
    print(f"high pressure:    {alerts.get('highPressure') or '-'}")
    print(f"high temperature: {alerts.get('highTemperature') or '-'}")
    if report["skipped"]:
        print("skipped:")
        for item in report["skipped"]:
            print(f"  {item['fragment']!r}: {item['reason']}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("text", help="telemetry string to decode")
    parser.add_argument("--tires-per-axle", type=int, default=None)
    parser.add_argument("--temp-only", action="store_true", help="single values are temperatures")
    parser.add_argument("--flat-keys", action="store_true", help="encode keys as Tnn instead of Taa-p")
    parser.add_argument("--json", action="store_true", help="machine-readable output")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    overrides: dict[str, Any] = {}
    if args.tires_per_axle is not None:
        overrides["tires_per_axle"] = args.tires_per_axle
    if args.temp_only:
        overrides["temperature_only"] = True
    if args.flat_keys:
        overrides["per_axle_keys"] = False
    try:
        config = TpmsConfig.from_env(**overrides)
    except TpmsConfigError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 2

    report = decode_report(args.text, config)
    if args.json:
        print(json.dumps(report, indent=2))
    else:
        _print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
