from __future__ import annotations

import json

from pytpms._tools.decode import decode_report
from pytpms.config import TpmsConfig


def test_decode_report() -> None:
    report = decode_report("T01=25/30,10 T02=28/30,90 TX=5", TpmsConfig(high_temperature_c=80.0))

    assert report["tiresPerAxle"] == 4
    assert report["records"][0] == {
        "tireIndex": 1,
        "actualPressure": 25.0,
        "preferredPressure": 30.0,
        "temperature": 10.0,
        "axleIndex": 0,
        "axleTireIndex": 1,
    }
    assert report["canonical"] == "T00-1=25.0/30.0,10.0 T00-2=28.0/30.0,90.0"
    assert report["alerts"] == {"lowPressure": [1], "highPressure": [], "highTemperature": [2]}
    assert report["skipped"] == [{"fragment": "TX=5", "reason": "unparseable_key", "tireIndex": None}]
    json.dumps(report)


def test_decode_report_flat_keys_and_layout() -> None:
    config = TpmsConfig(tires_per_axle=2, per_axle_keys=False, temperature_only=True)
    report = decode_report("41,42,43", config)

    assert report["tiresPerAxle"] == 2
    assert [r["temperature"] for r in report["records"]] == [41.0, 42.0, 43.0]
    assert report["records"][2]["axleIndex"] == 1
    assert report["canonical"] == "T00=,41.0 T01=,42.0 T02=,43.0"
    assert report["skipped"] == []
