"""Shared fixtures: a small Central/North American dataset on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

STATE_NAMES = """statenum\tstateid\tcountryname\tstart\tend
2\tUSA\tUnited States\t1816-01-01\t2020-12-31
20\tCAN\tCanada\t1920-01-10\t2020-12-31
70\tMEX\tMexico\t1821-01-01\t2020-12-31
90\tGUA\tGuatemala\t1840-04-17\t2020-12-31
91\tHON\tHonduras\t1899-01-01\t2020-12-31
92\tSAL\tEl Salvador\t1875-01-01\t2020-12-31
broken line without tabs
"""

BORDERS = """USA = CAN 8,893 km; MEX 3,111 km
CAN = USA 8,893 km
MEX = USA 3,111 km; GUA 958 km
GUA = MEX 958 km; HON 256 km; SAL 203 km
HON = GUA 256 km; SAL 342 km
SAL = GUA 203 km; HON 342 km
this line has no separator
"""

CAPDIST = """numa,ida,numb,idb,kmdist,midist
2,USA,20,CAN,734,456
2,USA,70,MEX,3024,1879
70,MEX,90,GUA,1049,652
90,GUA,91,HON,221,137
90,GUA,92,SAL,178,111
91,HON,92,SAL,165,103
2,USA,92,SAL,3300,2051
2,USA,91,HON
2,USA,91,HON,far,1
"""


@pytest.fixture
def dataset(tmp_path: Path) -> dict[str, Path]:
    paths = {
        "borders": tmp_path / "borders.txt",
        "capdist": tmp_path / "capdist.csv",
        "state_names": tmp_path / "state_name.tsv",
    }
    paths["borders"].write_text(BORDERS, encoding="utf-8")
    paths["capdist"].write_text(CAPDIST, encoding="utf-8")
    paths["state_names"].write_text(STATE_NAMES, encoding="utf-8")
    return paths


@pytest.fixture
def dataset_args(dataset: dict[str, Path]) -> list[str]:
    return [
        "--borders",
        str(dataset["borders"]),
        "--capdist",
        str(dataset["capdist"]),
        "--state-names",
        str(dataset["state_names"]),
    ]
