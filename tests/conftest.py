import logging

import pytest


IDEAL_POINTS = (
    "ccode\tCountryName\tCountryAbb\tsession\tIdealpoint\n"
    "2\tUnited States\tUSA\t5\t1.2\n"
    "20\tCanada\tCAN\t5\t0.8\n"
    "2\tUnited States of America\tUSA\t6\t1.3\n"
)

RAW_VOTES = (
    "rcid\tsession\tccode\tvote\n"
    "22.0\t5.0\t2.0\t1.0\n"
    "22.0\t5.0\t20.0\t3.0\n"
    "23.0\t5.0\t2.0\t2.0\n"
    "23.0\t5.0\t20.0\t1.0\n"
    "23.0\t5.0\t31.0\t1.0\n"
    "4.0\t6.0\t20.0\t8.0\n"
    "4.0\t6.0\t2.0\t7.0\n"
)

DESCRIPTION_ROWS = [
    ['rcid', 'session', 'unres', 'yes', 'no', 'abstain'],
    [22.0, 5.0, 'R/5/22', 1.0, 1.0, 0.0],
    [23.0, 5.0, 'R/5/23', 1.0, 0.0, 1.0],
]


@pytest.fixture
def logger():
    return logging.getLogger('UNRollCall.tests')


@pytest.fixture
def ideal_points_file(tmp_path):
    path = tmp_path / 'idealpoints.tab'
    path.write_text(IDEAL_POINTS)
    return path


@pytest.fixture
def raw_votes_file(tmp_path):
    path = tmp_path / 'rawvotingdata13.tab'
    path.write_text(RAW_VOTES)
    return path


@pytest.fixture
def description_rows():
    return [list(row) for row in DESCRIPTION_ROWS]
