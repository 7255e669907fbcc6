from datetime import timedelta
from unittest import mock

import pytest

from tgv.ucsc import UcscHost


def test_us_url():
    assert UcscHost.US.url() == "genome-mysql.soe.ucsc.edu"


def test_eu_url():
    assert UcscHost.EU.url() == "genome-euro-mysql.soe.ucsc.edu"


@pytest.mark.parametrize(
    "hours,expected",
    [
        (-12, UcscHost.US),
        (-5, UcscHost.US),
        (0, UcscHost.US),
        (-3.5, UcscHost.US),
        (-12.5, UcscHost.US),
        (0.5, UcscHost.US),
        (1, UcscHost.EU),
        (5.5, UcscHost.EU),
        (9, UcscHost.EU),
    ],
)
def test_auto_by_offset(hours, expected):
    with mock.patch("tgv.ucsc.datetime") as fake:
        fake.now.return_value.astimezone.return_value.utcoffset.return_value = (
            timedelta(hours=hours)
        )
        assert UcscHost.auto() is expected