# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

import pytest
from _pytest.config import Config
from _pytest.reports import TestReport
from flacinfo.util.logging import _logs

LOG_JOINER = "\n\t"


@pytest.hookimpl(hookwrapper=True)
def pytest_report_teststatus(report: TestReport, config: Config):
    """Spits out relevant logs only if a test fails."""
    yield
    if report.failed:
        msg = (f"\nERROR: failed {report.nodeid}:{LOG_JOINER}"
               + LOG_JOINER.join(_logs.get_content()))
        print(msg)
        return report.outcome, ".", msg
    # Each test should clear the logs. This won't work well if parallelised
    _logs.clear()
    return None


def pytest_configure(config: Config):
    config.addinivalue_line("markers", "quality: checks of the source files")
