import pytest

from igo_study.utils.debugger import Debugger


@pytest.fixture(autouse=True)
def debugger_disabled():
    Debugger.disable()
    yield
    Debugger.disable()
