import pytest

from corogen.generator import getsuspensions


@pytest.fixture(autouse=True)
def no_leaked_suspensions():
    # every invocation pops its own record, whichever way it ends
    suspensions = getsuspensions()
    assert len(suspensions) == 0
    yield suspensions
    leaked = list(suspensions.records)
    del suspensions.records[:]
    assert leaked == []
