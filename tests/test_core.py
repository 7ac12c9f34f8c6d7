from cfdlab.core import ping


def test_ping_returns_one():
    assert ping() == 1