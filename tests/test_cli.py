import logging

import pytest

from combolock import cli
from combolock import LockState


class FakeDriver:
    instances = []

    def __init__(self, lock):
        self.lock = lock
        self.ran = False
        FakeDriver.instances.append(self)

    def run(self):
        self.ran = True


@pytest.fixture
def fake_driver(monkeypatch):
    FakeDriver.instances = []
    monkeypatch.setattr(cli, "CommandDriver", FakeDriver)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    return FakeDriver


def test_defaults(fake_driver):
    assert cli.main([]) == 0

    driver = fake_driver.instances[0]
    assert driver.ran
    assert driver.lock.state is LockState.OPEN_UNLOCKED
    assert "(0, 0, 0)" in repr(driver.lock)


def test_combination(fake_driver):
    cli.main(["--combination", "4", "5", "-6"])

    lock = fake_driver.instances[0].lock
    lock.close()
    lock.lock()
    assert lock.unlock(4, 5, -6).accepted


def test_combination_out_of_range(fake_driver):
    with pytest.raises(SystemExit):
        cli.main(["--combination", "4", "5", "600"])

    assert fake_driver.instances == []


def test_combination_not_numeric(fake_driver):
    with pytest.raises(SystemExit):
        cli.main(["--combination", "4", "x", "6"])


def test_parser():
    args = cli.build_parser().parse_args(["-v", "--log-level", "INFO"])

    assert args.verbose
    assert args.log_level == "INFO"
    assert tuple(args.combination) == (0, 0, 0)
