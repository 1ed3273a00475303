import pytest

from unitstat.metrics import MemoryAccumulator
from unitstat.systemd import (
    CommandRunner,
    SystemctlCommand,
    SystemctlError,
    UnitType,
)

UNIT_FILES_OUTPUT = '''\
cron.service                 enabled         enabled
dbus.service                 static          -
foo.service                  enabled         enabled
getty@.service               enabled         enabled
rescue.service               static          -
ssh.service                  disabled        enabled
'''

UNITS_OUTPUT = '''\
cron.service          loaded    active   running Regular background program processing daemon
dbus.service          loaded    active   running D-Bus System Message Bus
foo.service           loaded    active   running Foo
rescue.service        loaded    inactive dead    Rescue Shell
ssh.service           loaded    inactive dead    OpenBSD Secure Shell server
user@1000.service     loaded    active   running User Manager for UID 1000
'''


class FakeRunner(CommandRunner):
    """Command runner returning canned output per subcommand.
    """

    def __init__(
        self,
        outputs: dict[SystemctlCommand, str] | None = None,
        failures: dict[SystemctlCommand, SystemctlError] | None = None,
    ) -> None:
        self.outputs = outputs or {}
        self.failures = failures or {}
        self.calls: list[tuple[SystemctlCommand, UnitType, float]] = []

    def run(
        self,
        command: SystemctlCommand,
        unit_type: UnitType,
        timeout: float,
    ) -> str:
        self.calls.append((command, unit_type, timeout))
        if command in self.failures:
            raise self.failures[command]
        return self.outputs.get(command, '')


def make_runner(unit_files: str = '', units: str = '') -> FakeRunner:
    return FakeRunner({
        SystemctlCommand.LIST_UNIT_FILES: unit_files,
        SystemctlCommand.LIST_UNITS: units,
    })


@pytest.fixture
def accumulator() -> MemoryAccumulator:
    return MemoryAccumulator()


@pytest.fixture
def runner() -> FakeRunner:
    return make_runner(UNIT_FILES_OUTPUT, UNITS_OUTPUT)
