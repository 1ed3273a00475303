from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime

from unitstat.systemd.types import SystemctlCommand, UnitType


class CommandRunner(ABC):
    """Abstract interface for running systemctl listing commands.
    """

    @abstractmethod
    def run(
        self,
        command: SystemctlCommand,
        unit_type: UnitType,
        timeout: float,
    ) -> str:
        """Run a listing command and return its standard output.

        Implementations must suppress the legend lines and raise
        SystemctlError when the command cannot be run or times out.
        """


class Accumulator(ABC):
    """Abstract interface for the sink receiving collected metrics.
    """

    @abstractmethod
    def add_fields(
        self,
        measurement: str,
        fields: Mapping[str, int | float],
        tags: Mapping[str, str],
        timestamp: datetime,
    ) -> None:
        """Record one metric point.
        """

    @abstractmethod
    def add_error(self, error: Exception) -> None:
        """Record a non-fatal error.
        """
