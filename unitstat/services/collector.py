import logging
from datetime import datetime, timezone

from unitstat.models import CollectorConfig
from unitstat.system.runner import SystemctlRunner
from unitstat.systemd.errors import UnitParseError
from unitstat.systemd.interfaces import Accumulator, CommandRunner
from unitstat.systemd.models import UnitFileIndex
from unitstat.systemd.parsers import UnitFileParser, UnitStatusParser
from unitstat.systemd.reconciler import UnitReconciler
from unitstat.systemd.types import MEASUREMENT, SystemctlCommand


class SystemdUnitsCollector:
    """Collects the state of systemd units, one pass per gather call.

    A pass lists unit files first to build an enablement index, then
    lists units and emits one metric per unit whose states are all known.
    Nothing is kept between passes.
    """

    description = 'Gather systemd units state'

    def __init__(
        self,
        config: CollectorConfig | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize the collector.

        Args:
            config: Collector settings, defaults when omitted
            runner: Command runner, a SystemctlRunner when omitted
        """
        self._logger = logging.getLogger(__name__)
        self._config = config or CollectorConfig()
        self._runner = runner or SystemctlRunner()
        self._file_parser = UnitFileParser()
        self._status_parser = UnitStatusParser()

    @property
    def config(self) -> CollectorConfig:
        return self._config

    def gather(self, accumulator: Accumulator) -> int:
        """Run one collection pass.

        Args:
            accumulator: Sink for metrics and per-line errors

        Returns:
            Number of metrics emitted

        Raises:
            SystemctlError: If either systemctl invocation fails
        """
        file_index = self._load_file_index(accumulator)

        output = self._run(SystemctlCommand.LIST_UNITS)
        reconciler = UnitReconciler(file_index, self._status_parser)

        emitted = 0
        skipped = 0
        for outcome in reconciler.reconcile_lines(output.splitlines()):
            if isinstance(outcome, UnitParseError):
                accumulator.add_error(outcome)
                skipped += 1
                continue

            accumulator.add_fields(
                MEASUREMENT,
                outcome.fields(),
                outcome.tags(),
                datetime.now(timezone.utc),
            )
            emitted += 1

        self._logger.debug(
            'Gathered %d %s units, skipped %d lines',
            emitted,
            self._config.unit_type,
            skipped,
        )
        return emitted

    def _load_file_index(self, accumulator: Accumulator) -> UnitFileIndex:
        output = self._run(SystemctlCommand.LIST_UNIT_FILES)
        return self._file_parser.build_index(
            output.splitlines(),
            accumulator.add_error,
        )

    def _run(self, command: SystemctlCommand) -> str:
        return self._runner.run(
            command,
            self._config.unit_type,
            self._config.timeout,
        )
