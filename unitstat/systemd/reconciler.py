from collections.abc import Iterable, Iterator

from unitstat.systemd.codes import (
    ACTIVE_CODES,
    FILE_STATE_CODES,
    LOAD_CODES,
    SUB_CODES,
)
from unitstat.systemd.errors import UnitParseError
from unitstat.systemd.models import (
    UnitFileIndex,
    UnitRecord,
    UnitRecordOutcome,
    UnitStatus,
    UnitStatusOutcome,
)
from unitstat.systemd.parsers import UnitStatusParser
from unitstat.systemd.types import NULL_STATE


class UnitReconciler:
    """Joins unit statuses onto the unit file index of the same pass.

    Only units seen by list-units produce records. A unit without a unit
    file entry (transient and generated units, for instance) is reported
    with the 'null' enablement state rather than as an error.
    """

    def __init__(
        self,
        file_index: UnitFileIndex,
        status_parser: UnitStatusParser | None = None,
    ) -> None:
        """Initialize with the file index built earlier in the pass.
        """
        self._file_index = file_index
        self._status_parser = status_parser or UnitStatusParser()

    def reconcile(
        self,
        status: UnitStatus,
        line: str = '',
    ) -> UnitRecordOutcome:
        """Encode one unit status, enriched with its enablement state.

        Args:
            status: Parsed list-units entry
            line: Source line, kept on errors for reporting

        Returns:
            UnitRecord, or UnknownStateError if the enablement state or
            one of the status values has no code
        """
        enablement_state = self._file_index.get(status.name)
        if enablement_state is None:
            enablement_state = NULL_STATE

        try:
            load_code = LOAD_CODES.code(status.load, line=line)
            active_code = ACTIVE_CODES.code(status.active, line=line)
            sub_code = SUB_CODES.code(status.sub, line=line)
            state_code = FILE_STATE_CODES.code(
                enablement_state,
                line=line,
                name=status.name,
            )
        except UnitParseError as e:
            return e

        return UnitRecord(
            name=status.name,
            enablement_state=enablement_state,
            load=status.load,
            active=status.active,
            sub=status.sub,
            load_code=load_code,
            active_code=active_code,
            sub_code=sub_code,
            state_code=state_code,
        )

    def reconcile_line(self, line: str) -> UnitRecordOutcome:
        """Parse and encode a single list-units line.
        """
        outcome: UnitStatusOutcome = self._status_parser.parse_line(line)
        if isinstance(outcome, UnitParseError):
            return outcome
        return self.reconcile(outcome, line=line)

    def reconcile_lines(
        self,
        lines: Iterable[str],
    ) -> Iterator[UnitRecordOutcome]:
        """Yield one outcome per list-units line, in input order.
        """
        for line in lines:
            yield self.reconcile_line(line)
