import logging
from collections.abc import Callable, Iterable, Iterator

from unitstat.systemd.codes import ACTIVE_CODES, LOAD_CODES, SUB_CODES
from unitstat.systemd.errors import (
    MalformedLineError,
    UnitParseError,
    UnknownStateError,
)
from unitstat.systemd.models import (
    UnitFileEntry,
    UnitFileIndex,
    UnitFileOutcome,
    UnitStatus,
    UnitStatusOutcome,
)
from unitstat.systemd.types import NULL_STATE


class UnitFileParser:
    """Parser for `systemctl list-unit-files --no-legend` output.

    Each line holds the unit name followed by its enablement state. Any
    further columns (the vendor preset on newer systemd) are ignored.
    """

    MIN_FIELDS = 2

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def parse_line(self, line: str) -> UnitFileOutcome:
        """Parse a single line into an entry or the error describing it.
        """
        data = line.split()
        if len(data) < self.MIN_FIELDS:
            return MalformedLineError(line, self.MIN_FIELDS)

        return UnitFileEntry(name=data[0], enablement_state=data[1])

    def parse(self, lines: Iterable[str]) -> Iterator[UnitFileOutcome]:
        for line in lines:
            yield self.parse_line(line)

    def build_index(
        self,
        lines: Iterable[str],
        on_error: Callable[[UnitParseError], None],
    ) -> UnitFileIndex:
        """Build the enablement lookup, reporting malformed lines.

        Args:
            lines: Output lines of list-unit-files
            on_error: Called once for every skipped line

        Returns:
            UnitFileIndex of all well formed lines
        """
        entries = []
        for outcome in self.parse(lines):
            if isinstance(outcome, UnitParseError):
                on_error(outcome)
                continue
            entries.append(outcome)

        self._logger.debug('Indexed %d unit files', len(entries))
        return UnitFileIndex.from_entries(entries)


class UnitStatusParser:
    """Parser for `systemctl list-units --no-legend` output.

    The first four columns are unit, load, active and sub. The trailing
    description is ignored, as is the status marker systemctl puts in
    front of failed units when --plain is not given. Load, active and sub
    are only checked for membership in their code tables here; encoding
    is left to the reconciler.
    """

    MIN_FIELDS = 4
    STATUS_MARKERS = frozenset({'●', '*', '○'})

    def parse_line(self, line: str) -> UnitStatusOutcome:
        data = line.split()
        if data and data[0] in self.STATUS_MARKERS:
            data = data[1:]
        if len(data) < self.MIN_FIELDS:
            return MalformedLineError(line, self.MIN_FIELDS)

        name, load, active, sub = (
            value or NULL_STATE for value in data[:self.MIN_FIELDS]
        )

        for table, value in (
            (LOAD_CODES, load),
            (ACTIVE_CODES, active),
            (SUB_CODES, sub),
        ):
            if value not in table:
                return UnknownStateError(table.field, value, line=line)

        return UnitStatus(name=name, load=load, active=active, sub=sub)

    def parse(self, lines: Iterable[str]) -> Iterator[UnitStatusOutcome]:
        for line in lines:
            yield self.parse_line(line)
