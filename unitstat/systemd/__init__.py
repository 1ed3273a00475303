from unitstat.systemd.codes import (
    ACTIVE_CODES,
    CODE_TABLES,
    FILE_STATE_CODES,
    LOAD_CODES,
    SUB_CODES,
    StateCodeTable,
)
from unitstat.systemd.errors import (
    MalformedLineError,
    SystemctlError,
    UnitParseError,
    UnknownStateError,
)
from unitstat.systemd.interfaces import Accumulator, CommandRunner
from unitstat.systemd.models import (
    Metric,
    UnitFileEntry,
    UnitFileIndex,
    UnitRecord,
    UnitStatus,
)
from unitstat.systemd.parsers import UnitFileParser, UnitStatusParser
from unitstat.systemd.reconciler import UnitReconciler
from unitstat.systemd.types import (
    MEASUREMENT,
    NULL_STATE,
    SystemctlCommand,
    UnitActiveState,
    UnitField,
    UnitFileState,
    UnitLoadState,
    UnitType,
)

__all__ = [
    'ACTIVE_CODES',
    'CODE_TABLES',
    'FILE_STATE_CODES',
    'LOAD_CODES',
    'MEASUREMENT',
    'NULL_STATE',
    'SUB_CODES',
    'Accumulator',
    'CommandRunner',
    'MalformedLineError',
    'Metric',
    'StateCodeTable',
    'SystemctlCommand',
    'SystemctlError',
    'UnitActiveState',
    'UnitField',
    'UnitFileEntry',
    'UnitFileIndex',
    'UnitFileParser',
    'UnitFileState',
    'UnitLoadState',
    'UnitParseError',
    'UnitReconciler',
    'UnitRecord',
    'UnitStatus',
    'UnitStatusParser',
    'UnitType',
    'UnknownStateError',
]
