from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Final

from unitstat.systemd.errors import UnknownStateError
from unitstat.systemd.types import (
    NULL_STATE,
    UnitActiveState,
    UnitField,
    UnitFileState,
    UnitLoadState,
)

NULL_CODE: Final[int] = 10
NULL_SUB_CODE: Final[int] = 0x00ff


class StateCodeTable(Mapping[str, int]):
    """Read-only mapping from systemd state strings to integer codes.

    Every table carries the 'null' sentinel and is a bijection, so codes
    can be mapped back to the state they came from.
    """

    def __init__(self, field: UnitField, codes: Mapping[str, int]) -> None:
        if NULL_STATE not in codes:
            raise ValueError(f'{field} table has no {NULL_STATE!r} entry')

        reverse = {code: state for state, code in codes.items()}
        if len(reverse) != len(codes):
            raise ValueError(f'{field} table maps two states to one code')

        self._field = field
        self._codes = MappingProxyType(dict(codes))
        self._states = MappingProxyType(reverse)

    @property
    def field(self) -> UnitField:
        return self._field

    @property
    def null_code(self) -> int:
        """Code of the 'null' sentinel.
        """
        return self._codes[NULL_STATE]

    def __getitem__(self, key: str) -> int:
        return self._codes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f'StateCodeTable({self._field.value!r}, {len(self)} states)'

    def lookup(self, key: str) -> tuple[int, bool]:
        """Look up a state string.

        Args:
            key: State as printed by systemctl

        Returns:
            Tuple of (code, found). A miss returns the sentinel code with
            found set to False; the caller decides whether that is fatal.
        """
        code = self._codes.get(key)
        if code is None:
            return self.null_code, False
        return code, True

    def code(self, key: str, line: str = '', name: str | None = None) -> int:
        """Resolve a state string, raising on unknown vocabulary.

        Raises:
            UnknownStateError: If the state is not in the table
        """
        code, found = self.lookup(key)
        if not found:
            raise UnknownStateError(self._field, key, line=line, name=name)
        return code

    def state(self, code: int) -> str:
        """Map a code back to its state string.

        Raises:
            KeyError: If no state has this code
        """
        return self._states[code]


LOAD_CODES: Final = StateCodeTable(
    UnitField.LOAD,
    {
        UnitLoadState.LOADED: 0,
        UnitLoadState.STUB: 1,
        UnitLoadState.NOT_FOUND: 2,
        UnitLoadState.BAD_SETTING: 3,
        UnitLoadState.ERROR: 4,
        UnitLoadState.MERGED: 5,
        UnitLoadState.MASKED: 6,
        NULL_STATE: NULL_CODE,
    },
)

ACTIVE_CODES: Final = StateCodeTable(
    UnitField.ACTIVE,
    {
        UnitActiveState.ACTIVE: 0,
        UnitActiveState.RELOADING: 1,
        UnitActiveState.INACTIVE: 2,
        UnitActiveState.FAILED: 3,
        UnitActiveState.ACTIVATING: 4,
        UnitActiveState.DEACTIVATING: 5,
        NULL_STATE: NULL_CODE,
    },
)

FILE_STATE_CODES: Final = StateCodeTable(
    UnitField.STATE,
    {
        UnitFileState.DISABLED: 0,
        UnitFileState.ENABLED: 1,
        UnitFileState.ENABLED_RUNTIME: 2,
        UnitFileState.GENERATED: 3,
        UnitFileState.INDIRECT: 4,
        UnitFileState.MASKED: 5,
        UnitFileState.STATIC: 6,
        UnitFileState.TRANSIENT: 7,
        NULL_STATE: NULL_CODE,
    },
)

# Sub states follow systemd's per unit type state tables, each type owning
# a block of 16 codes. Strings already claimed by an earlier block are not
# repeated, which leaves the path (0x0040) and target (0x0090) blocks empty.
SUB_CODES: Final = StateCodeTable(
    UnitField.SUB,
    {
        # service, 0x0000
        'running': 0x0000,
        'dead': 0x0001,
        'start-pre': 0x0002,
        'start': 0x0003,
        'exited': 0x0004,
        'reload': 0x0005,
        'stop': 0x0006,
        'stop-watchdog': 0x0007,
        'stop-sigterm': 0x0008,
        'stop-sigkill': 0x0009,
        'stop-post': 0x000a,
        'final-sigterm': 0x000b,
        'failed': 0x000c,
        'auto-restart': 0x000d,
        # automount, 0x0010
        'waiting': 0x0010,
        # device, 0x0020
        'tentative': 0x0020,
        'plugged': 0x0021,
        # mount, 0x0030
        'mounting': 0x0030,
        'mounting-done': 0x0031,
        'mounted': 0x0032,
        'remounting': 0x0033,
        'unmounting': 0x0034,
        'remounting-sigterm': 0x0035,
        'remounting-sigkill': 0x0036,
        'unmounting-sigterm': 0x0037,
        'unmounting-sigkill': 0x0038,
        # scope, 0x0050
        'abandoned': 0x0050,
        # slice, 0x0060
        'active': 0x0060,
        # socket, 0x0070
        'start-chown': 0x0070,
        'start-post': 0x0071,
        'listening': 0x0072,
        'stop-pre': 0x0073,
        'stop-pre-sigterm': 0x0074,
        'stop-pre-sigkill': 0x0075,
        'final-sigkill': 0x0076,
        # swap, 0x0080
        'activating': 0x0080,
        'activating-done': 0x0081,
        'deactivating': 0x0082,
        'deactivating-sigterm': 0x0083,
        'deactivating-sigkill': 0x0084,
        # timer, 0x00a0
        'elapsed': 0x00a0,
        NULL_STATE: NULL_SUB_CODE,
    },
)

CODE_TABLES: Final[Mapping[UnitField, StateCodeTable]] = MappingProxyType({
    table.field: table
    for table in (LOAD_CODES, ACTIVE_CODES, SUB_CODES, FILE_STATE_CODES)
})
