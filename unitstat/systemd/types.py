from enum import StrEnum
from typing import Final

# Stand-in for an absent or blank systemctl column.
NULL_STATE: Final[str] = 'null'

MEASUREMENT: Final[str] = 'systemd_units'


class SystemctlCommand(StrEnum):
    """Systemctl subcommands used by a collection pass.
    """

    LIST_UNITS = 'list-units'
    LIST_UNIT_FILES = 'list-unit-files'


class UnitType(StrEnum):
    """Unit types accepted by systemctl --type.
    """

    SERVICE = 'service'
    SOCKET = 'socket'
    TARGET = 'target'
    DEVICE = 'device'
    MOUNT = 'mount'
    AUTOMOUNT = 'automount'
    SWAP = 'swap'
    TIMER = 'timer'
    PATH = 'path'
    SLICE = 'slice'
    SCOPE = 'scope'


class UnitLoadState(StrEnum):
    """Systemd unit load states.
    """

    LOADED = 'loaded'
    STUB = 'stub'
    NOT_FOUND = 'not-found'
    BAD_SETTING = 'bad-setting'
    ERROR = 'error'
    MERGED = 'merged'
    MASKED = 'masked'


class UnitActiveState(StrEnum):
    """Systemd unit active states.
    """

    ACTIVE = 'active'
    RELOADING = 'reloading'
    INACTIVE = 'inactive'
    FAILED = 'failed'
    ACTIVATING = 'activating'
    DEACTIVATING = 'deactivating'


class UnitFileState(StrEnum):
    """Systemd unit file enablement states as printed by list-unit-files.
    """

    DISABLED = 'disabled'
    ENABLED = 'enabled'
    ENABLED_RUNTIME = 'enabled-runtime'
    GENERATED = 'generated'
    INDIRECT = 'indirect'
    MASKED = 'masked'
    STATIC = 'static'
    TRANSIENT = 'transient'


class UnitField(StrEnum):
    """Names of the state columns, as used in error messages and tags.
    """

    LOAD = 'load'
    ACTIVE = 'active'
    SUB = 'sub'
    STATE = 'state'
