import re
import tomllib
from pathlib import Path
from typing import Any, Final, Self

from pydantic import BaseModel, Field, field_validator

from unitstat.systemd.types import UnitType

DEFAULT_TIMEOUT: Final[float] = 1.0

SAMPLE_CONFIG: Final[str] = '''\
[inputs.systemd_units]
  ## Set timeout for systemctl execution
  # timeout = "1s"
  #
  ## Filter for a specific unit type, default is "service", other possible
  ## values are "socket", "target", "device", "mount", "automount", "swap",
  ## "timer", "path", "slice" and "scope":
  # unittype = "service"
'''

_DURATION_RE = re.compile(r'(\d+(?:\.\d+)?)(ns|us|µs|ms|s|m|h)')
_DURATION_UNITS = {
    'ns': 1e-9,
    'us': 1e-6,
    'µs': 1e-6,
    'ms': 1e-3,
    's': 1.0,
    'm': 60.0,
    'h': 3600.0,
}


def parse_duration(value: str) -> float:
    """Parse a duration such as "1s", "500ms" or "1m30s" into seconds.

    Raises:
        ValueError: If the string is not a valid duration
    """
    text = value.strip()
    if not text:
        raise ValueError('empty duration')

    position = 0
    seconds = 0.0
    for match in _DURATION_RE.finditer(text):
        if match.start() != position:
            break
        number, unit = match.groups()
        seconds += float(number) * _DURATION_UNITS[unit]
        position = match.end()

    if position != len(text):
        raise ValueError(f'invalid duration: {value!r}')

    return seconds


class CollectorConfig(BaseModel):
    """Settings of the systemd units collector.

    Args:
        timeout: Time limit for each systemctl invocation, in seconds
        unit_type: Unit type passed to systemctl --type
    """
    model_config = {'frozen': True, 'populate_by_name': True}

    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    unit_type: UnitType = Field(UnitType.SERVICE, alias='unittype')

    @field_validator('timeout', mode='before')
    @classmethod
    def validate_timeout(cls, v: Any) -> Any:
        if isinstance(v, str):
            try:
                return float(v)
            except ValueError:
                return parse_duration(v)
        return v

    @classmethod
    def from_toml(cls, path: Path) -> Self:
        """Load settings from a TOML file.

        Keys may sit at the top level or under [inputs.systemd_units].

        Raises:
            OSError: If the file cannot be read
            tomllib.TOMLDecodeError: If the file is not valid TOML
            pydantic.ValidationError: If a value is invalid
        """
        with open(path, 'rb') as f:
            data = tomllib.load(f)

        section = data.get('inputs', {}).get('systemd_units', data)
        # [[inputs.systemd_units]] declares an array of tables
        if isinstance(section, list):
            section = section[0] if section else {}
        return cls.model_validate(section)
