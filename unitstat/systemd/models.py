from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Self

from pydantic import BaseModel, Field, field_validator

from unitstat.systemd.errors import UnitParseError
from unitstat.systemd.types import MEASUREMENT, NULL_STATE


class UnitFileEntry(BaseModel):
    """Unit file enablement state from one list-unit-files line.
    """
    model_config = {'frozen': True}

    name: str = Field(..., min_length=1, description='Unit name')
    enablement_state: str = Field(
        ...,
        min_length=1,
        description='Enablement state, e.g. enabled or static',
    )


class UnitStatus(BaseModel):
    """Runtime state of a unit from one list-units line.
    """
    model_config = {'frozen': True}

    name: str = Field(..., min_length=1, description='Unit name')
    load: str = Field(NULL_STATE, description='Load state')
    active: str = Field(NULL_STATE, description='Active state')
    sub: str = Field(NULL_STATE, description='Sub state')

    @field_validator('load', 'active', 'sub')
    @classmethod
    def blank_to_null(cls, v: str) -> str:
        return v or NULL_STATE


class UnitRecord(BaseModel):
    """Encoded state of a single unit, ready to be emitted as a metric.
    """
    model_config = {'frozen': True}

    name: str = Field(..., min_length=1, description='Unit name')
    enablement_state: str = Field(
        NULL_STATE,
        description='Enablement state, null when no unit file was listed',
    )
    load: str = Field(..., description='Load state')
    active: str = Field(..., description='Active state')
    sub: str = Field(..., description='Sub state')
    load_code: int = Field(..., ge=0)
    active_code: int = Field(..., ge=0)
    sub_code: int = Field(..., ge=0)
    state_code: int = Field(..., ge=0, description='Enablement state code')

    def tags(self) -> dict[str, str]:
        return {
            'name': self.name,
            'state': self.enablement_state,
            'load': self.load,
            'sub': self.sub,
        }

    def fields(self) -> dict[str, int]:
        return {
            'load_code': self.load_code,
            'active_code': self.active_code,
            'sub_code': self.sub_code,
            'state_code': self.state_code,
        }


class UnitFileIndex(BaseModel):
    """Immutable lookup of enablement state by unit name for one pass.

    Args:
        states: Mapping of unit name to enablement state
    """
    model_config = {'frozen': True}

    states: Mapping[str, str] = Field(
        default_factory=lambda: MappingProxyType({}),
    )

    @field_validator('states')
    @classmethod
    def freeze_states(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @classmethod
    def from_entries(cls, entries: list[UnitFileEntry]) -> Self:
        """Build the index, later entries winning on duplicate names.
        """
        return cls(
            states={entry.name: entry.enablement_state for entry in entries},
        )

    def get(self, name: str) -> str | None:
        return self.states.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.states

    def __len__(self) -> int:
        return len(self.states)


class Metric(BaseModel):
    """A single point handed to an accumulator.

    Args:
        measurement: Measurement name
        fields: Numeric field values
        tags: Tag values
        timestamp: Time of the observation
    """
    model_config = {'frozen': True}

    measurement: str = Field(MEASUREMENT, min_length=1)
    fields: dict[str, int | float] = Field(...)
    tags: dict[str, str] = Field(default_factory=dict)
    timestamp: datetime = Field(...)


# Outcome of handling one line: a value on success, the error otherwise.
UnitFileOutcome = UnitFileEntry | UnitParseError
UnitStatusOutcome = UnitStatus | UnitParseError
UnitRecordOutcome = UnitRecord | UnitParseError
