class SystemctlError(RuntimeError):
    """Raised when a systemctl invocation fails as a whole.

    Covers a missing binary, a timeout and a non-zero exit status. Any of
    these aborts the current collection pass.
    """

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f'error running {command}: {reason}')
        self.command = command
        self.reason = reason


class UnitParseError(ValueError):
    """Base class for errors affecting a single line of systemctl output.
    """

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.line = line


class MalformedLineError(UnitParseError):
    """A line had fewer whitespace separated fields than required.
    """

    def __init__(self, line: str, expected: int) -> None:
        super().__init__(
            f'Error parsing line (expected at least {expected} fields): '
            f'{line}',
            line,
        )
        self.expected = expected


class UnknownStateError(UnitParseError):
    """A state value is missing from the relevant code table.
    """

    def __init__(
        self,
        field: str,
        value: str,
        line: str = '',
        name: str | None = None,
    ) -> None:
        if name:
            message = (
                f"Error parsing field '{field}' of {name}, "
                f'value not in map: {value}'
            )
        else:
            message = (
                f"Error parsing field '{field}', value not in map: {value}"
            )
        super().__init__(message, line)
        self.field = field
        self.value = value
        self.name = name
