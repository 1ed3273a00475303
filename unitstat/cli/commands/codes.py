import click

from unitstat.models import SAMPLE_CONFIG
from unitstat.systemd import CODE_TABLES, StateCodeTable, UnitField


def format_code_table(table: StateCodeTable) -> str:
    """Format a code table sorted by code, codes shown in hex and decimal.
    """
    state_width = max(len('STATE'), max(len(state) for state in table))

    lines = [f'{"STATE":<{state_width}} {"CODE":>6} {"HEX":>6}']
    lines.append('-' * len(lines[0]))

    for state, code in sorted(table.items(), key=lambda item: item[1]):
        lines.append(f'{state:<{state_width}} {code:>6} {code:#06x}')

    return '\n'.join(lines)


@click.command('codes')
@click.option(
    '--table',
    'field',
    type=click.Choice([f.value for f in UnitField]),
    help='Only print the table for this column.',
)
def codes(field: str | None) -> None:
    """Print the state code tables used for the *_code fields.
    """
    fields = [UnitField(field)] if field else list(CODE_TABLES)

    sections = []
    for unit_field in fields:
        table = CODE_TABLES[unit_field]
        sections.append(f'{unit_field}_code\n{format_code_table(table)}')

    click.echo('\n\n'.join(sections))


@click.command('sample-config')
def sample_config() -> None:
    """Print a sample configuration file.
    """
    click.echo(SAMPLE_CONFIG, nl=False)
