from unitstat.cli import run_cli
from unitstat.config import setup_logger


def main() -> None:
    """The main entry point for the application.
    """
    setup_logger()
    run_cli()


if __name__ == '__main__':
    main()
