import logging
import shlex
import shutil
import subprocess

from unitstat.systemd.errors import SystemctlError
from unitstat.systemd.interfaces import CommandRunner
from unitstat.systemd.types import SystemctlCommand, UnitType


class SystemctlRunner(CommandRunner):
    """Runs systemctl listing commands as a subprocess.
    """

    def __init__(self, executable: str = 'systemctl') -> None:
        """Initialize the runner.

        Args:
            executable: Name or path of the systemctl binary
        """
        self._logger = logging.getLogger(__name__)
        self._executable = executable

    def build_args(
        self,
        path: str,
        command: SystemctlCommand,
        unit_type: UnitType,
    ) -> list[str]:
        """Build the argument vector, legend and status markers suppressed.
        """
        return [
            path,
            command,
            '--all',
            f'--type={unit_type}',
            '--no-legend',
            '--plain',
        ]

    def run(
        self,
        command: SystemctlCommand,
        unit_type: UnitType,
        timeout: float,
    ) -> str:
        """Run a listing command and return its standard output.

        Raises:
            SystemctlError: If systemctl is missing, times out or fails
        """
        path = shutil.which(self._executable)
        if path is None:
            raise SystemctlError(
                self._executable,
                'executable file not found in $PATH',
            )

        args = self.build_args(path, command, unit_type)
        cmd_line = shlex.join(args)
        self._logger.debug('Running %s with timeout %ss', cmd_line, timeout)

        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=timeout,
                check=True,
            )
        except subprocess.TimeoutExpired:
            raise SystemctlError(cmd_line, f'timed out after {timeout}s')
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or '').strip()
            reason = f'exit status {e.returncode}'
            if stderr:
                reason = f'{reason}: {stderr}'
            raise SystemctlError(cmd_line, reason)
        except OSError as e:
            raise SystemctlError(cmd_line, str(e))

        return result.stdout
