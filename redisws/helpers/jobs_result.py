from enum import Enum
from enum import auto

from redisws.errors.docker import DockerOperationError


class JobResult(Enum):
    GOOD = auto()
    BAD = auto()


class OperationError:
    def __init__(self, command: str, stdout: bytes, stderr: bytes):
        self.command = command
        self.stdout = stdout
        self.stderr = stderr

    @property
    def log(self) -> str:
        return (f'Stdout:\n{self.stdout.decode("utf-8", errors="replace")}\n\n'
                f'Stderr:\n{self.stderr.decode("utf-8", errors="replace")}')

    def __eq__(self, other):
        return other == JobResult.BAD

    def __repr__(self):
        return f'Operation `{self.command}` finished unsuccessful:\n{self.log}'


def raise_on_error(result: JobResult | OperationError) -> None:
    if isinstance(result, OperationError):
        raise DockerOperationError(result.command, result.log)
