import asyncio
import json
import os
import re
import shlex
from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from dataclasses import field

from rich.text import Text
from rtry import retry

from redisws.core.config import Config
from redisws.core.utils.process_command_output import process_output_till_done
from redisws.helpers.jobs_result import JobResult
from redisws.helpers.jobs_result import OperationError
from redisws.helpers.jobs_result import raise_on_error
from redisws.output.console import CONSOLE
from redisws.output.styles import Style

RESTART_ALWAYS = 'always'


@dataclass
class ContainerSpec:
    name: str
    image: str
    restart: str = RESTART_ALWAYS
    env: dict[str, str] = field(default_factory=dict)
    volumes: list[str] = field(default_factory=list)

    def as_create_args(self) -> list[str]:
        args = ['create', '--name', self.name, '--restart', self.restart]
        for key, value in self.env.items():
            args += ['--env', f'{key}={value}']
        for volume in self.volumes:
            args += ['--volume', volume]
        return args + [self.image]


@dataclass
class ContainerState:
    running: bool
    status: str = ''

    @classmethod
    def from_json(cls, json_state: str) -> 'ContainerState':
        state = json.loads(json_state)
        return cls(
            running=bool(state.get('Running', False)),
            status=state.get('Status', ''),
        )


class Container(ABC):
    name: str

    @abstractmethod
    async def inspect(self) -> ContainerState:
        ...

    @abstractmethod
    async def start(self) -> None:
        ...


class DockerInterface(ABC):
    """
    Container engine operations used by redis services orchestration.

    Missing container or volume is not an error for lookups and removals.
    """

    @abstractmethod
    async def get_container(self, name: str) -> Container | None:
        ...

    @abstractmethod
    async def create_container(self, spec: ContainerSpec) -> Container:
        ...

    @abstractmethod
    async def remove_container(self, name: str) -> None:
        ...

    @abstractmethod
    async def pull_image(self, tag: str) -> None:
        ...

    @abstractmethod
    async def has_volume(self, name: str) -> bool:
        ...

    @abstractmethod
    async def rm_volume(self, name: str) -> None:
        ...


def exact_name_filter(name: str) -> str:
    return f'name=^/?{re.escape(name)}$'


class DockerShellContainer(Container):
    def __init__(self, docker: 'DockerShellInterface', name: str):
        self._docker = docker
        self.name = name

    def __repr__(self):
        return f'DockerShellContainer({self.name})'

    async def inspect(self) -> ContainerState:
        result, stdout, _ = await self._docker.execute(
            ['container', 'inspect', '--format', '{{json .State}}', self.name]
        )
        raise_on_error(result)
        return ContainerState.from_json(stdout.decode('utf-8'))

    async def start(self) -> None:
        result, _, _ = await self._docker.execute(['start', self.name])
        raise_on_error(result)


class DockerShellInterface(DockerInterface):
    def __init__(self, config: Config = None, execution_envs: dict = None):
        if config is None:
            config = Config()
        self.docker_bin = config.docker_bin
        self.execution_envs = dict(os.environ)
        if config.docker_host:
            self.execution_envs['DOCKER_HOST'] = config.docker_host
        if execution_envs is not None:
            self.execution_envs |= execution_envs
        self.verbose_docker_commands = config.verbose_docker_commands
        self.pull_attempts = config.pull_attempts
        self.pull_delay = config.pull_delay

    async def execute(self, args: list[str], verbose: bool = None
                      ) -> tuple[JobResult | OperationError, bytes, bytes]:
        if verbose is None:
            verbose = self.verbose_docker_commands

        cmd = [self.docker_bin, *args]
        process = await asyncio.create_subprocess_exec(
            *cmd,
            env=self.execution_envs,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        CONSOLE.print(Text(shlex.join(cmd), style=Style.context))
        stdout, stderr = await process_output_till_done(process, verbose)

        if process.returncode != 0:
            return OperationError(shlex.join(cmd), stdout, stderr), stdout, stderr

        return JobResult.GOOD, stdout, stderr

    async def get_container(self, name: str) -> Container | None:
        result, stdout, _ = await self.execute(
            ['container', 'ls', '--all', '--quiet', '--no-trunc', '--filter', exact_name_filter(name)]
        )
        raise_on_error(result)
        if not stdout.strip():
            return None
        return DockerShellContainer(self, name)

    async def create_container(self, spec: ContainerSpec) -> Container:
        result, _, _ = await self.execute(spec.as_create_args())
        raise_on_error(result)
        return DockerShellContainer(self, spec.name)

    async def remove_container(self, name: str) -> None:
        if await self.get_container(name) is None:
            return
        result, _, _ = await self.execute(['container', 'rm', '--force', name])
        raise_on_error(result)

    async def _pull(self, tag: str) -> JobResult | OperationError:
        result, _, _ = await self.execute(['pull', tag])
        return result

    async def pull_image(self, tag: str) -> None:
        pull = retry(
            attempts=self.pull_attempts,
            delay=self.pull_delay,
            until=lambda x: x == JobResult.BAD,
        )(self._pull)
        raise_on_error(await pull(tag))

    async def has_volume(self, name: str) -> bool:
        result, stdout, _ = await self.execute(
            ['volume', 'ls', '--quiet', '--filter', f'name={name}']
        )
        raise_on_error(result)
        return name in stdout.decode('utf-8').split()

    async def rm_volume(self, name: str) -> None:
        result, _, _ = await self.execute(['volume', 'rm', name])
        raise_on_error(result)
