from abc import ABC
from abc import abstractmethod

from rich.text import Text

from redisws.core.config import Config
from redisws.core.docker_interface import DockerInterface
from redisws.output.console import CONSOLE
from redisws.output.styles import Style


class ProxyInterface(ABC):
    @abstractmethod
    async def start(self) -> None:
        ...


class DockerProxy(ProxyInterface):
    """Starts workspace reverse proxy container, it picks up VIRTUAL_HOST routes by itself."""

    def __init__(self, docker: DockerInterface, config: Config = None):
        if config is None:
            config = Config()
        self._docker = docker
        self._container_name = config.proxy_container

    async def start(self) -> None:
        container = await self._docker.get_container(self._container_name)
        if container is None:
            CONSOLE.print(
                Text('Proxy container ', style=Style.suspicious)
                .append(Text(self._container_name, style=Style.mark))
                .append(Text(" not found, routes won't be served", style=Style.suspicious))
            )
            return

        state = await container.inspect()
        if not state.running:
            await container.start()
