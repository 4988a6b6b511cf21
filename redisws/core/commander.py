from rich.text import Text

from redisws.core.config import Config
from redisws.core.docker_interface import ContainerSpec
from redisws.core.docker_interface import DockerInterface
from redisws.core.docker_interface import RESTART_ALWAYS
from redisws.core.proxy import ProxyInterface
from redisws.core.registry import Registry
from redisws.output.console import CONSOLE
from redisws.output.styles import Style

COMMANDER_CONTAINER = 'redis-commander.workspace'
COMMANDER_PORT = '8081'


class RedisCommander:
    """
    Shared redis-commander UI container.

    Container env is fixed at creation, so on every sync it is recreated with current
    REDIS_HOSTS list: external hosts and containers of started services.
    """

    def __init__(self,
                 registry: Registry,
                 docker: DockerInterface,
                 proxy: ProxyInterface,
                 config: Config = None):
        if config is None:
            config = Config()
        self._registry = registry
        self._docker = docker
        self._proxy = proxy
        self._image = config.commander_image

    async def get_endpoints(self) -> list[str]:
        endpoints = []
        for service in self._registry.services:
            if service.is_external:
                host = service.host
            elif await self._docker.get_container(service.container_name) is not None:
                host = service.container_name
            else:
                continue

            endpoints += [f'{service.name}:{host}']
        return endpoints

    async def sync(self) -> list[str]:
        await self._docker.remove_container(COMMANDER_CONTAINER)

        container = await self._docker.get_container(COMMANDER_CONTAINER)
        endpoints = []

        if container is None:
            endpoints = await self.get_endpoints()
            if not endpoints:
                CONSOLE.print(Text('No redis services to show in commander, skipped', style=Style.suspicious))
                return []

            await self._docker.pull_image(self._image)
            container = await self._docker.create_container(ContainerSpec(
                name=COMMANDER_CONTAINER,
                image=self._image,
                restart=RESTART_ALWAYS,
                env={
                    'VIRTUAL_HOST': self._registry.admin_domain,
                    'VIRTUAL_PORT': COMMANDER_PORT,
                    'REDIS_HOSTS': ','.join(endpoints),
                },
            ))

        state = await container.inspect()
        if not state.running:
            await container.start()
            await self._proxy.start()

            CONSOLE.print(
                Text('Redis commander started at ', style=Style.good)
                .append(Text(f'http://{self._registry.admin_domain}', style=Style.mark))
            )
        return endpoints
