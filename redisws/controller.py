from rich.table import Table

from redisws.core.commander import RedisCommander
from redisws.core.config import Config
from redisws.core.data_dir import PluginDataDir
from redisws.core.docker_interface import DockerInterface
from redisws.core.docker_interface import DockerShellInterface
from redisws.core.prompts import Prompter
from redisws.core.prompts import RichPrompter
from redisws.core.proxy import DockerProxy
from redisws.core.proxy import ProxyInterface
from redisws.core.registry import Registry
from redisws.core.registry_storage import JsonFileRegistryStorage
from redisws.core.service import RedisService


class RedisController:
    """Commands flows: every command changing containers set resyncs commander afterwards."""

    def __init__(self, service: RedisService, commander: RedisCommander):
        self._service = service
        self._commander = commander

    @classmethod
    def from_config(cls,
                    config: Config = None,
                    prompter: Prompter = None,
                    docker: DockerInterface = None,
                    proxy: ProxyInterface = None) -> 'RedisController':
        if config is None:
            config = Config()
        if prompter is None:
            prompter = RichPrompter()
        if docker is None:
            docker = DockerShellInterface(config)
        if proxy is None:
            proxy = DockerProxy(docker, config)

        data_dir = PluginDataDir.from_config(config)
        registry = Registry.load(JsonFileRegistryStorage(data_dir))

        return cls(
            service=RedisService(registry, docker, data_dir, prompter),
            commander=RedisCommander(registry, docker, proxy, config),
        )

    @property
    def service(self) -> RedisService:
        return self._service

    async def create(self, name: str = None, host: str = None, storage: str = None,
                     image_name: str = None, image_version: str = None) -> None:
        await self._service.create(name, host, storage, image_name, image_version)

    async def destroy(self, name: str, force: bool = False, yes: bool = False) -> None:
        await self._service.destroy(name, force=force, yes=yes)
        await self._commander.sync()

    async def use(self, name: str) -> None:
        await self._service.use(name)

    async def start(self, name: str = None, restart: bool = False) -> None:
        await self._service.start(name, restart=restart)
        await self._commander.sync()

    async def stop(self, name: str = None) -> None:
        await self._service.stop(name)
        await self._commander.sync()

    async def upgrade(self, name: str = None, storage: str = None, volume: str = None,
                      image_name: str = None, image_version: str = None) -> None:
        await self._service.upgrade(name, storage, volume, image_name, image_version)

    async def update(self, name: str = None, storage: str = None, volume: str = None,
                     image_name: str = None, image_version: str = None) -> None:
        await self._service.update(name, storage, volume, image_name, image_version)

    async def set_domain(self, domain: str) -> None:
        await self._service.change_domain(domain)
        await self._commander.sync()

    def get_list_table(self) -> Table:
        return self._service.get_list_table()

    def get_service_names(self) -> list[str]:
        return self._service.get_service_names()
