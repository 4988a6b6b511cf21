from rich.table import Table
from rich.text import Text

from redisws.core.data_dir import PluginDataDir
from redisws.core.docker_interface import ContainerSpec
from redisws.core.docker_interface import DockerInterface
from redisws.core.docker_interface import RESTART_ALWAYS
from redisws.core.prompts import Option
from redisws.core.prompts import Prompter
from redisws.core.registry import Registry
from redisws.core.service_types import DATA_PATH
from redisws.core.service_types import External
from redisws.core.service_types import Local
from redisws.core.service_types import Service
from redisws.core.service_types import Storage
from redisws.core.service_types import Volume
from redisws.core.service_types import is_valid_service_name
from redisws.core.service_types import make_local
from redisws.core.service_types import normalized
from redisws.core.service_types import resolved_volume
from redisws.errors.service import Aborted
from redisws.errors.service import InvalidOperation
from redisws.errors.service import InvalidServiceName
from redisws.errors.service import InvalidStorage
from redisws.errors.service import PromptUnavailable
from redisws.errors.service import ServiceAlreadyExists
from redisws.output.console import CONSOLE
from redisws.output.styles import Style

STORAGE_OPTIONS = [
    Option('Volume', Storage.VOLUME.value),
    Option('File System', Storage.FILESYSTEM.value),
]


class RedisService:
    def __init__(self,
                 registry: Registry,
                 docker: DockerInterface,
                 data_dir: PluginDataDir,
                 prompter: Prompter):
        self._registry = registry
        self._docker = docker
        self._data_dir = data_dir
        self._prompter = prompter

    @property
    def registry(self) -> Registry:
        return self._registry

    def _validate_new_name(self, name: str) -> str | None:
        if not name:
            return 'Name is required'
        if not is_valid_service_name(name):
            return f'Service name "{name}" should contain only letters, digits, "_" and "-"'
        if self._registry.has_service(name):
            return f'Service name "{name}" is already taken'
        return None

    def _ask_name(self, name: str | None) -> str:
        try:
            new_name = self._prompter.text('Service name:', validate=self._validate_new_name)
        except PromptUnavailable:
            if name:
                raise ServiceAlreadyExists(name) from None
            raise

        if not new_name:
            raise InvalidOperation('Name is required')
        if not is_valid_service_name(new_name):
            raise InvalidServiceName(new_name)
        if self._registry.has_service(new_name):
            raise ServiceAlreadyExists(new_name)
        return new_name

    def _ask_storage(self, storage: str | None) -> Storage:
        try:
            return Storage.parse(self._prompter.select('Storage type:', STORAGE_OPTIONS))
        except PromptUnavailable:
            if storage:
                raise InvalidStorage(storage) from None
            return Storage.FILESYSTEM

    async def create(self,
                     name: str | None = None,
                     host: str | None = None,
                     storage: str | None = None,
                     image_name: str | None = None,
                     image_version: str | None = None) -> Service:
        if name and not is_valid_service_name(name):
            raise InvalidServiceName(name)
        if not name or self._registry.has_service(name):
            name = self._ask_name(name)

        if host:
            backend = External(host)
        else:
            if not storage or not Storage.is_valid(storage):
                storage = self._ask_storage(storage)
            backend = make_local(Storage.parse(storage))

        service = Service(name=name, backend=backend).with_image(image_name, image_version)

        self._registry.set_service(service)
        self._registry.save()

        CONSOLE.print(
            Text('Service ', style=Style.info)
            .append(Text(service.name, style=Style.mark))
            .append(Text(' created', style=Style.info))
        )
        return service

    async def destroy(self, name: str, force: bool = False, yes: bool = False) -> None:
        service = self._registry.get_service(name)

        if not force and self._registry.default == service.name:
            raise InvalidOperation("Can't delete default service")

        if not yes:
            confirm = self._prompter.confirm(
                f'Are you sure you want to delete the "{service.name}" service? '
                'This action cannot be undone and all data will be lost.',
                default=False,
            )
            if not confirm:
                raise Aborted()

        # volume can't be removed while container uses it
        await self._docker.remove_container(service.container_name)

        match service.backend:
            case Local(storage=Volume()):
                volume = resolved_volume(service)
                if await self._docker.has_volume(volume):
                    await self._docker.rm_volume(volume)
            case Local():
                if self._data_dir.exists(service.name):
                    self._data_dir.rm(service.name)

        self._registry.remove_service(service.name)
        self._registry.save()

        CONSOLE.print(
            Text('Service ', style=Style.info)
            .append(Text(service.name, style=Style.mark))
            .append(Text(' destroyed', style=Style.info))
        )

    async def use(self, name: str) -> None:
        self._registry.set_default(name)
        self._registry.save()

    def _service_volumes(self, service: Service) -> list[str]:
        match service.backend:
            case Local(storage=Volume()):
                return [f'{resolved_volume(service)}:{DATA_PATH}']
            case Local():
                path = self._data_dir.mkdir(service.name)
                return [f'{path}:{DATA_PATH}']
        return []

    async def start(self, name: str | None = None, restart: bool = False) -> None:
        if not name and not self._registry.has_default_service():
            await self.create()

        service = self._registry.get_service_or_default(name)

        if service.is_external:
            CONSOLE.print(
                Text('Service ', style=Style.info)
                .append(Text(service.name, style=Style.mark))
                .append(Text(f' is external ({service.host}), nothing to start', style=Style.info))
            )
            return

        container = await self._docker.get_container(service.container_name)

        if restart and container is not None:
            await self._docker.remove_container(service.container_name)
            container = None

        if container is None:
            await self._docker.pull_image(service.image_tag)

            container = await self._docker.create_container(ContainerSpec(
                name=service.container_name,
                image=service.image_tag,
                restart=RESTART_ALWAYS,
                env={
                    'VIRTUAL_HOST': service.container_name,
                },
                volumes=self._service_volumes(service),
            ))

        state = await container.inspect()
        if not state.running:
            await container.start()

            CONSOLE.print(
                Text('Redis ', style=Style.good)
                .append(Text(service.name, style=Style.mark))
                .append(Text(' service started', style=Style.good))
            )

    async def stop(self, name: str | None = None) -> None:
        service = self._registry.get_service_or_default(name)

        await self._docker.remove_container(service.container_name)

    async def update(self,
                     name: str | None = None,
                     storage: str | None = None,
                     volume: str | None = None,
                     image_name: str | None = None,
                     image_version: str | None = None) -> bool:
        service = self._registry.get_service_or_default(name)
        updated = service

        new_storage = Storage.parse(storage) if storage else None

        if storage or volume:
            if updated.is_external:
                raise InvalidOperation(f'Service "{service.name}" is external and has no storage')

        if new_storage is not None:
            if new_storage != updated.storage:
                updated = updated.with_storage(new_storage)

        if volume:
            if updated.storage != Storage.VOLUME:
                raise InvalidOperation(f'Volume can be set only for "{Storage.VOLUME.value}" storage')
            updated = updated.with_volume(volume)

        updated = normalized(updated.with_image(image_name, image_version))

        if updated == service:
            return False

        self._registry.set_service(updated)
        self._registry.save()

        CONSOLE.print(
            Text('Service ', style=Style.info)
            .append(Text(updated.name, style=Style.mark))
            .append(Text(' updated, run ', style=Style.info))
            .append(Text(f'start {updated.name} --restart', style=Style.mark_neutral))
            .append(Text(' to apply', style=Style.info))
        )
        return True

    async def upgrade(self,
                      name: str | None = None,
                      storage: str | None = None,
                      volume: str | None = None,
                      image_name: str | None = None,
                      image_version: str | None = None) -> bool:
        return await self.update(name, storage, volume, image_name, image_version)

    async def change_domain(self, domain: str) -> None:
        self._registry.admin_domain = domain
        self._registry.save()

    def get_service_names(self) -> list[str]:
        return [service.name for service in self._registry.services]

    def get_list_table(self) -> Table:
        table = Table('Name', 'Host', 'Storage', 'Image')
        for service in self._registry.services:
            table.add_row(
                service.name + (' (default)' if self._registry.default == service.name else ''),
                service.host if service.is_external else service.container_name,
                resolved_volume(service) or '',
                service.image_tag,
            )
        return table
