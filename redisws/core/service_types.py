import re
from enum import Enum
from typing import NamedTuple
from typing import Union

from redisws.errors.service import InvalidStorage

DEFAULT_IMAGE_NAME = 'redis'
DEFAULT_IMAGE_VERSION = 'latest'
VOLUME_PREFIX = 'wocker-redis'
DATA_PATH = '/data'

# name is used as data dir, container name and REDIS_HOSTS entry
SERVICE_NAME_PATTERN = re.compile(r'[a-zA-Z0-9][a-zA-Z0-9_-]*')


def is_valid_service_name(name: str) -> bool:
    return SERVICE_NAME_PATTERN.fullmatch(name) is not None


class Storage(Enum):
    FILESYSTEM = 'filesystem'
    VOLUME = 'volume'

    @classmethod
    def parse(cls, value: Union[str, 'Storage']) -> 'Storage':
        if isinstance(value, Storage):
            return value
        for storage in cls:
            if storage.value == value:
                return storage
        raise InvalidStorage(value)

    @classmethod
    def is_valid(cls, value) -> bool:
        return isinstance(value, Storage) or value in [storage.value for storage in cls]


class External(NamedTuple):
    host: str


class Filesystem(NamedTuple):
    @property
    def kind(self) -> Storage:
        return Storage.FILESYSTEM


class Volume(NamedTuple):
    volume: str | None = None

    @property
    def kind(self) -> Storage:
        return Storage.VOLUME


class Local(NamedTuple):
    storage: Filesystem | Volume = Filesystem()


ServiceBackend = External | Local


def make_local(storage: Storage, volume: str | None = None) -> Local:
    if storage == Storage.VOLUME:
        return Local(Volume(volume))
    return Local(Filesystem())


class Service(NamedTuple):
    name: str
    backend: ServiceBackend = Local()
    image_name: str = DEFAULT_IMAGE_NAME
    image_version: str = DEFAULT_IMAGE_VERSION

    def __repr__(self):
        return f'Service({self.name}, {self.backend}, {self.image_tag})'

    @property
    def is_external(self) -> bool:
        return isinstance(self.backend, External)

    @property
    def host(self) -> str | None:
        if isinstance(self.backend, External):
            return self.backend.host
        return None

    @property
    def storage(self) -> Storage | None:
        if isinstance(self.backend, Local):
            return self.backend.storage.kind
        return None

    @property
    def container_name(self) -> str:
        return f'redis-{self.name}.ws'

    @property
    def image_tag(self) -> str:
        return f'{self.image_name}:{self.image_version}'

    @property
    def default_volume_name(self) -> str:
        return default_volume_name(self.name)

    def with_storage(self, storage: Storage, volume: str | None = None) -> 'Service':
        return self._replace(backend=make_local(storage, volume))

    def with_volume(self, volume: str) -> 'Service':
        return self._replace(backend=Local(Volume(volume)))

    def with_image(self, image_name: str | None = None, image_version: str | None = None) -> 'Service':
        return self._replace(
            image_name=image_name or self.image_name,
            image_version=image_version or self.image_version,
        )

    @classmethod
    def from_json(cls, raw: dict) -> 'Service':
        host = raw.get('host')
        if host:
            backend = External(host)
        else:
            backend = make_local(
                Storage.parse(raw.get('storage') or Storage.FILESYSTEM),
                raw.get('volume') or None,
            )
        service = cls(
            name=raw['name'],
            backend=backend,
            image_name=raw.get('imageName') or DEFAULT_IMAGE_NAME,
            image_version=raw.get('imageVersion') or DEFAULT_IMAGE_VERSION,
        )
        return normalized(service)

    def as_json(self) -> dict:
        result = {'name': self.name}
        match self.backend:
            case External(host=host):
                result['host'] = host
            case Local(storage=Volume(volume=volume)):
                result['storage'] = Storage.VOLUME.value
                if volume and volume != self.default_volume_name:
                    result['volume'] = volume
            case Local():
                result['storage'] = Storage.FILESYSTEM.value
        if self.image_name != DEFAULT_IMAGE_NAME:
            result['imageName'] = self.image_name
        if self.image_version != DEFAULT_IMAGE_VERSION:
            result['imageVersion'] = self.image_version
        return result


def default_volume_name(name: str) -> str:
    return f'{VOLUME_PREFIX}-{name}'


def resolved_volume(service: Service) -> str | None:
    """
    Name of engine volume backing the service data.

    None for external and filesystem backed services.
    """
    match service.backend:
        case Local(storage=Volume(volume=volume)):
            return volume or default_volume_name(service.name)
    return None


def normalized(service: Service) -> Service:
    # explicit volume equal to derived default is stored as "no volume"
    match service.backend:
        case Local(storage=Volume(volume=volume)) if volume == default_volume_name(service.name):
            return service._replace(backend=Local(Volume()))
    return service
