from typing import Iterator

from redisws.core.registry_storage import RegistryStorage
from redisws.core.service_types import Service
from redisws.errors.service import NoDefaultService
from redisws.errors.service import ServiceNotFound

DEFAULT_ADMIN_DOMAIN = 'redis-commander.workspace'


class Registry:
    """
    Named redis services, default service pointer and commander admin domain.

    Registry never saves itself, every mutation should be followed by explicit `save()`.
    """

    def __init__(self,
                 storage: RegistryStorage,
                 services: list[Service] | None = None,
                 default: str | None = None,
                 admin_domain: str = DEFAULT_ADMIN_DOMAIN):
        self._storage = storage
        self._services: dict[str, Service] = {}
        for service in services or []:
            self._services[service.name] = service
        self._default = default
        self.admin_domain = admin_domain or DEFAULT_ADMIN_DOMAIN

    @classmethod
    def load(cls, storage: RegistryStorage) -> 'Registry':
        data = storage.load()
        return cls(
            storage,
            services=[Service.from_json(raw) for raw in data.get('services') or []],
            # "defaultService" is the key of early config files
            default=data.get('default', data.get('defaultService')),
            admin_domain=data.get('adminDomain', DEFAULT_ADMIN_DOMAIN),
        )

    def __iter__(self) -> Iterator[Service]:
        return iter(list(self._services.values()))

    def __len__(self):
        return len(self._services)

    def __repr__(self):
        return f'Registry(default={self.default}, services={list(self._services)})'

    @property
    def services(self) -> list[Service]:
        return list(self._services.values())

    @property
    def default(self) -> str | None:
        if self._default is not None and self._default in self._services:
            return self._default
        return None

    def has_service(self, name: str) -> bool:
        return name in self._services

    def get_service(self, name: str) -> Service:
        if name not in self._services:
            raise ServiceNotFound(name)
        return self._services[name]

    def has_default_service(self) -> bool:
        return self.default is not None

    def get_default_service(self) -> Service:
        if self.default is None:
            raise NoDefaultService()
        return self._services[self.default]

    def get_service_or_default(self, name: str | None = None) -> Service:
        if name:
            return self.get_service(name)
        return self.get_default_service()

    def set_service(self, service: Service) -> None:
        self._services[service.name] = service
        if self.default is None:
            self._default = service.name

    def remove_service(self, name: str) -> None:
        if name not in self._services:
            return
        del self._services[name]
        if self._default == name:
            self._default = None

    def set_default(self, name: str) -> None:
        self._default = self.get_service(name).name

    def as_json(self) -> dict:
        result = {}
        if self.default is not None:
            result['default'] = self.default
        if self.admin_domain != DEFAULT_ADMIN_DOMAIN:
            result['adminDomain'] = self.admin_domain
        if self._services:
            result['services'] = [service.as_json() for service in self._services.values()]
        return result

    def save(self) -> None:
        self._storage.save(self.as_json())
