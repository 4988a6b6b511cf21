from copy import deepcopy

from redisws.core.registry_storage import RegistryStorage


class MemoryRegistryStorage(RegistryStorage):
    def __init__(self, data: dict = None):
        self.data = deepcopy(data or {})
        self.saves = 0

    def load(self) -> dict:
        return deepcopy(self.data)

    def save(self, data: dict) -> None:
        self.data = deepcopy(data)
        self.saves += 1
