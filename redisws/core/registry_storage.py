from abc import ABC
from abc import abstractmethod

from redisws.core.data_dir import PluginDataDir

CONFIG_FILE_NAME = 'config.json'


class RegistryStorage(ABC):
    @abstractmethod
    def load(self) -> dict:
        ...

    @abstractmethod
    def save(self, data: dict) -> None:
        ...


class JsonFileRegistryStorage(RegistryStorage):
    def __init__(self, data_dir: PluginDataDir, file_name: str = CONFIG_FILE_NAME):
        self._data_dir = data_dir
        self._file_name = file_name

    def load(self) -> dict:
        if not self._data_dir.exists(self._file_name):
            return {}
        return self._data_dir.read_json(self._file_name)

    def save(self, data: dict) -> None:
        self._data_dir.write_json(data, self._file_name)
