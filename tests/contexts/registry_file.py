import json

from redisws.core.data_dir import PluginDataDir
from redisws.core.registry_storage import CONFIG_FILE_NAME


def registry_file(data_dir: PluginDataDir, content: dict) -> dict:
    with open(data_dir.path(CONFIG_FILE_NAME), 'w') as f:
        f.write(json.dumps(content))
    return content


def read_registry_file(data_dir: PluginDataDir) -> dict:
    with open(data_dir.path(CONFIG_FILE_NAME)) as f:
        return json.loads(f.read())
