import os
from pathlib import Path

from redisws.errors.service import ConfigurationMissing

DEFAULT_COMMANDER_IMAGE = 'rediscommander/redis-commander:latest'
DEFAULT_PROXY_CONTAINER = 'proxy.workspace'


class Config:
    def __init__(self):
        plugin_dir = os.environ.get('REDISWS_PLUGIN_DIR')
        self.plugin_dir: Path | None = Path(plugin_dir) if plugin_dir else None
        self.docker_bin: str = os.environ.get('DOCKER_BIN', 'docker')
        self.docker_host: str | None = os.environ.get('DOCKER_HOST')
        self.commander_image: str = os.environ.get('REDIS_COMMANDER_IMAGE', DEFAULT_COMMANDER_IMAGE)
        self.proxy_container: str = os.environ.get('PROXY_CONTAINER_NAME', DEFAULT_PROXY_CONTAINER)
        self.verbose_docker_commands = bool(os.environ.get('VERBOSE_DOCKER_OUTPUT_TO_STDOUT', False))
        self.pull_attempts = int(os.environ.get('DOCKER_PULL_ATTEMPTS', 3))
        self.pull_delay = int(os.environ.get('DOCKER_PULL_DELAY', 1))

    def require_plugin_dir(self) -> Path:
        if self.plugin_dir is None:
            raise ConfigurationMissing('Plugin dir missed, set REDISWS_PLUGIN_DIR or pass --data-dir')
        return self.plugin_dir
