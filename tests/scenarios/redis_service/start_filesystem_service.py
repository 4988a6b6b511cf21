from dataclasses import asdict

import vedro

from contexts.docker_engine import docker_engine
from contexts.plugin_dir import plugin_dir
from contexts.redis_service import redis_service
from contexts.registry_file import registry_file


class Scenario(vedro.Scenario):
    subject = 'start filesystem service binds data directory'

    async def given_filesystem_service(self):
        self.data_dir = plugin_dir()
        registry_file(self.data_dir, {
            'default': 'cache',
            'services': [{'name': 'cache', 'storage': 'filesystem', 'imageVersion': '7.2'}],
        })
        self.docker = docker_engine()
        self.service = redis_service(self.data_dir, self.docker)

    async def when_user_starts_service(self):
        await self.service.start('cache')

    async def then_data_directory_should_be_created(self):
        assert self.data_dir.path('cache').is_dir()

    async def and_directory_should_be_bound_to_data_path(self):
        spec = asdict(self.docker.containers['redis-cache.ws'].spec)
        assert spec['volumes'] == [f"{self.data_dir.path('cache')}:/data"]
        assert spec['image'] == 'redis:7.2'

    async def and_container_should_be_running(self):
        assert self.docker.containers['redis-cache.ws'].running
