import vedro

from contexts.docker_engine import docker_engine
from contexts.plugin_dir import plugin_dir
from contexts.redis_service import redis_service
from contexts.registry_file import registry_file


class Scenario(vedro.Scenario):
    subject = 'start external service does not touch containers'

    async def given_external_service(self):
        self.data_dir = plugin_dir()
        registry_file(self.data_dir, {'services': [{'name': 'ext', 'host': 'ext.example.com'}]})
        self.docker = docker_engine()
        self.service = redis_service(self.data_dir, self.docker)

    async def when_user_starts_service(self):
        await self.service.start('ext')

    async def then_no_container_should_be_touched(self):
        assert self.docker.calls == []
