import vedro

from contexts.docker_engine import docker_engine
from contexts.plugin_dir import plugin_dir
from contexts.redis_service import redis_service
from contexts.registry_file import registry_file
from helpers.fake_prompter import ScriptedPrompter


class Scenario(vedro.Scenario):
    subject = 'destroy filesystem service removes data directory'

    @vedro.params(True)
    @vedro.params(False)
    def __init__(self, data_exists):
        self.data_exists = data_exists

    async def given_filesystem_service(self):
        self.data_dir = plugin_dir()
        registry_file(self.data_dir, {'default': 'main', 'services': [{'name': 'main'}, {'name': 'cache'}]})
        if self.data_exists:
            (self.data_dir.mkdir('cache') / 'dump.rdb').write_bytes(b'REDIS0011')
        self.service = redis_service(self.data_dir, docker_engine(), ScriptedPrompter(confirms=[True]))

    async def when_user_destroys_service(self):
        await self.service.destroy('cache')

    async def then_data_directory_should_be_removed(self):
        assert not self.data_dir.exists('cache')

    async def and_service_should_be_unregistered(self):
        assert [service.name for service in self.service.registry] == ['main']
