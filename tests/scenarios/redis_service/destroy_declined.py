import vedro
from vedro import catched

from contexts.docker_engine import docker_engine
from contexts.plugin_dir import plugin_dir
from contexts.redis_service import redis_service
from contexts.registry_file import registry_file
from helpers.fake_prompter import ScriptedPrompter
from redisws.errors.service import Aborted


class Scenario(vedro.Scenario):
    subject = 'destroy declined by user'

    async def given_filesystem_service_with_data(self):
        self.data_dir = plugin_dir()
        registry_file(self.data_dir, {'default': 'main', 'services': [{'name': 'main'}, {'name': 'cache'}]})
        self.data_dir.mkdir('cache')
        self.prompter = ScriptedPrompter(confirms=[False])
        self.service = redis_service(self.data_dir, docker_engine(), self.prompter)

    async def when_user_declines_destroy(self):
        with catched(Exception) as self.exception:
            await self.service.destroy('cache')

    async def then_it_should_be_aborted(self):
        assert self.exception.type is Aborted

    async def and_confirmation_should_be_asked(self):
        assert len(self.prompter.asked) == 1
        assert '"cache"' in self.prompter.asked[0]

    async def and_data_should_be_kept(self):
        assert self.data_dir.exists('cache')
        assert self.service.registry.has_service('cache')
