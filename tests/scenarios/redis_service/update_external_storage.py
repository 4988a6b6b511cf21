import vedro
from vedro import catched

from contexts.docker_engine import docker_engine
from helpers.fake_prompter import ScriptedPrompter
from helpers.memory_storage import MemoryRegistryStorage
from redisws import RedisService
from redisws import Registry
from redisws.core.data_dir import PluginDataDir
from redisws.errors.service import InvalidOperation


class Scenario(vedro.Scenario):
    subject = 'update storage of {name} service'

    @vedro.params('ext', {'storage': 'volume'})
    @vedro.params('cache', {'volume': 'cache-data'})
    def __init__(self, name, fields):
        self.name = name
        self.fields = fields

    async def given_services(self):
        self.storage = MemoryRegistryStorage({'services': [
            {'name': 'ext', 'host': 'ext.example.com'},
            {'name': 'cache', 'storage': 'filesystem'},
        ]})
        self.service = RedisService(Registry.load(self.storage), docker_engine(), PluginDataDir('/nonexistent'),
                                    ScriptedPrompter())

    async def when_user_updates_storage(self):
        with catched(Exception) as self.exception:
            await self.service.update(self.name, **self.fields)

    async def then_it_should_fail_with_invalid_operation(self):
        assert self.exception.type is InvalidOperation

    async def and_nothing_should_be_saved(self):
        assert self.storage.saves == 0
