import vedro

from contexts.docker_engine import container_exists
from contexts.docker_engine import docker_engine
from contexts.plugin_dir import plugin_dir
from contexts.redis_service import registry_loaded
from contexts.registry_file import registry_file
from helpers.fake_proxy import FakeProxy
from redisws import RedisCommander


class Scenario(vedro.Scenario):
    subject = 'commander is not created without reachable services'

    async def given_never_started_service_and_stale_commander(self):
        self.data_dir = plugin_dir()
        registry_file(self.data_dir, {'services': [{'name': 'cache'}]})
        self.docker = docker_engine()
        container_exists(self.docker, 'redis-commander.workspace', image='rediscommander/redis-commander:latest')
        self.proxy = FakeProxy()
        self.commander = RedisCommander(registry_loaded(self.data_dir), self.docker, self.proxy)

    async def when_commander_synced(self):
        self.endpoints = await self.commander.sync()

    async def then_no_endpoints_should_be_found(self):
        assert self.endpoints == []

    async def and_stale_commander_should_be_removed(self):
        assert 'redis-commander.workspace' not in self.docker.containers

    async def and_no_commander_should_be_created(self):
        assert self.docker.calls_of('create_container') == []
        assert self.docker.pulled == []
        assert self.proxy.starts == 0
