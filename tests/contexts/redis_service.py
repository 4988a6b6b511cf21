from helpers.fake_docker import FakeDockerInterface
from helpers.fake_prompter import ScriptedPrompter
from helpers.fake_proxy import FakeProxy
from redisws.controller import RedisController
from redisws.core.commander import RedisCommander
from redisws.core.data_dir import PluginDataDir
from redisws.core.prompts import Prompter
from redisws.core.registry import Registry
from redisws.core.registry_storage import JsonFileRegistryStorage
from redisws.core.service import RedisService


def registry_loaded(data_dir: PluginDataDir) -> Registry:
    return Registry.load(JsonFileRegistryStorage(data_dir))


def redis_service(data_dir: PluginDataDir, docker: FakeDockerInterface, prompter: Prompter = None) -> RedisService:
    if prompter is None:
        prompter = ScriptedPrompter()
    return RedisService(registry_loaded(data_dir), docker, data_dir, prompter)


def redis_controller(data_dir: PluginDataDir, docker: FakeDockerInterface, proxy: FakeProxy,
                     prompter: Prompter = None) -> RedisController:
    if prompter is None:
        prompter = ScriptedPrompter()
    registry = registry_loaded(data_dir)
    return RedisController(
        service=RedisService(registry, docker, data_dir, prompter),
        commander=RedisCommander(registry, docker, proxy),
    )
