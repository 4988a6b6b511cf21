import vedro

from contexts.docker_script import docker_script
from contexts.docker_script import shell_docker
from redisws.core.docker_interface import exact_name_filter


class Scenario(vedro.Scenario):
    subject = 'remove missing container only looks it up'

    async def given_docker_without_containers(self):
        self.script = docker_script(exit_code=0, stdout='')
        self.docker = shell_docker(self.script)

    async def when_container_removed(self):
        await self.docker.remove_container('redis-cache.ws')

    async def then_only_lookup_should_run(self):
        assert self.script.calls() == [
            ['container', 'ls', '--all', '--quiet', '--no-trunc', '--filter', exact_name_filter('redis-cache.ws')],
        ]
