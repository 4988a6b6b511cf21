import vedro

from contexts.environment import env_var_unset
from redisws.cli import run_cli


class Scenario(vedro.Scenario):
    subject = 'cli without configured plugin dir exits with error'

    async def given_no_plugin_dir_configured(self):
        env_var_unset('REDISWS_PLUGIN_DIR')

    async def when_user_lists_services(self):
        self.exit_code = await run_cli(['ls'])

    async def then_it_should_exit_with_error_code(self):
        assert self.exit_code == 1
