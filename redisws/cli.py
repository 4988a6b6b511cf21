import asyncio
import sys
from argparse import ArgumentParser
from argparse import Namespace
from pathlib import Path

from rich.text import Text

from redisws.controller import RedisController
from redisws.core.config import Config
from redisws.core.prompts import NonInteractivePrompter
from redisws.core.prompts import RichPrompter
from redisws.errors.docker import DockerOperationError
from redisws.errors.service import RedisServiceError
from redisws.output.console import CONSOLE
from redisws.output.styles import Style
from redisws.version import get_version

STORAGE_CHOICES = ['filesystem', 'volume']


def _add_update_arguments(parser: ArgumentParser) -> None:
    parser.add_argument('name', nargs='?', help='Service name, default service if not set')
    parser.add_argument('--storage', help=f'Storage type: {", ".join(STORAGE_CHOICES)}')
    parser.add_argument('--volume', help='Volume name for "volume" storage')
    parser.add_argument('--image', dest='image_name', help='Image name')
    parser.add_argument('--image-version', help='Image version')


def make_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='redisws', description='Redis services for workspace')
    parser.add_argument('--version', action='version', version=get_version())
    parser.add_argument('--data-dir', type=Path, help='Plugin data directory, overrides REDISWS_PLUGIN_DIR')
    parser.add_argument('--non-interactive', action='store_true', help='Fail instead of asking questions')

    commands = parser.add_subparsers(dest='command', required=True)

    create = commands.add_parser('create', help='Register new redis service')
    create.add_argument('name', nargs='?')
    create.add_argument('--host', '-H', help='External redis host, no container will be managed')
    create.add_argument('--storage', help=f'Storage type: {", ".join(STORAGE_CHOICES)}')
    create.add_argument('--image', dest='image_name', help='Image name')
    create.add_argument('--image-version', help='Image version')

    destroy = commands.add_parser('destroy', help='Remove service with all its data')
    destroy.add_argument('name')
    destroy.add_argument('--force', '-f', action='store_true', help='Allow to remove default service')
    destroy.add_argument('--yes', '-y', action='store_true', help="Don't ask for confirmation")

    use = commands.add_parser('use', help='Set default service')
    use.add_argument('name')

    start = commands.add_parser('start', help='Start service container')
    start.add_argument('name', nargs='?')
    start.add_argument('--restart', '-r', action='store_true', help='Recreate container')

    stop = commands.add_parser('stop', help='Stop service container')
    stop.add_argument('name', nargs='?')

    _add_update_arguments(commands.add_parser('upgrade', help='Change service image or storage'))
    _add_update_arguments(commands.add_parser('update', help='Change service image or storage'))

    set_domain = commands.add_parser('set-domain', help='Set redis commander domain')
    set_domain.add_argument('domain')

    commands.add_parser('ls', help='List services')
    commands.add_parser('names', help='Services names for completion')

    return parser


async def run(controller: RedisController, args: Namespace) -> None:
    match args.command:
        case 'create':
            await controller.create(args.name, args.host, args.storage, args.image_name, args.image_version)
        case 'destroy':
            await controller.destroy(args.name, force=args.force, yes=args.yes)
        case 'use':
            await controller.use(args.name)
        case 'start':
            await controller.start(args.name, restart=args.restart)
        case 'stop':
            await controller.stop(args.name)
        case 'upgrade':
            await controller.upgrade(args.name, args.storage, args.volume, args.image_name, args.image_version)
        case 'update':
            await controller.update(args.name, args.storage, args.volume, args.image_name, args.image_version)
        case 'set-domain':
            await controller.set_domain(args.domain)
        case 'ls':
            CONSOLE.print(controller.get_list_table())
        case 'names':
            for name in controller.get_service_names():
                print(name)


async def run_cli(argv: list[str] | None = None, controller: RedisController | None = None) -> int:
    args = make_parser().parse_args(argv)

    try:
        if controller is None:
            config = Config()
            if args.data_dir is not None:
                config.plugin_dir = args.data_dir
            prompter = NonInteractivePrompter() if args.non_interactive else RichPrompter()
            controller = RedisController.from_config(config, prompter)

        await run(controller, args)
    except (RedisServiceError, DockerOperationError) as e:
        CONSOLE.print(Text(str(e), style=Style.bad))
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    return asyncio.run(run_cli(argv))


if __name__ == '__main__':
    sys.exit(main())
