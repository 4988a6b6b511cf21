from redisws.controller import RedisController
from redisws.core.commander import RedisCommander
from redisws.core.registry import Registry
from redisws.core.service import RedisService
from redisws.core.service_types import External
from redisws.core.service_types import Filesystem
from redisws.core.service_types import Local
from redisws.core.service_types import Service
from redisws.core.service_types import Storage
from redisws.core.service_types import Volume
from redisws.core.service_types import resolved_volume
from redisws.version import get_version

__version__ = get_version()
__all__ = (
    'RedisController', 'RedisCommander', 'RedisService', 'Registry',
    'Service', 'Storage', 'External', 'Local', 'Filesystem', 'Volume',
    'resolved_volume',
)
