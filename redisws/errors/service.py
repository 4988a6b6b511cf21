class RedisServiceError(Exception):
    pass


class ServiceNotFound(RedisServiceError):
    def __init__(self, name: str):
        super().__init__(f'Service "{name}" not found')
        self.name = name


class NoDefaultService(ServiceNotFound):
    def __init__(self):
        RedisServiceError.__init__(self, 'Default service not found')
        self.name = None


class ServiceAlreadyExists(RedisServiceError):
    def __init__(self, name: str):
        super().__init__(f'Service name "{name}" is already taken')
        self.name = name


class InvalidStorage(RedisServiceError):
    def __init__(self, storage):
        super().__init__(f'Invalid storage type: {storage!r}, should be one of: filesystem, volume')
        self.storage = storage


class InvalidOperation(RedisServiceError):
    pass


class PromptUnavailable(InvalidOperation):
    pass


class Aborted(RedisServiceError):
    def __init__(self, message: str = 'Aborted'):
        super().__init__(message)


class ConfigurationMissing(RedisServiceError):
    pass


class InvalidServiceName(InvalidOperation):
    def __init__(self, name: str):
        super().__init__(f'Invalid service name {name!r}, use letters, digits, "_" and "-" starting with letter or digit')
        self.name = name


class PathOutsideDataDir(InvalidOperation):
    def __init__(self, path):
        super().__init__(f'Path {str(path)!r} is outside of plugin data dir')
        self.path = path
