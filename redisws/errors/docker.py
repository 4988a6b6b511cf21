class DockerOperationError(Exception):
    def __init__(self, command: str, log: str):
        super().__init__(f"Can't execute {command}:\n{log}")
        self.command = command
        self.log = log
