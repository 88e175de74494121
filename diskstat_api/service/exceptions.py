class InvalidHostname(Exception):
    pass


class ExtractionError(Exception):
    pass


class CommandExecutionError(ExtractionError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"could not get disk usage for {path}: {cause}")
        self.path = path
        self.cause = cause


class NoStatsFound(ExtractionError):
    def __init__(self, host_name: str):
        super().__init__(f"no disk statistics found for hostname {host_name}")
        self.host_name = host_name
