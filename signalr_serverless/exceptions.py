class ServerlessException(Exception):
    pass


class InvalidConnectionString(ServerlessException, ValueError):
    pass


class CommandError(ServerlessException):
    pass


class UnrecognizedCommand(CommandError):
    pass


class UnrecognizedSubcommand(CommandError):
    pass


class ServiceRejected(ServerlessException):
    def __init__(self, status_code: int):
        super().__init__(f"Service rejected the request with status {status_code}")
        self.status_code = status_code


class TransportFailure(ServerlessException, ConnectionError):
    pass
