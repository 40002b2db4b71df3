class NotConfigured(Exception):
    pass


class NotFoundException(Exception):
    def __init__(self, resource: str, identifier: str, status_code: int = 404):
        self.resource = resource
        self.identifier = identifier
        self.status_code = status_code

    def __str__(self):
        return f"{self.resource} '{self.identifier}' not found"
