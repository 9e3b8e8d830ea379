from dataclasses import dataclass

@dataclass
class AdvancedError(Exception):
    name: str
    message: str
    info: str

    def __str__(self):
        return f"{self.name}: {self.message} ({self.info})"

class CacheError(AdvancedError):
    pass

class InvalidArgumentError(CacheError, ValueError):
    def __init__(self, info: str):
        super().__init__("InvalidArgument", "Invalid cache argument", info)
