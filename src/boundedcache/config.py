import os
import sys
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()

def read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        sys.exit(f"Environment variable {name} must be an integer, got {raw!r}")
    if value < 0:
        sys.exit(f"Environment variable {name} must not be negative, got {value}")
    return value

@dataclass(frozen=True)
class CacheConfig:
    default_capacity: int = read_int("CACHE_DEFAULT_CAPACITY", 1000)
    log_level: str = os.getenv("CACHE_LOG_LEVEL", "WARNING").upper()

@dataclass(frozen=True)
class Config:
    cache: CacheConfig = field(default_factory=CacheConfig)

config: Config = Config()
