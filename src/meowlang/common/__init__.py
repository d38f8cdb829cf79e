from .config import Config, get_config
from .enum import IntEnum2
