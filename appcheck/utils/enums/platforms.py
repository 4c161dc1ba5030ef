from enum import Enum

class HostPlatform(Enum):
    MAC = "mac"
    WINDOWS = "windows"
    LINUX = "linux"
    OTHER = "other"
