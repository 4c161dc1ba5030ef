from .platforms import HostPlatform
