from .appcheck_config import AppCheckConfig, get_default_config
