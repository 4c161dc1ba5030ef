from .catalog import APP_CATALOG, ADVISORY, CandidateSpec, build_apps
from .prober import detect_installed_apps, first_existing, path_exists
