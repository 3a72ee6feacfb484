import importlib.metadata

from .config import SERVICE_NAME

VERSION = "unknown"
BUILD_TIME = "unknown"
GIT_COMMIT = "unknown"

try:
	VERSION = importlib.metadata.version(SERVICE_NAME)
except importlib.metadata.PackageNotFoundError:
	pass


def get_version_info() -> dict[str, str]:
	return {
		"version": VERSION,
		"build_time": BUILD_TIME,
		"git_commit": GIT_COMMIT,
	}
