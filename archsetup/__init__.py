"""archsetup — post-archinstall setup wizard"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("archsetup")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "archsetup"
