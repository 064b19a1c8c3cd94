"""pathman - manage which executables are visible on $PATH."""

__version__ = "0.4.0"
__source__ = "https://github.com/sfkleach/pathman"
