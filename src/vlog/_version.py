"""
Version information for vlog.

This file is the canonical source for version numbers.
The __version__ string carries build metadata after the base version
(branch, build number, date, commit hash) when produced by a build.

Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", etc.

__version__ = "0.1.0-beta_main_1-20261018-3f2c9e1"
__app_name__ = "vlog"


def get_version():
    """Return the full version string including branch and build info."""
    return __version__


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    if "_" in __version__:
        return __version__.split("_")[0]
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


VERSION = get_version()
BASE_VERSION = get_base_version()
