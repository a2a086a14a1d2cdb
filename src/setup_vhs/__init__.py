"""setup-vhs — install VHS on a CI runner and optionally record a tape.

Prepares fonts, system dependencies, PATH and terminal environment for
the VHS terminal recorder, then runs a user-supplied tape file.
"""

from setup_vhs.version import __version__

__all__: list[str] = ["__version__"]
