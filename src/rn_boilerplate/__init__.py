"""rn-boilerplate — scaffolding CLI for the React Native starter kit.

Creates projects from the bundled template and manages an existing
project's optional modules, icons, caches, and test devices.
"""

from rn_boilerplate.version import __version__

__all__: list[str] = ["__version__"]
