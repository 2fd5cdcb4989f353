"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, npm / npx,
platform device tools, and Pillow.  Every raw ``OSError``,
``json`` or ``subprocess`` exception must be caught here and re-raised
as a :class:`~rn_boilerplate.exceptions.RnBoilerplateError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from rn_boilerplate.infra.device_provider import AndroidDeviceProvider, IosDeviceProvider
from rn_boilerplate.infra.manifest_store import JsonManifestStore
from rn_boilerplate.infra.process_runner import SubprocessRunner
from rn_boilerplate.infra.tool_detector import ToolStatus, detect_tool

__all__: list[str] = [
    "AndroidDeviceProvider",
    "IosDeviceProvider",
    "JsonManifestStore",
    "SubprocessRunner",
    "ToolStatus",
    "detect_tool",
]
