"""Core / service layer — project resolution, naming, and pure planning.

Rules
-----
* No ``print()`` calls.
* Filesystem and process access only through the protocols in
  :mod:`rn_boilerplate.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from rn_boilerplate.core.manifest import FRAMEWORK_DEPENDENCY_KEY, is_framework_project
from rn_boilerplate.core.models import (
    AssetTarget,
    DeviceInfo,
    IconColors,
    IosDevices,
    ModuleSpec,
    ProjectIdentity,
)
from rn_boilerplate.core.naming import to_manifest_safe, validate_project_name
from rn_boilerplate.core.project_service import ProjectService
from rn_boilerplate.core.protocols import CommandRunner, ProjectStore

__all__: list[str] = [
    "FRAMEWORK_DEPENDENCY_KEY",
    "AssetTarget",
    "CommandRunner",
    "DeviceInfo",
    "IconColors",
    "IosDevices",
    "ModuleSpec",
    "ProjectIdentity",
    "ProjectService",
    "ProjectStore",
    "is_framework_project",
    "to_manifest_safe",
    "validate_project_name",
]
