"""gomvc scaffolder -- creates and removes a Go (Gin) MVC project skeleton.

Quick usage::

    from gomvc.scaffolder import ProjectGenerator, decommission

    generator = ProjectGenerator()
    result = generator.provision("/tmp/p1", "example.com/u/p1")
    decommission("/tmp/p1")
"""

from gomvc.scaffolder.generator import (
    DIRECTORIES,
    FILES,
    TOP_LEVEL_NAMES,
    ProjectGenerator,
    ProvisionResult,
    ScaffoldFile,
    provision,
)
from gomvc.scaffolder.initializer import (
    CommandModuleInitializer,
    InitOutcome,
    ModuleInitializer,
)
from gomvc.scaffolder.teardown import DecommissionResult, decommission
from gomvc.scaffolder.templates import TemplateRenderer

__all__ = [
    "CommandModuleInitializer",
    "DIRECTORIES",
    "DecommissionResult",
    "FILES",
    "InitOutcome",
    "ModuleInitializer",
    "ProjectGenerator",
    "ProvisionResult",
    "ScaffoldFile",
    "TOP_LEVEL_NAMES",
    "TemplateRenderer",
    "decommission",
    "provision",
]
