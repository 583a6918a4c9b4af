"""makefeature scaffolder -- generates a feature slice inside a Laravel app.

Takes a raw feature name and a controller variant and produces the
controller, model, repository, service, request and test files for the
feature, all sharing one derived set of namespaces and class names.

Quick usage::

    from makefeature.scaffolder import ControllerVariant, Scaffolder

    result = Scaffolder().scaffold("Order", ControllerVariant.API)
"""

from makefeature.scaffolder.artifacts import Artifact
from makefeature.scaffolder.filesystem import FileSystem, LocalFileSystem
from makefeature.scaffolder.naming import NamingSet, derive
from makefeature.scaffolder.planner import ArtifactPlanner
from makefeature.scaffolder.publish import publish_stubs
from makefeature.scaffolder.scaffolder import Scaffolder, ScaffoldResult
from makefeature.scaffolder.templates import TemplateRenderer
from makefeature.scaffolder.variants import (
    ControllerVariant,
    TestShape,
    stub_key_for,
    test_shape_for,
)

__all__ = [
    "Artifact",
    "ArtifactPlanner",
    "ControllerVariant",
    "FileSystem",
    "LocalFileSystem",
    "NamingSet",
    "ScaffoldResult",
    "Scaffolder",
    "TemplateRenderer",
    "TestShape",
    "derive",
    "publish_stubs",
    "stub_key_for",
    "test_shape_for",
]
