"""Artifact planning for a feature slice.

Combines the naming derivation, the controller variant and the template
renderer into the full, ordered list of files for one feature.  Planning is
synchronous and all-or-nothing: a missing controller stub aborts the plan
before any artifact is returned.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from makefeature.config import Config
from makefeature.errors import DuplicateArtifactError

from .artifacts import (
    CONTROLLER_TEST,
    CRUD_ACTIONS,
    CRUD_BODY,
    MODEL_TEST,
    PRIMARY_TEST,
    SMOKE_BODY,
    SMOKE_METHOD,
    SMOKE_SUMMARY,
    SOURCE_DESCRIPTORS,
    TEST_METHOD_TEMPLATE,
    Artifact,
    ArtifactDescriptor,
)
from .naming import (
    LAYER_CONTROLLERS,
    LAYER_MODELS,
    LAYER_REPOSITORIES,
    LAYER_REQUESTS,
    LAYER_SERVICES,
    LAYER_TESTS,
    NamingSet,
    derive,
)
from .templates import TemplateRenderer
from .variants import ControllerVariant, TestShape, stub_key_for, test_shape_for


class ArtifactPlanner:
    """Builds the ordered artifact list for a feature.

    Attributes:
        renderer: Renders controller stubs and inline artifact templates.
        config: Supplies the namespace root, separator, directory names and
            file extension.
    """

    def __init__(self, renderer: TemplateRenderer, config: Config | None = None) -> None:
        self.renderer = renderer
        self.config = config or Config()

    # -- Public API --------------------------------------------------------

    def naming_for(self, feature_name: str) -> NamingSet:
        """Derive the ``NamingSet`` using this planner's configuration."""
        return derive(
            feature_name,
            root_namespace=self.config.root_namespace,
            test_namespace_root=self.config.test_namespace_root,
            separator=self.config.namespace_separator,
        )

    def plan(self, feature_name: str, variant: ControllerVariant) -> list[Artifact]:
        """Produce every artifact for *feature_name* with a *variant* controller.

        Order: controller, model, repository, repository interface, service,
        service interface, store request, update request, primary test,
        controller test, model test.

        Raises:
            TemplateNotFound: If the variant's controller stub is missing.
            DuplicateArtifactError: If two artifacts resolve to the same path.
        """
        naming = self.naming_for(feature_name)

        artifacts = [self._controller(naming, variant)]
        artifacts.extend(self._synthesize(naming, d) for d in SOURCE_DESCRIPTORS)
        artifacts.append(self._test(naming, PRIMARY_TEST, test_shape_for(variant)))
        artifacts.append(self._test(naming, CONTROLLER_TEST, TestShape.SMOKE))
        artifacts.append(self._test(naming, MODEL_TEST, TestShape.SMOKE))

        _check_unique(artifacts)
        return artifacts

    # -- Artifact builders -------------------------------------------------

    def _controller(self, naming: NamingSet, variant: ControllerVariant) -> Artifact:
        content = self.renderer.render(
            stub_key_for(variant), naming.controller_substitutions()
        )
        return Artifact(
            kind="controller",
            path=self._path(naming, LAYER_CONTROLLERS, naming.controller_class),
            content=content,
        )

    def _synthesize(self, naming: NamingSet, descriptor: ArtifactDescriptor) -> Artifact:
        class_name = naming.class_names()[descriptor.kind]
        context = {
            **naming.context(),
            "namespace": _layer_namespace(naming, descriptor.layer),
            "class": class_name,
        }
        return Artifact(
            kind=descriptor.kind,
            path=self._path(naming, descriptor.layer, class_name),
            content=self.renderer.render_string(descriptor.source, context),
        )

    def _test(
        self, naming: NamingSet, descriptor: ArtifactDescriptor, shape: TestShape
    ) -> Artifact:
        class_name = naming.class_names()[descriptor.kind]
        # Only the primary test imports the model.
        imports = f"use {naming.namespaced_model};\n" if descriptor is PRIMARY_TEST else ""
        context = {
            **naming.context(),
            "namespace": naming.test_namespace,
            "class": class_name,
            "imports": imports,
            "methods": self._test_methods(shape),
        }
        return Artifact(
            kind=descriptor.kind,
            path=self._path(naming, descriptor.layer, class_name),
            content=self.renderer.render_string(descriptor.source, context),
        )

    def _test_methods(self, shape: TestShape) -> str:
        if shape is TestShape.FULL_CRUD:
            methods = [
                self.renderer.render_string(TEST_METHOD_TEMPLATE, {
                    "summary": f"Test the {action} method.",
                    "method": f"test{action.capitalize()}",
                    "body": CRUD_BODY,
                })
                for action in CRUD_ACTIONS
            ]
        else:
            methods = [
                self.renderer.render_string(TEST_METHOD_TEMPLATE, {
                    "summary": SMOKE_SUMMARY,
                    "method": SMOKE_METHOD,
                    "body": SMOKE_BODY,
                })
            ]
        return "\n".join(methods).rstrip("\n")

    # -- Helpers -----------------------------------------------------------

    def _path(self, naming: NamingSet, layer: str, class_name: str) -> str:
        """Relative path ``Features/<F>/<Layer>/<Class><ext>``."""
        return str(PurePosixPath(
            self.config.features_dir,
            naming.feature_name,
            layer,
            f"{class_name}{self.config.file_extension}",
        ))


def _layer_namespace(naming: NamingSet, layer: str) -> str:
    return {
        LAYER_CONTROLLERS: naming.controller_namespace,
        LAYER_MODELS: naming.model_namespace,
        LAYER_REPOSITORIES: naming.repository_namespace,
        LAYER_SERVICES: naming.service_namespace,
        LAYER_REQUESTS: naming.request_namespace,
        LAYER_TESTS: naming.test_namespace,
    }[layer]


def _check_unique(artifacts: list[Artifact]) -> None:
    seen: set[str] = set()
    for artifact in artifacts:
        if artifact.path in seen:
            raise DuplicateArtifactError(artifact.path)
        seen.add(artifact.path)
