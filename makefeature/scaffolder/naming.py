"""Naming derivation for a feature slice.

Every namespace, class name and cross-reference used by the generated files
comes from a single ``NamingSet`` derived from the raw feature name.  The
derivation is pure: the feature name is used verbatim as the PascalCase root
and suffixes are appended without any collision check, so ``UserRepository``
yields ``UserRepositoryRepository``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Layer names and class suffixes
# ---------------------------------------------------------------------------

FEATURES_SEGMENT = "Features"

# Joined with the namespace separator when no explicit test root is given.
TEST_NAMESPACE_SEGMENTS: tuple[str, ...] = ("Tests", "Feature")

LAYER_CONTROLLERS = "Controllers"
LAYER_MODELS = "Models"
LAYER_REPOSITORIES = "Repositories"
LAYER_SERVICES = "Services"
LAYER_REQUESTS = "Requests"
LAYER_TESTS = "Tests"

# Directory set created under every feature root.
FEATURE_DIRECTORIES: tuple[str, ...] = (
    LAYER_CONTROLLERS,
    LAYER_REQUESTS,
    LAYER_SERVICES,
    LAYER_REPOSITORIES,
    LAYER_MODELS,
    LAYER_TESTS,
)

CLASS_SUFFIXES: dict[str, str] = {
    "controller": "Controller",
    "model": "",
    "repository": "Repository",
    "repository_interface": "RepositoryInterface",
    "service": "Service",
    "service_interface": "ServiceInterface",
    "store_request": "StoreRequest",
    "update_request": "UpdateRequest",
    "test": "Test",
    "controller_test": "ControllerTest",
    "model_test": "ModelTest",
}


# ---------------------------------------------------------------------------
# NamingSet
# ---------------------------------------------------------------------------


class NamingSet(BaseModel):
    """Immutable bundle of every identifier derived from one feature name."""

    model_config = ConfigDict(frozen=True)

    feature_name: str
    separator: str

    root_namespace: str
    feature_namespace: str
    controller_namespace: str
    model_namespace: str
    repository_namespace: str
    service_namespace: str
    request_namespace: str
    test_namespace: str

    controller_class: str
    model_class: str
    repository_class: str
    repository_interface: str
    service_class: str
    service_interface: str
    store_request: str
    update_request: str
    test_class: str
    controller_test_class: str
    model_test_class: str

    namespaced_model: str
    namespaced_repository: str
    namespaced_repository_interface: str
    namespaced_service: str
    namespaced_service_interface: str

    model_variable: str

    def class_names(self) -> dict[str, str]:
        """Map artifact kind -> class name, keyed like ``CLASS_SUFFIXES``."""
        return {
            "controller": self.controller_class,
            "model": self.model_class,
            "repository": self.repository_class,
            "repository_interface": self.repository_interface,
            "service": self.service_class,
            "service_interface": self.service_interface,
            "store_request": self.store_request,
            "update_request": self.update_request,
            "test": self.test_class,
            "controller_test": self.controller_test_class,
            "model_test": self.model_test_class,
        }

    def controller_substitutions(self) -> dict[str, str]:
        """Placeholder values recognised by controller stubs."""
        return {
            "namespace": self.controller_namespace,
            "namespacedModel": self.namespaced_model,
            "rootNamespace": self.root_namespace,
            "class": self.controller_class,
            "storeRequest": self.store_request,
            "updateRequest": self.update_request,
            "service": self.service_class,
            "model": self.model_class,
            "modelVariable": self.model_variable,
            "featureName": self.feature_name,
        }

    def context(self) -> dict[str, str]:
        """Full placeholder map for synthesized artifacts.

        A superset of :meth:`controller_substitutions`; the ``namespace`` key
        is left out because every synthesized artifact supplies its own.
        """
        ctx = {
            key: value
            for key, value in self.controller_substitutions().items()
            if key != "namespace"
        }
        ctx.update({
            "controllerNamespace": self.controller_namespace,
            "modelNamespace": self.model_namespace,
            "repositoryNamespace": self.repository_namespace,
            "serviceNamespace": self.service_namespace,
            "requestNamespace": self.request_namespace,
            "testNamespace": self.test_namespace,
            "repository": self.repository_class,
            "repositoryInterface": self.repository_interface,
            "serviceInterface": self.service_interface,
            "namespacedRepository": self.namespaced_repository,
            "namespacedRepositoryInterface": self.namespaced_repository_interface,
            "namespacedService": self.namespaced_service,
            "namespacedServiceInterface": self.namespaced_service_interface,
            "testClass": self.test_class,
            "controllerTestClass": self.controller_test_class,
            "modelTestClass": self.model_test_class,
        })
        return ctx


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------


def lower_first(value: str) -> str:
    """Lowercase only the first character: ``OrderItem`` -> ``orderItem``."""
    return value[:1].lower() + value[1:]


def qualify(separator: str, *parts: str) -> str:
    """Join non-empty namespace parts with *separator*."""
    return separator.join(p for p in parts if p)


def derive(
    feature_name: str,
    *,
    root_namespace: str = "App",
    test_namespace_root: str | None = None,
    separator: str = "\\",
) -> NamingSet:
    """Derive the complete ``NamingSet`` for *feature_name*.

    Pure and total: the same arguments always produce an equal result and no
    validation of *feature_name* is attempted.

    Args:
        feature_name: Raw feature name, used verbatim.
        root_namespace: Application root namespace (``App``).  May be empty.
        test_namespace_root: Root under which test namespaces live (default
            ``Tests<sep>Feature``, joined with *separator*); it is a
            separate tree, not nested below ``Features``.
        separator: Namespace separator of the generated language.
    """
    if test_namespace_root is None:
        test_namespace_root = separator.join(TEST_NAMESPACE_SEGMENTS)
    feature_ns = qualify(separator, root_namespace, FEATURES_SEGMENT, feature_name)
    model_ns = qualify(separator, feature_ns, LAYER_MODELS)
    repository_ns = qualify(separator, feature_ns, LAYER_REPOSITORIES)
    service_ns = qualify(separator, feature_ns, LAYER_SERVICES)

    names = {kind: f"{feature_name}{suffix}" for kind, suffix in CLASS_SUFFIXES.items()}

    return NamingSet(
        feature_name=feature_name,
        separator=separator,
        root_namespace=f"{root_namespace}{separator}" if root_namespace else "",
        feature_namespace=feature_ns,
        controller_namespace=qualify(separator, feature_ns, LAYER_CONTROLLERS),
        model_namespace=model_ns,
        repository_namespace=repository_ns,
        service_namespace=service_ns,
        request_namespace=qualify(separator, feature_ns, LAYER_REQUESTS),
        test_namespace=qualify(separator, test_namespace_root, feature_name),
        controller_class=names["controller"],
        model_class=names["model"],
        repository_class=names["repository"],
        repository_interface=names["repository_interface"],
        service_class=names["service"],
        service_interface=names["service_interface"],
        store_request=names["store_request"],
        update_request=names["update_request"],
        test_class=names["test"],
        controller_test_class=names["controller_test"],
        model_test_class=names["model_test"],
        namespaced_model=qualify(separator, model_ns, names["model"]),
        namespaced_repository=qualify(separator, repository_ns, names["repository"]),
        namespaced_repository_interface=qualify(
            separator, repository_ns, names["repository_interface"]
        ),
        namespaced_service=qualify(separator, service_ns, names["service"]),
        namespaced_service_interface=qualify(
            separator, service_ns, names["service_interface"]
        ),
        model_variable=lower_first(feature_name),
    )
