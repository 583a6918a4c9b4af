"""Artifact model and the inline templates for synthesized artifacts.

Only the controller comes from an external stub.  Every other file in a
feature slice is described here by an ``ArtifactDescriptor`` (kind, layer,
inline template) and rendered through the same placeholder substitution as
the controller stubs.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from .naming import (
    LAYER_MODELS,
    LAYER_REPOSITORIES,
    LAYER_REQUESTS,
    LAYER_SERVICES,
    LAYER_TESTS,
)


class Artifact(BaseModel):
    """One generated file: a path relative to the app directory plus content."""

    model_config = ConfigDict(frozen=True)

    kind: str
    path: str
    content: str

    @property
    def label(self) -> str:
        """Human-readable label used in progress output (``"service interface file"``)."""
        return f"{self.kind.replace('_', ' ')} file"


@dataclass(frozen=True)
class ArtifactDescriptor:
    """Static description of a synthesized artifact."""

    kind: str
    layer: str
    source: str


# ---------------------------------------------------------------------------
# Inline templates
# ---------------------------------------------------------------------------

MODEL_TEMPLATE = r"""<?php

namespace {{ namespace }};

use Illuminate\Database\Eloquent\Factories\HasFactory;
use Illuminate\Database\Eloquent\Model;

class {{ class }} extends Model
{
    use HasFactory;
}
"""

REPOSITORY_TEMPLATE = r"""<?php

namespace {{ namespace }};

use {{ rootNamespace }}Repositories\BaseRepository;
use {{ namespacedModel }};

class {{ class }} extends BaseRepository
{
    public function __construct({{ model }} $model)
    {
        parent::__construct($model);
    }
}
"""

REPOSITORY_INTERFACE_TEMPLATE = r"""<?php

namespace {{ namespace }};

use {{ rootNamespace }}Repositories\BaseRepositoryInterface;

interface {{ class }} extends BaseRepositoryInterface
{
    // Add {{ class }}-specific methods here
}
"""

SERVICE_TEMPLATE = r"""<?php

namespace {{ namespace }};

use {{ namespacedRepository }};
use {{ rootNamespace }}Services\Layers\BaseService;

class {{ class }} extends BaseService
{
    public function __construct({{ repository }} $repository)
    {
        parent::__construct($repository);
    }
}
"""

SERVICE_INTERFACE_TEMPLATE = r"""<?php

namespace {{ namespace }};

use {{ rootNamespace }}Services\Layers\BaseServiceInterface;

interface {{ class }} extends BaseServiceInterface
{
    // Add {{ class }}-specific methods here
}
"""

REQUEST_TEMPLATE = r"""<?php

namespace {{ namespace }};

use Illuminate\Foundation\Http\FormRequest;

class {{ class }} extends FormRequest
{
    public function authorize()
    {
        return true;
    }

    public function rules()
    {
        return [
            // Define the validation rules for {{ class }} here
        ];
    }
}
"""

TEST_CLASS_TEMPLATE = r"""<?php

namespace {{ namespace }};

{{ imports }}use Tests\TestCase;

class {{ class }} extends TestCase
{
{{ methods }}
}
"""

TEST_METHOD_TEMPLATE = r"""    /**
     * {{ summary }}
     *
     * @return void
     */
    public function {{ method }}()
    {
        {{ body }}
    }
"""

CRUD_ACTIONS: tuple[str, ...] = ("index", "store", "show", "update", "destroy")

SMOKE_METHOD = "testExample"
SMOKE_SUMMARY = "A basic test example."
SMOKE_BODY = "$this->assertTrue(true);"
CRUD_BODY = "// TODO: Implement test"


# ---------------------------------------------------------------------------
# Descriptors (planner order)
# ---------------------------------------------------------------------------

MODEL = ArtifactDescriptor("model", LAYER_MODELS, MODEL_TEMPLATE)
REPOSITORY = ArtifactDescriptor("repository", LAYER_REPOSITORIES, REPOSITORY_TEMPLATE)
REPOSITORY_INTERFACE = ArtifactDescriptor(
    "repository_interface", LAYER_REPOSITORIES, REPOSITORY_INTERFACE_TEMPLATE
)
SERVICE = ArtifactDescriptor("service", LAYER_SERVICES, SERVICE_TEMPLATE)
SERVICE_INTERFACE = ArtifactDescriptor(
    "service_interface", LAYER_SERVICES, SERVICE_INTERFACE_TEMPLATE
)
STORE_REQUEST = ArtifactDescriptor("store_request", LAYER_REQUESTS, REQUEST_TEMPLATE)
UPDATE_REQUEST = ArtifactDescriptor("update_request", LAYER_REQUESTS, REQUEST_TEMPLATE)
PRIMARY_TEST = ArtifactDescriptor("test", LAYER_TESTS, TEST_CLASS_TEMPLATE)
CONTROLLER_TEST = ArtifactDescriptor("controller_test", LAYER_TESTS, TEST_CLASS_TEMPLATE)
MODEL_TEST = ArtifactDescriptor("model_test", LAYER_TESTS, TEST_CLASS_TEMPLATE)

SOURCE_DESCRIPTORS: tuple[ArtifactDescriptor, ...] = (
    MODEL,
    REPOSITORY,
    REPOSITORY_INTERFACE,
    SERVICE,
    SERVICE_INTERFACE,
    STORE_REQUEST,
    UPDATE_REQUEST,
)
