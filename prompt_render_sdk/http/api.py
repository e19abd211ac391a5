"""FastAPI HTTP endpoints for the Prompt Render SDK.

This module exposes provider discovery, rendering and payload validation
over REST. FastAPI is a core dependency of the package.
"""

from typing import Any, Dict, List

try:
    from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException
except ImportError:
    raise ImportError(
        "FastAPI is required for HTTP endpoints. "
        "Please reinstall with: pip install prompt-render-sdk"
    )

from pydantic import BaseModel, Field

from ..core.registry import ProviderNotFoundError, ProviderRegistry, get_default_registry
from ..core.rendering import PromptRenderer
from ..models.prompt import StructuredPrompt
from ..models.provider import ProviderConfiguration, ProviderInfo, ProviderRequirements
from ..models.render import ProviderPayload, RenderOptions, ValidationResult
from ..providers.errors import RenderError


class RenderRequest(BaseModel):
    """Body of the render endpoint."""
    structured: StructuredPrompt
    options: RenderOptions = Field(..., description="Render options; model is required")


# Create router instance
router = APIRouter()


def get_provider_registry() -> ProviderRegistry:
    """Registry dependency; override in tests or host applications."""
    return get_default_registry()


def _get_adapter(registry: ProviderRegistry, provider_id: str):
    try:
        return registry.get_adapter(provider_id)
    except ProviderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/providers", response_model=List[ProviderInfo])
async def list_providers(registry: ProviderRegistry = Depends(get_provider_registry)):
    """List all registered providers."""
    return registry.list_providers()


@router.get("/providers/{provider_id}/configuration", response_model=ProviderConfiguration)
async def get_provider_configuration(
    provider_id: str,
    registry: ProviderRegistry = Depends(get_provider_registry)
):
    """Descriptive configuration of one provider."""
    return _get_adapter(registry, provider_id).get_configuration()


@router.get("/models/{model}/providers", response_model=List[ProviderInfo])
async def providers_for_model(model: str, registry: ProviderRegistry = Depends(get_provider_registry)):
    """Providers that support a model."""
    return registry.supports_model(model)


@router.get("/models/{model}/best-provider", response_model=ProviderInfo)
async def best_provider_for_model(model: str, registry: ProviderRegistry = Depends(get_provider_registry)):
    """First registered provider that supports a model."""
    adapter = registry.find_best_provider(model)
    if adapter is None:
        raise HTTPException(status_code=404, detail=f"No registered provider supports model '{model}'")
    return ProviderInfo(
        id=adapter.id,
        name=adapter.name,
        supported_models=list(adapter.supported_models),
        default_model=adapter.get_default_options().model
    )


@router.post("/providers/recommendations", response_model=List[ProviderInfo])
async def recommend_providers(
    requirements: ProviderRequirements,
    registry: ProviderRegistry = Depends(get_provider_registry)
):
    """Providers whose capabilities satisfy the given requirements."""
    return registry.get_recommendations(requirements)


@router.post("/providers/{provider_id}/render", response_model=ProviderPayload)
async def render_prompt(
    provider_id: str,
    request: RenderRequest,
    registry: ProviderRegistry = Depends(get_provider_registry)
):
    """Render a structured prompt into the provider's payload."""
    renderer = PromptRenderer(registry)
    try:
        return renderer.render(request.structured, provider_id, request.options)
    except ProviderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RenderError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/providers/{provider_id}/validate", response_model=ValidationResult)
async def validate_payload(
    provider_id: str,
    payload: Dict[str, Any] = Body(...),
    registry: ProviderRegistry = Depends(get_provider_registry)
):
    """Re-validate a payload of unknown provenance; errors are returned, not raised."""
    return _get_adapter(registry, provider_id).validate(payload)


def create_app() -> FastAPI:
    """FastAPI application with the provider router mounted."""
    app = FastAPI(title="Prompt Render SDK")
    app.include_router(router)
    return app
