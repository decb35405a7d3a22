"""
HTTP API adapter for XMLPrompter.

Architectural role:
- Expose prompt rendering, validation, enrichment and the static catalogues
  over JSON HTTP endpoints.
- Enforce adapter-level input validation and caller tier resolution.
- Delegate rendering to `xmlprompter.prompting` and enrichment to
  `xmlprompter.core.enrichment.enrich_prompt`.

Endpoint responsibilities:
- `GET /api/health`: liveness probe with a UTC timestamp.
- `POST /api/prompts/enrich`: validate input, resolve tier, call the
  enrichment pipeline, map upstream failure to a fallback payload.
- `POST /api/prompts/generate` / `POST /api/prompts/validate`: pure
  rendering and validation against the model registry.
- `GET /api/models`, `/api/enrichment/instruction`, `/api/roles`,
  `/api/goals`, `/api/templates`: read-only catalogue access.

API request lifecycle (`POST /api/prompts/enrich`):
1. Parse request JSON into `EnrichmentRequest`.
2. Reject requests missing `task` or `role` with HTTP 400.
3. Verify the optional bearer token and resolve the tier.
4. Run `enrich_prompt` off the event loop (it blocks on HTTP I/O).
5. Return the result, or HTTP 500 with the fallback prompt.

Error handling strategy:
- Explicit validation failures return structured HTTP 400 JSON responses.
- Unknown models on `generate` map `ConfigurationError` to HTTP 400.
- Enrichment failures arrive as `EnrichmentUnavailableError` and map to 500.
- Unexpected exceptions are not globally wrapped in this module.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Emits request debug logs only when `DEBUG == "true"`.
"""

from dotenv import load_dotenv

load_dotenv()

import asyncio
import logging
import math
import os
from dataclasses import dataclass
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from xmlprompter.api.auth import get_user_from_header, resolve_tier
from xmlprompter.core.enrichment import EnrichmentUnavailableError, enrich_prompt
from xmlprompter.core.enrichment_types import EnrichmentRequest
from xmlprompter.library.roles import (
    ROLES,
    get_all_goals,
    get_categories,
    get_goal_by_id,
    get_role_objects_for_goal,
)
from xmlprompter.library.templates import (
    TEMPLATE_CATEGORIES,
    filter_templates,
    get_popular_tags,
    get_template_by_id,
)
from xmlprompter.prompting.enrichment_levels import (
    DEFAULT_ENRICHMENT_LEVEL,
    generate_enrichment_instruction,
)
from xmlprompter.prompting.generator import ConfigurationError, generate_prompt
from xmlprompter.prompting.model_registry import DEFAULT_MODEL, list_models
from xmlprompter.prompting.prompt_types import FormData
from xmlprompter.prompting.validator import validate_prompt


logger = logging.getLogger(__name__)

# Request debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"

MISSING_FIELDS_ERROR = "Missing required fields: task and role are required"
ENRICHMENT_UNAVAILABLE_ERROR = "Enhancement service temporarily unavailable"
INVALID_LEVEL_ERROR = "Enrichment level must be a finite number"


@dataclass(frozen=True)
class ServerConfig:
    """Runtime configuration for `run()`.

    Relevant environment variables:
        - `HOST`
        - `PORT`
        - `DEBUG`
    """

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))
    debug: bool = os.getenv("DEBUG") == "true"


app = FastAPI(title="XMLPrompter")


# ============================================================
# Request Schema
# ============================================================

class PromptRequest(BaseModel):
    """Body of `generate` and `validate`: form fields plus model selection."""

    role: str | None = None
    task: str | None = None
    context: str | None = None
    requirements: str | None = None
    style: str | None = None
    output: str | None = None
    modelId: str | None = None
    format: str | None = None

    def form_data(self) -> FormData:
        return FormData(
            role=self.role,
            task=self.task,
            context=self.context,
            requirements=self.requirements,
            style=self.style,
            output=self.output,
        )


# ============================================================
# Health
# ============================================================

@app.get("/api/health")
def health():
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return {"status": "ok", "timestamp": timestamp.replace("+00:00", "Z")}


# ============================================================
# Enrichment
# ============================================================

@app.post("/api/prompts/enrich")
async def enrich(request: Request):
    """
    Enrich a prompt through the configured LLM.

    Input validation behavior:
    - Malformed JSON and non-object bodies are treated as empty.
    - Missing `task` or `role` -> HTTP 400.

    Tier resolution:
    - `Authorization: Bearer <jwt>` is optional; unverifiable tokens fall back
      to an anonymous caller instead of failing the request.

    Error handling strategy:
    - Upstream failure -> HTTP 500 with `error` and a deterministic
      `fallback` result.
    """
    try:
        body = await request.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    enrichment_request = EnrichmentRequest.from_payload(body)

    if enrichment_request.missing_required():
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})

    claims = get_user_from_header(request.headers.get("authorization"))
    tier = resolve_tier(claims, enrichment_request.user_tier)

    if DEBUG:
        logger.debug(
            "Enrich request authenticated=%s tier=%s level=%s",
            claims is not None,
            tier,
            enrichment_request.enrichment_level,
        )

    try:
        result = await asyncio.to_thread(enrich_prompt, enrichment_request, tier)
    except EnrichmentUnavailableError as err:
        return JSONResponse(
            status_code=500,
            content={
                "error": ENRICHMENT_UNAVAILABLE_ERROR,
                "fallback": err.fallback.to_dict(),
            },
        )

    return result.to_dict()


@app.get("/api/enrichment/instruction")
def enrichment_instruction(level: float | None = None):
    if level is None:
        level = DEFAULT_ENRICHMENT_LEVEL
    if not math.isfinite(level):
        return JSONResponse(status_code=400, content={"error": INVALID_LEVEL_ERROR})
    return {"level": level, "instruction": generate_enrichment_instruction(level)}


# ============================================================
# Rendering and Validation
# ============================================================

@app.post("/api/prompts/generate")
def generate(body: PromptRequest):
    """
    Render the form for one model.

    Input validation behavior:
    - Missing `modelId` -> HTTP 400.
    - Unknown `modelId` -> HTTP 400 (`Unknown model: <id>`).
    - Unknown `format` falls back to the structured renderer.
    """
    if not body.modelId:
        return JSONResponse(status_code=400, content={"error": "No model provided"})

    try:
        result = generate_prompt(body.form_data(), body.modelId, body.format)
    except ConfigurationError as err:
        return JSONResponse(status_code=400, content={"error": str(err)})

    return result.to_dict()


@app.post("/api/prompts/validate")
def validate(body: PromptRequest):
    return validate_prompt(body.form_data(), body.modelId).to_dict()


# ============================================================
# Catalogues
# ============================================================

@app.get("/api/models")
def models():
    return {
        "default": DEFAULT_MODEL,
        "models": [model.to_summary() for model in list_models()],
    }


@app.get("/api/roles")
def roles():
    return {
        "categories": get_categories(),
        "roles": [role.to_dict() for role in ROLES],
    }


@app.get("/api/goals")
def goals():
    return {"goals": [goal.to_dict() for goal in get_all_goals()]}


@app.get("/api/goals/{goal_id}/roles")
def goal_roles(goal_id: str):
    if get_goal_by_id(goal_id) is None:
        return JSONResponse(status_code=404, content={"error": "Goal not found"})
    return {
        "goal": goal_id,
        "roles": [role.to_dict() for role in get_role_objects_for_goal(goal_id)],
    }


@app.get("/api/templates")
def templates(
    category: str | None = None,
    tag: str | None = None,
    q: str | None = None,
    tier: str | None = None,
):
    selected = filter_templates(category=category, tag=tag, query=q, tier=tier)
    return {
        "categories": [item.to_dict() for item in TEMPLATE_CATEGORIES],
        "popularTags": get_popular_tags(),
        "templates": [template.to_dict() for template in selected],
    }


@app.get("/api/templates/{template_id}")
def template_detail(template_id: str):
    template = get_template_by_id(template_id)
    if template is None:
        return JSONResponse(status_code=404, content={"error": "Template not found"})
    return template.to_dict()


# ============================================================
# Server Entry
# ============================================================

def run(config: ServerConfig | None = None):
    """Serve `app` with uvicorn; blocks until shutdown."""
    import uvicorn

    config = config or ServerConfig()
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting XMLPrompter API on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)
