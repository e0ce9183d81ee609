from __future__ import annotations

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from plugin_skeleton.api.schemas_options import EndpointResponse
from plugin_skeleton.options.sanitizers import sanitize_text_field


def build_endpoint_router(namespace: str) -> APIRouter:
    """
    Sample REST endpoint under /<namespace>/endpoint, e.g. /plugin-name/v1/endpoint?arg=test.

    The namespace is a vendor/version prefix so two extensions can ship routes
    with the same name.
    """
    router = APIRouter(prefix=f"/{namespace.strip('/')}", tags=["endpoint"])

    @router.get("/endpoint", response_model=EndpointResponse)
    async def endpoint(arg: Optional[str] = None):
        if not arg:
            # error body is returned as-is, not wrapped in {"detail": ...}
            return JSONResponse(
                status_code=400,
                content={
                    "code": "rest_invalid_param",
                    "message": "arg must be a non-empty string",
                    "data": {"status": 400},
                },
            )
        return EndpointResponse(success=True, data={"arg": sanitize_text_field(arg)})

    return router
