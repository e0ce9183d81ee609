from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

@router.get("/")
def root(request: Request):
    cfg = request.app.state.settings
    return {"service": cfg.plugin_slug, "version": cfg.plugin_version}

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/ready")
def ready():
    return {"ready": True}
