from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from plugin_skeleton.api.routes_endpoint import build_endpoint_router  # noqa: E402
from plugin_skeleton.api.routes_health import router as health_router  # noqa: E402
from plugin_skeleton.api.routes_options import router as options_router  # noqa: E402
from plugin_skeleton.core.config import Settings, settings  # noqa: E402
from plugin_skeleton.core.log import configure_logging  # noqa: E402
from plugin_skeleton.db.session import build_engine, build_sessionmaker, create_tables  # noqa: E402
from plugin_skeleton.domain.options_service import ensure_default_options  # noqa: E402
from plugin_skeleton.options.groups import build_schema_registry  # noqa: E402
from plugin_skeleton.options.store import SqlOptionsStore  # noqa: E402
from plugin_skeleton.ui.routes_admin import router as admin_router  # noqa: E402
from plugin_skeleton.ui.routes_contact import router as contact_router  # noqa: E402


def create_app(app_settings: Settings | None = None) -> FastAPI:
    cfg = app_settings or settings
    configure_logging(cfg.log_level, json_output=cfg.app_env != "dev")

    engine = build_engine(cfg.database_url)
    session_factory = build_sessionmaker(engine)
    schemas = build_schema_registry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await create_tables(engine)
        async with session_factory() as session:
            await ensure_default_options(
                SqlOptionsStore(session),
                schemas.all(),
                option_name_for=cfg.option_name,
            )
        yield
        await engine.dispose()

    app = FastAPI(title="Plugin Skeleton", version=cfg.plugin_version, lifespan=lifespan)
    app.state.settings = cfg
    app.state.session_factory = session_factory
    app.state.schemas = schemas

    app.include_router(health_router)
    app.include_router(options_router)
    app.include_router(build_endpoint_router(cfg.rest_namespace))
    app.include_router(admin_router)
    app.include_router(contact_router)
    return app


app = create_app()
