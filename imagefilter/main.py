from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from imagefilter.api.v1 import filtered_image, root
from imagefilter.auth import require_auth
from imagefilter.config import Settings, get_settings
from imagefilter.errors import register_error_handlers
from imagefilter.services.image_filter import FilterService
from imagefilter.utils.paths import ensure_dirs


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    filter_service = FilterService(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.REQUIRE_AUTH and not settings.JWT_SECRET:
            raise RuntimeError("JWT_SECRET must be set when REQUIRE_AUTH is enabled")
        ensure_dirs(settings.TMP_DIR)
        print(f"[startup] {settings.APP_NAME}: auth={'on' if settings.REQUIRE_AUTH else 'off'}, tmp={settings.TMP_DIR}")
        yield
        filter_service.shutdown()

    app = FastAPI(title=settings.APP_NAME, version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.filter_service = filter_service

    app.add_middleware(CORSMiddleware, allow_origins=settings.cors_origins, allow_credentials=True,
                       allow_methods=["*"], allow_headers=["*"])
    register_error_handlers(app)

    protected = [Depends(require_auth)] if settings.REQUIRE_AUTH else []
    app.include_router(root.router)
    app.include_router(filtered_image.router, dependencies=protected)
    return app


app = create_app()


def run():
    settings = get_settings()
    print(f"server running http://localhost:{settings.PORT}")
    print("press CTRL+C to stop server")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
