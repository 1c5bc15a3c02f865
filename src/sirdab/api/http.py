# src/sirdab/api/http.py
from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from sirdab.adapters.config import AppConfig, config
from sirdab.adapters.identity import build_identity_provider
from sirdab.adapters.logging_utils import get_logger
from sirdab.adapters.storage import build_gateway
from sirdab.api.deps import get_config, get_gateway
from sirdab.api.routes import router
from sirdab.domain.ports import IdentityProvider, ListingGateway
from sirdab.services import seo

log = get_logger("sirdab.api")

XML_MEDIA_TYPE = "application/xml"


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        # clients expect 400 for malformed input
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        log.exception(
            "unhandled error",
            extra={"context": {"method": request.method, "path": request.url.path}},
        )
        return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def _install_site_routes(app: FastAPI) -> None:
    @app.get("/health")
    def health(cfg: AppConfig = Depends(get_config)) -> dict[str, str]:
        return {"status": "ok", "env": cfg.ENV, "storage": cfg.STORAGE_BACKEND}

    @app.get("/robots.txt", response_class=PlainTextResponse)
    def robots(cfg: AppConfig = Depends(get_config)) -> str:
        return seo.robots_txt(cfg.SITE_URL)

    @app.get("/sitemap.xml")
    def sitemap(cfg: AppConfig = Depends(get_config)) -> Response:
        return Response(content=seo.sitemap_index(cfg.SITE_URL), media_type=XML_MEDIA_TYPE)

    @app.get("/sitemap-0.xml")
    def sitemap_page(
        cfg: AppConfig = Depends(get_config),
        gateway: ListingGateway = Depends(get_gateway),
    ) -> Response:
        body = seo.sitemap_urls(cfg.SITE_URL, gateway.list_public_ads(), gateway.list_cities())
        return Response(content=body, media_type=XML_MEDIA_TYPE)


def create_app(
    gateway: ListingGateway | None = None,
    identity: IdentityProvider | None = None,
    cfg: AppConfig | None = None,
) -> FastAPI:
    """
    Build the API. Tests pass their own gateway/identity; in production both
    come from the environment (see AppConfig).
    """
    cfg = cfg or config
    app = FastAPI(title="Sirdab API")

    app.state.config = cfg
    app.state.gateway = gateway if gateway is not None else build_gateway(cfg)
    app.state.identity = identity if identity is not None else build_identity_provider(cfg)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _install_error_handlers(app)
    _install_site_routes(app)
    app.include_router(router)
    return app


app = create_app()
