from __future__ import annotations

from fastapi import FastAPI

from ..api.routes import page, stations


def create_app() -> FastAPI:
    app = FastAPI(title="Citi Bike Station Map")
    app.include_router(page.router)
    app.include_router(stations.router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"status": "ok", "service": "stationmap"}

    return app


app = create_app()
