from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weibull_quantile import __version__
from weibull_quantile.config import settings
from weibull_quantile.routers.quantile import router as quantile_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Weibull Quantile",
        version=__version__,
        description="Elementwise Weibull quantile evaluation over numbers, arrays and matrices",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(quantile_router)

    @app.get("/health")
    def health():
        return {"ok": True, "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
