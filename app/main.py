import gradio as gr
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api.routes import router
from .constants.environmental_variables import CORS_ORIGINS, ENABLE_UI
from .core.lifespan import lifespan
from .core.logging import setup_logging
from .ui import create_gradio_app

setup_logging()


def create_app(enable_ui: bool = ENABLE_UI) -> FastAPI:
    app = FastAPI(
        title="SayRight API",
        description="Pronunciation trainer API. Transcribes speech, scores it against a reference text and returns per-word feedback.",
        version="2.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    if enable_ui:
        # Gradio wraps the app lifespan with its own.
        app = gr.mount_gradio_app(app, create_gradio_app(), path="/ui")

    return app


app = create_app()
