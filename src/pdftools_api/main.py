import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from pdftools_api.routers import pdf
from pdftools_core.logging import build_logger
from pdftools_core.models import PdfToolsConfig, PdfToolsServerConfig
from pdftools_core.services import PdfProcessor


def create_app(
    server_config: PdfToolsServerConfig = None,
    tools_config: PdfToolsConfig = None,
) -> FastAPI:
    """Build the HTTP service. Configuration is loaded from the environment when omitted."""
    server_config = server_config or PdfToolsServerConfig()
    tools_config = tools_config or PdfToolsConfig()

    logger = build_logger('pdftools.api', tools_config, stream=sys.stdout)

    app = FastAPI(title='PDF tools')
    app.state.server_config = server_config
    app.state.tools_config = tools_config
    app.state.processor = PdfProcessor(config=tools_config, logger=logger)

    @app.get('/health', response_class=PlainTextResponse)
    def health() -> str:
        return 'ok'

    app.include_router(pdf.router)

    return app


def configure_uvicorn_logging(logger: logging.Logger):
    """Configure Uvicorn's loggers to use the same handlers without duplication."""
    for uvicorn_logger_name in ['uvicorn', 'uvicorn.error', 'uvicorn.access']:
        uvicorn_logger = logging.getLogger(uvicorn_logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = False
        uvicorn_logger.setLevel(logger.level)
        for handler in logger.handlers:
            uvicorn_logger.addHandler(handler)


def run():
    """Entry point for the HTTP service."""
    server_config = PdfToolsServerConfig()
    app = create_app(server_config)

    logger = logging.getLogger('pdftools.api')
    configure_uvicorn_logging(logger)

    logger.info(f'Starting PDF tools server on {server_config.host}:{server_config.port}')
    uvicorn.run(
        app, host=server_config.host, port=server_config.port, log_config=None
    )
