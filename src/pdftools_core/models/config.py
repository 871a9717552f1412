from typing import Literal, Optional

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base class for configuration values."""

    pass


class PdfToolsConfig(BaseConfig):
    """Configuration values for PDF operations. All env variables must start with pdftools_"""

    logging_level: Optional[int] = logging.INFO
    """The logging level. Default "logging.INFO"."""

    logging_file: Optional[str] = None
    """The log file path. Specify to save logs to file. Default "None"."""

    theme: Optional[Literal['light', 'dark']] = None
    """The console theme to use. Set to 'light' for light terminals or 'dark' for dark terminals. Default None (auto-detect)."""

    validation_mode: Literal['strict', 'relaxed'] = 'relaxed'
    """How strictly documents are validated when opened. With 'strict' documents that needed repairs are rejected. Default 'relaxed'."""

    temp_dir: Optional[str] = None
    """Directory for temporary files created by split operations. Default None (system temporary directory)."""

    remove_metadata: bool = True
    """Clear document metadata when compressing. Default True."""

    model_config = SettingsConfigDict(
        env_prefix='pdftools_',
        env_file='.env',
        extra='ignore',
    )


class PdfToolsServerConfig(BaseConfig):
    """Configuration values for the HTTP service. All env variables must start with pdftools_http_"""

    host: str = '0.0.0.0'
    """The interface the HTTP service binds to. Default '0.0.0.0'."""

    port: int = 8080
    """The port the HTTP service listens on. Default 8080."""

    max_upload_size: int = 200 * 1024 * 1024
    """Maximum accepted upload size in bytes. Default 200 MiB."""

    model_config = SettingsConfigDict(
        env_prefix='pdftools_http_', env_file='.env', extra='ignore'
    )


class PdfToolsMcpConfig(BaseConfig):
    """Configuration values for the tool server. All env variables must start with pdftools_mcp_"""

    server_name: str = 'pdftools'
    """The name announced to clients during initialization. Default 'pdftools'."""

    transport: Literal['stdio', 'sse', 'streamable-http'] = 'stdio'
    """The transport used to serve tool calls. Default 'stdio'."""

    model_config = SettingsConfigDict(
        env_prefix='pdftools_mcp_', env_file='.env', extra='ignore'
    )
