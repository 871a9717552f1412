import logging
import tempfile
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from pdftools_core.exceptions import ErrorKind, PdfToolsException
from pdftools_core.models import (
    PdfInfoResult,
    PdfToolsConfig,
    PdfToolsServerConfig,
    RemovePagesRequest,
)
from pdftools_core.services import PdfProcessor
from pdftools_core.utils import ResourceCleaner, create_zip_archive

router = APIRouter(prefix='/api/v1/pdf')
logger = logging.getLogger('pdftools.api')

UPLOAD_CHUNK_SIZE = 1024 * 1024


class UploadTooLarge(Exception):
    pass


def get_processor(request: Request) -> PdfProcessor:
    return request.app.state.processor


def get_tools_config(request: Request) -> PdfToolsConfig:
    return request.app.state.tools_config


def get_server_config(request: Request) -> PdfToolsServerConfig:
    return request.app.state.server_config


def sanitize_filename(filename: Optional[str]) -> str:
    """Return the bare stem of an uploaded file name, without directories or extension."""
    name = Path((filename or '').replace('\\', '/')).name
    stem = Path(name).stem
    return stem or 'document'


def http_error(ex: PdfToolsException) -> HTTPException:
    """Map a PDF tools failure to the HTTP status describing it."""
    if ex.kind.is_input_error:
        status_code = 400
    elif ex.kind == ErrorKind.DOCUMENT_UNREADABLE:
        status_code = 422
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail=ex.message)


def _copy_upload_limited(file: UploadFile, dest_path: Path, max_bytes: int) -> int:
    total = 0
    with open(dest_path, 'wb') as handle:
        while True:
            chunk = file.file.read(UPLOAD_CHUNK_SIZE)
            if not chunk:
                break
            total += len(chunk)
            if total > max_bytes:
                raise UploadTooLarge()
            handle.write(chunk)
    return total


def _receive_upload(
    file: Optional[UploadFile],
    cleaner: ResourceCleaner,
    tools_config: PdfToolsConfig,
    server_config: PdfToolsServerConfig,
) -> Path:
    """Store the uploaded PDF in a fresh working directory registered for cleanup."""
    if file is None:
        raise HTTPException(status_code=400, detail='missing file field')

    workdir = Path(tempfile.mkdtemp(prefix='pdftools-', dir=tools_config.temp_dir))
    cleaner.add_directory(workdir)

    input_path = workdir / 'input.pdf'
    try:
        size = _copy_upload_limited(file, input_path, server_config.max_upload_size)
    except UploadTooLarge:
        cleaner.cleanup()
        raise HTTPException(
            status_code=413,
            detail=f'upload too large (limit {server_config.max_upload_size} bytes)',
        )

    logger.debug(f'Received upload [{file.filename}], {size} bytes')
    return input_path


def _run(cleaner: ResourceCleaner, operation, *args):
    """Run a processor operation, releasing temporary files when it fails."""
    try:
        return operation(*args)
    except PdfToolsException as ex:
        cleaner.cleanup()
        if ex.kind.is_input_error:
            logger.warning(f'Rejected request: {ex.message}')
        else:
            logger.error(f'Request failed: {ex.message}')
        raise http_error(ex)


@router.post('/split')
def split_pdf(
    file: Optional[UploadFile] = File(default=None),
    processor: PdfProcessor = Depends(get_processor),
    tools_config: PdfToolsConfig = Depends(get_tools_config),
    server_config: PdfToolsServerConfig = Depends(get_server_config),
) -> FileResponse:
    cleaner = ResourceCleaner(logger=logger)
    input_path = _receive_upload(file, cleaner, tools_config, server_config)

    stem = sanitize_filename(file.filename)
    parts_dir = input_path.parent / 'pages'

    result = _run(cleaner, processor.split, input_path, parts_dir, stem)
    zip_path = _run(
        cleaner,
        create_zip_archive,
        input_path.parent / f'{stem}-split.zip',
        [Path(f) for f in result.files],
    )

    logger.info(f'Split [{file.filename}] into {len(result.files)} pages')

    return FileResponse(
        path=zip_path,
        filename=f'{stem}-split.zip',
        media_type='application/zip',
        background=BackgroundTask(cleaner.cleanup),
    )


@router.post('/info', response_model=PdfInfoResult)
def pdf_info(
    file: Optional[UploadFile] = File(default=None),
    processor: PdfProcessor = Depends(get_processor),
    tools_config: PdfToolsConfig = Depends(get_tools_config),
    server_config: PdfToolsServerConfig = Depends(get_server_config),
) -> PdfInfoResult:
    with ResourceCleaner(logger=logger) as cleaner:
        input_path = _receive_upload(file, cleaner, tools_config, server_config)
        result = _run(cleaner, processor.info, input_path)

    return result.model_copy(update={'filename': Path(file.filename or '').name})


@router.post('/compress')
def compress_pdf(
    file: Optional[UploadFile] = File(default=None),
    processor: PdfProcessor = Depends(get_processor),
    tools_config: PdfToolsConfig = Depends(get_tools_config),
    server_config: PdfToolsServerConfig = Depends(get_server_config),
) -> FileResponse:
    cleaner = ResourceCleaner(logger=logger)
    input_path = _receive_upload(file, cleaner, tools_config, server_config)

    stem = sanitize_filename(file.filename)
    output_path = input_path.parent / f'{stem}-compressed.pdf'

    result = _run(cleaner, processor.compress, input_path, output_path)

    logger.info(
        f'Compressed [{file.filename}] {result.original_size} -> {result.compressed_size} bytes'
    )

    return FileResponse(
        path=output_path,
        filename=output_path.name,
        media_type='application/pdf',
        headers={
            'X-Original-Size': str(result.original_size),
            'X-Compressed-Size': str(result.compressed_size),
            'X-Compression-Ratio': f'{result.compression_ratio * 100:.2f}%',
        },
        background=BackgroundTask(cleaner.cleanup),
    )


@router.post('/remove-pages')
def remove_pages(
    file: Optional[UploadFile] = File(default=None),
    pages: Optional[str] = Form(default=None),
    mode: Optional[str] = Form(default=None),
    processor: PdfProcessor = Depends(get_processor),
    tools_config: PdfToolsConfig = Depends(get_tools_config),
    server_config: PdfToolsServerConfig = Depends(get_server_config),
) -> FileResponse:
    if file is None:
        raise HTTPException(status_code=400, detail='missing file field')
    if pages is None or pages.strip() == '':
        raise HTTPException(status_code=400, detail='missing pages field')

    cleaner = ResourceCleaner(logger=logger)
    input_path = _receive_upload(file, cleaner, tools_config, server_config)

    stem = sanitize_filename(file.filename)
    output_path = input_path.parent / f'{stem}-pages-removed.pdf'

    request = _run(
        cleaner, RemovePagesRequest.from_raw, input_path, output_path, pages, mode
    )
    result = _run(cleaner, processor.remove_pages, request)

    logger.info(
        f'Removed {result.removed_count} pages from [{file.filename}], mode {result.mode.value}'
    )

    return FileResponse(
        path=output_path,
        filename=output_path.name,
        media_type='application/pdf',
        headers={
            'X-Removed-Pages': str(result.removed_count),
            'X-Remaining-Pages': str(result.remaining_pages),
            'X-Mode': result.mode.value,
        },
        background=BackgroundTask(cleaner.cleanup),
    )
