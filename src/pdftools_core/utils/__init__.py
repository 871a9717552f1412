from pdftools_core.utils.archive import (
    create_zip_archive as create_zip_archive,
    encode_file_base64 as encode_file_base64,
)
from pdftools_core.utils.cleanup import ResourceCleaner as ResourceCleaner
