import io
import logging

from pdftools_core.logging import build_logger, create_isolated_logger, create_null_logger
from pdftools_core.models import PdfToolsConfig


class TestLogging:
    def test_isolated_logger_writes_to_stream(self):
        stream = io.StringIO()
        logger = create_isolated_logger('pdftools.test.stream', level=logging.INFO, stream=stream)

        logger.info('splitting report.pdf')

        assert 'splitting report.pdf' in stream.getvalue()
        assert logger.propagate is False

    def test_null_logger_has_no_output_handlers(self):
        logger = create_null_logger('pdftools.test.null')

        assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_build_logger_uses_config(self, tmp_path):
        log_file = tmp_path / 'pdftools.log'
        stream = io.StringIO()
        config = PdfToolsConfig(logging_level=logging.DEBUG, logging_file=str(log_file))

        logger = build_logger('pdftools.test.config', config, stream=stream)
        logger.debug('page selection parsed')
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert 'page selection parsed' in stream.getvalue()
        assert 'page selection parsed' in log_file.read_text()

        for handler in logger.handlers:
            handler.close()
