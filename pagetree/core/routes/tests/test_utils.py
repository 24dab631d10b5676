"""
Tests for path and file helpers
"""

import json
import logging
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from .. import utils
from ..utils import (
    relative_to, resolve_path, save_json_file, setup_logging, url_join,
    wchunk, wp, write_file_atomic, measure_time
)


class TestPathHelpers:

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp()).resolve()

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def test_resolve_path(self):
        assert resolve_path(self.temp_dir, "pages/about.vue") == str(self.temp_dir / "pages" / "about.vue")

    def test_resolve_path_keeps_aliases(self):
        assert resolve_path(self.temp_dir, "~/pages/about.vue") == "~/pages/about.vue"
        assert resolve_path(self.temp_dir, "@/pages/about.vue") == "@/pages/about.vue"

    def test_relative_to(self):
        assert relative_to(self.temp_dir, self.temp_dir, "pages/about.vue") == "./pages/about.vue"
        assert relative_to(self.temp_dir / "pages", self.temp_dir, "layouts/a.vue") == "../layouts/a.vue"

    def test_relative_to_keeps_aliases(self):
        assert relative_to(self.temp_dir, "~/pages/about.vue") == "~/pages/about.vue"

    def test_windows_escaping(self):
        with patch.object(utils, "IS_WINDOWS", True):
            assert wp("C:\\app\\pages") == "C:\\\\app\\\\pages"
            assert wchunk("pages/users/index") == "pages_users_index"

    def test_posix_passthrough(self):
        with patch.object(utils, "IS_WINDOWS", False):
            assert wp("C:\\app") == "C:\\app"
            assert wchunk("pages/users") == "pages/users"


class TestUrlJoin:

    def test_collapses_slashes(self):
        assert url_join("/", "/about") == "/about"
        assert url_join("/app/", "/users/", "edit") == "/app/users/edit"

    def test_keeps_scheme(self):
        assert url_join("https://example.com/", "/docs") == "https://example.com/docs"


class TestFileHelpers:

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def test_save_json_file(self):
        target = self.temp_dir / "out" / "routes.json"

        save_json_file(target, [{"path": "/"}])

        assert json.loads(target.read_text()) == [{"path": "/"}]
        assert list(target.parent.iterdir()) == [target]

    def test_write_failure_is_wrapped(self):
        target = self.temp_dir / "routes.json"
        with patch("pagetree.core.routes.utils.shutil.move", side_effect=OSError("disk full")):
            with pytest.raises(IOError) as exc_info:
                write_file_atomic(target, "[]")

        assert "disk full" in str(exc_info.value)
        assert list(self.temp_dir.iterdir()) == []


class TestLogging:

    def test_setup_logging_is_idempotent(self):
        package_logger = logging.getLogger("pagetree")
        handlers = list(package_logger.handlers)
        try:
            setup_logging(logging.DEBUG)
            setup_logging(logging.WARNING)

            assert len(package_logger.handlers) == max(len(handlers), 1)
            assert package_logger.level == logging.WARNING
        finally:
            package_logger.handlers = handlers
            package_logger.propagate = True
            package_logger.setLevel(logging.NOTSET)

    def test_measure_time_returns_result(self):
        @measure_time
        def double(x):
            return x * 2

        with patch("pagetree.core.routes.utils.logger") as mock_logger:
            assert double(4) == 8

        assert mock_logger.debug.called
        assert double.__name__ == "double"
