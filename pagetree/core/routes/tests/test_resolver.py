"""
Tests for the PagesResolver and pages directory discovery
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

from ..resolver import PagesResolver
from ..constants import PAGES_DIR_NAME


class TestPagesResolver:

    def setup_method(self):
        """Setup test environment for each test"""
        self.temp_dir = Path(tempfile.mkdtemp()).resolve()
        self.pages_dir = self.temp_dir / PAGES_DIR_NAME
        self.pages_dir.mkdir(parents=True)
        self.resolver = PagesResolver(self.temp_dir, extensions=(".vue", ".js"))

    def teardown_method(self):
        """Cleanup after each test"""
        shutil.rmtree(self.temp_dir)

    def create_file(self, relative_path: str, content: str = "<template><div /></template>"):
        """Helper to create test files"""
        file_path = self.temp_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
        return file_path

    def create_site(self):
        self.create_file("pages/index.vue")
        self.create_file("pages/about.vue")
        self.create_file("pages/users/index.vue")
        self.create_file("pages/users/_id.vue")

    def test_init(self):
        """Test resolver initialization"""
        assert self.resolver.project_root == self.temp_dir
        assert self.resolver.pages_dir == self.pages_dir
        assert self.resolver._route_cache is None

    def test_discover_files(self):
        """Test page discovery returns sorted project-relative paths"""
        self.create_site()
        self.create_file("pages/README.md")
        self.create_file("pages/.drafts/secret.vue")
        self.create_file("pages/.hidden.vue")
        self.create_file("components/Button.vue")

        files = self.resolver.discover_files()

        assert files == [
            "pages/about.vue",
            "pages/index.vue",
            "pages/users/_id.vue",
            "pages/users/index.vue",
        ]

    def test_resolve_routes(self):
        """Test the pages directory compiles into an ordered tree"""
        self.create_site()

        routes = self.resolver.resolve_routes()

        assert [r.path for r in routes] == ["/about", "/users", "/"]
        assert routes[0].component == str(self.pages_dir / "about.vue")
        assert [c.path for c in routes[1].children] == ["", ":id"]

    def test_flat_and_static_routes(self):
        self.create_site()

        assert self.resolver.flat_routes() == ["/about", "/users", "/users/:id", "/"]
        assert self.resolver.static_routes() == ["/about", "/users", "/"]

    def test_cache_invalidation(self):
        """Test route cache invalidation"""
        self.create_file("pages/index.vue")
        routes1 = self.resolver.resolve_routes()

        assert self.resolver.resolve_routes() is routes1

        self.resolver.invalidate_cache()
        assert self.resolver._route_cache is None

        self.create_file("pages/about.vue")
        routes2 = self.resolver.resolve_routes()

        assert "/about" in [r.path for r in routes2]

    def test_get_stats(self):
        self.create_site()

        stats = self.resolver.get_stats()

        assert stats["pages"] == 4
        assert stats["routes"] == 5
        assert stats["wrappers"] == 1
        assert stats["pages_dir"] == str(self.pages_dir)

    @patch('pagetree.core.routes.resolver.logger')
    def test_no_pages_directory(self, mock_logger):
        """Test behavior when the pages directory doesn't exist"""
        shutil.rmtree(self.pages_dir)

        routes = self.resolver.resolve_routes()

        assert routes == []
        assert mock_logger.warning.called

    def test_custom_pages_dir(self):
        self.create_file("src/views/home.js")
        resolver = PagesResolver(self.temp_dir, pages_dir="src/views", extensions=(".js",))

        routes = resolver.resolve_routes()

        assert [(r.name, r.path) for r in routes] == [("home", "/home")]
        assert routes[0].chunk_name == "src/views/home"
