"""
Tests for sibling route ordering
"""

from ..ordering import compare_paths, sort_routes, token_rank
from ..tree import RouteNode


def _node(path, name=None):
    return RouteNode(name=name or path, path=path)


class TestComparePaths:

    def test_empty_path_first(self):
        assert compare_paths("", "/about") < 0
        assert compare_paths("/about", "") > 0

    def test_root_after_static(self):
        """Test the exact root loses to static siblings"""
        assert compare_paths("/", "/about") > 0
        assert compare_paths("/about", "/") < 0

    def test_root_before_params(self):
        """Test the exact root beats params and catch-alls"""
        assert compare_paths("/", "/:id?") < 0
        assert compare_paths("/", "/*") < 0
        assert compare_paths("/*", "/") > 0

    def test_static_before_dynamic_before_catch_all(self):
        assert compare_paths("/about", "/:id?") < 0
        assert compare_paths("/:id", "/*") < 0
        assert compare_paths("/*", "/about") > 0

    def test_equally_specific_paths_tie(self):
        """Test same-shape siblings compare equal so insertion order holds"""
        assert compare_paths("/about", "/users") == 0
        assert compare_paths("/users", "/about") == 0
        assert compare_paths(":a", ":b?") == 0

    def test_shorter_static_prefix_first(self):
        assert compare_paths("/users", "/users/:id") < 0
        assert compare_paths("/users/:id", "/users") > 0
        assert compare_paths("/users", "/users/edit") < 0
        assert compare_paths("users/edit", "users") > 0

    def test_catch_all_prefix_last(self):
        """Test a catch-all that ends first sorts after its continuation"""
        assert compare_paths("/*", "/*/edit") > 0
        assert compare_paths("/*/edit", "/*") < 0

    def test_first_differing_token_decides(self):
        assert compare_paths("/blog/:slug", "/blog/archive") > 0
        assert compare_paths("/:lang/about", "/:lang/*") < 0

    def test_token_rank(self):
        assert token_rank("about") == 0
        assert token_rank(":id") == 1
        assert token_rank(":id?") == 1
        assert token_rank("*") == 2


class TestSortRoutes:

    def test_full_precedence(self):
        """Test a mixed sibling list sorts into router order"""
        routes = [_node("/*"), _node("/:id?"), _node("/"), _node("/about"), _node("")]

        sort_routes(routes)

        assert [r.path for r in routes] == ["", "/about", "/", "/:id?", "/*"]

    def test_stable_for_ties(self):
        """Test equally specific siblings keep their relative order"""
        routes = [_node("/b", "b"), _node("/:id?", "id"), _node("/a", "a"), _node("/c", "c")]

        sort_routes(routes)

        assert [r.name for r in routes] == ["b", "a", "c", "id"]

    def test_returns_same_list(self):
        routes = [_node("/a")]
        assert sort_routes(routes) is routes
