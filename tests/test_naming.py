"""
Тесты общего префикса путей и имен функций
"""

import pytest
from openapi_routes.internal.utils import (
    extract_common_base_path,
    find_common_prefix,
    path_to_identifier,
    strip_base_path,
)


class TestCommonBasePath:
    """Тесты вычисления общего корневого пути"""

    def test_empty_paths(self):
        assert extract_common_base_path([]) == ""

    def test_single_path_is_returned_unchanged(self):
        assert extract_common_base_path(["/a/b/c"]) == "/a/b/c"

    def test_shared_segment(self):
        assert extract_common_base_path(["/api/users", "/api/orders"]) == "/api"

    def test_no_agreement(self):
        assert extract_common_base_path(["/a", "/b"]) == ""

    def test_single_trailing_separator_is_stripped(self):
        assert extract_common_base_path(["/api/"]) == "/api"
        assert extract_common_base_path(["/api/v1/", "/api/v1/"]) == "/api/v1"

    def test_prefix_may_split_segment(self):
        """Префикс посимвольный и может разрезать сегмент"""
        assert extract_common_base_path(["/apple", "/apricot"]) == "/ap"

    def test_no_leading_agreement(self):
        assert extract_common_base_path(["users", "/users"]) == ""

    def test_raw_common_prefix(self):
        assert find_common_prefix(["/api/users", "/api/orders"]) == "/api/"
        assert find_common_prefix(["abc", "abd", "ab"]) == "ab"
        assert find_common_prefix([]) == ""

    @pytest.mark.parametrize(
        "paths",
        [
            ["/api/users", "/api/orders"],
            ["/a", "/b"],
            ["/a/b/c"],
            ["/v1/items/{id}", "/v1/items", "/v1/itemsets"],
        ],
    )
    def test_idempotent_on_own_result(self, paths):
        result = extract_common_base_path(paths)
        assert extract_common_base_path([result]) == result

    def test_prefix_is_literal_prefix_of_every_path(self):
        paths = ["/v1/items/{id}", "/v1/items", "/v1/itemsets"]
        prefix = extract_common_base_path(paths)

        assert prefix == "/v1/items"
        assert all(p.startswith(prefix) for p in paths)

    def test_strip_base_path(self):
        assert strip_base_path("/api/users", "/api") == "/users"
        assert strip_base_path("/api", "/api") == ""
        assert strip_base_path("/users", "") == "/users"


class TestPathToIdentifier:
    """Тесты построения PascalCase фрагмента имени"""

    def test_path_parameter_contributes_its_name(self):
        assert path_to_identifier("/users/{id}") == "UsersId"

    def test_root_path(self):
        assert path_to_identifier("/") == ""
        assert path_to_identifier("") == ""

    def test_non_alphanumeric_runs_split_fragments(self):
        assert path_to_identifier("/a-b_c") == "ABC"

    def test_rest_of_fragment_is_kept(self):
        assert path_to_identifier("/fooBar/{userId}") == "FooBarUserId"

    def test_collision_is_not_resolved(self):
        assert path_to_identifier("/foo_bar") == path_to_identifier("/foo-bar")
        assert path_to_identifier("/foo-bar") != path_to_identifier("/fooBar")

    def test_only_one_leading_separator_removed(self):
        assert path_to_identifier("//users") == "Users"

    def test_digits_are_kept(self):
        assert path_to_identifier("/v2/items.json") == "V2ItemsJson"
