"""Tests for routebind.naming — snake_case/camelCase normalization."""

import pytest

from routebind.naming import candidate_keys, match_route_key, to_camel_case, to_snake_case


class TestToSnakeCase:
    def test_camel_to_snake(self) -> None:
        assert to_snake_case("userId") == "user_id"

    def test_multiple_humps(self) -> None:
        assert to_snake_case("postCommentId") == "post_comment_id"

    def test_leading_uppercase_not_prefixed(self) -> None:
        assert to_snake_case("UserId") == "user_id"

    def test_acronym_splits_each_letter(self) -> None:
        assert to_snake_case("userID") == "user_i_d"

    @pytest.mark.parametrize("name", ["user_id", "post", "a", "x_1"])
    def test_idempotent_on_snake_case(self, name: str) -> None:
        assert to_snake_case(name) == name


class TestToCamelCase:
    def test_snake_to_camel(self) -> None:
        assert to_camel_case("user_id") == "userId"

    def test_kebab_to_camel(self) -> None:
        assert to_camel_case("user-id") == "userId"

    def test_leading_capital_lowered(self) -> None:
        assert to_camel_case("User_id") == "userId"

    def test_leading_separator(self) -> None:
        assert to_camel_case("_private") == "private"

    @pytest.mark.parametrize("name", ["userId", "post", "a", "postCommentId"])
    def test_idempotent_on_camel_case(self, name: str) -> None:
        assert to_camel_case(name) == name


class TestCandidateKeys:
    def test_order_exact_snake_camel(self) -> None:
        assert list(candidate_keys("userId")) == ["userId", "user_id"]
        assert list(candidate_keys("user_id")) == ["user_id", "userId"]

    def test_no_duplicates_for_plain_name(self) -> None:
        assert list(candidate_keys("post")) == ["post"]


class TestMatchRouteKey:
    def test_exact(self) -> None:
        assert match_route_key("user", {"user": "1"}) == "user"

    def test_snake_form(self) -> None:
        assert match_route_key("userId", {"user_id": "1"}) == "user_id"

    def test_camel_form(self) -> None:
        assert match_route_key("user_id", {"userId": "1"}) == "userId"

    def test_exact_wins_over_normalized(self) -> None:
        assert match_route_key("userId", {"user_id": "1", "userId": "2"}) == "userId"

    def test_missing(self) -> None:
        assert match_route_key("post", {"user": "1"}) is None
