"""Tests for routebind.descriptors — building descriptors from signatures."""

from typing import Annotated, Any, Optional

from routebind.descriptors import ParameterDescriptor, describe, is_injectable


class Request:
    pass


class Repository[T]:
    pass


class TestIsInjectable:
    def test_class_is_injectable(self) -> None:
        assert is_injectable(Request)

    def test_scalars_are_not(self) -> None:
        for tp in (str, int, float, bool, bytes, list, dict, object):
            assert not is_injectable(tp)

    def test_non_types_are_not(self) -> None:
        assert not is_injectable(None)
        assert not is_injectable("Request")


class TestDescribe:
    def test_untyped(self) -> None:
        def handler(user, post):
            pass

        assert describe(handler) == (
            ParameterDescriptor("user"),
            ParameterDescriptor("post"),
        )

    def test_scalar_annotation_has_no_declared_type(self) -> None:
        def handler(user: str, page: int):
            pass

        assert [d.declared_type for d in describe(handler)] == [None, None]

    def test_class_annotation(self) -> None:
        def handler(item, request: Request):
            pass

        (_, request) = describe(handler)
        assert request.declared_type is Request
        assert request.is_nullable is False

    def test_default(self) -> None:
        def handler(required, optional="default_value"):
            pass

        (required, optional) = describe(handler)
        assert required.has_default is False
        assert optional.has_default is True
        assert optional.default == "default_value"

    def test_default_none_is_still_a_default(self) -> None:
        def handler(value=None):
            pass

        (value,) = describe(handler)
        assert value.has_default is True
        assert value.default is None

    def test_nullable_union(self) -> None:
        def handler(value, nullable_param: str | None):
            pass

        (_, param) = describe(handler)
        assert param.is_nullable is True
        assert param.declared_type is None
        assert param.has_default is False

    def test_optional_class_keeps_type(self) -> None:
        def handler(request: Optional[Request]):  # noqa: UP045
            pass

        (param,) = describe(handler)
        assert param.is_nullable is True
        assert param.declared_type is Request

    def test_ambiguous_union_has_no_type(self) -> None:
        def handler(key: int | Request):
            pass

        (param,) = describe(handler)
        assert param.declared_type is None
        assert param.is_nullable is False

    def test_any_is_untyped(self) -> None:
        def handler(value: Any):
            pass

        assert describe(handler)[0].declared_type is None

    def test_annotated_unwraps(self) -> None:
        def handler(request: Annotated[Request, "meta"]):
            pass

        assert describe(handler)[0].declared_type is Request

    def test_generic_alias_uses_origin(self) -> None:
        def handler(repo: Repository[int]):
            pass

        assert describe(handler)[0].declared_type is Repository

    def test_string_annotations_are_evaluated(self) -> None:
        def handler(request: "Request"):
            pass

        assert describe(handler)[0].declared_type is Request

    def test_keyword_only(self) -> None:
        def handler(user, *, post):
            pass

        (user, post) = describe(handler)
        assert user.keyword_only is False
        assert post.keyword_only is True

    def test_variadics_skipped(self) -> None:
        def handler(user, *args, **kwargs):
            pass

        assert [d.name for d in describe(handler)] == ["user"]

    def test_bound_method_drops_self(self) -> None:
        class Controller:
            def show(self, post, user):
                pass

        assert [d.name for d in describe(Controller().show)] == ["post", "user"]
