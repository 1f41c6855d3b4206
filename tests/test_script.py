"""Tests for script normalization and command building."""

import pytest

from webdriver_exec import (
    ElementReference,
    ExecutionMode,
    InvalidArgumentError,
    build_command,
    js_function,
    normalize,
)


class TestNormalize:

    def test_function_body_is_unchanged(self):
        assert normalize("return 1;") == "return 1;"

    def test_js_function_is_wrapped(self):
        fn = js_function("function (a, b, c, d) { return a + b + c + d; }")
        assert normalize(fn) == (
            "return (function (a, b, c, d) { return a + b + c + d; })"
            ".apply(null, arguments);"
        )

    def test_wrapper_forwards_arguments_unchanged(self):
        wrapped = normalize(js_function("function () { return arguments.length; }"))
        assert wrapped.startswith("return (")
        assert wrapped.endswith(").apply(null, arguments);")

    def test_function_text_not_wrapped_by_default(self):
        script = "function (a) { return a; }"
        assert normalize(script) == script

    def test_function_text_wrapped_in_multi_instance_mode(self):
        script = "function (a) { return a; }"
        assert normalize(script, multi_instance=True) == (
            "return (function (a) { return a; }).apply(null, arguments);"
        )

    def test_multi_instance_leaves_plain_bodies_alone(self):
        assert normalize("return 1;", multi_instance=True) == "return 1;"

    @pytest.mark.parametrize("script", [42, None, 1.5, ["return 1;"], print, "", "   "])
    def test_unsupported_script_is_rejected(self, script):
        with pytest.raises(InvalidArgumentError) as exc_info:
            normalize(script)
        assert "don't agree with execute protocol command" in str(exc_info.value)

    def test_js_function_requires_source(self):
        with pytest.raises(InvalidArgumentError):
            js_function("")


class TestBuildCommand:

    def test_sync_path_and_payload(self):
        request = build_command("s1", ExecutionMode.SYNC, "return arguments[0];", [1])
        assert request.path == "/session/s1/execute"
        assert request.payload() == {"script": "return arguments[0];", "args": [1]}

    def test_async_path(self):
        request = build_command("s1", ExecutionMode.ASYNC, "arguments[0](1);")
        assert request.path == "/session/s1/execute_async"
        assert request.payload() == {"script": "arguments[0](1);", "args": []}

    def test_modes_differ_only_in_path_suffix(self):
        script = normalize(js_function("function (a, b, done) { done(a + b); }"))
        sync = build_command("s1", ExecutionMode.SYNC, script, [1, 2])
        async_ = build_command("s1", ExecutionMode.ASYNC, script, [1, 2])

        assert sync.payload() == async_.payload()
        assert sync.path.rsplit("/", 1) == ["/session/s1", "execute"]
        assert async_.path.rsplit("/", 1) == ["/session/s1", "execute_async"]

    def test_element_arguments_are_tagged(self):
        request = build_command(
            "s1",
            ExecutionMode.SYNC,
            "arguments[0].click();",
            [ElementReference(id="el-1"), {"nested": ElementReference(id="el-2")}],
        )
        assert request.payload()["args"] == [
            {"ELEMENT": "el-1"},
            {"nested": {"ELEMENT": "el-2"}},
        ]

    def test_request_is_immutable(self):
        request = build_command("s1", ExecutionMode.SYNC, "return 1;")
        with pytest.raises(Exception):
            request.script = "return 2;"

    def test_mode_accepts_string_value(self):
        request = build_command("s1", "async", "arguments[0]();")
        assert request.path.endswith("/execute_async")

    def test_bad_argument_is_rejected(self):
        with pytest.raises(InvalidArgumentError):
            build_command("s1", ExecutionMode.SYNC, "return 1;", [object()])
