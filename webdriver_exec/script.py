"""Script normalization.

The remote end always receives plain function-body text. Function-like
scripts are wrapped so they are applied to the ``arguments`` collection,
which in async mode also carries the completion callback as its last item.
"""

from __future__ import annotations

from webdriver_exec.errors import InvalidArgumentError
from webdriver_exec.types import JSFunction

FUNCTION_PREFIX = "function ("

WRAPPER_TEMPLATE = "return ({source}).apply(null, arguments);"


def js_function(source: str) -> JSFunction:
    """Mark JavaScript source as a function expression.

    Example:
        await session.execute_async(
            js_function("function (a, b, done) { done(a + b); }"), 1, 2
        )
    """
    if not isinstance(source, str) or not source.strip():
        raise InvalidArgumentError("function source must be a non-empty string")
    return JSFunction(source=source)


def normalize(script: str | JSFunction, *, multi_instance: bool = False) -> str:
    """Produce the function-body text sent to the remote end.

    Args:
        script: Function-body source text, or a JSFunction
        multi_instance: Also wrap text that starts with a function declaration

    Returns:
        Source text of a function body

    Raises:
        InvalidArgumentError: If script is neither non-empty text nor a JSFunction
    """
    if isinstance(script, JSFunction):
        return WRAPPER_TEMPLATE.format(source=script.source)

    if not isinstance(script, str) or not script.strip():
        raise InvalidArgumentError(details={"type": type(script).__name__})

    if multi_instance and script.startswith(FUNCTION_PREFIX):
        return WRAPPER_TEMPLATE.format(source=script)
    return script
