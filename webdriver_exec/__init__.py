"""webdriver-exec.

Script execution for WebDriver remote ends: argument marshalling, element
reference substitution, sync/async execute commands and error mapping.
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from webdriver_exec._http import HTTPDispatcher, RequestDispatcher
from webdriver_exec.client import WebDriverClient
from webdriver_exec.codec import ValueCodec, decode, encode
from webdriver_exec.command import build_command
from webdriver_exec.errors import (
    CancellationError,
    InvalidArgumentError,
    InvalidSessionError,
    JavaScriptError,
    NoSuchWindowError,
    ProtocolFaultError,
    RemoteInvalidArgumentError,
    ScriptTimeoutError,
    StaleElementReferenceError,
    TransportError,
    WebDriverExecError,
)
from webdriver_exec.response import interpret
from webdriver_exec.script import js_function, normalize
from webdriver_exec.session import ScriptSession
from webdriver_exec.types import (
    ELEMENT_KEY,
    W3C_ELEMENT_KEY,
    CommandRequest,
    ElementReference,
    ExecutionMode,
    JSFunction,
    WireResponse,
)

__all__ = [
    # Client
    "WebDriverClient",
    "ScriptSession",
    "HTTPDispatcher",
    "RequestDispatcher",
    # Core
    "ValueCodec",
    "encode",
    "decode",
    "normalize",
    "js_function",
    "build_command",
    "interpret",
    # Types
    "ELEMENT_KEY",
    "W3C_ELEMENT_KEY",
    "CommandRequest",
    "ElementReference",
    "ExecutionMode",
    "JSFunction",
    "WireResponse",
    # Errors
    "WebDriverExecError",
    "InvalidArgumentError",
    "ProtocolFaultError",
    "JavaScriptError",
    "ScriptTimeoutError",
    "StaleElementReferenceError",
    "NoSuchWindowError",
    "InvalidSessionError",
    "RemoteInvalidArgumentError",
    "CancellationError",
    "TransportError",
]

try:
    __version__ = _pkg_version("webdriver-exec")
except PackageNotFoundError:
    __version__ = "unknown"
