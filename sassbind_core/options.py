import logging
from typing import Any, Callable, Optional, Tuple

from .exceptions import (
    DisposedError,
    InvalidOptionError,
    InvalidPrecisionError,
    SassBindError,
)
from .interfaces import Handle, NativeApi
from .styles import OutputStyle

log = logging.getLogger(__name__)


class CompilerOptions:
    """Owner of one native ``struct Sass_Options*``.

    Every accessor forwards to the matching ``sass_option_*`` call of the
    runtime. After :meth:`dispose` the handle is forgotten and every accessor
    raises :class:`DisposedError`; ``dispose`` itself may be called again
    safely.

    Instances are created through :meth:`CompilerContext.create_options`.
    They are not thread-safe; distinct instances may be used from distinct
    threads.
    """

    def __init__(
        self,
        native: NativeApi,
        handle: Handle,
        on_dispose: Optional[Callable[[Handle], None]] = None,
    ):
        self._native = native
        self._handle: Optional[Handle] = handle
        self._on_dispose = on_dispose
        log.debug("CompilerOptions: created new instance (handle=%s)", handle)

    # --- Lifecycle ---

    @property
    def disposed(self) -> bool:
        return self._handle is None

    @property
    def handle(self) -> Handle:
        return self._live_handle()

    def _live_handle(self) -> Handle:
        if self._handle is None:
            raise DisposedError("CompilerOptions used after dispose()")
        return self._handle

    def dispose(self) -> None:
        handle = self._handle
        if handle is None:
            return
        # Cleared before the native release; a failed release is never retried.
        self._handle = None
        try:
            self._native.delete_options(handle)
        finally:
            if self._on_dispose is not None:
                self._on_dispose(handle)
        log.debug("CompilerOptions: disposed instance (handle=%s)", handle)

    def __enter__(self) -> "CompilerOptions":
        self._live_handle()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def __repr__(self) -> str:
        if self._handle is None:
            return "<CompilerOptions disposed>"
        return f"<CompilerOptions handle={self._handle:#x}>"

    # --- Numeric / enum properties ---

    @property
    def precision(self) -> int:
        return self._native.get_precision(self._live_handle())

    @precision.setter
    def precision(self, precision: int) -> None:
        handle = self._live_handle()
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise InvalidPrecisionError(precision)
        if precision < 0:
            raise InvalidPrecisionError(precision)
        self._native.set_precision(handle, precision)

    @property
    def output_style(self) -> OutputStyle:
        ordinal = self._native.get_output_style(self._live_handle())
        try:
            return OutputStyle(ordinal)
        except ValueError:
            raise SassBindError(
                f"Unexpected native style ordinal {ordinal!r}"
            ) from None

    @output_style.setter
    def output_style(self, style: Any) -> None:
        handle = self._live_handle()
        self._native.set_output_style(handle, int(OutputStyle.from_ordinal(style)))

    # --- Flags ---

    @property
    def source_comments(self) -> bool:
        return self._native.get_source_comments(self._live_handle())

    @source_comments.setter
    def source_comments(self, enabled: bool) -> None:
        self._native.set_source_comments(self._live_handle(), bool(enabled))

    @property
    def omit_map_comment(self) -> bool:
        return self._native.get_omit_map_comment(self._live_handle())

    @omit_map_comment.setter
    def omit_map_comment(self, enabled: bool) -> None:
        self._native.set_omit_map_comment(self._live_handle(), bool(enabled))

    @property
    def indented_syntax(self) -> bool:
        return self._native.get_indented_syntax(self._live_handle())

    @indented_syntax.setter
    def indented_syntax(self, enabled: bool) -> None:
        self._native.set_indented_syntax(self._live_handle(), bool(enabled))

    # --- Paths ---

    def add_include_path(self, path: str) -> None:
        handle = self._live_handle()
        self._native.push_include_path(handle, _require_path(path, "includePath"))

    def add_plugin_path(self, path: str) -> None:
        handle = self._live_handle()
        self._native.push_plugin_path(handle, _require_path(path, "pluginPath"))

    @property
    def include_paths(self) -> Tuple[str, ...]:
        handle = self._live_handle()
        count = self._native.include_path_count(handle)
        return tuple(self._native.get_include_path(handle, i) for i in range(count))

    @property
    def plugin_path(self) -> Optional[str]:
        return self._native.get_plugin_path(self._live_handle())


def _require_path(path: Any, key: str) -> str:
    if not isinstance(path, str) or not path:
        raise InvalidOptionError(key, path, "a non-empty path")
    return path
