import threading
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Set

from .exceptions import RuntimeUnavailableError, SassBindError
from .ffi import CtypesNativeApi
from .interfaces import Handle, NativeApi
from .models import RuntimeConfig, VersionInfo
from .options import CompilerOptions
from .translator import OptionTranslator


class CompilerContext:
    """Factory for :class:`CompilerOptions` bound to one loaded runtime."""

    def __init__(self, native: Optional[NativeApi]):
        self.native = native
        self._live: Set[Handle] = set()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: Optional[RuntimeConfig] = None) -> "CompilerContext":
        return cls(CtypesNativeApi.load(config or RuntimeConfig.from_env()))

    def _require_native(self) -> NativeApi:
        if self.native is None or not self.native.available:
            raise RuntimeUnavailableError("libsass runtime is not loaded")
        return self.native

    @property
    def live_handles(self) -> int:
        with self._lock:
            return len(self._live)

    def create_options(self) -> CompilerOptions:
        native = self._require_native()
        handle = native.make_options()
        with self._lock:
            duplicate = handle in self._live
            if not duplicate:
                self._live.add(handle)
        if duplicate:
            raise SassBindError(
                f"Native allocator returned handle {handle!r} which is still owned"
            )
        return CompilerOptions(native, handle, on_dispose=self._release)

    def _release(self, handle: Handle) -> None:
        with self._lock:
            self._live.discard(handle)

    @contextmanager
    def options(
        self, config: Optional[Mapping[str, Any]] = None
    ) -> Iterator[CompilerOptions]:
        """Yield a fresh options handle, disposing it on every exit path."""
        opts = self.create_options()
        try:
            if config is not None:
                OptionTranslator().apply(opts, config)
            yield opts
        finally:
            opts.dispose()

    def version(self) -> VersionInfo:
        return self._require_native().version()
