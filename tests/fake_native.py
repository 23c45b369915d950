from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import sassbind_core
from sassbind_core import Handle, NativeApi, VersionInfo


@dataclass
class _NativeOptions:
    precision: int = 10
    output_style: int = 0
    source_comments: bool = False
    omit_map_comment: bool = False
    indented_syntax: bool = False
    include_paths: List[str] = field(default_factory=list)
    plugin_path: Optional[str] = None


class NativeMisuse(AssertionError):
    pass


class FakeNative(NativeApi):
    """In-memory stand-in for libsass' ``sass_option_*`` API.

    Unlike the real runtime it raises ``NativeMisuse`` on any access to a
    handle that was never allocated or was already deleted.
    """

    def __init__(self, first_handle: int = 0x1000, reuse_handles: bool = False):
        self.store: Dict[Handle, _NativeOptions] = {}
        self.deleted: List[Handle] = []
        self.calls: List[str] = []
        self._next = first_handle
        self._reuse = reuse_handles
        self._lock = threading.Lock()

    def _get(self, handle: Handle) -> _NativeOptions:
        if handle not in self.store:
            raise NativeMisuse(f"handle {handle!r} is not live")
        return self.store[handle]

    def _record(self, name: str) -> None:
        self.calls.append(name)

    def make_options(self) -> Handle:
        self._record("make_options")
        with self._lock:
            handle = self._next
            if not self._reuse:
                self._next += 0x10
            self.store.setdefault(handle, _NativeOptions())
        return handle

    def delete_options(self, handle: Handle) -> None:
        self._record("delete_options")
        self._get(handle)
        del self.store[handle]
        self.deleted.append(handle)

    def get_precision(self, handle):
        self._record("get_precision")
        return self._get(handle).precision

    def set_precision(self, handle, precision):
        self._record("set_precision")
        self._get(handle).precision = precision

    def get_output_style(self, handle):
        self._record("get_output_style")
        return self._get(handle).output_style

    def set_output_style(self, handle, style):
        self._record("set_output_style")
        self._get(handle).output_style = style

    def get_source_comments(self, handle):
        return self._get(handle).source_comments

    def set_source_comments(self, handle, enabled):
        self._record("set_source_comments")
        self._get(handle).source_comments = enabled

    def get_omit_map_comment(self, handle):
        return self._get(handle).omit_map_comment

    def set_omit_map_comment(self, handle, enabled):
        self._record("set_omit_map_comment")
        self._get(handle).omit_map_comment = enabled

    def get_indented_syntax(self, handle):
        return self._get(handle).indented_syntax

    def set_indented_syntax(self, handle, enabled):
        self._record("set_indented_syntax")
        self._get(handle).indented_syntax = enabled

    def push_include_path(self, handle, path):
        self._record("push_include_path")
        self._get(handle).include_paths.append(path)

    def include_path_count(self, handle):
        return len(self._get(handle).include_paths)

    def get_include_path(self, handle, index):
        return self._get(handle).include_paths[index]

    def push_plugin_path(self, handle, path):
        self._record("push_plugin_path")
        self._get(handle).plugin_path = path

    def get_plugin_path(self, handle):
        return self._get(handle).plugin_path

    def version(self) -> VersionInfo:
        return VersionInfo(
            binding=sassbind_core.__version__,
            libsass="3.6.5",
            sass_lang="3.5",
            sass2scss="1.1.1",
        )

    def mutations(self) -> List[str]:
        return [c for c in self.calls if c.startswith(("set_", "push_"))]


def make_context(**kwargs) -> tuple[sassbind_core.CompilerContext, FakeNative]:
    native = FakeNative(**kwargs)
    return sassbind_core.CompilerContext(native), native
