import ctypes
import ctypes.util
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import RuntimeUnavailableError
from .interfaces import Handle, NativeApi
from .models import BINDING_VERSION, RuntimeConfig, VersionInfo

log = logging.getLogger(__name__)

# name -> (restype, argtypes)
SIGNATURES: Dict[str, Tuple[object, List[object]]] = {
    "sass_make_options": (ctypes.c_void_p, []),
    "sass_delete_options": (None, [ctypes.c_void_p]),
    "sass_option_get_precision": (ctypes.c_int, [ctypes.c_void_p]),
    "sass_option_set_precision": (None, [ctypes.c_void_p, ctypes.c_int]),
    "sass_option_get_output_style": (ctypes.c_int, [ctypes.c_void_p]),
    "sass_option_set_output_style": (None, [ctypes.c_void_p, ctypes.c_int]),
    "sass_option_get_source_comments": (ctypes.c_bool, [ctypes.c_void_p]),
    "sass_option_set_source_comments": (None, [ctypes.c_void_p, ctypes.c_bool]),
    "sass_option_get_omit_source_map_url": (ctypes.c_bool, [ctypes.c_void_p]),
    "sass_option_set_omit_source_map_url": (None, [ctypes.c_void_p, ctypes.c_bool]),
    "sass_option_get_is_indented_syntax_src": (ctypes.c_bool, [ctypes.c_void_p]),
    "sass_option_set_is_indented_syntax_src": (
        None,
        [ctypes.c_void_p, ctypes.c_bool],
    ),
    "sass_option_push_include_path": (None, [ctypes.c_void_p, ctypes.c_char_p]),
    "sass_option_get_include_path_size": (ctypes.c_size_t, [ctypes.c_void_p]),
    "sass_option_get_include_path": (
        ctypes.c_char_p,
        [ctypes.c_void_p, ctypes.c_size_t],
    ),
    "sass_option_push_plugin_path": (None, [ctypes.c_void_p, ctypes.c_char_p]),
    "sass_option_get_plugin_path": (ctypes.c_char_p, [ctypes.c_void_p]),
    "libsass_version": (ctypes.c_char_p, []),
    "libsass_language_version": (ctypes.c_char_p, []),
    "sass2scss_version": (ctypes.c_char_p, []),
}


def clean_lib_name(lib_name: str) -> str:
    base = lib_name.split(".")[0]
    if base.startswith("lib"):
        return base[3:]
    return base


def platform_filename(lib_name: str) -> str:
    lower = lib_name.lower()
    if lower.endswith((".dll", ".so", ".dylib")) or ".so." in lower or os.sep in lib_name:
        return lib_name
    lib_name = clean_lib_name(lib_name)
    if os.name == "nt":
        return f"{lib_name}.dll"
    if sys.platform == "darwin":
        return f"lib{lib_name}.dylib"
    return f"lib{lib_name}.so"


def load_library(config: RuntimeConfig) -> ctypes.CDLL:
    candidates: List[str] = []
    if config.library_path:
        candidates.append(config.library_path)
    for name in config.library_names:
        found = ctypes.util.find_library(name)
        if found:
            candidates.append(found)
        candidates.append(platform_filename(name))
    candidates = list(dict.fromkeys(candidates))

    errors = []
    for candidate in candidates:
        try:
            lib = ctypes.CDLL(candidate)
        except OSError as e:
            errors.append(f"{candidate}: {e}")
            continue
        log.debug("Loaded libsass runtime from %s", candidate)
        return lib

    detail = "; ".join(errors) or "no candidate library names configured"
    raise RuntimeUnavailableError(f"Could not load libsass runtime ({detail})")


def _encode(value: str) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value).encode("utf-8")


def _decode(value: Optional[bytes]) -> Optional[str]:
    if value is None:
        return None
    return value.decode("utf-8", errors="replace")


class CtypesNativeApi(NativeApi):
    """``NativeApi`` backed by a libsass shared library loaded with ctypes."""

    def __init__(self, lib: ctypes.CDLL):
        self.lib = lib
        self.functions: Dict[str, Any] = {
            name: self._bind(name, restype, argtypes)
            for name, (restype, argtypes) in SIGNATURES.items()
        }

    @classmethod
    def load(cls, config: Optional[RuntimeConfig] = None) -> "CtypesNativeApi":
        return cls(load_library(config or RuntimeConfig.from_env()))

    def _bind(self, name: str, restype, argtypes) -> Any:
        try:
            func = getattr(self.lib, name)
        except AttributeError:
            raise RuntimeUnavailableError(
                f"Symbol '{name}' not found in libsass runtime"
            ) from None
        func.restype = restype
        func.argtypes = argtypes
        return func

    def _call(self, name: str, *args):
        return self.functions[name](*args)

    def make_options(self) -> Handle:
        handle = self._call("sass_make_options")
        if not handle:
            raise RuntimeUnavailableError("sass_make_options returned a null handle")
        return handle

    def delete_options(self, handle: Handle) -> None:
        self._call("sass_delete_options", handle)

    def get_precision(self, handle: Handle) -> int:
        return self._call("sass_option_get_precision", handle)

    def set_precision(self, handle: Handle, precision: int) -> None:
        self._call("sass_option_set_precision", handle, int(precision))

    def get_output_style(self, handle: Handle) -> int:
        return self._call("sass_option_get_output_style", handle)

    def set_output_style(self, handle: Handle, style: int) -> None:
        self._call("sass_option_set_output_style", handle, int(style))

    def get_source_comments(self, handle: Handle) -> bool:
        return bool(self._call("sass_option_get_source_comments", handle))

    def set_source_comments(self, handle: Handle, enabled: bool) -> None:
        self._call("sass_option_set_source_comments", handle, bool(enabled))

    def get_omit_map_comment(self, handle: Handle) -> bool:
        return bool(self._call("sass_option_get_omit_source_map_url", handle))

    def set_omit_map_comment(self, handle: Handle, enabled: bool) -> None:
        self._call("sass_option_set_omit_source_map_url", handle, bool(enabled))

    def get_indented_syntax(self, handle: Handle) -> bool:
        return bool(self._call("sass_option_get_is_indented_syntax_src", handle))

    def set_indented_syntax(self, handle: Handle, enabled: bool) -> None:
        self._call("sass_option_set_is_indented_syntax_src", handle, bool(enabled))

    def push_include_path(self, handle: Handle, path: str) -> None:
        self._call("sass_option_push_include_path", handle, _encode(path))

    def include_path_count(self, handle: Handle) -> int:
        return int(self._call("sass_option_get_include_path_size", handle))

    def get_include_path(self, handle: Handle, index: int) -> str:
        return _decode(self._call("sass_option_get_include_path", handle, index)) or ""

    def push_plugin_path(self, handle: Handle, path: str) -> None:
        self._call("sass_option_push_plugin_path", handle, _encode(path))

    def get_plugin_path(self, handle: Handle) -> Optional[str]:
        return _decode(self._call("sass_option_get_plugin_path", handle))

    def version(self) -> VersionInfo:
        return VersionInfo(
            binding=BINDING_VERSION,
            libsass=_decode(self._call("libsass_version")) or "",
            sass_lang=_decode(self._call("libsass_language_version")) or "",
            sass2scss=_decode(self._call("sass2scss_version")) or "",
        )
