from .models import BINDING_VERSION, RuntimeConfig, VersionInfo
from .exceptions import (
    SassBindError,
    RuntimeUnavailableError,
    DisposedError,
    InvalidOptionError,
    InvalidStyleError,
    InvalidPrecisionError,
)
from .styles import OutputStyle, STYLE_NAMES
from .interfaces import Handle, NativeApi
from .ffi import CtypesNativeApi, load_library
from .options import CompilerOptions
from .translator import (
    ConfigurationBag,
    DEFAULT_PRECISION,
    DEFAULT_STYLE,
    OptionRule,
    OptionTranslator,
    translate,
)
from .context import CompilerContext

__version__ = BINDING_VERSION

__all__ = [
    "RuntimeConfig",
    "VersionInfo",
    "SassBindError",
    "RuntimeUnavailableError",
    "DisposedError",
    "InvalidOptionError",
    "InvalidStyleError",
    "InvalidPrecisionError",
    "OutputStyle",
    "STYLE_NAMES",
    "Handle",
    "NativeApi",
    "CtypesNativeApi",
    "load_library",
    "CompilerOptions",
    "ConfigurationBag",
    "DEFAULT_PRECISION",
    "DEFAULT_STYLE",
    "OptionRule",
    "OptionTranslator",
    "translate",
    "CompilerContext",
]
