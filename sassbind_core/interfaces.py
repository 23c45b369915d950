from abc import ABC, abstractmethod
from typing import Optional

from .models import VersionInfo

Handle = int


class NativeApi(ABC):
    """Capability surface of a loaded libsass runtime.

    Every method except ``make_options`` and ``version`` takes the opaque
    handle returned by ``make_options``. Implementations never validate
    handle liveness; ``CompilerOptions`` is responsible for that.
    """

    available: bool = True

    @abstractmethod
    def make_options(self) -> Handle: ...

    @abstractmethod
    def delete_options(self, handle: Handle) -> None: ...

    @abstractmethod
    def get_precision(self, handle: Handle) -> int: ...

    @abstractmethod
    def set_precision(self, handle: Handle, precision: int) -> None: ...

    @abstractmethod
    def get_output_style(self, handle: Handle) -> int: ...

    @abstractmethod
    def set_output_style(self, handle: Handle, style: int) -> None: ...

    @abstractmethod
    def get_source_comments(self, handle: Handle) -> bool: ...

    @abstractmethod
    def set_source_comments(self, handle: Handle, enabled: bool) -> None: ...

    @abstractmethod
    def get_omit_map_comment(self, handle: Handle) -> bool: ...

    @abstractmethod
    def set_omit_map_comment(self, handle: Handle, enabled: bool) -> None: ...

    @abstractmethod
    def get_indented_syntax(self, handle: Handle) -> bool: ...

    @abstractmethod
    def set_indented_syntax(self, handle: Handle, enabled: bool) -> None: ...

    @abstractmethod
    def push_include_path(self, handle: Handle, path: str) -> None: ...

    @abstractmethod
    def include_path_count(self, handle: Handle) -> int: ...

    @abstractmethod
    def get_include_path(self, handle: Handle, index: int) -> str: ...

    @abstractmethod
    def push_plugin_path(self, handle: Handle, path: str) -> None: ...

    @abstractmethod
    def get_plugin_path(self, handle: Handle) -> Optional[str]: ...

    @abstractmethod
    def version(self) -> VersionInfo: ...
