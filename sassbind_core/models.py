import os
from dataclasses import dataclass, field
from typing import List, Optional

BINDING_VERSION = "0.3.0"
ENV_LIBRARY_PATH = "SASSBIND_LIBSASS"


@dataclass
class RuntimeConfig:
    library_path: Optional[str] = None
    library_names: List[str] = field(default_factory=lambda: ["sass"])

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        path = os.environ.get(ENV_LIBRARY_PATH, "").strip()
        return cls(library_path=path or None)


@dataclass(frozen=True)
class VersionInfo:
    binding: str
    libsass: str
    sass_lang: str
    sass2scss: str

    def rows(self) -> List[tuple]:
        return [
            ("sassbind", self.binding),
            ("libsass", self.libsass),
            ("sass", self.sass_lang),
            ("sass2scss", self.sass2scss),
        ]
