"""
Framework Naming Conventions & Detection Metadata

Per-framework environment variable names, integration package names and the
files/dependencies that identify a framework in a project.

Scanning a project to apply FRAMEWORK_PATTERNS is left to the CLI; this
module only declares the metadata.

Usage:
    from entrolytics_shared.frameworks import is_valid_framework, get_env_var_names

    if is_valid_framework(user_input):
        names = get_env_var_names(user_input)
        website_id = os.getenv(names.website_id)
        if website_id is None and names.fallback:
            website_id = os.getenv(names.fallback.website_id)
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple, Union


class Framework(str, Enum):
    """Supported frameworks (closed set)"""
    NEXTJS = "nextjs"
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    ASTRO = "astro"
    HTML = "html"
    NODE = "node"
    PHP = "php"
    PYTHON = "python"
    GO = "go"


@dataclass(frozen=True)
class EnvVarFallback:
    """Legacy variable names tried after the primary convention"""
    website_id: str
    host: str


@dataclass(frozen=True)
class FrameworkEnvNames:
    """Environment variable names a framework's tooling expects"""
    website_id: str
    host: str
    env_file: str
    fallback: Optional[EnvVarFallback] = None


_PLAIN_ENV_NAMES = FrameworkEnvNames(
    website_id="ENTROLYTICS_WEBSITE_ID",
    host="ENTROLYTICS_HOST",
    env_file=".env",
)

_VITE_ENV_NAMES = FrameworkEnvNames(
    website_id="VITE_ENTROLYTICS_WEBSITE_ID",
    host="VITE_ENTROLYTICS_HOST",
    env_file=".env",
)

_PUBLIC_ENV_NAMES = FrameworkEnvNames(
    website_id="PUBLIC_ENTROLYTICS_WEBSITE_ID",
    host="PUBLIC_ENTROLYTICS_HOST",
    env_file=".env",
)


ENV_VAR_NAMES: "MappingProxyType[Framework, FrameworkEnvNames]" = MappingProxyType({
    Framework.NEXTJS: FrameworkEnvNames(
        website_id="NEXT_PUBLIC_ENTROLYTICS_WEBSITE_ID",
        host="NEXT_PUBLIC_ENTROLYTICS_HOST",
        env_file=".env.local",
    ),
    Framework.REACT: FrameworkEnvNames(
        website_id="VITE_ENTROLYTICS_WEBSITE_ID",
        host="VITE_ENTROLYTICS_HOST",
        env_file=".env",
        # Create React App
        fallback=EnvVarFallback(
            website_id="REACT_APP_ENTROLYTICS_WEBSITE_ID",
            host="REACT_APP_ENTROLYTICS_HOST",
        ),
    ),
    Framework.VUE: _VITE_ENV_NAMES,
    Framework.SVELTE: _PUBLIC_ENV_NAMES,
    Framework.ASTRO: _PUBLIC_ENV_NAMES,
    Framework.HTML: _PLAIN_ENV_NAMES,
    Framework.NODE: _PLAIN_ENV_NAMES,
    Framework.PHP: _PLAIN_ENV_NAMES,
    Framework.PYTHON: _PLAIN_ENV_NAMES,
    Framework.GO: _PLAIN_ENV_NAMES,
})


# html, php, python and go have no integration package
FRAMEWORK_PACKAGES: "MappingProxyType[Framework, str]" = MappingProxyType({
    Framework.NEXTJS: "@entro314labs/entro-nextjs",
    Framework.REACT: "@entro314labs/entro-react",
    Framework.VUE: "@entro314labs/entro-vue",
    Framework.SVELTE: "@entro314labs/entro-svelte",
    Framework.ASTRO: "@entro314labs/entro-astro",
    Framework.NODE: "@entro314labs/entro-api",
})


@dataclass(frozen=True)
class FrameworkPattern:
    """Config files and package.json dependencies that signal a framework"""
    files: Tuple[str, ...]
    dependencies: Tuple[str, ...]


FRAMEWORK_PATTERNS: "MappingProxyType[Framework, FrameworkPattern]" = MappingProxyType({
    Framework.NEXTJS: FrameworkPattern(
        files=("next.config.js", "next.config.mjs", "next.config.ts"),
        dependencies=("next",),
    ),
    Framework.REACT: FrameworkPattern(
        files=("vite.config.js", "vite.config.ts"),
        dependencies=("react", "vite"),
    ),
    Framework.VUE: FrameworkPattern(
        files=("vite.config.js", "vite.config.ts"),
        dependencies=("vue", "vite"),
    ),
    Framework.SVELTE: FrameworkPattern(
        files=("svelte.config.js", "svelte.config.ts"),
        dependencies=("svelte",),
    ),
    Framework.ASTRO: FrameworkPattern(
        files=("astro.config.mjs", "astro.config.ts"),
        dependencies=("astro",),
    ),
})


def is_valid_framework(framework: object) -> bool:
    """
    Check if a value names a supported framework.

    Call this before indexing ENV_VAR_NAMES with user input; it never raises.
    """
    return isinstance(framework, str) and framework in ENV_VAR_NAMES


def get_env_var_names(framework: Union[Framework, str]) -> FrameworkEnvNames:
    """Get the naming convention for a validated framework (KeyError otherwise)"""
    return ENV_VAR_NAMES[framework]


def get_framework_package(framework: Union[Framework, str]) -> Optional[str]:
    """Get the integration package name, or None if the framework has none"""
    return FRAMEWORK_PACKAGES.get(framework)


def get_framework_pattern(framework: Union[Framework, str]) -> Optional[FrameworkPattern]:
    """Get detection metadata, or None for frameworks detected some other way"""
    return FRAMEWORK_PATTERNS.get(framework)
