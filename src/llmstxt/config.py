"""Generation and site configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Tuple

DEFAULT_OUTPUT_FILE = "llms.txt"
DEFAULT_OUTPUT_FILE_FULL = "llms-full.txt"
DEFAULT_EXCLUDE_PATTERNS: Tuple[str, ...] = ("**/CLAUDE.md", "**/node_modules/**")

# Host option names as they appear in the site configuration file.
_OPTION_ALIASES = {
    "outputFileName": "output_file_name",
    "outputFileNameFull": "output_file_name_full",
    "excludePatterns": "exclude_patterns",
}


@dataclass(slots=True, frozen=True)
class GenerationConfig:
    output_file_name: str = DEFAULT_OUTPUT_FILE
    output_file_name_full: str = DEFAULT_OUTPUT_FILE_FULL
    exclude_patterns: Tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    debug: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence of patterns but keep the stored value immutable.
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> "GenerationConfig":
        """Build a config from plugin options, accepting camelCase or snake_case keys."""
        if not options:
            return cls()

        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown option: {key}")
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(slots=True, frozen=True)
class SiteConfig:
    """The subset of the host site configuration used for the index export."""

    title: str
    url: str = ""
    base_url: str = "/"
    tagline: str = ""

    @property
    def base_address(self) -> str:
        # Plain concatenation; duplicate slashes are left as the host wrote them.
        return f"{self.url}{self.base_url}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SiteConfig":
        if "title" not in data:
            raise ValueError("Site configuration is missing 'title'")
        return cls(
            title=str(data["title"]),
            url=data.get("url") or "",
            base_url=data.get("baseUrl", data.get("base_url", "/")) or "",
            tagline=data.get("tagline") or "",
        )
