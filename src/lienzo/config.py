"""ContextVar-based render configuration for Lienzo.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is installed by HtmlRenderer for the duration of one render() call and
read by every node renderer in that call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so a shared registry can serve concurrent renders with different configs.

Usage:
    # Via HtmlRenderer
    renderer = HtmlRenderer(config=RenderConfig(escape_html=False))
    html = renderer.render(doc)

    # Direct registry usage (advanced)
    with render_config_context(RenderConfig(max_depth=32)):
        html = registry.render(node)

"""

import sys
from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from lienzo.nodes import Asset, EntityReference

DEFAULT_MAX_DEPTH = 128

# Interpreter frames consumed per level of node nesting, with headroom
FRAMES_PER_LEVEL = 4


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        escape_html: Escape text values, urls, titles and alt text before
            interpolation. Disable only for trusted content.
        max_depth: Maximum node nesting depth; deeper trees raise
            NestingDepthError instead of exhausting the interpreter stack.
            Must be between 1 and sys.getrecursionlimit() // FRAMES_PER_LEVEL
            at construction time; lowering the recursion limit afterwards
            can still let RecursionError through.
        text_transformer: Optional callback applied to every Text value
            before escaping.
        asset_resolver: Optional callback turning an EntityReference with
            link_type "Asset" held by a Block into an Asset. Returning None
            leaves the block unrendered; returning anything other than an
            Asset raises MalformedNodeError.

    """

    escape_html: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    text_transformer: Callable[[str], str] | None = None
    asset_resolver: Callable[[EntityReference], Asset | None] | None = None

    def __post_init__(self) -> None:
        ceiling = sys.getrecursionlimit() // FRAMES_PER_LEVEL
        if not 1 <= self.max_depth <= ceiling:
            msg = (
                f"max_depth must be between 1 and {ceiling} "
                f"(recursion limit {sys.getrecursionlimit()}), got {self.max_depth}"
            )
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({"escape_html": False, "theme": "x"})
            >>> config.escape_html
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with render_config_context(RenderConfig(escape_html=False)):
        ...     html = registry.render(Text("<b>trusted</b>"))
        >>> # Previous config restored here

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    token = _render_config.set(config)
    try:
        yield
    finally:
        _render_config.reset(token)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "FRAMES_PER_LEVEL",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
