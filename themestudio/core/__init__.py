"""Theme token resolution and override engine."""

from themestudio.core.capture import CaptureController, CaptureState
from themestudio.core.coalesce import FrameCoalescer
from themestudio.core.color_model import HSV, RGB, from_hsv, normalize_hex, parse_color, to_hex, to_hsv
from themestudio.core.grouping import COLOR_GROUPS, KeyGroup, filter_and_group, humanize
from themestudio.core.overrides import OverrideComposer, ResolvedTheme
from themestudio.core.session import BuilderSession
from themestudio.core.snippet import AppMetadata, SnippetInput, generate_snippet
from themestudio.core.tokens import Mode, TokenSet, TokenStore

__all__ = [
    "AppMetadata",
    "BuilderSession",
    "COLOR_GROUPS",
    "CaptureController",
    "CaptureState",
    "FrameCoalescer",
    "HSV",
    "KeyGroup",
    "Mode",
    "OverrideComposer",
    "RGB",
    "ResolvedTheme",
    "SnippetInput",
    "TokenSet",
    "TokenStore",
    "filter_and_group",
    "from_hsv",
    "generate_snippet",
    "humanize",
    "normalize_hex",
    "parse_color",
    "to_hex",
    "to_hsv",
]
