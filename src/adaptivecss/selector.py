"""
Semantic color selection.

Chooses background, foreground, border, accent, focus and additional-color
tokens for one mode from the palettes in a registry. Selection is a pure
function of the palettes, the mode and a SelectionPolicy; it never fails for
unreachable contrast, it degrades to the best available swatch instead and
records whether the preferred accent foreground still works.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple

from adaptivecss.colors import (
    BLACK,
    NON_TEXT_MIN_RATIO,
    WHITE,
    Color,
    Palette,
    Swatch,
    black_or_white_by_contrast,
    contrast_ratio,
)
from adaptivecss.config.models import SystemConfig
from adaptivecss.registry import PaletteRegistry
from adaptivecss.utils.logger import get_logger

logger = get_logger(__name__)

# Token sections in output order. Additional palettes follow under their own heading.
TOKEN_SECTIONS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Backgrounds", ("color-bg", "color-bg-subtle", "color-bg-elevated", "color-bg-surface")),
    ("Foregrounds", ("color-fg", "color-fg-muted")),
    ("Borders", ("color-border", "color-border-subtle")),
    ("Accent", ("color-accent", "color-accent-hover", "color-accent-active", "color-accent-fg")),
    ("Focus - WCAG 2.2 SC 2.4.13 Focus Appearance", ("color-focus-ring",)),
)
ADDITIONAL_SECTION = "Additional Colors"

# Steps between the accent and its hover/active states, and between the border
# and its subtle variant.
STATE_OFFSET = 2


@dataclass(frozen=True)
class SelectionPolicy:
    """The part of the configuration that affects color choice."""

    required_ratio: float
    prefer_white_text: bool = False

    @classmethod
    def from_config(cls, config: SystemConfig) -> SelectionPolicy:
        return cls(
            required_ratio=config.required_ratio,
            prefer_white_text=config.prefer_white_text,
        )

    @property
    def preferred_foreground(self) -> Color:
        return WHITE if self.prefer_white_text else BLACK

    @property
    def prefer_black(self) -> bool:
        return not self.prefer_white_text


class AccentTier(str, Enum):
    """How the accent swatch was found."""

    PERFECT = "perfect"    # visible on bg and readable with the preferred text color
    VISIBLE = "visible"    # visible on bg, text readability not guaranteed
    FALLBACK = "fallback"  # nothing reaches 3:1 against bg


@dataclass(frozen=True)
class AccentSelection:
    swatch: Swatch
    tier: AccentTier
    preferred_fg_accessible: bool

    @property
    def color(self) -> Color:
        return self.swatch.color

    @property
    def index(self) -> int:
        return self.swatch.index


@dataclass(frozen=True)
class ModeTokenSet:
    """
    Semantic tokens for one mode.

    `tokens` maps unprefixed token names (e.g. `color-bg`) to `#rrggbb`
    values in output order.
    """

    is_dark: bool
    tokens: Dict[str, str]
    accent: AccentSelection
    extra_names: Tuple[str, ...] = field(default=())

    @property
    def preferred_fg_accessible(self) -> bool:
        return self.accent.preferred_fg_accessible

    @property
    def mode(self) -> str:
        return "dark" if self.is_dark else "light"

    def __getitem__(self, token: str) -> str:
        return self.tokens[token]

    def sections(self) -> Iterator[Tuple[str, List[Tuple[str, str]]]]:
        """Yield (heading, [(token, value), ...]) groups in output order."""
        for title, names in TOKEN_SECTIONS:
            yield title, [(name, self.tokens[name]) for name in names]

        if self.extra_names:
            extra: List[Tuple[str, str]] = []
            for name in self.extra_names:
                extra.append((f"color-{name}", self.tokens[f"color-{name}"]))
                extra.append((f"color-{name}-fg", self.tokens[f"color-{name}-fg"]))
            yield ADDITIONAL_SECTION, extra


@dataclass(frozen=True)
class _Candidate:
    swatch: Swatch
    bg_contrast: float
    fg_contrast: float


def background_indices(last_index: int, is_dark: bool) -> Dict[str, int]:
    """Neutral palette indices of the background tiers, before clamping."""
    if is_dark:
        return {
            "color-bg": last_index - 2,
            "color-bg-subtle": last_index - 1,
            "color-bg-elevated": last_index - 4,
            "color-bg-surface": last_index - 3,
        }
    return {
        "color-bg": 1,
        "color-bg-subtle": 0,
        "color-bg-elevated": 2,
        "color-bg-surface": 1,
    }


def select_accent(palette: Palette, background: Color, policy: SelectionPolicy) -> AccentSelection:
    """
    Choose the accent swatch for a background.

    Tiers, first match wins:

    1. PERFECT: at least 3:1 against the background and the required ratio
       against the preferred text color; the most visible one is taken.
    2. VISIBLE: at least 3:1 against the background; the darkest when white
       text is preferred, the lightest otherwise.
    3. FALLBACK: the best contrasting swatch for text on the background.

    Args:
        palette: Accent palette
        background: Resolved `color-bg`
        policy: Contrast level and text preference

    Returns:
        AccentSelection with the swatch, the tier and whether the preferred
        foreground meets the required ratio on it
    """
    preferred = policy.preferred_foreground
    candidates = [
        _Candidate(
            swatch=Swatch(index, color),
            bg_contrast=contrast_ratio(color, background),
            fg_contrast=contrast_ratio(color, preferred),
        )
        for index, color in enumerate(palette.swatches)
    ]

    visible = [c for c in candidates if c.bg_contrast >= NON_TEXT_MIN_RATIO]
    perfect = [c for c in visible if c.fg_contrast >= policy.required_ratio]

    if perfect:
        best = max(perfect, key=lambda c: c.bg_contrast)
        return AccentSelection(best.swatch, AccentTier.PERFECT, True)

    if visible:
        # Ordered by palette index, not by contrast.
        pick = visible[-1] if policy.prefer_white_text else visible[0]
        return AccentSelection(
            pick.swatch,
            AccentTier.VISIBLE,
            pick.fg_contrast >= policy.required_ratio,
        )

    return AccentSelection(
        palette.best_contrast(background, policy.required_ratio),
        AccentTier.FALLBACK,
        False,
    )


def select_tokens(
    registry: PaletteRegistry,
    is_dark: bool,
    policy: SelectionPolicy,
) -> ModeTokenSet:
    """
    Compute every semantic token for one mode.

    Args:
        registry: Palettes for this run; must contain neutral and accent
        is_dark: Select for dark mode instead of light mode
        policy: Contrast level and text preference

    Returns:
        ModeTokenSet for the mode

    Raises:
        PaletteNotFoundError: If neutral or accent is missing
    """
    neutral = registry.get_palette("neutral")
    accent_palette = registry.get_palette("accent")
    mode = "dark" if is_dark else "light"

    # Signed step used for the border-subtle, hover and active variants
    offset = -STATE_OFFSET if is_dark else STATE_OFFSET

    tokens: Dict[str, str] = {}

    # Backgrounds
    indices = background_indices(neutral.last_index, is_dark)
    for token, index in indices.items():
        tokens[token] = neutral.swatch(index).to_hex()
    bg = neutral.swatch(indices["color-bg"]).color

    # Foregrounds
    tokens["color-fg"] = black_or_white_by_contrast(
        bg, policy.required_ratio, policy.prefer_black
    ).to_hex()
    tokens["color-fg-muted"] = neutral.best_contrast(bg, policy.required_ratio).to_hex()

    # Borders
    border = neutral.best_contrast(bg, NON_TEXT_MIN_RATIO)
    tokens["color-border"] = border.to_hex()
    tokens["color-border-subtle"] = neutral.swatch(border.index + offset).to_hex()

    # Accent: hover and active step in opposite directions from the accent
    accent = select_accent(accent_palette, bg, policy)
    hover = accent_palette.swatch(accent.index - offset)
    active = accent_palette.swatch(accent.index + offset)
    if accent.preferred_fg_accessible:
        accent_fg = policy.preferred_foreground
    else:
        accent_fg = black_or_white_by_contrast(
            accent.color, policy.required_ratio, policy.prefer_black
        )

    tokens["color-accent"] = accent.color.to_hex()
    tokens["color-accent-hover"] = hover.to_hex()
    tokens["color-accent-active"] = active.to_hex()
    tokens["color-accent-fg"] = accent_fg.to_hex()

    logger.debug(
        f"{mode} accent: {accent.tier.value} tier, index {accent.index}, "
        f"preferred text accessible={accent.preferred_fg_accessible}"
    )

    # Focus ring is chosen on its own and may differ from the accent
    tokens["color-focus-ring"] = accent_palette.best_contrast(bg, NON_TEXT_MIN_RATIO).to_hex()

    # Additional colors
    extra_names = []
    for palette in registry.additional():
        color = palette.best_contrast(bg, policy.required_ratio).color
        tokens[f"color-{palette.key}"] = color.to_hex()
        tokens[f"color-{palette.key}-fg"] = black_or_white_by_contrast(
            color, policy.required_ratio, policy.prefer_black
        ).to_hex()
        extra_names.append(palette.key)

    return ModeTokenSet(
        is_dark=is_dark,
        tokens=tokens,
        accent=accent,
        extra_names=tuple(extra_names),
    )


__all__ = [
    "TOKEN_SECTIONS",
    "ADDITIONAL_SECTION",
    "STATE_OFFSET",
    "SelectionPolicy",
    "AccentTier",
    "AccentSelection",
    "ModeTokenSet",
    "background_indices",
    "select_accent",
    "select_tokens",
]
