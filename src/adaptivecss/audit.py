"""
WCAG compliance audit of a generated color system.

Measures the pairings that matter for readability and visibility in both
modes. Each check also records whether the pairing could have passed at all,
by scanning every candidate the foreground could have been drawn from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from adaptivecss.colors import BLACK, NON_TEXT_MIN_RATIO, WHITE, Color, contrast_ratio, parse_color
from adaptivecss.generator import ColorSystem
from adaptivecss.selector import ModeTokenSet

_BLACK_WHITE = (BLACK, WHITE)


@dataclass(frozen=True)
class ContrastCheck:
    """One measured foreground/background pairing."""

    mode: str
    label: str
    foreground_token: str
    background_token: str
    foreground: str
    background: str
    ratio: float
    minimum: float
    advisory: bool = False
    achievable: bool = True

    @property
    def passed(self) -> bool:
        return self.ratio >= self.minimum

    @property
    def status(self) -> str:
        if self.passed:
            return "pass"
        return "advisory" if self.advisory or not self.achievable else "fail"


@dataclass(frozen=True)
class ComplianceReport:
    contrast_level: str
    required_ratio: float
    checks: List[ContrastCheck] = field(default_factory=list)

    @property
    def failures(self) -> List[ContrastCheck]:
        """Required checks that failed although some candidate would have passed."""
        return [
            check for check in self.checks
            if not check.passed and not check.advisory and check.achievable
        ]

    @property
    def ok(self) -> bool:
        return not self.failures

    def for_mode(self, mode: str) -> List[ContrastCheck]:
        return [check for check in self.checks if check.mode == mode]


def _reaches(candidates: Iterable[Color], background: Color, minimum: float) -> bool:
    return any(contrast_ratio(candidate, background) >= minimum for candidate in candidates)


def _readable_swatch_exists(
    swatches: Sequence[Color],
    minimum: float,
    background: Optional[Color] = None,
) -> bool:
    """
    Whether some swatch carries black or white text at `minimum`.

    With a background, only swatches that stay visible on it (3:1) count.
    """
    for swatch in swatches:
        if background is not None and contrast_ratio(swatch, background) < NON_TEXT_MIN_RATIO:
            continue
        if _reaches(_BLACK_WHITE, swatch, minimum):
            return True
    return False


def _check(
    tokens: ModeTokenSet,
    label: str,
    foreground_token: str,
    background_token: str,
    minimum: float,
    achievable: bool,
    advisory: bool = False,
) -> ContrastCheck:
    foreground = parse_color(tokens[foreground_token])
    background = parse_color(tokens[background_token])
    return ContrastCheck(
        mode=tokens.mode,
        label=label,
        foreground_token=foreground_token,
        background_token=background_token,
        foreground=foreground.to_hex(),
        background=background.to_hex(),
        ratio=contrast_ratio(foreground, background),
        minimum=minimum,
        advisory=advisory,
        achievable=achievable,
    )


def audit_mode(system: ColorSystem, tokens: ModeTokenSet) -> List[ContrastCheck]:
    """
    All checks for one mode, in report order.

    Text on a colored surface is achievable when any swatch of that surface's
    palette takes black or white text at the required ratio. For the accent
    the swatch must also stay visible on `color-bg`.
    """
    required = system.config.required_ratio
    neutral = system.registry.get_palette("neutral").swatches
    accent = system.registry.get_palette("accent").swatches
    bg = parse_color(tokens["color-bg"])
    hover = parse_color(tokens["color-accent-hover"])

    checks = [
        _check(tokens, "Body text", "color-fg", "color-bg", required,
               _reaches(_BLACK_WHITE, bg, required)),
        _check(tokens, "Muted text", "color-fg-muted", "color-bg", required,
               _reaches(neutral, bg, required)),
        _check(tokens, "Accent on background", "color-accent", "color-bg",
               NON_TEXT_MIN_RATIO, _reaches(accent, bg, NON_TEXT_MIN_RATIO)),
        _check(tokens, "Border", "color-border", "color-bg", NON_TEXT_MIN_RATIO,
               _reaches(neutral, bg, NON_TEXT_MIN_RATIO)),
        _check(tokens, "Focus ring", "color-focus-ring", "color-bg",
               NON_TEXT_MIN_RATIO, _reaches(accent, bg, NON_TEXT_MIN_RATIO)),
        _check(tokens, "Button text", "color-accent-fg", "color-accent", required,
               _readable_swatch_exists(accent, required, background=bg)),
        _check(tokens, "Button text on hover", "color-accent-fg", "color-accent-hover",
               required, _reaches(_BLACK_WHITE, hover, required), advisory=True),
    ]

    for name in tokens.extra_names:
        swatches = system.registry.get_palette(name).swatches
        checks.append(
            _check(tokens, f"Text on {name}", f"color-{name}-fg", f"color-{name}",
                   required, _readable_swatch_exists(swatches, required))
        )

    return checks


def audit_system(system: ColorSystem) -> ComplianceReport:
    """
    Audit light and dark tokens of a color system.

    Args:
        system: Result of generate_color_system

    Returns:
        ComplianceReport with light checks followed by dark checks
    """
    checks: List[ContrastCheck] = []
    for tokens in system.modes:
        checks.extend(audit_mode(system, tokens))

    return ComplianceReport(
        contrast_level=system.config.contrast_level.value,
        required_ratio=system.config.required_ratio,
        checks=checks,
    )


__all__ = ["ContrastCheck", "ComplianceReport", "audit_mode", "audit_system"]
