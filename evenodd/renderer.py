"""PIL key renderers for the Even or Odd deck layout."""

from PIL import Image, ImageDraw, ImageFont

from evenodd.challenge import Challenge, describe
from evenodd.engine import ROUND_SECONDS, Direction

SIZE = (96, 96)
FONT_PATH = "/System/Library/Fonts/Helvetica.ttc"

BG_DARK = "#1e293b"
BG_HUD = "#111827"
BG_LOCKED = "#7f1d1d"
BG_PREVIEW = "#1f2937"

DIRECTION_STYLE = {
    Direction.EVEN: ("EVEN", "#2563eb", "#93c5fd"),
    Direction.ODD: ("ODD", "#db2777", "#f9a8d4"),
}


def _font(size: int) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(FONT_PATH, size)
    except OSError:
        return ImageFont.load_default(size)


def _fit_size(text: str, sizes: tuple[int, ...]) -> int:
    """Pick a font size by text length: short text gets the biggest."""
    if len(text) <= 1:
        return sizes[0]
    if len(text) <= 3:
        return sizes[1]
    return sizes[2]


def render_empty(bg: str = BG_DARK, size=SIZE) -> Image.Image:
    return Image.new("RGB", size, bg)


# ── HUD ──────────────────────────────────────────────────────────────

def render_title(size=SIZE) -> Image.Image:
    img = Image.new("RGB", size, BG_HUD)
    d = ImageDraw.Draw(img)
    d.text((48, 34), "EVEN", font=_font(16), fill="#93c5fd", anchor="mm")
    d.text((48, 56), "or ODD", font=_font(14), fill="#f9a8d4", anchor="mm")
    return img


def render_hud_value(label: str, value: int, color: str = "#34d399",
                     size=SIZE) -> Image.Image:
    img = Image.new("RGB", size, BG_HUD)
    d = ImageDraw.Draw(img)
    d.text((48, 20), label, font=_font(14), fill="#9ca3af", anchor="mt")
    d.text((48, 52), str(value), font=_font(28), fill=color, anchor="mt")
    return img


def timer_color(time_left: int) -> str:
    fraction = time_left / ROUND_SECONDS
    if fraction > 0.375:
        return "#22c55e"
    if fraction > 0.1875:
        return "#eab308"
    return "#ef4444"


def render_timer(time_left: int, size=SIZE) -> Image.Image:
    """Seconds left plus a bar that drains over the round."""
    img = Image.new("RGB", size, BG_HUD)
    d = ImageDraw.Draw(img)
    d.text((48, 14), "TIME", font=_font(12), fill="#9ca3af", anchor="mt")

    bar_x, bar_y, bar_w, bar_h = 10, 36, 76, 20
    d.rectangle([bar_x, bar_y, bar_x + bar_w, bar_y + bar_h],
                outline="#4b5563", width=1)

    color = timer_color(time_left)
    fill_w = max(0, int(bar_w * time_left / ROUND_SECONDS))
    if fill_w > 0:
        d.rectangle([bar_x + 1, bar_y + 1, bar_x + fill_w, bar_y + bar_h - 1],
                    fill=color)

    d.text((48, 66), f"{max(0, time_left)}s", font=_font(14), fill=color,
           anchor="mt")
    return img


def render_feedback(feedback: str | None, locked: bool, size=SIZE) -> Image.Image:
    if locked:
        img = Image.new("RGB", size, BG_LOCKED)
        d = ImageDraw.Draw(img)
        d.text((48, 38), feedback or "", font=_font(16), fill="#fca5a5",
               anchor="mm")
        d.text((48, 60), "LOCKED", font=_font(14), fill="white", anchor="mm")
        return img

    img = Image.new("RGB", size, BG_HUD)
    if feedback:
        d = ImageDraw.Draw(img)
        d.text((48, 48), feedback, font=_font(30), fill="#4ade80", anchor="mm")
    return img


# ── challenges ───────────────────────────────────────────────────────

def render_challenge(challenge: Challenge, active: bool = False,
                     locked: bool = False, size=SIZE) -> Image.Image:
    """Active challenge is big and bright, preview ones are dimmed."""
    text = describe(challenge)
    if active:
        bg = BG_LOCKED if locked else BG_DARK
        img = Image.new("RGB", size, bg)
        d = ImageDraw.Draw(img)
        d.rectangle([3, 3, 92, 92], outline="#fbbf24", width=2)
        fsize = _fit_size(text, (56, 32, 22))
        d.text((48, 48), text, font=_font(fsize), fill="white", anchor="mm")
        return img

    img = Image.new("RGB", size, BG_PREVIEW)
    d = ImageDraw.Draw(img)
    fsize = _fit_size(text, (36, 26, 18))
    d.text((48, 48), text, font=_font(fsize), fill="#9ca3af", anchor="mm")
    return img


# ── controls ─────────────────────────────────────────────────────────

def render_direction(direction: Direction, enabled: bool = True,
                     size=SIZE) -> Image.Image:
    label, bg, accent = DIRECTION_STYLE[direction]
    if not enabled:
        bg, accent = "#374151", "#6b7280"
    img = Image.new("RGB", size, bg)
    d = ImageDraw.Draw(img)
    d.rectangle([3, 3, 92, 92], outline=accent, width=2)
    d.text((48, 48), label, font=_font(22), fill="white", anchor="mm")
    return img


def render_start(again: bool = False, size=SIZE) -> Image.Image:
    img = Image.new("RGB", size, "#065f46")
    d = ImageDraw.Draw(img)
    d.text((48, 38), "PLAY", font=_font(16), fill="white", anchor="mm")
    d.text((48, 58), "AGAIN" if again else "START", font=_font(16),
           fill="#34d399", anchor="mm")
    return img


def render_game_over(score: int, size=SIZE) -> Image.Image:
    img = Image.new("RGB", size, "#7c2d12")
    d = ImageDraw.Draw(img)
    d.text((48, 22), "TIME UP", font=_font(14), fill="#fca5a5", anchor="mt")
    d.text((48, 44), str(score), font=_font(28), fill="white", anchor="mt")
    d.text((48, 78), "pts", font=_font(12), fill="#fdba74", anchor="mt")
    return img
