"""Small SVG element builders shared by the renderers."""
from __future__ import annotations

import html


def _fmt(value: float) -> str:
    return f"{value:g}"


def svg_rect(x: float, y: float, w: float, h: float, fill: str) -> str:
    """Generate an SVG rect element."""
    return (
        f'<rect x="{_fmt(x)}" y="{_fmt(y)}" width="{_fmt(w)}" height="{_fmt(h)}" '
        f'fill="{fill}"/>'
    )


def svg_path(d: str, stroke: str, width: float = 1, **attrs: str) -> str:
    """Generate an SVG path element; extra attributes use snake_case keys."""
    extra = "".join(
        f' {key.replace("_", "-")}="{html.escape(value)}"' for key, value in attrs.items()
    )
    return f'<path d="{d}" fill="none" stroke="{stroke}" stroke-width="{_fmt(width)}"{extra}/>'


def svg_document(
    width: float,
    height: float,
    body: list[str],
    style: str = "",
    preserve: str = "xMidYMid meet",
) -> str:
    """Wrap elements in a self-contained ``<svg>`` with a pixel-unit viewBox."""
    style_attr = f' style="{style}"' if style else ""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {_fmt(width)} {_fmt(height)}" '
        f'preserveAspectRatio="{preserve}"{style_attr}>'
        + "".join(body)
        + "</svg>"
    )


def escape(text: str) -> str:
    return html.escape(text)
