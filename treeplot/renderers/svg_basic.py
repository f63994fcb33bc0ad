"""
Basic static SVG renderer for treemap scenes.

Generates a self-contained SVG document with rectangles, labels and a fill
legend only. No interactivity, no JavaScript.
"""

import html

from ..labels import LabelSpec
from ..logger import logger
from ..scene import RectFill, RectStroke
from ..utils import MM_TO_PT

LEGEND_WIDTH = 160

TEXT_ANCHOR = {'left': 'start', 'center': 'middle', 'right': 'end'}
BASELINE = {'top': 'hanging', 'center': 'middle', 'bottom': 'auto'}


def render(scene, output_path, width=1200, height=800):
    """Write the scene to output_path as SVG."""
    svg_content = generate_svg(scene, width, height)

    with open(output_path, 'w') as f:
        f.write(svg_content)

    logger.info(f'SVG saved to: {output_path}')
    return output_path


def generate_svg(scene, width=1200, height=800):
    """Generate a static SVG document for a scene."""
    plot_width = width - LEGEND_WIDTH
    body = render_instructions(scene, plot_width, height)
    legend = render_legend(scene.legend, plot_width + 10, 20)
    title = ''
    if scene.title:
        title = f'  <title>{html.escape(scene.title)}</title>\n'

    return f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg"
     width="{width}" height="{height}" viewBox="0 0 {width} {height}"
     style="background-color: #ffffff;">
{title}  <defs>
    <style type="text/css">
      text {{
        font-family: Helvetica, Arial, sans-serif;
        pointer-events: none;
      }}
    </style>
    <clipPath id="panel"><rect x="0" y="0" width="{plot_width}" height="{height}"/></clipPath>
  </defs>
  <g clip-path="url(#panel)">
{body}
  </g>
{legend}
</svg>'''


def _transform(scene, plot_width, plot_height):
    """Map plot coordinates to pixels; y grows downward in SVG"""
    (x0, x1), (y0, y1) = scene.xlim, scene.ylim

    def to_px(x, y):
        px = (x - x0) / (x1 - x0) * plot_width
        py = (y1 - y) / (y1 - y0) * plot_height
        return px, py

    return to_px


def render_instructions(scene, plot_width, plot_height):
    """Render the scene's draw instructions, in order, to SVG elements."""
    to_px = _transform(scene, plot_width, plot_height)
    body_parts = []

    for inst in scene.instructions:
        if isinstance(inst, (RectFill, RectStroke)):
            x, y = to_px(inst.xmin, inst.ymax)
            x2, y2 = to_px(inst.xmax, inst.ymin)
            if isinstance(inst, RectFill):
                style = f'fill="{inst.colour}" stroke="none"'
            else:
                style = f'fill="none" stroke="{inst.colour}" stroke-width="{inst.linewidth * MM_TO_PT:.2f}"'
            body_parts.append(
                f'    <rect x="{x:.2f}" y="{y:.2f}" width="{x2 - x:.2f}" height="{y2 - y:.2f}" {style}/>'
            )
        elif isinstance(inst, LabelSpec):
            x, y = to_px(inst.x, inst.y)
            body_parts.append(
                f'    <text x="{x:.2f}" y="{y:.2f}" font-size="{inst.size * MM_TO_PT:.2f}pt"'
                f' font-weight="{inst.fontweight}" fill="{inst.colour}" fill-opacity="{inst.alpha:g}"'
                f' text-anchor="{TEXT_ANCHOR[inst.ha]}" dominant-baseline="{BASELINE[inst.va]}">'
                f'{html.escape(inst.text)}</text>'
            )

    if scene.panel_border is not None:
        b = scene.panel_border
        body_parts.append(
            f'    <rect x="0" y="0" width="{plot_width}" height="{plot_height}" fill="none"'
            f' stroke="{b.colour}" stroke-width="{b.linewidth * MM_TO_PT:.2f}"/>'
        )

    return '\n'.join(body_parts)


def render_legend(legend, x, y):
    parts = [f'  <text x="{x}" y="{y}" font-size="11pt">{html.escape(str(legend.title))}</text>']
    for i, (text, colour) in enumerate(legend.entries):
        ey = y + 12 + 20 * i
        parts.append(f'  <rect x="{x}" y="{ey}" width="14" height="14" fill="{colour}"/>')
        parts.append(
            f'  <text x="{x + 20}" y="{ey + 11}" font-size="9pt">{html.escape(text)}</text>'
        )
    return '\n'.join(parts)
