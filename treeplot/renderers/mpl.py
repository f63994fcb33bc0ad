import matplotlib.pyplot as plt
from matplotlib.patches import Patch, Rectangle

from ..labels import LabelSpec
from ..logger import logger
from ..scene import RectFill, RectStroke
from ..utils import MM_TO_PT


def _rect(inst, **kwargs):
    return Rectangle((inst.xmin, inst.ymin), inst.xmax - inst.xmin, inst.ymax - inst.ymin, **kwargs)


def render(scene, ax=None):
    """Draw a scene onto ax (a new figure when None); returns the Figure."""
    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure

    for inst in scene.instructions:
        if isinstance(inst, RectFill):
            ax.add_patch(_rect(inst, facecolor=inst.colour, edgecolor='none'))
        elif isinstance(inst, RectStroke):
            ax.add_patch(_rect(inst, fill=False, edgecolor=inst.colour,
                               linewidth=inst.linewidth * MM_TO_PT))
        elif isinstance(inst, LabelSpec):
            ax.text(inst.x, inst.y, inst.text,
                    fontsize=max(inst.size * MM_TO_PT, 1.0),
                    color=inst.colour, alpha=inst.alpha,
                    ha=inst.ha, va=inst.va, fontweight=inst.fontweight,
                    clip_on=True)

    ax.set_xlim(*scene.xlim)
    ax.set_ylim(*scene.ylim)
    if not scene.show_axes:
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_xlabel('')
        ax.set_ylabel('')

    for spine in ax.spines.values():
        if scene.panel_border is None:
            spine.set_visible(False)
        else:
            spine.set_edgecolor(scene.panel_border.colour)
            spine.set_linewidth(scene.panel_border.linewidth * MM_TO_PT)

    handles = [Patch(facecolor=c, edgecolor='none', label=text) for text, c in scene.legend.entries]
    ax.legend(handles=handles, title=scene.legend.title,
              loc='center left', bbox_to_anchor=(1.02, 0.5), frameon=False)

    if scene.title:
        ax.set_title(scene.title)
    return fig


def save(scene, output_path, width=8, height=6, dpi=150):
    fig, ax = plt.subplots(figsize=(width, height))
    render(scene, ax)
    fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    logger.info(f'plot saved to: {output_path}')
    return output_path
