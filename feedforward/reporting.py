"""
reporting.py
~~~~~~~~~~~~

Render training progress as an image.

Takes the per-repetition reports returned by :meth:`Network.train` and
draws cost and accuracy curves into a base64-encoded PNG.
"""

import base64
import logging
from io import BytesIO
from typing import Any, Dict, Optional, Sequence

# Use non-GUI backend for matplotlib (no display needed)
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


def create_history_image(
    history: Sequence[Dict[str, Any]],
    title: Optional[str] = None
) -> str:
    """
    Create a base64-encoded PNG of cost and accuracy per repetition.

    Args:
        history: Reports as returned by ``Network.train``
        title: Optional figure title

    Returns:
        Base64-encoded PNG image string

    Raises:
        ValueError: If history is empty
    """
    if not history:
        raise ValueError('history must contain at least one report')

    repetitions = [report['repetition'] for report in history]
    costs = [report['cost'] for report in history]
    accuracies = [report['accuracy'] * 100 for report in history]

    fig, (cost_ax, accuracy_ax) = plt.subplots(2, 1, figsize=(6, 5), sharex=True)

    cost_ax.plot(repetitions, costs, color='tab:red')
    cost_ax.set_ylabel('Cost')
    cost_ax.grid(True, alpha=0.3)

    accuracy_ax.plot(repetitions, accuracies, color='tab:blue')
    accuracy_ax.set_ylabel('Correct (%)')
    accuracy_ax.set_xlabel('Repetition')
    accuracy_ax.set_ylim(-5, 105)
    accuracy_ax.grid(True, alpha=0.3)

    if title:
        fig.suptitle(title)

    # Save image to a bytes buffer instead of a file
    buffer = BytesIO()
    fig.savefig(buffer, format='png', bbox_inches='tight')
    buffer.seek(0)
    img_base64 = base64.b64encode(buffer.getvalue()).decode('utf-8')
    plt.close(fig)

    logger.debug(f"Rendered training history with {len(history)} repetition(s)")
    return img_base64
