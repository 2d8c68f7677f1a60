"""
Template rendering service for the runviz dashboard.

Provides Mustache template rendering and context formatting utilities.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import pystache

from runviz.aggregate import series_color

BASE_DIR = Path(__file__).parent.parent
_mustache_renderer = pystache.Renderer(search_dirs=[str(BASE_DIR / "templates")])


def render_mustache_response(template_name: str, context: dict[str, Any]) -> str:
    """Render mustache template with context.

    Args:
        template_name: Name of the template file (without extension).
        context: Template context dictionary.

    Returns:
        Rendered HTML string.
    """
    # Add common context variables
    context.update({
        "current_year": datetime.now().year,
        "page_title": context.get("page_title", "Runviz"),
    })

    # Render content template
    content = _mustache_renderer.render_name(template_name, context)

    # Render layout with content
    layout_context = context.copy()
    layout_context["content"] = content

    return _mustache_renderer.render_name("layout", layout_context)


class TemplateService:
    """Service for formatting data objects for template rendering."""

    @staticmethod
    def format_experiments_for_template(experiment_ids: list[str], selection: list[str]) -> list[dict[str, Any]]:
        """Format experiment ids for the selection list.

        Selected experiments carry the color of their chart series.

        Args:
            experiment_ids: All experiment ids of the index.
            selection: Currently selected ids, in display order.

        Returns:
            List of dictionaries suitable for template rendering.
        """
        positions = {experiment_id: i for i, experiment_id in enumerate(selection)}
        formatted = []
        for experiment_id in experiment_ids:
            position = positions.get(experiment_id)
            formatted.append({
                "id": experiment_id,
                "is_selected": position is not None,
                "color": series_color(position) if position is not None else None,
            })
        return formatted
