"""Services for the runviz dashboard."""

from .template_service import TemplateService, render_mustache_response

__all__ = ["TemplateService", "render_mustache_response"]
