"""Quiz Renderers - View models para builder e players."""

from .views import (
    BuilderListView,
    ListView,
    SequentialView,
    render_builder_list,
    render_list,
    render_sequential,
)

__all__ = [
    "BuilderListView",
    "SequentialView",
    "ListView",
    "render_builder_list",
    "render_sequential",
    "render_list",
]
