from .renderers import (
    RenderResult,
    render_queue,
    render_layout,
    render_error,
    render_table_html,
    render_kv_table_html,
    render_card_html,
)

__all__ = [
    "RenderResult",
    "render_queue",
    "render_layout",
    "render_error",
    "render_table_html",
    "render_kv_table_html",
    "render_card_html",
]
