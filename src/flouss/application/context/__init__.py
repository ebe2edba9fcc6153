"""Request-scoped context objects."""

from flouss.application.context.ui_context import Theme, UIContext

__all__ = ["Theme", "UIContext"]
