from scoped_css.stylesheet.model import ScopedStylesheet
from scoped_css.stylesheet.scope import ScopeCounter, format_scope_prefix
from scoped_css.stylesheet.service import StylesheetService

__all__ = ["ScopeCounter", "ScopedStylesheet", "StylesheetService", "format_scope_prefix"]
