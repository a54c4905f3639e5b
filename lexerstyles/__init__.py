"""
Per-language lexer styles for Scintilla based editors.

Provides:
- A dual-indexed color registry with XML persistence
- Keyword sets and folding configuration per language
- A dispatcher that pushes a language's configuration onto an editor
"""

__version__ = "1.0.0"
