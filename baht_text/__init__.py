"""
Baht Text — spell out monetary amounts as words.

Architecture: Amount split → Numeral grammar (per language) → Default layout or Template
Philosophy:  Languages are plug-ins. Configs are values. Templates fail at creation, not at render.
"""

__version__ = "1.0.0"
