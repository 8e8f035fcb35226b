"""
Engine-level defaults and vocabulary for VELLUM templates.

Provides shared constants used by:
- template_config.py (validating slots, layouts and directions)
- tokens.py (fallbacks when neither the document nor the template sets a value)
- composition context (pseudo-section keys, gutter width, separators)
"""

# Fallbacks for the user-overridable tokens
DEFAULT_FONT_FAMILY = "Helvetica"
DEFAULT_FONT_SIZE = 11.0
DEFAULT_LINE_HEIGHT = 1.5
DEFAULT_ACCENT_COLOR = "#3B82F6"

# Fallbacks for structural tokens a partial template may omit
DEFAULT_TEXT_PRIMARY = "#111827"
DEFAULT_TEXT_SECONDARY = "#4B5563"
DEFAULT_BACKGROUND = "#ffffff"
DEFAULT_PAGE_MARGIN = {"top": 24.0, "right": 32.0, "bottom": 24.0, "left": 32.0}
DEFAULT_SECTION_SPACING = 16.0
DEFAULT_BLOCK_SPACING = 10.0

DEFAULT_TEMPLATE_ID = "classic"

# Numeric template ids stored by older editor payloads
LEGACY_TEMPLATE_IDS = {1: "classic", 2: "modern"}

DEFAULT_PAGE_SIZE = "A4"

# Layout vocabulary
SLOTS = ("header", "body", "footer")
DIRECTIONS = ("row", "column")
LAYOUTS = ("single-column", "sidebar-left", "sidebar-right", "two-column")
ROW_LAYOUTS = ("sidebar-left", "sidebar-right", "two-column")

# Horizontal gap between body columns in row layouts (points)
COLUMN_GUTTER = 12.0

# Synthetic sections derived from personal info, in their fixed relative order
PSEUDO_SECTION_KEYS = ("header", "summary", "contact", "photo")

# Section types the engine knows how to materialize
KNOWN_SECTION_TYPES = (
    "experience",
    "education",
    "skills",
    "projects",
    "certifications",
    "languages",
    "volunteer",
    "custom",
)

CONTACT_SEPARATOR = "•"
SUMMARY_TITLE = "Professional Summary"
CONTACT_TITLE = "Contact"
