"""
Centralized constants for Multi-Format Export.
All magic numbers extracted from codebase.
"""

# ===========================================
# WORD-PROCESSOR (DOCX) TYPOGRAPHY
# ===========================================
DOCX_DEFAULT_FONT_FAMILY = "Times New Roman"
DOCX_MONO_FONT_FAMILY = "Courier New"
DOCX_DEFAULT_FONT_SIZE = 22           # half-points (22 = 11pt)

# ===========================================
# OUTPUT FORMATS
# ===========================================
MARKDOWN_MIME = "text/markdown"
MARKDOWN_EXTENSION = "md"
HTML_MIME = "text/html"
HTML_EXTENSION = "html"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOCX_EXTENSION = "docx"
PDF_MIME = "application/pdf"
PDF_EXTENSION = "pdf"

# ===========================================
# TYPST (PDF)
# ===========================================
TYPST_CONTENT_PLACEHOLDER = "{{content}}"
TYPST_MAIN_FILE = "main.typ"

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = ''                         # empty = console only
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
