"""
Document Prototypes - registry of deep-cloneable document templates.

Provides:
- Cloneable: base class for entities that duplicate themselves
- Margins, DocumentStyle, Section, ApprovalWorkflow: value entities
- DocumentTemplate: composite template
- TemplateRegistry: stores masters and hands out clones
- TemplateService: populates a registry and derives templates
"""

from .base import Cloneable
from .entities import ApprovalWorkflow, DocumentStyle, Margins, Section
from .template import DocumentTemplate
from .errors import TemplateNotFoundError
from .registry import TemplateRegistry
from .service import TemplateService
from .config import LogFormat, Settings, get_settings
from .logging_setup import configure_logging

__version__ = "0.1.0"

__all__ = [
    "Cloneable",
    "Margins",
    "DocumentStyle",
    "Section",
    "ApprovalWorkflow",
    "DocumentTemplate",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "TemplateService",
    "LogFormat",
    "Settings",
    "get_settings",
    "configure_logging",
]
