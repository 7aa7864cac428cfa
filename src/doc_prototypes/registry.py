"""
Template registry - stores master templates and hands out deep clones.
"""
import threading
from typing import Any, Dict, List

import structlog

from .errors import TemplateNotFoundError
from .template import DocumentTemplate

logger = structlog.get_logger()


class TemplateRegistry:
    """
    Name-keyed store of master templates.

    Masters are kept exactly as registered and are never returned to callers;
    every lookup yields a fresh clone. A single lock guards the map so that
    a clone is never taken while the same key is being overwritten.
    """

    def __init__(self):
        self._templates: Dict[str, DocumentTemplate] = {}
        self._lock = threading.Lock()

    def register(self, name: str, template: DocumentTemplate) -> None:
        """Register (or replace) the master stored under ``name``"""
        with self._lock:
            replaced = name in self._templates
            self._templates[name] = template
        logger.debug("Template registered", name=name, title=template.title, replaced=replaced)

    def create(self, name: str) -> DocumentTemplate:
        """
        Return a deep clone of the master registered under ``name``.

        Raises:
            TemplateNotFoundError: if nothing is registered under ``name``
        """
        with self._lock:
            master = self._templates.get(name)
            if master is None:
                logger.warning("Template not found", name=name)
                raise TemplateNotFoundError(name)
            clone = master.clone()
        logger.debug("Template cloned", name=name)
        return clone

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._templates

    def __len__(self) -> int:
        with self._lock:
            return len(self._templates)

    def names(self) -> List[str]:
        """Registered names in registration order"""
        with self._lock:
            return list(self._templates)

    def list_templates(self) -> List[Dict[str, Any]]:
        """List all registered templates"""
        with self._lock:
            return [
                {"name": name, **template.to_dict()}
                for name, template in self._templates.items()
            ]

    def get_by_category(self, category: str) -> List[DocumentTemplate]:
        """Get clones of every template in a category"""
        with self._lock:
            return [
                template.clone()
                for template in self._templates.values()
                if template.category == category
            ]
