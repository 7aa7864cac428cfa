"""
Template service - builds master templates once and hands out clones.
"""
from typing import Any, Callable, Dict, List, Optional

import structlog

from .catalog import get_contract_templates
from .config import Settings, get_settings
from .registry import TemplateRegistry
from .template import DocumentTemplate

logger = structlog.get_logger()


class TemplateService:
    """
    Owns a template registry and populates it at start-up.

    Args:
        registry: Registry to populate (a new one is created if omitted)
        settings: Configuration (global settings if omitted)
    """

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry if registry is not None else TemplateRegistry()

        if self.settings.load_default_catalog:
            self._load_default_catalog()

    def _load_default_catalog(self):
        for name, template in get_contract_templates().items():
            self.registry.register(name, template)
        logger.info("Default templates loaded", count=len(self.registry))

    def register(self, name: str, template: DocumentTemplate) -> None:
        self.registry.register(name, template)

    def create(self, name: str) -> DocumentTemplate:
        return self.registry.create(name)

    def derive(
        self,
        source_name: str,
        new_name: str,
        customize: Callable[[DocumentTemplate], None],
    ) -> DocumentTemplate:
        """
        Register a new master built from a clone of an existing one.

        ``customize`` mutates the clone in place before it is registered under
        ``new_name``. The source master is left untouched.

        Returns:
            A fresh clone of the newly registered master
        """
        template = self.registry.create(source_name)
        customize(template)
        self.registry.register(new_name, template)
        logger.info("Template derived", source=source_name, name=new_name)
        return self.registry.create(new_name)

    def describe(self, name: str) -> Dict[str, Any]:
        """Short summary of a registered template"""
        template = self.registry.create(name)
        return {
            "title": template.title,
            "category": template.category,
            "section_count": len(template.sections),
            "required_fields": template.required_fields,
            "approvers": template.workflow.approvers if template.workflow is not None else [],
        }

    def list_templates(self) -> List[Dict[str, Any]]:
        return self.registry.list_templates()
