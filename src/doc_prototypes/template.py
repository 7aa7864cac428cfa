"""
Document template - the composite prototype handed out by the registry.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import Cloneable
from .entities import ApprovalWorkflow, DocumentStyle, Section


@dataclass
class DocumentTemplate(Cloneable["DocumentTemplate"]):
    """Document template definition"""
    title: str = ""
    category: str = ""
    sections: List[Section] = field(default_factory=list)
    style: Optional[DocumentStyle] = None
    required_fields: List[str] = field(default_factory=list)
    metadata: Dict[str, str] = field(default_factory=dict)
    workflow: Optional[ApprovalWorkflow] = None
    tags: List[str] = field(default_factory=list)

    def clone(self) -> "DocumentTemplate":
        """
        Deep-clone the whole template graph.

        Every field holding a mutable object must get its own copy step here;
        a field added without one leaks shared state between clones.
        """
        return DocumentTemplate(
            title=self.title,
            category=self.category,
            sections=[section.clone() for section in self.sections],
            style=self.style.clone() if self.style is not None else None,
            required_fields=list(self.required_fields),
            metadata=dict(self.metadata),
            workflow=self.workflow.clone() if self.workflow is not None else None,
            tags=list(self.tags),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "category": self.category,
            "sections": [s.to_dict() for s in self.sections],
            "style": self.style.to_dict() if self.style is not None else None,
            "required_fields": list(self.required_fields),
            "metadata": dict(self.metadata),
            "workflow": self.workflow.to_dict() if self.workflow is not None else None,
            "tags": list(self.tags),
        }
