"""
Value entities nested inside a document template.

Each entity clones itself; containers are rebuilt and owned sub-entities are
cloned, never shared.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .base import Cloneable


@dataclass
class Margins(Cloneable["Margins"]):
    """Page margins"""
    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0

    def clone(self) -> "Margins":
        return Margins(
            top=self.top,
            bottom=self.bottom,
            left=self.left,
            right=self.right,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }


@dataclass
class DocumentStyle(Cloneable["DocumentStyle"]):
    """Visual style of a document; margins are optional"""
    font_family: str = ""
    font_size: int = 0
    header_color: str = ""
    logo_url: str = ""
    page_margins: Optional[Margins] = None

    def clone(self) -> "DocumentStyle":
        return DocumentStyle(
            font_family=self.font_family,
            font_size=self.font_size,
            header_color=self.header_color,
            logo_url=self.logo_url,
            page_margins=self.page_margins.clone() if self.page_margins is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "font_family": self.font_family,
            "font_size": self.font_size,
            "header_color": self.header_color,
            "logo_url": self.logo_url,
            "page_margins": self.page_margins.to_dict() if self.page_margins is not None else None,
        }


@dataclass
class Section(Cloneable["Section"]):
    """A named block of document content"""
    name: str = ""
    content: str = ""
    is_editable: bool = False
    placeholders: List[str] = field(default_factory=list)  # substitution order

    def clone(self) -> "Section":
        return Section(
            name=self.name,
            content=self.content,
            is_editable=self.is_editable,
            placeholders=list(self.placeholders),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "content": self.content,
            "is_editable": self.is_editable,
            "placeholders": list(self.placeholders),
        }


@dataclass
class ApprovalWorkflow(Cloneable["ApprovalWorkflow"]):
    """
    Sign-off rules for a document.

    Approvers are listed by priority and may repeat. Whether the workflow can
    be satisfied is reported by ``is_satisfiable`` but never enforced here.
    """
    approvers: List[str] = field(default_factory=list)
    required_approvals: int = 0
    timeout_days: int = 0

    @property
    def is_satisfiable(self) -> bool:
        return self.required_approvals <= len(self.approvers)

    def clone(self) -> "ApprovalWorkflow":
        return ApprovalWorkflow(
            approvers=list(self.approvers),
            required_approvals=self.required_approvals,
            timeout_days=self.timeout_days,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "approvers": list(self.approvers),
            "required_approvals": self.required_approvals,
            "timeout_days": self.timeout_days,
        }
