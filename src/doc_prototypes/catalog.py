"""
Contract Templates - stock master templates registered at service start
"""
from datetime import datetime
from typing import Dict, Optional

from .entities import ApprovalWorkflow, DocumentStyle, Margins, Section
from .template import DocumentTemplate

SERVICE_CONTRACT = "service_contract"
CONSULTING_CONTRACT = "consulting_contract"


def build_service_contract_template(now: Optional[datetime] = None) -> DocumentTemplate:
    """Build the master service contract"""
    revised_at = now or datetime.now()
    return DocumentTemplate(
        title="Contrato de Prestação de Serviços",
        category="Contratos",
        style=DocumentStyle(
            font_family="Arial",
            font_size=12,
            header_color="#003366",
            logo_url="https://company.com/logo.png",
            page_margins=Margins(top=2, bottom=2, left=3, right=3),
        ),
        workflow=ApprovalWorkflow(
            approvers=["gerente@empresa.com", "juridico@empresa.com"],
            required_approvals=2,
            timeout_days=5,
        ),
        sections=[
            Section(
                name="Cláusula 1 - Objeto",
                content="O presente contrato tem por objeto...",
                is_editable=True,
            ),
            Section(
                name="Cláusula 2 - Prazo",
                content="O prazo de vigência será de...",
                is_editable=True,
            ),
            Section(
                name="Cláusula 3 - Valor",
                content="O valor total do contrato é de...",
                is_editable=True,
            ),
        ],
        required_fields=["NomeCliente", "CPF", "Endereco"],
        tags=["contrato", "servicos"],
        metadata={
            "Versao": "1.0",
            "Departamento": "Comercial",
            "UltimaRevisao": revised_at.isoformat(),
        },
    )


def build_consulting_contract_template(now: Optional[datetime] = None) -> DocumentTemplate:
    """Derive the consulting contract from a clone of the service contract"""
    template = build_service_contract_template(now).clone()

    template.title = "Contrato de Consultoria"
    template.tags.append("consultoria")
    template.sections[0].content = "O presente contrato de consultoria tem por objeto..."

    return template


def get_contract_templates(now: Optional[datetime] = None) -> Dict[str, DocumentTemplate]:
    """Return all stock contract templates keyed by registry name"""
    return {
        SERVICE_CONTRACT: build_service_contract_template(now),
        CONSULTING_CONTRACT: build_consulting_contract_template(now),
    }
