"""
Pytest fixtures for document prototype tests
"""
import pytest

from doc_prototypes import (
    ApprovalWorkflow,
    DocumentStyle,
    DocumentTemplate,
    Margins,
    Section,
    Settings,
    TemplateRegistry,
    TemplateService,
)
from doc_prototypes.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep tests independent of the caller's environment"""
    for var in ("DOC_PROTOTYPES_LOG_LEVEL", "DOC_PROTOTYPES_LOG_FORMAT", "DOC_PROTOTYPES_LOAD_DEFAULT_CATALOG"):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def template() -> DocumentTemplate:
    return DocumentTemplate(
        title="Service Agreement",
        category="Contracts",
        sections=[
            Section(
                name="Scope",
                content="The scope of this agreement is...",
                is_editable=True,
                placeholders=["{client}", "{provider}"],
            ),
            Section(name="Term", content="This agreement runs for...", is_editable=False),
        ],
        style=DocumentStyle(
            font_family="Arial",
            font_size=12,
            header_color="#003366",
            logo_url="https://company.com/logo.png",
            page_margins=Margins(top=2, bottom=2, left=3, right=3),
        ),
        required_fields=["ClientName", "TaxId"],
        metadata={"Version": "1.0", "Department": "Sales"},
        workflow=ApprovalWorkflow(
            approvers=["manager@company.com", "legal@company.com"],
            required_approvals=2,
            timeout_days=5,
        ),
        tags=["contract", "services"],
    )


@pytest.fixture
def registry(template) -> TemplateRegistry:
    registry = TemplateRegistry()
    registry.register("agreement", template)
    return registry


@pytest.fixture
def empty_settings() -> Settings:
    return Settings(load_default_catalog=False)


@pytest.fixture
def service() -> TemplateService:
    return TemplateService(settings=Settings())
