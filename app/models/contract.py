"""Contract API schemas."""

from pydantic import BaseModel, Field

from core.contracts.types import ContractForm


class ContractTemplateInfo(BaseModel):
    """One selectable contract template."""
    contract_type: str
    label: str
    title: str


class ContractCategoryInfo(BaseModel):
    """A wizard category with its templates."""
    category: str
    label: str
    templates: list[ContractTemplateInfo]


class ValidationResponse(BaseModel):
    """Validation outcome for a sanitized form."""
    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class SectionResponse(BaseModel):
    """A parsed contract section."""
    number: str | None = None
    title: str
    content: list[str]


class ContractPreviewResponse(BaseModel):
    """Response schema for contract generation."""
    form: ContractForm
    validation: ValidationResponse
    title: str
    contract: str
    sections: list[SectionResponse]
