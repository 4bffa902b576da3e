"""Contract generation routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from app.config import Settings, get_settings
from app.models.contract import (
    ContractCategoryInfo,
    ContractPreviewResponse,
    ContractTemplateInfo,
    SectionResponse,
    ValidationResponse,
)
from core.contracts.types import CATEGORY_TEMPLATES, ContractForm, title_for
from core.pipeline import ContractPipeline

logger = logging.getLogger("clausecraft.api")

router = APIRouter()


def get_pipeline(settings: Settings = Depends(get_settings)) -> ContractPipeline:
    """Build a pipeline configured from settings."""
    return ContractPipeline(
        flag_vague_inputs=settings.flag_vague_inputs,
        include_signatures=settings.export_signature_block,
    )


@router.get("/types", response_model=list[ContractCategoryInfo])
async def list_contract_types() -> list[ContractCategoryInfo]:
    """List wizard categories and the contract templates in each."""
    return [
        ContractCategoryInfo(
            category=category.value,
            label=entry["label"],
            templates=[
                ContractTemplateInfo(
                    contract_type=contract_type.value,
                    label=label,
                    title=title_for(contract_type),
                )
                for contract_type, label in entry["templates"]
            ],
        )
        for category, entry in CATEGORY_TEMPLATES.items()
    ]


@router.post("/sanitize", response_model=ContractForm)
async def sanitize_contract_form(
    form: ContractForm,
    pipeline: ContractPipeline = Depends(get_pipeline),
) -> ContractForm:
    """Return the sanitized form the contract would be built from."""
    return pipeline.prepare(form)


@router.post("/validate", response_model=ValidationResponse)
async def validate_contract_form(
    form: ContractForm,
    pipeline: ContractPipeline = Depends(get_pipeline),
) -> ValidationResponse:
    """Validate a form for its contract type."""
    result = pipeline.validate(form)
    return ValidationResponse(**result.to_dict())


@router.post("/generate", response_model=ContractPreviewResponse)
async def generate_contract_preview(
    form: ContractForm,
    pipeline: ContractPipeline = Depends(get_pipeline),
) -> ContractPreviewResponse:
    """Sanitize, validate and assemble a contract.

    Validation errors do not block generation; they are returned with the
    text so the review step can show them.
    """
    preview = pipeline.preview(form)
    return ContractPreviewResponse(
        form=preview.form,
        validation=ValidationResponse(**preview.validation.to_dict()),
        title=preview.title,
        contract=preview.contract,
        sections=[SectionResponse(**section.to_dict()) for section in preview.sections],
    )


@router.post("/export", response_class=PlainTextResponse)
async def export_contract(
    form: ContractForm,
    pipeline: ContractPipeline = Depends(get_pipeline),
) -> PlainTextResponse:
    """Download the contract as plain text.

    Export is the only step gated by validation: a form with errors is
    rejected with 422 and the error list.
    """
    preview, exported = pipeline.export(form)
    if exported is None:
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Contract form is incomplete",
                "errors": preview.validation.errors,
            },
        )

    return PlainTextResponse(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
