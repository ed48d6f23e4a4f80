import logging
from fastapi import APIRouter, HTTPException
from app.core.config import settings
from app.generators.entity_gen.generator import generate_entity
from app.generators.entity_gen.utils import entity_to_class_name, entity_to_table_name
from app.generators.entity_gen.validation import validate_entity
from app.schemas.entities import (
    EntityIn,
    GenerateRequest,
    GenerateResponse,
    IssueOut,
    ValidateResponse,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/entities")

@router.post("/validate", response_model=ValidateResponse)
def validate(req: EntityIn):
    issues = validate_entity(req.to_entity())
    return ValidateResponse(
        valid=not issues,
        issues=[IssueOut(field=i.field, message=i.message) for i in issues],
    )

@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest):
    entity = req.entity.to_entity()
    variant = req.variant or settings.default_variant

    if settings.validate_before_generate:
        issues = validate_entity(entity)
        if issues:
            log.warning("Rejected invalid entity (%d issues)", len(issues),
                        extra={"entity": entity.name or "-", "variant": variant.value})
            raise HTTPException(
                status_code=422,
                detail=[{"field": i.field, "message": i.message} for i in issues],
            )

    generated = generate_entity(entity, variant)
    return GenerateResponse(
        class_name=entity_to_class_name(entity.name),
        table_name=entity_to_table_name(entity.name, entity.table_name),
        file_name=generated.path,
        variant=variant,
        code=generated.content,
    )
