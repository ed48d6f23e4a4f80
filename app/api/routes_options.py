from typing import List
from fastapi import APIRouter
from app.generators.entity_gen.options import (
    data_type_options,
    relationship_type_options,
    template_variant_options,
)
from app.schemas.entities import OptionOut

router = APIRouter(prefix="/options")

@router.get("/data-types", response_model=List[OptionOut])
def list_data_types():
    return data_type_options()

@router.get("/relationship-types", response_model=List[OptionOut])
def list_relationship_types():
    return relationship_type_options()

@router.get("/variants", response_model=List[OptionOut])
def list_variants():
    return template_variant_options()
