"""Orchestrator for entity code generation."""
import logging
from pathlib import Path
from typing import Optional
from app.generators.entity_gen.types import (
    Entity,
    GeneratedFile,
    TemplateVariant,
)
from app.generators.entity_gen.render_entity import generate
from app.generators.entity_gen.utils import entity_to_file_name
from app.generators.entity_gen.writer import write_files

log = logging.getLogger(__name__)


def render_entity_file(entity: Entity, variant: TemplateVariant = TemplateVariant.ORM) -> GeneratedFile:
    """Render an entity into a ``<kebab-name>.entity.ts`` file."""
    return GeneratedFile(
        path=entity_to_file_name(entity.name),
        content=generate(entity, variant),
    )


def generate_entity(
    entity: Entity,
    variant: TemplateVariant = TemplateVariant.ORM,
    out_dir: Optional[Path] = None,
) -> GeneratedFile:
    """
    Generate the entity source file.

    Args:
        entity: Entity description, already validated by the caller
        variant: Template variant to render
        out_dir: When given, the file is written below this directory

    Returns:
        The GeneratedFile
    """
    variant = TemplateVariant(variant)
    extra = {"entity": entity.name or "-", "variant": variant.value}
    generated = render_entity_file(entity, variant)
    log.info(
        "Generated %s (%d properties, %d relationships)",
        generated.path, len(entity.properties), len(entity.relationships),
        extra=extra,
    )
    if variant == TemplateVariant.PLAIN_CLASS and entity.relationships:
        log.warning(
            "Dropped %d relationships not supported by the plain class template",
            len(entity.relationships),
            extra=extra,
        )

    if out_dir is not None:
        write_files([generated], Path(out_dir))

    return generated
