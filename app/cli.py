"""Command line entry point: render an entity description file to TypeScript."""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from app.core.config import settings
from app.core.logging import configure_logging
from app.generators.entity_gen.generator import generate_entity
from app.generators.entity_gen.types import TemplateVariant
from app.generators.entity_gen.validation import EntityValidationError, ensure_valid
from app.schemas.entities import EntityIn, GenerateRequest


def load_request(path: Path) -> GenerateRequest:
    """Load a JSON or YAML file holding either an entity or ``{entity, variant}``."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)

    if isinstance(data, dict) and "entity" in data:
        return GenerateRequest.model_validate(data)
    return GenerateRequest(entity=EntityIn.model_validate(data))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a TypeORM entity class from a JSON or YAML description")
    parser.add_argument("entity_file", type=Path, help="Path to the entity description (.json, .yaml, .yml)")
    parser.add_argument(
        "--variant",
        choices=[v.value for v in TemplateVariant],
        help="Template variant (overrides the file and DEFAULT_VARIANT)",
    )
    parser.add_argument("--out", type=Path, help="Write <name>.entity.ts into this directory instead of stdout")
    parser.add_argument("--no-validate", action="store_true", help="Skip entity name and primary key checks")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout carries the generated code
    configure_logging(settings.log_level, stream=sys.stderr)

    try:
        req = load_request(args.entity_file)
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as e:
        print(f"Error: could not load {args.entity_file}: {e}", file=sys.stderr)
        return 1

    entity = req.entity.to_entity()
    variant = TemplateVariant(args.variant) if args.variant else (req.variant or settings.default_variant)

    if not args.no_validate:
        try:
            ensure_valid(entity)
        except EntityValidationError as e:
            for issue in e.issues:
                print(f"Error: {issue.field}: {issue.message}", file=sys.stderr)
            return 1

    generated = generate_entity(entity, variant, out_dir=args.out)
    if args.out is None:
        sys.stdout.write(generated.content)
    else:
        print(f"Wrote {args.out / generated.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
