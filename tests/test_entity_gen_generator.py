"""Tests for entity file generation, writing and the command line entry point."""
import json
import tempfile
from pathlib import Path
from app.cli import main
from app.generators.entity_gen.generator import generate_entity, render_entity_file
from app.generators.entity_gen.types import DataType, Entity, EntityProperty, TemplateVariant


def _entity():
    return Entity(
        name="order item",
        properties=[EntityProperty(id="1", name="quantity", type=DataType.NUMBER, default_value="1")],
    )


def test_render_entity_file_path_and_content():
    generated = render_entity_file(_entity())
    assert generated.path == "order-item.entity.ts"
    assert "export class OrderItem {" in generated.content
    assert "@Column({ type: 'int', default: 1 })" in generated.content


def test_generate_entity_writes_file():
    with tempfile.TemporaryDirectory() as temp_dir:
        out_dir = Path(temp_dir) / "generated" / "entities"
        generated = generate_entity(_entity(), TemplateVariant.ORM, out_dir=out_dir)

        written = out_dir / "order-item.entity.ts"
        assert written.exists(), "Entity file was not created"
        assert written.read_text(encoding="utf-8") == generated.content


def test_cli_prints_code_from_json(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        entity_path = Path(temp_dir) / "tag.json"
        entity_path.write_text(json.dumps({
            "name": "Tag",
            "includeTimestamps": False,
            "properties": [{"name": "label", "type": "string", "isUnique": True}],
        }), encoding="utf-8")

        exit_code = main([str(entity_path)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("import { Entity, Column")
    assert "  @Column({ type: 'varchar', unique: true })\n  label: string;\n" in out


def test_cli_writes_yaml_entity_to_out_dir():
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)
        entity_path = temp_path / "post.yaml"
        entity_path.write_text(
            "entity:\n"
            "  name: blogPost\n"
            "  relationships:\n"
            "    - name: author\n"
            "      type: many-to-one\n"
            "      targetEntity: User\n"
            "variant: PlainClass\n",
            encoding="utf-8",
        )

        exit_code = main([str(entity_path), "--out", str(temp_path / "out")])

        content = (temp_path / "out" / "blog-post.entity.ts").read_text(encoding="utf-8")
        assert exit_code == 0
        assert "from '@nestjs/typeorm';" in content
        assert "ManyToOne" not in content

        # --variant overrides the file
        exit_code = main([str(entity_path), "--out", str(temp_path / "out"), "--variant", "ORM"])
        content = (temp_path / "out" / "blog-post.entity.ts").read_text(encoding="utf-8")
        assert exit_code == 0
        assert "@ManyToOne((type) => User)" in content


def test_cli_reports_validation_errors(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        entity_path = Path(temp_dir) / "bad.json"
        entity_path.write_text(json.dumps({"name": "1bad"}), encoding="utf-8")

        assert main([str(entity_path)]) == 1
        assert "Entity name must start with a letter" in capsys.readouterr().err

        assert main([str(entity_path), "--no-validate"]) == 0


def test_cli_reports_unreadable_input(capsys):
    with tempfile.TemporaryDirectory() as temp_dir:
        entity_path = Path(temp_dir) / "broken.json"
        entity_path.write_text("{not json", encoding="utf-8")

        assert main([str(entity_path)]) == 1
        assert "could not load" in capsys.readouterr().err
