"""Pipeline step functions: parse, render, and build orchestration"""

import json
from pathlib import Path

from markcard.core.cards import parse_markdown_to_cards
from markcard.core.models import CardDocument
from markcard.render.html import render_document
from markcard.render.page import DEFAULT_TITLE


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')


def run_parse(
    input_path: Path,
    json_path: Path | None = None,
    parser_config: str = 'gfm-like',
    indent: int = 2,
    ) -> CardDocument:
    """Parse a markdown file into a CardDocument, writing JSON when json_path is given."""
    try:
        doc = parse_markdown_to_cards(Path(input_path).read_text(encoding='utf-8'), parser_config)
        if json_path is not None:
            _write(Path(json_path), doc.model_dump_json(indent=indent))
    except Exception as e:
        raise RuntimeError(f"Failed to parse {input_path}: {e}") from e
    return doc


def run_render(
    json_path: Path,
    html_path: Path,
    title: str = DEFAULT_TITLE,
    ) -> Path:
    """Render a cards JSON file into an HTML preview page. Returns html_path."""
    try:
        data = json.loads(Path(json_path).read_text(encoding='utf-8'))
        _write(Path(html_path), render_document(data, title))
    except Exception as e:
        raise RuntimeError(f"Failed to render {json_path}: {e}") from e
    return Path(html_path)


def run_build(
    input_path: Path,
    json_path: Path,
    html_path: Path,
    parser_config: str = 'gfm-like',
    title: str = DEFAULT_TITLE,
    indent: int = 2,
    ) -> tuple[CardDocument, Path]:
    """Parse then render in one step, going through the JSON file on disk."""
    doc = run_parse(input_path, json_path, parser_config, indent)
    return doc, run_render(json_path, html_path, title)
