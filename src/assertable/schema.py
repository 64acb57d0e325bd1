"""Generate JSON Schema for the config file and docs for the message catalogue."""

from __future__ import annotations

import json
from pathlib import Path

from assertable.config import AssertConfig
from assertable.messages import PREFIX, TEMPLATES
from assertable.predicates import get_predicate, relation_names


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return AssertConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def generate_messages_doc() -> str:
    lines: list[str] = []
    lines.append("# assertable diagnostics")
    lines.append("")
    lines.append("This doc is generated from the predicate registry.")
    lines.append(f"Every line starts with `{PREFIX.strip()}`.")
    lines.append("")
    lines.append("| Relation | Kinds | Message |")
    lines.append("|---|---|---|")
    for relation in relation_names():
        kinds = ", ".join(sorted(k.value for k in get_predicate(relation).kinds))
        lines.append(f"| `{relation}` | {kinds} | {TEMPLATES[relation]} |")
    lines.append("")
    return "\n".join(lines)


def write_messages_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_messages_doc())
