"""Regex export extraction for ES modules and CommonJS."""

from __future__ import annotations

import re

from .models import ExportRecord


def infer_export_kind(content: str, name: str) -> str:
    """Infer what kind of binding ``name`` is by re-scanning the file body.

    Returns:
        'function', 'class', 'const' or 'unknown'
    """
    if not name or name.startswith("("):
        return "unknown"
    esc = re.escape(name)

    if re.search(rf"\b(?:async\s+)?function\s+{esc}\s*\(", content):
        return "function"
    if re.search(rf"\bclass\s+{esc}[\s{{]", content):
        return "class"
    if re.search(rf"\b(?:const|let|var)\s+{esc}\s*=", content):
        if re.search(
            rf"{esc}\s*=\s*(?:async\s+)?(?:function|\([^)]*\)\s*=>|[A-Za-z_]\w*\s*=>)", content
        ) or re.search(rf"{esc}\s*=\s*async\s*\(", content):
            return "function"
        return "const"
    # Bare assignment: name = function / name = async ( / name = () =>
    if (
        re.search(rf"\b{esc}\s*=\s*(?:async\s+)?function", content)
        or re.search(rf"\b{esc}\s*=\s*async\s*\(", content)
        or re.search(rf"\b{esc}\s*=\s*\([^)]*\)\s*=>", content)
    ):
        return "function"
    return "unknown"


def _split_export_list(list_str: str) -> list[str]:
    names = []
    for part in list_str.split(","):
        name = re.split(r"\s+as\s+", part.strip())[0].strip()
        if name and name != "type":
            names.append(name)
    return names


def _extract_es_exports(content: str) -> list[ExportRecord]:
    exports: list[ExportRecord] = []

    # export default function/class with a name, then anonymous forms
    for m in re.finditer(r"export\s+default\s+(?:async\s+)?function\s*\*?\s*([A-Za-z0-9_]+)\s*\(", content):
        exports.append(ExportRecord("es_default", m.group(1), "function"))
    for m in re.finditer(r"export\s+default\s+class\s+([A-Za-z0-9_]+)[\s{(]", content):
        exports.append(ExportRecord("es_default", m.group(1), "class"))
    for _ in re.finditer(r"export\s+default\s+(?:async\s+)?function\s*\(", content):
        exports.append(ExportRecord("es_default", "(anonymous function)", "function"))
    for _ in re.finditer(r"export\s+default\s+class\s*{", content):
        exports.append(ExportRecord("es_default", "(anonymous class)", "class"))

    # export default Identifier
    for m in re.finditer(r"export\s+default\s+([A-Za-z0-9_$.]+)", content):
        name = m.group(1)
        if name in ("function", "class", "async"):
            continue
        exports.append(ExportRecord("es_default", name, infer_export_kind(content, name)))

    for m in re.finditer(r"export\s+(?:async\s+)?function\s*\*?\s*([A-Za-z0-9_]+)\s*\(", content):
        exports.append(ExportRecord("es_named", m.group(1), "function"))
    for m in re.finditer(r"export\s+(?:abstract\s+)?class\s+([A-Za-z0-9_]+)[\s{]", content):
        exports.append(ExportRecord("es_named", m.group(1), "class"))
    for m in re.finditer(r"export\s+(const|let|var)\s+([A-Za-z0-9_]+)", content):
        exports.append(ExportRecord("es_named", m.group(2), m.group(1)))
    for m in re.finditer(r"export\s+type\s+([A-Za-z0-9_]+)\s*[=<{]", content):
        exports.append(ExportRecord("es_named", m.group(1), "type"))
    for m in re.finditer(r"export\s+interface\s+([A-Za-z0-9_]+)\s*[<{]", content):
        exports.append(ExportRecord("es_named", m.group(1), "interface"))

    # export { a, b as c } from '...'
    for m in re.finditer(r"export\s*{\s*([^}]+)\s*}\s*from\s*['\"`]([^'\"`]+)['\"`]", content):
        for name in _split_export_list(m.group(1)):
            exports.append(ExportRecord("es_reexport", name, "named", source=m.group(2)))

    # export { a, b as c } with no "from" after it
    for m in re.finditer(r"export\s*{\s*([^}]+)\s*}", content):
        after = content[m.end() : m.end() + 30].lstrip()
        if after.startswith("from"):
            continue
        for name in _split_export_list(m.group(1)):
            kind = infer_export_kind(content, name)
            exports.append(ExportRecord("es_named", name, kind if kind != "unknown" else "named"))

    return exports


def _extract_cjs_exports(content: str) -> list[ExportRecord]:
    exports: list[ExportRecord] = []

    object_export = re.search(r"module\.exports\s*=\s*\{([\s\S]*?)\}\s*;?", content)
    if object_export:
        for part in (p.strip() for p in object_export.group(1).split(",")):
            if not part:
                continue
            key_match = re.match(r"^([A-Za-z0-9_]+)(?:\s*:|$)", part)
            name = key_match.group(1) if key_match else re.sub(r"\s*:.*$", "", part).strip()
            if not name or name == "type":
                continue
            kind = infer_export_kind(content, name)
            exports.append(ExportRecord("cjs_named", name, kind if kind != "unknown" else "named"))
    else:
        func_export = re.search(
            r"module\.exports\s*=\s*(?:async\s+)?function\s*([A-Za-z0-9_]*)\s*\(", content
        )
        if func_export:
            exports.append(
                ExportRecord("cjs_default", func_export.group(1) or "(anonymous function)", "function")
            )

        class_export = re.search(r"module\.exports\s*=\s*class\s*([A-Za-z0-9_]*)\s*[{\s]", content)
        if class_export:
            exports.append(
                ExportRecord("cjs_default", class_export.group(1) or "(anonymous class)", "class")
            )

        if not func_export and not class_export:
            single = re.search(
                r"module\.exports\s*=\s*([A-Za-z0-9_]+)\s*;?(?:\s*//[^\n]*)?(?=[\s\r\n]|$)",
                content,
                re.MULTILINE,
            )
            if single:
                name = single.group(1)
                kind = infer_export_kind(content, name)
                exports.append(ExportRecord("cjs_default", name, kind if kind != "unknown" else "default"))

    has_cjs_default = any(e.type == "cjs_default" for e in exports)

    # module.exports = mongoose.model('User', schema)
    model_export = re.search(
        r"module\.exports\s*=\s*(?:[\w.]+\s*\.\s*)?model\s*\(\s*['\"]([^'\"]+)['\"]\s*,", content
    )
    if model_export and not object_export and not has_cjs_default:
        exports.append(ExportRecord("cjs_default", model_export.group(1), "model"))
    elif (
        not model_export
        and not object_export
        and not has_cjs_default
        and re.search(r"module\.exports\s*=", content)
    ):
        call = re.search(r"module\.exports\s*=\s*(?:[\w.]+\s*\.\s*)?(\w+)\s*\(", content)
        name = f"{call.group(1)}(...)" if call else "module.exports"
        exports.append(ExportRecord("cjs_default", name, "default"))

    for m in re.finditer(r"(?<![\w.])exports\.([A-Za-z0-9_]+)\s*=", content):
        name = m.group(1)
        kind = infer_export_kind(content, name)
        exports.append(ExportRecord("cjs_named", name, kind if kind != "unknown" else "named"))

    return exports


def extract_exports(content: str) -> list[ExportRecord]:
    """Extract ES and CommonJS exports, deduplicated by ``(type, name, kind)``."""
    seen: dict[tuple[str, str, str], ExportRecord] = {}
    for export in _extract_es_exports(content) + _extract_cjs_exports(content):
        seen.setdefault((export.type, export.name, export.kind), export)
    return list(seen.values())
