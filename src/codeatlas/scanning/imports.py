"""Regex import extraction for JS/TS sources.

Import statements are captured by an ordered list of rules. Each rule records
the character span of every statement it captures; later rules skip any match
overlapping an already-captured span. This keeps ``import type`` statements
out of the generic rules and stops the catch-all rule from re-capturing
statements a specific rule already handled.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Optional

_QUOTED = r"""['"`]([^'"`]+)['"`]"""


@dataclass
class RawImport:
    """An import statement before normalization."""

    type: str
    value: str
    default: Optional[str] = None
    named: list[tuple[str, str]] = field(default_factory=list)
    namespace: Optional[str] = None
    side_effect: bool = False
    is_type_only: bool = False

    def bound_names(self) -> list[str]:
        """Local names bound by this statement, in display form."""
        if self.side_effect:
            return ["(side-effect)"]
        names: list[str] = []
        if self.default:
            names.append(self.default)
        for imported, local in self.named:
            names.append(f"{imported} as {local}" if imported != local else local)
        if self.namespace:
            names.append(f"* as {self.namespace}")
        return names


@dataclass(frozen=True)
class ImportRule:
    """One import statement shape.

    Attributes:
        name: Rule identifier (for debugging and tests)
        pattern: Compiled regex for the statement shape
        build: Turns a match into a RawImport, or None to reject the match
    """

    name: str
    pattern: re.Pattern
    build: Callable[[re.Match, str], Optional[RawImport]]


def parse_named_list(list_str: str) -> list[tuple[str, str]]:
    """Parse ``a, b as c, type D`` into ``[(a, a), (b, c), (D, D)]``."""
    result: list[tuple[str, str]] = []
    if not list_str or not list_str.strip():
        return result
    for part in list_str.split(","):
        part = re.sub(r"^type\s+", "", part.strip())
        pieces = re.split(r"\s+as\s+", part)
        imported = pieces[0].strip()
        local = pieces[1].strip() if len(pieces) > 1 else imported
        if imported and local:
            result.append((imported, local))
    return result


def derive_import_name(module_path: str) -> str:
    """Derive a readable binding name from a module path.

    ``./routes/feedback`` -> ``feedback``, ``@scope/pkg`` -> ``pkg``,
    ``./api/index.js`` -> ``api``, ``./user-profile`` -> ``userProfile``.
    """
    if not module_path:
        return ""

    cleaned = re.sub(r"^\.\.?/", "", module_path)

    if cleaned.startswith("@") and "/" in cleaned:
        cleaned = cleaned.split("/")[1] or cleaned

    segments = [s for s in cleaned.split("/") if s]
    name = segments[-1] if segments else cleaned

    name = re.sub(r"\.(js|jsx|ts|tsx|mjs|cjs|vue|svelte|json)$", "", name, flags=re.IGNORECASE)

    if name == "index" and len(segments) >= 2:
        name = segments[-2]

    return re.sub(r"[-.](\w)", lambda m: m.group(1).upper(), name)


def _is_chained_call(content: str, end: int) -> bool:
    """True when ``require(...)`` is immediately followed by ``.method(``."""
    return re.match(r"\s*\.\s*\w+\s*\(", content[end:]) is not None


def _line_at(content: str, pos: int) -> str:
    start = content.rfind("\n", 0, pos) + 1
    end = content.find("\n", pos)
    return content[start : end if end != -1 else len(content)]


def _type_named(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(2), named=parse_named_list(m.group(1)), is_type_only=True)


def _type_default(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(2), default=m.group(1), is_type_only=True)


def _type_namespace(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(2), namespace=m.group(1), is_type_only=True)


def _default_and_named(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(3), default=m.group(1), named=parse_named_list(m.group(2)))


def _default_and_namespace(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(3), default=m.group(1), namespace=m.group(2))


def _named(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(2), named=parse_named_list(m.group(1)))


def _namespace(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(2), namespace=m.group(1))


def _default(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(2), default=m.group(1))


def _side_effect(m: re.Match, content: str) -> Optional[RawImport]:
    if re.search(r"\bfrom\s+['\"`]", _line_at(content, m.start())):
        return None
    return RawImport("esm", m.group(1), side_effect=True)


def _fallback(m: re.Match, content: str) -> RawImport:
    return RawImport("esm", m.group(1))


def _cjs_binding(m: re.Match, content: str) -> RawImport:
    binding = m.group(1).strip()
    if binding.startswith("{"):
        # { a: b } destructuring renames like "a as b"
        return RawImport("cjs", m.group(2), named=parse_named_list(binding[1:-1].replace(":", " as ")))
    return RawImport("cjs", m.group(2), default=binding)


def _cjs_bare(m: re.Match, content: str) -> Optional[RawImport]:
    # require('dotenv').config() is a side-effect call, not a module binding
    if _is_chained_call(content, m.end()):
        return None
    return RawImport("cjs", m.group(1))


# Order matters: type-only shapes first, catch-all last.
IMPORT_RULES: tuple[ImportRule, ...] = (
    ImportRule("type-named", re.compile(r"import\s+type\s+{\s*([^}]+)\s*}\s+from\s+" + _QUOTED), _type_named),
    ImportRule("type-default", re.compile(r"import\s+type\s+(\w+)\s+from\s+" + _QUOTED), _type_default),
    ImportRule(
        "type-namespace",
        re.compile(r"import\s+type\s+\*\s+as\s+(\w+)\s+from\s+" + _QUOTED),
        _type_namespace,
    ),
    ImportRule(
        "default-named",
        re.compile(r"import\s+(\w+)\s*,\s*{\s*([^}]*)\s*}\s+from\s+" + _QUOTED),
        _default_and_named,
    ),
    ImportRule(
        "default-namespace",
        re.compile(r"import\s+(\w+)\s*,\s*\*\s+as\s+(\w+)\s+from\s+" + _QUOTED),
        _default_and_namespace,
    ),
    ImportRule("named", re.compile(r"import\s+{\s*([^}]*)\s*}\s+from\s+" + _QUOTED), _named),
    ImportRule("namespace", re.compile(r"import\s+\*\s+as\s+(\w+)\s+from\s+" + _QUOTED), _namespace),
    ImportRule("default", re.compile(r"import\s+(\w+)\s+from\s+" + _QUOTED), _default),
    ImportRule("side-effect", re.compile(r"import\s+" + _QUOTED + r"\s*;?"), _side_effect),
    ImportRule("fallback", re.compile(r"import\s+.+?\s+from\s+" + _QUOTED), _fallback),
    ImportRule(
        "cjs-binding",
        re.compile(r"(?:const|let|var)\s+({[^}]*}|\w+)\s*=\s*require\s*\(\s*" + _QUOTED + r"\s*\)"),
        _cjs_binding,
    ),
    ImportRule("cjs-bare", re.compile(r"(?<![\w$])require\s*\(\s*" + _QUOTED + r"\s*\)"), _cjs_bare),
)


def _overlaps(span: tuple[int, int], captured: list[tuple[int, int]]) -> bool:
    start, end = span
    return any(start < c_end and c_start < end for c_start, c_end in captured)


def extract_raw_imports(content: str) -> list[RawImport]:
    """Run the import rules in order and return every captured statement.

    Statements are returned grouped by rule, in rule order; duplicates of
    the same specifier are left for the caller to merge.
    """
    captured: list[tuple[int, int]] = []
    found: list[RawImport] = []

    for rule in IMPORT_RULES:
        rule_spans: list[tuple[int, int]] = []
        for m in rule.pattern.finditer(content):
            if _overlaps(m.span(), captured):
                continue
            raw = rule.build(m, content)
            if raw is None:
                continue
            found.append(raw)
            rule_spans.append(m.span())
        captured.extend(rule_spans)

    return found


def merge_imports(raw_imports: list[RawImport]) -> list[RawImport]:
    """Deduplicate by ``(type, specifier)``, merging bindings.

    The first statement for a key keeps its position; later statements add
    their bound names. A merged import is type-only only if every statement
    feeding it was.
    """
    merged: dict[tuple[str, str], RawImport] = {}
    for raw in raw_imports:
        key = (raw.type, raw.value)
        existing = merged.get(key)
        if existing is None:
            merged[key] = RawImport(
                type=raw.type,
                value=raw.value,
                default=raw.default,
                named=list(raw.named),
                namespace=raw.namespace,
                side_effect=raw.side_effect,
                is_type_only=raw.is_type_only,
            )
            continue
        if existing.default is None:
            existing.default = raw.default
        if existing.namespace is None:
            existing.namespace = raw.namespace
        for pair in raw.named:
            if pair not in existing.named:
                existing.named.append(pair)
        existing.side_effect = existing.side_effect and raw.side_effect
        existing.is_type_only = existing.is_type_only and raw.is_type_only
    return list(merged.values())
