"""Behavior classification: what a file does at runtime, coarsely."""

from __future__ import annotations

import re
from typing import Optional

from ..scanning.models import FileAnalysis

_REQ_RES = (
    re.compile(r"\(req\s*,\s*res\)"),
    re.compile(r"\(request\s*,\s*response\)"),
    re.compile(r"req\.(body|params|query|headers|cookies)"),
    re.compile(r"res\.(json|send|status|render|redirect)"),
)
_HTTP_CALL = re.compile(r"axios\.(get|post|put|delete|patch)\s*\(|fetch\s*\(")
_MONGOOSE = re.compile(r"new\s+(mongoose\.)?Schema\s*\(|mongoose\.model\s*\(")
_JSX_OR_HOOKS = re.compile(
    r"<[A-Z][a-zA-Z0-9]*[\s/>]|useState|useEffect|useContext|useReducer|useMemo|useCallback|useRef"
)


def classify_behavior(
    file_type: str, content: Optional[str], analysis: Optional[FileAnalysis] = None
) -> str:
    """Derive a behavior label from the final type, content and analysis.

    First match wins: request-handler, data-layer, http-client, state,
    ui-render, logic (service/utility), config, then logic as the fallback.
    """
    content = content or ""
    analysis = analysis or FileAnalysis()

    has_req_res = any(p.search(content) for p in _REQ_RES)
    has_http_calls = bool(analysis.api_calls) or _HTTP_CALL.search(content) is not None

    if file_type in ("route", "controller", "middleware", "entry-point") or analysis.routes or has_req_res:
        return "request-handler"
    if file_type == "model" or _MONGOOSE.search(content):
        return "data-layer"
    if file_type == "api-client" or (file_type == "service" and has_http_calls):
        return "http-client"
    if file_type == "store":
        return "state"
    if file_type in ("component", "page", "markup", "style") or _JSX_OR_HOOKS.search(content):
        return "ui-render"
    if file_type in ("service", "utility"):
        return "logic"
    if file_type in ("config", "manifest"):
        return "config"
    return "logic"
