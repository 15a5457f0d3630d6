"""Feature naming: hub path -> raw name -> canonical name -> merge key."""

from __future__ import annotations

import re
from typing import Callable, Optional

_lower: Callable[[str], str] = str.lower


def _strip_group(name: str) -> str:
    # App Router route groups: (auth) -> auth
    return re.sub(r"^\(|\)$", "", name).lower()


# First match wins
NAMING_PATTERNS: tuple[tuple[re.Pattern, Callable[[str], str]], ...] = (
    (re.compile(r"controllers[/](\w+?)Controller\.", re.IGNORECASE), _lower),
    (
        re.compile(
            r"app[/](?:.*[/])?([^/]+?)[/](?:page|route|layout|loading|error|not-found)\.(tsx|jsx|ts|js)",
            re.IGNORECASE,
        ),
        _strip_group,
    ),
    (re.compile(r"pages[/](?:.*[/])?([^/]+?)[/]index\.(tsx|jsx)", re.IGNORECASE), _lower),
    (re.compile(r"pages[/](?:.*[/])?(\w+?)\.(tsx|jsx)", re.IGNORECASE), _lower),
    (re.compile(r"api[/](\w+?)\.(ts|js|tsx|jsx)", re.IGNORECASE), _lower),
    (re.compile(r"routes[/](\w+?)(?:Routes|Route)?\.(js|ts)", re.IGNORECASE), _lower),
)

FEATURE_SYNONYMS = {
    # Auth flows
    "login": "auth",
    "register": "auth",
    "signup": "auth",
    "signin": "auth",
    "verify": "auth",
    "forgotpassword": "auth",
    "verifyforgotpassword": "auth",
    "resetpassword": "auth",
    # Landing
    "home": "dashboard",
    "overview": "dashboard",
    # Reporting
    "insight": "insights",
    "analytics": "insights",
    "stats": "insights",
}

IRREGULAR_SINGULARS = {
    "people": "person",
    "children": "child",
    "mice": "mouse",
    "men": "man",
    "women": "woman",
    "data": "data",
    "media": "media",
}


def extract_feature_name(path: str) -> Optional[str]:
    """Raw lowercase feature name from a hub path, or None when no convention matches.

    >>> extract_feature_name("server/controllers/budgetsController.js")
    'budgets'
    >>> extract_feature_name("client/src/pages/Login.jsx")
    'login'
    """
    for pattern, transform in NAMING_PATTERNS:
        match = pattern.search(path)
        if match:
            return transform(match.group(1))
    return None


def canonical_feature_name(name: str) -> str:
    return FEATURE_SYNONYMS.get(name, name)


def singularize(name: str) -> str:
    """Reduce an English plural to its singular form (heuristically)."""
    if name in IRREGULAR_SINGULARS:
        return IRREGULAR_SINGULARS[name]
    if name.endswith("ies") and len(name) > 4:
        return name[:-3] + "y"
    if name.endswith(("ses", "xes", "zes", "ches", "shes")) and len(name) > 4:
        return name[:-2]
    if name.endswith("s") and not name.endswith(("ss", "us")) and len(name) > 3:
        return name[:-1]
    return name


def feature_keyword(path: str) -> Optional[tuple[str, str]]:
    """``(keyword, display_variant)`` for a hub path, or None.

    The display variant is the canonical name before singularization.
    """
    raw = extract_feature_name(path)
    if not raw:
        return None
    canonical = canonical_feature_name(raw)
    return singularize(canonical), canonical
