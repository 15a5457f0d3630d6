"""End-to-end scans of small on-disk projects."""

import json

import pytest

from codeatlas import scan, scan_project, scan_result_to_dict
from codeatlas.config import ScanConfig
from codeatlas.exceptions import InvalidPathError
from codeatlas.graph import IMPORTS, USES, Relationship
from codeatlas.scanning import RouteDecl
from codeatlas.semantics import BEHAVIORS, CATEGORIES, FILE_TYPES
from codeatlas.serializers import scan_result_to_json

AUTH_FILES = [
    "client/src/api/auth.js",
    "client/src/pages/Login.jsx",
    "client/src/pages/Register.jsx",
    "server/controllers/authController.js",
    "server/models/User.js",
    "server/routes/authRoutes.js",
]

BUDGET_FILES = [
    "client/src/api/budgets.ts",
    "client/src/pages/Budget.jsx",
    "client/src/components/budget/BudgetCard.jsx",
    "client/src/pages/Budgets.jsx",
    "client/src/components/budget/BudgetList.jsx",
    "server/controllers/budgetController.js",
    "server/models/Budget.js",
    "server/utils/format.js",
    "server/routes/budgetRoutes.js",
    "client/src/components/budget/BudgetChart.jsx",
]


@pytest.fixture
def result(fullstack_project):
    return scan_project(fullstack_project)


class TestFileRecords:
    """Per-file classification and analysis."""

    def test_every_discovered_file_has_a_record(self, result):
        assert result.metadata.total_files == len(result.files) == 24
        paths = [f.path for f in result.files]
        assert len(paths) == len(set(paths))

    def test_route_file(self, result):
        f = result.get_file("server/routes/authRoutes.js")
        assert (f.type, f.category, f.behavior) == ("route", "backend", "request-handler")
        assert f.role == "API route handler"
        assert f.analysis.routes == [RouteDecl("POST", "/login"), RouteDecl("POST", "/register")]

    def test_api_client_exports_and_calls(self, result):
        f = result.get_file("client/src/api/budgets.ts")
        assert (f.type, f.category, f.behavior) == ("api-client", "frontend", "http-client")
        assert [(e.name, e.kind) for e in f.analysis.exports] == [("getBudgets", "const"), ("createBudget", "const")]
        assert [(c.type, c.method, c.url) for c in f.analysis.api_calls] == [
            ("axios", "GET", "/api/budgets"),
            ("axios", "POST", "/api/budgets"),
        ]

    def test_content_overrides_path_type(self, result):
        page = result.get_file("client/src/pages/Login.jsx")
        assert page.type == "component"
        assert page.category == "frontend"

    def test_weak_content_keeps_path_type(self, result):
        entry = result.get_file("client/src/main.jsx")
        assert (entry.type, entry.role) == ("entry-point", "App entry point")

    def test_models_and_controllers(self, result):
        model = result.get_file("server/models/User.js")
        assert (model.type, model.behavior) == ("model", "data-layer")
        assert [(e.type, e.name, e.kind) for e in model.analysis.exports] == [("cjs_default", "User", "model")]

        controller = result.get_file("server/controllers/authController.js")
        assert controller.type == "controller"
        assert [(e.name, e.kind) for e in controller.analysis.exports] == [
            ("login", "function"),
            ("register", "function"),
        ]

    def test_labels_come_from_closed_sets(self, result):
        for f in result.files:
            assert f.type in FILE_TYPES
            assert f.category in CATEGORIES
            assert f.behavior in BEHAVIORS

    def test_config_and_docs(self, result):
        assert result.get_file("package.json").type == "manifest"
        assert result.get_file("README.md").type == "docs"
        assert result.get_file("node_modules/react/index.js") is None

    def test_imported_by_is_reverse_of_resolved_imports(self, result):
        by_path = {f.path: f for f in result.files}
        for f in result.files:
            for target in f.analysis.resolved_imports:
                assert target in by_path
                assert f.path in by_path[target].analysis.imported_by
            for importer in f.analysis.imported_by:
                assert f.path in by_path[importer].analysis.resolved_imports

    def test_imported_by_values(self, result):
        button = result.get_file("client/src/components/ui/Button.jsx")
        assert button.analysis.imported_by == ["client/src/pages/Login.jsx", "client/src/pages/Register.jsx"]


class TestRelationships:
    """The project graph."""

    def test_layer_edges(self, result):
        rels = set(result.relationships)
        assert Relationship("server/routes/authRoutes.js", "server/controllers/authController.js", USES) in rels
        assert Relationship("server/controllers/authController.js", "server/models/User.js", USES) in rels
        assert Relationship("client/src/pages/Login.jsx", "client/src/components/ui/Button.jsx", USES) in rels

    def test_api_client_imports_are_not_uses(self, result):
        edges = [r for r in result.relationships if r.from_path == "client/src/api/auth.js"]
        assert edges == [Relationship("client/src/api/auth.js", "client/src/api/index.js", IMPORTS)]

    def test_stats_match_edges(self, result):
        stats = result.metadata.relationship_stats
        assert stats.total_relationships == len(result.relationships)
        assert stats.import_relationships == sum(1 for r in result.relationships if r.type == IMPORTS)
        assert stats.import_relationships == 22
        assert stats.uses_relationships == 15


class TestMetadata:
    """Frameworks and project type."""

    def test_frameworks(self, result):
        meta = result.metadata
        assert meta.frameworks == {
            "backend": ["Express", "JWT Auth"],
            "frontend": ["React", "React Router"],
            "database": ["Mongoose"],
            "tooling": ["Axios", "TypeScript"],
        }
        assert meta.project_type == "fullstack"
        assert meta.frameworks_list[:2] == ["Express", "JWT Auth"]

    def test_coverage(self, result):
        assert result.metadata.coverage == pytest.approx(16 / 24)


class TestFeatures:
    """Features grown from hubs."""

    def test_feature_keys(self, result):
        assert list(result.features) == ["auth", "budget"]

    def test_auth_feature(self, result):
        auth = result.features["auth"]
        assert auth.name == "auth"
        assert auth.all_files == AUTH_FILES
        assert auth.file_count == 6
        assert auth.hub_paths == {
            "api": ["client/src/api/auth.js"],
            "page": ["client/src/pages/Login.jsx", "client/src/pages/Register.jsx"],
            "controller": ["server/controllers/authController.js"],
            "route": ["server/routes/authRoutes.js"],
        }
        assert auth.shared_dependencies == ["client/src/api/index.js", "client/src/components/ui/Button.jsx"]
        assert auth.api_routes == [RouteDecl("POST", "/login"), RouteDecl("POST", "/register")]

    def test_budget_feature_merges_plural_forms(self, result):
        budget = result.features["budget"]
        # budget: Budget.jsx, budgetController, budgetRoutes; budgets: budgets.ts, Budgets.jsx
        assert budget.name == "budget"
        assert budget.all_files == BUDGET_FILES
        assert budget.shared_dependencies == ["client/src/lib/utils.js"]
        assert budget.api_routes == [RouteDecl("GET", "/"), RouteDecl("POST", "/")]

    def test_budget_categories(self, result):
        categorized = result.features["budget"].categorized
        assert categorized["backend"] == [
            "server/controllers/budgetController.js",
            "server/models/Budget.js",
            "server/utils/format.js",
            "server/routes/budgetRoutes.js",
        ]
        assert categorized["components"] == [
            "client/src/components/budget/BudgetCard.jsx",
            "client/src/components/budget/BudgetList.jsx",
            "client/src/components/budget/BudgetChart.jsx",
        ]
        assert categorized["api"] == ["client/src/api/budgets.ts"]
        assert categorized["utils"] == ["server/utils/format.js"]

    def test_shared_infrastructure_stays_out(self, result):
        for feature in result.features.values():
            assert "client/src/components/ui/Button.jsx" not in feature.all_files
            assert "client/src/lib/utils.js" not in feature.all_files
            assert "client/src/api/index.js" not in feature.all_files

    def test_deeper_traversal_reaches_more(self, fullstack_project):
        shallow = scan_project(fullstack_project, ScanConfig(feature_max_depth=0))
        assert shallow.features["auth"].all_files == [
            "client/src/api/auth.js",
            "client/src/pages/Login.jsx",
            "client/src/pages/Register.jsx",
            "server/controllers/authController.js",
            "server/routes/authRoutes.js",
        ]


APP_ROUTER_FILES = {
    "app/dashboard/page.tsx": (
        "import { Button } from '@/components/ui/button';\n"
        "import { cn } from '@/lib/utils';\n\n"
        "export default function DashboardPage() {\n"
        "  return <Button className={cn('p-4')}>Refresh</Button>;\n"
        "}\n"
    ),
    "app/settings/page.tsx": (
        "import { Button } from '@/components/ui/button';\n"
        "import { cn } from '@/lib/utils';\n\n"
        "export default function SettingsPage() {\n"
        "  return <Button className={cn('p-2')}>Save</Button>;\n"
        "}\n"
    ),
    "components/ui/button.tsx": (
        "import { cn } from '@/lib/utils';\n\n"
        "export function Button({ className, ...props }) {\n"
        "  return <button className={cn('btn', className)} {...props} />;\n"
        "}\n"
    ),
    "lib/utils.ts": "export function cn(...classes) {\n  return classes.filter(Boolean).join(' ');\n}\n",
}


class TestRootLevelLayout:
    """Shared UI and helpers at the project root stay shared."""

    def test_shared_files_are_dependencies_not_members(self, make_project):
        result = scan_project(make_project(APP_ROUTER_FILES))

        assert set(result.features) == {"dashboard", "setting"}
        for keyword, page in [("dashboard", "app/dashboard/page.tsx"), ("setting", "app/settings/page.tsx")]:
            feature = result.features[keyword]
            assert feature.all_files == [page]
            assert set(feature.shared_dependencies) == {"components/ui/button.tsx", "lib/utils.ts"}
        assert result.metadata.coverage == 0.5


class TestOversizedFiles:
    """Files above the size limit keep a path-only record."""

    def test_large_file(self, make_project):
        big = "import helper from './helper';\n" + "// padding\n" * 200_000
        root = make_project({"client/src/big.js": big, "client/src/helper.js": "export default 1;\n"})

        result = scan_project(root)
        f = result.get_file("client/src/big.js")

        assert f.content is None
        assert not f.has_content
        assert (f.type, f.role, f.category) == ("utility", "Script/module", "frontend")
        assert f.analysis.imports == []
        assert result.get_file("client/src/helper.js").analysis.imported_by == []

    def test_limit_is_configurable(self, make_project):
        root = make_project({"src/a.js": "x" * 2048})
        result = scan_project(root, ScanConfig(max_file_size_mb=0.001))
        assert result.get_file("src/a.js").content is None


class TestScanInvariants:
    """Whole-scan properties."""

    def test_idempotent(self, fullstack_project):
        first = scan_result_to_dict(scan_project(fullstack_project))
        second = scan_result_to_dict(scan_project(fullstack_project))
        assert first == second

    def test_empty_project(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = scan_project(empty)
        assert result.files == []
        assert result.features == {}
        assert result.metadata.project_type == "unknown"
        assert result.metadata.coverage == 0.0

    def test_missing_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            scan_project(tmp_path / "nope")

    def test_file_as_root(self, tmp_path):
        target = tmp_path / "file.js"
        target.write_text("")
        with pytest.raises(InvalidPathError, match="Invalid path"):
            scan_project(target)

    def test_undecodable_bytes_still_scanned(self, make_project):
        root = make_project({"src/a.js": ""})
        (root / "src" / "a.js").write_bytes(b"const x = '\xff\xfe';\nrequire('./b');\n")
        f = scan_project(root).get_file("src/a.js")
        assert f.content is not None
        assert [i.value for i in f.analysis.imports] == ["./b"]


class TestPublicApi:
    """scan() and JSON output."""

    def test_scan_with_overrides(self, fullstack_project):
        result = scan(fullstack_project, feature_max_depth=0, quiet=True)
        assert "server/models/User.js" not in result.features["auth"].all_files

    def test_json_shape(self, result):
        data = json.loads(scan_result_to_json(result))
        assert set(data) == {"files", "metadata", "relationships", "features"}
        assert data["metadata"]["totalFiles"] == 24
        assert data["metadata"]["projectType"] == "fullstack"

        route = next(f for f in data["files"] if f["path"] == "server/routes/authRoutes.js")
        assert "content" not in route
        assert route["analysis"]["routes"] == [
            {"method": "POST", "path": "/login"},
            {"method": "POST", "path": "/register"},
        ]
        assert set(route["analysis"]) == {
            "imports",
            "resolvedImports",
            "exports",
            "routes",
            "apiCalls",
            "components",
            "functions",
            "importedBy",
        }

        auth = data["features"]["auth"]
        assert auth["fileCount"] == 6
        assert auth["hubs"]["route"] == ["server/routes/authRoutes.js"]
        assert {"from": "server/routes/authRoutes.js", "to": "server/controllers/authController.js", "type": "uses"} in (
            data["relationships"]
        )

    def test_json_with_content(self, result):
        data = json.loads(scan_result_to_json(result, include_content=True))
        readme = next(f for f in data["files"] if f["path"] == "README.md")
        assert readme["content"] == "# Budget app\n"
