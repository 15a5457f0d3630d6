"""Tests for regex import extraction and merging."""

from codeatlas.scanning import derive_import_name, extract_raw_imports, merge_imports
from codeatlas.scanning.imports import IMPORT_RULES, parse_named_list


def extract(content):
    return merge_imports(extract_raw_imports(content))


def by_value(content):
    return {raw.value: raw for raw in extract(content)}


class TestEsmShapes:
    """Each ES module statement shape."""

    def test_default(self):
        (raw,) = extract("import React from 'react';")
        assert (raw.type, raw.value, raw.bound_names()) == ("esm", "react", ["React"])

    def test_named_with_alias(self):
        (raw,) = extract("import { a, b as c } from './mod';")
        assert raw.bound_names() == ["a", "b as c"]

    def test_default_and_named(self):
        (raw,) = extract("import Foo, { bar as baz } from '../utils/foo';")
        assert raw.value == "../utils/foo"
        assert raw.bound_names() == ["Foo", "bar as baz"]

    def test_namespace(self):
        (raw,) = extract("import * as path from 'path';")
        assert raw.bound_names() == ["* as path"]

    def test_default_and_namespace(self):
        (raw,) = extract("import def, * as ns from './x';")
        assert raw.bound_names() == ["def", "* as ns"]

    def test_side_effect(self):
        (raw,) = extract("import './styles.css';")
        assert raw.side_effect
        assert raw.bound_names() == ["(side-effect)"]

    def test_multiline_named(self):
        content = "import {\n  useState,\n  useEffect,\n} from 'react';\n"
        (raw,) = extract(content)
        assert raw.bound_names() == ["useState", "useEffect"]


class TestTypeOnly:
    """import type statements are captured once and flagged."""

    def test_type_named(self):
        (raw,) = extract("import type { User, Role } from './types';")
        assert raw.is_type_only
        assert raw.bound_names() == ["User", "Role"]

    def test_type_default(self):
        (raw,) = extract("import type Config from './config';")
        assert raw.is_type_only
        assert raw.default == "Config"

    def test_type_import_not_recaptured_by_generic_rules(self):
        raws = extract_raw_imports("import type { User } from './types';")
        assert len(raws) == 1

    def test_mixed_type_and_value_import_is_not_type_only(self):
        content = "import type { User } from './user';\nimport { load } from './user';\n"
        (raw,) = extract(content)
        assert not raw.is_type_only
        assert raw.bound_names() == ["User", "load"]

    def test_inline_type_modifier_dropped_from_name(self):
        assert parse_named_list("a, type B, c as d") == [("a", "a"), ("B", "B"), ("c", "d")]


class TestCommonJs:
    """require() forms."""

    def test_binding(self):
        raw = by_value("const express = require('express');")["express"]
        assert (raw.type, raw.default) == ("cjs", "express")

    def test_destructured(self):
        raw = by_value("const { Router, json: parseJson } = require('express');")["express"]
        assert raw.bound_names() == ["Router", "json as parseJson"]

    def test_bare_require(self):
        (raw,) = extract("require('./polyfills');")
        assert raw.type == "cjs"
        assert raw.bound_names() == []

    def test_chained_require_skipped(self):
        assert extract("require('dotenv').config();") == []

    def test_binding_not_double_counted(self):
        raws = extract_raw_imports("const db = require('./db');")
        assert len(raws) == 1

    def test_identifier_ending_in_require_is_ignored(self):
        assert extract("myrequire('./x');") == []


class TestMerging:
    """Duplicate specifiers merge into one record."""

    def test_same_specifier_merges_bindings(self):
        content = "import React from 'react';\nimport { useState } from 'react';\n"
        (raw,) = extract(content)
        assert raw.bound_names() == ["React", "useState"]

    def test_esm_and_cjs_kept_apart(self):
        content = "import a from './a';\nconst b = require('./a');\n"
        assert [(r.type, r.value) for r in extract(content)] == [("esm", "./a"), ("cjs", "./a")]

    def test_rules_are_ordered_type_first(self):
        assert IMPORT_RULES[0].name == "type-named"
        assert IMPORT_RULES[-1].name == "cjs-bare"


class TestDeriveImportName:
    """Readable names for modules without bindings."""

    def test_last_segment(self):
        assert derive_import_name("./routes/feedback") == "feedback"

    def test_scoped_package(self):
        assert derive_import_name("@scope/pkg") == "pkg"

    def test_index_uses_parent(self):
        assert derive_import_name("./api/index.js") == "api"

    def test_kebab_to_camel(self):
        assert derive_import_name("./user-profile") == "userProfile"

    def test_empty(self):
        assert derive_import_name("") == ""
