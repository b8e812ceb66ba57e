"""Tests for pattern-based import and export extraction."""

import time

import pytest

from bridge_analyzer.extractor import extract_exports, extract_imports, is_external
from bridge_analyzer.patterns import CATALOG


class TestTypeScriptImports:
    """Import forms shared by TypeScript and JavaScript."""

    def test_named_overrides_default(self):
        content = "// header\n// more\nimport Foo, { Bar, Baz } from './x'\n"
        links = extract_imports(content, "typescript")

        assert len(links) == 1
        link = links[0]
        assert link.import_type == "named"
        assert link.import_names == ["Bar", "Baz"]
        assert link.target_path == "./x"
        assert link.line_number == 3
        assert link.is_external is False

    def test_default_import(self):
        links = extract_imports("import React from 'react'", "typescript")

        assert len(links) == 1
        assert links[0].import_type == "default"
        assert links[0].import_names == ["React"]
        assert links[0].is_external is True

    def test_namespace_import(self):
        links = extract_imports("import * as NS from './y'", "typescript")

        assert len(links) == 1
        assert links[0].import_type == "namespace"
        assert links[0].import_names == ["NS"]
        assert links[0].target_path == "./y"

    def test_type_only_import(self):
        links = extract_imports("import type { Props } from '@/types/props'", "typescript")

        assert [l.import_names for l in links] == [["Props"]]
        assert links[0].is_external is False

    def test_side_effect_dynamic_and_require(self):
        content = (
            "import './styles.css'\n"
            "const lazy = () => import('./lazy')\n"
            "const _ = require(\"lodash\")\n"
        )
        links = extract_imports(content, "javascript")

        assert [(l.target_path, l.import_type, l.line_number) for l in links] == [
            ("./styles.css", "sideEffect", 1),
            ("./lazy", "sideEffect", 2),
            ("lodash", "sideEffect", 3),
        ]
        assert all(l.import_names == [] for l in links)
        assert [l.is_external for l in links] == [False, False, True]

    def test_blank_names_are_dropped(self):
        links = extract_imports("import { a, , b, } from '~/mod'", "javascript")

        assert links[0].import_names == ["a", "b"]
        assert links[0].is_external is False

    def test_one_line_can_yield_several_links(self):
        content = "const a = require('./a'); const b = require('./b')"
        links = extract_imports(content, "javascript")

        assert [l.target_path for l in links] == ["./a", "./b"]
        assert {l.line_number for l in links} == {1}

    def test_indented_static_import_is_ignored(self):
        assert extract_imports("  import x from './x'", "typescript") == []


class TestPythonImports:

    def test_relative_from_import(self):
        links = extract_imports("from .models import User, Post\n", "python")

        assert len(links) == 1
        link = links[0]
        assert link.target_path == ".models"
        assert link.import_type == "named"
        assert link.import_names == ["User", "Post"]
        assert link.is_external is False

    def test_plain_import(self):
        links = extract_imports("import os\nimport numpy as np\n", "python")

        assert [(l.target_path, l.import_type, l.line_number) for l in links] == [
            ("os", "default", 1),
            ("numpy", "default", 2),
        ]
        assert all(l.is_external for l in links)


class TestGoImports:

    def test_single_import(self):
        links = extract_imports('package main\n\nimport "os"\n', "go")

        assert len(links) == 1
        assert links[0].target_path == "os"
        assert links[0].import_type == "default"
        assert links[0].line_number == 3
        assert links[0].is_external is False

    def test_grouped_block_keeps_last_entry(self):
        content = (
            "package main\n"
            "\n"
            "import (\n"
            '\t"fmt"\n'
            "\t// logging\n"
            '\t"github.com/acme/lib"\n'
            ")\n"
        )
        links = extract_imports(content, "go")

        assert len(links) == 1
        assert links[0].target_path == "github.com/acme/lib"
        assert links[0].line_number == 3
        assert links[0].is_external is True

    def test_unclosed_block_with_padding_returns_quickly(self):
        content = "package main\n\nimport (" + " " * 4000 + "\n" + "\t\n" * 500

        started = time.perf_counter()
        links = extract_imports(content, "go")

        assert links == []
        assert time.perf_counter() - started < 1.0

    def test_block_without_inner_whitespace(self):
        links = extract_imports('package main\nimport("fmt")\n', "go")

        assert [(l.target_path, l.line_number) for l in links] == [("fmt", 2)]


class TestRustImports:

    def test_use_path(self):
        links = extract_imports("use crate::foo::bar;\n", "rust")

        assert len(links) == 1
        assert links[0].target_path == "crate::foo::bar"
        assert links[0].import_type == "default"
        assert links[0].is_external is False

    def test_mod_and_external_crate(self):
        links = extract_imports("mod config;\nuse serde::Deserialize;\n", "rust")

        assert [(l.target_path, l.is_external) for l in links] == [
            ("config", True),
            ("serde::Deserialize", True),
        ]


@pytest.mark.parametrize(
    "language, content",
    [
        ("typescript", "const x = 1\nconsole.log(x)\n"),
        ("javascript", "function helper() {}\n"),
        ("python", "# nothing here\nprint('hi')\n"),
        ("go", "package main\n\nfunc main() {}\n"),
        ("rust", "fn main() {}\n"),
    ],
)
def test_files_without_imports_or_exports(language: str, content: str):
    assert extract_imports(content, language) == []
    assert extract_exports(content, language) == []


@pytest.mark.parametrize("language", ["css", "json", "unknown"])
def test_languages_without_patterns(language: str):
    assert extract_imports("import x from './x'", language) == []
    assert extract_exports("export const x = 1", language) == []


class TestExports:

    def test_typescript_declarations_and_lists(self):
        content = (
            "export function a() {}\n"
            "export const b = 1\n"
            "export { c, d }\n"
            "export default class F {}\n"
            "export interface G {}\n"
        )

        assert extract_exports(content, "typescript") == ["a", "b", "F", "G", "c", "d"]

    def test_duplicates_keep_first_occurrence(self):
        content = "export function a() {}\nexport { a, b }\n"

        assert extract_exports(content, "typescript") == ["a", "b"]

    def test_presence_only_patterns_add_no_names(self):
        assert extract_exports("module.exports = {}\n", "javascript") == []
        assert extract_exports("export default {}\n", "typescript") == []

    def test_python_top_level_names(self):
        content = "def foo(x):\n    pass\n\nclass Bar:\n    def inner(self):\n        pass\n\nCONST = 1\n"

        assert extract_exports(content, "python") == ["foo", "Bar", "CONST"]

    def test_go_exports_only_capitalized(self):
        content = "func Run() {}\nfunc helper() {}\ntype Config struct{}\nconst Max = 3\n"

        assert extract_exports(content, "go") == ["Run", "Config", "Max"]

    def test_rust_public_items(self):
        content = "pub fn run() {}\nfn private() {}\npub struct Config;\npub trait Load {}\n"

        assert extract_exports(content, "rust") == ["run", "Config", "Load"]


@pytest.mark.parametrize(
    "target, language, expected",
    [
        ("./x", "typescript", False),
        ("@/lib/x", "typescript", False),
        ("~/lib/x", "javascript", False),
        ("@scope/pkg", "typescript", True),
        (".models", "python", False),
        ("os.path", "python", True),
        ("fmt", "go", False),
        ("github.com/a/b", "go", True),
        ("self::x", "rust", False),
        ("super::x", "rust", False),
        ("std::io", "rust", True),
        ("./x", "css", True),
    ],
)
def test_is_external(target: str, language: str, expected: bool):
    assert is_external(target, language) is expected


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        CATALOG["cobol"] = CATALOG["python"]
