"""Tests for the JavaScript, PHP, HTML and JSON manifest parsers."""

from __future__ import annotations

from depscan.models import Language
from tests._fixtures.source_builder import SourceBuilder


def test_javascript_keeps_module_specifiers(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "index.js",
        """
        import x from 'bravo';
        import { a, b } from "charlie";
        import * as d from 'delta';
        import 'echo';
        const f = require('foxtrot');
        export * from './local';
        export { g } from "golf";
        const lazy = import('hotel');
        // import nope from 'commented';
        /* require('blocked') */
        import {
          one,
          two,
        } from '@scope/india';
        """,
        Language.JAVASCRIPT,
    )

    assert deps == [
        "bravo",
        "charlie",
        "delta",
        "echo",
        "foxtrot",
        "./local",
        "golf",
        "hotel",
        "@scope/india",
    ]


def test_typescript_uses_the_javascript_rules(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "app.ts",
        """
        import type { Config } from 'juliet';
        import React from "react";
        """,
        Language.TYPESCRIPT,
    )

    assert deps == ["juliet", "react"]


def test_javascript_ignores_imports_inside_string_literals(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "strings.js",
        """
        import real from 'kilo';
        const s = "import 'fake'";
        const t = `
        require('tmpl')
        `;
        const u = 'export * from "quoted"';
        """,
        Language.JAVASCRIPT,
    )

    assert deps == ["kilo"]


def test_php_keeps_vendor_namespace(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "index.php",
        """
        <?php

        namespace App;

        use Interop\\Container\\ContainerInterface;
        use FooBarOne\\Classes\\One, FooBarTwo\\Two as Second;
        use function Helpers\\format_date;
        use Vendor\\Package\\{ClassA, ClassB as B};
        use \\Leading\\Slash;

        // use Commented\\Out;
        # use Hashed\\Out;
        $fn = function () use ($x) { return $x; };
        """,
        Language.PHP,
    )

    assert deps == ["Interop", "FooBarOne", "FooBarTwo", "Helpers", "Vendor", "Leading"]


def test_php_skips_trait_use_inside_class_bodies(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "traits.php",
        """
        <?php
        use Interop\\Foo;

        class A {
            use SomeTrait;

            public function run() {
                $label = "{";
                return function () use ($label) { return $label; };
            }
        }

        namespace Braced {
            use Monolog\\Logger;
        }

        trait T { use Other\\Trait; }
        """,
        Language.PHP,
    )

    assert deps == ["Interop", "Monolog"]


def test_html_reports_script_sources(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "index.html",
        """
        <html>
          <head>
            <script src="https://cdn.example.com/jquery.min.js"></script>
            <SCRIPT type="module" src='/static/app.js'></SCRIPT>
            <!-- <script src="hidden.js"></script> -->
          </head>
        </html>
        """,
        Language.HTML,
    )

    assert deps == ["https://cdn.example.com/jquery.min.js", "/static/app.js"]


def test_json_manifest_lists_packages(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "package.json",
        """
        {
          "name": "demo",
          "dependencies": {"react": "^18.0.0", "lodash": "^4.17.21"},
          "devDependencies": {"jest": "^29.0.0", "react": "^18.0.0"}
        }
        """,
        Language.JSON,
    )

    assert deps == ["react", "lodash", "jest"]


def test_json_manifest_tolerates_invalid_documents(sources: SourceBuilder) -> None:
    assert sources.detect("broken.json", "{not json", Language.JSON) == []
    assert sources.detect("list.json", "[1, 2, 3]", Language.JSON) == []
