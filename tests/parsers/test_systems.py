"""Tests for the Rust, Swift and Haxe import parsers."""

from __future__ import annotations

from depscan.models import Language
from tests._fixtures.source_builder import SourceBuilder


def test_rust_reports_crate_roots(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "lib.rs",
        """
        extern crate serde;
        use syn::Token;
        use std::{io, fs};
        use {regex::Regex, once_cell::sync::Lazy};
        pub use crate::inner::Thing;
        use self::local::Item;
        pub(crate) use tokio::runtime;
        use ::anyhow::Result;
        // use fake::Thing;

        fn label<'a>(value: &'a str) -> &'a str {
            value
        }
        """,
        Language.RUST,
    )

    assert deps == ["serde", "syn", "std", "regex", "once_cell", "tokio", "anyhow"]


def test_rust_multiline_use_tree(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "main.rs",
        """
        use serde::{
            Deserialize,
            Serialize,
        };
        """,
        Language.RUST,
    )

    assert deps == ["serde"]


def test_swift_keeps_module_identifier(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "main.swift",
        """
        import Swift
        import struct Foundation.Date
        @testable import MyApp
        import UIKit.UIView
        /* import Hidden */
        let text = "import Nope"
        """,
        Language.SWIFT,
    )

    assert deps == ["Swift", "Foundation", "MyApp", "UIKit"]


def test_haxe_keeps_first_segment(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "Main.hx",
        """
        package demo;

        import alpha.Beta;
        using tink.CoreApi;
        import haxe.ds.*;
        """,
        Language.HAXE,
    )

    assert deps == ["alpha", "tink", "haxe"]
