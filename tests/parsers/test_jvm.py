"""Tests for the Java, Kotlin and Scala import parsers."""

from __future__ import annotations

from depscan.models import Language
from tests._fixtures.source_builder import SourceBuilder


def test_java_keeps_first_segment(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "Main.java",
        """
        package demo;

        import foobar.SomeClass;
        import static org.junit.Assert.assertEquals;
        import java.util.*;
        import com.google.common.collect.ImmutableList; import foobar.Other;

        public class Main {
            String text = "import fake.Thing;";
        }
        """,
        Language.JAVA,
    )

    assert deps == ["foobar", "org", "java", "com"]


def test_kotlin_keeps_first_two_segments(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "Main.kt",
        """
        package demo

        import alpha.time.Clock
        import beta.Single
        import gamma
        import delta.x.Y as Z
        import `quoted`.pkg.Name
        """,
        Language.KOTLIN,
    )

    assert deps == ["alpha.time", "beta.Single", "gamma", "delta.x", "quoted.pkg"]


def test_scala_keeps_full_path(sources: SourceBuilder) -> None:
    deps = sources.detect(
        "Main.scala",
        """
        package demo

        import com.alpha.SomeClass
        import scala.collection.mutable._
        import akka.actor.{Actor, Props}
        import a.B, c.D
        import cats.syntax.all.*
        """,
        Language.SCALA,
    )

    assert deps == [
        "com.alpha.SomeClass",
        "scala.collection.mutable",
        "akka.actor",
        "a.B",
        "c.D",
        "cats.syntax.all",
    ]


def test_java_and_scala_root_the_same_import_differently(sources: SourceBuilder) -> None:
    java = sources.detect("Some.java", "import com.alpha.SomeClass;\n", Language.JAVA)
    scala = sources.detect("Some.scala", "import com.alpha.SomeClass\n", Language.SCALA)

    assert java == ["com"]
    assert scala == ["com.alpha.SomeClass"]
