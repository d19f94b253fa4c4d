"""Nox automation sessions for unicode_punctuation."""

from __future__ import annotations

import nox

nox.options.sessions = ("lint", "typecheck", "tests")
nox.options.reuse_existing_virtualenvs = True


@nox.session()
def lint(session: nox.Session) -> None:
    session.install("black", "flake8")
    session.run("black", "--check", "unicode_punctuation", "tests")
    session.run("flake8", "--max-line-length", "100", "unicode_punctuation", "tests")


@nox.session()
def typecheck(session: nox.Session) -> None:
    session.install("mypy", "types-PyYAML")
    session.install("-e", ".")
    session.run("mypy", "unicode_punctuation")


@nox.session()
def tests(session: nox.Session) -> None:
    session.install("-e", ".[test]")
    session.run("pytest", "tests")
