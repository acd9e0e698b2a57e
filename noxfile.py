"""Nox sessions for prismview."""

import nox


PYPROJECT = nox.project.load_toml("pyproject.toml")
PYTHON_VERSIONS = nox.project.python_versions(PYPROJECT, max_version="3.14")
nox.options.default_venv_backend = "uv"
nox.options.sessions = ["lint", "tests"]


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the test suite on every supported interpreter."""
    session.install(".[test]")
    session.run("pytest", *session.posargs)


@nox.session(python="3.14")
def coverage(session: nox.Session) -> None:
    """Measure coverage of the prismview package."""
    session.install(".[test]")
    session.run("pytest", "--cov=prismview", "--cov-report=term-missing", *session.posargs)


@nox.session(python="3.14")
def lint(session: nox.Session) -> None:
    """Check formatting and import order with ruff."""
    session.install("ruff")
    session.run("ruff", "check", "src", "tests", "noxfile.py")
