import nox

nox.options.sessions = [
    "style",
    "lints",
    "tests",
]


SOURCES = (
    "noxfile.py",
    "src",
    "tests",
)


class Requirements:
    RUFF = "ruff==0.9.3"


@nox.session
def style(session: nox.Session) -> None:
    session.install(Requirements.RUFF)
    session.run("ruff", "format", "--check", *SOURCES)
    session.run("ruff", "check", "--select", "I", *SOURCES)


@nox.session
def lints(session: nox.Session) -> None:
    session.install(Requirements.RUFF)
    session.run("ruff", "check", *SOURCES)


@nox.session
def tests(session: nox.Session) -> None:
    session.install(".[test]")
    session.run("pytest", *session.posargs)
