# type: ignore
from invoke import task


@task
def venv(ctx):
    """Create .venv with hostsweep and its test and dev extras."""
    ctx.run("uv sync --all-extras")


@task
def lint(ctx):
    """
    Static checks: ruff for style, mypy for types.
    """
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """
    Run tests with coverage information.
    """
    ctx.run("pytest --cov=hostsweep --cov-report=term-missing", pty=True)


@task
def smoke(ctx, cidr="127.0.0.1/32"):
    """Sweep a tiny block against the real resolver and ping binary."""
    ctx.run(f"hostsweep -v -w 0 {cidr}", pty=True)


@task
def build_package(ctx):
    """
    Build sdist and wheel into dist/.
    """
    ctx.run("rm -rf dist")
    ctx.run("uv build")
