from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _read_version() -> str:
    """Single-source the version from the FastAPI app factory.

    We intentionally do NOT import the package here: installing must not
    require the runtime dependencies to be present already.
    """

    src = (ROOT / "src" / "deedbook" / "api" / "__init__.py").read_text(encoding="utf-8")
    for line in src.splitlines():
        line = line.strip()
        if line.startswith("app = FastAPI(") and "version=" in line:
            return line.split("version=", 1)[1].split('"')[1]
    return "0.0.0"


setup(
    name="deedbook",
    version=_read_version(),
    description="deedbook: property ownership registry with an HTTP API and Python SDK",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi",
        "uvicorn",
        "httpx",
        "pydantic",
        "pydantic-settings>=2.7",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "deedbook=deedbook.__main__:main",
        ],
    },
)
