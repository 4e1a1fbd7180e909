"""
Checks that every third-party package imported by cinema_api is a declared dependency.
"""

import re
from importlib import metadata

import pytest

IMPORTED_DISTRIBUTIONS = [
    "fastapi",
    "uvicorn",
    "sqlalchemy",
    "pydantic",
    "pydantic-core",
    "python-dotenv",
]


def declared_requirements():
    try:
        requirements = metadata.requires("cinema-api") or []
    except metadata.PackageNotFoundError:
        pytest.skip("cinema-api is not installed")
    names = set()
    for requirement in requirements:
        if "extra ==" in requirement:
            continue
        name = re.match(r"[A-Za-z0-9._-]+", requirement).group(0)
        names.add(re.sub(r"[-_.]+", "-", name).lower())
    return names


@pytest.mark.parametrize("distribution", IMPORTED_DISTRIBUTIONS)
def test_imported_package_is_declared(distribution):
    assert distribution in declared_requirements()
