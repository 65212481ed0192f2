"""Global pytest configuration for POLYKIT.

Applies a default mark to every test according to the top-level directory it
lives in (``tests/unit`` → ``unit``, ``tests/contract`` → ``contract``,
``tests/functional`` → ``functional``), so suites can be selected with
``pytest -m unit`` and friends. Explicit marks on a test are left alone.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKS = ("unit", "contract", "functional")

pytest_plugins = ["tests.fixtures.records"]


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default directory mark to each collected item."""
    for item in items:
        relative = item.path.resolve().relative_to(TESTS_ROOT)
        top = relative.parts[0]
        if top not in DIRECTORY_MARKS:
            continue
        if not any(marker.name == top for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, top))
