from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

# Adapter round-trips are async and hit storage on every example
settings.register_profile(
    "ipramp",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("ipramp")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.property)
