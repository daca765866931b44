from __future__ import annotations

import pytest

from actiongen.generation import NamingConventions
from actiongen.model import Declaration


@pytest.fixture()
def conventions() -> NamingConventions:
    return NamingConventions()


@pytest.fixture()
def redux_actions() -> Declaration:
    return Declaration(name="ReduxActions")


@pytest.fixture()
def action_dispatcher() -> Declaration:
    return Declaration(name="ActionDispatcher")


@pytest.fixture()
def minimal_model_document() -> dict[str, object]:
    return {
        "library": "counter.dart",
        "declarations": [
            {
                "name": "CounterActions",
                "constructors": 1,
                "supertypes": ["ReduxActions"],
                "fields": [
                    {"name": "increment", "type": {"name": "ActionDispatcher", "arguments": ["int"]}},
                ],
            }
        ],
    }
