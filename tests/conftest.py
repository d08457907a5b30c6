"""Shared fixtures for formwright tests.

Uses a scripted random source and a fake term generator so template
selection and term expansion are deterministic.
"""

import logging

import pytest

from formwright.core.constants import CaseNormalization, TemplateUsage
from formwright.core.defaults import FormConfiguration
from formwright.core.schema import FormBuilder
from formwright.core.template import Template


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging so handlers and levels do not leak between tests."""
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level
    yield
    logger = logging.getLogger("formwright")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    for handler in list(root.handlers):
        if handler not in root_handlers:
            root.removeHandler(handler)
    root.setLevel(root_level)


class ScriptedRandom:
    """Random source returning a fixed sequence of indices."""

    def __init__(self, *indices: int):
        self._indices = list(indices)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        index = self._indices.pop(0) if self._indices else 0
        assert 0 <= index < stop
        return index


class FakeTermGenerator:
    """Term generator that records calls and tags each term with the phrase length."""

    def __init__(self):
        self.calls: list[tuple[str, int]] = []

    def __call__(self, text: str, max_phrase_length: int) -> list[str]:
        self.calls.append((text, max_phrase_length))
        return [f"{text}-{max_phrase_length}", f"{text}-alt"]


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def fake_generator():
    return FakeTermGenerator()


@pytest.fixture
def standard_config():
    return FormConfiguration.standard()


@pytest.fixture
def sandwich_schema(fake_generator):
    """A small form declared in code."""
    return (
        FormBuilder("sandwich", generator=fake_generator)
        .template(
            Template.of(
                "Please select a {&} {||}",
                usage=TemplateUsage.PROMPT,
                field_case=CaseNormalization.INITIAL_UPPER,
            )
        )
        .field(
            "bread",
            description="kind of bread",
            templates=[
                Template.of(
                    "What kind of {&} would you like? {||}",
                    "Which {&} should we use? {||}",
                    usage=TemplateUsage.PROMPT,
                    choice_format="{1}",
                )
            ],
        )
        .value("bread", "nineGrainWheat", terms=["wheat"], max_phrase_length=2)
        .value("bread", "italian")
        .field("length", numeric=(6, 12))
        .field("toppings", optional=True)
        .build()
    )
