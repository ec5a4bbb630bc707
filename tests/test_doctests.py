import doctest
import importlib

import pytest

MODULES = [
    "scribe.cleaning",
    "scribe.models",
    "scribe.paste",
    "scribe.text",
    "scribe.layout.font_metrics",
    "scribe.layout.layout_blocks",
    "scribe.layout.layout_heights",
    "scribe.layout.layout_pagination",
    "scribe.layout.layout_settings",
]


@pytest.mark.parametrize("name", MODULES)
def test_module_examples(name: str) -> None:
    module = importlib.import_module(name)

    result = doctest.testmod(module, optionflags=doctest.ELLIPSIS)

    assert result.failed == 0
