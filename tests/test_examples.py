import os
import importlib.util

import pytest

BASE_PATH = os.path.dirname(os.path.realpath(__file__))
EXAMPLES_DIR = os.path.join(BASE_PATH, "..", "examples")
EXAMPLE_MODULE_NAMES = sorted(
    f[:-3] for f in os.listdir(EXAMPLES_DIR) if f.endswith(".py")
)


@pytest.mark.parametrize("mod", EXAMPLE_MODULE_NAMES)
def test_examples(mod):
    path = os.path.join(EXAMPLES_DIR, mod + ".py")
    spec = importlib.util.spec_from_file_location("examples." + mod, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
