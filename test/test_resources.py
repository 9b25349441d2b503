import pytest

from generes.resources import Defaults, EmissionConfig, GuardStyle, ResourceEntry


def test_parse_splits_on_first_colon():
    assert ResourceEntry.parse("logo.png:logo") == ResourceEntry("logo.png", "logo")
    assert ResourceEntry.parse("a:b:c") == ResourceEntry("a", "b:c")
    assert ResourceEntry.parse("file:") == ResourceEntry("file", "")


def test_parse_requires_colon():
    with pytest.raises(ValueError):
        ResourceEntry.parse("logo.png")


def test_defaults():
    config = EmissionConfig.create()
    assert config.namespace == Defaults.namespace == "resources"
    assert config.container_name == Defaults.name == "resources"
    assert config.output_path == Defaults.output == "resources.hpp"
    assert config.guard_style is GuardStyle.DEFINE


def test_empty_values_fall_back_to_defaults():
    config = EmissionConfig.create(
        namespace="", container_name="", guard_style="", output_path=""
    )
    assert config == EmissionConfig()


def test_create_normalizes_output():
    config = EmissionConfig.create(output_path="out/gen", guard_style="pragma")
    assert config.output_path == "out/gen.hpp"
    assert config.guard_style is GuardStyle.PRAGMA


def test_unknown_guard_style():
    with pytest.raises(ValueError):
        EmissionConfig.create(guard_style="once")
