from unicode_punctuation.config import DEFAULT_PIPELINE
from unicode_punctuation.framework import registry


def test_registry_is_mapping():
    reg = registry()
    assert isinstance(reg, dict)


def test_default_pipeline_is_registered():
    assert set(DEFAULT_PIPELINE) <= registry().keys()
