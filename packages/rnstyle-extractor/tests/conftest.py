import pytest
from rnstyle_extractor import ExtractionEngine, ExtractorConfig
from rnstyle_tree_sitter import TSXParser


@pytest.fixture
def engine():
    return ExtractionEngine(ExtractorConfig())


@pytest.fixture
def parser():
    return TSXParser()
