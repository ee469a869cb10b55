import logging

import pytest

from cnfcyk.grammar import Grammar, reference_grammar
from tests.grammars import ENGLISH_GRAMMAR


@pytest.fixture
def grammar():
    return reference_grammar()


@pytest.fixture
def english_grammar():
    return Grammar.from_string(ENGLISH_GRAMMAR)


@pytest.fixture(autouse=True)
def reset_cli_logger():
    yield
    logger = logging.getLogger("cnfcyk")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
