"""
Shared pytest fixtures for the factory method tests.
"""

import pytest

from abstract.creator.concrete_creator_one import ConcreteCreator1
from abstract.creator.concrete_creator_two import ConcreteCreator2
from utils.logger import Logger


@pytest.fixture(autouse=True)
def fresh_logger():
    """Drop the process logger so handlers never outlive a test's capture streams."""
    Logger.reset()
    yield
    Logger().close()
    Logger.reset()


@pytest.fixture(params=[ConcreteCreator1, ConcreteCreator2], ids=["creator1", "creator2"])
def creator(request):
    return request.param()
