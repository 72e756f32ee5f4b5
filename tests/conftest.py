"""
Test configuration and fixtures for registry tests.
"""

import pytest
from typing import List
from unittest.mock import Mock

from service_locator.shared.di.container import Registry


class IDummyClass:
    """Contract used as a registry key."""

    def dispose(self) -> None:
        raise NotImplementedError


class DummyClassImpl1(IDummyClass):
    """Counter that stops working once disposed."""

    def __init__(self):
        self.counter = 0
        self.disposed = False

    def increment(self) -> bool:
        if self.disposed:
            return False
        self.counter += 1
        return True

    def dispose(self) -> None:
        self.disposed = True


class SomeOtherClass:
    def __init__(self, first_param: str, second_param: int):
        self.first_param = first_param
        self.second_param = second_param


class DummyClassImplSubClass1(DummyClassImpl1):
    def __init__(self, some_other_class: SomeOtherClass):
        super().__init__()
        self.some_other_class = some_other_class


class DummyChainClass1:
    def __init__(self, param: int):
        self.param = param


class DummyChainClass2:
    def __init__(self, dummy_chain_class1: DummyChainClass1):
        self.dummy_chain_class1 = dummy_chain_class1


class DummyChainClass3:
    def __init__(self, dummy_chain_class2: DummyChainClass2):
        self.dummy_chain_class2 = dummy_chain_class2


class DummyChainClass4:
    def __init__(self, dummy_chain_class3: DummyChainClass3):
        self.dummy_chain_class3 = dummy_chain_class3


@pytest.fixture
def debug_lines() -> List[str]:
    """Lines received by the registry's debug sink."""
    return []


@pytest.fixture
def mock_logger():
    """Structured logger double."""
    return Mock()


@pytest.fixture
def registry(debug_lines, mock_logger):
    """Registry with a recording debug sink, cleared after each test."""
    registry = Registry(debug_log=debug_lines.append, logger=mock_logger)
    yield registry
    registry.clear()


@pytest.fixture
def dispose_spy():
    """Dispose callback that also disposes the instance."""
    return Mock(side_effect=lambda instance: instance.dispose())
