"""
Shared fixtures for cafe tests.
"""

import pytest

from cafe.domain import CoffeeOrder
from cafe.manager import Manager
from cafe.service import Cafe


@pytest.fixture
def order():
    return CoffeeOrder("Latte", "medium")


@pytest.fixture
def cafe():
    return Cafe()


@pytest.fixture
def manager():
    return Manager()
