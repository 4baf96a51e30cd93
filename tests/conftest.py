"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables
os.environ.setdefault("SESSION_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from fastapi.testclient import TestClient

from catalog import get_product
from utils.cart import CartRegistry, CartState, CartStore


@pytest.fixture
def monstera():
    """p1, price 799"""
    return get_product("p1")


@pytest.fixture
def snake_plant():
    """p2, price 499"""
    return get_product("p2")


@pytest.fixture
def empty_state():
    return CartState()


@pytest.fixture
def store():
    return CartStore()


@pytest.fixture
def app():
    from main import app as fastapi_app

    # registro limpio por test
    fastapi_app.state.carts = CartRegistry()
    return fastapi_app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
