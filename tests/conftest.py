import pytest

from product_api.database import PRODUCTS


@pytest.fixture(autouse=True)
def seeded_store():
    # every test starts from the three seed products
    PRODUCTS.reset()
    yield PRODUCTS
    PRODUCTS.reset()
