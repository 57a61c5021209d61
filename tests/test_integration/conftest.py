from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from tests.test_integration.mocks.model import MockBase, MockModel

TOTAL_ROWS = 47


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine('sqlite://')
    MockBase.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(MockModel(id=i, name=f'row-{i}') for i in range(1, TOTAL_ROWS + 1))
        session.commit()
        yield session
    engine.dispose()
