# tests/core/test_filters.py

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from folklore_http_api.db.models import Proverb, Story
from folklore_http_api.repositories.filters import (
    EqualityFilters,
    build_list_query,
    normalize_filter,
)
from folklore_http_api.repositories.stories import StoriesRepository


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, None),
        ("", None),
        ("   ", None),
        ("\t\n", None),
        ("Tamil", "Tamil"),
        ("  Tamil ", "Tamil"),
    ],
)
def test_normalize_filter(raw, expected) -> None:
    assert normalize_filter(raw) == expected


def test_filter_combinations() -> None:
    assert EqualityFilters.from_values(language=None, category="").combination == "none"
    assert not EqualityFilters.from_values(language=None, category="")

    only_language = EqualityFilters.from_values(language="Hindi", category=None)
    assert only_language.combination == "language"
    assert only_language.as_dict() == {"language": "Hindi"}

    only_category = EqualityFilters.from_values(language=" ", category="Fable")
    assert only_category.combination == "category"

    both = EqualityFilters.from_values(language="Tamil", region="Chennai")
    assert both.combination == "language+region"
    assert both.as_dict() == {"language": "Tamil", "region": "Chennai"}


def test_query_is_parameterized() -> None:
    filters = EqualityFilters.from_values(language="Tamil'; DROP TABLE stories; --")
    stmt = build_list_query(Story, filters)

    compiled = stmt.compile()
    assert "DROP TABLE" not in str(compiled)
    assert "DROP TABLE" in next(iter(compiled.params.values()))


def test_query_orders_newest_first() -> None:
    sql = str(build_list_query(Proverb, EqualityFilters()))
    assert "ORDER BY proverbs.created_at DESC, proverbs.id DESC" in sql
    assert "WHERE" not in sql


def test_unknown_column_is_rejected() -> None:
    with pytest.raises(ValueError):
        build_list_query(Story, EqualityFilters.from_values(region="Chennai"))


def test_ties_on_timestamp_come_back_in_reverse_insertion_order(session: Session) -> None:
    same_instant = datetime(2024, 1, 1, tzinfo=timezone.utc)
    earlier = same_instant - timedelta(days=1)

    session.add_all(
        [
            Story(title="first", content="c", created_at=same_instant),
            Story(title="second", content="c", created_at=same_instant),
            Story(title="oldest", content="c", created_at=earlier),
            Story(title="third", content="c", created_at=same_instant),
        ]
    )
    session.commit()

    rows = StoriesRepository(session).list_stories()
    assert [row.title for row in rows] == ["third", "second", "first", "oldest"]


def test_two_filters_are_combined_with_and(session: Session) -> None:
    session.add_all(
        [
            Story(title="match", content="c", language="Bengali", category="Legend"),
            Story(title="language only", content="c", language="Bengali", category="Fable"),
            Story(title="category only", content="c", language="Odia", category="Legend"),
        ]
    )
    session.commit()

    rows = StoriesRepository(session).list_stories(language="Bengali", category="Legend")
    assert [row.title for row in rows] == ["match"]


def test_timestamps_read_back_as_utc(session: Session) -> None:
    ist = timezone(timedelta(hours=5, minutes=30))
    session.add(
        Story(title="aware", content="c", created_at=datetime(2024, 1, 1, 5, 30, tzinfo=ist))
    )
    session.add(Proverb(proverb="defaulted"))
    session.commit()
    session.expire_all()

    story = StoriesRepository(session).list_stories()[0]
    assert story.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert story.created_at.utcoffset() == timedelta(0)

    proverb = session.execute(select(Proverb)).scalar_one()
    assert proverb.created_at.tzinfo is not None
