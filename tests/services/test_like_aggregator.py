# tests/services/test_like_aggregator.py
"""Tests for batched like counting."""

from snsserver.repositories import PostRepository
from snsserver.services.like_aggregator import LikeAggregator


class CountingPostRepository(PostRepository):
    def __init__(self, session) -> None:
        super().__init__(session)
        self.batch_calls = 0

    def count_likes_by_posts(self, posts):
        self.batch_calls += 1
        return super().count_likes_by_posts(posts)


def test_counts_likes_per_post(db_session, alice, bob, post_factory) -> None:
    popular = post_factory(alice, "popular", likes=(alice, bob))
    liked_once = post_factory(alice, "liked once", likes=(bob,))
    ignored = post_factory(bob, "ignored")
    repo = CountingPostRepository(db_session)

    counts = LikeAggregator(repo).count_for([popular, liked_once, ignored])

    assert counts == {popular.id: 2, liked_once.id: 1}
    assert counts.get(ignored.id, 0) == 0
    assert repo.batch_calls == 1


def test_empty_page_yields_empty_map(db_session) -> None:
    assert LikeAggregator(PostRepository(db_session)).count_for([]) == {}


def test_only_counts_requested_posts(db_session, alice, bob, post_factory) -> None:
    requested = post_factory(alice, "requested", likes=(bob,))
    other = post_factory(alice, "other", likes=(alice, bob))

    counts = LikeAggregator(PostRepository(db_session)).count_for([requested])

    assert counts == {requested.id: 1}
    assert other.id not in counts
