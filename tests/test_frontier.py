# File: tests/test_frontier.py
from site_indexer.crawler.frontier import Frontier
from site_indexer.crawler.models import INITIAL_REFERRER, FrontierEntry

SEED = "https://x.test/"


def test_seed_is_queued_with_initial_referrer():
    frontier = Frontier()
    frontier.seed(SEED)
    assert len(frontier) == 1
    assert frontier.drain_batch(5) == [FrontierEntry(SEED, INITIAL_REFERRER)]
    assert frontier.referrer_of(SEED) == INITIAL_REFERRER
    assert not frontier


def test_enqueue_keeps_first_referrer():
    frontier = Frontier()
    frontier.enqueue(["https://x.test/a"], "https://x.test/one")
    added = frontier.enqueue(["https://x.test/a", "https://x.test/b"], "https://x.test/two")
    assert added == 1
    assert frontier.referrer_of("https://x.test/a") == "https://x.test/one"
    assert frontier.referrer_of("https://x.test/b") == "https://x.test/two"
    assert [e.url for e in frontier.drain_batch(10)] == ["https://x.test/a", "https://x.test/b"]


def test_links_back_to_seed_are_not_requeued():
    frontier = Frontier()
    frontier.seed(SEED)
    assert frontier.enqueue([SEED], "https://x.test/a") == 0
    assert frontier.referrer_of(SEED) == INITIAL_REFERRER


def test_drain_batch_is_fifo_and_bounded():
    frontier = Frontier()
    urls = [f"https://x.test/p{i}" for i in range(7)]
    frontier.enqueue(urls, SEED)
    first = frontier.drain_batch(5)
    second = frontier.drain_batch(5)
    assert [e.url for e in first] == urls[:5]
    assert [e.url for e in second] == urls[5:]
    assert frontier.drain_batch(5) == []


def test_mark_visited_is_idempotent():
    frontier = Frontier()
    assert frontier.mark_visited(SEED) is True
    assert frontier.mark_visited(SEED) is False
    assert frontier.visited_count == 1
    assert frontier.is_visited(SEED)
    assert SEED in frontier
    assert frontier.visited == frozenset({SEED})


def test_size_counts_queued_and_visited():
    frontier = Frontier()
    frontier.seed(SEED)
    frontier.drain_batch(1)
    frontier.mark_visited(SEED)
    frontier.enqueue(["https://x.test/a", "https://x.test/b"], SEED)
    assert frontier.size == 3


def test_unknown_url_referrer_defaults_to_initial():
    assert Frontier().referrer_of("https://x.test/nowhere") == INITIAL_REFERRER
