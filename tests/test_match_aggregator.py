import pytest

from application.services import MatchAggregator, MatchTally, assign_bucket, classify_match
from domain.entities import Account, MatchDetail
from infrastructure.api import FatalRequestError
from tests.fakes import DAY, FakeMatchRepository, bucket, detail

ACCOUNT = Account(puuid="p-1", game_name="Glube", tag_line="EUW")
SPLITS = (bucket("Split 2", 100, 55), bucket("Split 3", 200, 15))


def _aggregator(repo, buckets=SPLITS, **kwargs) -> MatchAggregator:
    kwargs.setdefault("queue_id", 420)
    return MatchAggregator(repo, buckets, **kwargs)


@pytest.mark.parametrize("duration", [0, 120, 299, 300])
@pytest.mark.parametrize("queue_id", [420, 440])
@pytest.mark.parametrize("end_day", [50, 150, 250])
def test_short_games_are_remakes(duration, queue_id, end_day):
    match = detail("m", end_s=end_day * DAY, queue_id=queue_id, duration=duration)

    assert classify_match(match, queue_id=queue_id, buckets=SPLITS) is None


def test_remakes_count_when_included():
    match = detail("m", end_s=150 * DAY, duration=200)

    assert classify_match(match, queue_id=420, buckets=SPLITS, include_remakes=True) == SPLITS[0]


@pytest.mark.parametrize("queue_id", [420, 440])
@pytest.mark.parametrize("duration", [100, 301, 2400])
def test_matches_before_earliest_cutoff_never_count(queue_id, duration):
    match = detail("m", end_s=100 * DAY - 1, queue_id=queue_id, duration=duration)

    assert classify_match(match, queue_id=queue_id, buckets=SPLITS, include_remakes=True) is None


def test_other_queues_are_filtered():
    match = detail("m", end_s=150 * DAY, queue_id=440)

    assert classify_match(match, queue_id=420, buckets=SPLITS) is None


def test_bucket_assignment_partitions_time():
    cutoffs = [b.cutoff_ts for b in SPLITS] + [float("inf")]
    for end_s in range(99 * DAY, 260 * DAY, DAY // 3):
        owners = [b for b, upper in zip(SPLITS, cutoffs[1:]) if b.cutoff_ts <= end_s < upper]
        chosen = assign_bucket(end_s, SPLITS)
        if end_s < SPLITS[0].cutoff_ts:
            assert owners == [] and chosen is None
        else:
            assert owners == [chosen]


def test_cutoff_boundary_is_inclusive():
    assert assign_bucket(200 * DAY, SPLITS) is SPLITS[1]
    assert assign_bucket(200 * DAY - 1, SPLITS) is SPLITS[0]
    assert assign_bucket(100 * DAY, SPLITS) is SPLITS[0]


def test_assignment_ignores_configuration_order():
    reversed_splits = tuple(reversed(SPLITS))

    assert assign_bucket(250 * DAY, reversed_splits) is SPLITS[1]


def test_end_timestamp_is_floored_to_seconds():
    match = MatchDetail("m", queue_id=420, game_duration=1800, game_end_timestamp=200 * DAY * 1000 - 1)

    assert classify_match(match, queue_id=420, buckets=SPLITS) is SPLITS[0]


def test_tally_tracks_first_and_last_match():
    tally = MatchTally.empty(SPLITS)
    tally.record(SPLITS[0], 150 * DAY)
    tally.record(SPLITS[1], 210 * DAY)
    tally.record(SPLITS[0], 120 * DAY)

    assert tally.counts == {"Split 2": 2, "Split 3": 1}
    assert tally.total == 3
    assert tally.first_match_at.timestamp() == 120 * DAY
    assert tally.last_match_at.timestamp() == 210 * DAY


async def test_two_bucket_scenario_counts_every_match_once():
    details = {f"a{i}": detail(f"a{i}", end_s=120 * DAY + i) for i in range(55)}
    details.update({f"b{i}": detail(f"b{i}", end_s=210 * DAY + i) for i in range(15)})
    repo = FakeMatchRepository(details)

    tally = await _aggregator(repo).aggregate(ACCOUNT)

    assert tally.counts == {"Split 2": 55, "Split 3": 15}
    assert tally.pages == 2
    assert len(repo.detail_calls) == 70


async def test_listing_uses_earliest_cutoff_and_page_offsets():
    details = {f"m{i}": detail(f"m{i}", end_s=150 * DAY) for i in range(12)}
    repo = FakeMatchRepository(details)

    await _aggregator(repo, page_size=5).aggregate(ACCOUNT)

    assert [c[1] for c in repo.list_calls] == [0, 5, 10]
    assert all(c[2] == 5 and c[3] == 100 * DAY for c in repo.list_calls)


async def test_short_page_stops_paging():
    details = {f"m{i}": detail(f"m{i}", end_s=150 * DAY) for i in range(7)}
    repo = FakeMatchRepository(details)

    tally = await _aggregator(repo, page_size=5, max_pages=8).aggregate(ACCOUNT)

    assert len(repo.list_calls) == 2
    assert tally.total == 7


async def test_empty_page_stops_paging():
    details = {f"m{i}": detail(f"m{i}", end_s=150 * DAY) for i in range(10)}
    repo = FakeMatchRepository(details)

    tally = await _aggregator(repo, page_size=5).aggregate(ACCOUNT)

    assert len(repo.list_calls) == 3
    assert tally.pages == 2
    assert tally.total == 10


async def test_max_pages_caps_history():
    details = {f"m{i}": detail(f"m{i}", end_s=150 * DAY) for i in range(100)}
    repo = FakeMatchRepository(details)

    tally = await _aggregator(repo, page_size=5, max_pages=3).aggregate(ACCOUNT)

    assert len(repo.list_calls) == 3
    assert tally.total == 15


async def test_reference_repeated_across_pages_counts_once():
    details = {f"m{i}": detail(f"m{i}", end_s=150 * DAY) for i in range(6)}
    repo = FakeMatchRepository(details, pages=[["m0", "m1", "m2"], ["m2", "m3", "m4"], ["m5"]])

    tally = await _aggregator(repo, page_size=3).aggregate(ACCOUNT)

    assert tally.total == 6
    assert repo.detail_calls.count("m2") == 1


async def test_filtered_and_missing_details_are_not_counted():
    details = {
        "ok": detail("ok", end_s=150 * DAY),
        "remake": detail("remake", end_s=150 * DAY, duration=240),
        "flex": detail("flex", end_s=150 * DAY, queue_id=440),
        "old": detail("old", end_s=10 * DAY),
        "gone": None,
    }
    repo = FakeMatchRepository(details)

    tally = await _aggregator(repo).aggregate(ACCOUNT)

    assert tally.counts == {"Split 2": 1, "Split 3": 0}
    assert tally.first_end == tally.last_end == 150 * DAY


async def test_detail_failure_aborts_aggregation():
    details = {"ok": detail("ok", end_s=150 * DAY), "bad": FatalRequestError(500, "/lol/match/v5/matches/bad")}
    repo = FakeMatchRepository(details)

    with pytest.raises(FatalRequestError):
        await _aggregator(repo).aggregate(ACCOUNT)


def test_requires_a_bucket():
    with pytest.raises(ValueError):
        MatchAggregator(FakeMatchRepository({}), (), queue_id=420)
