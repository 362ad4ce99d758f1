import logging

import pytest

from application.services import MatchAggregator, ProgressEvaluator, WebhookReporter
from application.use_cases import TrackProgressUseCase
from config.settings import TrackerConfig
from domain.entities import ERROR_STATUS, Player
from domain.enums import Region
from infrastructure import AccountRepository, FatalRequestError, MatchRepository, RateLimiter, RetryPolicy, RiotAPIClient
from tests.fakes import (
    DAY,
    FakeAccountRepository,
    FakeMatchRepository,
    RecordingSleep,
    Router,
    bucket,
    detail,
    match_payload,
    respond,
    webhook_body,
)

WEBHOOK = "https://hooks.example.test/progress"
SPLITS = (bucket("Split 2", 100, 55), bucket("Split 3", 200, 15))
ROSTER = (Player("Glube", "EUW"), Player("Ghost", "EUW"), Player("The Moo", "EUW"))


def _use_case(account_repo, match_repo, webhook_status=204, callback=None):
    router = Router({"/progress": respond(webhook_status)})
    use_case = TrackProgressUseCase(
        account_repo,
        MatchAggregator(match_repo, SPLITS, queue_id=420),
        ProgressEvaluator(SPLITS, 70),
        reporter=WebhookReporter(WEBHOOK, SPLITS, transport=router.transport()),
        result_callback=callback,
    )
    return use_case, router


def _history(n_old: int, n_new: int) -> dict:
    details = {f"a{i}": detail(f"a{i}", end_s=120 * DAY + i) for i in range(n_old)}
    details.update({f"b{i}": detail(f"b{i}", end_s=210 * DAY + i) for i in range(n_new)})
    return details


async def test_failed_lookup_becomes_error_record_and_run_continues():
    accounts = FakeAccountRepository(failures={"Ghost#EUW": FatalRequestError(404, "/riot/account")})
    use_case, router = _use_case(accounts, FakeMatchRepository(_history(55, 15)))

    results = await use_case.execute(ROSTER)

    assert [r.player for r in results] == list(ROSTER)
    assert accounts.calls == list(ROSTER)
    ghost = results[1]
    assert ghost.failed
    assert ghost.status == ERROR_STATUS
    assert ghost.counts == {"Split 2": 0, "Split 3": 0}
    assert results[0].status == "✅ complete"
    assert results[2].status == "✅ complete"
    assert "**Ghost#EUW** – 0 games – ❌ Error" in webhook_body(router.requests[0])["content"]


async def test_failure_mid_pagination_is_isolated():
    details = _history(3, 0)
    details["a1"] = FatalRequestError(500, "/lol/match/v5/matches/a1")
    use_case, _ = _use_case(FakeAccountRepository(), FakeMatchRepository(details))

    results = await use_case.execute(ROSTER[:1])

    assert results[0].failed
    assert results[0].total_matches == 0


async def test_webhook_failure_keeps_results(caplog):
    caplog.set_level(logging.ERROR, logger="application")
    use_case, router = _use_case(FakeAccountRepository(), FakeMatchRepository(_history(10, 2)), webhook_status=502)

    results = await use_case.execute(ROSTER)

    assert len(router.requests) == 1
    assert [r.total_matches for r in results] == [12, 12, 12]
    assert all(r.status == "❌ Split 2 missing 45, Split 3 missing 13, total missing 58" for r in results)
    assert "Discord webhook failed" in caplog.text


async def test_results_are_reported_as_they_finish():
    seen = []
    use_case, _ = _use_case(
        FakeAccountRepository(),
        FakeMatchRepository(_history(1, 1)),
        callback=lambda idx, total, result: seen.append((idx, total, result.player.name)),
    )

    await use_case.execute(ROSTER)

    assert seen == [(1, 3, "Glube"), (2, 3, "Ghost"), (3, 3, "The Moo")]


async def test_first_and_last_match_carried_into_result():
    use_case, _ = _use_case(FakeAccountRepository(), FakeMatchRepository(_history(2, 1)))

    result = (await use_case.execute(ROSTER[:1]))[0]

    assert result.first_match_at.timestamp() == 120 * DAY
    assert result.last_match_at.timestamp() == 210 * DAY


async def test_full_run_over_http():
    history = [f"EUW1_{i}" for i in range(4)]
    ends = [150 * DAY, 210 * DAY, 220 * DAY, 50 * DAY]

    def ids(request):
        start = int(request.url.params["start"])
        count = int(request.url.params["count"])
        return respond(200, history[start:start + count])(request)

    routes = {
        "/riot/account/v1/accounts/by-riot-id/Glube/EUW": respond(200, {"puuid": "p-glube"}),
        "/riot/account/v1/accounts/by-riot-id/Ghost/EUW": respond(404),
        "/lol/match/v5/matches/by-puuid/p-glube/ids": ids,
        "/progress": respond(204),
    }
    for match_id, end_s in zip(history, ends):
        routes[f"/lol/match/v5/matches/{match_id}"] = respond(200, match_payload(match_id, end_s=end_s))
    routes["/lol/match/v5/matches/EUW1_2"] = [respond(429), respond(200, match_payload("EUW1_2", end_s=220 * DAY))]
    router = Router(routes)

    config = TrackerConfig(
        api_key="RGAPI-test",
        roster=ROSTER[:2],
        buckets=(bucket("Split 2", 100, 1), bucket("Split 3", 200, 2)),
        total_requirement=3,
        region=Region.EUW1,
        webhook_url=WEBHOOK,
        page_size=3,
    )
    sleep = RecordingSleep()
    async with RiotAPIClient(
        config.api_key,
        config.region,
        retry_policy=RetryPolicy(sleep=sleep),
        rate_limiter=RateLimiter(min_interval_s=0),
        transport=router.transport(),
    ) as api:
        use_case = TrackProgressUseCase.from_config(config, AccountRepository(api), MatchRepository(api))
        use_case.reporter = WebhookReporter(WEBHOOK, config.buckets, transport=router.transport())
        results = await use_case.execute(config.roster)

    glube, ghost = results
    assert glube.counts == {"Split 2": 1, "Split 3": 2}
    assert glube.status == "✅ complete"
    assert ghost.failed
    assert sleep.calls == [1.0]
    assert router.hits("/lol/match/v5/matches/by-puuid/p-glube/ids") == 2
    assert router.hits("/progress") == 1


@pytest.mark.parametrize("players", [(), ROSTER[:1]])
async def test_reporter_runs_once_per_execution(players):
    use_case, router = _use_case(FakeAccountRepository(), FakeMatchRepository({}))

    await use_case.execute(players)

    assert len(router.requests) == 1


async def test_malformed_webhook_url_does_not_lose_results():
    use_case, _ = _use_case(FakeAccountRepository(), FakeMatchRepository(_history(55, 15)))
    use_case.reporter = WebhookReporter("https://discord.com:abc/api/webhooks/1", SPLITS)

    results = await use_case.execute(ROSTER[:1])

    assert results[0].status == "✅ complete"
