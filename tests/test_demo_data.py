import asyncio

from commission_hub.fixtures.demo_data import load_demo_data


def _load(session_factory):
    async def _run():
        async with session_factory() as session:
            return await load_demo_data(session)
    return asyncio.run(_run())


def test_demo_data_loads_once(session_factory):
    assert _load(session_factory) is True
    assert _load(session_factory) is False


def test_demo_data_reports(client, session_factory):
    _load(session_factory)

    overview = client.get("/api/reports/management-overview?year=2025&month=7").json()["data"]
    assert overview["summary"]["totalSales"] == 7206.0
    assert overview["summary"]["totalTransactions"] == 5
    assert overview["summary"]["averagePerPerson"] == 1441.2
    assert overview["summary"]["daysWithNoSales"] == 26
    assert [p["personnelName"] for p in overview["topPerformers"]] == [
        "Sarah Johnson", "John Smith", "Michael Brown",
    ]

    payout = client.get("/api/reports/commission-payout?year=2025&month=7").json()["data"]
    assert payout["summary"]["personnelCount"] == 5
    assert payout["summary"]["totalFixedCommissions"] == 2800.0
    assert payout["summary"]["totalVariableCommissions"] == 279.78
    assert payout["summary"]["totalPayout"] == 3079.78
    assert [p["totalPayout"] for p in payout["personnelPayouts"]] == [611.52, 870.76, 547.5, 300.0, 750.0]
