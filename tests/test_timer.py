import asyncio

from diceroller.timer import TurnTimer


def test_timer_fires_callback_with_arguments():
    fired = []

    async def callback(player_id):
        fired.append(player_id)

    async def scenario():
        timer = TurnTimer(0.01, callback)
        timer.start("A")
        assert timer.active
        await asyncio.sleep(0.05)
        return timer

    timer = asyncio.run(scenario())
    assert fired == ["A"]
    assert not timer.active


def test_stop_cancels_pending_callback():
    fired = []

    async def callback(player_id):
        fired.append(player_id)

    async def scenario():
        timer = TurnTimer(0.02, callback)
        timer.start("A")
        timer.stop()
        assert not timer.active
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert fired == []


def test_start_replaces_previous_deadline():
    fired = []

    async def callback(player_id):
        fired.append(player_id)

    async def scenario():
        timer = TurnTimer(0.02, callback)
        timer.start("A")
        timer.start("B")
        await asyncio.sleep(0.06)

    asyncio.run(scenario())
    assert fired == ["B"]


def test_callback_can_rearm_without_cancelling_itself():
    fired = []

    async def scenario():
        async def callback(player_id):
            fired.append(player_id)
            if player_id == "A":
                timer.start("B")
                # le rappel courant continue malgré le réarmement
                await asyncio.sleep(0)
                fired.append("after-rearm")

        timer = TurnTimer(0.01, callback)
        timer.start("A")
        await asyncio.sleep(0.08)

    asyncio.run(scenario())
    assert fired == ["A", "after-rearm", "B"]
