"""
Async usage of EventMaker.

Demonstrates how to:
- Auto-disconnect an idle bus with set_idle_disconnect_after()
- Schedule delayed connect() / disconnect() transitions
- Run the timers on the asyncio event loop

Prerequisites:
    pip install eventmaker
"""

import asyncio

from eventmaker import EventMaker


async def main() -> None:
    # Timers run on the running loop, so the bus is created inside it
    bus = EventMaker(logs=True, name="ticker")
    bus.on("tick", lambda n: print(f"tick {n}"))
    bus.on("disconnect", lambda engine: print(f"{engine}: idle, disconnecting"))
    # Never prints here: while disconnected, emissions (the "connect"
    # notification included) are suppressed as long as any listener is registered
    bus.on("connect", lambda engine: print(f"{engine}: back online"))

    # Disconnect after 300 ms without a delivered event
    bus.set_idle_disconnect_after(300)

    # -- Keep the bus busy ----------------------------------------------------
    for n in range(3):
        bus.emit("tick", n)
        await asyncio.sleep(0.1)

    # -- Go quiet and let the idle timer fire ---------------------------------
    await asyncio.sleep(0.4)
    print(f"Disconnected: {bus.is_disconnected()}")

    # -- Delayed reconnect ----------------------------------------------------
    bus.connect(100)
    await asyncio.sleep(0.15)
    print(f"Idling: {bus.is_idling()}")

    bus.emit("tick", 99)


if __name__ == "__main__":
    asyncio.run(main())
