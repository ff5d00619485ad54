"""
Basic usage of EventMaker.

Demonstrates how to:
- Register persistent and one-shot listeners
- Transform or block emissions with middlewares
- Remove listeners by identity or by event name
- Disconnect and reconnect the bus

Prerequisites:
    pip install eventmaker
"""

from eventmaker import STOP, EventMaker, Middleware


def main() -> None:
    # logs=True prints every step of the dispatch in colour on stderr
    bus = EventMaker(logs=True, name="example")

    # -- Listeners ------------------------------------------------------------
    greeter = bus.on("greet", lambda who: print(f"Hello, {who}!"))
    bus.once("greet", lambda who: print(f"(first greeting goes to {who})"))

    bus.emit("greet", "Mark")  # both listeners run
    bus.emit("greet", "Anna")  # the one-shot listener is gone

    # -- Middlewares ----------------------------------------------------------
    # Upper-case every string argument before listeners see it
    bus.middleware(lambda event, action: Middleware.map_payload(
        action, lambda value, index: value.upper() if isinstance(value, str) else value
    ))

    # Allow at most one "greet" every 2 seconds
    def throttle(event, action):
        if event == "greet" and Middleware.cooldown("greet", 2000):
            return STOP

    bus.middleware(throttle)

    bus.emit("greet", "bob")    # Hello, BOB!
    bus.emit("greet", "alice")  # blocked by the cooldown

    # -- Removal --------------------------------------------------------------
    bus.remove_listener(greeter)
    print(f"Listeners left: {len(bus.listeners)}")

    # -- Connection lifecycle -------------------------------------------------
    bus.on("disconnect", lambda engine: print(f"{engine} went offline"))
    bus.disconnect()
    print(f"Disconnected: {bus.is_disconnected()}")
    bus.connect()
    print(f"Idling: {bus.is_idling()}")


if __name__ == "__main__":
    main()
