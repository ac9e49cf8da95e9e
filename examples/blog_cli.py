from __future__ import annotations

import json

from pubnet import Client, Network, PubSubSettings, PublishError, setup_logger


def main():
    settings = PubSubSettings.from_env(env_file=".env")
    setup_logger(level=settings.log_level)

    blog: Client[str, object] = Client(settings)
    events: Network[str, object] = Network(settings)

    blog.subscribe("likes", lambda likes: print(f"  likes is now {likes}"))
    blog.follow(lambda key, value: events.publish("changed", {"key": key, "value": value}))
    events.follow(lambda key, data: print(f"  [{key}] {data}"))

    print("Blog state ready. Type /quit to exit. Examples:")
    print("  /set likes 10")
    print("  /set latest_reader {\"name\": \"Evyatar\", \"age\": 19}")
    print("  /get likes")

    while True:
        user_input = input("blog> ").strip()
        if user_input.lower() in {"/quit", "quit", "exit"}:
            break

        command, _, rest = user_input.partition(" ")
        if command == "/set":
            key, _, raw = rest.partition(" ")
            try:
                blog.set(key, json.loads(raw))
            except json.JSONDecodeError as exc:
                print(f"Error: value must be JSON ({exc})")
            except PublishError as exc:
                print(f"Error: {exc}")
        elif command == "/get":
            print(" ", blog.get(rest.strip()))
        else:
            print("  unknown command; use /set, /get or /quit")


if __name__ == "__main__":
    main()
