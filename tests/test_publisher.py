from pubnet import Publisher


def test_subscribe_returns_callable():
    publisher = Publisher()
    unsub = publisher.subscribe(lambda data: None)
    assert callable(unsub)


def test_publish_calls_each_subscriber():
    publisher = Publisher()
    calls = []
    publisher.subscribe(calls.append)

    publisher.publish({"age": 19, "name": "Evyatar"})

    assert calls == [{"age": 19, "name": "Evyatar"}]


def test_publish_without_subscribers_is_noop():
    Publisher().publish(1)


def test_insertion_order():
    publisher = Publisher()
    order = []
    publisher.subscribe(lambda v: order.append(("first", v)))
    publisher.subscribe(lambda v: order.append(("second", v)))
    publisher.subscribe(lambda v: order.append(("third", v)))

    publisher.publish(7)

    assert order == [("first", 7), ("second", 7), ("third", 7)]


def test_unsubscribe_stops_delivery():
    publisher = Publisher()
    calls = []
    unsub = publisher.subscribe(calls.append)
    unsub()

    publisher.publish(1)

    assert calls == []


def test_unsubscribe_is_idempotent():
    publisher = Publisher()
    calls = []
    unsub = publisher.subscribe(calls.append)
    publisher.subscribe(calls.append)

    unsub()
    unsub()
    publisher.publish("x")

    assert calls == ["x"]
    assert len(publisher) == 1


def test_same_callback_twice_is_two_registrations():
    publisher = Publisher()
    calls = []
    first = publisher.subscribe(calls.append)
    publisher.subscribe(calls.append)

    publisher.publish(1)
    assert calls == [1, 1]

    first()
    publisher.publish(2)
    assert calls == [1, 1, 2]


def test_clear_removes_all_subscribers():
    publisher = Publisher()
    a, b = [], []
    publisher.subscribe(a.append)
    publisher.subscribe(b.append)

    publisher.clear()
    publisher.publish(1)

    assert a == [] and b == []
    assert len(publisher) == 0


def test_unsubscribe_after_clear_does_not_touch_new_subscribers():
    publisher = Publisher()
    calls = []
    stale = publisher.subscribe(calls.append)
    publisher.clear()
    publisher.subscribe(calls.append)

    stale()
    publisher.publish(3)

    assert calls == [3]


def test_subscribe_during_publish_applies_to_next_publish():
    publisher = Publisher()
    late = []

    def add_late(value):
        publisher.subscribe(late.append)

    publisher.subscribe(add_late)
    publisher.publish(1)
    assert late == []

    publisher.publish(2)
    assert late == [2]


def test_unsubscribe_during_publish_does_not_skip_current_delivery():
    publisher = Publisher()
    calls = []
    tokens = {}

    def first(value):
        calls.append(("first", value))
        tokens["second"]()

    publisher.subscribe(first)
    tokens["second"] = publisher.subscribe(lambda v: calls.append(("second", v)))

    publisher.publish(1)
    publisher.publish(2)

    assert calls == [("first", 1), ("second", 1), ("first", 2)]


def test_structured_payload():
    publisher = Publisher()
    seen = []

    def on_person(person):
        name, age = person
        seen.append((name.upper(), age))

    publisher.subscribe(on_person)
    for person in [("Evyatar", 19), ("Yair", 16), ("Yonatan", 13), ("Itamar", 10)]:
        publisher.publish(person)

    assert seen == [("EVYATAR", 19), ("YAIR", 16), ("YONATAN", 13), ("ITAMAR", 10)]
