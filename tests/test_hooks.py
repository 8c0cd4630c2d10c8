import threading

from shop.services import hooks


def test_apply_filters_without_callbacks_returns_value():
    assert hooks.apply_filters("nothing_registered", 5) == 5


def test_filters_run_by_priority_then_registration_order():
    calls = []

    def first(value):
        calls.append("first")
        return value + ["first"]

    def second(value):
        calls.append("second")
        return value + ["second"]

    def early(value):
        calls.append("early")
        return value + ["early"]

    hooks.add_filter("order_test", first)
    hooks.add_filter("order_test", second)
    hooks.add_filter("order_test", early, priority=5)

    assert hooks.apply_filters("order_test", []) == ["early", "first", "second"]
    assert calls == ["early", "first", "second"]


def test_extra_arguments_are_passed_to_callbacks():
    hooks.add_filter("args_test", lambda value, extra: f"{value}-{extra}")
    assert hooks.apply_filters("args_test", "a", "b") == "a-b"


def test_remove_filter():
    def callback(value):
        return value * 2

    hooks.add_filter("remove_test", callback)
    assert hooks.has_filter("remove_test")
    assert hooks.remove_filter("remove_test", callback)
    assert not hooks.has_filter("remove_test")
    assert not hooks.remove_filter("remove_test", callback)
    assert hooks.apply_filters("remove_test", 3) == 3


def test_remove_filter_requires_matching_priority():
    def callback(value):
        return value

    hooks.add_filter("priority_test", callback, priority=20)
    assert not hooks.remove_filter("priority_test", callback)
    assert hooks.remove_filter("priority_test", callback, priority=20)


def test_filter_applied_is_transient():
    def callback(value):
        return value + 1

    with hooks.filter_applied("transient_test", callback):
        assert hooks.apply_filters("transient_test", 1) == 2
    assert hooks.apply_filters("transient_test", 1) == 1


def test_filter_applied_is_local_to_the_thread():
    seen = {}

    def callback(value):
        return value + 1

    ready = threading.Event()

    def other_thread():
        ready.wait(timeout=5)
        seen["value"] = hooks.apply_filters("scoped_test", 1)
        seen["has"] = hooks.has_filter("scoped_test")

    worker = threading.Thread(target=other_thread)
    worker.start()
    with hooks.filter_applied("scoped_test", callback):
        assert hooks.has_filter("scoped_test")
        ready.set()
        worker.join(timeout=5)
    assert seen == {"value": 1, "has": False}


def test_filter_applied_runs_in_priority_order():
    hooks.add_filter("order_test", lambda value: value + ["late"], priority=20)
    with hooks.filter_applied("order_test", lambda value: value + ["scoped"]):
        assert hooks.apply_filters("order_test", []) == ["scoped", "late"]


def test_filter_applied_removes_callback_on_error():
    def callback(value):
        return value

    try:
        with hooks.filter_applied("error_test", callback):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert not hooks.has_filter("error_test")


def test_callback_may_remove_itself_while_running():
    def once(value):
        hooks.remove_filter("self_remove", once)
        return value + 1

    hooks.add_filter("self_remove", once)
    assert hooks.apply_filters("self_remove", 0) == 1
    assert hooks.apply_filters("self_remove", 0) == 0
